import math
import random

from vanguard_velocity.config import CLASSIC_CONFIG
from vanguard_velocity.entities import Explosion, Missile, Obstacle, ObstacleKind, SizeClass
from vanguard_velocity.missiles import (
    advance_explosions,
    advance_missiles,
    can_fire,
    detonate,
    fire,
    nearest_ahead,
)
from vanguard_velocity.simulation import new_state


def _armed_state(ammo: int = 3):
    state = new_state(CLASSIC_CONFIG)
    state.session.start()
    state.session.ammo_unlocked = True
    state.session.ammo = ammo
    return state


def _wall(x: float) -> Obstacle:
    return Obstacle(ObstacleKind.WALL, SizeClass.SMALL, x, 510.0, 20.0, 40.0)


def test_cannot_fire_before_unlock_or_without_ammo() -> None:
    state = new_state(CLASSIC_CONFIG)
    state.session.start()
    state.session.ammo = 3
    state.obstacles = [_wall(400.0)]
    assert fire(state, CLASSIC_CONFIG) is None
    assert state.session.ammo == 3
    state = _armed_state(ammo=0)
    state.obstacles = [_wall(400.0)]
    assert fire(state, CLASSIC_CONFIG) is None
    assert state.session.ammo == 0


def test_fire_without_target_keeps_ammo() -> None:
    state = _armed_state()
    # Only an obstacle behind the tank
    state.obstacles = [_wall(0.0)]
    assert fire(state, CLASSIC_CONFIG) is None
    assert state.session.ammo == 3
    assert state.missiles == []


def test_fire_targets_nearest_obstacle_ahead() -> None:
    state = _armed_state()
    far, near, behind = _wall(600.0), _wall(300.0), _wall(10.0)
    state.obstacles = [far, behind, near]
    missile = fire(state, CLASSIC_CONFIG)
    assert missile is not None
    assert state.session.ammo == 2
    assert (missile.target_x, missile.target_y) == near.center
    assert missile.x == state.vehicle.front
    assert missile.y == state.vehicle.y + state.vehicle.height / 2
    assert state.missiles == [missile]


def test_nearest_ahead_ties_keep_first() -> None:
    a, b = _wall(300.0), _wall(300.0)
    assert nearest_ahead([a, b], 90.0) is a


def test_fire_cooldown() -> None:
    cfg = CLASSIC_CONFIG
    state = _armed_state()
    state.obstacles = [_wall(600.0)]
    assert fire(state, cfg) is not None
    assert can_fire(state.session, cfg) is False
    assert fire(state, cfg) is None
    state.session.elapsed_ticks += cfg.missile_cooldown_ticks
    assert fire(state, cfg) is not None
    assert state.session.ammo == 1


def test_missile_homes_and_explodes_once() -> None:
    cfg = CLASSIC_CONFIG
    rng = random.Random(1)
    state = _armed_state()
    start = (90.0, 535.0)
    target = (390.0, 135.0)
    state.missiles = [Missile(*start, *target, cfg.missile_speed)]
    expected = math.ceil(math.dist(start, target) / cfg.missile_speed)
    ticks = 0
    while state.missiles:
        advance_missiles(state, cfg, rng)
        ticks += 1
        assert ticks <= expected
    assert ticks == expected
    assert len(state.explosions) == 1
    boom = state.explosions[0]
    assert math.isclose(boom.x, target[0]) and math.isclose(boom.y, target[1])


def test_missile_target_is_not_rehomed() -> None:
    cfg = CLASSIC_CONFIG
    rng = random.Random(2)
    state = _armed_state()
    state.obstacles = [_wall(600.0)]
    missile = fire(state, cfg)
    assert missile is not None
    tx, ty = missile.target_x, missile.target_y
    state.obstacles[0].update(100.0)
    advance_missiles(state, cfg, rng)
    assert (missile.target_x, missile.target_y) == (tx, ty)


def test_detonation_destroys_obstacles_in_blast_radius() -> None:
    cfg = CLASSIC_CONFIG
    rng = random.Random(3)
    state = _armed_state()
    close = _wall(300.0)
    far = _wall(500.0)
    state.obstacles = [close, far]
    score = state.session.score
    destroyed = detonate(state, 290.0, 530.0, cfg, rng)
    assert destroyed == [close]
    assert state.obstacles == [far]
    assert state.session.score == score + cfg.missile_kill_bonus
    # Blast plus debris from the destroyed obstacle
    assert len(state.explosions) == 2


def test_missile_impacts_obstacle_en_route() -> None:
    cfg = CLASSIC_CONFIG
    rng = random.Random(4)
    state = _armed_state()
    blocker = _wall(100.0)
    state.obstacles = [blocker]
    state.missiles = [Missile(95.0, 530.0, 700.0, 530.0, cfg.missile_speed)]
    advance_missiles(state, cfg, rng)
    assert state.missiles == []
    assert state.obstacles == []
    assert state.session.score == cfg.missile_kill_bonus


def test_missile_leaving_viewport_is_dropped_silently() -> None:
    cfg = CLASSIC_CONFIG
    rng = random.Random(5)
    state = _armed_state()
    state.missiles = [Missile(cfg.width - 5.0, 100.0, cfg.width + 500.0, 100.0, cfg.missile_speed)]
    advance_missiles(state, cfg, rng)
    assert state.missiles == []
    assert state.explosions == []


def test_explosions_expire() -> None:
    rng = random.Random(6)
    state = _armed_state()
    state.explosions = [Explosion.burst(10.0, 10.0, rng)]
    for _ in range(100):
        advance_explosions(state)
    assert state.explosions == []
