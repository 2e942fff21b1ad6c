import math
import random

from vanguard_velocity.config import CLASSIC_CONFIG, EXPLOSION_PARTICLES
from vanguard_velocity.entities import Explosion, Missile, Obstacle, ObstacleKind, SizeClass, Vehicle


def test_vehicle_starts_on_ground() -> None:
    v = Vehicle.resting(CLASSIC_CONFIG)
    assert v.on_ground
    assert v.y == CLASSIC_CONFIG.vehicle_ground_y
    assert v.front == CLASSIC_CONFIG.vehicle_x + CLASSIC_CONFIG.vehicle_width


def test_vehicle_jump_only_from_ground() -> None:
    cfg = CLASSIC_CONFIG
    v = Vehicle.resting(cfg)
    assert v.jump(cfg.jump_force) is True
    assert v.vy == cfg.jump_force
    assert not v.on_ground
    v.update(cfg.gravity, cfg.vehicle_ground_y)
    vy_before = v.vy
    assert v.jump(cfg.jump_force) is False
    assert v.vy == vy_before


def test_vehicle_ground_invariant_through_jump_arc() -> None:
    cfg = CLASSIC_CONFIG
    bound = cfg.vehicle_ground_y
    v = Vehicle.resting(cfg)
    v.jump(cfg.jump_force)
    landed_at = None
    for t in range(100):
        v.update(cfg.gravity, bound)
        assert v.y <= bound
        assert v.on_ground == (v.y == bound)
        if v.on_ground and landed_at is None:
            landed_at = t
    assert landed_at is not None
    assert v.vy == 0.0


def test_vehicle_jump_reaches_apex() -> None:
    cfg = CLASSIC_CONFIG
    v = Vehicle.resting(cfg)
    v.jump(cfg.jump_force)
    top = v.y
    for _ in range(60):
        v.update(cfg.gravity, cfg.vehicle_ground_y)
        top = min(top, v.y)
    gained = cfg.vehicle_ground_y - top
    assert gained > 0.9 * cfg.jump_apex


def test_obstacle_scrolls_and_goes_offscreen() -> None:
    obs = Obstacle(ObstacleKind.WALL, SizeClass.SMALL, 100.0, 500.0, 20.0, 40.0)
    assert obs.center == (110.0, 520.0)
    obs.update(50.0)
    assert obs.x == 50.0
    assert not obs.offscreen()
    obs.update(70.0)
    assert obs.offscreen()


def test_airborne_kinds() -> None:
    assert ObstacleKind.JET.airborne
    assert ObstacleKind.HELICOPTER.airborne
    assert not ObstacleKind.WALL.airborne
    assert not ObstacleKind.INFANTRY.airborne


def test_missile_reaches_target_in_bounded_ticks() -> None:
    m = Missile(0.0, 0.0, 30.0, 40.0, 15.0)
    ticks = 0
    while not m.advance(1.0):
        ticks += 1
        assert ticks < 10
    ticks += 1
    assert ticks == math.ceil(50.0 / 15.0)
    assert math.isclose(m.x, 30.0) and math.isclose(m.y, 40.0)


def test_missile_zero_length_vector_is_arrival() -> None:
    m = Missile(10.0, 10.0, 10.0, 10.0, 15.0)
    assert m.advance(1.0) is True
    assert (m.x, m.y) == (10.0, 10.0)


def test_missile_offscreen() -> None:
    m = Missile(10.0, 10.0, 900.0, 10.0, 15.0)
    assert not m.offscreen(800, 600)
    m.x = 801.0
    assert m.offscreen(800, 600)


def test_explosion_grows_fades_and_ends() -> None:
    rng = random.Random(7)
    e = Explosion.burst(100.0, 100.0, rng, particle_count=50)
    assert len(e.particles) == EXPLOSION_PARTICLES
    last_alpha = e.alpha
    for _ in range(100):
        if e.done:
            break
        e.update()
        assert e.radius <= e.max_radius
        assert e.alpha <= last_alpha
        last_alpha = e.alpha
    assert e.done


def test_debris_is_smaller() -> None:
    rng = random.Random(8)
    big = Explosion.burst(0.0, 0.0, rng)
    small = Explosion.debris(0.0, 0.0, rng)
    assert small.max_radius < big.max_radius
    assert len(small.particles) < len(big.particles)
