"""Missile subsystem: firing, homing flight, detonation and explosions."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Iterable

from .config import SimulationConfig
from .entities import Explosion, Missile, Obstacle
from .scoring import award_bonus
from .utils import distance_point_to_rect, rects_overlap

if TYPE_CHECKING:
    from .session import Session
    from .simulation import SimulationState

logger = logging.getLogger(__name__)


def can_fire(session: "Session", config: SimulationConfig) -> bool:
    if not (session.playing and session.ammo_unlocked and session.ammo > 0):
        return False
    if session.last_shot_tick is None:
        return True
    return session.elapsed_ticks - session.last_shot_tick >= config.missile_cooldown_ticks


def nearest_ahead(obstacles: Iterable[Obstacle], front: float) -> Obstacle | None:
    """Obstacle with the smallest positive distance ahead of ``front``.

    Ties keep the first one encountered.
    """
    best: Obstacle | None = None
    best_dist = float("inf")
    for obs in obstacles:
        dist = obs.x - front
        if 0 < dist < best_dist:
            best, best_dist = obs, dist
    return best


def fire(state: "SimulationState", config: SimulationConfig) -> Missile | None:
    """Launch a missile at the nearest obstacle ahead.

    Without a target nothing is launched and no ammo is spent.
    """
    session = state.session
    if not can_fire(session, config):
        return None
    vehicle = state.vehicle
    target = nearest_ahead(state.obstacles, vehicle.front)
    if target is None:
        return None
    tx, ty = target.center
    missile = Missile(
        vehicle.front,
        vehicle.y + vehicle.height / 2.0,
        tx,
        ty,
        config.missile_speed,
        width=config.missile_width,
        height=config.missile_height,
    )
    session.ammo -= 1
    session.last_shot_tick = session.elapsed_ticks
    state.missiles = [*state.missiles, missile]
    logger.debug("Missile fired at %s (%.1f, %.1f), %d left", target.kind.value, tx, ty, session.ammo)
    return missile


def detonate(state: "SimulationState", x: float, y: float, config: SimulationConfig, rng: random.Random) -> list[Obstacle]:
    """Blow up at (x, y): one explosion, destroying obstacles within the blast radius."""
    explosions = [*state.explosions, Explosion.burst(x, y, rng)]
    destroyed: list[Obstacle] = []
    survivors: list[Obstacle] = []
    for obs in state.obstacles:
        if distance_point_to_rect(x, y, obs.rect) <= config.missile_blast_radius:
            destroyed.append(obs)
            cx, cy = obs.center
            explosions.append(Explosion.debris(cx, cy, rng))
        else:
            survivors.append(obs)
    state.obstacles = survivors
    state.explosions = explosions
    if destroyed:
        award_bonus(state.session, config.missile_kill_bonus * len(destroyed))
        logger.debug("Missile destroyed %d obstacle(s)", len(destroyed))
    return destroyed


def advance_missiles(state: "SimulationState", config: SimulationConfig, rng: random.Random) -> None:
    for missile in state.missiles:
        if not missile.active:
            continue
        arrived = missile.advance(config.missile_arrival_epsilon)
        impact = arrived or any(rects_overlap(missile.rect, obs.rect) for obs in state.obstacles)
        if impact:
            missile.active = False
            detonate(state, missile.x, missile.y, config, rng)
        elif missile.offscreen(config.width, config.height):
            missile.active = False
    state.missiles = [m for m in state.missiles if m.active]


def advance_explosions(state: "SimulationState") -> None:
    for explosion in state.explosions:
        explosion.update()
    state.explosions = [e for e in state.explosions if not e.done]
