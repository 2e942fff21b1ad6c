"""Collisions, dodge counting, ammo refills and score accrual."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .config import SimulationConfig
from .utils import rects_overlap

if TYPE_CHECKING:
    from .session import Session
    from .simulation import SimulationState

logger = logging.getLogger(__name__)


def grant_ammo(session: "Session", config: SimulationConfig) -> None:
    session.ammo = min(session.ammo + 1, config.max_missiles)


def register_dodge(session: "Session", config: SimulationConfig) -> None:
    """Count one dodged obstacle; every Nth dodge refills one missile."""
    session.dodge_count += 1
    if session.dodge_count >= config.missiles_to_gain_one:
        grant_ammo(session, config)
        session.dodge_count = 0
        logger.debug("Ammo granted, now %d/%d", session.ammo, config.max_missiles)


def scroll_obstacles(state: "SimulationState", config: SimulationConfig) -> None:
    """Move obstacles left, count the ones that slipped past, drop offscreen ones."""
    session = state.session
    vehicle_x = state.vehicle.x
    for obs in state.obstacles:
        obs.update(session.speed)
        if not obs.counted_for_ammo and obs.right < vehicle_x:
            obs.counted_for_ammo = True
            if session.ammo_unlocked:
                register_dodge(session, config)
    state.obstacles = [o for o in state.obstacles if not o.offscreen()]


def vehicle_hit(state: "SimulationState") -> bool:
    vehicle_rect = state.vehicle.rect
    return any(rects_overlap(vehicle_rect, obs.rect) for obs in state.obstacles)


def award_bonus(session: "Session", points: int) -> None:
    session.score += max(0, int(points))


def check_ammo_unlock(session: "Session", config: SimulationConfig) -> bool:
    """Set the one-way ammo unlock once the score reaches the threshold."""
    if session.ammo_unlocked or session.score < config.missile_activation_score:
        return False
    session.ammo_unlocked = True
    logger.info("Missiles unlocked at score %d", session.score)
    return True


def accrue_score(session: "Session", config: SimulationConfig) -> None:
    if session.elapsed_ticks % config.score_ticks_per_point == 0:
        session.score += 1
    check_ammo_unlock(session, config)
