"""Obstacle spawning: when, what kind, how big and where."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Sequence

from .config import SimulationConfig
from .entities import Obstacle, ObstacleKind, SizeClass

if TYPE_CHECKING:
    from .session import Session
    from .simulation import SimulationState

logger = logging.getLogger(__name__)

# (width, height) per kind and size class. Ground obstacles stay well under
# the jump apex so every one of them can be cleared.
OBSTACLE_DIMENSIONS: dict[ObstacleKind, dict[SizeClass, tuple[float, float]]] = {
    ObstacleKind.WALL: {SizeClass.SMALL: (20, 40), SizeClass.MEDIUM: (24, 60), SizeClass.LARGE: (28, 80)},
    ObstacleKind.LIGHT_TANK: {SizeClass.SMALL: (30, 20), SizeClass.MEDIUM: (36, 24), SizeClass.LARGE: (42, 28)},
    ObstacleKind.HEAVY_TANK: {SizeClass.SMALL: (44, 30), SizeClass.MEDIUM: (50, 35), SizeClass.LARGE: (56, 40)},
    ObstacleKind.INFANTRY: {SizeClass.SMALL: (24, 15), SizeClass.MEDIUM: (32, 18), SizeClass.LARGE: (40, 20)},
    ObstacleKind.JET: {SizeClass.SMALL: (40, 20), SizeClass.MEDIUM: (52, 24), SizeClass.LARGE: (64, 28)},
    ObstacleKind.HELICOPTER: {SizeClass.SMALL: (35, 25), SizeClass.MEDIUM: (44, 30), SizeClass.LARGE: (52, 36)},
    ObstacleKind.LOW_FLYER: {SizeClass.SMALL: (30, 14), SizeClass.MEDIUM: (38, 16), SizeClass.LARGE: (46, 18)},
}

# Clearance between the ground line and an airborne obstacle's underside.
# Jets and helicopters fly high enough to drive under; low flyers must be jumped.
ALTITUDE_BANDS: dict[ObstacleKind, tuple[float, float]] = {
    ObstacleKind.JET: (60.0, 120.0),
    ObstacleKind.HELICOPTER: (80.0, 150.0),
    ObstacleKind.LOW_FLYER: (8.0, 20.0),
}
# Bigger aircraft fly lower in their band.
ALTITUDE_FRACTION = {SizeClass.SMALL: 1.0, SizeClass.MEDIUM: 0.5, SizeClass.LARGE: 0.0}

SIZE_CLASSES = (SizeClass.SMALL, SizeClass.MEDIUM, SizeClass.LARGE)
SIZE_WEIGHTS = (
    (1.0, 0.0, 0.0),
    (0.65, 0.35, 0.0),
    (0.4, 0.35, 0.25),
)


def size_weights(elapsed_ticks: int, config: SimulationConfig) -> Sequence[float]:
    """Size class weights (small, medium, large) for the current tier."""
    if elapsed_ticks < config.size_tier_medium_ticks:
        return SIZE_WEIGHTS[0]
    if elapsed_ticks < config.size_tier_large_ticks:
        return SIZE_WEIGHTS[1]
    return SIZE_WEIGHTS[2]


def obstacle_dimensions(kind: ObstacleKind, size_class: SizeClass) -> tuple[float, float]:
    w, h = OBSTACLE_DIMENSIONS[kind][size_class]
    return float(w), float(h)


def obstacle_altitude(kind: ObstacleKind, size_class: SizeClass, config: SimulationConfig) -> float:
    """Top y of an obstacle of this kind and size."""
    _, height = obstacle_dimensions(kind, size_class)
    if kind not in ALTITUDE_BANDS:
        return config.ground_y - height
    low, high = ALTITUDE_BANDS[kind]
    clearance = low + (high - low) * ALTITUDE_FRACTION[size_class]
    return config.ground_y - clearance - height


def choose_size_class(elapsed_ticks: int, config: SimulationConfig, rng: random.Random) -> SizeClass:
    return rng.choices(SIZE_CLASSES, weights=size_weights(elapsed_ticks, config))[0]


def build_obstacle(
    previous: Obstacle | None,
    session: "Session",
    config: SimulationConfig,
    rng: random.Random,
) -> Obstacle:
    """Create the next obstacle just off the right edge.

    It sits at least ``session.min_gap`` behind the previous obstacle's
    trailing edge, so obstacles never overlap.
    """
    kind = rng.choice(list(ObstacleKind))
    size_class = choose_size_class(session.elapsed_ticks, config, rng)
    width, height = obstacle_dimensions(kind, size_class)
    x = float(config.width)
    if previous is not None:
        gap = rng.uniform(session.min_gap, session.max_gap)
        x = max(x, previous.right + gap)
    return Obstacle(kind, size_class, x, obstacle_altitude(kind, size_class, config), width, height)


def maybe_spawn(state: "SimulationState", config: SimulationConfig, rng: random.Random) -> Obstacle | None:
    """Spawn one obstacle once the elapsed ticks pass the spawn threshold."""
    session = state.session
    if session.elapsed_ticks <= session.next_spawn_tick:
        return None
    previous = state.obstacles[-1] if state.obstacles else None
    obstacle = build_obstacle(previous, session, config, rng)
    state.obstacles = [*state.obstacles, obstacle]
    interval = rng.randint(session.min_spawn_interval, session.max_spawn_interval)
    session.next_spawn_tick = session.elapsed_ticks + interval
    logger.debug("Spawned %s %s at x=%.1f, next at tick %d", obstacle.size_class.value, obstacle.kind.value, obstacle.x, session.next_spawn_tick)
    return obstacle
