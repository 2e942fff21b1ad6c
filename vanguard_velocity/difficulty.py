"""Difficulty ramp: scroll speed and obstacle pacing as a function of time."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .config import SimulationConfig

if TYPE_CHECKING:
    from .session import Session


@dataclass(frozen=True)
class Difficulty:
    speed: float
    min_interval: int
    max_interval: int
    min_gap: float
    max_gap: float


def _tightened(start: float, decrement: float, steps: int, floor: float) -> float:
    return max(floor, start - steps * decrement)


def difficulty_at(elapsed_ticks: int, config: SimulationConfig, initial_speed: float | None = None) -> Difficulty:
    """Difficulty after ``elapsed_ticks`` ticks of play.

    Every output is monotonic in elapsed_ticks: speed only grows up to
    ``max_speed`` and the pacing bounds only shrink down to their floors. The
    upper bound of each pair always stays strictly above the lower one.
    """
    base = config.initial_speed if initial_speed is None else initial_speed
    elapsed = max(0, int(elapsed_ticks))

    ramps = elapsed // config.speed_ramp_interval
    speed = min(base + ramps * config.speed_increment, config.max_speed)

    steps = elapsed // config.spawn_tighten_interval
    min_interval = int(_tightened(config.min_spawn_interval, config.min_interval_decrement, steps, config.min_interval_floor))
    max_interval = int(_tightened(config.max_spawn_interval, config.max_interval_decrement, steps, config.max_interval_floor))
    max_interval = max(max_interval, min_interval + 1)

    gap_steps = elapsed // config.gap_tighten_interval
    min_gap = _tightened(config.min_gap, config.min_gap_decrement, gap_steps, config.min_gap_floor)
    max_gap = _tightened(config.max_gap, config.max_gap_decrement, gap_steps, config.max_gap_floor)
    max_gap = max(max_gap, min_gap + 1.0)

    return Difficulty(speed, min_interval, max_interval, min_gap, max_gap)


def apply_difficulty(session: "Session", config: SimulationConfig) -> Difficulty:
    """Write the current difficulty into the session; the only writer of these fields."""
    diff = difficulty_at(session.elapsed_ticks, config, session.initial_speed)
    session.speed = diff.speed
    session.min_spawn_interval = diff.min_interval
    session.max_spawn_interval = diff.max_interval
    session.min_gap = diff.min_gap
    session.max_gap = diff.max_gap
    return diff
