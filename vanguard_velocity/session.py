"""Session lifecycle: start -> playing -> paused/game over -> reset."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from .config import SimulationConfig
from .difficulty import difficulty_at

logger = logging.getLogger(__name__)


class SessionState(Enum):
    START = "start"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass
class Session:
    """Scalar state of one run. Transition methods return False when ignored."""

    initial_speed: float
    speed: float
    min_spawn_interval: int
    max_spawn_interval: int
    min_gap: float
    max_gap: float
    state: SessionState = SessionState.START
    score: int = 0
    high_score: int = 0
    ammo: int = 0
    ammo_unlocked: bool = False
    elapsed_ticks: int = 0
    dodge_count: int = 0
    next_spawn_tick: int = 0
    last_shot_tick: int | None = None
    new_high_score: bool = False

    @classmethod
    def fresh(cls, config: SimulationConfig, high_score: int = 0, initial_speed: float | None = None) -> "Session":
        speed = config.initial_speed if initial_speed is None else initial_speed
        diff = difficulty_at(0, config, speed)
        return cls(
            initial_speed=speed,
            speed=diff.speed,
            min_spawn_interval=diff.min_interval,
            max_spawn_interval=diff.max_interval,
            min_gap=diff.min_gap,
            max_gap=diff.max_gap,
            high_score=max(0, int(high_score)),
        )

    @property
    def playing(self) -> bool:
        return self.state is SessionState.PLAYING

    def _move(self, target: SessionState) -> None:
        logger.info("Session %s -> %s", self.state.value, target.value)
        self.state = target

    def start(self) -> bool:
        if self.state is not SessionState.START:
            return False
        self._move(SessionState.PLAYING)
        return True

    def pause(self) -> bool:
        if self.state is not SessionState.PLAYING:
            return False
        self._move(SessionState.PAUSED)
        return True

    def resume(self) -> bool:
        if self.state is not SessionState.PAUSED:
            return False
        self._move(SessionState.PLAYING)
        return True

    def toggle_pause(self) -> bool:
        return self.pause() or self.resume()

    def end(self) -> bool:
        """Enter GAME_OVER, recording a new high score when beaten."""
        if self.state is not SessionState.PLAYING:
            return False
        self._move(SessionState.GAME_OVER)
        if self.score > self.high_score:
            logger.info("New high score %d (was %d)", self.score, self.high_score)
            self.high_score = self.score
            self.new_high_score = True
        return True
