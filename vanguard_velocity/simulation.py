"""Simulation core: the per-tick pipeline and the engine that owns its state."""

from __future__ import annotations

import copy
import logging
import random
from dataclasses import dataclass, field

from .config import CLASSIC_CONFIG, SimulationConfig
from .difficulty import apply_difficulty
from .entities import Explosion, Missile, Obstacle, Vehicle
from .environment import EnvironmentClock, Palette
from .missiles import advance_explosions, advance_missiles, can_fire, fire
from .scoring import accrue_score, scroll_obstacles, vehicle_hit
from .session import Session, SessionState
from .spawner import maybe_spawn
from .storage import HighScoreStore, MemoryStorage
from .utils import clamp

logger = logging.getLogger(__name__)


@dataclass
class SimulationState:
    vehicle: Vehicle
    session: Session
    environment: EnvironmentClock
    obstacles: list[Obstacle] = field(default_factory=list)
    missiles: list[Missile] = field(default_factory=list)
    explosions: list[Explosion] = field(default_factory=list)


def new_state(config: SimulationConfig, high_score: int = 0, initial_speed: float | None = None) -> SimulationState:
    """Fresh state in START: tank on the ground, nothing on screen, no ammo."""
    return SimulationState(
        vehicle=Vehicle.resting(config),
        session=Session.fresh(config, high_score=high_score, initial_speed=initial_speed),
        environment=EnvironmentClock.from_config(config),
    )


def tick(state: SimulationState, config: SimulationConfig, rng: random.Random) -> SimulationState:
    """Advance one tick. Only a PLAYING session moves; anything else is frozen.

    Order: environment, vehicle physics, difficulty, spawning, scrolling and
    dodge counting, explosions and missiles, vehicle collisions, score.
    """
    session = state.session
    if not session.playing:
        return state
    session.elapsed_ticks += 1

    state.environment.advance()
    state.vehicle.update(config.gravity, config.vehicle_ground_y)
    apply_difficulty(session, config)
    maybe_spawn(state, config, rng)
    scroll_obstacles(state, config)
    advance_explosions(state)
    advance_missiles(state, config, rng)

    if vehicle_hit(state):
        session.end()
        return state

    accrue_score(session, config)
    return state


@dataclass(frozen=True)
class Snapshot:
    """Read-only copy of everything a renderer needs for one frame."""

    state: SessionState
    vehicle: Vehicle
    obstacles: tuple[Obstacle, ...]
    missiles: tuple[Missile, ...]
    explosions: tuple[Explosion, ...]
    score: int
    high_score: int
    new_high_score: bool
    ammo: int
    max_ammo: int
    ammo_unlocked: bool
    can_fire: bool
    elapsed_ticks: int
    speed: float
    sky_phase: float
    mountain_offset: float
    tree_offset: float
    palette: Palette


class Engine:
    """Owns one simulation and maps player commands onto it.

    Commands that the current state does not allow are ignored and return
    False; they are never errors.
    """

    def __init__(
        self,
        config: SimulationConfig = CLASSIC_CONFIG,
        store: HighScoreStore | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config.validate()
        self.store = store if store is not None else HighScoreStore(MemoryStorage())
        self.rng = rng if rng is not None else random.Random()
        self.state = new_state(config, high_score=self.store.load_high_score())

    @property
    def session(self) -> Session:
        return self.state.session

    # Commands

    def start(self, initial_speed: float | None = None) -> bool:
        session = self.session
        if session.state is not SessionState.START:
            return False
        if initial_speed is not None and initial_speed > 0:
            session.initial_speed = clamp(float(initial_speed), 0.0, self.config.max_speed)
            apply_difficulty(session, self.config)
        return session.start()

    def pause(self) -> bool:
        return self.session.pause()

    def resume(self) -> bool:
        return self.session.resume()

    def toggle_pause(self) -> bool:
        return self.session.toggle_pause()

    def jump(self) -> bool:
        if not self.session.playing:
            return False
        return self.state.vehicle.jump(self.config.jump_force)

    def fire(self) -> bool:
        return fire(self.state, self.config) is not None

    def reset(self, autostart: bool = False) -> bool:
        """Re-initialise everything but the high score after a game over."""
        if self.session.state is not SessionState.GAME_OVER:
            return False
        self.state = new_state(self.config, high_score=self.session.high_score)
        logger.info("Session reset")
        if autostart:
            self.start()
        return True

    # Loop

    def step(self) -> SimulationState:
        was_playing = self.session.playing
        tick(self.state, self.config, self.rng)
        session = self.session
        if was_playing and session.state is SessionState.GAME_OVER:
            logger.info("Game over at score %d", session.score)
            if session.new_high_score:
                self.store.save_high_score(session.high_score)
        return self.state

    def snapshot(self) -> Snapshot:
        state = self.state
        session = state.session
        env = state.environment
        return Snapshot(
            state=session.state,
            vehicle=copy.copy(state.vehicle),
            obstacles=tuple(copy.copy(o) for o in state.obstacles),
            missiles=tuple(copy.copy(m) for m in state.missiles),
            explosions=tuple(copy.deepcopy(e) for e in state.explosions),
            score=session.score,
            high_score=session.high_score,
            new_high_score=session.new_high_score,
            ammo=session.ammo,
            max_ammo=self.config.max_missiles,
            ammo_unlocked=session.ammo_unlocked,
            can_fire=can_fire(session, self.config),
            elapsed_ticks=session.elapsed_ticks,
            speed=session.speed,
            sky_phase=env.sky_phase,
            mountain_offset=env.mountain_offset,
            tree_offset=env.tree_offset,
            palette=env.palette(),
        )
