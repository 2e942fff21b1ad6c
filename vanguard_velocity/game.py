"""Pygame host: window, fixed-rate tick scheduling and input mapping."""

from __future__ import annotations

import argparse
import logging
import sys

import pygame

from .config import FPS, HIGH_SCORE_FILE, MAX_CATCHUP_TICKS, PRESETS, SimulationConfig
from .render import Renderer
from .session import SessionState
from .simulation import Engine
from .storage import HighScoreStore, JsonFileStorage

logger = logging.getLogger(__name__)


class RenderSurfaceError(RuntimeError):
    """Raised when a session is started without a display surface to draw on."""


class Game:
    """Top-level game controller: runs the engine at a fixed rate and draws it."""

    def __init__(self, engine: Engine | None = None, config: SimulationConfig | None = None, fps: int = FPS) -> None:
        pygame.init()
        if engine is None:
            engine = Engine(config or PRESETS["classic"])
        self.engine = engine
        cfg = engine.config
        self.screen = pygame.display.set_mode((cfg.width, cfg.height), pygame.DOUBLEBUF)
        pygame.display.set_caption("Vanguard Velocity")
        self.clock = pygame.time.Clock()
        self.renderer = Renderer(cfg)
        self.fps = fps
        self.tick_seconds = 1.0 / fps
        self._accumulator = 0.0
        self.initial_speed: float | None = None
        self.running = True

    def start_session(self) -> bool:
        """Begin play; there must be a surface to draw on."""
        if pygame.display.get_surface() is None:
            raise RenderSurfaceError("no display surface; refusing to start a session")
        return self.engine.start(self.initial_speed)

    def primary_action(self) -> None:
        """Space/click: start, jump, or restart depending on the session state."""
        state = self.engine.session.state
        if state is SessionState.START:
            self.start_session()
        elif state is SessionState.PLAYING:
            self.engine.jump()
        elif state is SessionState.GAME_OVER:
            self.restart()

    def restart(self) -> None:
        if self.engine.reset():
            self._accumulator = 0.0
            self.start_session()

    def handle_input(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            if event.key in (pygame.K_SPACE, pygame.K_UP, pygame.K_w):
                self.primary_action()
            elif event.key == pygame.K_f:
                self.engine.fire()
            elif event.key in (pygame.K_p, pygame.K_ESCAPE):
                self.engine.toggle_pause()
            elif event.key == pygame.K_r:
                self.restart()
            elif event.key == pygame.K_q:
                self.running = False
        elif event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == 1:
                self.primary_action()
            elif event.button == 3:
                self.engine.fire()

    def update(self, dt: float) -> int:
        """Run as many fixed ticks as the elapsed time covers. Returns ticks run."""
        self._accumulator += dt
        steps = 0
        while self._accumulator >= self.tick_seconds and steps < MAX_CATCHUP_TICKS:
            self.engine.step()
            self._accumulator -= self.tick_seconds
            steps += 1
        if steps == MAX_CATCHUP_TICKS:
            # Drop the backlog instead of spiralling after a long stall
            self._accumulator = 0.0
        return steps

    def draw(self) -> None:
        self.renderer.draw(self.screen, self.engine.snapshot())
        pygame.display.flip()

    def run(self) -> None:
        while self.running:
            dt = self.clock.tick(self.fps) / 1000.0
            for event in pygame.event.get():
                self.handle_input(event)
            self.update(dt)
            self.draw()
        pygame.quit()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="vanguard-velocity", description="Side-scrolling tank runner.")
    parser.add_argument("--preset", choices=sorted(PRESETS), default="classic", help="tuning preset")
    parser.add_argument("--initial-speed", type=float, default=None, help="starting scroll speed in px/tick")
    parser.add_argument("--highscore-file", default=HIGH_SCORE_FILE, help="JSON file holding the high score")
    parser.add_argument("--fps", type=int, default=FPS, help="simulation ticks per second")
    parser.add_argument("--log-level", default="WARNING", help="logging level name")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    store = HighScoreStore(JsonFileStorage(args.highscore_file))
    game = Game(Engine(PRESETS[args.preset], store=store), fps=max(1, args.fps))
    game.initial_speed = args.initial_speed
    game.run()
    sys.exit(0)
