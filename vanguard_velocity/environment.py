"""Day/night cycle and parallax scrolling for the backdrop."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .config import DAY_COLORS, NIGHT_COLORS, SimulationConfig
from .utils import Color, interpolate_color


@dataclass(frozen=True)
class Palette:
    sky: Color
    ground: Color
    ground_detail: Color
    mountain: Color
    tree: Color
    sun: Color
    tank: Color
    obstacle: Color


def blend_palette(night_factor: float) -> Palette:
    """Blend every day color toward its night counterpart."""
    return Palette(**{name: interpolate_color(DAY_COLORS[name], NIGHT_COLORS[name], night_factor) for name in DAY_COLORS})


@dataclass
class EnvironmentClock:
    cycle_duration: int
    mountain_speed: float
    tree_speed: float
    sky_phase: float = 0.0
    mountain_offset: float = 0.0
    tree_offset: float = 0.0

    @classmethod
    def from_config(cls, config: SimulationConfig) -> "EnvironmentClock":
        return cls(config.sky_cycle_duration, config.mountain_speed, config.tree_speed)

    def advance(self) -> None:
        self.sky_phase = (self.sky_phase + 1.0 / self.cycle_duration) % 1.0
        self.mountain_offset -= self.mountain_speed
        self.tree_offset -= self.tree_speed

    def reset(self) -> None:
        self.sky_phase = 0.0
        self.mountain_offset = 0.0
        self.tree_offset = 0.0

    @property
    def night_factor(self) -> float:
        # 0 at the start of the cycle, 1 half way, back to 0 at the end
        return 1.0 - abs(1.0 - 2.0 * self.sky_phase)

    def palette(self) -> Palette:
        return blend_palette(self.night_factor)

    def celestial_position(self, width: float, height: float, radius: float = 80.0) -> tuple[float, float, bool]:
        """Sun/moon position on its elliptical orbit and whether it is the sun."""
        angle = self.sky_phase * math.pi * 2.0 - math.pi / 2.0
        x = width / 2.0 + math.cos(angle) * radius
        y = height / 4.0 + math.sin(angle) * radius / 2.0
        return x, y, self.sky_phase < 0.5
