"""Simulation entities.

Contains the player's tank, the obstacles it has to clear, homing missiles and
the explosions they leave behind. Entities carry their own per-tick physics;
none of them know how they are drawn.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from enum import Enum

from .config import (
    DEBRIS_MAX_RADIUS,
    DEBRIS_PARTICLES,
    EXPLOSION_FADE,
    EXPLOSION_GROWTH,
    EXPLOSION_MAX_RADIUS,
    EXPLOSION_PARTICLES,
    MISSILE_HEIGHT,
    MISSILE_WIDTH,
    PARTICLE_GRAVITY,
    PARTICLE_LIFE_MAX,
    PARTICLE_LIFE_MIN,
    SimulationConfig,
)
from .utils import Rect


class ObstacleKind(Enum):
    WALL = "wall"
    LIGHT_TANK = "light_tank"
    HEAVY_TANK = "heavy_tank"
    INFANTRY = "infantry"
    JET = "jet"
    HELICOPTER = "helicopter"
    LOW_FLYER = "low_flyer"

    @property
    def airborne(self) -> bool:
        return self in (ObstacleKind.JET, ObstacleKind.HELICOPTER, ObstacleKind.LOW_FLYER)


class SizeClass(Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


@dataclass
class Vehicle:
    """The player's tank. x never changes; y is integrated every tick."""

    x: float
    y: float
    width: float
    height: float
    vy: float = 0.0
    on_ground: bool = True

    @classmethod
    def resting(cls, config: SimulationConfig) -> "Vehicle":
        """A tank parked on the ground line."""
        return cls(
            x=float(config.vehicle_x),
            y=config.vehicle_ground_y,
            width=float(config.vehicle_width),
            height=float(config.vehicle_height),
        )

    @property
    def front(self) -> float:
        return self.x + self.width

    @property
    def rect(self) -> Rect:
        return (self.x, self.y, self.width, self.height)

    def jump(self, impulse: float) -> bool:
        """Apply the jump impulse if grounded. Airborne jumps are ignored."""
        if not self.on_ground:
            return False
        self.vy = impulse
        self.on_ground = False
        return True

    def update(self, gravity: float, ground_bound: float) -> None:
        self.vy += gravity
        self.y += self.vy
        if self.y >= ground_bound:
            self.y = ground_bound
            self.vy = 0.0
            self.on_ground = True
        else:
            self.on_ground = False


@dataclass
class Obstacle:
    kind: ObstacleKind
    size_class: SizeClass
    x: float
    y: float
    width: float
    height: float
    counted_for_ammo: bool = False

    @property
    def right(self) -> float:
        """Trailing edge while scrolling left."""
        return self.x + self.width

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2.0, self.y + self.height / 2.0)

    @property
    def rect(self) -> Rect:
        return (self.x, self.y, self.width, self.height)

    def update(self, scroll_speed: float) -> None:
        self.x -= scroll_speed

    def offscreen(self) -> bool:
        return self.right <= 0


@dataclass
class Missile:
    """A projectile flying at constant speed toward a target fixed at launch."""

    x: float
    y: float
    target_x: float
    target_y: float
    speed: float
    active: bool = True
    width: float = MISSILE_WIDTH
    height: float = MISSILE_HEIGHT

    @property
    def rect(self) -> Rect:
        return (self.x - self.width / 2.0, self.y - self.height / 2.0, self.width, self.height)

    def distance_to_target(self) -> float:
        return math.hypot(self.target_x - self.x, self.target_y - self.y)

    def advance(self, epsilon: float) -> bool:
        """Move one tick toward the target. Returns True once arrived.

        A zero-length vector counts as arrival; the missile never overshoots.
        """
        if not self.active:
            return False
        dx = self.target_x - self.x
        dy = self.target_y - self.y
        dist = math.hypot(dx, dy)
        if dist <= epsilon:
            self.x, self.y = self.target_x, self.target_y
            return True
        step = min(self.speed, dist)
        self.x += dx / dist * step
        self.y += dy / dist * step
        return math.hypot(self.target_x - self.x, self.target_y - self.y) <= epsilon

    def offscreen(self, width: float, height: float) -> bool:
        return self.x < 0 or self.x > width or self.y < 0 or self.y > height


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    life: int

    @property
    def alive(self) -> bool:
        return self.life > 0

    def update(self) -> None:
        self.x += self.vx
        self.y += self.vy
        self.vy += PARTICLE_GRAVITY
        self.life -= 1


@dataclass
class Explosion:
    x: float
    y: float
    max_radius: float = EXPLOSION_MAX_RADIUS
    radius: float = 0.0
    alpha: float = 1.0
    age: int = 0
    particles: list[Particle] = field(default_factory=list)

    @classmethod
    def burst(
        cls,
        x: float,
        y: float,
        rng: random.Random,
        max_radius: float = EXPLOSION_MAX_RADIUS,
        particle_count: int = EXPLOSION_PARTICLES,
    ) -> "Explosion":
        """Explosion with a ring of sparks thrown in random directions."""
        particles = []
        for _ in range(min(particle_count, EXPLOSION_PARTICLES)):
            angle = rng.uniform(0.0, 2.0 * math.pi)
            speed = rng.uniform(1.0, 4.0)
            particles.append(
                Particle(
                    x,
                    y,
                    math.cos(angle) * speed,
                    math.sin(angle) * speed,
                    rng.randint(PARTICLE_LIFE_MIN, PARTICLE_LIFE_MAX),
                )
            )
        return cls(x, y, max_radius=max_radius, particles=particles)

    @classmethod
    def debris(cls, x: float, y: float, rng: random.Random) -> "Explosion":
        return cls.burst(x, y, rng, max_radius=DEBRIS_MAX_RADIUS, particle_count=DEBRIS_PARTICLES)

    @property
    def done(self) -> bool:
        return self.alpha <= 0.0

    def update(self) -> None:
        self.age += 1
        self.radius = min(self.max_radius, self.radius + EXPLOSION_GROWTH)
        self.alpha = max(0.0, self.alpha - EXPLOSION_FADE)
        for p in self.particles:
            p.update()
        self.particles = [p for p in self.particles if p.alive]
