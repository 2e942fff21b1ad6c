from __future__ import annotations

"""Game configuration constants for Vanguard Velocity.

All simulation quantities are expressed per tick (one tick per rendered frame
at ``FPS``): distances in pixels, velocities in px/tick, accelerations in
px/tick^2.
"""

from dataclasses import dataclass, replace

# Viewport
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
GROUND_Y_OFFSET = 50  # px of ground strip below the driving line
FPS = 60
MAX_CATCHUP_TICKS = 5  # ticks the host may run in one frame after a stall

# Vehicle physics
GRAVITY = 1.2  # px/tick^2
JUMP_FORCE = -20.0  # px/tick (negative is up)
TANK_X = 50
TANK_WIDTH = 40
TANK_HEIGHT = 30

# Scoring
SCORE_TICKS_PER_POINT = 1
MISSILE_ACTIVATION_SCORE = 1000
MISSILE_KILL_BONUS = 100

# Ammo
MISSILES_TO_GAIN_ONE = 25
MAX_MISSILES = 10

# Missiles
MISSILE_SPEED = 15.0  # px/tick
MISSILE_WIDTH = 12
MISSILE_HEIGHT = 4
MISSILE_COOLDOWN_TICKS = 15
MISSILE_ARRIVAL_EPSILON = 1.0
MISSILE_BLAST_RADIUS = 40.0

# Explosions
EXPLOSION_MAX_RADIUS = 40.0
EXPLOSION_GROWTH = 4.0  # px/tick
EXPLOSION_FADE = 0.05  # alpha/tick
EXPLOSION_PARTICLES = 12
DEBRIS_MAX_RADIUS = 24.0
DEBRIS_PARTICLES = 6
PARTICLE_GRAVITY = 0.15
PARTICLE_LIFE_MIN = 10
PARTICLE_LIFE_MAX = 25

# Difficulty: scroll speed
INITIAL_SPEED = 3.0  # px/tick
SPEED_INCREMENT = 0.5
SPEED_RAMP_INTERVAL = 200  # ticks
MAX_SPEED = 12.0

# Difficulty: spawn interval (ticks between obstacles)
MIN_OBSTACLE_SPAWN_INTERVAL = 60
MAX_OBSTACLE_SPAWN_INTERVAL = 120
SPAWN_TIGHTEN_INTERVAL = 100  # ticks
MIN_INTERVAL_DECREMENT = 2
MAX_INTERVAL_DECREMENT = 3
OBSTACLE_SPAWN_MIN = 30  # floor of the min bound
OBSTACLE_SPAWN_MAX_FLOOR = 40  # floor of the max bound

# Difficulty: horizontal gap between consecutive obstacles (px)
MIN_OBSTACLE_GAP = 160
MAX_OBSTACLE_GAP = 320
GAP_TIGHTEN_INTERVAL = 200  # ticks
MIN_GAP_DECREMENT = 4
MAX_GAP_DECREMENT = 6
MIN_GAP_FLOOR = 100
MAX_GAP_FLOOR = 140

# Obstacle size tiers (elapsed ticks at which larger classes appear)
SIZE_TIER_MEDIUM_TICKS = 600
SIZE_TIER_LARGE_TICKS = 1800

# Environment
SKY_CYCLE_DURATION = 1200  # ticks for a full day/night cycle
BG_MOUNTAIN_SPEED = 0.2
BG_TREE_SPEED = 0.8

# Persistence
HIGH_SCORE_KEY = "vanguardVelocityHighScore"
HIGH_SCORE_FILE = "vanguard_velocity_scores.json"

# Palette (day and night endpoints, blended by the environment clock)
DAY_COLORS = {
    "sky": (135, 206, 235),
    "ground": (139, 69, 19),
    "ground_detail": (160, 82, 45),
    "mountain": (105, 105, 105),
    "tree": (34, 139, 34),
    "sun": (255, 215, 0),
    "tank": (75, 75, 77),
    "obstacle": (139, 0, 0),
}
NIGHT_COLORS = {
    "sky": (25, 25, 112),
    "ground": (47, 79, 79),
    "ground_detail": (112, 128, 144),
    "mountain": (47, 47, 47),
    "tree": (0, 100, 0),
    "sun": (245, 245, 220),
    "tank": (54, 69, 79),
    "obstacle": (139, 0, 0),
}
SKY_HORIZON_LIGHTEN = 1.25  # bottom of the sky gradient relative to its top

TRACK_COLOR = (51, 51, 51)
CANNON_COLOR = (102, 102, 102)
TURRET_DETAIL_COLOR = (68, 68, 68)
MISSILE_COLOR = (255, 69, 0)
MISSILE_FLAME_COLOR = (255, 215, 0)
EXPLOSION_COLORS = ((255, 69, 0), (255, 215, 0), (255, 99, 71))
HUD_SCORE_COLOR = (250, 204, 21)
HUD_HIGH_COLOR = (74, 222, 128)
HUD_AMMO_COLOR = (248, 113, 113)
HUD_TEXT_COLOR = (235, 235, 235)
HUD_PANEL = (0, 0, 0, 200)


@dataclass(frozen=True)
class SimulationConfig:
    """Immutable tunables read by the simulation.

    Defaults mirror the module constants. Variants of the game differ only in
    these numbers, so presets are built with ``dataclasses.replace``.
    """

    width: int = WINDOW_WIDTH
    height: int = WINDOW_HEIGHT
    ground_offset: int = GROUND_Y_OFFSET

    gravity: float = GRAVITY
    jump_force: float = JUMP_FORCE
    vehicle_x: float = TANK_X
    vehicle_width: float = TANK_WIDTH
    vehicle_height: float = TANK_HEIGHT

    score_ticks_per_point: int = SCORE_TICKS_PER_POINT
    missile_activation_score: int = MISSILE_ACTIVATION_SCORE
    missile_kill_bonus: int = MISSILE_KILL_BONUS
    missiles_to_gain_one: int = MISSILES_TO_GAIN_ONE
    max_missiles: int = MAX_MISSILES

    missile_speed: float = MISSILE_SPEED
    missile_width: float = MISSILE_WIDTH
    missile_height: float = MISSILE_HEIGHT
    missile_cooldown_ticks: int = MISSILE_COOLDOWN_TICKS
    missile_arrival_epsilon: float = MISSILE_ARRIVAL_EPSILON
    missile_blast_radius: float = MISSILE_BLAST_RADIUS

    initial_speed: float = INITIAL_SPEED
    speed_increment: float = SPEED_INCREMENT
    speed_ramp_interval: int = SPEED_RAMP_INTERVAL
    max_speed: float = MAX_SPEED

    min_spawn_interval: int = MIN_OBSTACLE_SPAWN_INTERVAL
    max_spawn_interval: int = MAX_OBSTACLE_SPAWN_INTERVAL
    spawn_tighten_interval: int = SPAWN_TIGHTEN_INTERVAL
    min_interval_decrement: int = MIN_INTERVAL_DECREMENT
    max_interval_decrement: int = MAX_INTERVAL_DECREMENT
    min_interval_floor: int = OBSTACLE_SPAWN_MIN
    max_interval_floor: int = OBSTACLE_SPAWN_MAX_FLOOR

    min_gap: float = MIN_OBSTACLE_GAP
    max_gap: float = MAX_OBSTACLE_GAP
    gap_tighten_interval: int = GAP_TIGHTEN_INTERVAL
    min_gap_decrement: float = MIN_GAP_DECREMENT
    max_gap_decrement: float = MAX_GAP_DECREMENT
    min_gap_floor: float = MIN_GAP_FLOOR
    max_gap_floor: float = MAX_GAP_FLOOR

    size_tier_medium_ticks: int = SIZE_TIER_MEDIUM_TICKS
    size_tier_large_ticks: int = SIZE_TIER_LARGE_TICKS

    sky_cycle_duration: int = SKY_CYCLE_DURATION
    mountain_speed: float = BG_MOUNTAIN_SPEED
    tree_speed: float = BG_TREE_SPEED

    @property
    def ground_y(self) -> float:
        """Y coordinate of the ground line (top of the ground strip)."""
        return float(self.height - self.ground_offset)

    @property
    def vehicle_ground_y(self) -> float:
        """Largest y the vehicle's top edge may take (resting on the ground)."""
        return self.ground_y - self.vehicle_height

    @property
    def jump_apex(self) -> float:
        """Height gained by a jump from the ground, in px."""
        return self.jump_force * self.jump_force / (2.0 * self.gravity)

    def validate(self) -> "SimulationConfig":
        """Raise ValueError for combinations the engine cannot honour."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError("viewport must have a positive size")
        if not 0 <= self.ground_offset < self.height:
            raise ValueError("ground offset must lie inside the viewport")
        if self.vehicle_height >= self.ground_y:
            raise ValueError("vehicle does not fit above the ground line")
        if self.gravity <= 0 or self.jump_force >= 0:
            raise ValueError("gravity must pull down and the jump must push up")
        if self.max_missiles < 0 or self.missiles_to_gain_one <= 0:
            raise ValueError("ammo limits must be non-negative")
        if self.score_ticks_per_point <= 0:
            raise ValueError("score_ticks_per_point must be positive")
        if self.missile_speed <= 0:
            raise ValueError("missile speed must be positive")
        if self.speed_ramp_interval <= 0 or self.spawn_tighten_interval <= 0 or self.gap_tighten_interval <= 0:
            raise ValueError("difficulty intervals must be positive")
        if self.initial_speed > self.max_speed:
            raise ValueError("initial speed exceeds max speed")
        if self.min_interval_floor < 1 or self.max_interval_floor <= self.min_interval_floor:
            raise ValueError("spawn interval floors must satisfy 1 <= min < max")
        if self.max_spawn_interval <= self.min_spawn_interval:
            raise ValueError("max spawn interval must exceed min spawn interval")
        if self.min_gap_floor < 0 or self.max_gap_floor <= self.min_gap_floor:
            raise ValueError("gap floors must satisfy 0 <= min < max")
        if self.max_gap <= self.min_gap:
            raise ValueError("max gap must exceed min gap")
        if self.size_tier_large_ticks < self.size_tier_medium_ticks:
            raise ValueError("large size tier cannot start before the medium tier")
        if self.sky_cycle_duration <= 0:
            raise ValueError("sky cycle duration must be positive")
        return self


CLASSIC_CONFIG = SimulationConfig()
# Later build of the canvas game: missiles unlock almost immediately.
ARCADE_CONFIG = replace(CLASSIC_CONFIG, missile_activation_score=100, missiles_to_gain_one=10)

PRESETS = {"classic": CLASSIC_CONFIG, "arcade": ARCADE_CONFIG}
