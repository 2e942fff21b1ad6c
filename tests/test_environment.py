import math

from vanguard_velocity.config import CLASSIC_CONFIG, DAY_COLORS, NIGHT_COLORS
from vanguard_velocity.environment import EnvironmentClock, blend_palette


def test_clock_advances_phase_and_parallax() -> None:
    clock = EnvironmentClock.from_config(CLASSIC_CONFIG)
    clock.advance()
    assert math.isclose(clock.sky_phase, 1.0 / CLASSIC_CONFIG.sky_cycle_duration)
    assert math.isclose(clock.mountain_offset, -CLASSIC_CONFIG.mountain_speed)
    assert math.isclose(clock.tree_offset, -CLASSIC_CONFIG.tree_speed)


def test_phase_wraps_after_full_cycle() -> None:
    clock = EnvironmentClock(10, 0.2, 0.8)
    for _ in range(10):
        clock.advance()
    assert clock.sky_phase < 1e-9 or clock.sky_phase > 1.0 - 1e-9
    assert 0.0 <= clock.sky_phase < 1.0


def test_night_factor_is_a_triangle() -> None:
    clock = EnvironmentClock(100, 0.0, 0.0)
    assert clock.night_factor == 0.0
    clock.sky_phase = 0.5
    assert clock.night_factor == 1.0
    clock.sky_phase = 0.25
    assert math.isclose(clock.night_factor, 0.5)


def test_palette_blends_day_to_night() -> None:
    assert blend_palette(0.0).sky == DAY_COLORS["sky"]
    assert blend_palette(1.0).sky == NIGHT_COLORS["sky"]
    clock = EnvironmentClock(100, 0.0, 0.0, sky_phase=0.5)
    assert clock.palette().ground == NIGHT_COLORS["ground"]


def test_celestial_body_switches_at_half_cycle() -> None:
    clock = EnvironmentClock(100, 0.0, 0.0)
    x, y, is_sun = clock.celestial_position(800, 600)
    assert is_sun
    assert math.isclose(x, 400.0) and math.isclose(y, 150.0 - 40.0)
    clock.sky_phase = 0.75
    assert clock.celestial_position(800, 600)[2] is False


def test_reset() -> None:
    clock = EnvironmentClock.from_config(CLASSIC_CONFIG)
    for _ in range(50):
        clock.advance()
    clock.reset()
    assert (clock.sky_phase, clock.mountain_offset, clock.tree_offset) == (0.0, 0.0, 0.0)
