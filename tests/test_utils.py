import math

from vanguard_velocity.utils import (
    clamp,
    distance_point_to_rect,
    interpolate_color,
    rects_overlap,
    scale_color,
    vertical_gradient,
)


def test_clamp_basic() -> None:
    assert clamp(5, 0, 10) == 5
    assert clamp(-1, 0, 10) == 0
    assert clamp(11, 0, 10) == 10


def test_interpolate_color_endpoints_and_midpoint() -> None:
    day = (0, 0, 0)
    night = (100, 200, 50)
    assert interpolate_color(day, night, 0.0) == day
    assert interpolate_color(day, night, 1.0) == night
    assert interpolate_color(day, night, 0.5) == (50, 100, 25)


def test_interpolate_color_clamps_phase() -> None:
    assert interpolate_color((10, 10, 10), (20, 20, 20), 3.0) == (20, 20, 20)
    assert interpolate_color((10, 10, 10), (20, 20, 20), -1.0) == (10, 10, 10)


def test_scale_color_clamped() -> None:
    assert scale_color((200, 100, 0), 2.0) == (255, 200, 0)


def test_vertical_gradient_shape_and_ends() -> None:
    arr = vertical_gradient((0, 0, 0), (90, 60, 30), 4, 3)
    assert arr.shape == (4, 3, 3)
    assert tuple(arr[0, 0]) == (0, 0, 0)
    assert tuple(arr[3, 2]) == (90, 60, 30)
    assert tuple(arr[1, 1]) == (45, 30, 15)


def test_rects_overlap() -> None:
    a = (0, 0, 10, 10)
    assert rects_overlap(a, (5, 5, 10, 10)) is True
    # Touching edges are not an overlap
    assert rects_overlap(a, (10, 0, 10, 10)) is False
    assert rects_overlap(a, (0, 10, 10, 10)) is False
    assert rects_overlap(a, (20, 20, 1, 1)) is False


def test_distance_point_to_rect() -> None:
    rect = (0, 0, 10, 10)
    assert distance_point_to_rect(5, 5, rect) == 0.0
    assert math.isclose(distance_point_to_rect(13, 14, rect), 5.0)
    assert math.isclose(distance_point_to_rect(-2, 5, rect), 2.0)
