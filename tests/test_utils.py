import math

import numpy as np

from flip_birds.utils import (
    approach,
    clamp,
    point_in_circle,
    scale_color,
    spans_overlap,
    vertical_gradient,
)


def test_clamp_basic() -> None:
    assert clamp(5, 0, 10) == 5
    assert clamp(-1, 0, 10) == 0
    assert clamp(11, 0, 10) == 10


def test_approach_never_overshoots() -> None:
    assert approach(0.0, 10.0, 3.0) == 3.0
    assert approach(9.0, 10.0, 3.0) == 10.0
    assert approach(10.0, -10.0, 4.0) == 6.0


def test_point_in_circle() -> None:
    assert point_in_circle(30, 30, 30, 30, 20) is True
    assert point_in_circle(50, 30, 30, 30, 20) is True  # on the rim
    assert point_in_circle(51, 30, 30, 30, 20) is False
    assert math.isclose(math.hypot(3, 4), 5.0)


def test_spans_overlap_is_strict() -> None:
    assert spans_overlap(0, 10, 5, 15) is True
    assert spans_overlap(0, 10, 10, 20) is False  # touching edges
    assert spans_overlap(20, 30, 0, 10) is False


def test_scale_color_clamps() -> None:
    assert scale_color((100, 200, 250), 2.0) == (200, 255, 255)
    assert scale_color((100, 200, 250), 0.0) == (0, 0, 0)


def test_vertical_gradient_shape_and_endpoints() -> None:
    pixels = vertical_gradient(8, 5, (0, 0, 0), (200, 100, 50))
    assert pixels.shape == (8, 5, 3)
    assert pixels.dtype == np.uint8
    assert tuple(pixels[0, 0]) == (0, 0, 0)
    assert tuple(pixels[3, -1]) == (200, 100, 50)
