import math

import pytest

from grblscene.util import (
    Color,
    Rect,
    Vector3,
    color_from_hsv,
    color_to_vector,
    n_max,
    n_min,
)


def test_vector_length_pythagorean():
    assert Vector3(3.0, 4.0, 0.0).length() == pytest.approx(5.0)


def test_vector_length_of_zero():
    assert Vector3().length() == 0.0


def test_vector_arithmetic_round_trip():
    a = Vector3(1.5, -2.0, 3.0)
    b = Vector3(0.25, 4.0, -1.0)
    assert (a + b) - b == a
    assert tuple(a * 2) == (3.0, -4.0, 6.0)


def test_n_min_and_n_max_regular_values():
    assert n_min(2.0, 7.0) == 2.0
    assert n_max(2.0, 7.0) == 7.0


@pytest.mark.parametrize("func", [n_min, n_max])
def test_nan_is_ignored(func):
    assert func(math.nan, 3.5) == 3.5
    assert func(-1.25, math.nan) == -1.25


@pytest.mark.parametrize("func", [n_min, n_max])
def test_both_nan_gives_nan(func):
    assert math.isnan(func(math.nan, math.nan))


def test_color_to_vector_keeps_components():
    color = Color(0.1, 0.5, 0.9)
    assert color_to_vector(color) == Vector3(0.1, 0.5, 0.9)


def test_color_rejects_out_of_range():
    with pytest.raises(ValueError):
        Color(1.5, 0.0, 0.0)


def test_hsv_zero_hue_is_pure_red():
    assert color_from_hsv(0.0, 1.0, 1.0) == Color(1.0, 0.0, 0.0)


@pytest.mark.parametrize("hue", [0.0, 0.1, 0.33, 0.5, 0.67, 0.9])
def test_hsv_full_value_has_max_channel_equal_to_value(hue):
    color = color_from_hsv(hue, 1.0, 0.8)
    assert max(color.red, color.green, color.blue) == pytest.approx(0.8)
    assert min(color.red, color.green, color.blue) == pytest.approx(0.0)


def test_hsv_achromatic_hue():
    assert color_from_hsv(-1, 0.0, 0.4) == Color(0.4, 0.4, 0.4)


@pytest.mark.parametrize("args", [(1.5, 1.0, 1.0), (math.nan, 1.0, 1.0), (0.2, 2.0, 1.0), (0.2, 1.0, -0.1)])
def test_hsv_invalid_arguments(args):
    with pytest.raises(ValueError):
        color_from_hsv(*args)


def test_rect_fields():
    rect = Rect(1.0, 2.0, 3.0, 4.0)
    assert (rect.x, rect.y, rect.width, rect.height) == (1.0, 2.0, 3.0, 4.0)