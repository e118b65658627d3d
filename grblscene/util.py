"""Small geometric and colour helpers shared by the drawables."""

from __future__ import annotations

import colorsys
import math
from dataclasses import dataclass
from typing import Iterator

# Marker coordinate used for "no line start point" in vertex data.
SNAN = 65536.0


@dataclass(frozen=True)
class Vector3:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> Vector3:
        return Vector3(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its corner and size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


@dataclass(frozen=True)
class Color:
    """An RGB colour with components in the range [0, 1]."""

    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} component {value!r} is outside [0, 1]")


def n_min(v1: float, v2: float) -> float:
    """Minimum of two values, ignoring NaN unless both are NaN."""
    if not math.isnan(v1) and not math.isnan(v2):
        return v2 if v2 < v1 else v1
    if not math.isnan(v1):
        return v1
    if not math.isnan(v2):
        return v2
    return math.nan


def n_max(v1: float, v2: float) -> float:
    """Maximum of two values, ignoring NaN unless both are NaN."""
    if not math.isnan(v1) and not math.isnan(v2):
        return v2 if v1 < v2 else v1
    if not math.isnan(v1):
        return v1
    if not math.isnan(v2):
        return v2
    return math.nan


def color_to_vector(color: Color) -> Vector3:
    """Return the colour's components as a vector (red, green, blue)."""
    return Vector3(color.red, color.green, color.blue)


def color_from_hsv(h: float, s: float, v: float) -> Color:
    """Build a colour from hue, saturation and value in [0, 1].

    A hue of -1 denotes an achromatic colour.
    """
    for name, value in (("saturation", s), ("value", v)):
        if math.isnan(value) or not 0.0 <= value <= 1.0:
            raise ValueError(f"{name} {value!r} is outside [0, 1]")
    if h == -1:
        return Color(v, v, v)
    if math.isnan(h) or not 0.0 <= h <= 1.0:
        raise ValueError(f"hue {h!r} is outside [0, 1]")
    red, green, blue = colorsys.hsv_to_rgb(h, s, v)
    return Color(
        min(max(red, 0.0), 1.0),
        min(max(green, 0.0), 1.0),
        min(max(blue, 0.0), 1.0),
    )