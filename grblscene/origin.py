"""Drawable showing the coordinate origin: three axis arrows and a small square."""

from __future__ import annotations

from grblscene.drawable import NO_START, ShaderDrawable, VertexData
from grblscene.util import Vector3

_RED = Vector3(1.0, 0.0, 0.0)
_GREEN = Vector3(0.0, 1.0, 0.0)
_BLUE = Vector3(0.0, 0.0, 1.0)

# Line vertex pairs as (position, colour).
_ORIGIN_LINES: tuple[tuple[Vector3, Vector3], ...] = (
    # X axis
    (Vector3(0, 0, 0), _RED),
    (Vector3(9, 0, 0), _RED),
    (Vector3(10, 0, 0), _RED),
    (Vector3(8, 0.5, 0), _RED),
    (Vector3(8, 0.5, 0), _RED),
    (Vector3(8, -0.5, 0), _RED),
    (Vector3(8, -0.5, 0), _RED),
    (Vector3(10, 0, 0), _RED),
    # Y axis
    (Vector3(0, 0, 0), _GREEN),
    (Vector3(0, 9, 0), _GREEN),
    (Vector3(0, 10, 0), _GREEN),
    (Vector3(0.5, 8, 0), _GREEN),
    (Vector3(0.5, 8, 0), _GREEN),
    (Vector3(-0.5, 8, 0), _GREEN),
    (Vector3(-0.5, 8, 0), _GREEN),
    (Vector3(0, 10, 0), _GREEN),
    # Z axis
    (Vector3(0, 0, 0), _BLUE),
    (Vector3(0, 0, 9), _BLUE),
    (Vector3(0, 0, 10), _BLUE),
    (Vector3(0.5, 0, 8), _BLUE),
    (Vector3(0.5, 0, 8), _BLUE),
    (Vector3(-0.5, 0, 8), _BLUE),
    (Vector3(-0.5, 0, 8), _BLUE),
    (Vector3(0, 0, 10), _BLUE),
    # 2x2 square around the origin
    (Vector3(1, 1, 0), _RED),
    (Vector3(-1, 1, 0), _RED),
    (Vector3(-1, 1, 0), _RED),
    (Vector3(-1, -1, 0), _RED),
    (Vector3(-1, -1, 0), _RED),
    (Vector3(1, -1, 0), _RED),
    (Vector3(1, -1, 0), _RED),
    (Vector3(1, 1, 0), _RED),
)


class OriginDrawer(ShaderDrawable):
    """Draws the X, Y and Z axes with arrow heads and a square at the origin."""

    def update_data(self) -> bool:
        self.lines = [VertexData(position, color, NO_START) for position, color in _ORIGIN_LINES]
        return True