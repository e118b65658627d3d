"""Drawable showing the height-map probe grid."""

from __future__ import annotations

import math
from typing import Optional, Sequence

from grblscene.drawable import NO_START, ShaderDrawable, VertexData
from grblscene.util import Rect, Vector3

UNPROBED_COLOR = Vector3(1.0, 0.6, 0.0)
PROBED_COLOR = Vector3(0.0, 0.0, 1.0)

Grid = Sequence[Sequence[float]]


def _check_rectangular(grid: Grid) -> None:
    widths = {len(row) for row in grid}
    if len(widths) > 1:
        raise ValueError("height-map grid rows must all have the same length")


class HeightMapGridDrawer(ShaderDrawable):
    """Draws probe points, pending probe paths and grid lines between probed points.

    ``model`` holds rows along Y, each holding heights along X; NaN marks a
    point that has not been probed yet.
    """

    def __init__(self) -> None:
        super().__init__()
        self.point_size = 4.0
        self._grid_size = (0.0, 0.0)
        self._border_rect = Rect()
        self._z_top = 0.0
        self._z_bottom = 0.0
        self._model: Optional[Grid] = None

    @property
    def grid_size(self) -> tuple[float, float]:
        return self._grid_size

    @grid_size.setter
    def grid_size(self, value: tuple[float, float]) -> None:
        self._grid_size = value
        self.update()

    @property
    def border_rect(self) -> Rect:
        return self._border_rect

    @border_rect.setter
    def border_rect(self, value: Rect) -> None:
        self._border_rect = value
        self.update()

    @property
    def z_top(self) -> float:
        return self._z_top

    @z_top.setter
    def z_top(self, value: float) -> None:
        self._z_top = value
        self.update()

    @property
    def z_bottom(self) -> float:
        return self._z_bottom

    @z_bottom.setter
    def z_bottom(self, value: float) -> None:
        self._z_bottom = value
        self.update()

    @property
    def model(self) -> Optional[Grid]:
        return self._model

    @model.setter
    def model(self, value: Optional[Grid]) -> None:
        if value is not None:
            _check_rectangular(value)
        self._model = value
        self.update()

    def update_data(self) -> bool:
        self.lines = []
        self.points = []

        grid = self._model
        if not grid:
            return True
        _check_rectangular(grid)

        rows = len(grid)
        cols = len(grid[0])
        r = self._border_rect
        step_x = r.width / (cols - 1) if cols > 1 else 0.0
        step_y = r.height / (rows - 1) if rows > 1 else 0.0

        def at(i: int, j: int, z: float) -> Vector3:
            return Vector3(r.x + step_x * j, r.y + step_y * i, z)

        # Probe paths for pending points, dots for probed ones
        for i, row in enumerate(grid):
            for j, value in enumerate(row):
                if math.isnan(value):
                    self.lines.append(VertexData(at(i, j, self._z_top), UNPROBED_COLOR, NO_START))
                    self.lines.append(VertexData(at(i, j, self._z_bottom), UNPROBED_COLOR, NO_START))
                else:
                    self.points.append(VertexData(at(i, j, value), PROBED_COLOR, NO_START))

        # Horizontal grid lines
        for i, row in enumerate(grid):
            for j, (prev, cur) in enumerate(zip(row, row[1:]), start=1):
                if math.isnan(cur):
                    continue
                self.lines.append(VertexData(at(i, j - 1, prev), PROBED_COLOR, NO_START))
                self.lines.append(VertexData(at(i, j, cur), PROBED_COLOR, NO_START))

        # Vertical grid lines
        for j, column in enumerate(zip(*grid)):
            for i, (prev, cur) in enumerate(zip(column, column[1:]), start=1):
                if math.isnan(cur):
                    continue
                self.lines.append(VertexData(at(i - 1, j, prev), PROBED_COLOR, NO_START))
                self.lines.append(VertexData(at(i, j, cur), PROBED_COLOR, NO_START))

        return True