"""Drawable showing an interpolated height map coloured by height."""

from __future__ import annotations

import math
from typing import Optional, Sequence

from grblscene.drawable import NO_START, ShaderDrawable, VertexData
from grblscene.util import Rect, Vector3, color_from_hsv, color_to_vector, n_max, n_min

Grid = Sequence[Sequence[float]]

# Hue of the lowest point; the highest point is drawn with hue 0 (red).
_LOW_HUE = 0.67


class HeightMapInterpolationDrawer(ShaderDrawable):
    """Draws a mesh over interpolated heights, blue for low and red for high.

    ``data`` holds rows along Y, each holding heights along X.
    """

    def __init__(self) -> None:
        super().__init__()
        self._border_rect = Rect()
        self._data: Optional[Grid] = None

    @property
    def data(self) -> Optional[Grid]:
        return self._data

    @data.setter
    def data(self, value: Optional[Grid]) -> None:
        self._data = value
        self.update()

    @property
    def border_rect(self) -> Rect:
        return self._border_rect

    @border_rect.setter
    def border_rect(self, value: Rect) -> None:
        self._border_rect = value

    def update_data(self) -> bool:
        self.lines = []

        data = self._data
        if not data or not data[0]:
            return True
        if len({len(row) for row in data}) > 1:
            raise ValueError("interpolation data rows must all have the same length")

        rows = len(data)
        cols = len(data[0])
        r = self._border_rect
        step_x = r.width / (cols - 1) if cols > 1 else 0.0
        step_y = r.height / (rows - 1) if rows > 1 else 0.0

        low = high = data[0][0]
        for row in data:
            for value in row:
                low = n_min(low, value)
                high = n_max(high, value)
        spread = high - low

        def color(value: float) -> Vector3:
            if math.isnan(value) or math.isnan(spread):
                return color_to_vector(color_from_hsv(-1, 1.0, 1.0))
            hue = _LOW_HUE * (high - value) / spread if spread else 0.0
            return color_to_vector(color_from_hsv(hue, 1.0, 1.0))

        def vertex(i: int, j: int, value: float) -> VertexData:
            position = Vector3(r.x + step_x * j, r.y + step_y * i, value)
            return VertexData(position, color(value), NO_START)

        # Horizontal lines
        for i, row in enumerate(data):
            for j, (prev, cur) in enumerate(zip(row, row[1:]), start=1):
                if math.isnan(cur):
                    continue
                self.lines.append(vertex(i, j - 1, prev))
                self.lines.append(vertex(i, j, cur))

        # Vertical lines
        for j, column in enumerate(zip(*data)):
            for i, (prev, cur) in enumerate(zip(column, column[1:]), start=1):
                if math.isnan(cur):
                    continue
                self.lines.append(vertex(i - 1, j, prev))
                self.lines.append(vertex(i, j, cur))

        return True