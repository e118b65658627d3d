"""Drawable outlining the height-map border rectangle."""

from __future__ import annotations

from grblscene.drawable import NO_START, ShaderDrawable, VertexData
from grblscene.util import Rect, Vector3

_BORDER_COLOR = Vector3(1.0, 0.0, 0.0)


class HeightMapBorderDrawer(ShaderDrawable):
    """Draws the outline of a rectangle at Z = 0."""

    def __init__(self) -> None:
        super().__init__()
        self._border_rect = Rect()

    @property
    def border_rect(self) -> Rect:
        return self._border_rect

    @border_rect.setter
    def border_rect(self, rect: Rect) -> None:
        self._border_rect = rect
        self.update()

    def update_data(self) -> bool:
        r = self._border_rect
        bottom_left = Vector3(r.x, r.y, 0)
        top_left = Vector3(r.x, r.y + r.height, 0)
        top_right = Vector3(r.x + r.width, r.y + r.height, 0)
        bottom_right = Vector3(r.x + r.width, r.y, 0)
        corners = [
            bottom_left, top_left,
            top_left, top_right,
            top_right, bottom_right,
            bottom_right, bottom_left,
        ]
        self.lines = [VertexData(corner, _BORDER_COLOR, NO_START) for corner in corners]
        return True