"""Base drawable holding line and point vertex data for a scene."""

from __future__ import annotations

from dataclasses import dataclass, field

from grblscene.util import SNAN, Vector3

NO_START = Vector3(SNAN, SNAN, SNAN)


@dataclass
class VertexData:
    """A vertex: position, colour and the start point of its fast move."""

    position: Vector3
    color: Vector3
    start: Vector3 = field(default=NO_START)


class ShaderDrawable:
    """A drawable scene element made of line vertex pairs and points.

    Subclasses rebuild ``lines`` and ``points`` in :meth:`update_data`;
    :meth:`update_geometry` collects them into ``vertices``.
    """

    def __init__(self) -> None:
        self.line_width = 1.0
        self.point_size = 6.0
        self.visible = True
        self.lines: list[VertexData] = []
        self.points: list[VertexData] = []
        self.vertices: list[VertexData] = []
        self.needs_update_geometry = True

    def update(self) -> None:
        """Mark the geometry as out of date."""
        self.needs_update_geometry = True

    def update_data(self) -> bool:
        """Rebuild vertex data; return True if the whole buffer must be replaced."""
        red, green, blue = Vector3(1, 0, 0), Vector3(0, 1, 0), Vector3(0, 0, 1)
        start = Vector3(SNAN, 0, 0)
        self.lines = [
            VertexData(Vector3(0, 0, 0), red, start),
            VertexData(Vector3(10, 0, 0), red, start),
            VertexData(Vector3(0, 0, 0), green, start),
            VertexData(Vector3(0, 10, 0), green, start),
            VertexData(Vector3(0, 0, 0), blue, start),
            VertexData(Vector3(0, 0, 10), blue, start),
        ]
        return True

    def update_geometry(self) -> list[VertexData]:
        """Refresh vertex data and return the combined vertex buffer."""
        if self.update_data():
            self.vertices = [*self.lines, *self.points]
        self.needs_update_geometry = False
        return self.vertices

    def get_sizes(self) -> Vector3:
        return Vector3(0, 0, 0)

    def get_minimum_extremes(self) -> Vector3:
        return Vector3(0, 0, 0)

    def get_maximum_extremes(self) -> Vector3:
        return Vector3(0, 0, 0)

    def get_vertex_count(self) -> int:
        """Number of line and point vertices."""
        return len(self.lines) + len(self.points)