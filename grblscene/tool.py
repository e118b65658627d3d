"""Drawable showing the cutting tool as a wireframe cylinder or cone."""

from __future__ import annotations

import math
from dataclasses import replace

from grblscene.drawable import NO_START, ShaderDrawable, VertexData
from grblscene.util import Color, Vector3, color_to_vector


def normalize_angle(angle: float) -> float:
    """Bring an angle in degrees into the range [0, 360]."""
    if math.isinf(angle):
        raise ValueError("angle must be finite")
    while angle < 0:
        angle += 360
    while angle > 360:
        angle -= 360
    return angle


def create_circle(center: Vector3, radius: float, arcs: int, color: Vector3) -> list[VertexData]:
    """Return line vertex pairs approximating a circle in the plane Z = center.z."""
    if arcs < 1:
        raise ValueError("a circle needs at least one arc")
    circle: list[VertexData] = []
    for i in range(arcs + 1):
        angle = 2 * math.pi * i / arcs
        if i > 1:
            circle.append(replace(circle[-1]))
        elif i == arcs:
            circle.append(replace(circle[0]))
        position = Vector3(
            center.x + radius * math.cos(angle),
            center.y + radius * math.sin(angle),
            center.z,
        )
        circle.append(VertexData(position, color, NO_START))
    return circle


class ToolDrawer(ShaderDrawable):
    """Draws the tool at its current position, rotating for animation."""

    _ARCS = 4
    _CIRCLE_ARCS = 20

    def __init__(self) -> None:
        super().__init__()
        self._tool_diameter = 3.0
        self._tool_length = 15.0
        self._end_length = 0.0
        self._tool_position = Vector3(0, 0, 0)
        self._rotation_angle = 0.0
        self._tool_angle = 0.0
        self.color = Color()

    @property
    def tool_diameter(self) -> float:
        return self._tool_diameter

    @tool_diameter.setter
    def tool_diameter(self, value: float) -> None:
        if self._tool_diameter != value:
            self._tool_diameter = value
            self.update()

    @property
    def tool_length(self) -> float:
        return self._tool_length

    @tool_length.setter
    def tool_length(self, value: float) -> None:
        if self._tool_length != value:
            self._tool_length = value
            self.update()

    @property
    def tool_position(self) -> Vector3:
        return self._tool_position

    @tool_position.setter
    def tool_position(self, value: Vector3) -> None:
        if self._tool_position != value:
            self._tool_position = value
            self.update()

    @property
    def rotation_angle(self) -> float:
        return self._rotation_angle

    @rotation_angle.setter
    def rotation_angle(self, value: float) -> None:
        if self._rotation_angle != value:
            self._rotation_angle = value
            self.update()

    @property
    def tool_angle(self) -> float:
        """Tip angle in degrees; 0 or 180 and beyond mean a flat end."""
        return self._tool_angle

    @tool_angle.setter
    def tool_angle(self, value: float) -> None:
        if self._tool_angle != value:
            self._tool_angle = value
            if 0 < value < 180:
                self._end_length = self._tool_diameter / 2 / math.tan(value / 180 * math.pi / 2)
            else:
                self._end_length = 0.0
            if self._tool_length < self._end_length:
                self._tool_length = self._end_length
            self.update()

    @property
    def end_length(self) -> float:
        """Height of the conical tip."""
        return self._end_length

    def rotate(self, angle: float) -> None:
        """Turn the tool by angle degrees."""
        self.rotation_angle = normalize_angle(self._rotation_angle + angle)

    def update_data(self) -> bool:
        color = color_to_vector(self.color)
        pos = self._tool_position
        radius = self._tool_diameter / 2
        tip_z = pos.z + self._end_length
        top_z = pos.z + self._tool_length

        positions: list[Vector3] = []
        for i in range(self._ARCS):
            angle = self._rotation_angle / 180 * math.pi + (2 * math.pi / self._ARCS) * i
            x = pos.x + radius * math.cos(angle)
            y = pos.y + radius * math.sin(angle)
            positions += [
                Vector3(x, y, tip_z), Vector3(x, y, top_z),      # side
                Vector3(pos.x, pos.y, pos.z), Vector3(x, y, tip_z),  # bottom
                Vector3(pos.x, pos.y, top_z), Vector3(x, y, top_z),  # top
                Vector3(pos.x, pos.y, 0), Vector3(x, y, 0),      # zero Z
            ]

        self.points = []
        self.lines = [VertexData(p, color, NO_START) for p in positions]
        self.lines += create_circle(Vector3(pos.x, pos.y, tip_z), radius, self._CIRCLE_ARCS, color)
        self.lines += create_circle(Vector3(pos.x, pos.y, top_z), radius, self._CIRCLE_ARCS, color)
        if self._end_length == 0:
            self.lines += create_circle(Vector3(pos.x, pos.y, 0), radius, self._CIRCLE_ARCS, color)
        return True