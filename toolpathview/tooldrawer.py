"""Wireframe model of the cutting tool."""

from __future__ import annotations

import math

from .geometry import BLACK, Color, Vector3, VertexData
from .shaderdrawable import ShaderDrawable

_ARCS = 4
_CIRCLE_SEGMENTS = 20


def normalize_angle(angle: float) -> float:
    """Bring an angle into the range 0..360 degrees."""
    while angle < 0:
        angle += 360
    while angle > 360:
        angle -= 360
    return angle


def create_circle(
    center: Vector3, radius: float, arcs: int, color: tuple[float, float, float, float]
) -> list[VertexData]:
    """Line-list vertices of a circle in the plane z = center.z."""
    if arcs < 1:
        raise ValueError("a circle needs at least one arc")
    vertices = [
        VertexData(
            Vector3(
                center.x + radius * math.cos(2 * math.pi * i / arcs),
                center.y + radius * math.sin(2 * math.pi * i / arcs),
                center.z,
            ),
            color,
        )
        for i in range(arcs + 1)
    ]
    if arcs == 1:
        return [vertices[0], vertices[0], vertices[1]]
    return [v for pair in zip(vertices, vertices[1:]) for v in pair]


class ToolDrawer(ShaderDrawable):
    """Draws the tool at its current position and rotation."""

    def __init__(self) -> None:
        super().__init__()
        self._tool_diameter = 3.0
        self._tool_length = 15.0
        self._tool_position = Vector3(0, 0, 0)
        self._rotation_angle = 0.0
        self._tool_angle = 0.0
        self._end_length = 0.0
        self.color: Color = BLACK

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
        """Height of the conical tip, derived from the tool angle."""
        return self._end_length

    def rotate(self, angle: float) -> None:
        """Rotate the tool by the given number of degrees."""
        self.rotation_angle = normalize_angle(self._rotation_angle + angle)

    def update_data(self) -> bool:
        pos = self._tool_position
        radius = self._tool_diameter / 2
        color = self.color.to_vector()
        tip_z = pos.z + self._end_length
        top_z = pos.z + self._tool_length
        base = self._rotation_angle / 180 * math.pi

        lines: list[VertexData] = []
        for i in range(_ARCS):
            angle = base + (2 * math.pi / _ARCS) * i
            x = pos.x + radius * math.cos(angle)
            y = pos.y + radius * math.sin(angle)
            for p in (
                Vector3(x, y, tip_z), Vector3(x, y, top_z),          # side
                Vector3(pos.x, pos.y, pos.z), Vector3(x, y, tip_z),  # bottom
                Vector3(pos.x, pos.y, top_z), Vector3(x, y, top_z),  # top
                Vector3(pos.x, pos.y, 0), Vector3(x, y, 0),          # zero Z
            ):
                lines.append(VertexData(p, color))

        lines += create_circle(Vector3(pos.x, pos.y, tip_z), radius, _CIRCLE_SEGMENTS, color)
        lines += create_circle(Vector3(pos.x, pos.y, top_z), radius, _CIRCLE_SEGMENTS, color)
        if self._end_length == 0:
            lines += create_circle(Vector3(pos.x, pos.y, 0), radius, _CIRCLE_SEGMENTS, color)

        self.lines = lines
        self.points = []
        return True