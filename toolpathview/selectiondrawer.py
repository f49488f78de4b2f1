"""Marker for the currently selected toolpath point."""

from __future__ import annotations

from .geometry import BLACK, NAN_VECTOR, Color, Vector3, VertexData
from .shaderdrawable import ShaderDrawable


class SelectionDrawer(ShaderDrawable):
    """Draws a single point at the selection end position."""

    def __init__(self) -> None:
        super().__init__()
        self.start_position = Vector3(0, 0, 0)
        self.end_position = NAN_VECTOR
        self.color: Color = BLACK
        self.point_size = 6.0

    def update_data(self) -> bool:
        self.points = [
            VertexData(
                self.end_position,
                self.color.to_vector(),
                Vector3(NAN_VECTOR.x, NAN_VECTOR.y, self.point_size),
            )
        ]
        return True