"""Axis gizmo drawn at the work origin."""

from __future__ import annotations

from .geometry import BLUE, GREEN, RED, Color, Vector3, VertexData
from .shaderdrawable import ShaderDrawable


def _segments(color: Color, points: list[tuple[float, float, float]]) -> list[VertexData]:
    vec = color.to_vector()
    return [VertexData(Vector3(*p), vec) for p in points]


class OriginDrawer(ShaderDrawable):
    """Draws X, Y, Z arrows and a 2x2 square around the origin."""

    def update_data(self) -> bool:
        self.lines = [
            *_segments(RED, [
                (0, 0, 0), (9, 0, 0),
                (10, 0, 0), (8, 0.5, 0),
                (8, 0.5, 0), (8, -0.5, 0),
                (8, -0.5, 0), (10, 0, 0),
            ]),
            *_segments(GREEN, [
                (0, 0, 0), (0, 9, 0),
                (0, 10, 0), (0.5, 8, 0),
                (0.5, 8, 0), (-0.5, 8, 0),
                (-0.5, 8, 0), (0, 10, 0),
            ]),
            *_segments(BLUE, [
                (0, 0, 0), (0, 0, 9),
                (0, 0, 10), (0.5, 0, 8),
                (0.5, 0, 8), (-0.5, 0, 8),
                (-0.5, 0, 8), (0, 0, 10),
            ]),
            *_segments(RED, [
                (1, 1, 0), (-1, 1, 0),
                (-1, 1, 0), (-1, -1, 0),
                (-1, -1, 0), (1, -1, 0),
                (1, -1, 0), (1, 1, 0),
            ]),
        ]
        return True