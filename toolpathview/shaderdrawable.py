"""Base class for objects that produce vertex geometry for the viewer."""

from __future__ import annotations

from .geometry import BLUE, GREEN, RED, SNAN, Vector3, VertexData


class ShaderDrawable:
    """Holds triangle, line and point vertices and tracks when they must be rebuilt."""

    def __init__(self) -> None:
        self.line_width = 1.0
        self.point_size = 1.0
        self.visible = True
        self.lines: list[VertexData] = []
        self.points: list[VertexData] = []
        self.triangles: list[VertexData] = []
        self.texture = None
        self.buffer: list[VertexData] = []
        self._needs_update_geometry = True

    def update(self) -> None:
        """Mark the geometry as stale."""
        self._needs_update_geometry = True

    def needs_update_geometry(self) -> bool:
        return self._needs_update_geometry

    def update_geometry(self) -> bool:
        """Regenerate vertex data; rebuild the buffer if the data changed.

        Returns True when the buffer was rebuilt.
        """
        rebuilt = self.update_data()
        if rebuilt:
            self.buffer = [*self.triangles, *self.lines, *self.points]
        self._needs_update_geometry = False
        return bool(rebuilt)

    def update_data(self) -> bool:
        """Fill the vertex lists; return True if the buffer must be rebuilt."""
        start = Vector3(SNAN, 0, 0)
        self.lines = [
            VertexData(Vector3(0, 0, 0), RED.to_vector(), start),
            VertexData(Vector3(10, 0, 0), RED.to_vector(), start),
            VertexData(Vector3(0, 0, 0), GREEN.to_vector(), start),
            VertexData(Vector3(0, 10, 0), GREEN.to_vector(), start),
            VertexData(Vector3(0, 0, 0), BLUE.to_vector(), start),
            VertexData(Vector3(0, 0, 10), BLUE.to_vector(), start),
        ]
        return True

    def vertex_data(self) -> list[VertexData]:
        """The vertices last uploaded: triangles, then lines, then points."""
        return list(self.buffer)

    def get_sizes(self) -> Vector3:
        return Vector3(0, 0, 0)

    def get_minimum_extremes(self) -> Vector3:
        return Vector3(0, 0, 0)

    def get_maximum_extremes(self) -> Vector3:
        return Vector3(0, 0, 0)

    def get_vertex_count(self) -> int:
        return len(self.lines) + len(self.points) + len(self.triangles)