"""Rectangle outlining the height map area."""

from __future__ import annotations

from .geometry import RED, Rect, Vector3, VertexData
from .shaderdrawable import ShaderDrawable


class HeightMapBorderDrawer(ShaderDrawable):
    """Draws the border of the probed area."""

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
        x0, y0 = r.x, r.y
        x1, y1 = r.x + r.width, r.y + r.height
        corners = [(x0, y0), (x0, y1), (x1, y1), (x1, y0)]
        color = RED.to_vector()
        self.lines = [
            VertexData(Vector3(x, y, 0), color)
            for a, b in zip(corners, corners[1:] + corners[:1])
            for x, y in (a, b)
        ]
        return True