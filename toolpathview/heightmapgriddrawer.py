"""Probe grid of the height map: measured points, pending probes and grid lines."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .geometry import BLUE, SNAN, Color, Rect, Vector3, VertexData
from .shaderdrawable import ShaderDrawable

PENDING_COLOR = Color(255, 153, 0)
"""Colour of the vertical markers for points that have not been probed yet."""

HeightMapModel = Sequence[Sequence[float]]


class HeightMapGridDrawer(ShaderDrawable):
    """Draws the probe grid from a table of heights (rows along Y, columns along X).

    A NaN height marks a point that has not been probed; it is drawn as a vertical
    line from ``z_top`` down to ``z_bottom``.
    """

    def __init__(self) -> None:
        super().__init__()
        self._model: HeightMapModel | None = None
        self._grid_size: tuple[float, float] = (0.0, 0.0)
        self._border_rect = Rect()
        self._z_top = 0.0
        self._z_bottom = 0.0
        self.point_size = 4.0

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
    def model(self) -> HeightMapModel | None:
        return self._model

    @model.setter
    def model(self, value: HeightMapModel | None) -> None:
        self._model = value
        self.update()

    def update_data(self) -> bool:
        self.lines = []
        self.points = []

        model = self._model
        if not model:
            return True

        rows = len(model)
        cols = len(model[0])
        rect = self._border_rect
        step_x = rect.width / (cols - 1) if cols > 1 else 0.0
        step_y = rect.height / (rows - 1) if rows > 1 else 0.0
        start = Vector3(SNAN, SNAN, self.point_size)

        def xy(i: int, j: int) -> tuple[float, float]:
            return rect.x + step_x * j, rect.y + step_y * i

        pending = PENDING_COLOR.to_vector()
        blue = BLUE.to_vector()

        # Probe path / dots
        for i, row in enumerate(model):
            for j, height in enumerate(row):
                x, y = xy(i, j)
                if math.isnan(height):
                    self.lines.append(VertexData(Vector3(x, y, self._z_top), pending, start))
                    self.lines.append(VertexData(Vector3(x, y, self._z_bottom), pending, start))
                else:
                    self.points.append(VertexData(Vector3(x, y, height), blue, start))

        # Horizontal grid lines
        for i, row in enumerate(model):
            for j in range(1, cols):
                if math.isnan(row[j]):
                    continue
                self.lines.append(VertexData(Vector3(*xy(i, j - 1), row[j - 1]), blue, start))
                self.lines.append(VertexData(Vector3(*xy(i, j), row[j]), blue, start))

        # Vertical grid lines
        for j in range(cols):
            for i in range(1, rows):
                if math.isnan(model[i][j]):
                    continue
                self.lines.append(VertexData(Vector3(*xy(i - 1, j), model[i - 1][j]), blue, start))
                self.lines.append(VertexData(Vector3(*xy(i, j), model[i][j]), blue, start))

        return True