"""Coloured wireframe of the interpolated height map surface."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .geometry import BLACK, SNAN, Color, Rect, Vector3, VertexData
from .shaderdrawable import ShaderDrawable

HeightGrid = Sequence[Sequence[float]]

_HUE_RANGE = 0.67


def _nan_min(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return min(a, b)


def _nan_max(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return max(a, b)


class HeightMapInterpolationDrawer(ShaderDrawable):
    """Draws the interpolated heights as a grid coloured from blue (low) to red (high)."""

    def __init__(self) -> None:
        super().__init__()
        self._data: HeightGrid | None = None
        self.border_rect = Rect()

    @property
    def data(self) -> HeightGrid | None:
        return self._data

    @data.setter
    def data(self, value: HeightGrid | None) -> None:
        self._data = value
        self.update()

    def update_data(self) -> bool:
        data = self._data
        self.lines = []
        if not data:
            return True

        rows = len(data)
        cols = len(data[0])
        rect = self.border_rect
        step_x = rect.width / (cols - 1) if cols > 1 else 0.0
        step_y = rect.height / (rows - 1) if rows > 1 else 0.0
        start = Vector3(SNAN, SNAN, SNAN)

        low = high = data[0][0]
        for row in data:
            for value in row:
                low = _nan_min(low, value)
                high = _nan_max(high, value)
        span = high - low

        color = BLACK

        def colored(value: float) -> tuple[float, float, float, float]:
            # An invalid hue leaves the previous colour in place.
            nonlocal color
            if span != 0 and not math.isnan(span) and not math.isnan(value):
                hue = _HUE_RANGE * (high - value) / span
                if 0.0 <= hue <= 1.0:
                    color = Color.from_hsv_f(hue, 1.0, 1.0)
            return color.to_vector()

        def vertex(i: int, j: int) -> VertexData:
            value = data[i][j]
            position = Vector3(rect.x + step_x * j, rect.y + step_y * i, value)
            return VertexData(position, colored(value), start)

        # Horizontal lines
        for i in range(rows):
            for j in range(1, cols):
                if math.isnan(data[i][j]):
                    continue
                self.lines.append(vertex(i, j - 1))
                self.lines.append(vertex(i, j))

        # Vertical lines
        for j in range(cols):
            for i in range(1, rows):
                if math.isnan(data[i][j]):
                    continue
                self.lines.append(vertex(i - 1, j))
                self.lines.append(vertex(i, j))

        return True