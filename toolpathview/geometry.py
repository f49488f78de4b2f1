"""Basic geometric and colour types used by the drawables."""

from __future__ import annotations

import colorsys
import math
from dataclasses import dataclass, replace

SNAN = 65536.0
"""Marker value the shaders treat as 'not a number'."""


@dataclass(frozen=True)
class Vector3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def with_z(self, z: float) -> Vector3:
        """Return a copy with the z component replaced."""
        return replace(self, z=z)

    def is_nan(self) -> bool:
        """True if any component is NaN."""
        return any(math.isnan(c) for c in self)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by origin and size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


def _channel(value: float) -> int:
    return max(0, min(255, round(value * 255)))


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    @classmethod
    def from_hsl(cls, h: int, s: int, l: int) -> Color:
        """Build a colour from integer HSL (hue 0-359, saturation and lightness 0-255)."""
        if not (0 <= s <= 255 and 0 <= l <= 255 and (h == -1 or 0 <= h < 360)):
            raise ValueError(f"invalid HSL colour: {h}, {s}, {l}")
        hue = 0.0 if h == -1 else h / 360.0
        r, g, b = colorsys.hls_to_rgb(hue, l / 255.0, s / 255.0)
        return cls(_channel(r), _channel(g), _channel(b))

    @classmethod
    def from_hsv_f(cls, h: float, s: float, v: float) -> Color:
        """Build a colour from floating-point HSV, each component in 0..1 (hue -1 is achromatic)."""
        valid = all(0.0 <= c <= 1.0 for c in (s, v)) and (h == -1.0 or 0.0 <= h <= 1.0)
        if not valid:
            raise ValueError(f"invalid HSV colour: {h}, {s}, {v}")
        if h == -1.0:
            r = g = b = v
        else:
            r, g, b = colorsys.hsv_to_rgb(h % 1.0, s, v)
        return cls(_channel(r), _channel(g), _channel(b))

    def rgb(self) -> int:
        """Pack as 0xAARRGGBB with an opaque alpha."""
        return 0xFF000000 | (self.r << 16) | (self.g << 8) | self.b

    def to_vector(self) -> tuple[float, float, float, float]:
        """Normalised (r, g, b, a) components as passed to the shaders."""
        return (self.r / 255.0, self.g / 255.0, self.b / 255.0, self.a / 255.0)


RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)
BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)

NAN_VECTOR = Vector3(SNAN, SNAN, SNAN)


@dataclass(frozen=True)
class VertexData:
    """One vertex: position, colour vector and the line start / point-size attribute."""

    position: Vector3
    color: tuple[float, float, float, float]
    start: Vector3 = NAN_VECTOR