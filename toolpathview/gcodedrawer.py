"""Geometry of a parsed G-code toolpath, as vectors or as a raster image."""

from __future__ import annotations

import enum
import logging
import math
from collections.abc import Iterable, Sequence
from dataclasses import replace
from typing import Protocol

from .geometry import BLACK, NAN_VECTOR, RED, SNAN, WHITE, Color, Vector3, VertexData
from .shaderdrawable import ShaderDrawable

logger = logging.getLogger(__name__)

MAX_IMAGE_SIZE = 8192
"""Largest raster width or height that is still rendered as an image."""

RasterImage = list[bytearray]
"""RGB image: one bytearray of ``width * 3`` bytes per row."""


class Segment(Protocol):
    """A toolpath segment as produced by the view parser."""

    start: Vector3
    end: Vector3
    fast_traverse: bool
    z_movement: bool
    drawn: bool
    highlight: bool
    spindle_speed: float
    vertex_index: int


class ViewParser(Protocol):
    """What the drawer needs from the toolpath view parser."""

    lines: Sequence[Segment]
    minimum_extremes: Vector3
    maximum_extremes: Vector3
    resolution: tuple[int, int]
    min_length: float


class GrayscaleCode(enum.Enum):
    """Which value drives the grey level of plain segments."""

    S = "S"
    Z = "Z"


class DrawMode(enum.Enum):
    """How the toolpath is drawn."""

    VECTORS = "vectors"
    RASTER = "raster"


def _segment_type(segment: Segment) -> int:
    return int(bool(segment.fast_traverse)) + int(bool(segment.z_movement)) * 2


def _gray_level(value: float, low: int, high: int) -> int:
    span = high - low
    if span == 0:
        level = 255.0 if value <= 0 else 0.0
    else:
        level = 255 - 255.0 / span * value
    if math.isnan(level):
        return 0
    if math.isinf(level):
        return 255 if level > 0 else 0
    return max(0, min(255, int(level)))


class GcodeDrawer(ShaderDrawable):
    """Turns the segments of a view parser into line/point vertices or a raster texture."""

    def __init__(self, view_parser: ViewParser | None = None) -> None:
        super().__init__()
        self.view_parser = view_parser
        self.point_size = 6.0
        self.draw_mode = DrawMode.VECTORS

        self.simplify = False
        self.simplify_precision = 0.0
        self.ignore_z = False
        self.grayscale_segments = False
        self.grayscale_code = GrayscaleCode.S
        self.grayscale_min = 0
        self.grayscale_max = 255
        self.draw_linear_motion = True
        self.draw_rapid_motion = True
        self.draw_rapid_motion_dashed = False
        self.draw_control_points = False

        self.color_normal: Color = BLACK
        self.color_rapid: Color = BLACK
        self.color_drawn: Color = BLACK
        self.color_highlight: Color = BLACK
        self.color_z_movement: Color = BLACK
        self.color_start: Color = BLACK
        self.color_end: Color = BLACK

        self.image: RasterImage | None = None
        self.geometry_updated = False
        self._indexes: list[int] = []

    # -- update scheduling -------------------------------------------------

    def update(self, indexes: int | Iterable[int] | None = None) -> None:
        """Without arguments rebuild everything; otherwise queue segment indexes for refresh."""
        if indexes is None:
            self._indexes.clear()
            self.geometry_updated = False
            super().update()
        elif isinstance(indexes, int):
            self._indexes.append(indexes)
        else:
            self._indexes.extend(indexes)

    def has_pending_updates(self) -> bool:
        """True when queued segments wait to be refreshed.

        A periodic caller should then mark the geometry stale with
        ``ShaderDrawable.update``.
        """
        return bool(self._indexes)

    def update_data(self) -> bool:
        if self.draw_mode is DrawMode.VECTORS:
            return self._update_vectors() if self._indexes else self._prepare_vectors()
        return self._update_raster() if self._indexes else self._prepare_raster()

    # -- helpers -----------------------------------------------------------

    def _parser(self) -> ViewParser:
        if self.view_parser is None:
            raise RuntimeError("no view parser set")
        return self.view_parser

    def _flat(self, v: Vector3) -> Vector3:
        return v.with_z(0) if self.ignore_z else v

    def segment_color(self, segment: Segment) -> Color:
        """Colour of a segment according to its state and the grayscale settings."""
        if segment.drawn:
            return self.color_drawn
        if segment.highlight:
            return self.color_highlight
        if segment.fast_traverse:
            return self.color_rapid
        if segment.z_movement:
            return self.color_z_movement
        if self.grayscale_segments:
            if self.grayscale_code is GrayscaleCode.S:
                value = segment.spindle_speed
            else:
                value = segment.start.z
            level = _gray_level(value, self.grayscale_min, self.grayscale_max)
            return Color.from_hsl(0, 0, level)
        return self.color_normal

    # -- vectors -----------------------------------------------------------

    def _prepare_vectors(self) -> bool:
        segments = self._parser().lines
        n = len(segments)
        self.lines = []
        self.points = []
        self.triangles = []
        self.texture = None

        draw_first_point = True
        i = -1
        while i + 1 < n:
            i += 1
            segment = segments[i]
            end = segment.end
            if math.isnan(end.z):
                continue

            if draw_first_point:
                if math.isnan(end.x) or math.isnan(end.y):
                    continue
                self.points.append(VertexData(
                    self._flat(end), self.color_start.to_vector(),
                    Vector3(SNAN, SNAN, self.point_size)))
                draw_first_point = False
                continue
            if self.draw_control_points:
                if math.isnan(end.x) or math.isnan(end.y):
                    continue
                self.points.append(VertexData(
                    self._flat(end), self.segment_color(segment).to_vector(),
                    Vector3(SNAN, SNAN, self.point_size / 2.0)))

            if segment.fast_traverse:
                if not self.draw_rapid_motion:
                    continue
                start = segment.start if self.draw_rapid_motion_dashed else NAN_VECTOR
            elif not self.draw_linear_motion:
                continue
            else:
                start = NAN_VECTOR

            first = i
            if self.simplify and i < n - 1:
                length = (segment.end - segment.start).length()
                kind = _segment_type(segment)
                while True:
                    segments[i].vertex_index = len(self.lines)
                    i += 1
                    if i < n - 1:
                        nxt = segments[i]
                        length += (nxt.end - nxt.start).length()
                    if not (length < self.simplify_precision and i < n
                            and _segment_type(segments[i]) == kind):
                        break
                i -= 1
            else:
                segment.vertex_index = len(self.lines)

            last = segments[i]
            color = self.segment_color(last).to_vector()
            self.lines.append(VertexData(self._flat(segments[first].start), color, start))
            self.lines.append(VertexData(self._flat(last.end), color, start))

            if i == n - 1:
                self.points.append(VertexData(
                    self._flat(last.end), self.color_end.to_vector(),
                    Vector3(SNAN, SNAN, self.point_size)))

        self.geometry_updated = True
        self._indexes.clear()
        return True

    def _update_vectors(self) -> bool:
        segments = self._parser().lines
        for i in self._indexes:
            if i < 0 or i > len(segments) - 1:
                continue
            index = segments[i].vertex_index
            if index >= 0:
                color = self.segment_color(segments[i]).to_vector()
                self.lines[index] = replace(self.lines[index], color=color)
                self.lines[index + 1] = replace(self.lines[index + 1], color=color)
        self._indexes.clear()
        return True

    # -- raster ------------------------------------------------------------

    def _set_pixel(self, image: RasterImage, segment: Segment, color: Color) -> None:
        parser = self._parser()
        size = parser.min_length
        origin = parser.minimum_extremes
        if size == 0:
            logger.debug("zero pixel size, pixel not updated")
            return
        x = (segment.end.x - origin.x) / size
        y = (segment.end.y - origin.y) / size
        if math.isnan(x) or math.isnan(y) or math.isinf(x) or math.isinf(y):
            logger.debug("error updating pixel %s %s", x, y)
            return
        col, row = int(x), int(y)
        if not (0 <= row < len(image) and 0 <= col * 3 < len(image[row])):
            logger.debug("pixel %s %s outside the image", col, row)
            return
        image[row][col * 3:col * 3 + 3] = bytes((color.r, color.g, color.b))

    def _prepare_raster(self) -> bool:
        parser = self._parser()
        width, height = parser.resolution
        image: RasterImage | None = None
        if width <= MAX_IMAGE_SIZE and height <= MAX_IMAGE_SIZE and width > 0 and height > 0:
            white = bytes((WHITE.r, WHITE.g, WHITE.b)) * width
            image = [bytearray(white) for _ in range(height)]
            for segment in parser.lines:
                if not math.isnan(segment.end.length()):
                    self._set_pixel(image, segment, self.segment_color(segment))

        self.lines = []
        self.points = []
        self.triangles = []
        self.texture = None

        lo = self.get_minimum_extremes()
        hi = self.get_maximum_extremes()
        red = RED.to_vector()
        corners = [
            ((lo.x, lo.y), (0, 0)),
            ((hi.x, hi.y), (1, 1)),
            ((lo.x, hi.y), (0, 1)),
            ((lo.x, lo.y), (0, 0)),
            ((hi.x, lo.y), (1, 0)),
            ((hi.x, hi.y), (1, 1)),
        ]

        if image is not None:
            self.triangles = [
                VertexData(Vector3(px, py, 0), red, Vector3(SNAN, u, v))
                for (px, py), (u, v) in corners
            ]
            self.texture = image
            self.image = image
        else:
            self.lines = [VertexData(Vector3(px, py, 0), red, NAN_VECTOR) for (px, py), _ in corners]
            self.image = None

        self.geometry_updated = True
        self._indexes.clear()
        return True

    def _update_raster(self) -> bool:
        if self.image is not None:
            segments = self._parser().lines
            for i in self._indexes:
                segment = segments[i]
                self._set_pixel(self.image, segment, self.segment_color(segment))
        self._indexes.clear()
        return False

    # -- extents -----------------------------------------------------------

    def get_sizes(self) -> Vector3:
        parser = self._parser()
        return parser.maximum_extremes - parser.minimum_extremes

    def get_minimum_extremes(self) -> Vector3:
        return self._flat(self._parser().minimum_extremes)

    def get_maximum_extremes(self) -> Vector3:
        return self._flat(self._parser().maximum_extremes)