import math
from dataclasses import dataclass, field

import pytest

from toolpathview.gcodedrawer import DrawMode, GcodeDrawer, GrayscaleCode
from toolpathview.geometry import BLACK, BLUE, GREEN, NAN_VECTOR, RED, SNAN, WHITE, Color, Vector3


@dataclass
class Seg:
    start: Vector3
    end: Vector3
    fast_traverse: bool = False
    z_movement: bool = False
    drawn: bool = False
    highlight: bool = False
    spindle_speed: float = 0.0
    vertex_index: int = -1


@dataclass
class Parser:
    lines: list
    minimum_extremes: Vector3 = Vector3(0, 0, 0)
    maximum_extremes: Vector3 = Vector3(10, 10, 5)
    resolution: tuple = (4, 4)
    min_length: float = 1.0


def chain(*points):
    return [Seg(a, b) for a, b in zip(points, points[1:])]


def make(segments, **kw):
    drawer = GcodeDrawer(Parser(segments, **kw))
    drawer.color_start = GREEN
    drawer.color_end = RED
    drawer.color_normal = BLACK
    drawer.color_drawn = WHITE
    drawer.color_rapid = BLUE
    return drawer


def test_vectors_basic_path():
    segs = chain(Vector3(0, 0, 0), Vector3(1, 0, 1), Vector3(2, 0, 1), Vector3(3, 0, 1))
    drawer = make(segs)
    assert drawer.update_geometry() is True
    # first segment only yields the start point
    assert len(drawer.lines) == 4
    assert drawer.points[0].color == GREEN.to_vector()
    assert drawer.points[0].position == Vector3(1, 0, 1)
    assert drawer.points[0].start == Vector3(SNAN, SNAN, drawer.point_size)
    assert drawer.points[-1].color == RED.to_vector()
    assert drawer.points[-1].position == Vector3(3, 0, 1)
    assert drawer.lines[0].position == segs[1].start
    assert drawer.lines[1].position == segs[1].end
    assert [s.vertex_index for s in segs] == [-1, 0, 2]
    assert drawer.geometry_updated
    assert len(drawer.vertex_data()) == drawer.get_vertex_count()


def test_nan_z_segments_skipped():
    segs = chain(Vector3(0, 0, 0), Vector3(1, 0, 0), Vector3(2, 0, 0))
    segs.insert(1, Seg(Vector3(1, 0, 0), Vector3(1, 0, math.nan)))
    drawer = make(segs)
    drawer.update_data()
    assert len(drawer.lines) == 2
    assert segs[1].vertex_index == -1


def test_rapid_hidden_and_dashed():
    segs = chain(Vector3(0, 0, 0), Vector3(1, 0, 0), Vector3(2, 0, 0))
    segs[1].fast_traverse = True
    drawer = make(segs)
    drawer.draw_rapid_motion = False
    drawer.update_data()
    assert drawer.lines == []

    drawer.draw_rapid_motion = True
    drawer.draw_rapid_motion_dashed = True
    drawer.update_data()
    assert all(v.start == segs[1].start for v in drawer.lines)
    assert drawer.lines[0].color == BLUE.to_vector()


def test_linear_hidden():
    segs = chain(Vector3(0, 0, 0), Vector3(1, 0, 0), Vector3(2, 0, 0))
    drawer = make(segs)
    drawer.draw_linear_motion = False
    drawer.update_data()
    assert drawer.lines == []


def test_ignore_z_flattens():
    segs = chain(Vector3(0, 0, 3), Vector3(1, 0, 4), Vector3(2, 0, 5))
    drawer = make(segs)
    drawer.ignore_z = True
    drawer.update_data()
    assert all(v.position.z == 0 for v in drawer.lines + drawer.points)
    assert drawer.get_maximum_extremes().z == 0
    assert drawer.get_sizes() == Vector3(10, 10, 5)


def test_simplify_merges_short_segments():
    segs = chain(Vector3(0, 0, 0), Vector3(0.1, 0, 0), Vector3(0.2, 0, 0),
                 Vector3(0.3, 0, 0), Vector3(0.4, 0, 0))
    drawer = make(segs)
    drawer.simplify = True
    drawer.simplify_precision = 10.0
    drawer.update_data()
    assert len(drawer.lines) == 2
    assert drawer.lines[0].position == segs[1].start
    assert drawer.lines[1].position == segs[-1].end
    assert [s.vertex_index for s in segs[1:]] == [0, 0, 0]


def test_control_points():
    segs = chain(Vector3(0, 0, 0), Vector3(1, 0, 0), Vector3(2, 0, 0))
    drawer = make(segs)
    drawer.draw_control_points = True
    drawer.update_data()
    assert len(drawer.points) == 3
    assert drawer.points[1].start.z == drawer.point_size / 2.0


def test_segment_color_priority():
    drawer = make([])
    drawer.color_highlight = Color(1, 2, 3)
    seg = Seg(Vector3(), Vector3(), drawn=True, highlight=True, fast_traverse=True)
    assert drawer.segment_color(seg) == WHITE
    seg.drawn = False
    assert drawer.segment_color(seg) == Color(1, 2, 3)
    seg.highlight = False
    assert drawer.segment_color(seg) == BLUE
    seg.fast_traverse = False
    assert drawer.segment_color(seg) == BLACK


def test_grayscale_spindle_and_z():
    drawer = make([])
    drawer.grayscale_segments = True
    assert drawer.segment_color(Seg(Vector3(), Vector3(), spindle_speed=0)) == WHITE
    assert drawer.segment_color(Seg(Vector3(), Vector3(), spindle_speed=255)) == BLACK
    assert drawer.segment_color(Seg(Vector3(), Vector3(), spindle_speed=1000)) == BLACK
    drawer.grayscale_code = GrayscaleCode.Z
    assert drawer.segment_color(Seg(Vector3(0, 0, 255), Vector3())) == BLACK
    assert drawer.segment_color(Seg(Vector3(0, 0, 0), Vector3(), spindle_speed=255)) == WHITE


def test_pending_updates_and_full_update():
    drawer = make(chain(Vector3(), Vector3(1, 0, 0)))
    assert drawer.has_pending_updates() is False
    drawer.update(3)
    drawer.update([4, 5])
    assert drawer.has_pending_updates() is True
    drawer.update()
    assert drawer.has_pending_updates() is False
    assert drawer.needs_update_geometry() is True


def test_update_vectors_recolors_segment():
    segs = chain(Vector3(0, 0, 0), Vector3(1, 0, 0), Vector3(2, 0, 0), Vector3(3, 0, 0))
    drawer = make(segs)
    drawer.update_data()
    segs[2].drawn = True
    drawer.update(2)
    drawer.update(99)
    assert drawer.update_data() is True
    idx = segs[2].vertex_index
    assert drawer.lines[idx].color == WHITE.to_vector()
    assert drawer.lines[idx + 1].color == WHITE.to_vector()
    assert drawer.lines[0].color == BLACK.to_vector()
    assert drawer.has_pending_updates() is False


def test_raster_image_and_texture_quad():
    segs = [Seg(Vector3(0, 0, 0), Vector3(2, 1, 0))]
    drawer = make(segs)
    drawer.draw_mode = DrawMode.RASTER
    drawer.update_data()
    assert len(drawer.image) == 4
    assert bytes(drawer.image[1][6:9]) == bytes((BLACK.r, BLACK.g, BLACK.b))
    assert bytes(drawer.image[0][0:3]) == bytes((WHITE.r, WHITE.g, WHITE.b))
    assert len(drawer.triangles) == 6
    assert drawer.lines == []
    assert drawer.texture is drawer.image
    assert drawer.triangles[1].position == Vector3(10, 10, 0)
    assert drawer.triangles[1].start == Vector3(SNAN, 1, 1)

    segs[0].drawn = True
    drawer.color_drawn = GREEN
    drawer.update(0)
    assert drawer.update_data() is False
    assert bytes(drawer.image[1][6:9]) == bytes((GREEN.r, GREEN.g, GREEN.b))


def test_raster_too_large_falls_back_to_outline():
    drawer = make([Seg(Vector3(), Vector3(1, 1, 0))], resolution=(9000, 10))
    drawer.draw_mode = DrawMode.RASTER
    drawer.update_data()
    assert drawer.image is None
    assert drawer.triangles == []
    assert len(drawer.lines) == 6
    assert all(v.start == NAN_VECTOR for v in drawer.lines)


def test_missing_parser_raises():
    drawer = GcodeDrawer()
    with pytest.raises(RuntimeError):
        drawer.update_data()