import math

from toolpathview.geometry import RED, SNAN, Color, Rect, Vector3
from toolpathview.heightmapinterpolationdrawer import HeightMapInterpolationDrawer


def _drawer(data, rect=Rect(0, 0, 10, 20)):
    drawer = HeightMapInterpolationDrawer()
    drawer.border_rect = rect
    drawer.data = data
    return drawer


def test_no_data_clears_lines():
    drawer = HeightMapInterpolationDrawer()
    drawer.lines = [None]
    assert drawer.update_data() is True
    assert drawer.lines == []


def test_empty_data_clears_lines():
    drawer = _drawer([])
    assert drawer.update_data() is True
    assert drawer.lines == []


def test_grid_positions():
    drawer = _drawer([[0.0, 1.0], [2.0, 3.0]])
    drawer.update_data()
    assert [v.position for v in drawer.lines] == [
        Vector3(0, 0, 0.0), Vector3(10, 0, 1.0),
        Vector3(0, 20, 2.0), Vector3(10, 20, 3.0),
        Vector3(0, 0, 0.0), Vector3(0, 20, 2.0),
        Vector3(10, 0, 1.0), Vector3(10, 20, 3.0),
    ]
    assert all(v.start == Vector3(SNAN, SNAN, SNAN) for v in drawer.lines)


def test_colours_span_from_low_to_high():
    drawer = _drawer([[0.0, 1.0], [2.0, 3.0]])
    drawer.update_data()
    highest = [v.color for v in drawer.lines if v.position.z == 3.0]
    lowest = [v.color for v in drawer.lines if v.position.z == 0.0]
    assert highest and all(c == RED.to_vector() for c in highest)
    assert lowest and all(c == Color.from_hsv_f(0.67, 1.0, 1.0).to_vector() for c in lowest)


def test_nan_cells_skip_segments():
    drawer = _drawer([[0.0, math.nan], [2.0, 3.0]])
    drawer.update_data()
    assert len(drawer.lines) == 6
    nan_vertices = [v for v in drawer.lines if math.isnan(v.position.z)]
    assert len(nan_vertices) == 1
    # The NaN vertex keeps the colour of the vertex before it.
    index = drawer.lines.index(nan_vertices[0])
    assert drawer.lines[index].color == drawer.lines[index - 1].color


def test_constant_surface_does_not_fail():
    drawer = _drawer([[1.0, 1.0], [1.0, 1.0]])
    assert drawer.update_data() is True
    assert len(drawer.lines) == 8
    assert len({v.color for v in drawer.lines}) == 1


def test_data_setter_marks_stale_but_border_does_not():
    drawer = _drawer([[1.0]])
    drawer.update_geometry()
    drawer.border_rect = Rect(1, 2, 3, 4)
    assert drawer.needs_update_geometry() is False
    drawer.data = [[2.0, 3.0]]
    assert drawer.needs_update_geometry() is True
    assert drawer.data == [[2.0, 3.0]]


def test_update_geometry_uploads_lines():
    drawer = _drawer([[0.0, 1.0, 2.0]], Rect(0, 0, 4, 0))
    assert drawer.update_geometry() is True
    assert drawer.vertex_data() == drawer.lines
    assert [v.position.x for v in drawer.lines] == [0, 2, 2, 4]