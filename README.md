# toolpathview

`toolpathview` builds the vertex geometry needed to preview CNC work in 3D:
G-code toolpaths, the cutting tool, the work origin, a selected point and
probed height maps. Every drawer produces plain lists of `VertexData`
(a position, an RGBA color vector and a "start" vector that shaders use for
dashed lines and point sizes), ready to hand to any renderer. The package uses
only the standard library.

## Installation

```
pip install toolpathview
```

## Building blocks

- `toolpathview.geometry`
  - `Vector3`: immutable 3D vector with `+`, `-`, `length()`, `with_z()` and
    `is_nan()`.
  - `Rect`: `x`, `y`, `width`, `height`.
  - `Color`: 8-bit RGBA; `Color.from_hsl()`, `Color.from_hsv_f()`, `rgb()`
    (packed `0xAARRGGBB`) and `to_vector()` (normalised floats).
  - `VertexData`: `position`, `color`, `start`.
  - `SNAN` (65536.0), the marker the shaders read as "not a number".
- `toolpathview.shaderdrawable.ShaderDrawable`: the base of every drawer. It
  holds the `triangles`, `lines` and `points` vertex lists, plus `line_width`,
  `point_size` and `visible`. `update()` marks the geometry stale,
  `needs_update_geometry()` reports it, `update_geometry()` calls
  `update_data()` and, when that returns true, rebuilds the buffer that
  `vertex_data()` returns (triangles, then lines, then points).
  `get_vertex_count()` counts the current vertices.
- Drawers:
  - `OriginDrawer`: X/Y/Z axis arrows and a 2×2 square around the origin.
  - `SelectionDrawer`: one point at `end_position`, in `color`.
  - `ToolDrawer`: a wireframe tool with `tool_diameter`, `tool_length`,
    `tool_position`, `rotation_angle`, `tool_angle` (which sets the conical
    tip's `end_length`) and `color`; `rotate(angle)` turns it by degrees.
    The module also provides `create_circle()` and `normalize_angle()`.
  - `HeightMapBorderDrawer`: the outline of `border_rect`.
  - `HeightMapGridDrawer`: probe points and grid lines from `model`, a
    sequence of rows of heights laid over `border_rect`. A NaN height is an
    unprobed point, drawn as an orange vertical line from `z_top` to
    `z_bottom`.
  - `HeightMapInterpolationDrawer`: the grid in `data` drawn as lines colored
    from blue (lowest) to red (highest). Setting `border_rect` does not mark
    the geometry stale; call `update()` afterwards.
  - `GcodeDrawer` (in `toolpathview.gcodedrawer`): a toolpath, drawn as
    vectors or as a raster image (`DrawMode.VECTORS` / `DrawMode.RASTER`).
    Options include `simplify`, `simplify_precision`, `ignore_z`,
    `draw_linear_motion`, `draw_rapid_motion`, `draw_rapid_motion_dashed`,
    `draw_control_points`, the `color_*` attributes, and grayscale coloring
    by spindle speed or Z (`grayscale_segments`, `GrayscaleCode.S` /
    `GrayscaleCode.Z`, `grayscale_min`, `grayscale_max`).

## Example: a tool

```python
from toolpathview.geometry import Color, Vector3
from toolpathview.tooldrawer import ToolDrawer

tool = ToolDrawer()
tool.color = Color(255, 153, 0)
tool.tool_position = Vector3(10.0, 5.0, 2.0)
tool.rotate(45)

if tool.needs_update_geometry():
    tool.update_geometry()

for vertex in tool.vertex_data():
    print(vertex.position, vertex.color)
print(tool.get_vertex_count(), "vertices")
```

## Example: a toolpath

`GcodeDrawer` reads any object with `lines`, `minimum_extremes`,
`maximum_extremes`, `resolution` (width, height in pixels, used by raster
mode) and `min_length` (the raster pixel size). Each segment needs `start`,
`end`, `fast_traverse`, `z_movement`, `drawn`, `highlight`, `spindle_speed`
and a writable `vertex_index`.

```python
from dataclasses import dataclass, field

from toolpathview.gcodedrawer import GcodeDrawer
from toolpathview.geometry import Color, Vector3


@dataclass
class Segment:
    start: Vector3
    end: Vector3
    fast_traverse: bool = False
    z_movement: bool = False
    drawn: bool = False
    highlight: bool = False
    spindle_speed: float = 0.0
    vertex_index: int = -1


@dataclass
class Toolpath:
    lines: list = field(default_factory=list)
    minimum_extremes: Vector3 = Vector3()
    maximum_extremes: Vector3 = Vector3()
    resolution: tuple = (0, 0)
    min_length: float = 1.0


path = Toolpath(
    lines=[
        Segment(Vector3(0, 0, 0), Vector3(0, 0, 0)),
        Segment(Vector3(0, 0, 0), Vector3(10, 0, 0)),
        Segment(Vector3(10, 0, 0), Vector3(10, 10, 0)),
    ],
    maximum_extremes=Vector3(10, 10, 0),
)

drawer = GcodeDrawer(path)
drawer.color_drawn = Color(217, 217, 217)
drawer.update_geometry()              # two line segments, start and end points

path.lines[1].drawn = True
drawer.update(1)                      # queue segment 1 for recoloring
if drawer.has_pending_updates():
    drawer.update_geometry()          # only the queued segments change color
```

Calling `update()` with no argument discards queued indexes and rebuilds
everything on the next `update_geometry()`. In raster mode the image is a list
of `bytearray` rows (RGB, three bytes per pixel) kept in `drawer.image`; it is
only built when both sides of `resolution` are between 1 and 8192, otherwise
the drawer outlines the extents with lines.

## What the package does not do

It does not parse G-code, probe a machine, interpolate height maps, open a
window or talk to a GPU. It only turns data you supply into vertex lists (and,
for raster toolpaths, an RGB pixel buffer); drawing them is up to your
renderer.

## Running the tests

```
pip install "toolpathview[test]"
pytest
```