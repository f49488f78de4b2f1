"""Vertex geometry builders for previewing CNC toolpaths, tools, the origin and height maps."""

__version__ = "1.1.8"

__all__ = [
    "geometry",
    "shaderdrawable",
    "origindrawer",
    "heightmapborderdrawer",
    "selectiondrawer",
    "tooldrawer",
    "heightmapgriddrawer",
    "heightmapinterpolationdrawer",
    "gcodedrawer",
]