[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "toolpathview"
version = "1.1.8"
description = "Vertex geometry builders for previewing CNC toolpaths, tools and height maps"
requires-python = ">=3.10"
dependencies = []
keywords = ["cnc", "gcode", "toolpath", "heightmap", "geometry", "visualization"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Manufacturing",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["toolpathview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
