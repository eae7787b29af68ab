[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "starraster"
version = "0.1.0"
description = "Pure-Python software rasterizer: clipped RGBA pixel canvases, lines, circles, ellipses, polygons, pies, bezier curves, integer geometry helpers and input state tracking."
requires-python = ">=3.10"
dependencies = []
keywords = ["raster", "graphics", "drawing", "primitives", "antialiasing", "canvas", "geometry"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["starraster"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
