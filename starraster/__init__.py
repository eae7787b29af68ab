"""Pure-Python raster drawing onto RGBA pixel canvases, with geometry helpers and input state tracking."""

__version__ = "0.1.0"