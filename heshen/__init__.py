"""A small software renderer with vectors, cameras, a scene graph, a line rasterizer and a WAVE reader."""

__version__ = "0.1.0"