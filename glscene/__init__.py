"""OpenGL scene viewer with a free-look camera, lit materials and textured geometry."""

__version__ = "0.1.0"