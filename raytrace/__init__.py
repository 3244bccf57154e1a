"""Vectors, camera, PPM textures, geometry and scene intersection for a path tracer."""

__version__ = "0.1.0"