"""Vectors, colours, meshes, primitive shapes, OBJ loading and pan/zoom views for simple 3D rendering."""

__version__ = "0.1.0"