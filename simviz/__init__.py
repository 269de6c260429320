"""Vertex data builders for lines, axes, grids, signal traces, voxels and rod meshes."""

__version__ = "0.1.0"
__all__ = ["axes", "color", "grid", "lines", "rod", "signal", "vector", "voxels"]