"""Terrain heightfield analysis: interpolation, normals, peak isolation, ridge extraction and display helpers."""

__version__ = "0.1.0"