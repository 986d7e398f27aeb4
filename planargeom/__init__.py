"""Planar and 3D computational geometry on flat coordinate sequences."""

__version__ = "0.1.0"