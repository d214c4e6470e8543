"""Surfaces, lifting surfaces, and grid construction."""

from .primitives import normalize, rotation_matrix_xyz
from .surface import Surface
from .lifting_surface import LiftingSurface
from .lifting_surface_builder import LiftingSurfaceBuilder, build_wing

__all__ = [
    "normalize",
    "rotation_matrix_xyz",
    "Surface",
    "LiftingSurface",
    "LiftingSurfaceBuilder",
    "build_wing",
]
