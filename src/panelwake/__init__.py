"""
Lifting-surface geometry and trailing-edge wake emission for unsteady panel methods.
"""

from .config import Parameters
from .geometry import Surface, LiftingSurface, LiftingSurfaceBuilder, build_wing
from .boundary_layers import BoundaryLayer, DummyBoundaryLayer, ThwaitesBoundaryLayer
from .shape_generators import EllipseGenerator, NACA4AirfoilGenerator

__version__ = "0.1.0"

__all__ = [
    "Parameters",
    "Surface",
    "LiftingSurface",
    "LiftingSurfaceBuilder",
    "build_wing",
    "BoundaryLayer",
    "DummyBoundaryLayer",
    "ThwaitesBoundaryLayer",
    "EllipseGenerator",
    "NACA4AirfoilGenerator",
]
