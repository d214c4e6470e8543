"""Section generators for lifting-surface construction."""

from .ellipse_generator import EllipseGenerator
from .naca4_airfoil_generator import NACA4AirfoilGenerator

__all__ = [
    "EllipseGenerator",
    "NACA4AirfoilGenerator",
]
