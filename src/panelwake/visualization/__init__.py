"""Visualization of lifting surfaces."""

from .surface_plot import SurfacePlotter

__all__ = ["SurfacePlotter"]
