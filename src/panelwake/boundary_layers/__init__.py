"""Boundary layer models: the capability protocol and its variants."""

from .boundary_layer import BoundaryLayer
from .dummy_boundary_layer import DummyBoundaryLayer
from .thwaites_boundary_layer import ThwaitesBoundaryLayer

__all__ = [
    "BoundaryLayer",
    "DummyBoundaryLayer",
    "ThwaitesBoundaryLayer",
]
