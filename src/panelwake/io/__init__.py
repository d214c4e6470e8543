"""IO utilities: surface readers/writers and case loader."""

from .geometry_io import SurfaceReader, SurfaceWriter
from .case_loader import CaseLoader

__all__ = [
    "SurfaceReader",
    "SurfaceWriter",
    "CaseLoader",
]
