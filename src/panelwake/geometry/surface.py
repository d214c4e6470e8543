"""
Surface data structure for 3D panel methods.

A Surface is the arena that owns node coordinates and panel connectivity.
Everything else (lifting-surface grids, boundary layers, wake emission)
refers to nodes and panels by integer index.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
from typing import Optional
import numpy as np
from numpy.typing import NDArray

from .primitives import rotation_matrix_xyz

logger = logging.getLogger(__name__)


def _empty_nodes() -> NDArray[np.float64]:
    return np.zeros((0, 3), dtype=np.float64)


def _empty_panels() -> NDArray[np.int32]:
    return np.zeros((0, 4), dtype=np.int32)


@dataclass(eq=False)
class Surface:
    """
    Panelled surface made of quadrilaterals and triangles.

    Attributes:
        nodes: Node coordinates (N, 3)
        panels: Panel connectivity (P, 4). Triangles repeat their last node.
        name: Surface identifier
        centers: Panel center points (P, 3) - computed
        normals: Panel outward unit normals (P, 3) - computed
        areas: Panel areas (P,) - computed
    """

    nodes: NDArray[np.float64] = field(default_factory=_empty_nodes)    # (N, 3)
    panels: NDArray[np.int32] = field(default_factory=_empty_panels)    # (P, 4)
    name: str = ""

    # Computed geometry (set by compute_geometry())
    centers: Optional[NDArray[np.float64]] = field(default=None, init=False, repr=False)
    normals: Optional[NDArray[np.float64]] = field(default=None, init=False, repr=False)
    areas: Optional[NDArray[np.float64]] = field(default=None, init=False, repr=False)

    def __post_init__(self):
        """Validate surface data and compute geometry."""
        self.nodes = np.asarray(self.nodes, dtype=np.float64).reshape(-1, 3)
        self.panels = np.asarray(self.panels, dtype=np.int32)
        if self.panels.size == 0:
            self.panels = _empty_panels()
        self._validate()
        self.compute_geometry()
        logger.debug("Created %r", self)

    def _validate(self):
        """Check data consistency."""
        if self.panels.ndim != 2 or self.panels.shape[1] != 4:
            raise ValueError(f"panels must have shape (P, 4), got {self.panels.shape}")

        if self.num_panels == 0:
            return

        # Check node indices are valid
        max_idx = np.max(self.panels)
        if max_idx >= self.num_nodes:
            raise ValueError(
                f"Panel references node index {max_idx} but only "
                f"{self.num_nodes} nodes exist"
            )
        if np.min(self.panels) < 0:
            raise ValueError("Panel references a negative node index")

    @property
    def num_nodes(self) -> int:
        """Number of nodes."""
        return self.nodes.shape[0]

    @property
    def num_panels(self) -> int:
        """Number of panels."""
        return self.panels.shape[0]

    def add_node(self, point) -> int:
        """
        Append a node and return its index.

        Args:
            point: Node coordinates (3,)

        Returns:
            Index of the new node
        """
        point = np.asarray(point, dtype=np.float64)
        if point.shape != (3,):
            raise ValueError(f"Expected point of shape (3,), got {point.shape}")
        self.nodes = np.vstack([self.nodes, point])
        return self.num_nodes - 1

    def add_quadrangle(self, n0: int, n1: int, n2: int, n3: int) -> int:
        """Append a quadrilateral panel and return its index."""
        self.panels = np.vstack([self.panels, np.array([n0, n1, n2, n3], dtype=np.int32)])
        return self.num_panels - 1

    def add_triangle(self, n0: int, n1: int, n2: int) -> int:
        """Append a triangular panel and return its index."""
        return self.add_quadrangle(n0, n1, n2, n2)

    def is_triangle(self, panel: int) -> bool:
        """Check whether a panel is a triangle."""
        return bool(self.panels[panel, 3] == self.panels[panel, 2])

    def compute_geometry(self):
        """Compute panel centers, normals, and areas from current node positions."""
        if self.num_panels == 0:
            self.centers = np.zeros((0, 3), dtype=np.float64)
            self.normals = np.zeros((0, 3), dtype=np.float64)
            self.areas = np.zeros(0, dtype=np.float64)
            return

        p1 = self.nodes[self.panels[:, 0]]
        p2 = self.nodes[self.panels[:, 1]]
        p3 = self.nodes[self.panels[:, 2]]
        p4 = self.nodes[self.panels[:, 3]]

        # Triangles repeat p3, so they only count it once
        quad = (self.panels[:, 3] != self.panels[:, 2])[:, None]
        n_corners = np.where(quad, 4.0, 3.0)
        self.centers = (p1 + p2 + p3 + np.where(quad, p4, 0.0)) / n_corners

        # Normal via cross product of diagonals: n = (p3 - p1) x (p4 - p2)
        # For triangles this reduces to (p2 - p1) x (p3 - p1)
        normal = np.cross(p3 - p1, p4 - p2)
        normal_mag = np.linalg.norm(normal, axis=1)

        degenerate = np.flatnonzero(normal_mag < 1e-14)
        if degenerate.size > 0:
            raise ValueError(f"Panel {degenerate[0]} has degenerate normal (colinear diagonals)")

        self.normals = normal / normal_mag[:, None]
        self.areas = 0.5 * normal_mag

    def transform(self, rotation: NDArray[np.float64],
                  translation: Optional[NDArray[np.float64]] = None):
        """
        Apply a rigid motion to all nodes and recompute geometry.

        Args:
            rotation: 3x3 rotation matrix
            translation: Translation vector (3,), applied after rotation
        """
        rotation = np.asarray(rotation, dtype=np.float64)
        if rotation.shape != (3, 3):
            raise ValueError(f"rotation must have shape (3, 3), got {rotation.shape}")

        # Write in place; the array is shared with any caller holding it
        self.nodes[:] = (rotation @ self.nodes.T).T
        if translation is not None:
            self.nodes[:] += np.asarray(translation, dtype=np.float64)
        self.compute_geometry()

    def translate(self, translation):
        """Translate all nodes."""
        self.transform(np.eye(3), translation)

    def rotate(self, rx_deg: float = 0.0, ry_deg: float = 0.0, rz_deg: float = 0.0,
               origin=None):
        """
        Rotate all nodes about ``origin`` with Euler angles (XYZ convention).

        Args:
            rx_deg, ry_deg, rz_deg: Rotation angles about x, y, z axes (degrees)
            origin: Centre of rotation (default: coordinate origin)
        """
        rotation = rotation_matrix_xyz(np.deg2rad(rx_deg), np.deg2rad(ry_deg), np.deg2rad(rz_deg))
        if origin is None:
            self.transform(rotation)
            return
        origin = np.asarray(origin, dtype=np.float64)
        self.transform(rotation, origin - rotation @ origin)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name='{self.name}', "
            f"nodes={self.num_nodes}, "
            f"panels={self.num_panels})"
        )
