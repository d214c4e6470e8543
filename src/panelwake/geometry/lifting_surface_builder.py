"""
Construction of lifting-surface grids from airfoil sections.
"""

from __future__ import annotations
import logging
from typing import List, Optional, Sequence, Tuple
import numpy as np
from numpy.typing import NDArray

from .lifting_surface import LiftingSurface

logger = logging.getLogger(__name__)

Columns = Tuple[NDArray[np.int32], NDArray[np.int32]]


class LiftingSurfaceBuilder:
    """
    Builds the upper/lower structured grid of a LiftingSurface section by section.

    Section points are ordered starting at the trailing edge (index 0),
    running over the upper side to the leading edge and back along the lower
    side. Both sides must hold the same number of points, so a section has
    an even number of points with the leading edge at the middle index.

    Typical use::

        builder = LiftingSurfaceBuilder(surface)
        columns = [builder.create_nodes_for_points(p) for p in sections]
        strips = [builder.create_panels_between_shapes(a, b)
                  for a, b in zip(columns[:-1], columns[1:])]
        builder.finish(columns, strips)
    """

    def __init__(self, surface: LiftingSurface):
        self.surface = surface

    def create_nodes_for_points(self, points: NDArray[np.float64],
                                leading_edge_index: Optional[int] = None) -> Columns:
        """
        Add the nodes of one section to the surface.

        Args:
            points: Section points (M, 3), trailing edge first
            leading_edge_index: Index of the leading edge point (default: M // 2)

        Returns:
            Tuple (upper, lower) of node index columns, leading edge first
        """
        points = np.asarray(points, dtype=np.float64)
        if points.ndim != 2 or points.shape[1] != 3:
            raise ValueError(f"points must have shape (M, 3), got {points.shape}")

        n_points = points.shape[0]
        if n_points < 4 or n_points % 2 != 0:
            raise ValueError(f"A section needs an even number of at least 4 points, got {n_points}")

        if leading_edge_index is None:
            leading_edge_index = n_points // 2
        if 2 * leading_edge_index != n_points:
            raise ValueError(
                f"Leading edge index {leading_edge_index} does not split "
                f"{n_points} points into equal upper and lower sides"
            )

        first = self.surface.num_nodes
        self.surface.nodes = np.vstack([self.surface.nodes, points])
        node_ids = np.arange(first, first + n_points, dtype=np.int32)

        # Upper: leading edge back to trailing edge over the first half
        upper = node_ids[leading_edge_index::-1]
        # Lower: leading edge over the second half, closing on the trailing edge
        lower = np.append(node_ids[leading_edge_index:], node_ids[0])

        return upper, lower

    def create_panels_between_shapes(self, columns_a: Columns, columns_b: Columns) -> Columns:
        """
        Add one spanwise strip of quadrilaterals between two sections.

        Panels are oriented so that their normals point out of the body.

        Args:
            columns_a: (upper, lower) node columns of the inboard section
            columns_b: (upper, lower) node columns of the outboard section

        Returns:
            Tuple (upper, lower) of panel index columns, leading edge first
        """
        upper_a, lower_a = columns_a
        upper_b, lower_b = columns_b
        if len(upper_a) != len(upper_b) or len(lower_a) != len(lower_b):
            raise ValueError("Sections must have the same number of chordwise nodes")

        upper_panels = []
        lower_panels = []
        for i in range(len(upper_a) - 1):
            upper_panels.append(self.surface.add_quadrangle(
                upper_a[i], upper_b[i], upper_b[i + 1], upper_a[i + 1]))
            lower_panels.append(self.surface.add_quadrangle(
                lower_a[i], lower_a[i + 1], lower_b[i + 1], lower_b[i]))

        return np.array(upper_panels, dtype=np.int32), np.array(lower_panels, dtype=np.int32)

    def finish(self, node_columns: Sequence[Columns], panel_strips: Sequence[Columns]) -> LiftingSurface:
        """
        Store the grid arrays and compute panel geometry.

        Args:
            node_columns: (upper, lower) node columns, one per section
            panel_strips: (upper, lower) panel columns, one per strip

        Returns:
            The finished surface
        """
        if len(node_columns) == 0:
            raise ValueError("At least one section is required")
        if len(panel_strips) != len(node_columns) - 1:
            raise ValueError(
                f"Expected {len(node_columns) - 1} panel strips for "
                f"{len(node_columns)} sections, got {len(panel_strips)}"
            )

        n_chordwise_nodes = len(node_columns[0][0])
        surface = self.surface
        surface.upper_nodes = np.column_stack([upper for upper, _ in node_columns]).astype(np.int32)
        surface.lower_nodes = np.column_stack([lower for _, lower in node_columns]).astype(np.int32)

        if panel_strips:
            surface.upper_panels = np.column_stack([upper for upper, _ in panel_strips]).astype(np.int32)
            surface.lower_panels = np.column_stack([lower for _, lower in panel_strips]).astype(np.int32)
        else:
            surface.upper_panels = np.zeros((n_chordwise_nodes - 1, 0), dtype=np.int32)
            surface.lower_panels = np.zeros((n_chordwise_nodes - 1, 0), dtype=np.int32)

        surface.compute_geometry()
        logger.debug("Finished %r", surface)
        return surface


def build_wing(points: NDArray[np.float64], chord: float = 1.0, span: float = 1.0,
               n_spanwise_nodes: int = 2, name: str = "") -> LiftingSurface:
    """
    Build a straight, untwisted wing by extruding one section along +z.

    Args:
        points: Section points (M, 3) in the XY plane, trailing edge first
        chord: Scale factor applied to the section
        span: Distance between root and tip sections
        n_spanwise_nodes: Number of sections (>= 1)
        name: Surface identifier

    Returns:
        LiftingSurface with n_spanwise_nodes sections
    """
    if n_spanwise_nodes < 1:
        raise ValueError(f"n_spanwise_nodes must be >= 1, got {n_spanwise_nodes}")
    if chord <= 0:
        raise ValueError(f"chord must be positive, got {chord}")

    points = chord * np.asarray(points, dtype=np.float64)
    if n_spanwise_nodes == 1:
        stations = np.zeros(1)
    else:
        stations = np.linspace(0.0, span, n_spanwise_nodes)

    surface = LiftingSurface(name=name)
    builder = LiftingSurfaceBuilder(surface)

    node_columns: List[Columns] = []
    for z in stations:
        section = points.copy()
        section[:, 2] = z
        node_columns.append(builder.create_nodes_for_points(section))

    panel_strips = [
        builder.create_panels_between_shapes(a, b)
        for a, b in zip(node_columns[:-1], node_columns[1:])
    ]

    return builder.finish(node_columns, panel_strips)
