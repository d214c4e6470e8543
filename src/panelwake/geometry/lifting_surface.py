"""
Lifting surface: a Surface with a dual upper/lower structured grid.

The grid arrays are indexed (chordwise, spanwise). Row 0 is the leading edge,
shared by the upper and lower side; the last row is the trailing edge.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional
import numpy as np
from numpy.typing import NDArray

from ..config.schemas import Parameters
from .primitives import normalize
from .surface import Surface


def _empty_grid() -> NDArray[np.int32]:
    return np.zeros((0, 0), dtype=np.int32)


@dataclass(eq=False)
class LiftingSurface(Surface):
    """
    Wing, blade or hull surface from whose trailing edge a wake is shed.

    Attributes:
        upper_nodes: Node indices of the upper side (n_chordwise_nodes, n_spanwise_nodes)
        lower_nodes: Node indices of the lower side (n_chordwise_nodes, n_spanwise_nodes)
        upper_panels: Panel indices of the upper side (n_chordwise_panels, n_spanwise_panels)
        lower_panels: Panel indices of the lower side (n_chordwise_panels, n_spanwise_panels)

    The grid arrays are trusted as given. Queries take spanwise indices in
    [0, n_spanwise_nodes()) and only check them when assertions are enabled.
    Node positions may change between calls; nothing is cached.
    """

    upper_nodes: NDArray[np.int32] = field(default_factory=_empty_grid)
    lower_nodes: NDArray[np.int32] = field(default_factory=_empty_grid)
    upper_panels: NDArray[np.int32] = field(default_factory=_empty_grid)
    lower_panels: NDArray[np.int32] = field(default_factory=_empty_grid)

    def __post_init__(self):
        self.upper_nodes = np.asarray(self.upper_nodes, dtype=np.int32)
        self.lower_nodes = np.asarray(self.lower_nodes, dtype=np.int32)
        self.upper_panels = np.asarray(self.upper_panels, dtype=np.int32)
        self.lower_panels = np.asarray(self.lower_panels, dtype=np.int32)
        super().__post_init__()

    def n_chordwise_nodes(self) -> int:
        """Number of chordwise nodes."""
        return self.upper_nodes.shape[0]

    def n_chordwise_panels(self) -> int:
        """Number of chordwise panels."""
        return self.upper_panels.shape[0]

    def n_spanwise_nodes(self) -> int:
        """Number of spanwise nodes."""
        return self.upper_nodes.shape[1]

    def n_spanwise_panels(self) -> int:
        """Number of spanwise panels."""
        return self.upper_panels.shape[1]

    def trailing_edge_node(self, index: int) -> int:
        """
        Node number of the index'th trailing edge node.

        The trailing edge is stored once, in the last row of the upper grid.
        """
        assert 0 <= index < self.n_spanwise_nodes(), f"trailing edge index {index} out of range"
        return int(self.upper_nodes[-1, index])

    def trailing_edge_upper_panel(self, index: int) -> int:
        """Panel number of the index'th upper trailing edge panel."""
        assert 0 <= index < self.n_spanwise_panels(), f"trailing edge panel {index} out of range"
        return int(self.upper_panels[-1, index])

    def trailing_edge_lower_panel(self, index: int) -> int:
        """Panel number of the index'th lower trailing edge panel."""
        assert 0 <= index < self.n_spanwise_panels(), f"trailing edge panel {index} out of range"
        return int(self.lower_panels[-1, index])

    def trailing_edge_bisector(self, node_index: int) -> NDArray[np.float64]:
        """
        Unit vector bisecting the trailing edge at the node_index'th trailing edge node.

        The last chordwise edge of each side is normalized and the two unit
        vectors are summed and normalized again. A trailing edge folded back
        on itself (opposite edge directions) has no bisector and is outside
        the contract of this method.

        Args:
            node_index: Trailing edge node index

        Returns:
            Unit bisector (3,)
        """
        assert 0 <= node_index < self.n_spanwise_nodes(), f"trailing edge index {node_index} out of range"

        upper = self.nodes[self.upper_nodes[-1, node_index]] - self.nodes[self.upper_nodes[-2, node_index]]
        lower = self.nodes[self.lower_nodes[-1, node_index]] - self.nodes[self.lower_nodes[-2, node_index]]

        return normalize(normalize(upper) + normalize(lower))

    def wake_emission_velocity(self, apparent_velocity: NDArray[np.float64], node_index: int,
                               parameters: Optional[Parameters] = None) -> NDArray[np.float64]:
        """
        Velocity with which new wake nodes leave the node_index'th trailing edge node.

        With ``parameters.wake_emission_follow_bisector`` set, the reversed
        apparent velocity is projected onto the plane spanned by the local
        span direction and the trailing edge bisector. Root and tip stations
        use themselves as the missing neighbour; where both neighbours
        collapse onto the same node there is no span direction and the
        velocity is projected onto the bisector alone. Otherwise the wake is
        emitted along the reversed apparent velocity.

        Args:
            apparent_velocity: Apparent velocity at the trailing edge node (3,)
            node_index: Trailing edge node index
            parameters: Solver parameters (default: Parameters())

        Returns:
            Wake emission velocity (3,)
        """
        if parameters is None:
            parameters = Parameters()

        apparent_velocity = np.asarray(apparent_velocity, dtype=np.float64)

        if not (parameters.wake_emission_follow_bisector and self.n_chordwise_nodes() > 1):
            return -apparent_velocity

        if node_index > 0:
            prev_node = self.trailing_edge_node(node_index - 1)
        else:
            prev_node = self.trailing_edge_node(node_index)

        if node_index < self.n_spanwise_nodes() - 1:
            next_node = self.trailing_edge_node(node_index + 1)
        else:
            next_node = self.trailing_edge_node(node_index)

        bisector = self.trailing_edge_bisector(node_index)

        if prev_node == next_node:
            # No span direction available
            return -np.dot(apparent_velocity, bisector) * bisector

        span_direction = self.nodes[next_node] - self.nodes[prev_node]
        wake_normal = normalize(np.cross(span_direction, bisector))

        return -(apparent_velocity - np.dot(apparent_velocity, wake_normal) * wake_normal)

    def __repr__(self) -> str:
        return (
            f"LiftingSurface(name='{self.name}', "
            f"chordwise_nodes={self.n_chordwise_nodes()}, "
            f"spanwise_nodes={self.n_spanwise_nodes()}, "
            f"panels={self.num_panels})"
        )
