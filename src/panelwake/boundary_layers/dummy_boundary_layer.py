"""
Dummy boundary layer, used when viscous effects are ignored.
"""

import numpy as np
from numpy.typing import NDArray


class DummyBoundaryLayer:
    """Boundary layer without any effect on the flow."""

    def recalculate(self, surface_velocities: NDArray[np.float64]) -> None:
        """Normally solves the boundary layer equations. Here, it does nothing."""

    def blowing_velocity(self, panel: int) -> float:
        return 0.0

    def friction(self, panel: int) -> NDArray[np.float64]:
        return np.zeros(3, dtype=np.float64)

    def __repr__(self) -> str:
        return "DummyBoundaryLayer()"
