"""
Boundary layer capability consumed by the outer solver.
"""

from typing import Protocol, runtime_checkable
import numpy as np
from numpy.typing import NDArray


@runtime_checkable
class BoundaryLayer(Protocol):
    """
    Viscous correction attached to a surface.

    After every update of the surface velocity field the solver calls
    ``recalculate``; force and boundary condition assembly then query the
    blowing velocity and friction per panel. Both queries must answer for
    any panel index at any time after construction, returning 0.0 and the
    zero vector until the first ``recalculate``.
    """

    def recalculate(self, surface_velocities: NDArray[np.float64]) -> None:
        """Update the viscous state from an (n_panels, 3) matrix of surface velocities."""
        ...

    def blowing_velocity(self, panel: int) -> float:
        """Mass injection velocity normal to the panel."""
        ...

    def friction(self, panel: int) -> NDArray[np.float64]:
        """Viscous shear force acting on the panel (3,)."""
        ...
