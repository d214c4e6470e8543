"""
Laminar boundary layer on a lifting surface using Thwaites' method.

Each spanwise strip is treated as two independent 2D boundary layers, one
per side, growing from the leading edge row towards the trailing edge.
"""

import logging
import numpy as np
from numpy.typing import NDArray

from ..geometry.lifting_surface import LiftingSurface

logger = logging.getLogger(__name__)

EPS = 1e-12

# Validity range of the Thwaites correlations
LAMBDA_MIN = -0.09
LAMBDA_MAX = 0.25


class ThwaitesBoundaryLayer:
    """
    Thwaites integral boundary layer.

    Attributes:
        surface: Lifting surface whose panels carry the boundary layer
        density: Fluid density [kg/m³]
        kinematic_viscosity: Kinematic viscosity [m²/s]
        momentum_thickness: Momentum thickness per panel (P,)
        displacement_thickness: Displacement thickness per panel (P,)
    """

    def __init__(self, surface: LiftingSurface, density: float = 1.225,
                 kinematic_viscosity: float = 1.5e-5):
        if density <= 0:
            raise ValueError(f"density must be positive, got {density}")
        if kinematic_viscosity <= 0:
            raise ValueError(f"kinematic_viscosity must be positive, got {kinematic_viscosity}")

        self.surface = surface
        self.density = density
        self.kinematic_viscosity = kinematic_viscosity

        n_panels = surface.num_panels
        self.momentum_thickness = np.zeros(n_panels, dtype=np.float64)
        self.displacement_thickness = np.zeros(n_panels, dtype=np.float64)
        self._blowing_velocities = np.zeros(n_panels, dtype=np.float64)
        self._friction = np.zeros((n_panels, 3), dtype=np.float64)

    def recalculate(self, surface_velocities: NDArray[np.float64]) -> None:
        """
        March the boundary layer along every chordwise strip.

        Args:
            surface_velocities: (n_panels, 3)-matrix of surface velocities
        """
        surface_velocities = np.asarray(surface_velocities, dtype=np.float64)
        if surface_velocities.shape != (self.surface.num_panels, 3):
            raise ValueError(
                f"surface_velocities must have shape ({self.surface.num_panels}, 3), "
                f"got {surface_velocities.shape}"
            )

        surface = self.surface
        for k in range(surface.n_spanwise_panels()):
            # Leading edge row is shared by both sides
            leading_edge = 0.5 * (
                surface.nodes[surface.upper_nodes[0, k]] + surface.nodes[surface.upper_nodes[0, k + 1]]
            )
            self._march(surface.upper_panels[:, k], leading_edge, surface_velocities)
            self._march(surface.lower_panels[:, k], leading_edge, surface_velocities)

        logger.debug(
            "Boundary layer recalculated: max momentum thickness %.3e",
            self.momentum_thickness.max() if self.momentum_thickness.size else 0.0,
        )

    def _march(self, panels: NDArray[np.int32], leading_edge: NDArray[np.float64],
               surface_velocities: NDArray[np.float64]):
        """Integrate Thwaites' method over one strip, leading edge first."""
        nu = self.kinematic_viscosity
        centers = self.surface.centers[panels]

        # Arc length from the leading edge along panel centers
        steps = np.linalg.norm(np.diff(np.vstack([leading_edge, centers]), axis=0), axis=1)
        s = np.cumsum(steps)

        Ue = np.linalg.norm(surface_velocities[panels], axis=1)

        integral = 0.0
        Ue_prev, s_prev, flux_prev = 0.0, 0.0, 0.0
        for i, panel in enumerate(panels):
            ds = max(s[i] - s_prev, EPS)
            if i == 0:
                # Velocity grows linearly from the stagnation point
                integral = Ue[0] ** 5 * ds / 6.0
            else:
                integral += (0.5 * (Ue[i] + Ue_prev)) ** 5 * ds

            Uloc = max(Ue[i], EPS)
            theta = np.sqrt(max(0.45 * nu * integral / Uloc ** 6, 0.0))

            dUds = (Ue[i] - Ue_prev) / ds
            lam = np.clip(theta ** 2 / nu * dUds, LAMBDA_MIN, LAMBDA_MAX)

            H = 2.088 + 0.0731 / (lam + 0.14)
            shear = (lam + 0.09) ** 0.62

            self.momentum_thickness[panel] = theta
            self.displacement_thickness[panel] = H * theta

            # Equivalent transpiration velocity d(Ue delta*)/ds
            flux = Ue[i] * H * theta
            self._blowing_velocities[panel] = (flux - flux_prev) / ds

            if Ue[i] > EPS and theta > EPS:
                tau_w = self.density * nu * Ue[i] * shear / theta
                direction = surface_velocities[panel] / Ue[i]
                self._friction[panel] = tau_w * self.surface.areas[panel] * direction
            else:
                self._friction[panel] = 0.0

            Ue_prev, s_prev, flux_prev = Ue[i], s[i], flux

    def blowing_velocity(self, panel: int) -> float:
        """Blowing velocity for the given panel."""
        return float(self._blowing_velocities[panel])

    def friction(self, panel: int) -> NDArray[np.float64]:
        """Friction force acting on the given panel."""
        return self._friction[panel].copy()

    def __repr__(self) -> str:
        return (
            f"ThwaitesBoundaryLayer(surface='{self.surface.name}', "
            f"density={self.density}, nu={self.kinematic_viscosity})"
        )
