"""
NACA 4-digit airfoil generator.
"""

import numpy as np
from numpy.typing import NDArray


class NACA4AirfoilGenerator:
    """Generation of NACA 4-digit airfoils with a closed trailing edge."""

    @staticmethod
    def generate(designation: str, n_points: int) -> NDArray[np.float64]:
        """
        Generate a unit-chord NACA 4-digit airfoil in the XY plane.

        The leading edge is at the origin and the trailing edge at (1, 0, 0).
        Points start at the trailing edge, run over the upper side to the
        leading edge (index n_points // 2) and return along the lower side.
        Chordwise stations use cosine spacing.

        Args:
            designation: Four digits, e.g. "2412"
            n_points: Number of points (even, >= 4)

        Returns:
            Points (n_points, 3) with z = 0
        """
        if len(designation) != 4 or not designation.isdigit():
            raise ValueError(f"NACA designation must be 4 digits, got '{designation}'")
        if n_points < 4 or n_points % 2 != 0:
            raise ValueError(f"n_points must be even and >= 4, got {n_points}")

        m = int(designation[0]) / 100
        p = int(designation[1]) / 10
        t = int(designation[2:4]) / 100

        beta = np.linspace(0, np.pi, n_points // 2 + 1)
        x = (1 - np.cos(beta)) / 2

        # Closed trailing edge thickness distribution
        yt = t / 0.2 * (
            0.2969 * np.sqrt(x)
            - 0.1260 * x
            - 0.3516 * x ** 2
            + 0.2843 * x ** 3
            - 0.1036 * x ** 4
        )

        yc = np.zeros_like(x)
        dycdx = np.zeros_like(x)
        if m > 0 and p > 0:
            fore = x < p
            yc[fore] = m / p ** 2 * (2 * p * x[fore] - x[fore] ** 2)
            dycdx[fore] = 2 * m / p ** 2 * (p - x[fore])
            aft = ~fore
            yc[aft] = m / (1 - p) ** 2 * ((1 - 2 * p) + 2 * p * x[aft] - x[aft] ** 2)
            dycdx[aft] = 2 * m / (1 - p) ** 2 * (p - x[aft])

        theta = np.arctan(dycdx)
        xU = x - yt * np.sin(theta)
        xL = x + yt * np.sin(theta)
        yU = yc + yt * np.cos(theta)
        yL = yc - yt * np.cos(theta)

        # Upper from trailing edge to leading edge, then lower without its end points
        airfoil_x = np.concatenate([np.flip(xU), xL[1:-1]])
        airfoil_y = np.concatenate([np.flip(yU), yL[1:-1]])

        return np.column_stack([airfoil_x, airfoil_y, np.zeros_like(airfoil_x)])
