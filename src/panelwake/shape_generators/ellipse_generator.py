"""
Ellipse generator.
"""

import numpy as np
from numpy.typing import NDArray


class EllipseGenerator:
    """Generation of ellipses in the XY plane."""

    @staticmethod
    def generate(a: float, b: float, n_points: int) -> NDArray[np.float64]:
        """
        Generate points on an ellipse.

        Points are ordered by increasing parametric angle, starting at (a, 0, 0).
        Used as a lifting-surface section, the first point is the trailing edge
        and point n_points // 2 the leading edge.

        Args:
            a: Semi-axis along x
            b: Semi-axis along y
            n_points: Number of points

        Returns:
            Points (n_points, 3) with z = 0
        """
        if n_points < 1:
            raise ValueError(f"n_points must be positive, got {n_points}")

        theta = 2 * np.pi * np.arange(n_points) / n_points
        x = a * np.cos(theta)
        y = b * np.sin(theta)
        z = np.zeros_like(x)

        return np.column_stack([x, y, z])
