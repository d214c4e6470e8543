"""
Vector helpers and rotation matrices.

All geometry is stored as plain NumPy arrays of shape (3,) or (N, 3).
"""

from __future__ import annotations
import numpy as np
from numpy.typing import NDArray


def normalize(vector: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Return the unit vector in the direction of ``vector``.

    A zero vector is a precondition violation. It is only caught when
    assertions are enabled; otherwise the result contains NaNs.
    """
    norm = np.linalg.norm(vector)
    assert norm > 0.0, "Cannot normalize zero vector"
    return vector / norm


def rotation_matrix_xyz(rx: float, ry: float, rz: float) -> NDArray[np.float64]:
    """
    3D rotation matrix from Euler angles (XYZ convention).

    Args:
        rx, ry, rz: Rotation angles about x, y, z axes (radians)

    Returns:
        3x3 rotation matrix (R = Rz * Ry * Rx)
    """
    cx, sx = np.cos(rx), np.sin(rx)
    Rx = np.array([[1, 0, 0], [0, cx, -sx], [0, sx, cx]], dtype=np.float64)

    cy, sy = np.cos(ry), np.sin(ry)
    Ry = np.array([[cy, 0, sy], [0, 1, 0], [-sy, 0, cy]], dtype=np.float64)

    cz, sz = np.cos(rz), np.sin(rz)
    Rz = np.array([[cz, -sz, 0], [sz, cz, 0], [0, 0, 1]], dtype=np.float64)

    return Rz @ Ry @ Rx
