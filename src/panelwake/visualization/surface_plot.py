"""
Matplotlib-based 3D visualization of lifting surfaces and their trailing edge.
"""

import logging
from typing import Optional, Tuple
import numpy as np
import matplotlib.pyplot as plt
from mpl_toolkits.mplot3d.art3d import Poly3DCollection

from ..config.schemas import Parameters
from ..geometry.lifting_surface import LiftingSurface

logger = logging.getLogger(__name__)


class SurfacePlotter:
    """
    3D lifting surface visualization using matplotlib.
    """

    def __init__(self, figsize: Tuple[float, float] = (10, 8)):
        """
        Initialize plotter.

        Args:
            figsize: Figure size (width, height) in inches
        """
        self.figsize = figsize
        self.fig = None
        self.ax = None

    def _setup_figure(self, title: str = ""):
        """Create figure and 3D axis."""
        self.fig = plt.figure(figsize=self.figsize)
        self.ax = self.fig.add_subplot(projection='3d')
        self.ax.set_xlabel('X')
        self.ax.set_ylabel('Y')
        self.ax.set_zlabel('Z')
        if title:
            self.ax.set_title(title, fontsize=14, fontweight='bold')

    def plot_surface(self,
                     surface: LiftingSurface,
                     show_bisectors: bool = True,
                     show_emission: bool = False,
                     apparent_velocity: Optional[np.ndarray] = None,
                     parameters: Optional[Parameters] = None,
                     arrow_length: float = 0.2,
                     title: str = "Lifting Surface") -> plt.Figure:
        """
        Plot panels, trailing edge nodes and optional trailing edge vectors.

        Args:
            surface: Surface to plot
            show_bisectors: Draw trailing edge bisectors
            show_emission: Draw wake emission velocities (needs apparent_velocity)
            apparent_velocity: Apparent velocity (3,), same at every trailing edge node
            parameters: Solver parameters for the wake emission velocity
            arrow_length: Length of bisector arrows
            title: Plot title

        Returns:
            Matplotlib figure
        """
        self._setup_figure(title)

        if surface.num_panels > 0:
            polygons = [surface.nodes[panel] for panel in surface.panels]
            collection = Poly3DCollection(polygons, facecolor='lightsteelblue',
                                          edgecolor='k', linewidths=0.3, alpha=0.6)
            self.ax.add_collection3d(collection)

        te_nodes = [surface.trailing_edge_node(i) for i in range(surface.n_spanwise_nodes())]
        te_points = surface.nodes[te_nodes]
        self.ax.plot(te_points[:, 0], te_points[:, 1], te_points[:, 2],
                     'r.-', markersize=6, label='Trailing edge')

        if show_bisectors and surface.n_chordwise_nodes() > 1:
            bisectors = np.array([surface.trailing_edge_bisector(i)
                                  for i in range(surface.n_spanwise_nodes())])
            self.ax.quiver(te_points[:, 0], te_points[:, 1], te_points[:, 2],
                           bisectors[:, 0], bisectors[:, 1], bisectors[:, 2],
                           length=arrow_length, color='green', label='Bisector')

        if show_emission:
            if apparent_velocity is None:
                raise ValueError("apparent_velocity is required to show wake emission")
            emission = np.array([surface.wake_emission_velocity(apparent_velocity, i, parameters)
                                 for i in range(surface.n_spanwise_nodes())])
            self.ax.quiver(te_points[:, 0], te_points[:, 1], te_points[:, 2],
                           emission[:, 0], emission[:, 1], emission[:, 2],
                           color='purple', label='Wake emission')

        self.ax.legend(loc='best')
        self._auto_scale_axis(surface.nodes)

        return self.fig

    def _auto_scale_axis(self, points: np.ndarray, padding: float = 0.1):
        """Equal-aspect bounding box around the points."""
        if points.shape[0] == 0:
            return
        lo = points.min(axis=0)
        hi = points.max(axis=0)
        center = 0.5 * (lo + hi)
        half = 0.5 * max((hi - lo).max(), 1e-10) + padding

        self.ax.set_xlim(center[0] - half, center[0] + half)
        self.ax.set_ylim(center[1] - half, center[1] + half)
        self.ax.set_zlim(center[2] - half, center[2] + half)

    def save(self, filepath: str, dpi: int = 150):
        """
        Save figure to file.

        Args:
            filepath: Output file path
            dpi: Resolution (dots per inch)
        """
        if self.fig is None:
            raise ValueError("No figure to save. Call a plot method first.")

        self.fig.savefig(filepath, dpi=dpi, bbox_inches='tight')
        logger.info("Saved figure to: %s", filepath)

    def show(self):
        """Display the figure."""
        if self.fig is None:
            raise ValueError("No figure to show. Call a plot method first.")

        plt.show()

    def close(self):
        """Close the figure."""
        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None
            self.ax = None
