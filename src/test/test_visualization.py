"""
Test lifting surface plotting.
"""

import pytest
import numpy as np
from pathlib import Path
import matplotlib
matplotlib.use('Agg')

# Add src to path
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from panelwake.config import Parameters
from panelwake.geometry import build_wing
from panelwake.shape_generators import NACA4AirfoilGenerator
from panelwake.visualization import SurfacePlotter


@pytest.fixture
def wing():
    return build_wing(NACA4AirfoilGenerator.generate("0012", 16), span=2.0, n_spanwise_nodes=3)


class TestSurfacePlotter:
    """Test SurfacePlotter."""

    def test_plot_and_save(self, wing, tmp_path):
        plotter = SurfacePlotter(figsize=(4, 3))
        fig = plotter.plot_surface(
            wing,
            show_bisectors=True,
            show_emission=True,
            apparent_velocity=np.array([-1.0, 0.0, 0.0]),
            parameters=Parameters(),
        )
        assert fig is plotter.fig

        output = tmp_path / "wing.png"
        plotter.save(str(output))
        plotter.close()

        assert output.exists()
        assert plotter.fig is None

    def test_emission_requires_velocity(self, wing):
        plotter = SurfacePlotter()
        with pytest.raises(ValueError, match="apparent_velocity"):
            plotter.plot_surface(wing, show_emission=True)
        plotter.close()

    def test_save_without_figure(self):
        with pytest.raises(ValueError, match="No figure"):
            SurfacePlotter().save("unused.png")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
