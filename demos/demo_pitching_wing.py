"""
Demo: trailing edge wake emission of a pitching wing.

The wing pitches about its quarter chord while a uniform stream flows along
+x. Every timestep the trailing edge nodes shed a new wake row at
node + emission_velocity * dt, once with bisector-following emission and
once with direct emission.
"""

import sys
import logging
from pathlib import Path
import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from panelwake import Parameters, build_wing, NACA4AirfoilGenerator
from panelwake.logging_config import setup_logging

logger = logging.getLogger("panelwake.demo")


def shed_wake(parameters: Parameters, n_steps: int = 40, dt: float = 0.05):
    """Return the shed wake rows (n_steps, n_spanwise_nodes, 3)."""
    wing = build_wing(NACA4AirfoilGenerator.generate("0012", 32), chord=1.0, span=4.0,
                      n_spanwise_nodes=9, name="naca0012")
    freestream = np.array([10.0, 0.0, 0.0])
    amplitude_deg, omega = 5.0, 2 * np.pi
    pivot = np.array([0.25, 0.0, 0.0])

    rows = []
    angle = 0.0
    for step in range(n_steps):
        new_angle = amplitude_deg * np.sin(omega * step * dt)
        # Pitch about the quarter chord (nose up = negative rotation about z)
        wing.rotate(rz_deg=-(new_angle - angle), origin=pivot)
        angle = new_angle

        row = []
        for i in range(wing.n_spanwise_nodes()):
            node = wing.nodes[wing.trailing_edge_node(i)]
            # Body velocity from pitching is neglected against the freestream
            apparent_velocity = -freestream
            emission = wing.wake_emission_velocity(apparent_velocity, i, parameters)
            row.append(node + emission * dt)
        rows.append(row)

    return np.array(rows)


def main():
    setup_logging()
    logger.info("Running pitching wing wake emission demo...")

    bisector_wake = shed_wake(Parameters(wake_emission_follow_bisector=True))
    direct_wake = shed_wake(Parameters(wake_emission_follow_bisector=False))

    mid = bisector_wake.shape[1] // 2
    fig, ax = plt.subplots(figsize=(10, 4))
    ax.plot(bisector_wake[:, mid, 0], bisector_wake[:, mid, 1], 'o-', label='Bisector emission')
    ax.plot(direct_wake[:, mid, 0], direct_wake[:, mid, 1], 's-', label='Direct emission')
    ax.set_xlabel('X')
    ax.set_ylabel('Y')
    ax.set_title('First wake node position per timestep (mid span)')
    ax.grid(True, alpha=0.3, linestyle='--')
    ax.legend()

    output_path = Path(__file__).parent / "out/demo_pitching_wing.png"
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150, bbox_inches='tight')
    plt.close(fig)

    logger.info("Done. Plot saved to %s", output_path)


if __name__ == "__main__":
    main()
