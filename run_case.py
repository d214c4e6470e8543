"""
Load a lifting surface case defined by a YAML config file and report its
trailing edge: topology, bisectors and wake emission velocities.
"""

import sys
import argparse
import logging
from pathlib import Path
import numpy as np

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from panelwake.io import CaseLoader
from panelwake.logging_config import setup_logging

logger = logging.getLogger("panelwake.run_case")


def main():
    parser = argparse.ArgumentParser(description="Report trailing edge wake emission for a case")
    parser.add_argument("case_file", type=str, help="Path to YAML case file")
    parser.add_argument("--plot", action="store_true", help="Save a surface plot")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    parser.add_argument("--log-file", type=str, default=None, help="Optional log file")
    args = parser.parse_args()

    setup_logging(getattr(logging, args.log_level), args.log_file)

    case_path = Path(args.case_file).resolve()
    if not case_path.exists():
        logger.error("Case file not found: %s", case_path)
        sys.exit(1)

    logger.info("Loading case: %s", case_path.name)
    surface, config = CaseLoader.load(case_path)

    logger.info(
        "Grid: %d x %d nodes, %d x %d panels (chordwise x spanwise)",
        surface.n_chordwise_nodes(), surface.n_spanwise_nodes(),
        surface.n_chordwise_panels(), surface.n_spanwise_panels(),
    )

    boundary_layer = CaseLoader.build_boundary_layer(config.boundary_layer, surface)
    logger.info("Boundary layer: %r", boundary_layer)

    # Wing at rest: apparent velocity is body velocity minus freestream
    apparent_velocity = -np.array(config.get_freestream_velocity())
    parameters = config.parameters
    logger.info("Wake emission follows bisector: %s", parameters.wake_emission_follow_bisector)

    for i in range(surface.n_spanwise_nodes()):
        node = surface.trailing_edge_node(i)
        bisector = surface.trailing_edge_bisector(i) if surface.n_chordwise_nodes() > 1 else None
        emission = surface.wake_emission_velocity(apparent_velocity, i, parameters)
        logger.info("TE %3d (node %5d): bisector=%s emission=%s",
                    i, node, np.round(bisector, 4) if bisector is not None else "-",
                    np.round(emission, 4))

    if args.plot or config.visualization.enabled:
        import matplotlib
        matplotlib.use("Agg")
        from panelwake.visualization import SurfacePlotter

        plotter = SurfacePlotter()
        plotter.plot_surface(
            surface,
            show_bisectors=config.visualization.show_bisectors,
            show_emission=config.visualization.show_emission,
            apparent_velocity=apparent_velocity,
            parameters=parameters,
            title=config.name,
        )
        output_dir = Path(config.visualization.output_directory)
        output_dir.mkdir(parents=True, exist_ok=True)
        plotter.save(str(output_dir / f"{case_path.stem}_surface.png"))
        plotter.close()

    logger.info("Done.")


if __name__ == "__main__":
    main()
