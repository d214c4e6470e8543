"""
Lifting surface readers and writers for the JSON format.

Expected format:
{
  "format": "lifting_surface",
  "name": "wing" (optional),
  "nodes": [[x, y, z], ...],
  "panels": [[i1, i2, i3, i4], ...]  (triangles repeat i3),
  "upper_nodes": [[...], ...],   (chordwise rows of spanwise node indices)
  "lower_nodes": [[...], ...],
  "upper_panels": [[...], ...],
  "lower_panels": [[...], ...],
  "grid_shapes": {"upper_nodes": [rows, cols], ...}  (optional)
}
"""

from pathlib import Path
import json
import logging
import numpy as np

from ..geometry.lifting_surface import LiftingSurface

logger = logging.getLogger(__name__)

FORMAT = "lifting_surface"
GRID_FIELDS = ("upper_nodes", "lower_nodes", "upper_panels", "lower_panels")


class SurfaceReader:
    """Reader for lifting surface geometry files."""

    @staticmethod
    def read_json(filepath: str | Path) -> LiftingSurface:
        """
        Read a lifting surface from a JSON file.

        Args:
            filepath: Path to JSON file

        Returns:
            LiftingSurface object
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"Geometry file not found: {filepath}")

        with open(filepath, 'r') as f:
            data = json.load(f)

        fmt = data.get("format", "").lower()
        if fmt != FORMAT:
            raise ValueError(f"Unsupported format '{fmt}'. Expected '{FORMAT}'")

        for key in ("nodes", "panels") + GRID_FIELDS:
            if key not in data:
                raise ValueError(f"Missing '{key}' field in JSON")

        nodes = np.array(data["nodes"], dtype=np.float64)
        if nodes.ndim != 2 or nodes.shape[1] != 3:
            raise ValueError(f"nodes must have shape (N, 3), got {nodes.shape}")

        panels = np.array(data["panels"], dtype=np.int32).reshape(-1, 4)

        shapes = data.get("grid_shapes", {})
        grids = {}
        for key in GRID_FIELDS:
            grid = np.array(data[key], dtype=np.int32)
            if key in shapes:
                # Empty grids lose their column count in JSON lists
                try:
                    grid = grid.reshape(shapes[key])
                except ValueError:
                    raise ValueError(
                        f"{key} does not match its stored shape {shapes[key]}"
                    ) from None
            if grid.ndim != 2:
                raise ValueError(f"{key} must be a 2D array, got {grid.ndim}D")
            grids[key] = grid

        if grids["upper_nodes"].shape != grids["lower_nodes"].shape:
            raise ValueError(
                f"upper_nodes {grids['upper_nodes'].shape} and lower_nodes "
                f"{grids['lower_nodes'].shape} must have the same shape"
            )

        surface = LiftingSurface(
            nodes=nodes,
            panels=panels,
            name=data.get("name", filepath.stem),
            **grids
        )
        logger.debug("Read %r from %s", surface, filepath)
        return surface


class SurfaceWriter:
    """Writer for lifting surface geometry files."""

    @staticmethod
    def write_json(surface: LiftingSurface, filepath: str | Path) -> Path:
        """
        Write a lifting surface to a JSON file.

        Args:
            surface: Surface to write
            filepath: Output path (parent directories are created)

        Returns:
            Path of the written file
        """
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        data = {
            "format": FORMAT,
            "name": surface.name,
            "nodes": surface.nodes.tolist(),
            "panels": surface.panels.tolist(),
        }
        for key in GRID_FIELDS:
            data[key] = getattr(surface, key).tolist()
        data["grid_shapes"] = {key: list(getattr(surface, key).shape) for key in GRID_FIELDS}

        with open(filepath, 'w') as f:
            json.dump(data, f, indent=2)

        logger.debug("Wrote %r to %s", surface, filepath)
        return filepath
