"""
YAML case file loader with validation.
"""

from pathlib import Path
import logging
import yaml

from ..boundary_layers import BoundaryLayer, DummyBoundaryLayer, ThwaitesBoundaryLayer
from ..config.schemas import BoundaryLayerConfig, CaseConfig, SectionConfig
from ..geometry.lifting_surface import LiftingSurface
from ..geometry.lifting_surface_builder import build_wing
from ..shape_generators import EllipseGenerator, NACA4AirfoilGenerator

logger = logging.getLogger(__name__)


class CaseLoader:
    """Load and validate lifting surface cases from YAML files."""

    @staticmethod
    def load(filepath: str | Path) -> tuple[LiftingSurface, CaseConfig]:
        """
        Load case file and build the lifting surface.

        Args:
            filepath: Path to YAML case file

        Returns:
            Tuple of (LiftingSurface, validated config)
        """
        raw_config = CaseLoader._read_yaml(filepath)

        config = CaseConfig(**raw_config)
        surface = CaseLoader.build_surface(config)

        logger.info("Loaded case '%s': %r", config.name, surface)
        return surface, config

    @staticmethod
    def _read_yaml(filepath: str | Path) -> dict:
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"Case file not found: {filepath}")

        with open(filepath, 'r') as f:
            return yaml.safe_load(f)

    @staticmethod
    def generate_section(section: SectionConfig):
        """Generate the section points described by the config."""
        if section.type == "naca4":
            return NACA4AirfoilGenerator.generate(section.designation, section.n_points)
        return EllipseGenerator.generate(section.a, section.b, section.n_points)

    @staticmethod
    def build_surface(config: CaseConfig) -> LiftingSurface:
        """
        Build the lifting surface from a validated config.

        Args:
            config: Validated case config

        Returns:
            LiftingSurface object
        """
        wing = config.wing
        points = CaseLoader.generate_section(wing.section)

        return build_wing(
            points,
            chord=wing.chord,
            span=wing.span,
            n_spanwise_nodes=wing.n_spanwise_nodes,
            name=wing.name
        )

    @staticmethod
    def build_boundary_layer(config: BoundaryLayerConfig, surface: LiftingSurface) -> BoundaryLayer:
        """Create the boundary layer model selected by the config."""
        if config.type == "thwaites":
            return ThwaitesBoundaryLayer(
                surface,
                density=config.density,
                kinematic_viscosity=config.kinematic_viscosity
            )
        return DummyBoundaryLayer()

    @staticmethod
    def validate(filepath: str | Path) -> bool:
        """
        Validate case file without building the surface.

        Args:
            filepath: Path to YAML case file

        Returns:
            True if valid, raises ValidationError otherwise
        """
        raw_config = CaseLoader._read_yaml(filepath)

        # This will raise ValidationError if invalid
        CaseConfig(**raw_config)

        return True
