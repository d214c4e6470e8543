"""
Pydantic schemas for solver parameters and case validation.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Literal, Tuple


class Parameters(BaseModel):
    """Solver parameters consumed by the lifting-surface geometry."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    wake_emission_follow_bisector: bool = Field(
        default=True,
        description="Emit the wake in the plane of the span and trailing edge bisector "
                    "(False: along the reversed apparent velocity)"
    )


class SectionConfig(BaseModel):
    """Airfoil section used to build a wing."""
    type: Literal["ellipse", "naca4"] = Field(
        default="ellipse",
        description="Section generator"
    )
    a: float = Field(default=0.5, gt=0, description="Ellipse semi-axis along the chord")
    b: float = Field(default=0.06, gt=0, description="Ellipse semi-axis across the chord")
    designation: str = Field(default="0012", description="NACA 4-digit designation")
    n_points: int = Field(default=32, ge=4, description="Points per section (even)")

    @field_validator('n_points')
    @classmethod
    def check_even(cls, v):
        """Both sides of the section need the same number of points."""
        if v % 2 != 0:
            raise ValueError(f"n_points must be even, got {v}")
        return v

    @field_validator('designation')
    @classmethod
    def check_designation(cls, v):
        """Check NACA designation is four digits."""
        v = v.strip()
        if len(v) != 4 or not v.isdigit():
            raise ValueError(f"NACA designation must be 4 digits, got '{v}'")
        return v


class WingConfig(BaseModel):
    """Straight wing built from a single section."""
    name: str = Field(default="wing", description="Surface identifier")
    section: SectionConfig = Field(default_factory=SectionConfig)
    chord: float = Field(default=1.0, gt=0, description="Chord scale factor")
    span: float = Field(default=4.0, gt=0, description="Root to tip distance along +z")
    n_spanwise_nodes: int = Field(default=9, ge=1, description="Number of sections")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Check name is non-empty."""
        if not v or not v.strip():
            raise ValueError("Wing name cannot be empty")
        return v.strip()


class BoundaryLayerConfig(BaseModel):
    """Boundary layer model selection."""
    type: Literal["dummy", "thwaites"] = Field(
        default="dummy",
        description="Boundary layer model"
    )
    density: float = Field(default=1.225, gt=0, description="Fluid density [kg/m³]")
    kinematic_viscosity: float = Field(
        default=1.5e-5,
        gt=0,
        description="Kinematic viscosity [m²/s]"
    )


class VisualizationConfig(BaseModel):
    """Visualization settings."""
    enabled: bool = Field(default=False, description="Save a surface plot")
    show_bisectors: bool = Field(default=True, description="Draw trailing edge bisectors")
    show_emission: bool = Field(default=True, description="Draw wake emission velocities")
    output_directory: str = Field(default="./results", description="Plot output directory")


class CaseConfig(BaseModel):
    """Top-level case configuration."""
    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    name: str = Field(..., description="Case name")
    description: str = Field(default="", description="Case description")

    freestream: dict = Field(
        default={"velocity": [1.0, 0.0, 0.0]},
        description="Freestream conditions"
    )

    wing: WingConfig = Field(default_factory=WingConfig)
    parameters: Parameters = Field(default_factory=Parameters)
    boundary_layer: BoundaryLayerConfig = Field(default_factory=BoundaryLayerConfig)
    visualization: VisualizationConfig = Field(default_factory=VisualizationConfig)

    @model_validator(mode='after')
    def check_freestream(self):
        """Freestream velocity must be a 3-vector."""
        self.get_freestream_velocity()
        return self

    def get_freestream_velocity(self) -> Tuple[float, float, float]:
        """Extract freestream velocity vector."""
        vel = self.freestream.get("velocity", [0.0, 0.0, 0.0])
        if len(vel) != 3:
            raise ValueError(f"freestream velocity must have 3 components, got {len(vel)}")
        return tuple(float(v) for v in vel)
