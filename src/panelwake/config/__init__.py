"""Configuration schemas for solver parameters and cases."""

from .schemas import (
    Parameters,
    SectionConfig,
    WingConfig,
    BoundaryLayerConfig,
    VisualizationConfig,
    CaseConfig,
)

__all__ = [
    "Parameters",
    "SectionConfig",
    "WingConfig",
    "BoundaryLayerConfig",
    "VisualizationConfig",
    "CaseConfig",
]
