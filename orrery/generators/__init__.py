"""Star-system generators.

Pipeline-based generation is the only system. A full star system is built by
composing layers:
- System: StellarCompanionLayer + PlanetCountLayer + PlanetPlacementLayer
  + TrojanLayer + BeltLayer + BrownDwarfLayer
"""

from .pipeline import (
    GenerationContext,
    GenerationLayer,
    PipelineGenerator,
    PipelineOrderError,
    PlanetOptions,
    create_pipeline,
    create_system_pipeline,
)

__all__ = [
    "GenerationContext",
    "GenerationLayer",
    "PipelineGenerator",
    "PipelineOrderError",
    "PlanetOptions",
    "create_pipeline",
    "create_system_pipeline",
]
