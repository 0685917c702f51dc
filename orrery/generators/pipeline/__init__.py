"""Pipeline-based star-system generation.

This package provides a layered architecture for system generation. Each
layer fills in part of a shared GenerationContext, and the pipeline freezes
the result into a StarSystem.

Example usage:
    from orrery.generators.pipeline import create_pipeline
    from orrery.util.dice import DiceRoller

    pipeline = create_pipeline("system")
    system = pipeline.generate("G2", DiceRoller.from_seed("0101"))

Layers declare the context fields they require and provide, so a pipeline
assembled in the wrong order raises PipelineOrderError when it is built.
"""

from .context import GenerationContext, PlanetOptions
from .factory import create_pipeline, create_system_pipeline
from .layer import GenerationLayer
from .layers import (
    BeltLayer,
    BrownDwarfLayer,
    PlanetCountLayer,
    PlanetPlacementLayer,
    StellarCompanionLayer,
    TrojanLayer,
)
from .pipeline import PipelineGenerator, PipelineOrderError

__all__ = [
    "BeltLayer",
    "BrownDwarfLayer",
    "GenerationContext",
    "GenerationLayer",
    "PipelineGenerator",
    "PipelineOrderError",
    "PlanetCountLayer",
    "PlanetOptions",
    "PlanetPlacementLayer",
    "StellarCompanionLayer",
    "TrojanLayer",
    "create_pipeline",
    "create_system_pipeline",
]
