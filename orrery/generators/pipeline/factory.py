"""Factory functions for creating pre-configured pipelines.

Currently implemented:
- "system": Full star system (companions, planets, Trojans, belts, brown dwarf)
"""

from __future__ import annotations

from .layers import (
    BeltLayer,
    BrownDwarfLayer,
    PlanetCountLayer,
    PlanetPlacementLayer,
    StellarCompanionLayer,
    TrojanLayer,
)
from .pipeline import PipelineGenerator


def create_pipeline(name: str) -> PipelineGenerator:
    """Create a pre-configured pipeline by name.

    Available pipelines:
    - "system": Complete star system generation

    Raises:
        ValueError: If the pipeline name is not recognized.
    """
    if name == "system":
        return create_system_pipeline()
    raise ValueError(f"Unknown pipeline name: {name!r}")


def create_system_pipeline() -> PipelineGenerator:
    """Create the standard star-system pipeline.

    The stages run in this order, which fixes the draw sequence for every
    seeded system:
    1. Stellar companions (binary/trinary)
    2. Planet count (binary systems lose a step on the table)
    3. Planet placement and classification
    4. Trojan clusters around gas giants
    5. Debris field and Kuiper belt
    6. Rare brown dwarf companion
    """
    layers = [
        StellarCompanionLayer(),
        PlanetCountLayer(),
        PlanetPlacementLayer(),
        TrojanLayer(),
        BeltLayer(),
        BrownDwarfLayer(),
    ]
    return PipelineGenerator(layers=layers)
