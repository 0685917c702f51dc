"""Generation layers for the star-system pipeline.

Each layer fills in one stage of the GenerationContext:
- Companion layers: Stellar multiplicity (binary/trinary)
- Planet layers: Planet count, then orbital placement and classification
- Trojan layers: L4/L5 clusters around gas giants
- Belt layers: Debris field and Kuiper belt
- Brown dwarf layers: Rare sub-stellar companion
"""

from .belts import BeltLayer, generate_debris_belts
from .brown_dwarf import BrownDwarfLayer, generate_brown_dwarf
from .companions import (
    StellarCompanionLayer,
    roll_companion_type,
    roll_separation,
    roll_stellar_companions,
)
from .planets import (
    PlanetCountLayer,
    PlanetPlacementLayer,
    generate_planets,
    roll_planet_count,
)
from .trojans import TrojanLayer, generate_trojan_populations

__all__ = [
    "BeltLayer",
    "BrownDwarfLayer",
    "PlanetCountLayer",
    "PlanetPlacementLayer",
    "StellarCompanionLayer",
    "TrojanLayer",
    "generate_brown_dwarf",
    "generate_debris_belts",
    "generate_planets",
    "generate_trojan_populations",
    "roll_companion_type",
    "roll_planet_count",
    "roll_separation",
    "roll_stellar_companions",
]
