"""Generation context for the star-system pipeline.

The GenerationContext is a mutable container that holds all state during a
single system generation. Each layer in the pipeline receives the same context
and fills in the fields it provides. Once the last layer has run, the context
is frozen into a StarSystem and discarded.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from orrery import config
from orrery.system import StarSystem, StellarCompanion

if TYPE_CHECKING:
    from orrery.system import Belt, Companion, Planet, Trojan
    from orrery.types import AU
    from orrery.util.dice import DiceRoller

# Fields available before any layer runs
SEED_FIELDS: frozenset[str] = frozenset({"stellar_type", "primary_type", "options"})


@dataclass(frozen=True)
class PlanetOptions:
    """Habitable-zone handling for planet placement.

    Attributes:
        habitable_zone_inner_au: Inner edge of the habitable zone.
        habitable_zone_outer_au: Outer edge of the habitable zone.
        skip_habitable_zone: Move planets out of the habitable zone, used when
            a mainworld already occupies it.
    """

    habitable_zone_inner_au: AU = config.HABITABLE_ZONE_INNER_AU
    habitable_zone_outer_au: AU = config.HABITABLE_ZONE_OUTER_AU
    skip_habitable_zone: bool = False

    @classmethod
    def create(
        cls,
        habitable_zone_inner_au: AU | None = None,
        habitable_zone_outer_au: AU | None = None,
        skip_habitable_zone: bool = False,
    ) -> PlanetOptions:
        """Build options, treating missing or zero bounds as the defaults."""
        return cls(
            habitable_zone_inner_au=(
                habitable_zone_inner_au or config.HABITABLE_ZONE_INNER_AU
            ),
            habitable_zone_outer_au=(
                habitable_zone_outer_au or config.HABITABLE_ZONE_OUTER_AU
            ),
            skip_habitable_zone=bool(skip_habitable_zone),
        )

    def in_habitable_zone(self, orbit_au: AU) -> bool:
        return self.habitable_zone_inner_au <= orbit_au <= self.habitable_zone_outer_au


def primary_type_of(stellar_type: str) -> str:
    """First character of ``stellar_type``, upper-cased ("" if empty)."""
    return stellar_type[:1].upper()


@dataclass
class GenerationContext:
    """Mutable state container passed through the generation pipeline.

    Attributes:
        stellar_type: Full classification of the primary, e.g. "G2".
        primary_type: Single upper-case class letter of the primary.
        dice: The roller every layer draws from, in pipeline order.
        options: Habitable-zone handling for planet placement.
        companions: Stellar companions, then any brown dwarf.
        is_binary: Whether at least one stellar companion exists.
        planet_count: Resolved number of planets to place.
        planets: Planets ordered by increasing orbit.
        trojans: Trojan clusters, or None when there are no gas giants.
        belts: Debris field and/or Kuiper belt.
    """

    stellar_type: str
    primary_type: str
    dice: DiceRoller
    options: PlanetOptions = field(default_factory=PlanetOptions)
    companions: list[Companion] = field(default_factory=list)
    is_binary: bool = False
    planet_count: int = 0
    planets: list[Planet] = field(default_factory=list)
    trojans: list[Trojan] | None = None
    belts: list[Belt] = field(default_factory=list)

    @classmethod
    def create(
        cls,
        stellar_type: str,
        dice: DiceRoller,
        options: PlanetOptions | None = None,
    ) -> GenerationContext:
        """Create a context ready for layer processing.

        Raises:
            TypeError: If ``stellar_type`` is not a string.
        """
        if not isinstance(stellar_type, str):
            raise TypeError(
                f"stellar_type must be a string, got {type(stellar_type).__name__}"
            )
        return cls(
            stellar_type=stellar_type,
            primary_type=primary_type_of(stellar_type),
            dice=dice,
            options=options if options is not None else PlanetOptions(),
        )

    @property
    def gas_giants(self) -> list[Planet]:
        return [p for p in self.planets if p.is_gas_giant]

    def stellar_companion_count(self) -> int:
        return sum(1 for c in self.companions if isinstance(c, StellarCompanion))

    def to_star_system(self) -> StarSystem:
        """Freeze this context into the final StarSystem record."""
        return StarSystem(
            stellar_type=self.stellar_type,
            primary_type=self.primary_type,
            companions=tuple(self.companions),
            planets=tuple(self.planets),
            belts=tuple(self.belts),
            trojans=None if self.trojans is None else tuple(self.trojans),
        )
