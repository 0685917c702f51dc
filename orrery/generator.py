"""Star system generator.

Turns a stellar classification, and optionally a hex id used as a seed, into
a complete StarSystem: stellar companions, planets, belts, Trojan clusters
and the occasional brown dwarf.

Usage:
    generator = StarSystemGenerator()
    system = generator.generate_for_hex("0101", "G2", {"mainWorld": True})
    payload = system.to_dict()

Each instance owns one random source. Generating from the same hex id on any
instance, in any process, gives the same system; concurrent callers must
not share an instance.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Any

from orrery import config
from orrery.generators.pipeline import PlanetOptions, create_system_pipeline
from orrery.generators.pipeline.layers import (
    generate_brown_dwarf,
    generate_debris_belts,
    generate_planets,
    generate_trojan_populations,
    roll_companion_type,
    roll_planet_count,
    roll_separation,
    roll_stellar_companions,
)
from orrery.util.dice import DiceRoller
from orrery.util.rng import CallableSource, RandomSource, SeededSource, create_source

if TYPE_CHECKING:
    from orrery.system import (
        Belt,
        BrownDwarfCompanion,
        Planet,
        StarSystem,
        StellarCompanion,
        Trojan,
    )
    from orrery.types import AU, RandomSeed

logger = logging.getLogger(__name__)


class StarSystemGenerator:
    """Seeded star-system generator.

    Attributes:
        dice: The roller every stage draws from.
        seed: The seed the current source was created from, if any.
    """

    def __init__(
        self,
        seed: RandomSeed = None,
        rng: RandomSource | Callable[[], float] | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            seed: Optional seed for reproducible generation. Takes precedence
                over ``rng``.
            rng: Optional source of floats in [0, 1): either an object with a
                next() method or a zero-argument callable such as
                ``random.random``. Defaults to system entropy.
        """
        self.seed = seed
        if seed is not None and seed != "":
            source: RandomSource = SeededSource(seed)
        elif rng is None:
            source = create_source(None)
        elif isinstance(rng, RandomSource):
            source = rng
        else:
            source = CallableSource(rng)
        self.dice = DiceRoller(source)
        self.pipeline = create_system_pipeline()

    def reseed(self, seed: RandomSeed) -> None:
        """Replace the random source, restarting the sequence from ``seed``.

        Any string, the empty string included, seeds deterministically, the
        same way generate_for_hex() does. ``None`` switches to entropy.
        """
        self.seed = seed
        if seed is None:
            self.dice = DiceRoller(create_source(None))
        else:
            self.dice = DiceRoller(SeededSource(seed))

    # -------------------------------------------------------------------------
    # Dice
    # -------------------------------------------------------------------------

    def rng(self) -> float:
        return self.dice.next()

    def roll(self, sides: int) -> int:
        return self.dice.roll_die(sides)

    def roll_2d6(self) -> int:
        return self.dice.roll_2d6()

    def roll_percent(self) -> int:
        return self.dice.roll_percentile()

    # -------------------------------------------------------------------------
    # Assembly
    # -------------------------------------------------------------------------

    def generate(
        self,
        stellar_type: str = config.DEFAULT_STELLAR_TYPE,
        *,
        habitable_zone_inner_au: AU | None = None,
        habitable_zone_outer_au: AU | None = None,
        skip_habitable_zone: bool = False,
    ) -> StarSystem:
        """Generate a complete system around a primary of ``stellar_type``.

        Args:
            stellar_type: Primary classification, e.g. "G2" or "M5". Only the
                first letter affects generation; unknown letters get neutral
                modifiers.
            habitable_zone_inner_au: Inner habitable-zone edge (default 0.8).
            habitable_zone_outer_au: Outer habitable-zone edge (default 1.5).
            skip_habitable_zone: Keep planets out of the habitable zone.

        Raises:
            TypeError: If ``stellar_type`` is not a string.
        """
        options = PlanetOptions.create(
            habitable_zone_inner_au=habitable_zone_inner_au,
            habitable_zone_outer_au=habitable_zone_outer_au,
            skip_habitable_zone=skip_habitable_zone,
        )
        system = self.pipeline.generate(stellar_type, self.dice, options)
        logger.info(
            f"Generated {system.stellar_type!r} system: "
            f"{len(system.companions)} companions, {len(system.planets)} planets, "
            f"{len(system.belts)} belts, {len(system.trojans or ())} trojans"
        )
        return system

    def generate_for_hex(
        self,
        hex_id: str,
        stellar_type: str = config.DEFAULT_STELLAR_TYPE,
        existing_data: Mapping[str, Any] | None = None,
    ) -> StarSystem:
        """Generate the system for a sector-map hex, seeded by ``hex_id``.

        The source is reseeded from ``hex_id`` first, discarding any earlier
        state, so the same hex always yields the same system.

        Args:
            hex_id: Hex coordinate, e.g. "0101".
            stellar_type: Primary classification from sector data.
            existing_data: Known world data. A truthy ``mainWorld`` keeps
                generated planets out of the habitable zone; optional
                ``habitableZoneInnerAU``/``habitableZoneOuterAU`` override
                the zone bounds.

        Raises:
            TypeError: If ``hex_id`` or ``stellar_type`` is not a string.
        """
        if not isinstance(hex_id, str):
            raise TypeError(f"hex_id must be a string, got {type(hex_id).__name__}")
        existing_data = existing_data or {}

        self.seed = hex_id
        self.dice = DiceRoller(SeededSource(hex_id))

        return self.generate(
            stellar_type,
            habitable_zone_inner_au=existing_data.get("habitableZoneInnerAU"),
            habitable_zone_outer_au=existing_data.get("habitableZoneOuterAU"),
            skip_habitable_zone=bool(existing_data.get("mainWorld")),
        )

    # -------------------------------------------------------------------------
    # Individual stages
    # -------------------------------------------------------------------------

    def roll_stellar_companion(self, primary_type: str) -> list[StellarCompanion]:
        return roll_stellar_companions(self.dice, primary_type)

    def roll_companion_type(self, primary_type: str) -> str:
        return roll_companion_type(self.dice, primary_type)

    def roll_separation(self) -> AU:
        return roll_separation(self.dice)

    def roll_planet_count(self, stellar_type: str, is_binary: bool = False) -> int:
        return roll_planet_count(self.dice, stellar_type, is_binary)

    def generate_planets(
        self,
        count: int,
        stellar_type: str = "",
        options: PlanetOptions | None = None,
    ) -> list[Planet]:
        return generate_planets(self.dice, count, stellar_type, options)

    def generate_debris_belts(self, planets: Sequence[Planet]) -> list[Belt]:
        return generate_debris_belts(self.dice, planets)

    def generate_trojan_populations(self, gas_giants: Iterable[Planet]) -> list[Trojan]:
        return generate_trojan_populations(self.dice, gas_giants)

    def generate_brown_dwarf(self) -> BrownDwarfCompanion:
        return generate_brown_dwarf(self.dice)
