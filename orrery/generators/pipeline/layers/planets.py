"""Planet count and placement layers.

Planet count comes from a 2d6 table biased by spectral class: cooler stars
(K, M) average more planets, hot massive stars (O, B, A) fewer, and a stellar
companion costs roughly one planet's worth of stable orbits.

Placement walks outward from 0.3-0.5 AU, multiplying the orbit by 1.4-2.2
after each planet. This Titius-Bode-like spacing is the only thing keeping
orbits strictly increasing; the constants live in config and must not be
replaced with a literal Titius-Bode formula.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from orrery import config
from orrery.constants import CelestialType, lookup_planet_count, lookup_stellar_type
from orrery.generators.pipeline.context import PlanetOptions
from orrery.generators.pipeline.layer import GenerationLayer
from orrery.system import Planet

if TYPE_CHECKING:
    from orrery.generators.pipeline.context import GenerationContext
    from orrery.util.dice import DiceRoller

logger = logging.getLogger(__name__)

_MIN_TABLE_ROLL = 2
_MAX_TABLE_ROLL = 12


def roll_planet_count(
    dice: DiceRoller, primary_type: str, is_binary: bool = False
) -> int:
    """Roll the number of planets for a primary of class ``primary_type``.

    Unknown classes roll with no modifier. The result is always one of the
    values in PLANET_COUNT_TABLE.
    """
    roll = dice.roll_2d6()
    roll += lookup_stellar_type(primary_type).planet_mod

    if is_binary:
        roll -= config.BINARY_PLANET_COUNT_PENALTY

    roll = max(_MIN_TABLE_ROLL, min(_MAX_TABLE_ROLL, roll))
    return lookup_planet_count(roll)


def generate_planets(
    dice: DiceRoller,
    count: int,
    primary_type: str = "",
    options: PlanetOptions | None = None,
) -> list[Planet]:
    """Place ``count`` planets outward from the primary.

    Draw order per planet: gas-giant percentile (third planet onward only),
    radius die, mass draw, habitable-zone relocation (only when it applies),
    then the spacing factor for the next orbit.

    ``primary_type`` does not affect placement; it is accepted so callers can
    pass the same arguments to every stage.
    """
    if options is None:
        options = PlanetOptions()

    planets: list[Planet] = []
    orbit = config.INITIAL_ORBIT_BASE_AU + dice.next() * config.INITIAL_ORBIT_SPREAD_AU

    for position in range(count):
        is_gas_giant = (
            position >= config.GAS_GIANT_MIN_POSITION
            and dice.roll_percentile() <= config.GAS_GIANT_CHANCE
        )

        if is_gas_giant:
            planet_type = CelestialType.GAS_GIANT
            radius_km = (
                config.GAS_GIANT_RADIUS_BASE_KM
                + dice.roll_die(6) * config.GAS_GIANT_RADIUS_STEP_KM
            )
            mass = (
                config.GAS_GIANT_MASS_BASE
                + dice.roll_die(6) * config.GAS_GIANT_MASS_STEP
            )
        else:
            planet_type = CelestialType.PLANET
            radius_km = (
                config.ROCKY_RADIUS_BASE_KM
                + dice.roll_die(6) * config.ROCKY_RADIUS_STEP_KM
            )
            mass = config.ROCKY_MASS_BASE + dice.next() * config.ROCKY_MASS_SPREAD

        # A mainworld already holds the habitable zone
        if options.skip_habitable_zone and options.in_habitable_zone(orbit):
            orbit = (
                options.habitable_zone_outer_au
                + config.HABITABLE_ZONE_SKIP_OFFSET_AU
                + dice.next() * config.HABITABLE_ZONE_SKIP_SPREAD_AU
            )

        index = position + 1
        planets.append(
            Planet(
                type=planet_type,
                orbit_au=orbit,
                index=index,
                name=f"Planet {index}",
                radius_km=radius_km,
                mass=mass,
            )
        )

        orbit *= config.ORBIT_SPACING_BASE + dice.next() * config.ORBIT_SPACING_SPREAD

    return planets


class PlanetCountLayer(GenerationLayer):
    """Resolves how many planets the system has."""

    requires = frozenset({"primary_type", "is_binary"})
    provides = frozenset({"planet_count"})

    def apply(self, ctx: GenerationContext) -> None:
        ctx.planet_count = roll_planet_count(ctx.dice, ctx.primary_type, ctx.is_binary)


class PlanetPlacementLayer(GenerationLayer):
    """Places and classifies each planet."""

    requires = frozenset({"planet_count", "options"})
    provides = frozenset({"planets"})

    def apply(self, ctx: GenerationContext) -> None:
        ctx.planets = generate_planets(
            ctx.dice, ctx.planet_count, ctx.primary_type, ctx.options
        )
        logger.debug(
            f"Placed {len(ctx.planets)} planets "
            f"({len(ctx.gas_giants)} gas giants) around {ctx.stellar_type!r}"
        )
