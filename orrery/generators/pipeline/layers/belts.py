"""Debris and ice belt layer.

Two independent rolls: an inner debris field (asteroid-belt analog) placed
inside the innermost gas giant, and an outer Kuiper belt beyond the
outermost planet. A system has at most one of each.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from orrery import config
from orrery.constants import CelestialType
from orrery.generators.pipeline.layer import GenerationLayer
from orrery.system import Belt

if TYPE_CHECKING:
    from orrery.generators.pipeline.context import GenerationContext
    from orrery.system import Planet
    from orrery.util.dice import DiceRoller


def generate_debris_belts(dice: DiceRoller, planets: Sequence[Planet]) -> list[Belt]:
    """Roll for a debris field and a Kuiper belt around ``planets``."""
    belts: list[Belt] = []

    gas_giant_orbits = sorted(p.orbit_au for p in planets if p.is_gas_giant)
    outermost_orbit = (
        max(p.orbit_au for p in planets)
        if planets
        else config.EMPTY_SYSTEM_OUTER_ORBIT_AU
    )

    if dice.roll_percentile() <= config.DEBRIS_FIELD_CHANCE:
        if gas_giant_orbits:
            orbit = gas_giant_orbits[0] * config.DEBRIS_FIELD_GAS_GIANT_RATIO
        else:
            orbit = (
                config.DEBRIS_FIELD_DEFAULT_BASE_AU
                + dice.next() * config.DEBRIS_FIELD_DEFAULT_SPREAD_AU
            )

        belts.append(
            Belt(
                type=CelestialType.DEBRIS_FIELD,
                name="Inner Belt",
                orbit_au=orbit,
                width_au=(
                    config.DEBRIS_FIELD_WIDTH_BASE_AU
                    + dice.next() * config.DEBRIS_FIELD_WIDTH_SPREAD_AU
                ),
                density="moderate",
            )
        )

    if dice.roll_percentile() <= config.KUIPER_BELT_CHANCE:
        orbit = outermost_orbit * (
            config.KUIPER_BELT_DISTANCE_BASE
            + dice.next() * config.KUIPER_BELT_DISTANCE_SPREAD
        )
        belts.append(
            Belt(
                type=CelestialType.KUIPER_BELT,
                name="Outer Belt",
                orbit_au=orbit,
                width_au=orbit * config.KUIPER_BELT_WIDTH_RATIO,
                density="sparse",
            )
        )

    return belts


class BeltLayer(GenerationLayer):
    """Places belts relative to the generated planets."""

    # Belt rolls are drawn after the Trojan rolls
    requires = frozenset({"planets", "trojans"})
    provides = frozenset({"belts"})

    def apply(self, ctx: GenerationContext) -> None:
        ctx.belts = generate_debris_belts(ctx.dice, ctx.planets)
