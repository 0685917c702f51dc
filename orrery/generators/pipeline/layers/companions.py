"""Stellar companion layer.

Roughly half of all stars have a stellar companion, and about one binary in
ten is actually a trinary. Companions are the same spectral class as the
primary or up to two classes cooler, never hotter.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from orrery import config
from orrery.constants import COMPANION_TYPE_ORDER
from orrery.generators.pipeline.layer import GenerationLayer
from orrery.system import StellarCompanion

if TYPE_CHECKING:
    from orrery.generators.pipeline.context import GenerationContext
    from orrery.types import AU
    from orrery.util.dice import DiceRoller

_LOG_MIN_SEPARATION = math.log(config.COMPANION_SEPARATION_MIN_AU)
_LOG_MAX_SEPARATION = math.log(config.COMPANION_SEPARATION_MAX_AU)


def roll_companion_type(dice: DiceRoller, primary_type: str) -> str:
    """Roll a companion classification such as "K4".

    Primaries outside the O-M sequence always get a plain "M" companion and
    consume no draws.
    """
    if primary_type not in COMPANION_TYPE_ORDER:
        return config.UNKNOWN_PRIMARY_COMPANION_TYPE

    primary_index = COMPANION_TYPE_ORDER.index(primary_type)
    offset = math.floor(dice.next() * (config.COMPANION_MAX_CLASS_OFFSET + 1))
    companion_index = min(len(COMPANION_TYPE_ORDER) - 1, primary_index + offset)

    digit = dice.roll_die(config.SUBTYPE_DIGIT_DIE)
    return f"{COMPANION_TYPE_ORDER[companion_index]}{digit}"


def roll_separation(dice: DiceRoller) -> AU:
    """Log-uniform separation between 0.1 and 1000 AU."""
    u = dice.next()
    return math.exp(
        _LOG_MIN_SEPARATION + u * (_LOG_MAX_SEPARATION - _LOG_MIN_SEPARATION)
    )


def roll_stellar_companions(
    dice: DiceRoller, primary_type: str
) -> list[StellarCompanion]:
    """Roll zero, one or two stellar companions for a primary."""
    companions: list[StellarCompanion] = []

    if dice.roll_percentile() > config.COMPANION_CHANCE:
        return companions

    companions.append(
        StellarCompanion(
            stellar_type=roll_companion_type(dice, primary_type),
            separation_au=roll_separation(dice),
        )
    )

    if dice.roll_percentile() <= config.TRINARY_CHANCE:
        # Outer companion of a trinary sits further out
        companions.append(
            StellarCompanion(
                stellar_type=roll_companion_type(dice, primary_type),
                separation_au=(
                    roll_separation(dice) * config.TRINARY_SEPARATION_MULTIPLIER
                ),
            )
        )

    return companions


class StellarCompanionLayer(GenerationLayer):
    """Decides stellar multiplicity before any planet is placed."""

    requires = frozenset({"primary_type"})
    provides = frozenset({"companions", "is_binary"})

    def apply(self, ctx: GenerationContext) -> None:
        ctx.companions.extend(roll_stellar_companions(ctx.dice, ctx.primary_type))
        ctx.is_binary = ctx.stellar_companion_count() > 0
