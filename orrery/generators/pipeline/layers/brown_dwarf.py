"""Brown dwarf companion layer.

About one system in a hundred has a sub-stellar companion. The roll is
independent of stellar multiplicity: a trinary may still gain a brown dwarf.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from orrery import config
from orrery.generators.pipeline.layer import GenerationLayer
from orrery.system import BrownDwarfCompanion

if TYPE_CHECKING:
    from orrery.generators.pipeline.context import GenerationContext
    from orrery.util.dice import DiceRoller

logger = logging.getLogger(__name__)


def brown_dwarf_subtype(mass_jupiter: float) -> str:
    """Spectral subclass letter for a brown dwarf of the given mass."""
    if mass_jupiter > config.BROWN_DWARF_L_MASS:
        return "L"
    if mass_jupiter > config.BROWN_DWARF_T_MASS:
        return "T"
    return "Y"


def round_tenth(value: float) -> float:
    """Round to one decimal, halves upward."""
    return math.floor(value * 10 + 0.5) / 10


def generate_brown_dwarf(dice: DiceRoller) -> BrownDwarfCompanion:
    """Generate a brown dwarf of 13-83 Jupiter masses."""
    mass = (
        config.BROWN_DWARF_MASS_BASE
        + dice.roll_die(6) * config.BROWN_DWARF_MASS_STEP
        + dice.next() * config.BROWN_DWARF_MASS_SPREAD
    )
    subtype = brown_dwarf_subtype(mass)
    digit = dice.roll_die(config.SUBTYPE_DIGIT_DIE)

    return BrownDwarfCompanion(
        stellar_type=f"{subtype}{digit}",
        mass_jupiter=round_tenth(mass),
        separation_au=(
            config.BROWN_DWARF_SEPARATION_BASE_AU
            + dice.next() * config.BROWN_DWARF_SEPARATION_SPREAD_AU
        ),
        temperature=config.BROWN_DWARF_TEMPERATURES[subtype],
    )


class BrownDwarfLayer(GenerationLayer):
    """Final stage: rare brown dwarf appended after any stellar companions."""

    requires = frozenset({"companions", "trojans", "belts"})
    provides = frozenset()

    def apply(self, ctx: GenerationContext) -> None:
        if ctx.dice.roll_percentile() > config.BROWN_DWARF_CHANCE:
            return

        brown_dwarf = generate_brown_dwarf(ctx.dice)
        ctx.companions.append(brown_dwarf)
        logger.debug(
            f"Brown dwarf {brown_dwarf.stellar_type} at "
            f"{brown_dwarf.separation_au:.1f} AU around {ctx.stellar_type!r}"
        )
