"""Trojan cluster layer.

Gas giants may hold co-orbital asteroid swarms at their L4 and L5 Lagrange
points. A giant either has both swarms or neither.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from orrery import config
from orrery.generators.pipeline.layer import GenerationLayer
from orrery.system import Trojan

if TYPE_CHECKING:
    from orrery.generators.pipeline.context import GenerationContext
    from orrery.system import Planet
    from orrery.util.dice import DiceRoller


def generate_trojan_populations(
    dice: DiceRoller, gas_giants: Iterable[Planet]
) -> list[Trojan]:
    """Roll L4/L5 Trojan pairs for each gas giant in order.

    Planets that are not gas giants are skipped without consuming a draw.
    """
    trojans: list[Trojan] = []

    for giant in gas_giants:
        if not giant.is_gas_giant:
            continue
        if dice.roll_percentile() > config.TROJAN_CHANCE:
            continue

        for lagrange_point in ("L4", "L5"):
            trojans.append(
                Trojan(
                    parent_planet=giant.name,
                    orbit_au=giant.orbit_au,
                    lagrange_point=lagrange_point,
                    population=dice.roll_die(6) * config.TROJAN_POPULATION_STEP,
                )
            )

    return trojans


class TrojanLayer(GenerationLayer):
    """Adds Trojan clusters; leaves ``trojans`` unset without gas giants."""

    requires = frozenset({"planets"})
    provides = frozenset({"trojans"})

    def apply(self, ctx: GenerationContext) -> None:
        gas_giants = ctx.gas_giants
        if gas_giants:
            ctx.trojans = generate_trojan_populations(ctx.dice, gas_giants)
