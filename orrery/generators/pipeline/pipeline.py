"""Pipeline generator that orchestrates layer-based system generation.

The PipelineGenerator runs a sequence of GenerationLayers, each filling in
part of a shared GenerationContext. The random draws of every layer come from
one DiceRoller, so the order of the layers is part of the reproducibility
contract.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .context import SEED_FIELDS, GenerationContext

if TYPE_CHECKING:
    from orrery.system import StarSystem
    from orrery.util.dice import DiceRoller

    from .context import PlanetOptions
    from .layer import GenerationLayer

logger = logging.getLogger(__name__)


class PipelineOrderError(ValueError):
    """Raised when a layer needs a field that no earlier layer provides."""


def validate_layer_order(layers: list[GenerationLayer]) -> None:
    """Check that every layer's requirements are met by earlier layers.

    Raises:
        PipelineOrderError: If a layer requires a field that is not yet
            available, or provides a field an earlier layer already provided.
    """
    available = set(SEED_FIELDS)
    for position, layer in enumerate(layers):
        missing = layer.requires - available
        if missing:
            raise PipelineOrderError(
                f"{layer.name} (position {position}) requires "
                f"{sorted(missing)} which no earlier layer provides"
            )
        duplicated = layer.provides & available
        if duplicated:
            raise PipelineOrderError(
                f"{layer.name} (position {position}) provides "
                f"{sorted(duplicated)} which is already provided"
            )
        available |= layer.provides


class PipelineGenerator:
    """System generator that runs layers sequentially on a shared context.

    Example:
        generator = PipelineGenerator(
            layers=[
                StellarCompanionLayer(),
                PlanetCountLayer(),
                PlanetPlacementLayer(),
                TrojanLayer(),
                BeltLayer(),
                BrownDwarfLayer(),
            ]
        )
        system = generator.generate("G2", DiceRoller.from_seed("0101"))

    Attributes:
        layers: List of GenerationLayer instances to apply.
    """

    def __init__(self, layers: list[GenerationLayer]) -> None:
        """Initialize the pipeline generator.

        Args:
            layers: List of GenerationLayer instances to apply in order.

        Raises:
            PipelineOrderError: If the layers are not in dependency order.
        """
        validate_layer_order(layers)
        self.layers = list(layers)

    def run(self, ctx: GenerationContext) -> GenerationContext:
        """Apply each layer to ``ctx`` in order and return it."""
        for layer in self.layers:
            layer.apply(ctx)
            logger.debug(f"{layer.name} applied to {ctx.stellar_type!r}")
        return ctx

    def generate(
        self,
        stellar_type: str,
        dice: DiceRoller,
        options: PlanetOptions | None = None,
    ) -> StarSystem:
        """Generate a system by running all layers in sequence.

        Returns:
            The assembled StarSystem.
        """
        ctx = GenerationContext.create(stellar_type, dice, options)
        self.run(ctx)
        return ctx.to_star_system()
