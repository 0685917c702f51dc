"""Abstract base class for generation layers.

Each layer in the pipeline implements the GenerationLayer interface and fills
in part of the GenerationContext: companions, planets, belts and so on.

Layers declare which context fields they read (``requires``) and which they
write (``provides``). The PipelineGenerator checks these declarations when it
is built, so a pipeline whose stages are out of order is rejected before a
single die is rolled.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from .context import GenerationContext


class GenerationLayer(ABC):
    """Abstract base class for star-system generation layers.

    Layers are applied sequentially by the PipelineGenerator. Each layer
    receives a GenerationContext and modifies it in place, drawing every
    random value from ``ctx.dice``.

    Subclasses must set ``requires`` and ``provides`` and implement apply().
    """

    requires: ClassVar[frozenset[str]] = frozenset()
    provides: ClassVar[frozenset[str]] = frozenset()

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def apply(self, ctx: GenerationContext) -> None:
        """Apply this layer's generation logic to the context.

        Args:
            ctx: The generation context to modify.
        """
        raise NotImplementedError
