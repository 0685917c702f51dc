from __future__ import annotations

from collections.abc import Iterable

from orrery.constants import CelestialType
from orrery.system import Planet
from orrery.util.dice import DiceRoller

UINT32_RANGE = 4294967296


class FixedSource:
    """Random source that replays a scripted list of floats.

    Raises AssertionError when more values are drawn than were scripted, so a
    test fails loudly if a stage consumes an unexpected draw.
    """

    def __init__(self, values: Iterable[float]) -> None:
        self.values = list(values)
        self.index = 0

    def next(self) -> float:
        assert self.index < len(self.values), (
            f"FixedSource exhausted after {len(self.values)} draws"
        )
        value = self.values[self.index]
        self.index += 1
        return value

    @property
    def remaining(self) -> int:
        return len(self.values) - self.index


def fixed_dice(*values: float) -> DiceRoller:
    """A DiceRoller over a FixedSource."""
    return DiceRoller(FixedSource(values))


def die_value(face: int, sides: int) -> float:
    """A draw that produces ``face`` on a die with ``sides`` sides."""
    return (face - 0.5) / sides


def percentile_value(result: int) -> float:
    """A draw that produces ``result`` on d100."""
    return die_value(result, 100)


def make_planet(
    index: int,
    orbit_au: float,
    gas_giant: bool = False,
) -> Planet:
    return Planet(
        type=CelestialType.GAS_GIANT if gas_giant else CelestialType.PLANET,
        orbit_au=orbit_au,
        index=index,
        name=f"Planet {index}",
        radius_km=50000 if gas_giant else 6000,
        mass=200 if gas_giant else 1.0,
    )
