"""
Dice rolling on top of a deterministic random source.

This module provides two main areas of functionality:
1.  DiceRoller:
    Integer die rolls, 2d6 sums and percentile rolls drawn from a single
    RandomSource. Every roll consumes a fixed number of draws, so a seeded
    roller replays exactly the same rolls in the same order.

2.  Dice notation:
    The `Dice` class parses strings such as "2d6+1", "-d4" or "5" and rolls
    them against a DiceRoller.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from orrery.util.rng import RandomSource, create_source

if TYPE_CHECKING:
    from orrery.types import Percentile, RandomSeed


class DiceRoller:
    """Arithmetic layer over a RandomSource.

    All rolls are derived from ``source.next()``:
    - roll_die(n) consumes one draw
    - roll_2d6() consumes two draws (first die, then second)
    - roll_percentile() consumes one draw
    """

    def __init__(self, source: RandomSource | None = None) -> None:
        self.source = source if source is not None else create_source(None)

    @classmethod
    def from_seed(cls, seed: RandomSeed) -> DiceRoller:
        """Create a roller whose source is derived from ``seed``."""
        return cls(create_source(seed))

    def next(self) -> float:
        """Return the next uniform float in [0.0, 1.0)."""
        return self.source.next()

    def roll_die(self, sides: int) -> int:
        """Roll a single die with the specified number of sides.

        Args:
            sides: The number of sides on the die (e.g., 6, 9, 100).

        Returns:
            The result of the die roll (an integer between 1 and `sides`).

        Raises:
            ValueError: If `sides` is not a positive integer.
        """
        if not isinstance(sides, int) or isinstance(sides, bool) or sides <= 0:
            raise ValueError("Number of sides must be a positive integer.")
        return math.floor(self.source.next() * sides) + 1

    def roll_2d6(self) -> int:
        """Sum of two six-sided dice, rolled first then second."""
        first = self.roll_die(6)
        second = self.roll_die(6)
        return first + second

    def roll_percentile(self) -> Percentile:
        """Roll d100, returning 1-100 inclusive."""
        return math.floor(self.source.next() * 100) + 1

    def roll(self, notation: str) -> int:
        """Roll a dice expression such as "2d6+1"."""
        return Dice(notation).roll(self)


class Dice:
    """A class representing dice that can be rolled.

    This class handles parsing dice strings like "d9", "-d4", "2d6", "2d6+1",
    and rolls them against a DiceRoller.
    """

    def __init__(self, dice_str: str) -> None:
        """Initialize a Dice object from a string representation.

        Args:
            dice_str: String representation of the dice
                      (e.g., "d6", "-d4", "2d6", "2d6+1")

        Raises:
            ValueError: If the dice string format is invalid
        """
        self.dice_str = dice_str
        self.num_dice, self.sides, self.multiplier, self.modifier = (
            self._parse_dice_str(dice_str)
        )

    def _parse_dice_str(self, dice_str: str) -> tuple[int, int, int, int]:
        """Parse a dice string into (number of dice, sides, multiplier, modifier).

        Raises:
            ValueError: If the dice string format is invalid
        """
        dice_str = dice_str.replace(" ", "")

        modifier = 0
        dice_part = dice_str

        # Modifiers (e.g., "2d6+1" or "d6-1")
        if "+" in dice_str:
            dice_part, mod_part = dice_str.split("+", 1)
            modifier = self._parse_int(mod_part, dice_str)
        elif "-" in dice_str and not dice_str.startswith("-"):
            # A leading "-" negates the dice rather than marking a modifier
            dice_part, mod_part = dice_str.split("-", 1)
            modifier = -self._parse_int(mod_part, dice_str)

        # Fixed values (e.g., "5" or "-3")
        if dice_part.lstrip("-").isdigit():
            return 0, int(dice_part), 0, modifier

        # Negative dice (e.g., "-d4")
        if dice_part.startswith("-d"):
            return 1, self._parse_sides(dice_part[2:], dice_str), -1, modifier

        # Standard dice with optional count (e.g., "d9" or "2d6")
        if "d" in dice_part:
            count, _, sides = dice_part.partition("d")
            num_dice = 1 if count == "" else self._parse_int(count, dice_str)
            return num_dice, self._parse_sides(sides, dice_str), 1, modifier

        raise ValueError(f"Invalid dice format: {dice_str}")

    @staticmethod
    def _parse_int(text: str, dice_str: str) -> int:
        if not text.isdigit():
            raise ValueError(f"Invalid dice format: {dice_str}")
        return int(text)

    @classmethod
    def _parse_sides(cls, text: str, dice_str: str) -> int:
        sides = cls._parse_int(text, dice_str)
        if sides <= 0:
            raise ValueError(f"Invalid dice format: {dice_str}")
        return sides

    def roll(self, roller: DiceRoller) -> int:
        """Roll the dice against ``roller`` and return the result.

        Dice are rolled left to right, one draw each.
        """
        if self.num_dice == 0:
            return self.sides + self.modifier

        result = 0
        for _ in range(self.num_dice):
            result += roller.roll_die(self.sides)

        return (self.multiplier * result) + self.modifier

    @property
    def minimum(self) -> int:
        """Smallest possible result."""
        if self.num_dice == 0:
            return self.sides + self.modifier
        low, high = self.num_dice, self.num_dice * self.sides
        return min(self.multiplier * low, self.multiplier * high) + self.modifier

    @property
    def maximum(self) -> int:
        """Largest possible result."""
        if self.num_dice == 0:
            return self.sides + self.modifier
        low, high = self.num_dice, self.num_dice * self.sides
        return max(self.multiplier * low, self.multiplier * high) + self.modifier

    def __str__(self) -> str:
        """Return the string representation of the dice."""
        return self.dice_str
