from __future__ import annotations

import pytest

from orrery.util.dice import Dice, DiceRoller
from orrery.util.rng import SeededSource
from tests.helpers import FixedSource, die_value, fixed_dice, percentile_value


def test_roll_die_maps_unit_interval_to_faces():
    roller = fixed_dice(0.0, 0.999999, 0.5)
    assert roller.roll_die(6) == 1
    assert roller.roll_die(6) == 6
    assert roller.roll_die(6) == 4


def test_roll_die_rejects_bad_sides():
    roller = fixed_dice()
    for bad in (0, -6, 2.5, True):
        with pytest.raises(ValueError):
            roller.roll_die(bad)


def test_roll_2d6_rolls_first_then_second():
    source = FixedSource([die_value(2, 6), die_value(5, 6)])
    roller = DiceRoller(source)
    assert roller.roll_2d6() == 7
    assert source.remaining == 0


def test_roll_percentile_bounds():
    roller = fixed_dice(0.0, 0.999999, percentile_value(40))
    assert roller.roll_percentile() == 1
    assert roller.roll_percentile() == 100
    assert roller.roll_percentile() == 40


def test_seeded_rolls_stay_in_range():
    roller = DiceRoller(SeededSource("dice"))
    for _ in range(200):
        assert 1 <= roller.roll_die(6) <= 6
        assert 2 <= roller.roll_2d6() <= 12
        assert 1 <= roller.roll_percentile() <= 100


def test_from_seed_matches_seeded_source():
    a = DiceRoller.from_seed("0101")
    b = DiceRoller(SeededSource("0101"))
    assert [a.roll_percentile() for _ in range(10)] == [
        b.roll_percentile() for _ in range(10)
    ]


def test_first_percentile_for_hex_0101():
    """First draw of "0101" is 321108484 / 2**32, about 0.0748."""
    assert DiceRoller.from_seed("0101").roll_percentile() == 8


def test_dice_parsing():
    d = Dice("2d6+1")
    assert (d.num_dice, d.sides, d.multiplier, d.modifier) == (2, 6, 1, 1)
    d = Dice("d9")
    assert (d.num_dice, d.sides, d.multiplier, d.modifier) == (1, 9, 1, 0)
    d = Dice("-d4")
    assert (d.num_dice, d.sides, d.multiplier, d.modifier) == (1, 4, -1, 0)
    d = Dice("d6-1")
    assert (d.num_dice, d.sides, d.multiplier, d.modifier) == (1, 6, 1, -1)
    d = Dice("5")
    assert (d.num_dice, d.sides, d.multiplier, d.modifier) == (0, 5, 0, 0)
    for bad in ("notadice", "d0", "2d", "d6+x"):
        with pytest.raises(ValueError):
            Dice(bad)


def test_dice_roll_consumes_one_draw_per_die():
    source = FixedSource([die_value(3, 6), die_value(6, 6)])
    assert Dice("2d6+1").roll(DiceRoller(source)) == 10
    assert source.remaining == 0


def test_dice_fixed_and_negative():
    assert Dice("5").roll(fixed_dice()) == 5
    assert Dice("-d4").roll(fixed_dice(die_value(3, 4))) == -3


def test_dice_bounds():
    assert (Dice("2d6").minimum, Dice("2d6").maximum) == (2, 12)
    assert (Dice("-d4+1").minimum, Dice("-d4+1").maximum) == (-3, 0)
    assert (Dice("7").minimum, Dice("7").maximum) == (7, 7)


def test_roller_roll_notation():
    roller = fixed_dice(die_value(1, 6), die_value(1, 6))
    assert roller.roll("2d6") == 2
    assert str(Dice("2d6")) == "2d6"
