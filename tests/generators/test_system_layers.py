"""Tests for individual star-system layers.

Each stage is driven by a FixedSource so the exact draw order can be checked:
a stage that consumes one draw too many fails with an exhausted source, and
one that consumes too few leaves values behind.
"""

from __future__ import annotations

import math

import pytest

from orrery.constants import PLANET_COUNT_TABLE, CelestialType
from orrery.generators.pipeline import (
    BeltLayer,
    BrownDwarfLayer,
    GenerationContext,
    PlanetCountLayer,
    PlanetOptions,
    StellarCompanionLayer,
    TrojanLayer,
)
from orrery.generators.pipeline.layers import (
    generate_brown_dwarf,
    generate_debris_belts,
    generate_planets,
    generate_trojan_populations,
    roll_companion_type,
    roll_planet_count,
    roll_separation,
    roll_stellar_companions,
)
from orrery.generators.pipeline.layers.brown_dwarf import (
    brown_dwarf_subtype,
    round_tenth,
)
from orrery.system import BrownDwarfCompanion, StellarCompanion
from orrery.util.dice import DiceRoller
from tests.helpers import (
    FixedSource,
    die_value,
    make_planet,
    percentile_value,
)

# =============================================================================
# Stellar companions
# =============================================================================


class TestStellarCompanions:
    """Tests for companion multiplicity, subtype and separation."""

    def test_no_companion_above_fifty(self) -> None:
        source = FixedSource([percentile_value(51)])
        assert roll_stellar_companions(DiceRoller(source), "G") == []
        assert source.remaining == 0

    def test_single_companion(self) -> None:
        source = FixedSource(
            [
                percentile_value(50),  # companion
                0.5,  # one class cooler
                die_value(4, 9),  # subtype digit
                0.5,  # separation
                percentile_value(11),  # not a trinary
            ]
        )
        companions = roll_stellar_companions(DiceRoller(source), "G")

        assert len(companions) == 1
        assert companions[0].stellar_type == "K4"
        # Midpoint of the log range is the geometric mean of 0.1 and 1000
        assert companions[0].separation_au == pytest.approx(10.0)
        assert source.remaining == 0

    def test_trinary_outer_companion_is_doubled(self) -> None:
        source = FixedSource(
            [
                percentile_value(1),
                0.0,  # same class
                die_value(2, 9),
                0.0,  # minimum separation
                percentile_value(10),  # trinary
                0.99,  # two classes cooler
                die_value(9, 9),
                0.0,
            ]
        )
        companions = roll_stellar_companions(DiceRoller(source), "F")

        assert [c.stellar_type for c in companions] == ["F2", "K9"]
        assert companions[0].separation_au == pytest.approx(0.1)
        assert companions[1].separation_au == pytest.approx(0.2)
        assert all(isinstance(c, StellarCompanion) for c in companions)

    def test_companion_never_hotter_than_primary(self) -> None:
        dice = DiceRoller.from_seed("cooler")
        order = "OBAFGKM"
        for primary in order:
            for _ in range(30):
                letter = roll_companion_type(dice, primary)[0]
                assert order.index(letter) >= order.index(primary)
                assert order.index(letter) - order.index(primary) <= 2

    def test_offset_clamps_at_m(self) -> None:
        source = FixedSource([0.99, die_value(5, 9)])
        assert roll_companion_type(DiceRoller(source), "M") == "M5"

    def test_unknown_primary_gets_plain_m_without_draws(self) -> None:
        source = FixedSource([])
        assert roll_companion_type(DiceRoller(source), "L") == "M"
        assert roll_companion_type(DiceRoller(source), "") == "M"

    def test_separation_range(self) -> None:
        dice = DiceRoller.from_seed("separation")
        for _ in range(200):
            assert 0.1 <= roll_separation(dice) < 1000.0

    def test_layer_sets_binary_flag(self) -> None:
        source = FixedSource(
            [percentile_value(3), 0.0, die_value(1, 9), 0.5, percentile_value(90)]
        )
        ctx = GenerationContext.create("K7", DiceRoller(source))
        StellarCompanionLayer().apply(ctx)

        assert ctx.is_binary
        assert ctx.companions[0].stellar_type == "K1"


# =============================================================================
# Planet count
# =============================================================================


class TestPlanetCount:
    """Tests for 2d6 planet-count resolution."""

    @pytest.mark.parametrize(
        ("primary", "faces", "is_binary", "expected"),
        [
            ("G", (3, 4), False, 4),  # 7
            ("M", (6, 6), True, 10),  # 12 + 1 - 1
            ("K", (6, 6), False, 10),  # 13 clamps to 12
            ("O", (1, 1), False, 1),  # -1 clamps to 2
            ("A", (4, 4), False, 4),  # 8 - 2
            ("F", (5, 5), True, 5),  # 10 - 1 - 1
            ("X", (3, 3), False, 4),  # unknown class, no modifier
            ("", (6, 5), False, 8),
        ],
    )
    def test_table_lookup(
        self,
        primary: str,
        faces: tuple[int, int],
        is_binary: bool,
        expected: int,
    ) -> None:
        source = FixedSource([die_value(faces[0], 6), die_value(faces[1], 6)])
        assert roll_planet_count(DiceRoller(source), primary, is_binary) == expected
        assert source.remaining == 0

    def test_counts_always_in_table(self) -> None:
        allowed = set(PLANET_COUNT_TABLE.values())
        dice = DiceRoller.from_seed("counts")
        for primary in ["O", "B", "A", "F", "G", "K", "M", "L", "T", "Y", "Q"]:
            for is_binary in (False, True):
                for _ in range(40):
                    count = roll_planet_count(dice, primary, is_binary)
                    assert count in allowed

    def test_cool_stars_have_more_planets(self) -> None:
        m_total = 0
        a_total = 0
        for i in range(50):
            m_total += roll_planet_count(DiceRoller.from_seed(f"star{i}"), "M")
            a_total += roll_planet_count(DiceRoller.from_seed(f"star{i}"), "A")
        assert m_total > a_total

    def test_binary_systems_have_fewer_planets(self) -> None:
        single_total = 0
        binary_total = 0
        for i in range(100):
            single_total += roll_planet_count(
                DiceRoller.from_seed(f"binary{i}"), "G", False
            )
            binary_total += roll_planet_count(
                DiceRoller.from_seed(f"binary{i}"), "G", True
            )
        assert binary_total < single_total

    def test_layer(self) -> None:
        source = FixedSource([die_value(6, 6), die_value(6, 6)])
        ctx = GenerationContext.create("G2", DiceRoller(source))
        ctx.is_binary = True
        PlanetCountLayer().apply(ctx)
        assert ctx.planet_count == 8


# =============================================================================
# Planet placement
# =============================================================================


class TestPlanetPlacement:
    """Tests for orbital placement and classification."""

    def test_scripted_three_planets(self) -> None:
        source = FixedSource(
            [
                0.5,  # first orbit 0.4
                die_value(3, 6),  # rocky radius
                0.45,  # rocky mass 1.0
                0.5,  # spacing x1.8
                die_value(1, 6),
                0.0,  # mass 0.1
                0.0,  # spacing x1.4
                percentile_value(40),  # gas giant
                die_value(2, 6),  # radius
                die_value(6, 6),  # mass
                0.5,
            ]
        )
        planets = generate_planets(DiceRoller(source), 3, "G")

        assert [p.type for p in planets] == [
            CelestialType.PLANET,
            CelestialType.PLANET,
            CelestialType.GAS_GIANT,
        ]
        assert [p.orbit_au for p in planets] == pytest.approx([0.4, 0.72, 1.008])
        assert [p.radius_km for p in planets] == [8000, 4000, 40000]
        assert planets[0].mass == pytest.approx(1.0)
        assert planets[1].mass == pytest.approx(0.1)
        assert planets[2].mass == 350
        assert [p.name for p in planets] == ["Planet 1", "Planet 2", "Planet 3"]
        assert [p.index for p in planets] == [1, 2, 3]
        assert source.remaining == 0

    def test_first_two_slots_skip_gas_giant_roll(self) -> None:
        """Two rocky planets consume exactly seven draws, no percentiles."""
        source = FixedSource([0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7])
        planets = generate_planets(DiceRoller(source), 2)

        assert all(p.type == CelestialType.PLANET for p in planets)
        assert source.remaining == 0

    def test_failed_gas_giant_roll_gives_rocky_planet(self) -> None:
        source = FixedSource(
            [0.0]
            + [0.0, 0.0, 0.0] * 2
            + [percentile_value(41), die_value(6, 6), 0.99, 0.0]
        )
        planets = generate_planets(DiceRoller(source), 3)

        assert planets[2].type == CelestialType.PLANET
        assert planets[2].radius_km == 14000
        assert planets[2].mass == pytest.approx(2.08)

    def test_zero_planets(self) -> None:
        source = FixedSource([0.5])
        assert generate_planets(DiceRoller(source), 0) == []

    def test_habitable_zone_skip_relocates_planet(self) -> None:
        draws = [
            0.9,  # first orbit 0.48
            die_value(2, 6),
            0.5,
            0.75,  # spacing x2.0 -> 0.96, inside 0.8-1.5
            die_value(2, 6),
            0.5,
            0.5,  # relocation -> 1.5 + 0.5 + 0.25
            0.5,
        ]
        options = PlanetOptions.create(skip_habitable_zone=True)
        planets = generate_planets(DiceRoller(FixedSource(draws)), 2, "G", options)

        assert planets[0].orbit_au == pytest.approx(0.48)
        assert planets[1].orbit_au == pytest.approx(2.25)

    def test_habitable_zone_kept_without_skip(self) -> None:
        draws = [0.9, die_value(2, 6), 0.5, 0.75, die_value(2, 6), 0.5, 0.5]
        source = FixedSource(draws)
        planets = generate_planets(DiceRoller(source), 2, "G")

        assert planets[1].orbit_au == pytest.approx(0.96)
        assert source.remaining == 0

    def test_custom_habitable_zone_bounds(self) -> None:
        draws = [0.9, die_value(2, 6), 0.5, 0.75, die_value(2, 6), 0.5, 0.5]
        source = FixedSource(draws)
        options = PlanetOptions.create(
            habitable_zone_inner_au=2.0,
            habitable_zone_outer_au=3.0,
            skip_habitable_zone=True,
        )
        planets = generate_planets(DiceRoller(source), 2, "G", options)

        # 0.96 AU is outside the custom zone, so no relocation draw
        assert planets[1].orbit_au == pytest.approx(0.96)
        assert source.remaining == 0

    def test_orbits_strictly_increase(self) -> None:
        dice = DiceRoller.from_seed("orbits")
        options = PlanetOptions.create(skip_habitable_zone=True)
        for _ in range(50):
            planets = generate_planets(dice, 10, "G", options)
            orbits = [p.orbit_au for p in planets]
            assert orbits == sorted(orbits)
            assert len(set(orbits)) == len(orbits)
            assert 0.3 <= orbits[0] < 0.5 or orbits[0] > 1.5

    def test_physical_scale_ranges(self) -> None:
        dice = DiceRoller.from_seed("scale")
        for _ in range(50):
            for planet in generate_planets(dice, 8):
                if planet.is_gas_giant:
                    assert 30000 <= planet.radius_km <= 80000
                    assert 100 <= planet.mass <= 350
                else:
                    assert 4000 <= planet.radius_km <= 14000
                    assert 0.1 <= planet.mass < 2.1


class TestPlanetOptions:
    def test_defaults(self) -> None:
        options = PlanetOptions()
        assert options.habitable_zone_inner_au == 0.8
        assert options.habitable_zone_outer_au == 1.5
        assert not options.skip_habitable_zone

    def test_missing_or_zero_bounds_fall_back(self) -> None:
        options = PlanetOptions.create(None, 0, True)
        assert options.habitable_zone_inner_au == 0.8
        assert options.habitable_zone_outer_au == 1.5
        assert options.skip_habitable_zone

    def test_zone_is_inclusive(self) -> None:
        options = PlanetOptions()
        assert options.in_habitable_zone(0.8)
        assert options.in_habitable_zone(1.5)
        assert not options.in_habitable_zone(1.51)


# =============================================================================
# Trojans
# =============================================================================


class TestTrojans:
    """Tests for L4/L5 Trojan clusters."""

    def test_successful_roll_gives_pair(self) -> None:
        giant = make_planet(3, 5.2, gas_giant=True)
        source = FixedSource([percentile_value(40), die_value(2, 6), die_value(5, 6)])
        trojans = generate_trojan_populations(DiceRoller(source), [giant])

        assert [t.lagrange_point for t in trojans] == ["L4", "L5"]
        assert [t.population for t in trojans] == [2000, 5000]
        assert {t.parent_planet for t in trojans} == {"Planet 3"}
        assert {t.orbit_au for t in trojans} == {5.2}
        assert all(t.type == CelestialType.TROJAN_CLUSTER for t in trojans)

    def test_failed_roll_gives_nothing(self) -> None:
        giant = make_planet(3, 5.2, gas_giant=True)
        source = FixedSource([percentile_value(41)])
        assert generate_trojan_populations(DiceRoller(source), [giant]) == []
        assert source.remaining == 0

    def test_rocky_planets_are_ignored(self) -> None:
        source = FixedSource([])
        planets = [make_planet(1, 0.5), make_planet(2, 0.9)]
        assert generate_trojan_populations(DiceRoller(source), planets) == []

    def test_each_giant_rolls_independently(self) -> None:
        giants = [
            make_planet(3, 2.0, gas_giant=True),
            make_planet(4, 4.0, gas_giant=True),
        ]
        source = FixedSource(
            [
                percentile_value(90),
                percentile_value(1),
                die_value(6, 6),
                die_value(1, 6),
            ]
        )
        trojans = generate_trojan_populations(DiceRoller(source), giants)

        assert [t.parent_planet for t in trojans] == ["Planet 4", "Planet 4"]
        assert [t.population for t in trojans] == [6000, 1000]

    def test_layer_leaves_trojans_unset_without_gas_giants(self) -> None:
        ctx = GenerationContext.create("G2", DiceRoller(FixedSource([])))
        ctx.planets = [make_planet(1, 0.4), make_planet(2, 0.8)]
        TrojanLayer().apply(ctx)
        assert ctx.trojans is None

    def test_layer_sets_empty_list_when_rolls_fail(self) -> None:
        ctx = GenerationContext.create("G2", DiceRoller(FixedSource([0.99])))
        ctx.planets = [
            make_planet(1, 0.4),
            make_planet(2, 0.8),
            make_planet(3, 1.6, gas_giant=True),
        ]
        TrojanLayer().apply(ctx)
        assert ctx.trojans == []


# =============================================================================
# Belts
# =============================================================================


class TestBelts:
    """Tests for debris fields and Kuiper belts."""

    def test_both_belts_without_planets(self) -> None:
        source = FixedSource(
            [
                percentile_value(25),
                0.5,  # orbit 2.5 + 0.75
                0.5,  # width 0.75
                percentile_value(17),
                0.0,  # 5 AU x 1.5
            ]
        )
        belts = generate_debris_belts(DiceRoller(source), [])

        debris, kuiper = belts
        assert debris.type == CelestialType.DEBRIS_FIELD
        assert debris.name == "Inner Belt"
        assert debris.orbit_au == pytest.approx(3.25)
        assert debris.width_au == pytest.approx(0.75)
        assert debris.density == "moderate"

        assert kuiper.type == CelestialType.KUIPER_BELT
        assert kuiper.name == "Outer Belt"
        assert kuiper.orbit_au == pytest.approx(7.5)
        assert kuiper.width_au == pytest.approx(2.25)
        assert kuiper.density == "sparse"
        assert source.remaining == 0

    def test_debris_field_inside_innermost_gas_giant(self) -> None:
        planets = [
            make_planet(1, 1.0),
            make_planet(2, 2.0),
            make_planet(3, 8.0, gas_giant=True),
            make_planet(4, 4.0, gas_giant=True),
        ]
        source = FixedSource([percentile_value(1), 0.0, percentile_value(18)])
        belts = generate_debris_belts(DiceRoller(source), planets)

        assert len(belts) == 1
        assert belts[0].orbit_au == pytest.approx(2.4)
        assert belts[0].width_au == pytest.approx(0.5)
        assert source.remaining == 0

    def test_kuiper_belt_beyond_outermost_planet(self) -> None:
        planets = [make_planet(1, 0.5), make_planet(2, 3.0), make_planet(3, 1.0)]
        source = FixedSource([percentile_value(26), percentile_value(2), 0.999])
        belts = generate_debris_belts(DiceRoller(source), planets)

        assert len(belts) == 1
        assert belts[0].type == CelestialType.KUIPER_BELT
        assert 4.5 <= belts[0].orbit_au < 9.0

    def test_no_belts(self) -> None:
        source = FixedSource([percentile_value(26), percentile_value(18)])
        assert generate_debris_belts(DiceRoller(source), [make_planet(1, 1.0)]) == []

    def test_layer(self) -> None:
        source = FixedSource([percentile_value(90), percentile_value(90)])
        ctx = GenerationContext.create("G2", DiceRoller(source))
        ctx.planets = [make_planet(1, 0.4)]
        BeltLayer().apply(ctx)
        assert ctx.belts == []


# =============================================================================
# Brown dwarfs
# =============================================================================


class TestBrownDwarf:
    """Tests for brown dwarf companions."""

    @pytest.mark.parametrize(
        ("face", "fraction", "expected_type", "expected_temperature"),
        [
            (4, 0.5, "T", 800),  # 58
            (6, 0.9, "L", 1500),  # 82
            (1, 0.0, "Y", 350),  # 23
            (2, 0.0, "T", 800),  # 33
        ],
    )
    def test_subtype_by_mass(
        self,
        face: int,
        fraction: float,
        expected_type: str,
        expected_temperature: int,
    ) -> None:
        source = FixedSource([die_value(face, 6), fraction, die_value(7, 9), 0.5])
        brown_dwarf = generate_brown_dwarf(DiceRoller(source))

        assert isinstance(brown_dwarf, BrownDwarfCompanion)
        assert brown_dwarf.kind == "brown_dwarf"
        assert brown_dwarf.stellar_type == f"{expected_type}7"
        assert brown_dwarf.temperature == expected_temperature
        assert brown_dwarf.mass_jupiter == pytest.approx(13 + face * 10 + fraction * 10)
        assert brown_dwarf.separation_au == pytest.approx(260.0)
        assert source.remaining == 0

    def test_thresholds_are_strict(self) -> None:
        assert brown_dwarf_subtype(60.0) == "T"
        assert brown_dwarf_subtype(60.1) == "L"
        assert brown_dwarf_subtype(30.0) == "Y"
        assert brown_dwarf_subtype(30.1) == "T"

    def test_mass_rounded_to_one_decimal(self) -> None:
        assert round_tenth(57.25) == 57.3
        assert round_tenth(41.24) == 41.2
        assert round_tenth(82.0) == 82.0

    def test_mass_range(self) -> None:
        dice = DiceRoller.from_seed("bd")
        for _ in range(100):
            brown_dwarf = generate_brown_dwarf(dice)
            assert 23.0 <= brown_dwarf.mass_jupiter <= 83.0
            assert 10.0 <= brown_dwarf.separation_au < 510.0
            assert math.isfinite(brown_dwarf.separation_au)

    def test_layer_appends_after_stellar_companions(self) -> None:
        source = FixedSource(
            [percentile_value(1), die_value(3, 6), 0.0, die_value(1, 9), 0.0]
        )
        ctx = GenerationContext.create("G2", DiceRoller(source))
        ctx.companions.append(StellarCompanion(stellar_type="K2", separation_au=3.0))
        BrownDwarfLayer().apply(ctx)

        assert [c.kind for c in ctx.companions] == ["stellar", "brown_dwarf"]
        assert ctx.companions[1].stellar_type == "T1"

    def test_layer_skips_above_one_percent(self) -> None:
        source = FixedSource([percentile_value(2)])
        ctx = GenerationContext.create("G2", DiceRoller(source))
        BrownDwarfLayer().apply(ctx)
        assert ctx.companions == []
