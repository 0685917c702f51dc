"""Stellar classification and planet-count tables."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, StrEnum
from types import MappingProxyType

from orrery import config


class CelestialType(StrEnum):
    """Every celestial object type shared with storage and rendering.

    The generator emits PLANET, GAS_GIANT, DEBRIS_FIELD, KUIPER_BELT and
    TROJAN_CLUSTER. The remaining members are produced by other parts of
    the application (hand-placed stations, moons, etc.).
    """

    PLANET = "Planet"
    MOON = "Moon"
    STATION = "Station"
    GAS_GIANT = "Gas Giant"
    ASTEROID_BELT = "Asteroid Belt"

    DEBRIS_FIELD = "Debris Field"  # Inner asteroid belt analog
    KUIPER_BELT = "Kuiper Belt"  # Outer icy belt
    TROJAN_CLUSTER = "Trojan Cluster"  # L4/L5 populations
    BROWN_DWARF = "Brown Dwarf"
    COMET = "Comet"


@dataclass(frozen=True)
class StellarTypeInfo:
    """Reference data for one spectral class."""

    temp: str
    color: str
    planet_mod: int


# Neutral entry for letters outside the classification
UNKNOWN_STELLAR_TYPE = StellarTypeInfo(temp="unknown", color="unknown", planet_mod=0)


class StellarClass(Enum):
    """The ten spectral classes, hottest to coolest.

    Each member carries its temperature band, display color and the
    modifier applied to 2d6 planet-count rolls.
    """

    O = (">30000K", "blue", -3)  # noqa: E741
    B = ("10000-30000K", "blue-white", -2)
    A = ("7500-10000K", "white", -2)
    F = ("6000-7500K", "yellow-white", -1)
    G = ("5200-6000K", "yellow", 0)  # Sol-like
    K = ("3700-5200K", "orange", 1)
    M = ("<3700K", "red", 1)
    L = ("<2400K", "brown-red", 0)  # Brown dwarf
    T = ("<1300K", "magenta", 0)  # Cool brown dwarf
    Y = ("<500K", "dark", 0)  # Ultra-cool

    temp: str
    color: str
    planet_mod: int

    def __init__(self, temp: str, color: str, planet_mod: int) -> None:
        self.temp = temp
        self.color = color
        self.planet_mod = planet_mod

    @property
    def info(self) -> StellarTypeInfo:
        return StellarTypeInfo(self.temp, self.color, self.planet_mod)

    @classmethod
    def from_letter(cls, letter: str) -> StellarClass | None:
        """Return the class for ``letter`` (case-insensitive), or None."""
        return cls.__members__.get(letter.upper())


STELLAR_TYPES: MappingProxyType[str, StellarTypeInfo] = MappingProxyType(
    {member.name: member.info for member in StellarClass}
)

# Kepler completeness-corrected planet counts, keyed by clamped 2d6 sum
PLANET_COUNT_TABLE: MappingProxyType[int, int] = MappingProxyType(
    {
        2: 1,
        3: 1,  # Sparse
        4: 2,
        5: 3,  # Below average
        6: 4,
        7: 4,
        8: 5,  # Typical
        9: 6,
        10: 7,  # Rich
        11: 8,
        12: 10,  # Very rich (Sol-like)
    }
)

# Companions are drawn from this sequence, same class or cooler than the primary
COMPANION_TYPE_ORDER: tuple[str, ...] = ("O", "B", "A", "F", "G", "K", "M")


def lookup_stellar_type(letter: str) -> StellarTypeInfo:
    """Total lookup: unknown or empty letters map to neutral modifiers."""
    return STELLAR_TYPES.get(letter.upper(), UNKNOWN_STELLAR_TYPE)


def lookup_planet_count(roll: int) -> int:
    """Planet count for a clamped 2d6 sum."""
    return PLANET_COUNT_TABLE.get(roll, config.FALLBACK_PLANET_COUNT)
