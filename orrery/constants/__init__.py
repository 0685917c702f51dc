"""Classification tables for star-system generation.

These are distinct from config.py, which holds the tunable roll thresholds
and scale constants. The tables here are fixed reference data.
"""

from .stellar import (
    COMPANION_TYPE_ORDER,
    PLANET_COUNT_TABLE,
    STELLAR_TYPES,
    CelestialType,
    StellarClass,
    StellarTypeInfo,
    lookup_planet_count,
    lookup_stellar_type,
)

__all__ = [
    "COMPANION_TYPE_ORDER",
    "PLANET_COUNT_TABLE",
    "STELLAR_TYPES",
    "CelestialType",
    "StellarClass",
    "StellarTypeInfo",
    "lookup_planet_count",
    "lookup_stellar_type",
]
