from __future__ import annotations

from typing import Literal, TypeAlias

# =============================================================================
# DISTANCE & SCALE TYPES
# =============================================================================

# Orbital distance in astronomical units
AU: TypeAlias = float  # Example: 1.0 = Earth's orbit

# Physical radius of a body in kilometres
Kilometres: TypeAlias = float  # Example: 6371.0 = Earth

# Mass relative to Earth (rocky planets) or Jupiter (gas giants, brown dwarfs)
RelativeMass: TypeAlias = float

# Effective surface temperature in kelvin
Kelvin: TypeAlias = int

# =============================================================================
# GENERATION TYPES
# =============================================================================

# Random seed for deterministic generation.
# Strings are hashed character by character, so "0101" and 101 are different.
RandomSeed: TypeAlias = int | str | None

# Result of a d100 roll, always 1-100 inclusive
Percentile: TypeAlias = int

# Companion multiplicity tags as they appear in serialized output
CompanionKind: TypeAlias = Literal["stellar", "brown_dwarf"]

# Co-orbital positions populated by Trojan clusters
LagrangePoint: TypeAlias = Literal["L4", "L5"]

# Serialized form of any generated entity (camelCase keys, JSON-safe values)
JSONDict: TypeAlias = dict[str, object]
