"""
Configuration constants.

Centralizes all magic numbers used by the star-system generator.
Organized by generation stage for easy maintenance.

The orbital spacing and initial-orbit constants are empirically chosen and
must be reproduced exactly: changing any value here changes every system
generated from an existing hex seed.
"""

# =============================================================================
# GENERAL
# =============================================================================

# RANDOM_SEED = None
RANDOM_SEED = "0101"

DEFAULT_STELLAR_TYPE = "G2"

# =============================================================================
# STELLAR COMPANIONS
# =============================================================================

# Percentile at or below which a primary gains a stellar companion
COMPANION_CHANCE = 50

# Percentile at or below which a binary becomes a trinary
TRINARY_CHANCE = 10

# Maximum number of spectral classes a companion may be cooler than its primary
COMPANION_MAX_CLASS_OFFSET = 2

# Subtype digit die (appended to the class letter, e.g. "K4")
SUBTYPE_DIGIT_DIE = 9

# Log-uniform separation range for stellar companions
COMPANION_SEPARATION_MIN_AU = 0.1
COMPANION_SEPARATION_MAX_AU = 1000.0

# Outer companion of a trinary orbits this many times further out
TRINARY_SEPARATION_MULTIPLIER = 2

# Fallback companion class for primaries outside the O-M sequence
UNKNOWN_PRIMARY_COMPANION_TYPE = "M"

# =============================================================================
# PLANETS
# =============================================================================

# Binary systems have fewer stable orbits
BINARY_PLANET_COUNT_PENALTY = 1

# Planet count used if a clamped 2d6 sum is somehow missing from the table
FALLBACK_PLANET_COUNT = 4

# Habitable zone defaults (AU)
HABITABLE_ZONE_INNER_AU = 0.8
HABITABLE_ZONE_OUTER_AU = 1.5

# Planets displaced from an occupied habitable zone land in
# [outer + OFFSET, outer + OFFSET + SPREAD)
HABITABLE_ZONE_SKIP_OFFSET_AU = 0.5
HABITABLE_ZONE_SKIP_SPREAD_AU = 0.5

# First orbit lands in [BASE, BASE + SPREAD)
INITIAL_ORBIT_BASE_AU = 0.3
INITIAL_ORBIT_SPREAD_AU = 0.2

# Each subsequent orbit is the previous one times [BASE, BASE + SPREAD)
ORBIT_SPACING_BASE = 1.4
ORBIT_SPACING_SPREAD = 0.8

# Gas giants never occupy the two innermost slots
GAS_GIANT_MIN_POSITION = 2
GAS_GIANT_CHANCE = 40

# Physical scale: value = BASE + d6 * STEP
GAS_GIANT_RADIUS_BASE_KM = 20000
GAS_GIANT_RADIUS_STEP_KM = 10000
GAS_GIANT_MASS_BASE = 50  # Jupiter-relative
GAS_GIANT_MASS_STEP = 50
ROCKY_RADIUS_BASE_KM = 2000
ROCKY_RADIUS_STEP_KM = 2000
ROCKY_MASS_BASE = 0.1  # Earth-relative
ROCKY_MASS_SPREAD = 2.0

# =============================================================================
# BELTS
# =============================================================================

DEBRIS_FIELD_CHANCE = 25
KUIPER_BELT_CHANCE = 17

# Outermost orbit assumed when a system has no planets
EMPTY_SYSTEM_OUTER_ORBIT_AU = 5.0

# Debris field sits inside the innermost gas giant
DEBRIS_FIELD_GAS_GIANT_RATIO = 0.6

# Debris field position when there is no gas giant: [BASE, BASE + SPREAD)
DEBRIS_FIELD_DEFAULT_BASE_AU = 2.5
DEBRIS_FIELD_DEFAULT_SPREAD_AU = 1.5

DEBRIS_FIELD_WIDTH_BASE_AU = 0.5
DEBRIS_FIELD_WIDTH_SPREAD_AU = 0.5

# Kuiper belt lies at outermost orbit times [BASE, BASE + SPREAD)
KUIPER_BELT_DISTANCE_BASE = 1.5
KUIPER_BELT_DISTANCE_SPREAD = 1.5

# Kuiper belt width as a fraction of its own orbital radius
KUIPER_BELT_WIDTH_RATIO = 0.3

# =============================================================================
# TROJANS
# =============================================================================

TROJAN_CHANCE = 40

# Population per Lagrange point = d6 * this
TROJAN_POPULATION_STEP = 1000

# =============================================================================
# BROWN DWARFS
# =============================================================================

BROWN_DWARF_CHANCE = 1

# Mass (Jupiter masses) = BASE + d6 * STEP + u * SPREAD
BROWN_DWARF_MASS_BASE = 13
BROWN_DWARF_MASS_STEP = 10
BROWN_DWARF_MASS_SPREAD = 10

# Mass thresholds for spectral subclass (strictly greater than)
BROWN_DWARF_L_MASS = 60
BROWN_DWARF_T_MASS = 30

BROWN_DWARF_SEPARATION_BASE_AU = 10
BROWN_DWARF_SEPARATION_SPREAD_AU = 500

BROWN_DWARF_TEMPERATURES = {"L": 1500, "T": 800, "Y": 350}
