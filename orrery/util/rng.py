"""Deterministic random number sources for star-system generation.

Every generator instance owns exactly one source, and there is no
module-level source. Concurrent generations each need their own instance;
a shared source interleaves draws and the output is no longer reproducible.

A seeded source is a Mulberry32 stream keyed by a 32-bit rolling hash of the
seed string. The hash walks the string's UTF-16 code units, so any
implementation of the same algorithm reproduces the same stream for the same
hex id, in any process.

Usage:
    source = create_source("0101")
    source.next()  # float in [0.0, 1.0)

    # No seed: fall back to system entropy
    source = create_source(None)
"""

from __future__ import annotations

import struct
from random import Random
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from orrery.types import RandomSeed

_UINT32_MASK = 0xFFFFFFFF
_UINT32_RANGE = 4294967296  # 2**32

# Weyl-sequence increment for Mulberry32
_MULBERRY_INCREMENT = 0x6D2B79F5


@runtime_checkable
class RandomSource(Protocol):
    """Anything that yields uniform floats in [0.0, 1.0)."""

    def next(self) -> float: ...


def hash_seed(seed: str) -> int:
    """Fold a seed string into an unsigned 32-bit state.

    Computes ``h = 31 * h + code_unit`` modulo 2**32 over the UTF-16 code
    units of ``seed``. Characters outside the Basic Multilingual Plane
    contribute both surrogate halves, and lone surrogates contribute
    themselves.
    """
    h = 0
    encoded = seed.encode("utf-16-le", "surrogatepass")
    for (code_unit,) in struct.iter_unpack("<H", encoded):
        h = (31 * h + code_unit) & _UINT32_MASK
    return h


class SeededSource:
    """Mulberry32 stream derived from a seed string.

    Each call to next() advances the state exactly once, so the order in
    which callers draw values is part of the reproducibility contract.
    """

    def __init__(self, seed: RandomSeed) -> None:
        if seed is None:
            raise ValueError("SeededSource requires a seed; use EntropySource")
        self.seed = str(seed)
        self._state = hash_seed(self.seed)

    def next(self) -> float:
        """Return the next float in [0.0, 1.0)."""
        self._state = (self._state + _MULBERRY_INCREMENT) & _UINT32_MASK
        h = self._state
        t = ((h ^ (h >> 15)) * (h | 1)) & _UINT32_MASK
        t = ((t + (((t ^ (t >> 7)) * (t | 61)) & _UINT32_MASK)) & _UINT32_MASK) ^ t
        return (t ^ (t >> 14)) / _UINT32_RANGE

    def __repr__(self) -> str:
        return f"SeededSource(seed={self.seed!r})"


class EntropySource:
    """Non-deterministic source backed by system entropy."""

    def __init__(self, rng: Random | None = None) -> None:
        self._rng = rng if rng is not None else Random()

    def next(self) -> float:
        """Return the next float in [0.0, 1.0)."""
        return self._rng.random()


class CallableSource:
    """Adapts a zero-argument callable (e.g. ``random.random``) to a source."""

    def __init__(self, func) -> None:
        self._func = func

    def next(self) -> float:
        return self._func()


def create_source(seed: RandomSeed = None) -> RandomSource:
    """Create a source for ``seed``.

    Args:
        seed: Seed string or int. ``None`` or an empty string gives a
            non-deterministic source.

    Returns:
        A SeededSource when a seed is given, otherwise an EntropySource.
    """
    if seed is None or seed == "":
        return EntropySource()
    return SeededSource(seed)
