"""Large-sample statistics over generated systems.

Runs the generator over many hex seeds and reports how often each optional
feature appears, plus planet-count percentiles. Used to check that the roll
tables still produce the intended frequencies after a change.

Usage:
    result = survey_systems("G2", trials=500)
    print(result.summary())
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from orrery.constants import CelestialType
from orrery.generator import StarSystemGenerator
from orrery.system import BrownDwarfCompanion, StarSystem


class SampleVar:
    """Fixed-size record of one value per surveyed system."""

    def __init__(self, num_samples: int) -> None:
        self.num_samples = num_samples
        self.samples = np.zeros(num_samples, dtype=np.float64)
        self.count = 0

    def record(self, value: float) -> None:
        """Record a new sample value."""
        if self.count >= self.num_samples:
            raise IndexError(f"SampleVar is full ({self.num_samples} samples)")
        self.samples[self.count] = value
        self.count += 1

    def _get_valid_samples(self) -> np.ndarray:
        return self.samples[: self.count]

    @property
    def mean(self) -> float:
        valid = self._get_valid_samples()
        if len(valid) == 0:
            return 0.0
        return float(np.mean(valid))

    def get_percentiles(self) -> tuple[float, float, float]:
        """Return (p50, p95, p99) as a tuple of floats."""
        valid = self._get_valid_samples()
        if len(valid) == 0:
            return (0.0, 0.0, 0.0)

        p50, p95, p99 = np.percentile(valid, [50, 95, 99])
        return (float(p50), float(p95), float(p99))


@dataclass(frozen=True)
class SurveyResult:
    """Feature frequencies (0.0-1.0) across a survey."""

    stellar_type: str
    trials: int
    binary_rate: float
    trinary_rate: float
    debris_field_rate: float
    kuiper_belt_rate: float
    brown_dwarf_rate: float
    trojan_rate: float
    planet_count_mean: float
    planet_count_percentiles: tuple[float, float, float]

    def summary(self) -> str:
        p50, p95, p99 = self.planet_count_percentiles
        return "\n".join(
            [
                f"Survey of {self.trials} {self.stellar_type!r} systems",
                f"  binary:       {self.binary_rate:6.1%}",
                f"  trinary:      {self.trinary_rate:6.1%}",
                f"  debris field: {self.debris_field_rate:6.1%}",
                f"  kuiper belt:  {self.kuiper_belt_rate:6.1%}",
                f"  trojans:      {self.trojan_rate:6.1%}",
                f"  brown dwarf:  {self.brown_dwarf_rate:6.1%}",
                f"  planets:      mean={self.planet_count_mean:.2f} "
                f"p50={p50:.0f} p95={p95:.0f} p99={p99:.0f}",
            ]
        )


def _indicator(condition: bool) -> float:
    return 1.0 if condition else 0.0


def _has_belt(system: StarSystem, belt_type: CelestialType) -> bool:
    return any(b.type == belt_type for b in system.belts)


def survey_systems(
    stellar_type: str = "G2",
    trials: int = 300,
    seed_prefix: str = "survey",
) -> SurveyResult:
    """Generate ``trials`` systems seeded ``f"{seed_prefix}{i}"`` and tally them.

    Raises:
        ValueError: If ``trials`` is not positive.
    """
    if trials <= 0:
        raise ValueError(f"trials must be positive, got {trials}")

    binary = SampleVar(trials)
    trinary = SampleVar(trials)
    debris = SampleVar(trials)
    kuiper = SampleVar(trials)
    brown_dwarf = SampleVar(trials)
    trojans = SampleVar(trials)
    planet_counts = SampleVar(trials)

    generator = StarSystemGenerator()
    for i in range(trials):
        system = generator.generate_for_hex(f"{seed_prefix}{i}", stellar_type)
        stellar = len(system.companions) - sum(
            1 for c in system.companions if isinstance(c, BrownDwarfCompanion)
        )

        binary.record(_indicator(stellar >= 1))
        trinary.record(_indicator(stellar >= 2))
        debris.record(_indicator(_has_belt(system, CelestialType.DEBRIS_FIELD)))
        kuiper.record(_indicator(_has_belt(system, CelestialType.KUIPER_BELT)))
        brown_dwarf.record(_indicator(stellar != len(system.companions)))
        trojans.record(_indicator(bool(system.trojans)))
        planet_counts.record(len(system.planets))

    return SurveyResult(
        stellar_type=stellar_type,
        trials=trials,
        binary_rate=binary.mean,
        trinary_rate=trinary.mean,
        debris_field_rate=debris.mean,
        kuiper_belt_rate=kuiper.mean,
        brown_dwarf_rate=brown_dwarf.mean,
        trojan_rate=trojans.mean,
        planet_count_mean=planet_counts.mean,
        planet_count_percentiles=planet_counts.get_percentiles(),
    )
