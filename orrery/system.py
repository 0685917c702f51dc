"""Generated star-system records.

Every record here is created once during a single generate() call and never
mutated afterward. ``to_dict()`` produces the camelCase, cycle-free shape that
storage, rendering and the socket layer consume verbatim; ``from_dict()``
rebuilds records from that shape.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, ClassVar, TypeAlias

from orrery.constants import CelestialType

if TYPE_CHECKING:
    from orrery.types import (
        AU,
        CompanionKind,
        JSONDict,
        Kelvin,
        Kilometres,
        LagrangePoint,
        RelativeMass,
    )


def utc_timestamp() -> str:
    """Current time as ISO-8601 UTC with millisecond precision."""
    now = datetime.now(UTC)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


# =============================================================================
# COMPANIONS
# =============================================================================


@dataclass(frozen=True)
class StellarCompanion:
    """A second (or third) star bound to the primary."""

    stellar_type: str
    separation_au: AU

    kind: ClassVar[CompanionKind] = "stellar"

    def to_dict(self) -> JSONDict:
        return {
            "type": self.kind,
            "stellarType": self.stellar_type,
            "separationAU": self.separation_au,
        }


@dataclass(frozen=True)
class BrownDwarfCompanion:
    """A sub-stellar companion, classified L, T or Y by mass."""

    stellar_type: str
    mass_jupiter: RelativeMass
    separation_au: AU
    temperature: Kelvin

    kind: ClassVar[CompanionKind] = "brown_dwarf"

    def to_dict(self) -> JSONDict:
        return {
            "type": self.kind,
            "stellarType": self.stellar_type,
            "massJupiter": self.mass_jupiter,
            "separationAU": self.separation_au,
            "temperature": self.temperature,
        }


Companion: TypeAlias = StellarCompanion | BrownDwarfCompanion


def companion_from_dict(data: dict[str, Any]) -> Companion:
    """Rebuild a companion from its serialized form.

    Raises:
        ValueError: If ``data["type"]`` is not a known companion kind.
    """
    kind = data.get("type")
    if kind == StellarCompanion.kind:
        return StellarCompanion(
            stellar_type=data["stellarType"],
            separation_au=data["separationAU"],
        )
    if kind == BrownDwarfCompanion.kind:
        return BrownDwarfCompanion(
            stellar_type=data["stellarType"],
            mass_jupiter=data["massJupiter"],
            separation_au=data["separationAU"],
            temperature=data["temperature"],
        )
    raise ValueError(f"Unknown companion type: {kind!r}")


# =============================================================================
# PLANETS, BELTS, TROJANS
# =============================================================================


@dataclass(frozen=True)
class Planet:
    """A rocky planet or gas giant.

    Attributes:
        type: CelestialType.PLANET or CelestialType.GAS_GIANT.
        orbit_au: Orbital radius; strictly increasing across a system.
        index: 1-based position in the system.
        name: Display name, "Planet <index>".
        radius_km: Physical radius.
        mass: Earth-relative for rocky planets, Jupiter-relative for giants.
    """

    type: CelestialType
    orbit_au: AU
    index: int
    name: str
    radius_km: Kilometres
    mass: RelativeMass

    @property
    def is_gas_giant(self) -> bool:
        return self.type == CelestialType.GAS_GIANT

    def to_dict(self) -> JSONDict:
        return {
            "type": str(self.type),
            "orbitAU": self.orbit_au,
            "index": self.index,
            "name": self.name,
            "radiusKm": self.radius_km,
            "mass": self.mass,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Planet:
        return cls(
            type=CelestialType(data["type"]),
            orbit_au=data["orbitAU"],
            index=data["index"],
            name=data["name"],
            radius_km=data["radiusKm"],
            mass=data["mass"],
        )


@dataclass(frozen=True)
class Belt:
    """A debris field or Kuiper belt."""

    type: CelestialType
    name: str
    orbit_au: AU
    width_au: AU
    density: str

    def to_dict(self) -> JSONDict:
        return {
            "type": str(self.type),
            "name": self.name,
            "orbitAU": self.orbit_au,
            "widthAU": self.width_au,
            "density": self.density,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Belt:
        return cls(
            type=CelestialType(data["type"]),
            name=data["name"],
            orbit_au=data["orbitAU"],
            width_au=data["widthAU"],
            density=data["density"],
        )


@dataclass(frozen=True)
class Trojan:
    """A Trojan cluster at one Lagrange point of a gas giant."""

    parent_planet: str
    orbit_au: AU
    lagrange_point: LagrangePoint
    population: int

    type: CelestialType = CelestialType.TROJAN_CLUSTER

    def to_dict(self) -> JSONDict:
        return {
            "type": str(self.type),
            "parentPlanet": self.parent_planet,
            "orbitAU": self.orbit_au,
            "lagrangePoint": self.lagrange_point,
            "population": self.population,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Trojan:
        return cls(
            parent_planet=data["parentPlanet"],
            orbit_au=data["orbitAU"],
            lagrange_point=data["lagrangePoint"],
            population=data["population"],
        )


# =============================================================================
# SYSTEM
# =============================================================================


@dataclass(frozen=True)
class SystemFeatures:
    """Diffuse features assumed present in every system."""

    oort_cloud: bool = True
    cometary_population: bool = True
    zodiacal_dust: bool = True

    def to_dict(self) -> JSONDict:
        return {
            "oortCloud": self.oort_cloud,
            "cometaryPopulation": self.cometary_population,
            "zodiacalDust": self.zodiacal_dust,
        }


@dataclass(frozen=True)
class StarSystem:
    """A complete generated star system.

    ``trojans`` is None when the system has no gas giants, in which case the
    key is omitted from the serialized form. A system with gas giants but no
    successful Trojan rolls carries an empty tuple.
    """

    stellar_type: str
    primary_type: str
    companions: tuple[Companion, ...] = ()
    planets: tuple[Planet, ...] = ()
    belts: tuple[Belt, ...] = ()
    trojans: tuple[Trojan, ...] | None = None
    features: SystemFeatures = field(default_factory=SystemFeatures)
    generated: str = field(default_factory=utc_timestamp)

    @property
    def gas_giants(self) -> tuple[Planet, ...]:
        return tuple(p for p in self.planets if p.is_gas_giant)

    @property
    def is_binary(self) -> bool:
        """True when at least one stellar (not brown-dwarf) companion exists."""
        return any(isinstance(c, StellarCompanion) for c in self.companions)

    def to_dict(self) -> JSONDict:
        data: JSONDict = {
            "stellarType": self.stellar_type,
            "primaryType": self.primary_type,
            "companions": [c.to_dict() for c in self.companions],
            "planets": [p.to_dict() for p in self.planets],
            "belts": [b.to_dict() for b in self.belts],
        }
        if self.trojans is not None:
            data["trojans"] = [t.to_dict() for t in self.trojans]
        data["features"] = self.features.to_dict()
        data["generated"] = self.generated
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StarSystem:
        features = data.get("features", {})
        trojans = data.get("trojans")
        return cls(
            stellar_type=data["stellarType"],
            primary_type=data["primaryType"],
            companions=tuple(companion_from_dict(c) for c in data["companions"]),
            planets=tuple(Planet.from_dict(p) for p in data["planets"]),
            belts=tuple(Belt.from_dict(b) for b in data["belts"]),
            trojans=(
                None if trojans is None else tuple(Trojan.from_dict(t) for t in trojans)
            ),
            features=SystemFeatures(
                oort_cloud=features.get("oortCloud", True),
                cometary_population=features.get("cometaryPopulation", True),
                zodiacal_dust=features.get("zodiacalDust", True),
            ),
            generated=data["generated"],
        )
