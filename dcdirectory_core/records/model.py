"""DCDirectory Record Model - Facility Records and Nested Groups.

Records are immutable. Every nested group is a frozen dataclass that is
always present on a record, so an edit produces a new record that shares
its untouched groups with the original.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import re
import typing
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, Tuple


class Tier(str, Enum):
    """Service tier classification."""

    TIER_1 = "Tier 1"
    TIER_2 = "Tier 2"
    TIER_3 = "Tier 3"
    TIER_4 = "Tier 4"

    def __str__(self) -> str:
        return self.value


class CapacityStatus(str, Enum):
    """Capacity availability status."""

    AVAILABLE = "Available"
    LIMITED = "Limited"
    FULL = "Full"

    def __str__(self) -> str:
        return self.value


_QUANTITY_PATTERN = re.compile(r"^\s*([-+]?[\d,]*\.?\d+)\s*(.*?)\s*$")

# Conversion factors to watts for power units.
_POWER_FACTORS = {
    "W": 1.0,
    "kW": 1e3,
    "MW": 1e6,
    "GW": 1e9,
}

POWER_UNITS = tuple(_POWER_FACTORS)


@dataclass(frozen=True)
class Quantity:
    """A numeric value with an explicit unit, e.g. ``20 MW``.

    Attributes:
        value: Numeric magnitude
        unit: Unit label (``MW``, ``sq ft``, ``kW/rack``)
    """

    value: float
    unit: str = ""

    @classmethod
    def parse(cls, text: str) -> "Quantity":
        """Parse a display string such as ``"100,000 sq ft"``.

        Args:
            text: Number followed by an optional unit

        Returns:
            Parsed quantity

        Raises:
            ValueError: If the text does not start with a number
        """
        match = _QUANTITY_PATTERN.match(str(text))
        if not match:
            raise ValueError(f"Not a quantity: {text!r}")
        number, unit = match.groups()
        return cls(value=float(number.replace(",", "")), unit=unit)

    def to(self, unit: str) -> float:
        """Convert a power quantity to another power unit.

        Raises:
            ValueError: If either unit is not a power unit
        """
        if self.unit not in _POWER_FACTORS or unit not in _POWER_FACTORS:
            raise ValueError(f"Cannot convert {self.unit!r} to {unit!r}")
        return self.value * _POWER_FACTORS[self.unit] / _POWER_FACTORS[unit]

    def is_power(self) -> bool:
        return self.unit in _POWER_FACTORS

    def __str__(self) -> str:
        number = int(self.value) if float(self.value).is_integer() else self.value
        return f"{number} {self.unit}".strip()


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _coerce(hint: Any, raw: Any) -> Any:
    """Convert a raw dictionary value to the annotated field type."""
    if raw is None:
        return None
    if hint is Quantity:
        if isinstance(raw, Quantity):
            return raw
        if isinstance(raw, dict):
            return Quantity(value=float(raw["value"]), unit=raw.get("unit", ""))
        if isinstance(raw, (int, float)):
            return Quantity(value=float(raw))
        return Quantity.parse(raw)
    if typing.get_origin(hint) is tuple:
        return tuple(raw)
    if isinstance(hint, type):
        if issubclass(hint, Enum):
            return hint(raw)
        if issubclass(hint, _Group):
            return raw if isinstance(raw, hint) else hint.from_dict(raw)
        if hint is float:
            return float(raw)
        if hint is int:
            return int(raw)
    return raw


def _export(value: Any) -> Any:
    if isinstance(value, _Group):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Quantity):
        return str(value)
    if isinstance(value, tuple):
        return list(value)
    return value


class _Group:
    """Dictionary conversion shared by records and nested groups.

    Keys use the camelCase names of the directory's data files.
    """

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {_camel(f.name): _export(getattr(self, f.name)) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]):
        """Create from dictionary. Missing keys keep their defaults."""
        hints = typing.get_type_hints(cls)
        kwargs = {}
        for f in fields(cls):
            key = _camel(f.name)
            if key in data:
                kwargs[f.name] = _coerce(hints[f.name], data[key])
            elif f.name in data:
                kwargs[f.name] = _coerce(hints[f.name], data[f.name])
        return cls(**kwargs)


@dataclass(frozen=True)
class Coordinates(_Group):
    lat: float = 0.0
    lng: float = 0.0


@dataclass(frozen=True)
class Specifications(_Group):
    """Physical plant specification."""

    total_space: Quantity = Quantity(0, "sq ft")
    power: Quantity = Quantity(0, "MW")
    cooling: str = ""
    floors: int = 0
    rack_count: int = 0
    power_density: Quantity = Quantity(0, "kW/rack")


@dataclass(frozen=True)
class Capacity(_Group):
    """Capacity utilisation.

    Attributes:
        used: Percentage of capacity in use, 0 to 100
        available_racks: Racks still free
        status: Availability status
        last_updated: ISO-8601 timestamp of the last capacity report
    """

    used: float = 0.0
    available_racks: int = 0
    status: CapacityStatus = CapacityStatus.AVAILABLE
    last_updated: str = ""


@dataclass(frozen=True)
class Connectivity(_Group):
    carriers: Tuple[str, ...] = ()
    bandwidth: str = ""
    internet_exchanges: Tuple[str, ...] = ()
    fiber_providers: Tuple[str, ...] = ()
    cloud_on_ramps: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Security(_Group):
    level: str = ""
    access_control: str = ""
    surveillance: str = ""
    compliance: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Sustainability(_Group):
    """Energy efficiency figures; ``renewable_energy`` is a percentage."""

    pue: float = 0.0
    renewable_energy: float = 0.0
    carbon_neutral: bool = False
    green_certifications: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Contact(_Group):
    phone: str = ""
    email: str = ""
    website: str = ""
    sales_team: str = ""
    support: str = ""


@dataclass(frozen=True)
class Pricing(_Group):
    colocation: str = ""
    dedicated_server: str = ""
    cloud_hosting: str = ""
    bandwidth: str = ""
    setup: str = ""


@dataclass(frozen=True)
class Reviews(_Group):
    rating: float = 0.0
    total_reviews: int = 0
    reliability: float = 0.0
    support: float = 0.0
    value: float = 0.0


@dataclass(frozen=True)
class RealTimeData(_Group):
    """Live telemetry.

    Attributes:
        temperature: Hall temperature in degrees Celsius
        humidity: Relative humidity percentage
        power_usage: Current draw in MW
        network_latency: Latency in milliseconds
        uptime: Uptime percentage, 0 to 100
    """

    temperature: float = 0.0
    humidity: float = 0.0
    power_usage: float = 0.0
    network_latency: float = 0.0
    uptime: float = 0.0


@dataclass(frozen=True)
class FacilityRecord(_Group):
    """A data-center facility entry.

    Attributes:
        id: Unique identifier, immutable once assigned
        name: Facility name
        location: Metro or region label used as a facet
        city: City
        country: Country
        tier: Service tier, used as a facet
        specifications: Physical specification group
        capacity: Capacity group
        real_time_data: Telemetry group
        services: Offered services, order irrelevant
    """

    id: str
    name: str = ""
    location: str = ""
    city: str = ""
    country: str = ""
    coordinates: Coordinates = field(default_factory=Coordinates)
    tier: Tier = Tier.TIER_3
    description: str = ""
    website: str = ""
    established: str = ""
    operator: str = ""
    specifications: Specifications = field(default_factory=Specifications)
    capacity: Capacity = field(default_factory=Capacity)
    connectivity: Connectivity = field(default_factory=Connectivity)
    services: Tuple[str, ...] = ()
    security: Security = field(default_factory=Security)
    certifications: Tuple[str, ...] = ()
    sustainability: Sustainability = field(default_factory=Sustainability)
    contact: Contact = field(default_factory=Contact)
    pricing: Pricing = field(default_factory=Pricing)
    amenities: Tuple[str, ...] = ()
    nearby_services: Tuple[str, ...] = ()
    reviews: Reviews = field(default_factory=Reviews)
    real_time_data: RealTimeData = field(default_factory=RealTimeData)


def is_group(value: Any) -> bool:
    """Return True for records and nested groups."""
    return isinstance(value, _Group)


__all__ = [
    "Tier",
    "CapacityStatus",
    "Quantity",
    "POWER_UNITS",
    "Coordinates",
    "Specifications",
    "Capacity",
    "Connectivity",
    "Security",
    "Sustainability",
    "Contact",
    "Pricing",
    "Reviews",
    "RealTimeData",
    "FacilityRecord",
    "is_group",
]
