"""DCDirectory Record Validation - Boundary Checks.

Structural checks (id, tier, status, power unit) always apply; range checks
can be switched off per store. Out-of-range values are rejected, never
clamped.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from numbers import Real
from typing import Callable, List, Optional

from dcdirectory_core.errors import RecordValidationError
from dcdirectory_core.records.model import CapacityStatus, FacilityRecord, Quantity, Tier


@dataclass(frozen=True)
class RangeRule:
    """Inclusive numeric bounds for one record field."""
    field: str
    getter: Callable[[FacilityRecord], object]
    minimum: Optional[float] = None
    maximum: Optional[float] = None

    def check(self, record: FacilityRecord) -> None:
        value = self.getter(record)
        if isinstance(value, bool) or not isinstance(value, Real):
            raise RecordValidationError(record.id, self.field, value, "is not a number")
        if not math.isfinite(value):
            raise RecordValidationError(record.id, self.field, value, "is not a finite number")
        if self.minimum is not None and value < self.minimum:
            raise RecordValidationError(record.id, self.field, value, f"is below {self.minimum}")
        if self.maximum is not None and value > self.maximum:
            raise RecordValidationError(record.id, self.field, value, f"is above {self.maximum}")


RANGE_RULES: List[RangeRule] = [
    RangeRule("capacity.used", lambda r: r.capacity.used, 0, 100),
    RangeRule("capacity.availableRacks", lambda r: r.capacity.available_racks, 0),
    RangeRule("realTimeData.uptime", lambda r: r.real_time_data.uptime, 0, 100),
    RangeRule("specifications.rackCount", lambda r: r.specifications.rack_count, 0),
    RangeRule("specifications.floors", lambda r: r.specifications.floors, 0),
]

_TIERS = {t.value for t in Tier}
_STATUSES = {s.value for s in CapacityStatus}


def validate_structure(record: FacilityRecord) -> None:
    """Check the fields every stored record needs to be searchable and summable.

    Raises:
        RecordValidationError: On an empty id, an unknown tier or status,
            or a power rating without a power unit
    """
    if not isinstance(record.id, str) or not record.id:
        raise RecordValidationError(str(record.id), "id", record.id, "must be a non-empty string")
    if str(record.tier) not in _TIERS:
        raise RecordValidationError(record.id, "tier", record.tier, "is not a known tier")
    if str(record.capacity.status) not in _STATUSES:
        raise RecordValidationError(record.id, "capacity.status", record.capacity.status, "is not a known status")
    power = record.specifications.power
    if not isinstance(power, Quantity) or not (power.is_power() or power.unit == ""):
        raise RecordValidationError(record.id, "specifications.power", power, "is not a power quantity")
    if isinstance(power.value, bool) or not isinstance(power.value, Real) or not math.isfinite(power.value):
        raise RecordValidationError(record.id, "specifications.power", power, "is not a finite number")


def validate_record(record: FacilityRecord) -> None:
    """Check a record before it enters the store.

    Raises:
        RecordValidationError: On any structural problem, or a numeric
            field that is not finite or lies outside its range
    """
    validate_structure(record)
    for rule in RANGE_RULES:
        rule.check(record)


__all__ = ["RangeRule", "RANGE_RULES", "validate_structure", "validate_record"]
