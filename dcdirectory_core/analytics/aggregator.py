"""DCDirectory Aggregator - Dashboard Statistics.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from dcdirectory_core.analytics.aggregations import CountAggregation, FieldStats, TermsAggregation
from dcdirectory_core.errors import RecordValidationError
from dcdirectory_core.records.model import CapacityStatus, FacilityRecord

logger = logging.getLogger(__name__)

@dataclass
class DirectoryStats:
    """Summary statistics for the overview dashboard.

    Averages are ``None`` for an empty collection.
    """
    total_count: int = 0
    available_count: int = 0
    total_power: float = 0.0
    power_unit: str = "MW"
    average_uptime: Optional[float] = None
    average_capacity_used: Optional[float] = None
    status_breakdown: Dict[str, int] = field(default_factory=dict)
    tier_breakdown: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalCount": self.total_count,
            "availableCount": self.available_count,
            "totalPower": self.total_power,
            "powerUnit": self.power_unit,
            "averageUptime": self.average_uptime,
            "averageCapacityUsed": self.average_capacity_used,
            "statusBreakdown": dict(self.status_breakdown),
            "tierBreakdown": dict(self.tier_breakdown),
        }

@dataclass
class TelemetryRow:
    """Live readings for one facility on the monitoring view."""
    id: str
    name: str
    temperature: float
    humidity: float
    power_usage: float
    uptime: float

def power_rating(record: FacilityRecord, unit: str = "MW") -> float:
    """Power rating in ``unit``; a unitless rating is taken as already in ``unit``.

    Raises:
        RecordValidationError: If the rating is not a power quantity
    """
    power = record.specifications.power
    try:
        if not power.unit:
            return float(power.value)
        return power.to(unit)
    except (AttributeError, TypeError, ValueError) as e:
        raise RecordValidationError(record.id, "specifications.power", power, "is not a power quantity") from e

def total_power(records: Iterable[FacilityRecord], unit: str = "MW") -> float:
    return sum(power_rating(record, unit) for record in records)

def average_uptime(records: Iterable[FacilityRecord]) -> float:
    """Mean uptime percentage.

    Raises:
        EmptyCollectionError: If there are no records
    """
    return FieldStats("averageUptime", lambda r: r.real_time_data.uptime).add_all(records).avg

def compute_stats(records: Iterable[FacilityRecord], power_unit: str = "MW") -> DirectoryStats:
    """Compute the dashboard statistics in one pass over the records."""
    records = tuple(records)
    available = CountAggregation("availableCount", lambda r: r.capacity.status, CapacityStatus.AVAILABLE)
    uptime = FieldStats("averageUptime", lambda r: r.real_time_data.uptime)
    used = FieldStats("averageCapacityUsed", lambda r: r.capacity.used)
    power = FieldStats("totalPower", lambda r: power_rating(r, power_unit))
    statuses = TermsAggregation("statusBreakdown", lambda r: r.capacity.status)
    tiers = TermsAggregation("tierBreakdown", lambda r: r.tier)

    aggregations = (available, uptime, used, power, statuses, tiers)
    for record in records:
        for aggregation in aggregations:
            aggregation.add_record(record)

    if not records:
        logger.debug("Computing statistics over an empty collection")

    return DirectoryStats(
        total_count=len(records),
        available_count=available.count,
        total_power=power.sum,
        power_unit=power_unit,
        average_uptime=uptime.avg_or_none(),
        average_capacity_used=used.avg_or_none(),
        status_breakdown=statuses.counts,
        tier_breakdown=tiers.counts,
    )

def telemetry_snapshot(records: Iterable[FacilityRecord], limit: int = 6) -> List[TelemetryRow]:
    """Monitoring rows for the first ``limit`` records."""
    rows = []
    for record in records:
        if len(rows) >= limit:
            break
        data = record.real_time_data
        rows.append(TelemetryRow(
            id=record.id,
            name=record.name,
            temperature=data.temperature,
            humidity=data.humidity,
            power_usage=data.power_usage,
            uptime=data.uptime,
        ))
    return rows

__all__ = [
    "DirectoryStats",
    "TelemetryRow",
    "power_rating",
    "total_power",
    "average_uptime",
    "compute_stats",
    "telemetry_snapshot",
]
