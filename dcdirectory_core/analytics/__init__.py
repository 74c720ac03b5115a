"""DCDirectory Analytics Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from dcdirectory_core.analytics.aggregations import (
    Aggregation,
    CountAggregation,
    TermsAggregation,
    FieldStats,
)
from dcdirectory_core.analytics.aggregator import (
    DirectoryStats,
    TelemetryRow,
    power_rating,
    total_power,
    average_uptime,
    compute_stats,
    telemetry_snapshot,
)

__all__ = [
    "Aggregation",
    "CountAggregation",
    "TermsAggregation",
    "FieldStats",
    "DirectoryStats",
    "TelemetryRow",
    "power_rating",
    "total_power",
    "average_uptime",
    "compute_stats",
    "telemetry_snapshot",
]
