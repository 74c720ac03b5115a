"""DCDirectory Record Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from dcdirectory_core.records.model import (
    Tier,
    CapacityStatus,
    Quantity,
    Coordinates,
    Specifications,
    Capacity,
    Connectivity,
    Security,
    Sustainability,
    Contact,
    Pricing,
    Reviews,
    RealTimeData,
    FacilityRecord,
)
from dcdirectory_core.records.factory import generate_record_id, new_record
from dcdirectory_core.records.validation import validate_record, validate_structure

__all__ = [
    "Tier",
    "CapacityStatus",
    "Quantity",
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
    "generate_record_id",
    "new_record",
    "validate_record",
    "validate_structure",
]
