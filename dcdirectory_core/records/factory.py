"""DCDirectory Record Factory - Default-Populated New Records.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Callable, Container, Optional

from dcdirectory_core.records.model import (
    Capacity,
    CapacityStatus,
    Connectivity,
    Contact,
    Coordinates,
    FacilityRecord,
    Pricing,
    Quantity,
    RealTimeData,
    Reviews,
    Security,
    Specifications,
    Sustainability,
    Tier,
)


def generate_record_id(existing: Container[str] = ()) -> str:
    """Generate an id not present in ``existing``."""
    while True:
        record_id = str(uuid.uuid4())
        if record_id not in existing:
            return record_id


def new_record(
    record_id: Optional[str] = None,
    now: Optional[Callable[[], datetime]] = None,
    **overrides: Any,
) -> FacilityRecord:
    """Build a fully populated placeholder record for the create form.

    Args:
        record_id: Id to assign; a fresh uuid when omitted
        now: Clock used for ``capacity.last_updated``
        **overrides: Top-level attributes to set on the result

    Returns:
        A record with every nested group present
    """
    clock = now or (lambda: datetime.now(timezone.utc))
    record = FacilityRecord(
        id=record_id or generate_record_id(),
        name="New Data Center",
        location="New Location",
        city="New City",
        country="New Country",
        coordinates=Coordinates(lat=0.0, lng=0.0),
        tier=Tier.TIER_3,
        description="New data center description",
        website="https://example.com",
        established=str(clock().year),
        operator="New Operator",
        specifications=Specifications(
            total_space=Quantity(100000, "sq ft"),
            power=Quantity(20, "MW"),
            cooling="N+1 Redundant",
            floors=5,
            rack_count=1000,
            power_density=Quantity(10, "kW/rack"),
        ),
        capacity=Capacity(
            used=50,
            available_racks=500,
            status=CapacityStatus.AVAILABLE,
            last_updated=clock().isoformat(),
        ),
        connectivity=Connectivity(
            carriers=("Carrier 1",),
            bandwidth="100 Gbps",
            internet_exchanges=("IX 1",),
            fiber_providers=("Provider 1",),
            cloud_on_ramps=("AWS Direct Connect",),
        ),
        services=("Colocation", "Cloud Hosting"),
        security=Security(
            level="High Security",
            access_control="Key Card Access",
            surveillance="24/7 CCTV",
            compliance=("ISO 27001",),
        ),
        certifications=("ISO 27001",),
        sustainability=Sustainability(
            pue=1.4,
            renewable_energy=50,
            carbon_neutral=False,
            green_certifications=(),
        ),
        contact=Contact(
            phone="+1-555-0123",
            email="contact@example.com",
            website="www.example.com",
            sales_team="sales@example.com",
            support="support@example.com",
        ),
        pricing=Pricing(
            colocation="400",
            dedicated_server="250",
            cloud_hosting="0.10",
            bandwidth="2.50",
            setup="500",
        ),
        amenities=("Parking", "Reception"),
        nearby_services=("Hotels", "Restaurants"),
        reviews=Reviews(rating=4.0, total_reviews=0, reliability=4.0, support=4.0, value=4.0),
        real_time_data=RealTimeData(
            temperature=22.0,
            humidity=45,
            power_usage=15.0,
            network_latency=3.0,
            uptime=99.9,
        ),
    )
    return replace(record, **overrides) if overrides else record


__all__ = ["generate_record_id", "new_record"]
