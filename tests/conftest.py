"""
Pytest configuration and shared fixtures

Record fixtures used across the directory test modules.
"""
import sys
from pathlib import Path

import pytest

# Make the package importable when the project is not installed
sys.path.insert(0, str(Path(__file__).parent.parent))

from dcdirectory_core.engine import DirectoryConfig, DirectoryEngine
from dcdirectory_core.records.factory import new_record
from dcdirectory_core.records.model import (
    Capacity,
    CapacityStatus,
    Quantity,
    RealTimeData,
    Specifications,
    Tier,
)


def make_record(record_id, name="Facility", location="Virginia", city="Ashburn",
                country="USA", tier=Tier.TIER_3, used=40, status=CapacityStatus.AVAILABLE,
                power=Quantity(20, "MW"), uptime=99.9):
    """Build a record from the default template with the given highlights."""
    base = new_record(record_id=record_id)
    return new_record(
        record_id=record_id,
        name=name,
        location=location,
        city=city,
        country=country,
        tier=tier,
        specifications=Specifications(
            total_space=base.specifications.total_space,
            power=power,
            cooling=base.specifications.cooling,
            floors=base.specifications.floors,
            rack_count=base.specifications.rack_count,
            power_density=base.specifications.power_density,
        ),
        capacity=Capacity(used=used, available_racks=100, status=status,
                          last_updated="2024-01-01T00:00:00+00:00"),
        real_time_data=RealTimeData(temperature=21.5, humidity=44, power_usage=12.0,
                                    network_latency=2.5, uptime=uptime),
    )


@pytest.fixture
def record_factory():
    """Factory for custom records."""
    return make_record


@pytest.fixture
def records():
    """Three records: Tier 1 in London, two Tier 3 in Virginia and Amsterdam."""
    return (
        make_record("dc-1", name="Equinix LD5", location="London", city="Slough",
                    country="United Kingdom", tier=Tier.TIER_1, used=80,
                    status=CapacityStatus.LIMITED, power=Quantity(30, "MW"), uptime=99.99),
        make_record("dc-2", name="Ashburn Campus", location="Virginia", city="Ashburn",
                    country="USA", tier=Tier.TIER_3, used=40,
                    status=CapacityStatus.AVAILABLE, power=Quantity(50, "MW"), uptime=99.95),
        make_record("dc-3", name="AMS Digital Park", location="Amsterdam", city="Amsterdam",
                    country="Netherlands", tier=Tier.TIER_3, used=100,
                    status=CapacityStatus.FULL, power=Quantity(500, "kW"), uptime=99.5),
    )


@pytest.fixture
def engine(records):
    """Engine loaded with the three sample records."""
    with DirectoryEngine(DirectoryConfig(), records=records) as directory:
        yield directory
