"""DCDirectory Facet Builder - Facet Values for Selection Controls.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from dcdirectory_core.records.model import FacilityRecord

Selector = Union[str, Callable[[FacilityRecord], Any]]

def _selector(selector: Selector) -> Callable[[FacilityRecord], Any]:
    if callable(selector):
        return selector
    return lambda record: getattr(record, selector)

def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value

def distinct_values(records: Iterable[FacilityRecord], selector: Selector) -> List[Any]:
    """Unique values of a scalar attribute, in first-seen order.

    Enum values are reported as their plain string value.
    """
    get = _selector(selector)
    seen: Dict[Any, None] = {}
    for record in records:
        seen.setdefault(_plain(get(record)), None)
    return list(seen)

@dataclass
class FacetValue:
    """A single facet value with count."""
    value: str
    count: int = 0
    selected: bool = False

@dataclass
class FacetResult:
    """Result of facet computation."""
    name: str
    values: List[FacetValue] = field(default_factory=list)
    total: int = 0
    missing: int = 0

    def labels(self) -> List[str]:
        return [v.value for v in self.values]

    def counts(self) -> Dict[str, int]:
        return {v.value: v.count for v in self.values}

@dataclass
class DirectoryFacets:
    """Facet value sets for the location and tier selection controls."""
    locations: FacetResult
    tiers: FacetResult

class FacetBuilder:
    """Counts record values for one facet.

    Values keep first-seen order unless ``sort_by_count`` is set.
    """

    def __init__(self, name: str, selector: Optional[Selector] = None, selected: str = ""):
        self.name = name
        self._get = _selector(selector or name)
        self.selected = selected
        self._counts: Dict[str, int] = {}
        self._missing = 0

    def add(self, record: FacilityRecord) -> None:
        value = self._get(record)
        if value is None or value == "":
            self._missing += 1
        else:
            key = str(_plain(value))
            self._counts[key] = self._counts.get(key, 0) + 1

    def add_all(self, records: Iterable[FacilityRecord]) -> "FacetBuilder":
        for record in records:
            self.add(record)
        return self

    def build(self, sort_by_count: bool = False) -> FacetResult:
        items = list(self._counts.items())
        if sort_by_count:
            items.sort(key=lambda x: x[1], reverse=True)
        return FacetResult(
            name=self.name,
            values=[FacetValue(value=v, count=c, selected=(v == self.selected)) for v, c in items],
            total=sum(self._counts.values()),
            missing=self._missing,
        )

def collect_facets(
    records: Iterable[FacilityRecord],
    selected_location: str = "",
    selected_tier: str = "",
) -> DirectoryFacets:
    """Build the location and tier facets in one pass."""
    locations = FacetBuilder("location", selected=selected_location)
    tiers = FacetBuilder("tier", selected=str(selected_tier))
    for record in records:
        locations.add(record)
        tiers.add(record)
    return DirectoryFacets(locations=locations.build(), tiers=tiers.build())

__all__ = ["distinct_values", "FacetBuilder", "FacetValue", "FacetResult", "DirectoryFacets", "collect_facets"]
