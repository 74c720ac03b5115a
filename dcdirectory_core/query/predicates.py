"""DCDirectory Query Predicates - Boolean Record Filters.

Predicates are pure: matching a record never depends on any other record
or on previous calls, so filters compose in any order.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Sequence, Tuple

from dcdirectory_core.records.model import FacilityRecord

# Fields searched by the browsing views.
SEARCH_FIELDS: Tuple[str, ...] = ("name", "location", "city", "country")

# Fields searched by the admin record table.
ADMIN_SEARCH_FIELDS: Tuple[str, ...] = ("name", "location")


class RecordPredicate(ABC):
    """Base class for record predicates."""

    @abstractmethod
    def matches(self, record: FacilityRecord) -> bool:
        """Return True if the record satisfies the predicate."""
        pass

    def __call__(self, record: FacilityRecord) -> bool:
        return self.matches(record)

    def __and__(self, other: "RecordPredicate") -> "AllOf":
        return AllOf([self, other])

    def describe(self) -> Dict[str, Any]:
        """Get a readable description of the predicate."""
        return {"type": type(self).__name__}


class MatchAll(RecordPredicate):
    """Matches every record."""

    def matches(self, record: FacilityRecord) -> bool:
        return True


@dataclass
class TextPredicate(RecordPredicate):
    """Case-insensitive substring match against any of several fields.

    An empty term matches every record.

    Attributes:
        term: Search text
        fields: Record attributes to search
    """

    term: str
    fields: Sequence[str] = SEARCH_FIELDS
    _needle: str = field(init=False, repr=False)

    def __post_init__(self):
        self._needle = (self.term or "").lower()

    def matches(self, record: FacilityRecord) -> bool:
        if not self._needle:
            return True
        for field_name in self.fields:
            value = getattr(record, field_name, "")
            if self._needle in str(value).lower():
                return True
        return False

    def describe(self) -> Dict[str, Any]:
        return {"type": "text", "term": self.term, "fields": list(self.fields)}


@dataclass
class ExactMatchPredicate(RecordPredicate):
    """Exact equality on a facet attribute; an empty value is no constraint.

    Attributes:
        field: Record attribute
        value: Required value
    """

    field: str
    value: Any = ""

    def matches(self, record: FacilityRecord) -> bool:
        if self.value is None or self.value == "":
            return True
        actual = getattr(record, self.field, None)
        return _plain(actual) == _plain(self.value)

    def describe(self) -> Dict[str, Any]:
        return {"type": "exact", "field": self.field, "value": _plain(self.value)}


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


@dataclass
class AllOf(RecordPredicate):
    """Logical AND of predicates."""

    predicates: List[RecordPredicate] = field(default_factory=list)

    def __post_init__(self):
        flattened: List[RecordPredicate] = []
        for predicate in self.predicates:
            if isinstance(predicate, AllOf):
                flattened.extend(predicate.predicates)
            else:
                flattened.append(predicate)
        self.predicates = flattened

    def matches(self, record: FacilityRecord) -> bool:
        return all(p.matches(record) for p in self.predicates)

    def describe(self) -> Dict[str, Any]:
        return {"type": "and", "clauses": [p.describe() for p in self.predicates]}


__all__ = [
    "SEARCH_FIELDS",
    "ADMIN_SEARCH_FIELDS",
    "RecordPredicate",
    "MatchAll",
    "TextPredicate",
    "ExactMatchPredicate",
    "AllOf",
]
