"""DCDirectory Query Executor - Search and Facet Filtering.

Executes a record query against a collection snapshot. Filtering is a
boolean pass over the input: the output keeps the input's relative order
and is never ranked or re-sorted.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, Tuple

from dcdirectory_core.query.predicates import (
    ADMIN_SEARCH_FIELDS,
    SEARCH_FIELDS,
    AllOf,
    ExactMatchPredicate,
    RecordPredicate,
    TextPredicate,
)
from dcdirectory_core.records.model import FacilityRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordQuery:
    """Free-text search plus facet selections.

    Attributes:
        search_term: Case-insensitive substring searched in name,
            location, city and country
        location: Exact location facet, empty for no constraint
        tier: Exact tier facet, empty for no constraint
    """

    search_term: str = ""
    location: str = ""
    tier: str = ""

    def to_predicate(self) -> RecordPredicate:
        """Compile the query into a single predicate."""
        return AllOf([
            TextPredicate(self.search_term, SEARCH_FIELDS),
            ExactMatchPredicate("location", self.location),
            ExactMatchPredicate("tier", self.tier),
        ])

    def is_empty(self) -> bool:
        return not (self.search_term or self.location or self.tier)

    def cache_key(self) -> Tuple[str, str, str]:
        return (self.search_term, str(self.location), str(self.tier))


@dataclass
class QueryResult:
    """Filtered records.

    Attributes:
        records: Matching records in collection order
        query: Query that produced the result
        took_ms: Execution time in milliseconds
    """

    records: Tuple[FacilityRecord, ...] = ()
    query: RecordQuery = field(default_factory=RecordQuery)
    took_ms: float = 0.0

    @property
    def total(self) -> int:
        return len(self.records)

    def ids(self):
        return [record.id for record in self.records]

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[FacilityRecord]:
        yield from self.records

    def __getitem__(self, index: int) -> FacilityRecord:
        return self.records[index]


class QueryExecutor:
    """Runs record queries and keeps simple execution statistics."""

    def __init__(self):
        self._stats: Dict[str, Any] = {"queries": 0, "records_scanned": 0, "records_matched": 0}

    def filter(self, records: Iterable[FacilityRecord], predicate: RecordPredicate) -> Tuple[FacilityRecord, ...]:
        """Apply a predicate, preserving input order."""
        return tuple(record for record in records if predicate.matches(record))

    def execute(self, records: Iterable[FacilityRecord], query: RecordQuery) -> QueryResult:
        """Execute a query against a snapshot.

        Args:
            records: Collection snapshot
            query: Search term and facet selections

        Returns:
            Query result
        """
        start_time = time.time()
        records = tuple(records)
        matched = self.filter(records, query.to_predicate())

        self._stats["queries"] += 1
        self._stats["records_scanned"] += len(records)
        self._stats["records_matched"] += len(matched)

        took_ms = (time.time() - start_time) * 1000
        logger.debug(f"Query {query} matched {len(matched)}/{len(records)} in {took_ms:.2f}ms")
        return QueryResult(records=matched, query=query, took_ms=took_ms)

    def get_statistics(self) -> Dict[str, Any]:
        return dict(self._stats)


def filter_records(
    records: Iterable[FacilityRecord],
    search_term: str = "",
    selected_location: str = "",
    selected_tier: str = "",
) -> Tuple[FacilityRecord, ...]:
    """Filter a collection by search term, location and tier.

    A record matches when any of name, location, city or country contains
    the search term (case-insensitive), and its location and tier equal the
    selected values where those are non-empty.
    """
    query = RecordQuery(search_term=search_term, location=selected_location, tier=selected_tier)
    predicate = query.to_predicate()
    return tuple(record for record in records if predicate.matches(record))


def admin_filter(records: Iterable[FacilityRecord], search_term: str = "") -> Tuple[FacilityRecord, ...]:
    """Filter for the admin record table, which searches name and location only."""
    predicate = TextPredicate(search_term, ADMIN_SEARCH_FIELDS)
    return tuple(record for record in records if predicate.matches(record))


__all__ = [
    "RecordQuery",
    "QueryResult",
    "QueryExecutor",
    "filter_records",
    "admin_filter",
]
