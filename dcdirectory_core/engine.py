"""DCDirectory Engine - Main Directory Interface.

The DirectoryEngine is the single entry point used by the browsing views
and the admin surface. It owns the record store and routes reads through
the query, facet and analytics components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from dcdirectory_core.analytics.aggregator import (
    DirectoryStats,
    TelemetryRow,
    average_uptime,
    compute_stats,
    telemetry_snapshot,
)
from dcdirectory_core.auth import Authenticator, StaticCredentialAuthenticator
from dcdirectory_core.errors import NotFoundError
from dcdirectory_core.facets.builder import DirectoryFacets, collect_facets, distinct_values
from dcdirectory_core.query.executor import QueryExecutor, QueryResult, RecordQuery, admin_filter
from dcdirectory_core.records.model import FacilityRecord
from dcdirectory_core.storage.backend import RecordStore, StoreConfig
from dcdirectory_core.storage.memory import MemoryRecordStore

logger = logging.getLogger(__name__)


class EngineState(Enum):
    """Engine state enumeration."""

    INITIALIZING = auto()
    READY = auto()
    CLOSED = auto()


@dataclass
class DirectoryConfig:
    """Directory engine configuration.

    Attributes:
        directory_name: Name shown in logs
        admin_email: Email accepted by the default authenticator
        admin_password: Password accepted by the default authenticator
        validate_ranges: Reject out-of-range records at the store boundary;
            structural checks run either way
        cache_enabled: Memoize search results until the next write
        cache_size: Maximum number of cached searches
        monitoring_limit: Records shown on the monitoring view
        power_unit: Unit for aggregate power figures
    """

    directory_name: str = "Data Center Directory"
    admin_email: str = "admin@datacenter.com"
    admin_password: str = "admin123"
    validate_ranges: bool = True
    cache_enabled: bool = True
    cache_size: int = 128
    monitoring_limit: int = 6
    power_unit: str = "MW"


class QueryBuilder:
    """Fluent query builder.

    Provides a convenient interface for building directory searches.
    """

    def __init__(self, engine: "DirectoryEngine"):
        self._engine = engine
        self._search_term = ""
        self._location = ""
        self._tier = ""

    def search(self, term: str) -> "QueryBuilder":
        """Set the free-text search term."""
        self._search_term = term or ""
        return self

    def location(self, location: str) -> "QueryBuilder":
        """Select a location facet value; empty clears it."""
        self._location = location or ""
        return self

    def tier(self, tier: str) -> "QueryBuilder":
        """Select a tier facet value; empty clears it."""
        self._tier = str(tier) if tier else ""
        return self

    def reset_filters(self) -> "QueryBuilder":
        """Clear both facet selections, keeping the search term."""
        self._location = ""
        self._tier = ""
        return self

    def build(self) -> RecordQuery:
        return RecordQuery(search_term=self._search_term, location=self._location, tier=self._tier)

    def execute(self) -> QueryResult:
        """Execute the query.

        Returns:
            Query result
        """
        return self._engine.execute(self.build())


class DirectoryEngine:
    """Main directory class.

    Coordinates the record store with search, facets and statistics.
    All reads work on a store snapshot; all writes go through the store.
    """

    def __init__(
        self,
        config: Optional[DirectoryConfig] = None,
        records: Iterable[FacilityRecord] = (),
        store: Optional[RecordStore] = None,
        authenticator: Optional[Authenticator] = None,
    ):
        """Initialize directory engine.

        Args:
            config: Engine configuration
            records: Initial collection, ignored when ``store`` is given
            store: Record store to use instead of a new in-memory store
            authenticator: Admin credential check
        """
        self.config = config or DirectoryConfig()
        self._state = EngineState.INITIALIZING
        self._store = store or MemoryRecordStore(
            StoreConfig(validate_ranges=self.config.validate_ranges),
            records=records,
        )
        self._authenticator = authenticator or StaticCredentialAuthenticator(
            self.config.admin_email,
            self.config.admin_password,
        )
        self._executor = QueryExecutor()
        self._cache_lock = threading.Lock()
        self._query_cache: Dict[Tuple[int, Tuple[str, str, str]], QueryResult] = {}
        self._initialize()

    def _initialize(self) -> None:
        logger.info(f"Initializing directory: {self.config.directory_name}")
        self._state = EngineState.READY
        logger.info(f"Directory initialized with {self._store.count()} records")

    def close(self) -> None:
        """Close the engine."""
        self._query_cache.clear()
        self._state = EngineState.CLOSED
        logger.info("Directory closed")

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def store(self) -> RecordStore:
        return self._store

    @property
    def authenticator(self) -> Authenticator:
        return self._authenticator

    def snapshot(self) -> Tuple[FacilityRecord, ...]:
        """Current collection; later writes never change the returned tuple."""
        return self._store.snapshot()

    def get(self, record_id: str) -> Optional[FacilityRecord]:
        return self._store.get(record_id)

    def require(self, record_id: str) -> FacilityRecord:
        """Get a record by id.

        Raises:
            NotFoundError: If no record has this id
        """
        record = self._store.get(record_id)
        if record is None:
            raise NotFoundError(record_id)
        return record

    def exists(self, record_id: str) -> bool:
        return self._store.exists(record_id)

    def count(self) -> int:
        return self._store.count()

    # Writes

    def replace_all(self, records: Iterable[FacilityRecord]) -> None:
        self._store.replace_all(records)

    def insert(self, record: FacilityRecord) -> FacilityRecord:
        self._store.insert(record)
        return record

    def update(self, record_id: str, record: FacilityRecord) -> FacilityRecord:
        self._store.update_by_id(record_id, record)
        return record

    def delete(self, record_id: str) -> bool:
        return self._store.delete_by_id(record_id)

    # Reads

    def query(self) -> QueryBuilder:
        """Create a query builder."""
        return QueryBuilder(self)

    def search(self, search_term: str = "", location: str = "", tier: str = "") -> QueryResult:
        """Filter the collection by search term and facet selections.

        Args:
            search_term: Case-insensitive text searched in name, location,
                city and country
            location: Exact location, empty for any
            tier: Exact tier, empty for any

        Returns:
            Matching records in collection order
        """
        return self.execute(RecordQuery(search_term=search_term, location=location, tier=str(tier or "")))

    def execute(self, query: RecordQuery) -> QueryResult:
        """Execute a compiled query, serving repeats from the cache."""
        version = self._store.version
        key = (version, query.cache_key())
        if self.config.cache_enabled:
            with self._cache_lock:
                cached = self._query_cache.get(key)
            if cached is not None:
                logger.debug(f"Cache hit for query: {query}")
                return cached

        result = self._executor.execute(self._store.snapshot(), query)

        if self.config.cache_enabled:
            with self._cache_lock:
                stale = [k for k in self._query_cache if k[0] != version]
                for k in stale:
                    del self._query_cache[k]
                if len(self._query_cache) >= self.config.cache_size:
                    self._query_cache.pop(next(iter(self._query_cache)))
                self._query_cache[key] = result
        return result

    def admin_search(self, search_term: str = "") -> Tuple[FacilityRecord, ...]:
        """Search used by the admin record table (name and location only)."""
        return admin_filter(self._store.snapshot(), search_term)

    def locations(self) -> List[str]:
        return distinct_values(self._store.snapshot(), "location")

    def tiers(self) -> List[str]:
        return distinct_values(self._store.snapshot(), "tier")

    def facets(self, selected_location: str = "", selected_tier: str = "") -> DirectoryFacets:
        """Location and tier values for the filter controls, with counts."""
        return collect_facets(self._store.snapshot(), selected_location, selected_tier)

    def stats(self) -> DirectoryStats:
        return compute_stats(self._store.snapshot(), self.config.power_unit)

    def average_uptime(self) -> float:
        """Mean uptime over the collection.

        Raises:
            EmptyCollectionError: If the collection is empty
        """
        return average_uptime(self._store.snapshot())

    def compare(self, record_ids: Sequence[str]) -> List[FacilityRecord]:
        """Records for side-by-side comparison, in the requested order.

        Raises:
            NotFoundError: If any id is unknown
        """
        return [self.require(record_id) for record_id in record_ids]

    def telemetry(self, limit: Optional[int] = None) -> List[TelemetryRow]:
        return telemetry_snapshot(self._store.snapshot(), self.config.monitoring_limit if limit is None else limit)

    def authenticate(self, email: str, password: str) -> bool:
        return self._authenticator.authenticate(email, password)

    def get_statistics(self) -> Dict[str, object]:
        return {
            **self._executor.get_statistics(),
            "records": self._store.count(),
            "cached_queries": len(self._query_cache),
            "state": self._state.name,
        }

    def __enter__(self) -> "DirectoryEngine":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


__all__ = [
    "DirectoryEngine",
    "DirectoryConfig",
    "QueryBuilder",
    "EngineState",
]
