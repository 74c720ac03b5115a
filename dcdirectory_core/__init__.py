"""DCDirectory - Data Center Facility Directory for BlackRoad OS.

Search, facet filtering, comparison and dashboard statistics over a
collection of data-center facility records, plus an admin surface for
creating, editing and deleting records.

Architecture:
┌─────────────────────────────────────────────────────────────────────────────┐
│                           Directory Engine                                  │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────────────┐   │
│   │                        Read Path (snapshots)                        │   │
│   │  ┌────────────┐  ┌────────────┐  ┌────────────┐  ┌────────────┐    │   │
│   │  │   Query    │  │   Facet    │  │ Aggregator │  │  Compare   │    │   │
│   │  │  Executor  │  │  Builder   │  │            │  │            │    │   │
│   │  └────────────┘  └────────────┘  └────────────┘  └────────────┘    │   │
│   └─────────────────────────────────────────────────────────────────────┘   │
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────────────┐   │
│   │                        Write Path (admin)                           │   │
│   │  ┌────────────┐  ┌────────────┐  ┌────────────┐  ┌────────────┐    │   │
│   │  │   Auth     │→ │   Draft    │→ │   Typed    │→ │   Commit   │    │   │
│   │  │   Check    │  │  Record    │  │  Setters   │  │            │    │   │
│   │  └────────────┘  └────────────┘  └────────────┘  └────────────┘    │   │
│   └─────────────────────────────────────────────────────────────────────┘   │
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────────────┐   │
│   │                        Record Store                                 │   │
│   │        immutable snapshots · locked writers · unique ids            │   │
│   └─────────────────────────────────────────────────────────────────────┘   │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Key Features:
- Case-insensitive search over name, location, city and country
- Exact-match location and tier facets
- Immutable records edited by structural copy
- Dashboard statistics with explicit empty-collection handling

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

__version__ = "1.0.0"
__author__ = "BlackRoad OS"
__license__ = "Proprietary"

# Core engine
from dcdirectory_core.engine import (
    DirectoryEngine,
    DirectoryConfig,
    QueryBuilder,
    EngineState,
)
from dcdirectory_core.admin import AdminSession
from dcdirectory_core.auth import Authenticator, StaticCredentialAuthenticator

# Errors
from dcdirectory_core.errors import (
    DirectoryError,
    DuplicateIdError,
    NotFoundError,
    PathError,
    EmptyCollectionError,
    RecordValidationError,
    NotAuthenticatedError,
    NoDraftError,
)

# Records
from dcdirectory_core.records import (
    Tier,
    CapacityStatus,
    Quantity,
    FacilityRecord,
    new_record,
    validate_record,
)

# Storage
from dcdirectory_core.storage import RecordStore, StoreConfig, MemoryRecordStore

# Query
from dcdirectory_core.query import (
    RecordQuery,
    QueryResult,
    QueryExecutor,
    filter_records,
    admin_filter,
)

# Facets
from dcdirectory_core.facets import distinct_values, collect_facets, FacetBuilder

# Mutation
from dcdirectory_core.mutation import get_path, set_path, apply_form_edit, FORM_FIELDS

# Analytics
from dcdirectory_core.analytics import (
    DirectoryStats,
    compute_stats,
    average_uptime,
    telemetry_snapshot,
)

__all__ = [
    # Version
    "__version__",
    "__author__",
    "__license__",
    # Core
    "DirectoryEngine",
    "DirectoryConfig",
    "QueryBuilder",
    "EngineState",
    "AdminSession",
    "Authenticator",
    "StaticCredentialAuthenticator",
    # Errors
    "DirectoryError",
    "DuplicateIdError",
    "NotFoundError",
    "PathError",
    "EmptyCollectionError",
    "RecordValidationError",
    "NotAuthenticatedError",
    "NoDraftError",
    # Records
    "Tier",
    "CapacityStatus",
    "Quantity",
    "FacilityRecord",
    "new_record",
    "validate_record",
    # Storage
    "RecordStore",
    "StoreConfig",
    "MemoryRecordStore",
    # Query
    "RecordQuery",
    "QueryResult",
    "QueryExecutor",
    "filter_records",
    "admin_filter",
    # Facets
    "distinct_values",
    "collect_facets",
    "FacetBuilder",
    # Mutation
    "get_path",
    "set_path",
    "apply_form_edit",
    "FORM_FIELDS",
    # Analytics
    "DirectoryStats",
    "compute_stats",
    "average_uptime",
    "telemetry_snapshot",
]
