"""DCDirectory Query Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from dcdirectory_core.query.predicates import (
    SEARCH_FIELDS,
    ADMIN_SEARCH_FIELDS,
    RecordPredicate,
    MatchAll,
    TextPredicate,
    ExactMatchPredicate,
    AllOf,
)
from dcdirectory_core.query.executor import (
    RecordQuery,
    QueryResult,
    QueryExecutor,
    filter_records,
    admin_filter,
)

__all__ = [
    "SEARCH_FIELDS",
    "ADMIN_SEARCH_FIELDS",
    "RecordPredicate",
    "MatchAll",
    "TextPredicate",
    "ExactMatchPredicate",
    "AllOf",
    "RecordQuery",
    "QueryResult",
    "QueryExecutor",
    "filter_records",
    "admin_filter",
]
