"""DCDirectory Facet Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from dcdirectory_core.facets.builder import (
    distinct_values,
    collect_facets,
    FacetBuilder,
    FacetValue,
    FacetResult,
    DirectoryFacets,
)

__all__ = [
    "distinct_values",
    "collect_facets",
    "FacetBuilder",
    "FacetValue",
    "FacetResult",
    "DirectoryFacets",
]
