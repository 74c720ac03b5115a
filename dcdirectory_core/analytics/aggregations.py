"""DCDirectory Aggregations - Numeric Field Accumulators.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Iterable, Optional

from dcdirectory_core.errors import EmptyCollectionError
from dcdirectory_core.records.model import FacilityRecord

class Aggregation(ABC):
    """Base aggregation over one record field."""

    def __init__(self, name: str, getter: Callable[[FacilityRecord], Any]):
        self.name = name
        self.getter = getter

    @abstractmethod
    def add(self, value: Any) -> None:
        pass

    @abstractmethod
    def result(self) -> Dict[str, Any]:
        pass

    def add_record(self, record: FacilityRecord) -> None:
        self.add(self.getter(record))

    def add_all(self, records: Iterable[FacilityRecord]) -> "Aggregation":
        for record in records:
            self.add_record(record)
        return self

class CountAggregation(Aggregation):
    """Count records whose field equals a value."""

    def __init__(self, name: str, getter: Callable[[FacilityRecord], Any], value: Any):
        super().__init__(name, getter)
        self.value = value
        self._count = 0

    def add(self, value: Any) -> None:
        if value == self.value:
            self._count += 1

    @property
    def count(self) -> int:
        return self._count

    def result(self) -> Dict[str, Any]:
        return {"count": self._count}

class TermsAggregation(Aggregation):
    """Count records per field value, in first-seen order."""

    def __init__(self, name: str, getter: Callable[[FacilityRecord], Any]):
        super().__init__(name, getter)
        self._counts: Dict[str, int] = {}

    def add(self, value: Any) -> None:
        if value is not None:
            key = str(value)
            self._counts[key] = self._counts.get(key, 0) + 1

    @property
    def counts(self) -> Dict[str, int]:
        return dict(self._counts)

    def result(self) -> Dict[str, Any]:
        return {"buckets": [{"key": k, "doc_count": c} for k, c in self._counts.items()]}

class FieldStats(Aggregation):
    """Count, sum, min, max and mean of a numeric field.

    The mean is undefined for zero values: ``avg`` raises and ``result``
    reports ``None`` rather than a default.
    """

    def __init__(self, name: str, getter: Callable[[FacilityRecord], Any]):
        super().__init__(name, getter)
        self._count = 0
        self._sum = 0.0
        self._min = float("inf")
        self._max = float("-inf")

    def add(self, value: Any) -> None:
        if value is not None:
            v = float(value)
            self._count += 1
            self._sum += v
            self._min = min(self._min, v)
            self._max = max(self._max, v)

    @property
    def count(self) -> int:
        return self._count

    @property
    def sum(self) -> float:
        return self._sum

    @property
    def avg(self) -> float:
        if self._count == 0:
            raise EmptyCollectionError(self.name)
        return self._sum / self._count

    def avg_or_none(self) -> Optional[float]:
        return self._sum / self._count if self._count else None

    def result(self) -> Dict[str, Any]:
        return {
            "count": self._count,
            "sum": self._sum,
            "min": self._min if self._count > 0 else None,
            "max": self._max if self._count > 0 else None,
            "avg": self.avg_or_none(),
        }

__all__ = ["Aggregation", "CountAggregation", "TermsAggregation", "FieldStats"]
