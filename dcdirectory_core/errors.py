"""DCDirectory Errors - Directory Exception Hierarchy.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
from typing import Any, Sequence


class DirectoryError(Exception):
    """Base class for all directory errors."""


class DuplicateIdError(DirectoryError):
    """A record with this id is already in the collection."""

    def __init__(self, record_id: str):
        self.record_id = record_id
        super().__init__(f"Record id already exists: {record_id}")


class NotFoundError(DirectoryError):
    """No record matches the given id."""

    def __init__(self, record_id: str):
        self.record_id = record_id
        super().__init__(f"Record not found: {record_id}")


class PathError(DirectoryError):
    """A mutation path does not resolve inside the record structure."""

    def __init__(self, path: Sequence[str], segment: str, reason: str = "not a nested group"):
        self.path = tuple(path)
        self.segment = segment
        super().__init__(f"Invalid path {'.'.join(self.path) or '<empty>'!r}: segment {segment!r} is {reason}")


class EmptyCollectionError(DirectoryError):
    """An average was requested over zero values."""

    def __init__(self, statistic: str):
        self.statistic = statistic
        super().__init__(f"Cannot compute {statistic} over an empty collection")


class RecordValidationError(DirectoryError):
    """A record field holds a value outside its allowed range."""

    def __init__(self, record_id: str, field: str, value: Any, reason: str):
        self.record_id = record_id
        self.field = field
        self.value = value
        super().__init__(f"Record {record_id}: {field}={value!r} {reason}")


class NotAuthenticatedError(DirectoryError):
    """Admin operation attempted without an authenticated session."""


class NoDraftError(DirectoryError):
    """Admin edit or save attempted with no open draft."""


__all__ = [
    "DirectoryError",
    "DuplicateIdError",
    "NotFoundError",
    "PathError",
    "EmptyCollectionError",
    "RecordValidationError",
    "NotAuthenticatedError",
    "NoDraftError",
]
