"""DCDirectory Path Mutator - Structural Copy Along a Field Path.

``set_path`` replaces one leaf of a record and copies every group on the
way down, so the result shares untouched subtrees with the original and the
original is never modified.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import re
from dataclasses import fields, replace
from typing import Any, Sequence, Tuple, TypeVar, Union

from dcdirectory_core.errors import PathError
from dcdirectory_core.records.model import is_group

PathLike = Union[str, Sequence[str]]
T = TypeVar("T")

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def normalize_path(path: PathLike) -> Tuple[str, ...]:
    """Accept ``"capacity.used"`` or ``["capacity", "used"]``."""
    if isinstance(path, str):
        return tuple(segment for segment in path.split(".") if segment)
    return tuple(path)


def _attribute(node: Any, segment: str, path: Tuple[str, ...]) -> str:
    """Resolve a segment to an attribute name; camelCase keys are accepted."""
    names = {f.name for f in fields(node)}
    if segment in names:
        return segment
    snake = _CAMEL_BOUNDARY.sub("_", segment).lower()
    if snake in names:
        return snake
    raise PathError(path, segment, f"not a field of {type(node).__name__}")


def _walk(record: Any, path: Tuple[str, ...]) -> Any:
    if not is_group(record):
        raise PathError(path, path[0], "not inside a record")
    node = record
    for depth, segment in enumerate(path):
        if depth and not is_group(node):
            raise PathError(path, path[depth - 1])
        node = getattr(node, _attribute(node, segment, path))
    return node


def get_path(record: Any, path: PathLike) -> Any:
    """Read the value at a path.

    Raises:
        PathError: If the path is empty or does not resolve
    """
    segments = normalize_path(path)
    if not segments:
        raise PathError(segments, "", "empty")
    return _walk(record, segments)


def set_path(record: T, path: PathLike, value: Any) -> T:
    """Return a copy of ``record`` with the leaf at ``path`` replaced.

    The leaf value is stored as given; parsing and type checks belong to
    the caller.

    Args:
        record: Record or nested group
        path: Attribute names from the record down to the leaf
        value: New leaf value

    Returns:
        New record

    Raises:
        PathError: If the path is empty, names an unknown attribute, or
            passes through a value that is not a nested group
    """
    segments = normalize_path(path)
    if not segments:
        raise PathError(segments, "", "empty")
    if not is_group(record):
        raise PathError(segments, segments[0], "not inside a record")
    return _set(record, segments, 0, value)


def _set(node: Any, path: Tuple[str, ...], depth: int, value: Any) -> Any:
    segment = path[depth]
    name = _attribute(node, segment, path)
    if depth == len(path) - 1:
        return replace(node, **{name: value})
    child = getattr(node, name)
    if not is_group(child):
        raise PathError(path, segment)
    return replace(node, **{name: _set(child, path, depth + 1, value)})


__all__ = ["PathLike", "normalize_path", "get_path", "set_path"]
