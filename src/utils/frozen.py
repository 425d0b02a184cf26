"""Deep, read-only snapshots of JSON-like data."""

import copy
from collections.abc import Mapping, Set
from types import MappingProxyType
from typing import Any

__all__ = ["freeze", "thaw"]


def freeze(value: Any) -> Any:
    """Return a deep, read-only snapshot of a JSON-like value.

    Mappings become `MappingProxyType` over a fresh dict, lists and tuples
    become tuples and sets become frozensets, recursively. Any other value is
    deep-copied, so the snapshot shares no mutable state with the input.

    Args:
        value (Any): Value to snapshot

    Returns:
        Any: The frozen snapshot
    """
    if isinstance(value, (str, bytes, int, float, type(None))):
        return value
    if isinstance(value, Mapping):
        return MappingProxyType({k: freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(v) for v in value)
    if isinstance(value, Set):
        return frozenset(freeze(v) for v in value)
    return copy.deepcopy(value)


def thaw(value: Any) -> Any:
    """Return a plain, mutable copy of a frozen snapshot.

    The inverse of `freeze` for JSON-like data: read-only mappings become
    dicts, tuples become lists and frozensets become lists.

    Args:
        value (Any): Frozen value

    Returns:
        Any: Plain dicts and lists suitable for JSON encoding
    """
    if isinstance(value, Mapping):
        return {k: thaw(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, Set)):
        return [thaw(v) for v in value]
    return value
