"""Deep freezing of nested configuration trees."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any


def deep_freeze(value: Any) -> Any:
    """Return a structurally immutable copy of ``value``.

    Mappings become read-only ``MappingProxyType`` views over fresh dicts,
    lists and tuples become tuples and sets become frozensets. Scalars and
    other objects are returned as-is. Freezing an already frozen tree yields
    an equal frozen tree.

    Args:
        value: Tree to freeze.

    Returns:
        The frozen tree.
    """
    if isinstance(value, Mapping):
        return MappingProxyType({key: deep_freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(deep_freeze(item) for item in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(deep_freeze(item) for item in value)
    return value


def is_frozen(value: Any) -> bool:
    return isinstance(value, MappingProxyType)


def thaw(value: Any) -> Any:
    """Convert a frozen tree back into plain dicts and lists.

    Args:
        value: Tree produced by :func:`deep_freeze` (or any nested data).

    Returns:
        A mutable deep copy made of ``dict`` and ``list`` containers.
    """
    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [thaw(item) for item in value]
    if isinstance(value, frozenset):
        return set(thaw(item) for item in value)
    return value
