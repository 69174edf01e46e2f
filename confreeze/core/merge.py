"""Merging logic for configuration drafts."""

from __future__ import annotations

from collections.abc import Mapping
from copy import deepcopy
from typing import Any, Dict


def is_plain_data_object(value: Any) -> bool:
    """Check whether ``value`` is an ordinary key-value object.

    Only exact ``dict`` instances qualify. Dict subclasses, other mappings,
    lists, tuples, ``None``, scalars and instances of arbitrary classes are
    rejected.

    Args:
        value: Candidate merge payload.

    Returns:
        True if value can be merged into a configuration tree.
    """
    return type(value) is dict


def _copy_value(value: Any) -> Any:
    # mappings (including frozen subtrees) become plain dicts
    if isinstance(value, Mapping):
        return {key: _copy_value(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_copy_value(item) for item in value]
    if isinstance(value, tuple):
        return tuple(_copy_value(item) for item in value)
    return deepcopy(value)


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Deeply merge two trees returning a new dict.

    For each key, two mappings are merged recursively. Any other combination
    replaces the existing value with a copy of the incoming one, so a later
    merge always wins for scalars and lists. Neither argument is modified, so
    a failure while copying leaves both trees untouched.

    Args:
        base: Tree holding the current values.
        override: Tree providing the new values.

    Returns:
        The merged tree.
    """
    result = _copy_value(base)
    for key, value in override.items():
        existing = result.get(key)
        if isinstance(existing, Mapping) and isinstance(value, Mapping):
            result[key] = deep_merge(existing, value)
        else:
            result[key] = _copy_value(value)
    return result
