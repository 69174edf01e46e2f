"""Path based lookups in nested configuration trees."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, List


def split_path(path: str, separator: str = ".") -> List[str]:
    if not separator:
        raise ValueError("Path separator must be a non-empty string")
    return path.split(separator)


def path_lookup(tree: Any, path: str, not_found: Any, separator: str = ".") -> Any:
    """Walk ``tree`` following ``path`` and return the value found.

    Mappings are walked by key. Lists and tuples are walked by integer index
    (``"servers.0.host"``). Reaching a scalar while segments remain counts as
    a miss, the same as a missing key.

    Args:
        tree: Nested mapping to search.
        path: Path made of segments joined by ``separator``.
        not_found: Value returned when the path does not resolve.
        separator: Segment delimiter.

    Returns:
        The value at ``path``, or ``not_found``.
    """
    current = tree
    for segment in split_path(path, separator):
        if isinstance(current, Mapping):
            if segment not in current:
                return not_found
            current = current[segment]
        elif isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
            try:
                index = int(segment)
            except ValueError:
                return not_found
            if not 0 <= index < len(current):
                return not_found
            current = current[index]
        else:
            return not_found
    return current
