"""Confreeze - Immutable configuration container.

Merge plain data into a draft, commit it once, then read values by path
with strict or loose existence semantics.
"""

from .core.configuration import Configuration
from .core.errors import (
    AlreadyCommittedError,
    ConfigurationError,
    InvalidShapeError,
    NotCommittedError,
    PathNotFoundError,
)
from .core.types import Options

__all__ = [
    "Configuration",
    "Options",
    "ConfigurationError",
    "AlreadyCommittedError",
    "InvalidShapeError",
    "NotCommittedError",
    "PathNotFoundError",
]
