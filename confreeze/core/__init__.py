from .configuration import Configuration
from .errors import (
    AlreadyCommittedError,
    ConfigurationError,
    InvalidShapeError,
    NotCommittedError,
    PathNotFoundError,
)
from .types import Options

__all__ = [
    "Configuration",
    "Options",
    "ConfigurationError",
    "AlreadyCommittedError",
    "InvalidShapeError",
    "NotCommittedError",
    "PathNotFoundError",
]
