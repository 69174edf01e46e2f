"""Exception types raised by the configuration container."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Base class for every error raised by confreeze."""


class AlreadyCommittedError(ConfigurationError, RuntimeError):
    """Raised when merging into a configuration that was already committed."""

    def __init__(self) -> None:
        super().__init__("Unable to merge. Configuration is already committed.")


class InvalidShapeError(ConfigurationError, TypeError):
    """Raised when merge data is not a plain data object."""

    def __init__(self) -> None:
        super().__init__("Configuration must be a plain object")


class NotCommittedError(ConfigurationError, RuntimeError):
    """Raised when reading a configuration before commit()."""

    def __init__(self) -> None:
        super().__init__("Configuration is not committed yet, call commit() first!")


class PathNotFoundError(ConfigurationError, LookupError):
    """Raised by strict lookups that do not resolve.

    Attributes:
        path: The exact path that was queried (namespaced for environment lookups).
        scope: Either ``"configuration"`` or ``"environment"``.
    """

    def __init__(self, path: str, scope: str = "configuration") -> None:
        self.path = path
        self.scope = scope
        super().__init__(f'Non-existent {scope} path "{path}"')
