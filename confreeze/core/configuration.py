"""Immutable, path addressable configuration container."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Union

from .errors import (
    AlreadyCommittedError,
    InvalidShapeError,
    NotCommittedError,
    PathNotFoundError,
)
from .freeze import deep_freeze, is_frozen
from .merge import deep_merge, is_plain_data_object
from .paths import path_lookup
from .types import Options

logger = logging.getLogger(__name__)


class Configuration:
    """Configuration built by merging plain data, then committed and read by path.

    Values can only be merged while the configuration is a draft. ``commit()``
    freezes the tree for good; after that only ``get`` is available. Lookups
    on the environment tree (``get_env``) work at any stage.

    Example:
        >>> cfg = Configuration({"a": {"b": {"c": 500}}}).commit()
        >>> cfg.get("a.b.c")
        500
    """

    def __init__(
        self,
        data: Optional[Dict[str, Any]] = None,
        options: Optional[Union[Options, Mapping[str, Any]]] = None,
        **overrides: Any,
    ):
        """Initialize a draft configuration.

        Args:
            data: Optional initial data, merged as by ``merge``.
            options: An ``Options`` instance or a mapping of option overrides.
            **overrides: Option overrides applied on top of ``options``.

        Raises:
            InvalidShapeError: If ``data`` is not a plain data object.
            ValueError: If an unknown or invalid option is given.
        """
        self._data: Mapping[str, Any] = {}
        self._options = Options.build(options, **overrides)

        if data is not None:
            self.merge(data)

    @property
    def options(self) -> Options:
        return self._options

    @property
    def committed(self) -> bool:
        return self.is_committed()

    def merge(self, data: Dict[str, Any]) -> "Configuration":
        """Merge new configuration into the current draft.

        Args:
            data: Plain data object to merge. Nested objects are merged
                recursively, any other value overwrites the existing one.

        Returns:
            This configuration, for chaining.

        Raises:
            AlreadyCommittedError: If the configuration is already committed.
            InvalidShapeError: If ``data`` is not a plain data object.
        """
        if self.is_committed():
            raise AlreadyCommittedError()
        if not is_plain_data_object(data):
            raise InvalidShapeError()

        self._data = deep_merge(self._data, data)
        logger.debug("Merged %d top-level key(s) into configuration", len(data))
        return self

    def commit(self) -> "Configuration":
        """Freeze the configuration against further changes.

        Calling it again is a no-op.

        Returns:
            This configuration, for chaining.
        """
        if not self.is_committed():
            self._data = deep_freeze(self._data)
            logger.debug("Committed configuration with %d top-level key(s)", len(self._data))
        return self

    def is_committed(self) -> bool:
        return is_frozen(self._data)

    def get(self, path: Optional[str] = None, default: Any = None) -> Any:
        """Get a configuration value by path.

        In strict mode (the default) ``default`` is ignored and a missing path
        raises. Pass ``strict=False`` at construction to get ``default`` back
        instead.

        Args:
            path: Path of the value, segments joined by the path separator.
                None returns the whole committed tree.
            default: Value returned for missing paths in loose mode.

        Returns:
            The value found at ``path``.

        Raises:
            NotCommittedError: If ``commit()`` has not been called yet.
            PathNotFoundError: If the path does not exist in strict mode.
        """
        if not self.is_committed():
            raise NotCommittedError()
        if path is None:
            return self._data
        return self._lookup(
            self._data, path, default, strict=self._options.strict, scope="configuration"
        )

    def get_env(self, path: Optional[str] = None, default: Any = None) -> Any:
        """Get an environment value by path, under the environment namespace.

        Args:
            path: Path relative to ``env_namespace``. None returns the whole
                environment tree.
            default: Value returned for missing paths when ``strict_env`` is off.

        Returns:
            The value found at the namespaced path.

        Raises:
            PathNotFoundError: If the path does not exist and ``strict_env`` is on.
                The error reports the full namespaced path.
        """
        opts = self._options
        if path is None:
            return opts.environment
        full_path = (
            opts.env_namespace + opts.path_separator + path if opts.env_namespace else path
        )
        return self._lookup(
            opts.environment, full_path, default, strict=opts.strict_env, scope="environment"
        )

    def _lookup(
        self, tree: Mapping[str, Any], path: str, default: Any, *, strict: bool, scope: str
    ) -> Any:
        separator = self._options.path_separator
        if not strict:
            return path_lookup(tree, path, default, separator)

        # local marker so a stored None still counts as found
        not_found = object()
        found = path_lookup(tree, path, not_found, separator)
        if found is not_found:
            raise PathNotFoundError(path, scope)
        return found

    def __repr__(self) -> str:
        state = "committed" if self.is_committed() else "draft"
        return f"Configuration({state}, options={self._options!r})"
