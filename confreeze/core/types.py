"""Type definitions for the confreeze configuration container."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .freeze import deep_freeze


@dataclass(frozen=True)
class Options:
    """Options governing lookups on a Configuration.

    Attributes:
        path_separator: Delimiter used to split lookup paths into segments.
        strict: Raise on missing configuration paths instead of returning a default.
        environment: Read-only environment tree searched by ``get_env``.
        env_namespace: Path prepended to every ``get_env`` lookup (e.g. ``"acme.app"``).
        strict_env: Raise on missing environment paths instead of returning a default.
    """

    path_separator: str = "."
    strict: bool = True
    environment: Mapping[str, Any] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )
    env_namespace: str = ""
    strict_env: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.path_separator, str) or not self.path_separator:
            raise ValueError("path_separator must be a non-empty string")
        if not isinstance(self.environment, Mapping):
            raise ValueError("environment must be a mapping")
        # frozen dataclass: bypass __setattr__ to store the frozen copy
        object.__setattr__(self, "environment", deep_freeze(self.environment))

    @classmethod
    def build(cls, options: Optional[Any] = None, **overrides: Any) -> "Options":
        """Create Options from an Options instance or a mapping of overrides.

        Args:
            options: Base options, a mapping of field overrides, or None for defaults.
            **overrides: Field overrides applied last.

        Returns:
            Options instance.

        Raises:
            ValueError: If an unknown option name is given.
        """
        if options is None:
            base = cls()
        elif isinstance(options, cls):
            base = options
        elif isinstance(options, Mapping):
            overrides = {**options, **overrides}
            base = cls()
        else:
            raise ValueError(f"Unsupported options type: {type(options).__name__}")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ValueError(f"Unknown configuration options: {', '.join(unknown)}")
        if not overrides:
            return base
        return replace(base, **overrides)
