"""Protocols (interfaces) consumed by the core layer.

These define the contracts that host adapters must satisfy.  The
registry depends ONLY on these protocols, never on concrete
implementations, so it can be exercised against an in-memory table in
tests and bound to a real namespace in production.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol


class SymbolTable(Protocol):
    """Contract for a write-once global symbol table.

    Any object that implements these four methods satisfies the protocol
    structurally (no explicit inheritance required).
    """

    def exists(self, name: str) -> bool:
        """Return ``True`` if *name* is defined, host built-ins included."""
        ...  # pragma: no cover

    def define(self, name: str, value: Any) -> None:
        """Bind *name* to *value* for the lifetime of the table.

        Raises
        ------
        ConstantRedefinitionError
            When *name* is already defined.
        """
        ...  # pragma: no cover

    def read(self, name: str) -> Any:
        """Return the value bound to *name*.

        Behaviour for an undefined *name* is adapter-specific; callers
        must check :meth:`exists` first.
        """
        ...  # pragma: no cover

    def list_all(self) -> Mapping[str, Any]:
        """Return a snapshot of user-defined entries in definition order.

        Host built-ins are excluded.
        """
        ...  # pragma: no cover


class EnvironmentInspector(Protocol):
    """Contract for reporting the current deployment environment."""

    def current_environment(self) -> str:
        """Return the environment name, e.g. ``"development"``."""
        ...  # pragma: no cover


class DebugFlagSource(Protocol):
    """Contract for reading pre-existing host debug flags."""

    def get(self, name: str) -> bool | None:
        """Return the host flag *name*, or ``None`` when it is not set."""
        ...  # pragma: no cover


class PathResolver(Protocol):
    """Contract for deriving plugin locations from a plugin file path."""

    def basename(self, file_path: str) -> str:
        """Return *file_path* relative to the plugins root."""
        ...  # pragma: no cover

    def directory(self, file_path: str) -> str:
        """Return the directory of *file_path* with a trailing separator."""
        ...  # pragma: no cover

    def url(self, file_path: str) -> str:
        """Return the public URL of the plugin folder with a trailing slash."""
        ...  # pragma: no cover
