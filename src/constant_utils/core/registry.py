"""Core constant registry: safe, idempotent, namespaced constant handling.

:class:`ConstantRegistry` wraps a :class:`~constant_utils.core.protocols.SymbolTable`
injected at construction time and layers "define only if absent"
semantics, prefix namespacing, and bulk helpers on top of it.

Guarantees
----------
* A name is never redefined through the registry.
* No operation raises for already-defined names, missing names, or a
  missing environment entry; outcomes are reported through return values.
* No state of its own beyond the injected collaborators.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from constant_utils.core import models
from constant_utils.core.equality import strict_equals
from constant_utils.core.plugin_paths import PluginPathResolver
from constant_utils.core.protocols import (
    DebugFlagSource,
    EnvironmentInspector,
    PathResolver,
    SymbolTable,
)

logger = logging.getLogger(__name__)


class ConstantRegistry:
    """Stateless facade over a write-once symbol table.

    Parameters
    ----------
    symbols:
        Any object satisfying the :class:`SymbolTable` protocol.
    environment:
        Reports the current environment for :meth:`setup_environment`.
        When ``None``, the environment is always ``"production"``.
    debug_flags:
        Source of pre-existing host debug flags for :meth:`setup_debug`.
        When ``None``, every flag takes its default.
    paths:
        Derives plugin base/dir/url for :meth:`setup_plugin`.  When
        ``None``, a resolver with no configured roots is used.
    """

    def __init__(
        self,
        symbols: SymbolTable,
        *,
        environment: EnvironmentInspector | None = None,
        debug_flags: DebugFlagSource | None = None,
        paths: PathResolver | None = None,
    ) -> None:
        self._symbols: SymbolTable = symbols
        self._environment: EnvironmentInspector | None = environment
        self._debug_flags: DebugFlagSource | None = debug_flags
        self._paths: PathResolver = paths if paths is not None else PluginPathResolver()

    @property
    def symbols(self) -> SymbolTable:
        return self._symbols

    # ------------------------------------------------------------------
    # Define
    # ------------------------------------------------------------------

    def define(self, name: str, value: Any) -> bool:
        """Define *name* if it is not already defined.

        Returns ``True`` when the constant was defined, ``False`` when it
        already existed (its value is left untouched) or *name* is empty.
        """
        if not name:
            logger.warning("Refusing to define a constant with an empty name")
            return False
        if self._symbols.exists(name):
            logger.debug("Constant %s already defined; skipping", name)
            return False

        self._symbols.define(name, value)
        logger.debug("Defined constant %s", name)
        return True

    def define_multiple(self, constants: Mapping[str, Any]) -> list[str]:
        """Define every entry of *constants* that is not yet defined.

        Returns the newly defined names in the order they were defined.
        """
        return [name for name, value in constants.items() if self.define(name, value)]

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get(self, name: str, default: Any = None) -> Any:
        """Return the value of *name*, or *default* when undefined."""
        if self._symbols.exists(name):
            return self._symbols.read(name)
        return default

    def get_multiple(self, names: Iterable[str], default: Any = None) -> dict[str, Any]:
        """Resolve each of *names* via :meth:`get`, keyed in request order."""
        return {name: self.get(name, default) for name in names}

    def get_all_with_prefix(self, prefix: str) -> dict[str, Any]:
        """Return user-defined constants whose name starts with *prefix*.

        The match is case-sensitive and anchored at position 0.
        """
        return {
            name: value
            for name, value in self._symbols.list_all().items()
            if name.startswith(prefix)
        }

    def get_all_names_by_prefix(self, prefix: str) -> list[str]:
        """Return the names matched by :meth:`get_all_with_prefix`."""
        return list(self.get_all_with_prefix(prefix))

    def export(self, prefix: str = "") -> dict[str, Any]:
        """Return all user-defined constants, optionally filtered by *prefix*."""
        if not prefix:
            return dict(self._symbols.list_all())
        return self.get_all_with_prefix(prefix)

    # ------------------------------------------------------------------
    # Prefixed setup helpers
    # ------------------------------------------------------------------

    def setup_plugin(self, prefix: str, file_path: str, version: str) -> list[str]:
        """Define the five standard plugin constants under *prefix*.

        ``{PREFIX}_PLUGIN_VERSION``, ``_FILE``, ``_BASE``, ``_DIR`` and
        ``_URL``.  Repeat calls define nothing further.
        """
        values = (
            version,
            file_path,
            self._paths.basename(file_path),
            self._paths.directory(file_path),
            self._paths.url(file_path),
        )
        return self.setup_additional(prefix, dict(zip(models.PLUGIN_SUFFIXES, values)))

    def setup_environment(
        self,
        prefix: str,
        config: Mapping[str, Mapping[str, Any]],
    ) -> list[str]:
        """Define the constants configured for the current environment.

        *config* maps environment names to ``suffix -> value`` mappings.
        When the current environment has no entry, nothing is defined and
        an empty list is returned.
        """
        env = self.current_environment()
        if env not in config:
            logger.debug("No constants configured for environment %r", env)
            return []
        return self.setup_additional(prefix, config[env])

    def setup_debug(self, prefix: str) -> list[str]:
        """Define ``{PREFIX}_DEBUG``, ``_DEBUG_LOG``, ``_DEBUG_DISPLAY``, ``_SCRIPT_DEBUG``.

        Each mirrors the matching host flag when set, else its default
        (``DEBUG_DISPLAY`` defaults to ``True``, the others to ``False``).
        """
        values: dict[str, Any] = {}
        for flag in models.DEBUG_FLAGS:
            host_value = (
                self._debug_flags.get(flag.host_name)
                if self._debug_flags is not None
                else None
            )
            values[flag.suffix] = flag.default if host_value is None else host_value
        return self.setup_additional(prefix, values)

    def setup_additional(self, prefix: str, constants: Mapping[str, Any]) -> list[str]:
        """Define every ``suffix -> value`` of *constants* under *prefix*."""
        return self.define_multiple(
            {models.prefixed(prefix, suffix): value for suffix, value in constants.items()}
        )

    def current_environment(self) -> str:
        """Return the environment name used by :meth:`setup_environment`."""
        if self._environment is None:
            return models.EnvironmentType.DEFAULT
        return self._environment.current_environment()

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    def is_defined(self, name: str) -> bool:
        return self._symbols.exists(name)

    def is_equal(self, name: str, value: Any) -> bool:
        """Return ``True`` if *name* is defined and strictly equals *value*.

        See :func:`~constant_utils.core.equality.strict_equals`.
        """
        return self._symbols.exists(name) and strict_equals(self._symbols.read(name), value)

    def all_defined(self, names: Iterable[str]) -> bool:
        return all(self._symbols.exists(name) for name in names)

    def any_defined(self, names: Iterable[str]) -> bool:
        return any(self._symbols.exists(name) for name in names)
