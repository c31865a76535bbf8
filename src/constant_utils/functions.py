"""Free-standing convenience entry points.

These forward to a process-wide :class:`ConstantRegistry` so call sites
can use either style interchangeably::

    from constant_utils import define_constant, get_constant, setup_plugin_constants

    setup_plugin_constants("myplugin", __file__, "1.2.3")
    define_constant("API_KEY", "secret-123")
    api_key = get_constant("API_KEY", "default-key")

The default registry is built once per process on first use.
"""

from __future__ import annotations

from typing import Any

from constant_utils.core.registry import ConstantRegistry
from constant_utils.infra.host import build_registry
from constant_utils.infra.symbol_tables import ProcessSymbolTable

PROCESS_SYMBOLS: ProcessSymbolTable = ProcessSymbolTable()
"""Process-wide table backing the default registry."""

_registry: ConstantRegistry | None = None


def get_default_registry() -> ConstantRegistry:
    """Return the process-wide registry, building it on first call."""
    global _registry
    if _registry is None:
        _registry = build_registry(PROCESS_SYMBOLS)
    return _registry


def set_default_registry(registry: ConstantRegistry | None) -> None:
    """Replace the process-wide registry.

    Passing ``None`` makes the next :func:`get_default_registry` call
    rebuild it against :data:`PROCESS_SYMBOLS`.
    """
    global _registry
    _registry = registry


def define_constant(name: str, value: Any) -> bool:
    """Define *name* if it is not already defined.

    Returns ``True`` if the constant was defined, ``False`` if it
    already existed.
    """
    return get_default_registry().define(name, value)


def get_constant(name: str, default: Any = None) -> Any:
    """Return the value of *name*, or *default* when it is not defined."""
    return get_default_registry().get(name, default)


def setup_plugin_constants(prefix: str, file_path: str, version: str) -> list[str]:
    """Define ``{PREFIX}_PLUGIN_VERSION``/``_FILE``/``_BASE``/``_DIR``/``_URL``.

    Returns the names that were newly defined.
    """
    return get_default_registry().setup_plugin(prefix, file_path, version)
