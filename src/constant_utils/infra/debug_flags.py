"""Host debug flags read from a symbol table."""

from __future__ import annotations

from constant_utils.core.protocols import SymbolTable


class SymbolTableDebugFlagSource:
    """Satisfies :class:`~constant_utils.core.protocols.DebugFlagSource`.

    Returns the value of a host flag such as ``WP_DEBUG`` when it is
    defined in *symbols*, else ``None``.  Values are passed through as
    stored; no coercion to ``bool`` is applied.
    """

    def __init__(self, symbols: SymbolTable) -> None:
        self._symbols: SymbolTable = symbols

    def get(self, name: str) -> bool | None:
        if not self._symbols.exists(name):
            return None
        return self._symbols.read(name)
