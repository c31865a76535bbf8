"""CLI console helpers with optional Rich support.

Rich is imported lazily so bootstrap paths (``--help``, ``--version``)
keep working when it is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from constant_utils.exceptions import DependencyMissingError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` or raise ``DependencyMissingError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise DependencyMissingError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


def rich_available() -> bool:
    try:
        _load_rich_console_class()
    except DependencyMissingError:
        return False
    return True


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except DependencyMissingError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects)


console = _ConsoleProxy()
