"""Root logger configuration for the CLI.

Uses Rich's ``RichHandler`` when Rich is installed and a plain
``StreamHandler`` otherwise.  Library modules only ever call
``logging.getLogger(__name__)``; handlers are attached here, once.
"""

from __future__ import annotations

import logging

_CONFIGURED = False


def configure_logging(verbose: bool = False) -> None:
    """Attach a stderr handler to the root logger (idempotent)."""
    global _CONFIGURED
    if _CONFIGURED:
        return

    level = logging.DEBUG if verbose else logging.WARNING
    handler: logging.Handler
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler = logging.StreamHandler()
        fmt = "%(levelname)s %(name)s: %(message)s"
    else:
        handler = RichHandler(show_time=False, show_path=False, markup=False)
        fmt = "%(message)s"

    logging.basicConfig(level=level, handlers=[handler], format=fmt)
    _CONFIGURED = True
