"""``constant-utils doctor``: host environment diagnostics.

Collects what the library would detect from the current process (the
environment type and plugin roots) and renders a summary table.  No
business logic resides here.
"""

from __future__ import annotations

import os
import platform
import sys
from collections.abc import Mapping

from constant_utils.cli import exit_codes
from constant_utils.cli.console import console, rich_available
from constant_utils.infra.environment import ENVIRONMENT_VARIABLE, HostEnvironment
from constant_utils.infra.host import PLUGIN_DIR_NAME, PLUGIN_URL_NAME
from constant_utils.version import __version__

OK: str = "[green]OK[/green]"
WARN: str = "[yellow]WARN[/yellow]"


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _version_check() -> tuple[str, str, str]:
    return "constant-utils", __version__, OK


def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = OK if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _environment_check(environ: Mapping[str, str]) -> tuple[str, str, str]:
    """Return the detected environment; WARN when the variable is unusable."""
    detected = HostEnvironment(environ=environ).current_environment()
    raw = environ.get(ENVIRONMENT_VARIABLE, "")
    if raw and raw != detected:
        return "Environment", f"{detected} (ignored {raw!r})", WARN
    return "Environment", detected, OK


def _root_check(name: str, environ: Mapping[str, str]) -> tuple[str, str, str]:
    value = environ.get(name, "")
    if not value:
        return name, "not set", WARN
    return name, value, OK


def _rich_check() -> tuple[str, str, str]:
    if rich_available():
        return "rich", "installed", OK
    return "rich", "NOT INSTALLED", WARN


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _summary(message: str, style: str) -> None:
    if rich_available():
        console.print(f"[{style}]{message}[/{style}]")
    else:
        print(message, file=sys.stderr)


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nconstant-utils doctor", file=sys.stderr)
    print("=" * 64, file=sys.stderr)
    print(f"{'Component':<20} {'Value':<32} {'Status':<8}", file=sys.stderr)
    print("-" * 64, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<20} {value:<32} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def collect_checks(environ: Mapping[str, str] | None = None) -> list[tuple[str, str, str]]:
    env = os.environ if environ is None else environ
    return [
        _version_check(),
        _python_version_check(),
        _environment_check(env),
        _root_check(PLUGIN_DIR_NAME, env),
        _root_check(PLUGIN_URL_NAME, env),
        _rich_check(),
    ]


def run_doctor(environ: Mapping[str, str] | None = None) -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` unless a check FAILs, in which case
        :data:`exit_codes.GENERAL_ERROR`.
    """
    checks = collect_checks(environ)
    has_failure = any("FAIL" in status for _, _, status in checks)

    if rich_available():
        from rich.table import Table

        table = Table(
            title="constant-utils doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)
        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()
    else:
        _print_plain_doctor_table(checks)

    if has_failure:
        _summary("Some checks failed.", "bold red")
        return exit_codes.GENERAL_ERROR

    _summary("All checks passed.", "bold green")
    return exit_codes.SUCCESS
