"""CLI application entry point and command routing for constant-utils.

This module is the **sole error boundary** of the command line tool.  It
catches :class:`~constant_utils.exceptions.ConstantUtilsError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Commands
--------
* ``constant-utils export FILE``  apply a definition file, show constants
* ``constant-utils doctor``       host environment diagnostics
* ``constant-utils --version``
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from constant_utils.cli import exit_codes
from constant_utils.cli.console import console
from constant_utils.cli.log_setup import configure_logging
from constant_utils.exceptions import ConstantUtilsError
from constant_utils.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="constant-utils",
        description="Define, inspect and export namespaced plugin constants.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every define and skip.",
    )
    commands = parser.add_subparsers(dest="command")

    export = commands.add_parser(
        "export",
        help="Apply a JSON definition file and list the resulting constants.",
    )
    export.add_argument("file", type=Path, help="Path to the definition file.")
    export.add_argument(
        "-e",
        "--environment",
        default=None,
        help="Environment to apply instead of the detected one.",
    )
    export.add_argument(
        "-f",
        "--filter",
        dest="name_filter",
        default="",
        help="Only list constants whose name starts with this prefix.",
    )
    export.add_argument(
        "--json",
        dest="as_json",
        action="store_true",
        help="Print JSON to stdout instead of a table.",
    )

    commands.add_parser("doctor", help="Show detected host settings.")
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_export(args: argparse.Namespace) -> int:
    from constant_utils.cli.export import run_export

    run_export(
        args.file,
        environment=args.environment,
        name_filter=args.name_filter,
        as_json=args.as_json,
    )
    return exit_codes.SUCCESS


def _handle_doctor() -> int:
    from constant_utils.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the constant-utils CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    configure_logging(args.verbose)

    if args.command == "doctor":
        return _handle_doctor()
    return _handle_export(args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except ConstantUtilsError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
