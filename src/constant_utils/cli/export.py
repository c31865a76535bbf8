"""``constant-utils export``: apply a definition file and show the result.

A definition file is a JSON object::

    {
      "prefix": "myplugin",
      "host": {"WP_DEBUG": true, "WP_PLUGIN_DIR": "/srv/wp-content/plugins"},
      "plugin": {"file": "/srv/wp-content/plugins/my/my.php", "version": "1.2.3"},
      "debug": true,
      "environments": {"development": {"DEBUG": true}},
      "constants": {"API_URL": "https://example.test"}
    }

Only ``prefix`` is required.  ``host`` seeds pre-existing host constants
(debug flags, plugin roots, environment type); they are consulted but not
exported.
"""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from constant_utils.cli.console import console, rich_available
from constant_utils.core.registry import ConstantRegistry
from constant_utils.exceptions import ConfigFileError
from constant_utils.infra.debug_flags import SymbolTableDebugFlagSource
from constant_utils.infra.environment import FixedEnvironment, HostEnvironment
from constant_utils.infra.host import resolver_from_host
from constant_utils.infra.symbol_tables import ProcessSymbolTable

logger = logging.getLogger(__name__)

_MAPPING_SECTIONS: tuple[str, ...] = ("host", "environments", "constants")


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def load_definition(path: Path) -> dict[str, Any]:
    """Read and validate a definition file.

    Raises
    ------
    ConfigFileError
        When the file is missing, not JSON, or structurally invalid.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigFileError(
            f"Cannot read definition file: {path}",
            hint=str(exc),
        ) from exc

    try:
        data: Any = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigFileError(
            f"Definition file is not valid JSON: {path}",
            hint=f"line {exc.lineno}, column {exc.colno}: {exc.msg}",
        ) from exc

    _validate(data)
    return data


def _validate(data: Any) -> None:
    if not isinstance(data, dict):
        raise ConfigFileError("Definition file must contain a JSON object.")

    prefix = data.get("prefix")
    if not isinstance(prefix, str) or not prefix:
        raise ConfigFileError(
            "Definition file needs a non-empty string 'prefix'.",
            hint='e.g. "prefix": "myplugin"',
        )

    for section in _MAPPING_SECTIONS:
        if section in data and not isinstance(data[section], dict):
            raise ConfigFileError(f"'{section}' must be a JSON object.")

    for env, values in data.get("environments", {}).items():
        if not isinstance(values, dict):
            raise ConfigFileError(f"'environments.{env}' must be a JSON object.")

    if "plugin" in data:
        plugin = data["plugin"]
        if not isinstance(plugin, dict) or not all(
            isinstance(plugin.get(key), str) for key in ("file", "version")
        ):
            raise ConfigFileError(
                "'plugin' needs string 'file' and 'version' entries.",
            )

    if "debug" in data and not isinstance(data["debug"], bool):
        raise ConfigFileError("'debug' must be true or false.")


# ---------------------------------------------------------------------------
# Applying
# ---------------------------------------------------------------------------

def build_export_registry(
    definition: Mapping[str, Any],
    *,
    environment: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> ConstantRegistry:
    """Return a registry over a fresh table seeded with ``host`` entries."""
    symbols = ProcessSymbolTable(builtins=definition.get("host"))
    inspector = (
        FixedEnvironment(environment)
        if environment is not None
        else HostEnvironment(symbols, environ)
    )
    return ConstantRegistry(
        symbols,
        environment=inspector,
        debug_flags=SymbolTableDebugFlagSource(symbols),
        paths=resolver_from_host(symbols, environ),
    )


def apply_definition(registry: ConstantRegistry, definition: Mapping[str, Any]) -> list[str]:
    """Run every setup step the definition asks for, in a fixed order.

    Order: plugin, debug, environment, additional constants.  Earlier
    steps win when two steps produce the same name.
    """
    prefix: str = definition["prefix"]
    defined: list[str] = []

    plugin = definition.get("plugin")
    if plugin is not None:
        defined += registry.setup_plugin(prefix, plugin["file"], plugin["version"])
    if definition.get("debug", False):
        defined += registry.setup_debug(prefix)
    if "environments" in definition:
        defined += registry.setup_environment(prefix, definition["environments"])
    if "constants" in definition:
        defined += registry.setup_additional(prefix, definition["constants"])

    logger.info("Defined %d constant(s) for prefix %s", len(defined), prefix.upper())
    return defined


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def render_constants(constants: Mapping[str, Any], *, title: str) -> None:
    """Render *constants* as a Rich table, or plain text without Rich."""
    if not rich_available():
        print(f"\n{title}", file=sys.stderr)
        for name, value in constants.items():
            print(f"{name:<32} {value!r}", file=sys.stderr)
        print(file=sys.stderr)
        return

    from rich.table import Table
    from rich.text import Text

    table = Table(
        title=title,
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Constant", style="bold", no_wrap=True)
    table.add_column("Value", overflow="fold")
    table.add_column("Type", style="dim")
    for name, value in constants.items():
        table.add_row(name, Text(repr(value)), type(value).__name__)

    console.print()
    console.print(table)
    console.print()


def run_export(
    path: Path,
    *,
    environment: str | None = None,
    name_filter: str = "",
    as_json: bool = False,
) -> dict[str, Any]:
    """Load *path*, apply it, and render the exported constants."""
    definition = load_definition(path)
    registry = build_export_registry(definition, environment=environment)
    apply_definition(registry, definition)

    exported = registry.export(name_filter)
    if as_json:
        print(json.dumps(exported, indent=2))
    else:
        title = f"{definition['prefix'].upper()} constants ({registry.current_environment()})"
        render_constants(exported, title=title)
    return exported
