"""Host wiring: plugin roots and the default collaborator set.

Plugin roots are looked up as host constants first (``WP_PLUGIN_DIR``
and friends), then as process environment variables of the same name.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from constant_utils.core.plugin_paths import PluginPathResolver
from constant_utils.core.protocols import SymbolTable
from constant_utils.core.registry import ConstantRegistry
from constant_utils.infra.debug_flags import SymbolTableDebugFlagSource
from constant_utils.infra.environment import HostEnvironment

PLUGIN_DIR_NAME: str = "WP_PLUGIN_DIR"
PLUGIN_URL_NAME: str = "WP_PLUGIN_URL"
MU_PLUGIN_DIR_NAME: str = "WPMU_PLUGIN_DIR"
MU_PLUGIN_URL_NAME: str = "WPMU_PLUGIN_URL"


def _host_setting(
    name: str,
    symbols: SymbolTable,
    environ: Mapping[str, str],
) -> str:
    if symbols.exists(name):
        return str(symbols.read(name))
    return environ.get(name, "")


def resolver_from_host(
    symbols: SymbolTable,
    environ: Mapping[str, str] | None = None,
) -> PluginPathResolver:
    """Build a :class:`PluginPathResolver` from host constants or env vars."""
    env = os.environ if environ is None else environ
    return PluginPathResolver(
        plugins_dir=_host_setting(PLUGIN_DIR_NAME, symbols, env),
        plugins_url=_host_setting(PLUGIN_URL_NAME, symbols, env),
        mu_plugins_dir=_host_setting(MU_PLUGIN_DIR_NAME, symbols, env),
        mu_plugins_url=_host_setting(MU_PLUGIN_URL_NAME, symbols, env),
    )


def build_registry(
    symbols: SymbolTable,
    environ: Mapping[str, str] | None = None,
) -> ConstantRegistry:
    """Return a registry bound to *symbols* with host-backed collaborators."""
    return ConstantRegistry(
        symbols,
        environment=HostEnvironment(symbols, environ),
        debug_flags=SymbolTableDebugFlagSource(symbols),
        paths=resolver_from_host(symbols, environ),
    )
