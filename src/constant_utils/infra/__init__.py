"""Infrastructure layer: host symbol tables and host-state readers.

Rules
-----
* No imports from ``cli``.
* No user-facing output.
* Every adapter satisfies a protocol from :mod:`constant_utils.core.protocols`
  structurally.
"""

from constant_utils.infra.debug_flags import SymbolTableDebugFlagSource
from constant_utils.infra.environment import FixedEnvironment, HostEnvironment
from constant_utils.infra.host import build_registry, resolver_from_host
from constant_utils.infra.symbol_tables import ModuleSymbolTable, ProcessSymbolTable

__all__: list[str] = [
    "FixedEnvironment",
    "HostEnvironment",
    "ModuleSymbolTable",
    "ProcessSymbolTable",
    "SymbolTableDebugFlagSource",
    "build_registry",
    "resolver_from_host",
]
