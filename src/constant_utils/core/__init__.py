"""Core layer: the constant registry and its pure helpers.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from constant_utils.core.equality import strict_equals
from constant_utils.core.models import DEBUG_FLAGS, DebugFlag, EnvironmentType
from constant_utils.core.plugin_paths import PluginPathResolver
from constant_utils.core.protocols import (
    DebugFlagSource,
    EnvironmentInspector,
    PathResolver,
    SymbolTable,
)
from constant_utils.core.registry import ConstantRegistry

__all__: list[str] = [
    "DEBUG_FLAGS",
    "ConstantRegistry",
    "DebugFlag",
    "DebugFlagSource",
    "EnvironmentInspector",
    "EnvironmentType",
    "PathResolver",
    "PluginPathResolver",
    "SymbolTable",
    "strict_equals",
]
