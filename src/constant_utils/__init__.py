"""constant-utils: safe, idempotent, namespaced global constants.

Define write-once named values, read them back with fallbacks, and group
them under per-plugin prefixes.
"""

from constant_utils.core.registry import ConstantRegistry
from constant_utils.functions import (
    define_constant,
    get_constant,
    get_default_registry,
    set_default_registry,
    setup_plugin_constants,
)
from constant_utils.version import __version__

__all__: list[str] = [
    "ConstantRegistry",
    "__version__",
    "define_constant",
    "get_constant",
    "get_default_registry",
    "set_default_registry",
    "setup_plugin_constants",
]
