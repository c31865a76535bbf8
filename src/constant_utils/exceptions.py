"""Custom exception hierarchy for constant-utils.

The registry itself never raises for the ordinary "already defined",
"missing on read" or "no config for this environment" paths; those are
reported through return values.  The exceptions below cover the host
adapters and the CLI.

Hierarchy
---------
ConstantUtilsError
├── ConstantRedefinitionError
├── ConfigFileError
└── DependencyMissingError
"""

from __future__ import annotations


class ConstantUtilsError(Exception):
    """Base exception for all constant-utils errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Host symbol tables -----------------------------------------------------

class ConstantRedefinitionError(ConstantUtilsError):
    """Raised by a symbol table when a name is defined a second time.

    :class:`~constant_utils.core.registry.ConstantRegistry` checks for
    existence first, so callers going through the registry never see
    this error in single-threaded use.
    """

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Constant {name} is already defined.",
            hint="Use ConstantRegistry.define() to define only when absent.",
        )
        self.name: str = name


# --- CLI input ---------------------------------------------------------------

class ConfigFileError(ConstantUtilsError):
    """Raised when a CLI definition file cannot be read or is malformed."""


# --- Optional dependencies ---------------------------------------------------

class DependencyMissingError(ConstantUtilsError):
    """Raised when an optional runtime dependency is not available."""
