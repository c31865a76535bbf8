"""Domain models for constant-utils.

Frozen dataclasses and constant tables describing the standard
constant groups.  No I/O and no dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Environments
# ---------------------------------------------------------------------------

class EnvironmentType:
    """Recognised deployment environment names."""

    LOCAL: str = "local"
    DEVELOPMENT: str = "development"
    STAGING: str = "staging"
    PRODUCTION: str = "production"

    ALL: tuple[str, ...] = (LOCAL, DEVELOPMENT, STAGING, PRODUCTION)

    DEFAULT: str = PRODUCTION
    """Used whenever the host cannot report a recognised environment."""


# ---------------------------------------------------------------------------
# Debug flags
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DebugFlag:
    """One prefixed debug constant and the host flag it mirrors."""

    suffix: str
    """Suffix appended to the prefix, e.g. ``DEBUG_LOG``."""

    host_name: str
    """Name of the host-wide flag consulted first, e.g. ``WP_DEBUG_LOG``."""

    default: bool
    """Value used when the host flag is not set."""


DEBUG_FLAGS: tuple[DebugFlag, ...] = (
    DebugFlag(suffix="DEBUG", host_name="WP_DEBUG", default=False),
    DebugFlag(suffix="DEBUG_LOG", host_name="WP_DEBUG_LOG", default=False),
    # Hosts display errors unless told otherwise.
    DebugFlag(suffix="DEBUG_DISPLAY", host_name="WP_DEBUG_DISPLAY", default=True),
    DebugFlag(suffix="SCRIPT_DEBUG", host_name="SCRIPT_DEBUG", default=False),
)


# ---------------------------------------------------------------------------
# Plugin constants
# ---------------------------------------------------------------------------

PLUGIN_VERSION: str = "PLUGIN_VERSION"
PLUGIN_FILE: str = "PLUGIN_FILE"
PLUGIN_BASE: str = "PLUGIN_BASE"
PLUGIN_DIR: str = "PLUGIN_DIR"
PLUGIN_URL: str = "PLUGIN_URL"

PLUGIN_SUFFIXES: tuple[str, ...] = (
    PLUGIN_VERSION,
    PLUGIN_FILE,
    PLUGIN_BASE,
    PLUGIN_DIR,
    PLUGIN_URL,
)


def prefixed(prefix: str, suffix: str) -> str:
    """Join an upper-cased *prefix* and a verbatim *suffix* with ``_``."""
    return f"{prefix.upper()}_{suffix}"
