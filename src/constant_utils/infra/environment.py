"""Environment inspectors.

:class:`HostEnvironment` reports the deployment environment the way the
host platform does: the ``WP_ENVIRONMENT_TYPE`` environment variable
wins, then a ``WP_ENVIRONMENT_TYPE`` constant, and anything unrecognised
collapses to ``production``.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from constant_utils.core.models import EnvironmentType
from constant_utils.core.protocols import SymbolTable

logger = logging.getLogger(__name__)

ENVIRONMENT_VARIABLE: str = "WP_ENVIRONMENT_TYPE"


class HostEnvironment:
    """Satisfies :class:`~constant_utils.core.protocols.EnvironmentInspector`.

    Parameters
    ----------
    symbols:
        Table consulted for a ``WP_ENVIRONMENT_TYPE`` constant when the
        environment variable is unset.  May be ``None``.
    environ:
        Process environment mapping; defaults to :data:`os.environ`.
    """

    def __init__(
        self,
        symbols: SymbolTable | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._symbols: SymbolTable | None = symbols
        self._environ: Mapping[str, str] = os.environ if environ is None else environ
        self._cached: str | None = None

    def current_environment(self) -> str:
        """Return the detected environment, computed once per instance."""
        if self._cached is None:
            self._cached = self._detect()
        return self._cached

    def _detect(self) -> str:
        raw: object = self._environ.get(ENVIRONMENT_VARIABLE) or None
        if raw is None and self._symbols is not None and self._symbols.exists(ENVIRONMENT_VARIABLE):
            raw = self._symbols.read(ENVIRONMENT_VARIABLE) or None

        if raw is None:
            return EnvironmentType.DEFAULT
        if raw not in EnvironmentType.ALL:
            logger.warning(
                "Unrecognised environment type %r; using %r",
                raw,
                EnvironmentType.DEFAULT,
            )
            return EnvironmentType.DEFAULT
        return str(raw)


class FixedEnvironment:
    """Inspector that always reports the environment it was given."""

    def __init__(self, name: str) -> None:
        self._name: str = name

    def current_environment(self) -> str:
        return self._name
