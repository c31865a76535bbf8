"""Shared pytest fixtures and configuration for the constant-utils test suite.

Guidelines
----------
* Every test gets its own symbol table; nothing leaks between tests.
* The process-wide default registry is swapped out per test.
* Host state (environment variables) is controlled with ``monkeypatch``.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from constant_utils.core.registry import ConstantRegistry
from constant_utils.functions import set_default_registry
from constant_utils.infra.symbol_tables import ProcessSymbolTable

HOST_VARIABLES: tuple[str, ...] = (
    "WP_ENVIRONMENT_TYPE",
    "WP_PLUGIN_DIR",
    "WP_PLUGIN_URL",
    "WPMU_PLUGIN_DIR",
    "WPMU_PLUGIN_URL",
)


@pytest.fixture(autouse=True)
def _clean_host_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in HOST_VARIABLES:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def symbols() -> ProcessSymbolTable:
    return ProcessSymbolTable()


@pytest.fixture
def registry(symbols: ProcessSymbolTable) -> ConstantRegistry:
    return ConstantRegistry(symbols)


@pytest.fixture
def default_registry() -> Iterator[ConstantRegistry]:
    """Install an isolated registry as the process-wide default."""
    isolated = ConstantRegistry(ProcessSymbolTable())
    set_default_registry(isolated)
    yield isolated
    set_default_registry(None)
