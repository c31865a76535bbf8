"""Concrete :class:`~constant_utils.core.protocols.SymbolTable` adapters.

* :class:`ProcessSymbolTable` keeps constants in a private dict for the
  lifetime of the process (or of the instance, in tests).
* :class:`ModuleSymbolTable` binds constants as attributes of a Python
  module, so ``settings.MYPLUGIN_PLUGIN_VERSION`` reads them back.

Both refuse to bind a name twice.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType, ModuleType
from typing import Any

from constant_utils.exceptions import ConstantRedefinitionError


class ProcessSymbolTable:
    """Dict-backed write-once table.

    *builtins* seeds host-provided names: they are visible to
    :meth:`exists` and :meth:`read` but excluded from :meth:`list_all`.
    """

    def __init__(self, builtins: Mapping[str, Any] | None = None) -> None:
        self._builtins: dict[str, Any] = dict(builtins or {})
        self._user: dict[str, Any] = {}

    def exists(self, name: str) -> bool:
        return name in self._user or name in self._builtins

    def define(self, name: str, value: Any) -> None:
        if self.exists(name):
            raise ConstantRedefinitionError(name)
        self._user[name] = value

    def read(self, name: str) -> Any:
        if name in self._user:
            return self._user[name]
        return self._builtins[name]

    def list_all(self) -> Mapping[str, Any]:
        return MappingProxyType(dict(self._user))


class ModuleSymbolTable:
    """Write-once table stored as attributes of *module*.

    Attributes already present on *module* are host built-ins: they are
    visible to :meth:`exists` and :meth:`read`, and only names bound
    through :meth:`define` are listed by :meth:`list_all`.
    """

    def __init__(self, module: ModuleType) -> None:
        self._module: ModuleType = module
        self._order: list[str] = []

    @property
    def module(self) -> ModuleType:
        return self._module

    def exists(self, name: str) -> bool:
        return hasattr(self._module, name)

    def define(self, name: str, value: Any) -> None:
        if self.exists(name):
            raise ConstantRedefinitionError(name)
        setattr(self._module, name, value)
        self._order.append(name)

    def read(self, name: str) -> Any:
        return getattr(self._module, name)

    def list_all(self) -> Mapping[str, Any]:
        namespace = vars(self._module)
        return MappingProxyType(
            {name: namespace[name] for name in self._order if name in namespace}
        )
