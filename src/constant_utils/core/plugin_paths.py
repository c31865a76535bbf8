"""Plugin path and URL derivation.

Pure string manipulation over forward-slash paths; nothing here touches
the filesystem.  Host roots are supplied by the caller, see
:func:`constant_utils.infra.host.resolver_from_host`.
"""

from __future__ import annotations

import posixpath
import re
from dataclasses import dataclass

_REPEATED_SLASHES = re.compile(r"(?<=.)/+")


def normalize_path(path: str) -> str:
    """Use forward slashes throughout and collapse repeated separators."""
    return _REPEATED_SLASHES.sub("/", path.replace("\\", "/"))


def trailing_slash(value: str) -> str:
    """Return *value* with exactly one trailing ``/``."""
    return value.rstrip("/\\") + "/"


@dataclass(frozen=True, slots=True)
class PluginPathResolver:
    """Derives plugin base name, directory and URL from a plugin file.

    Satisfies :class:`~constant_utils.core.protocols.PathResolver`.

    Attributes
    ----------
    plugins_dir : str
        Filesystem root holding regular plugins.
    plugins_url : str
        Public URL of *plugins_dir*.
    mu_plugins_dir : str
        Filesystem root for must-use plugins, or ``""``.
    mu_plugins_url : str
        Public URL of *mu_plugins_dir*, or ``""``.
    """

    plugins_dir: str = ""
    plugins_url: str = ""
    mu_plugins_dir: str = ""
    mu_plugins_url: str = ""

    def basename(self, file_path: str) -> str:
        """Return *file_path* relative to the plugins root.

        ``/srv/wp-content/plugins/shop/shop.php`` -> ``shop/shop.php``.
        Paths outside both roots are returned normalised, without
        leading or trailing slashes.
        """
        path = normalize_path(file_path)
        for root in (self.plugins_dir, self.mu_plugins_dir):
            stripped = self._strip_root(path, root)
            if stripped is not None:
                path = stripped
                break
        return path.strip("/")

    def directory(self, file_path: str) -> str:
        """Return the directory holding *file_path*, with a trailing slash.

        A bare file name lives in the current directory: ``./``.
        """
        return trailing_slash(posixpath.dirname(normalize_path(file_path)) or ".")

    def url(self, file_path: str) -> str:
        """Return the public URL of the folder holding *file_path*.

        With no root URL configured, a bare file name yields ``./``.
        """
        base_url = self.plugins_url
        if self.mu_plugins_dir and self._strip_root(
            normalize_path(file_path), self.mu_plugins_dir
        ) is not None:
            base_url = self.mu_plugins_url

        folder = posixpath.dirname(self.basename(file_path))
        if folder in ("", "."):
            return trailing_slash(base_url or ".")
        return trailing_slash(f"{base_url.rstrip('/')}/{folder.lstrip('/')}")

    @staticmethod
    def _strip_root(path: str, root: str) -> str | None:
        """Return *path* without the ``root/`` prefix, or ``None``."""
        if not root:
            return None
        prefix = normalize_path(root).rstrip("/") + "/"
        if path.startswith(prefix):
            return path[len(prefix):]
        return None
