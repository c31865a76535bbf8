"""Tests for PluginPathResolver and path helpers (core/plugin_paths.py).

Pure string logic; no filesystem access.
"""

from __future__ import annotations

import pytest

from constant_utils.core.plugin_paths import (
    PluginPathResolver,
    normalize_path,
    trailing_slash,
)

PLUGINS_DIR = "/srv/wp-content/plugins"
PLUGINS_URL = "https://example.test/wp-content/plugins"
MU_DIR = "/srv/wp-content/mu-plugins"
MU_URL = "https://example.test/wp-content/mu-plugins"


@pytest.fixture
def resolver() -> PluginPathResolver:
    return PluginPathResolver(
        plugins_dir=PLUGINS_DIR,
        plugins_url=PLUGINS_URL,
        mu_plugins_dir=MU_DIR,
        mu_plugins_url=MU_URL,
    )


class TestHelpers:
    def test_normalize_backslashes(self) -> None:
        assert normalize_path("C:\\srv\\plugins\\shop.php") == "C:/srv/plugins/shop.php"

    def test_normalize_collapses_repeated_slashes(self) -> None:
        assert normalize_path("/srv//plugins///shop") == "/srv/plugins/shop"

    def test_normalize_keeps_leading_double_slash(self) -> None:
        assert normalize_path("//server/share") == "//server/share"

    @pytest.mark.parametrize("value", ["dir", "dir/", "dir//", "dir\\"])
    def test_trailing_slash(self, value: str) -> None:
        assert trailing_slash(value) == "dir/"


class TestBasename:
    def test_relative_to_plugins_dir(self, resolver: PluginPathResolver) -> None:
        assert resolver.basename(f"{PLUGINS_DIR}/shop/shop.php") == "shop/shop.php"

    def test_single_file_plugin(self, resolver: PluginPathResolver) -> None:
        assert resolver.basename(f"{PLUGINS_DIR}/hello.php") == "hello.php"

    def test_relative_to_mu_plugins_dir(self, resolver: PluginPathResolver) -> None:
        assert resolver.basename(f"{MU_DIR}/tools/tools.php") == "tools/tools.php"

    def test_outside_roots_is_trimmed(self, resolver: PluginPathResolver) -> None:
        assert resolver.basename("/opt/other/plugin.php") == "opt/other/plugin.php"

    def test_windows_paths(self) -> None:
        resolver = PluginPathResolver(plugins_dir="C:\\srv\\plugins")
        assert resolver.basename("C:\\srv\\plugins\\shop\\shop.php") == "shop/shop.php"

    def test_root_with_trailing_slash(self) -> None:
        resolver = PluginPathResolver(plugins_dir=f"{PLUGINS_DIR}/")
        assert resolver.basename(f"{PLUGINS_DIR}/shop/shop.php") == "shop/shop.php"


class TestDirectory:
    def test_has_trailing_slash(self, resolver: PluginPathResolver) -> None:
        assert resolver.directory(f"{PLUGINS_DIR}/shop/shop.php") == f"{PLUGINS_DIR}/shop/"

    def test_without_configured_roots(self) -> None:
        assert PluginPathResolver().directory("/path/plugin/plugin.php") == "/path/plugin/"

    @pytest.mark.parametrize("file_path", ["plugin.php", "./plugin.php"])
    def test_bare_file_name_is_current_directory(self, file_path: str) -> None:
        assert PluginPathResolver().directory(file_path) == "./"

    def test_file_at_filesystem_root(self) -> None:
        assert PluginPathResolver().directory("/plugin.php") == "/"


class TestUrl:
    def test_plugin_folder_url(self, resolver: PluginPathResolver) -> None:
        assert resolver.url(f"{PLUGINS_DIR}/shop/shop.php") == f"{PLUGINS_URL}/shop/"

    def test_single_file_plugin_uses_root_url(self, resolver: PluginPathResolver) -> None:
        assert resolver.url(f"{PLUGINS_DIR}/hello.php") == f"{PLUGINS_URL}/"

    def test_mu_plugin_uses_mu_url(self, resolver: PluginPathResolver) -> None:
        assert resolver.url(f"{MU_DIR}/tools/tools.php") == f"{MU_URL}/tools/"

    def test_root_url_trailing_slash_not_doubled(self) -> None:
        resolver = PluginPathResolver(plugins_dir=PLUGINS_DIR, plugins_url=f"{PLUGINS_URL}/")
        assert resolver.url(f"{PLUGINS_DIR}/shop/shop.php") == f"{PLUGINS_URL}/shop/"

    def test_without_configured_roots(self) -> None:
        assert PluginPathResolver().url("/path/plugin/plugin.php") == "/path/plugin/"

    def test_bare_file_name_without_roots(self) -> None:
        assert PluginPathResolver().url("plugin.php") == "./"

    def test_bare_file_name_with_root_url(self) -> None:
        resolver = PluginPathResolver(plugins_url=PLUGINS_URL)
        assert resolver.url("plugin.php") == f"{PLUGINS_URL}/"


class TestImmutability:
    def test_frozen(self, resolver: PluginPathResolver) -> None:
        with pytest.raises(AttributeError):
            resolver.plugins_dir = "/elsewhere"  # type: ignore[misc]
