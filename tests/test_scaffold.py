"""Smoke tests: package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from constant_utils import __version__
from constant_utils.cli import exit_codes
from constant_utils.cli.app import cli, main
from constant_utils.exceptions import (
    ConfigFileError,
    ConstantRedefinitionError,
    ConstantUtilsError,
    DependencyMissingError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [ConstantRedefinitionError, ConfigFileError, DependencyMissingError],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[ConstantUtilsError]
    ) -> None:
        assert issubclass(exc_class, ConstantUtilsError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(ConstantUtilsError, Exception)

    def test_hint_is_stored(self) -> None:
        err = ConstantUtilsError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert ConstantUtilsError("boom").hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_no_args_returns_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([]) == exit_codes.SUCCESS
        assert "constant-utils" in capsys.readouterr().out

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    @patch("constant_utils.cli.doctor.run_doctor", return_value=exit_codes.SUCCESS)
    def test_doctor_routes(self, mock_doctor: object) -> None:
        assert main(["doctor"]) == exit_codes.SUCCESS

    def test_export_routes(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from constant_utils.cli import app as app_module

        monkeypatch.setattr(app_module, "_handle_export", lambda args: exit_codes.SUCCESS)
        assert main(["export", "defs.json"]) == exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    def _run_cli_with(self, exc: BaseException) -> int:
        with patch("constant_utils.cli.app.main", side_effect=exc):
            with pytest.raises(SystemExit) as exc_info:
                cli()
        return int(exc_info.value.code)

    def test_success_exit_code(self) -> None:
        with patch("constant_utils.cli.app.main", return_value=exit_codes.SUCCESS):
            with pytest.raises(SystemExit) as exc_info:
                cli()
        assert exc_info.value.code == exit_codes.SUCCESS

    def test_library_error(self) -> None:
        assert self._run_cli_with(ConfigFileError("bad", hint="fix it")) == exit_codes.GENERAL_ERROR

    def test_keyboard_interrupt(self) -> None:
        assert self._run_cli_with(KeyboardInterrupt()) == exit_codes.KEYBOARD_INTERRUPT

    def test_unexpected_error(self) -> None:
        assert self._run_cli_with(RuntimeError("boom")) == exit_codes.UNEXPECTED_ERROR
