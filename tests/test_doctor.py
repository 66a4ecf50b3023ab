"""Tests for the ``stashdir doctor`` command (cli/doctor.py).

Optional packages are hidden through ``sys.modules``; the database lives
in the per-test config directory.

Coverage:
* Individual check functions return correct tuples.
* A corrupt database makes doctor fail.
* Missing optional packages are warnings only.
* Plain-text rendering when Rich is unavailable.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from stashdir.cli import exit_codes
from stashdir.infra.json_storage import DATABASE_FILENAME


def _corrupt_database(config_dir: Path) -> None:
    config_dir.mkdir(parents=True, exist_ok=True)
    (config_dir / DATABASE_FILENAME).write_text("[not, valid", encoding="utf-8")


# ---------------------------------------------------------------------------
# Individual check functions
# ---------------------------------------------------------------------------

class TestPythonVersionCheck:
    def test_returns_tuple(self) -> None:
        from stashdir.cli.doctor import _python_version_check

        label, value, status = _python_version_check()
        assert label == "Python"
        assert isinstance(value, str)
        assert "OK" in status


class TestStashdirVersionCheck:
    def test_returns_current_version(self) -> None:
        from stashdir.cli.doctor import _stashdir_version_check
        from stashdir.version import __version__

        label, value, status = _stashdir_version_check()
        assert label == "stashdir"
        assert value == __version__
        assert "OK" in status


class TestOptionalPackageChecks:
    @patch.dict("sys.modules", {"questionary": None})
    def test_questionary_missing_is_warning(self) -> None:
        from stashdir.cli.doctor import _questionary_check

        label, value, status = _questionary_check()
        assert label == "questionary"
        assert value == "NOT INSTALLED"
        assert "WARN" in status

    @patch.dict("sys.modules", {"pyperclip": None})
    def test_pyperclip_missing_is_warning(self) -> None:
        from stashdir.cli.doctor import _pyperclip_check

        label, value, status = _pyperclip_check()
        assert label == "pyperclip"
        assert value == "NOT INSTALLED"
        assert "WARN" in status

    def test_pyperclip_present(self) -> None:
        from stashdir.cli.doctor import _pyperclip_check

        fake = MagicMock(__version__="1.9.0")
        with patch.dict("sys.modules", {"pyperclip": fake}):
            _label, value, status = _pyperclip_check()
        assert value == "1.9.0"
        assert "OK" in status


class TestDatabaseCheck:
    def test_missing_database_is_ok(self, config_dir: Path) -> None:
        from stashdir.cli.doctor import _database_check

        label, value, status = _database_check()
        assert label == "database"
        assert str(config_dir / DATABASE_FILENAME) in value
        assert "0 entries" in value
        assert "OK" in status

    def test_corrupt_database_fails(self, config_dir: Path) -> None:
        from stashdir.cli.doctor import _database_check

        _corrupt_database(config_dir)
        _label, value, status = _database_check()
        assert "corrupt" in value
        assert "FAIL" in status


class TestOsCheck:
    @patch("stashdir.cli.doctor.platform.machine", return_value="arm64")
    @patch("stashdir.cli.doctor.platform.release", return_value="23.4.0")
    @patch("stashdir.cli.doctor.platform.system", return_value="Darwin")
    def test_darwin_is_displayed_as_macos(
        self,
        _mock_system: MagicMock,
        _mock_release: MagicMock,
        _mock_machine: MagicMock,
    ) -> None:
        from stashdir.cli.doctor import _os_check

        _label, value, _status = _os_check()
        assert "macOS" in value
        assert "Darwin" not in value


# ---------------------------------------------------------------------------
# run_doctor integration
# ---------------------------------------------------------------------------

class TestRunDoctor:
    def test_healthy_environment_succeeds(self) -> None:
        from stashdir.cli.doctor import run_doctor

        assert run_doctor() == exit_codes.SUCCESS

    @patch.dict("sys.modules", {"questionary": None, "pyperclip": None})
    def test_missing_optional_packages_still_succeed(self) -> None:
        from stashdir.cli.doctor import run_doctor

        assert run_doctor() == exit_codes.SUCCESS

    def test_corrupt_database_fails(self, config_dir: Path) -> None:
        from stashdir.cli.doctor import run_doctor

        _corrupt_database(config_dir)
        assert run_doctor() == exit_codes.GENERAL_ERROR

    @patch.dict("sys.modules", {"rich": None, "rich.table": None})
    def test_plain_output(
        self, config_dir: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        from stashdir.cli.doctor import run_doctor

        assert run_doctor() == exit_codes.SUCCESS
        err = capsys.readouterr().err
        assert "stashdir doctor" in err
        assert str(config_dir) in err
        assert "All checks passed." in err


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestDoctorRouting:
    @patch("stashdir.cli.doctor.run_doctor", return_value=exit_codes.SUCCESS)
    def test_doctor_dispatches(self, mock_run: MagicMock) -> None:
        from stashdir.cli.app import main

        code = main(["doctor"])
        assert code == exit_codes.SUCCESS
        mock_run.assert_called_once()

    @patch("stashdir.cli.doctor.run_doctor", return_value=exit_codes.GENERAL_ERROR)
    def test_doctor_failure_propagates(self, mock_run: MagicMock) -> None:
        from stashdir.cli.app import main

        code = main(["doctor"])
        assert code == exit_codes.GENERAL_ERROR
