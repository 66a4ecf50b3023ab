"""Shared pytest fixtures and configuration for the stashdir test suite.

Guidelines
----------
* No test touches the real user config directory: the database directory
  is redirected to a per-test temporary directory.
* questionary and pyperclip are mocked at the infra boundary: no real
  terminal prompt, no real clipboard.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from stashdir.infra.json_storage import CONFIG_DIR_ENV


@pytest.fixture(autouse=True)
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the default database location at a temporary directory."""
    directory = tmp_path / "config"
    monkeypatch.setenv(CONFIG_DIR_ENV, str(directory))
    return directory


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Drop handlers installed by ``--verbose`` between tests."""
    yield
    package_logger = logging.getLogger("stashdir")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
