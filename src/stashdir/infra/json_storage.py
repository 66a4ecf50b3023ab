"""Infrastructure: JSON file storage for the bookmark database.

The document lives at ``<user-config-dir>/stashdir/config.json``.  The
directory comes from :mod:`platformdirs` unless ``STASHDIR_CONFIG_DIR``
points somewhere else.

Rules
-----
* Every ``OSError`` becomes :class:`~stashdir.exceptions.StoreIOError`.
* Every decoding or schema problem becomes
  :class:`~stashdir.exceptions.FormatError`.
* Writes go to a sibling temporary file that is moved into place, so a
  crash never leaves a truncated document behind.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from platformdirs import user_config_dir

from stashdir.core.models import StashDocument
from stashdir.exceptions import FormatError, StoreIOError

logger = logging.getLogger(__name__)

APP_NAME: str = "stashdir"
DATABASE_FILENAME: str = "config.json"
CONFIG_DIR_ENV: str = "STASHDIR_CONFIG_DIR"
"""Environment variable that overrides the database directory."""


def default_config_dir() -> Path:
    """Return the directory that holds the database file."""
    override = os.environ.get(CONFIG_DIR_ENV, "").strip()
    if override:
        return Path(override).expanduser()
    return Path(user_config_dir(APP_NAME, appauthor=False, roaming=True))


def default_database_path() -> Path:
    return default_config_dir() / DATABASE_FILENAME


class JsonFileStorage:
    """Concrete :class:`~stashdir.core.protocols.StorageBackend` over a JSON file.

    Usage::

        storage = JsonFileStorage.default()
        store = Store.open(storage)
    """

    def __init__(self, path: Path) -> None:
        self._path: Path = path

    @classmethod
    def default(cls) -> JsonFileStorage:
        """Storage at the platform (or overridden) default location."""
        return cls(default_database_path())

    @property
    def location(self) -> Path:
        return self._path

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def load(self) -> StashDocument:
        """Ensure the directory exists and read the document, if any.

        Raises
        ------
        StoreIOError
            If the directory cannot be created or the file cannot be read.
        FormatError
            If the file is not valid JSON or does not match the schema.
        """
        self._ensure_directory()

        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No database at %s yet; starting empty", self._path)
            return StashDocument()
        except OSError as exc:
            raise StoreIOError(
                f"Unable to read database {self._path}: {exc.strerror or exc}",
            ) from exc
        except UnicodeDecodeError as exc:
            raise self._format_error(f"not valid UTF-8 ({exc.reason})") from exc

        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise self._format_error(
                f"invalid JSON ({exc.msg} at line {exc.lineno}, column {exc.colno})",
            ) from exc

        try:
            return StashDocument.from_json_obj(data)
        except FormatError as exc:
            raise self._format_error(str(exc)) from exc

    def save(self, document: StashDocument) -> None:
        """Rewrite the whole document.

        Raises
        ------
        StoreIOError
            If the file cannot be written.
        """
        self._ensure_directory()
        payload = json.dumps(document.to_json_obj(), indent=2, ensure_ascii=False) + "\n"
        tmp_path = self._path.with_name(self._path.name + ".tmp")

        try:
            tmp_path.write_text(payload, encoding="utf-8")
            tmp_path.replace(self._path)
        except OSError as exc:
            tmp_path.unlink(missing_ok=True)
            raise StoreIOError(
                f"Unable to write database {self._path}: {exc.strerror or exc}",
            ) from exc

        logger.debug("Saved %d entries to %s", len(document), self._path)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _ensure_directory(self) -> None:
        directory = self._path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StoreIOError(
                f"Unable to create config directory {directory}: {exc.strerror or exc}",
            ) from exc

    def _format_error(self, detail: str) -> FormatError:
        return FormatError(
            f"Corrupt database {self._path}: {detail}",
            hint=f"Fix the file by hand or delete it to start over: {self._path}",
        )
