"""questionary-backed implementation of :class:`~stashdir.core.protocols.Chooser`.

questionary is imported lazily so that commands which never prompt
(``list``, ``add``, ``--help``) keep working when it is not installed.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from stashdir.exceptions import InteractionError, missing_dependency

logger = logging.getLogger(__name__)


def _import_questionary() -> Any:
    """Import questionary lazily for interactive selection."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise missing_dependency("questionary", "Interactive selection") from exc
    return questionary


class QuestionaryChooser:
    """Arrow-key single-choice menu rendered by questionary.

    ``ask()`` turns Esc and Ctrl+C into a ``None`` answer, which is passed
    through unchanged as the cancellation signal.
    """

    def choose(self, message: str, options: Sequence[str]) -> str | None:
        questionary = _import_questionary()

        try:
            selected: str | None = questionary.select(
                message,
                choices=list(options),
                use_arrow_keys=True,
                use_shortcuts=False,
            ).ask()
        except Exception as exc:
            raise InteractionError(
                f"Interactive selection failed: {exc}",
                hint="Run from an interactive terminal, or pass an index instead.",
            ) from exc

        logger.debug("Chooser returned %r", selected)
        return selected
