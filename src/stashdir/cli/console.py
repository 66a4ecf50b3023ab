"""CLI console helpers with optional Rich support.

Messages for the user go to stderr through :data:`console`; results meant
for the shell (``select``, ``list``, ``path``) go to stdout through
:func:`emit` so that ``cd "$(stashdir select)"`` keeps working.

This module avoids module-level imports of Rich so bootstrap paths
(``--help``, ``--version``) remain functional when it is not installed.
"""

from __future__ import annotations

import logging
import re
import sys
from typing import Any

from stashdir.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


def escape(text: str) -> str:
    """Escape Rich markup in user data such as paths."""
    try:
        from rich.markup import escape as rich_escape
    except ModuleNotFoundError:
        return text
    return rich_escape(text)


_STYLE_TAG = re.compile(r"\[/?(?:bold|dim|green|red|yellow|cyan)(?: [a-z]+)*\]")


def strip_markup(text: str) -> str:
    """Remove the style tags this package uses from *text*."""
    return _STYLE_TAG.sub("", text)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*(strip_markup(str(obj)) for obj in objects), file=sys.stderr)
            return
        rich_console.print(*objects)


console = _ConsoleProxy()


def emit(text: str, *, newline: bool = True) -> None:
    """Write *text* verbatim to stdout for shell consumption."""
    sys.stdout.write(text + ("\n" if newline else ""))
    sys.stdout.flush()


def configure_logging(verbose: bool) -> None:
    """Send ``stashdir`` debug logs to stderr when *verbose* is set.

    Uses Rich's log handler when available.
    """
    if not verbose:
        return

    package_logger = logging.getLogger("stashdir")
    package_logger.setLevel(logging.DEBUG)
    if package_logger.handlers:
        return

    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    else:
        handler = RichHandler(console=get_rich_console(), show_path=False)
    package_logger.addHandler(handler)
