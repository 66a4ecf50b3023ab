"""pyperclip-backed implementation of :class:`~stashdir.core.protocols.ClipboardWriter`.

pyperclip is imported lazily; only the ``copy`` command needs it.
"""

from __future__ import annotations

from typing import Any

from stashdir.exceptions import ClipboardError, missing_dependency


def _import_pyperclip() -> Any:
    try:
        import pyperclip
    except ModuleNotFoundError as exc:
        raise missing_dependency("pyperclip", "Copying to the clipboard") from exc
    return pyperclip


class PyperclipClipboard:
    """Writes text to the system clipboard through pyperclip."""

    def write(self, text: str) -> None:
        """Copy *text*; a missing copy mechanism raises :class:`ClipboardError`."""
        pyperclip = _import_pyperclip()
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            raise ClipboardError(
                f"Unable to copy to clipboard: {exc}",
                hint="On Linux install xclip, xsel or wl-clipboard.",
            ) from exc
