"""CLI application entry point and command routing for stashdir.

This module is the **sole error boundary** for the entire application.
It catches :class:`~stashdir.exceptions.StashdirError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — every command opens a
  :class:`~stashdir.core.store.Store` and delegates to it.
* Indexes are 1-based on the command line and translated to the store's
  0-based indexes here.
* Results meant for the shell go to stdout; everything else to stderr.
"""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Callable
from typing import TYPE_CHECKING

from stashdir.cli import exit_codes
from stashdir.cli.console import configure_logging, console, emit, escape
from stashdir.exceptions import StashdirError, ValidationError
from stashdir.version import __version__

if TYPE_CHECKING:
    from stashdir.core.store import Store


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser and its sub-commands."""
    parser = argparse.ArgumentParser(
        prog="stashdir",
        description="Bookmark directories and jump back to them.",
        epilog='Change directory with:  cd "$(stashdir select)"',
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details to stderr.",
    )

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    add = commands.add_parser("add", help="Add the current or the given directory.")
    add.add_argument("path", nargs="?", default=None, help="Directory to stash (default: cwd).")

    commands.add_parser("list", help="List stashed paths with their 1-based index.")
    commands.add_parser("path", help="Show the absolute path of the database file.")

    remove = commands.add_parser("remove", help="Remove by 1-based index or by path.")
    remove.add_argument("target", help="Index from 'stashdir list', or a stashed path.")

    select = commands.add_parser(
        "select",
        help="Print the chosen path (interactive when no index is given).",
    )
    select.add_argument("index", nargs="?", default=None, help="1-based index.")

    copy = commands.add_parser(
        "copy",
        help="Copy the chosen path to the clipboard (interactive when no index is given).",
    )
    copy.add_argument("index", nargs="?", default=None, help="1-based index.")

    commands.add_parser("doctor", help="Check the environment and the database.")
    return parser


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _open_store(*, interactive: bool = False) -> Store:
    """Open the store at the default location.

    The questionary chooser is only wired in for commands that prompt.
    """
    from stashdir.core.store import Store
    from stashdir.infra.json_storage import JsonFileStorage

    chooser = None
    if interactive:
        from stashdir.infra.chooser import QuestionaryChooser

        chooser = QuestionaryChooser()

    return Store.open(JsonFileStorage.default(), chooser=chooser)


def _parse_index(text: str) -> int | None:
    """Return the 1-based index in *text*, or ``None`` if it is not one."""
    stripped = text.strip()
    if not (stripped.isascii() and stripped.isdigit()):
        return None
    value = int(stripped)
    return value if value > 0 else None


def _require_index(text: str) -> int:
    index = _parse_index(text)
    if index is None:
        raise ValidationError(
            f"Invalid index: {text}",
            hint="Use a positive number as shown by 'stashdir list'.",
        )
    return index


def _choose(store: Store, index_text: str | None) -> str | None:
    """Resolve an explicit index, or fall back to the interactive menu."""
    if index_text is not None:
        return store.get(_require_index(index_text) - 1)
    return store.select_interactive()


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------

def _handle_add(args: argparse.Namespace) -> int:
    target: str = args.path if args.path is not None else os.getcwd()
    if target.strip():
        target = os.path.abspath(target.strip())

    store = _open_store()
    if store.add(target):
        console.print(f"[green]Added:[/green] {escape(target)}")
    else:
        console.print(f"[dim]Already stashed:[/dim] {escape(target)}")
    return exit_codes.SUCCESS


def _handle_list(_args: argparse.Namespace) -> int:
    items = _open_store().list()
    if not items:
        console.print("[dim]Nothing stashed yet. Add one with 'stashdir add'.[/dim]")
    for position, item in enumerate(items, start=1):
        emit(f"{position}\t{item}")
    return exit_codes.SUCCESS


def _handle_path(_args: argparse.Namespace) -> int:
    from stashdir.infra.json_storage import default_database_path

    emit(os.path.abspath(default_database_path()), newline=False)
    return exit_codes.SUCCESS


def _handle_remove(args: argparse.Namespace) -> int:
    store = _open_store()
    index = _parse_index(args.target)
    if index is not None:
        removed = store.remove_index(index - 1)
    else:
        removed = store.remove_path(args.target)
    console.print(f"[green]Removed:[/green] {escape(removed)}")
    return exit_codes.SUCCESS


def _handle_select(args: argparse.Namespace) -> int:
    store = _open_store(interactive=args.index is None)
    choice = _choose(store, args.index)
    if choice:
        emit(choice, newline=False)
    return exit_codes.SUCCESS


def _handle_copy(args: argparse.Namespace) -> int:
    from stashdir.infra.clipboard import PyperclipClipboard

    store = _open_store(interactive=args.index is None)
    choice = _choose(store, args.index)
    if not choice:
        return exit_codes.SUCCESS

    PyperclipClipboard().write(choice)
    console.print(f"Copied to clipboard: {escape(choice)}")
    return exit_codes.SUCCESS


def _handle_doctor(_args: argparse.Namespace) -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from stashdir.cli.doctor import run_doctor

    return run_doctor()


_HANDLERS: dict[str, Callable[[argparse.Namespace], int]] = {
    "add": _handle_add,
    "copy": _handle_copy,
    "doctor": _handle_doctor,
    "list": _handle_list,
    "path": _handle_path,
    "remove": _handle_remove,
    "select": _handle_select,
}


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the stashdir CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    return _HANDLERS[args.command](args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except StashdirError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
