"""``stashdir doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising whether
the runtime environment and the database are usable.  Falls back to a
plain-text table when Rich is not installed.
"""

from __future__ import annotations

import platform
import sys

from stashdir.cli import exit_codes
from stashdir.cli.console import console, escape
from stashdir.exceptions import FormatError, StoreIOError
from stashdir.version import __version__


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _stashdir_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the stashdir version row."""
    return "stashdir", __version__, "[green]OK[/green]"


def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _questionary_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the interactive chooser row."""
    try:
        import questionary
    except ImportError:
        return "questionary", "NOT INSTALLED", "[yellow]WARN[/yellow]"
    return "questionary", getattr(questionary, "__version__", "unknown"), "[green]OK[/green]"


def _pyperclip_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the clipboard row."""
    try:
        import pyperclip
    except ImportError:
        return "pyperclip", "NOT INSTALLED", "[yellow]WARN[/yellow]"
    return "pyperclip", getattr(pyperclip, "__version__", "unknown"), "[green]OK[/green]"


def _database_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the database row.

    Opens the store, which creates the config directory if it is missing.
    A corrupt or unreadable file is a FAIL.
    """
    from stashdir.core.store import Store
    from stashdir.infra.json_storage import JsonFileStorage

    storage = JsonFileStorage.default()
    try:
        store = Store.open(storage)
    except FormatError:
        return "database", f"{storage.location} (corrupt)", "[red]FAIL[/red]"
    except StoreIOError:
        return "database", f"{storage.location} (unreadable)", "[red]FAIL[/red]"
    return "database", f"{storage.location} ({len(store)} entries)", "[green]OK[/green]"


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    release = platform.release()
    machine = platform.machine()
    value = f"{system_display} {release} ({machine})"
    return "OS", value, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    if "FAIL" in status:
        return "FAIL"
    if "WARN" in status:
        return "WARN"
    if "OK" in status:
        return "OK"
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nstashdir doctor", file=sys.stderr)
    print("=" * 72, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<50} {'Status':<8}", file=sys.stderr)
    print("-" * 72, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<12} {value:<50} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when no check failed,
        :data:`exit_codes.GENERAL_ERROR` otherwise.  Missing optional
        packages are warnings, not failures.
    """
    checks = [
        _stashdir_version_check(),
        _python_version_check(),
        _questionary_check(),
        _pyperclip_check(),
        _database_check(),
        _os_check(),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_doctor_table(checks)
        print("Some checks failed." if has_failure else "All checks passed.", file=sys.stderr)
        return exit_codes.GENERAL_ERROR if has_failure else exit_codes.SUCCESS

    table = Table(
        title="stashdir doctor",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=12)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)
    for label, value, status in checks:
        table.add_row(label, escape(value), status)

    console.print()
    console.print(table)
    console.print()

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR
    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
