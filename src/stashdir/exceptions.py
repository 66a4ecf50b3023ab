"""Custom exception hierarchy for stashdir.

All exceptions that cross layer boundaries must inherit from
:class:`StashdirError`.  Raw ``OSError``, JSON decoding errors and
third-party exceptions (questionary, pyperclip) must NEVER propagate beyond
the infrastructure layer — they are caught and re-raised as a typed
subclass defined here.

Hierarchy
---------
StashdirError
├── StoreIOError
│   └── ClipboardError
├── FormatError
├── ValidationError
├── OutOfRangeError
├── NotFoundError
├── InteractionError
└── EnvironmentError
"""

from __future__ import annotations


class StashdirError(Exception):
    """Base exception for all stashdir errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Storage ---------------------------------------------------------------

class StoreIOError(StashdirError):
    """Raised when the database directory or file cannot be read or written."""


class FormatError(StashdirError):
    """Raised when the database file exists but is not a valid document."""


class ClipboardError(StoreIOError):
    """Raised when the system clipboard cannot be written."""


# --- Input / lookup --------------------------------------------------------

class ValidationError(StashdirError):
    """Raised for empty paths and malformed index arguments."""


class OutOfRangeError(StashdirError):
    """Raised when an index does not address an existing entry."""


class NotFoundError(StashdirError):
    """Raised when no stored path matches the one given for removal."""


# --- Interaction -----------------------------------------------------------

class InteractionError(StashdirError):
    """Raised when the interactive chooser fails for a reason other than
    the user cancelling."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(StashdirError):
    """Raised when an optional runtime dependency is not available."""


def missing_dependency(package: str, feature: str) -> EnvironmentError:
    """Build the error raised when *package* is needed for *feature*."""
    return EnvironmentError(
        f"{package} is not installed. Install with: pip install {package}",
        hint=f"{feature} requires the {package} package.",
    )
