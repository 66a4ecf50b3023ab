"""Infrastructure layer — external system integration.

This layer wraps the filesystem (the JSON database), the terminal prompt
(questionary) and the system clipboard (pyperclip).  Every raw exception
is caught here and re-raised as a
:class:`~stashdir.exceptions.StashdirError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from stashdir.infra.chooser import QuestionaryChooser
from stashdir.infra.clipboard import PyperclipClipboard
from stashdir.infra.json_storage import JsonFileStorage, default_database_path

__all__: list[str] = [
    "JsonFileStorage",
    "PyperclipClipboard",
    "QuestionaryChooser",
    "default_database_path",
]
