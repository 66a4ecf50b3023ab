"""stashdir — bookmark directories and jump back to them.

A small CLI over a JSON-backed, alphabetically ordered list of paths with
an interactive picker and clipboard support.
"""

from stashdir.version import __version__

__all__: list[str] = ["__version__"]
