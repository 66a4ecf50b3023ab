"""Allow ``python -m stashdir`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m stashdir`` behaves identically to the ``stashdir`` console
script.
"""

from __future__ import annotations

from stashdir.cli.app import cli

if __name__ == "__main__":
    cli()
