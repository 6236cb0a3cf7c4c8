"""Allow ``python -m cmdnotes`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m cmdnotes`` behaves identically to the ``cmd-notes``
console script.
"""

from __future__ import annotations

from cmdnotes.cli.app import cli

if __name__ == "__main__":
    cli()
