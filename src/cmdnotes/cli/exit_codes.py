"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit: the user chose Exit, or asked for help or the version."""

GENERAL_ERROR: int = 1
"""A known CmdNotesError was caught (e.g. the store could not be opened)."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C or closed input.  POSIX convention (128 + SIGINT=2)."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""
