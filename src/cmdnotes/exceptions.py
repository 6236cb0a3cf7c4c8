"""Custom exception hierarchy for cmd-notes.

All exceptions that cross layer boundaries must inherit from
:class:`CmdNotesError`.  Raw third-party exceptions (SQLAlchemy,
``OSError``) must NEVER propagate beyond the infrastructure layer — they
are caught there and re-raised as a typed subclass defined here.

Hierarchy
---------
CmdNotesError
├── StoreOpenError
├── CollectionError
├── StorageError
├── ExportError
├── MalformedRecordError
└── EnvironmentError
"""

from __future__ import annotations


class CmdNotesError(Exception):
    """Base exception for all cmd-notes errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Record store ----------------------------------------------------------

class StoreOpenError(CmdNotesError):
    """Raised when the store file cannot be opened.  Fatal."""


class CollectionError(CmdNotesError):
    """Raised when a named collection cannot be created.  Fatal."""


class StorageError(CmdNotesError):
    """Raised when a read or write transaction fails."""


# --- Codec -----------------------------------------------------------------

class MalformedRecordError(CmdNotesError):
    """Raised when a stored value has fewer fields than a record needs."""


# --- Export ----------------------------------------------------------------

class ExportError(CmdNotesError):
    """Raised when the export file cannot be created or written."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(CmdNotesError):
    """Raised when a required runtime dependency is not available."""
