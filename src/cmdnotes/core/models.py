"""Domain models for cmd-notes.

Models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  A record is never modified once it has
been written, and the model mirrors that.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

ZERO_TIME: datetime = datetime.min.replace(tzinfo=timezone.utc)
"""Substitute timestamp for stored values whose date cannot be parsed."""


@dataclass(frozen=True, slots=True)
class Command:
    """A single remembered shell command."""

    id: int
    """Sequence ID assigned at creation.  ``0`` only for malformed records."""

    technology: str
    """Free-text grouping label (e.g. ``Linux``, ``Git``)."""

    command: str
    """The shell command itself."""

    reason: str
    """Why the command is worth remembering."""

    date_added: datetime
    """When the record was created."""
