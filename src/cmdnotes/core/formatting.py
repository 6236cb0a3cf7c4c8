"""Pure presentation helpers shared by the table view and the exporter.

Every function here is a pure transformation with no I/O.
"""

from __future__ import annotations

from datetime import datetime

from cmdnotes.core.models import Command

TABLE_HEADERS: tuple[str, ...] = ("ID", "Technology", "Command", "Reason", "Date Added")


def format_timestamp(moment: datetime) -> str:
    """Render *moment* as ``YYYY-MM-DD HH:MM:SS`` in its own timezone.

    Uses :meth:`datetime.isoformat` rather than ``strftime`` so that the
    year is always zero-padded to four digits, including for
    :data:`~cmdnotes.core.models.ZERO_TIME`.
    """
    return moment.replace(tzinfo=None, microsecond=0).isoformat(sep=" ")


def table_row(cmd: Command) -> tuple[str, ...]:
    """Return the cells of *cmd* in :data:`TABLE_HEADERS` order."""
    return (
        str(cmd.id),
        cmd.technology,
        cmd.command,
        cmd.reason,
        format_timestamp(cmd.date_added),
    )


def format_export_line(cmd: Command) -> str:
    """Render *cmd* as one line of the plain-text export (no newline)."""
    return (
        f"ID: {cmd.id}, Technology: {cmd.technology}, Command: {cmd.command}, "
        f"Reason: {cmd.reason}, Date Added: {format_timestamp(cmd.date_added)}"
    )
