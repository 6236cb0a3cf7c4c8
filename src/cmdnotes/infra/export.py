"""Infrastructure: plain-text export file writer.

Rules
-----
* The target file is created or truncated, never appended to.
* No ``print()`` — callers handle user-facing output.
* ``OSError`` is re-raised as :class:`~cmdnotes.exceptions.ExportError`.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import structlog

from cmdnotes.exceptions import ExportError

logger = structlog.get_logger(__name__)


def write_export(path: Path, lines: Iterable[str]) -> Path:
    """Write *lines* to *path*, one per line, and return the path.

    Raises
    ------
    ExportError
        If the file cannot be created or written.
    """
    written = 0
    try:
        with path.open("w", encoding="utf-8") as fh:
            for line in lines:
                fh.write(f"{line}\n")
                written += 1
    except OSError as exc:
        raise ExportError(
            f"Cannot write {path}: {exc.strerror or exc}",
            hint="Check that the directory exists and is writable.",
        ) from exc

    logger.debug("export_written", path=str(path), lines=written)
    return path
