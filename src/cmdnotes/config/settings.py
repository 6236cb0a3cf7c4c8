"""Resolved runtime settings.

cmd-notes has no config file and reads no environment variables; the
only inputs are the command-line flags.  With no flags the store is
``commands.db`` in the current working directory.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path

from cmdnotes.core.repository import DEFAULT_BUCKET

DEFAULT_DB_PATH: Path = Path("commands.db")


@dataclass(frozen=True, slots=True)
class Settings:
    """Immutable settings for one process run."""

    db_path: Path = DEFAULT_DB_PATH
    bucket: str = DEFAULT_BUCKET
    verbose: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> Settings:
        """Build settings from the namespace produced by the CLI parser."""
        db = getattr(args, "db", None)
        return cls(
            db_path=Path(db).expanduser() if db else DEFAULT_DB_PATH,
            verbose=bool(getattr(args, "verbose", False)),
        )
