"""Runtime configuration: resolved settings and logging setup."""

from cmdnotes.config.logging import configure_logging
from cmdnotes.config.settings import DEFAULT_DB_PATH, Settings

__all__: list[str] = ["DEFAULT_DB_PATH", "Settings", "configure_logging"]
