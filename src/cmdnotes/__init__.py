"""cmd-notes — keep a personal log of useful shell commands.

Records are persisted in an embedded key-value store and can be listed
as a table or exported to a plain-text file.
"""

from cmdnotes.version import __version__

__all__: list[str] = ["__version__"]
