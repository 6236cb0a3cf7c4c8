"""Rich console construction for the CLI layer.

Rich is imported lazily so bootstrap paths (``--help``, ``--version``)
stay importable without it; any path that actually renders raises
:class:`~cmdnotes.exceptions.EnvironmentError` with install guidance.
"""

from __future__ import annotations

from typing import Any

from cmdnotes.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(*, stderr: bool = False) -> Any:
    """Create a Rich console targeting stdout, or stderr when asked."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr)
