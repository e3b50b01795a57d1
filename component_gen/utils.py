"""Shared utility functions for component-gen.

Provides JSON loading, directory creation, literal placeholder substitution
and the Rich-based console helpers every user-facing message goes through.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape

console = Console()
err_console = Console(stderr=True)

# ---------------------------------------------------------------------------
# String helpers
# ---------------------------------------------------------------------------


def replace_placeholder(text: str, placeholder: str, value: str) -> str:
    """Replace every literal occurrence of *placeholder* in *text* with *value*.

    The placeholder is never compiled as a pattern, so characters such as
    ``.``, ``$`` or ``(`` match only themselves.

    Examples::

        replace_placeholder("A.B and A.B", "A.B", "X") -> "X and X"
        replace_placeholder("AxB", "A.B", "X")         -> "AxB"
    """
    if not placeholder:
        return text
    return text.replace(placeholder, value)


def error_reason(exc: Exception) -> str:
    """Short human-readable reason for a filesystem failure.

    Uses ``strerror`` for ``OSError`` (``"Permission denied"``) and falls
    back to the exception text, e.g. ``"embedded null byte"`` for the
    ``ValueError`` raised on paths containing NUL.
    """
    return getattr(exc, "strerror", None) or str(exc)


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> Any:
    """Load and parse a JSON file.

    Args:
        path: Path to the JSON file.

    Returns:
        The decoded JSON value.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    raw = Path(path).read_text(encoding="utf-8")
    return json.loads(raw)


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Args:
        path: Directory path.

    Returns:
        The directory as a ``Path`` object.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]", soft_wrap=True)


def print_error(message: str) -> None:
    """Print a red error message prefixed with ``Error:`` to stderr."""
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}", soft_wrap=True)


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]", soft_wrap=True)


def print_info(message: str) -> None:
    """Print a dim informational line."""
    console.print(f"[dim]{escape(message)}[/dim]", soft_wrap=True)
