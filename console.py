"""Colored console output shared by every module.

Usage:
    from console import print_error, print_success

    print_success("Report written")
    print_error("pubspec.lock file not found")
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

__all__ = [
    "console",
    "set_verbose",
    "print_info",
    "print_success",
    "print_warning",
    "print_error",
    "print_debug",
]

CHECKER_THEME = Theme({
    "info": "bold cyan",
    "success": "bold green",
    "warning": "bold yellow",
    "error": "bold red",
    "debug": "blue",
})

console = Console(
    theme=CHECKER_THEME,
    highlight=False,
    soft_wrap=True,
)

_VERBOSE = False


def set_verbose(enabled: bool) -> None:
    """Turn debug tracing on or off for the rest of the run."""
    global _VERBOSE
    _VERBOSE = bool(enabled)


def print_info(msg: str) -> None:
    console.print(f"[info]{escape(msg)}[/info]")


def print_success(msg: str) -> None:
    """Print a success message in green."""
    console.print(f"[success]{escape(msg)}[/success]")


def print_warning(msg: str) -> None:
    """Print a warning message in yellow."""
    console.print(f"[warning]Warning:[/warning] {escape(msg)}")


def print_error(msg: str) -> None:
    """Print an error message in red."""
    console.print(f"[error]Error:[/error] {escape(msg)}")


def print_debug(msg: str) -> None:
    """Print a debug trace in blue, only in verbose mode."""
    if _VERBOSE:
        console.print(f"[debug]{escape(msg)}[/debug]")
