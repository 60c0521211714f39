"""Rich console utilities for laravel-eol.

This module provides the shared Rich theme, a console factory and the
helpers used to print the banner and fatal errors. Colors follow the
terminal's own palette so they read well in light and dark themes.
"""

import os
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.text import Text
from rich.theme import Theme


custom_theme = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "caution": "yellow",
        "error": "red",
        "success": "green",
        "heading": "bold",
        "banner": "bold blue",
    }
)


def is_github_actions() -> bool:
    """Return True when running inside GitHub Actions."""
    return os.getenv("GITHUB_ACTIONS") == "true"


def create_console(stderr: bool = False) -> Console:
    """
    Create a console bound to stdout (or stderr) with the laravel-eol theme.

    GitHub Actions supports ANSI colors but Rich may incorrectly disable
    them, so the terminal is forced on there. Lines never wrap, which keeps
    long project paths and error messages on a single line.

    Args:
        stderr: Write to stderr instead of stdout

    Returns:
        Configured Rich console
    """
    return Console(
        theme=custom_theme,
        stderr=stderr,
        force_terminal=is_github_actions() or None,
        color_system="auto",
        highlight=False,
        soft_wrap=True,
    )


def print_banner(console: Console, title: str = "Laravel EOL Status Checker") -> None:
    """Print the report banner."""
    rule = "=" * 34
    banner = Text()
    banner.append(f"{rule}\n", style="banner")
    banner.append(f"  {title}\n", style="banner")
    banner.append(rule, style="banner")
    console.print(banner)
    console.print()


def print_error(message: str, console: Optional[Console] = None) -> None:
    """
    Print a single-line fatal error.

    Args:
        message: Human-readable description of the failed precondition
        console: Console to print to (defaults to a new stderr console)
    """
    target = console or create_console(stderr=True)
    single_line = " ".join(str(message).split())
    target.print(f"[error]Error: {escape(single_line)}[/error]")


def print_warning(message: str, console: Console) -> None:
    """Print a warning line."""
    console.print(f"[warning]Warning: {escape(message)}[/warning]")
