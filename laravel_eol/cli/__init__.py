"""CLI module for laravel-eol.

The command takes no arguments; it reports on the composer.lock in the
current working directory.
"""

from .main import cli, main, run_check

__all__ = [
    "cli",
    "main",
    "run_check",
]
