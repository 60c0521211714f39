"""Pytest configuration and shared fixtures for all tests."""

import io
import json
from datetime import date, datetime, timedelta

import pytest
from rich.console import Console

from laravel_eol.console import custom_theme

# Noon keeps day counts clear of midnight and DST edges
NOW = datetime(2026, 10, 19, 12, 0, 0)


def days_from(days: int, reference: date = NOW.date()) -> str:
    """ISO date ``days`` away from the reference date."""
    return (reference + timedelta(days=days)).isoformat()


def make_console() -> Console:
    """Console writing plain text to an in-memory buffer."""
    return Console(
        file=io.StringIO(),
        theme=custom_theme,
        width=200,
        color_system=None,
        force_terminal=False,
        highlight=False,
        soft_wrap=True,
    )


def console_output(console: Console) -> str:
    return console.file.getvalue()


@pytest.fixture(autouse=True)
def plain_environment(monkeypatch):
    """Keep CI, color and laravel-eol settings from leaking into tests."""
    for name in ("GITHUB_ACTIONS", "FORCE_COLOR", "LARAVEL_EOL_LOG_LEVEL", "LARAVEL_EOL_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def feed_data():
    """A small endoflife.date style feed, relative to NOW."""
    return [
        {
            "cycle": "12",
            "releaseDate": days_from(-200),
            "support": days_from(350),
            "eol": days_from(530),
            "latest": "12.34.0",
            "lts": False,
        },
        {
            "cycle": "11",
            "releaseDate": days_from(-560),
            "support": days_from(-30),
            "eol": days_from(45),
            "latest": "11.46.1",
            "lts": False,
        },
        {
            "cycle": "10",
            "releaseDate": days_from(-980),
            "support": days_from(-500),
            "eol": days_from(-10),
            "latest": "10.48.29",
            "lts": False,
        },
        {
            "cycle": "6",
            "releaseDate": "2019-09-03",
            "support": "2022-01-25",
            "eol": "2022-09-06",
            "latest": "6.20.45",
            "lts": True,
        },
    ]


@pytest.fixture
def write_composer_lock(tmp_path):
    """Factory writing a composer.lock with the given laravel/framework version."""

    def _write(version="v11.9.2", extra_packages=None, directory=None):
        packages = list(extra_packages or [])
        if version is not None:
            packages.append({"name": "laravel/framework", "version": version, "type": "library"})
        target = (directory or tmp_path) / "composer.lock"
        target.write_text(json.dumps({"_readme": ["generated"], "packages": packages, "packages-dev": []}))
        return target

    return _write
