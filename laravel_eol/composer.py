"""Reader for the laravel/framework entry of composer.lock."""

import json
from pathlib import Path
from typing import Union

from .exceptions import FileProcessingError, VersionParseError
from .logging_config import logger
from .models import InstalledVersion

COMPOSER_LOCK_FILE = "composer.lock"
LARAVEL_PACKAGE = "laravel/framework"


def read_laravel_version(lock_file_path: Union[str, Path] = COMPOSER_LOCK_FILE) -> str:
    """
    Read the installed laravel/framework version from composer.lock.

    composer.lock is a JSON file with structure:
    {
        "packages": [
            {"name": "laravel/framework", "version": "v11.9.2", ...}
        ],
        "packages-dev": [...]
    }

    Only ``packages`` is searched; the framework is never a dev dependency.

    Args:
        lock_file_path: Path to composer.lock

    Returns:
        The version string exactly as recorded (e.g. "v11.9.2")

    Raises:
        FileProcessingError: If the file is missing, is not valid JSON, or
            holds no usable laravel/framework entry
    """
    path = Path(lock_file_path)
    if not path.is_file():
        raise FileProcessingError(f"{path.name} not found in current directory")

    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError
        raise FileProcessingError(f"{path.name} is not valid JSON: {e}")
    except OSError as e:
        raise FileProcessingError(f"Could not read {path.name}: {e}")

    packages = data.get("packages") if isinstance(data, dict) else None
    if not isinstance(packages, list):
        raise FileProcessingError(f"{path.name} has no packages list")

    for package in packages:
        if isinstance(package, dict) and package.get("name") == LARAVEL_PACKAGE:
            version = package.get("version")
            if not isinstance(version, str) or not version or version == "null":
                break
            logger.debug(f"Found {LARAVEL_PACKAGE} {version} in {path}")
            return version

    raise FileProcessingError(f"Laravel framework not found in {path.name}")


def extract_major_version(version: str) -> int:
    """
    Extract the major version number from a version string.

    One leading "v" is removed, then the text before the first "." is
    parsed as an integer.

    Args:
        version: Version string such as "v10.48.4" or "11.0.0"

    Returns:
        The major version (10 and 11 for the examples above)

    Raises:
        VersionParseError: If the major component is not a number
    """
    stripped = version[1:] if version.startswith("v") else version
    head = stripped.split(".", 1)[0]
    if not (head.isascii() and head.isdigit()):
        raise VersionParseError(f"Could not determine major version from '{version}'")
    return int(head)


def parse_installed_version(version: str) -> InstalledVersion:
    """Build an InstalledVersion from a composer version string."""
    return InstalledVersion(full=version, major=extract_major_version(version))


def load_installed_version(lock_file_path: Union[str, Path] = COMPOSER_LOCK_FILE) -> InstalledVersion:
    """Read composer.lock and return the normalized Laravel version."""
    return parse_installed_version(read_laravel_version(lock_file_path))
