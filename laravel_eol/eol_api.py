"""endoflife.date client and release cycle lookups."""

from typing import List, Optional

import requests

from .exceptions import APIError
from .http_client import get_default_headers
from .logging_config import logger
from .models import LifecycleRecord

EOL_API_URL = "https://endoflife.date/api/laravel.json"
DEFAULT_TIMEOUT = 30  # seconds


def fetch_lifecycle_feed(
    url: str = EOL_API_URL,
    session: Optional[requests.Session] = None,
) -> List[LifecycleRecord]:
    """
    Fetch the Laravel release cycles from endoflife.date.

    The endpoint returns a JSON array with one object per major version:
    [
        {"cycle": "11", "releaseDate": "2024-03-12", "support": "2025-09-03",
         "eol": "2026-03-12", "latest": "11.9.2", "lts": false},
        ...
    ]

    Args:
        url: Feed URL
        session: Optional requests.Session; a temporary one is used otherwise

    Returns:
        Lifecycle records in feed order

    Raises:
        APIError: On transport failure, a non-2xx status or a malformed body
    """
    own_session = session is None
    http = session or requests.Session()
    logger.debug(f"Fetching lifecycle feed: {url}")

    try:
        response = http.get(url, headers=get_default_headers(), timeout=DEFAULT_TIMEOUT)
    except requests.exceptions.ConnectionError:
        raise APIError(f"Failed to fetch EOL data from {url}: connection failed")
    except requests.exceptions.Timeout:
        raise APIError(f"Failed to fetch EOL data from {url}: request timed out")
    except requests.exceptions.RequestException as e:
        raise APIError(f"Failed to fetch EOL data from {url}: {e}")
    finally:
        if own_session:
            http.close()

    if not response.ok:
        raise APIError(f"Failed to fetch EOL data from {url} [{response.status_code}]")

    try:
        data = response.json()
    except ValueError as e:
        raise APIError(f"Invalid JSON in EOL data from {url}: {e}")

    if not isinstance(data, list):
        raise APIError(f"Unexpected EOL data from {url}: expected a JSON array")

    records = []
    for item in data:
        if not isinstance(item, dict) or "cycle" not in item:
            raise APIError(f"Unexpected EOL data from {url}: release entry without a cycle")
        records.append(LifecycleRecord.from_dict(item))

    logger.debug(f"Fetched {len(records)} release cycles")
    return records


def find_cycle(feed: List[LifecycleRecord], major: int) -> Optional[LifecycleRecord]:
    """
    Find the record for a major version.

    Args:
        feed: Lifecycle records
        major: Installed major version

    Returns:
        The first record whose cycle equals ``str(major)``, or None
    """
    wanted = str(major)
    for record in feed:
        if record.cycle == wanted:
            return record
    return None


def latest_major(feed: List[LifecycleRecord]) -> str:
    """
    Find the newest tracked major version, the upgrade target in recommendations.

    Records whose ``eol`` is boolean false are excluded, as are cycles that
    are not plain integers.

    Args:
        feed: Lifecycle records

    Returns:
        The cycle string of the numerically greatest remaining record

    Raises:
        APIError: If no record qualifies
    """
    best: Optional[LifecycleRecord] = None
    for record in feed:
        if not record.eol_tracked:
            continue
        if not (record.cycle.isascii() and record.cycle.isdigit()):
            logger.debug(f"Skipping non-numeric cycle '{record.cycle}'")
            continue
        if best is None or int(record.cycle) > int(best.cycle):
            best = record

    if best is None:
        raise APIError("EOL data contains no tracked Laravel release cycles")
    return best.cycle
