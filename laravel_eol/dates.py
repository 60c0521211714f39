"""Date parsing, formatting and day arithmetic for lifecycle dates."""

from datetime import date, datetime, time
from typing import Optional

from .models import DateBand, FeedDate

ISO_DATE_FORMAT = "%Y-%m-%d"
DISPLAY_DATE_FORMAT = "%B %d, %Y"
NOT_AVAILABLE = "N/A"
SECONDS_PER_DAY = 86400

URGENT_DAYS = 90
CAUTION_DAYS = 180


def parse_date(value: FeedDate) -> Optional[date]:
    """
    Parse a lifecycle date.

    Accepts ISO dates ("2026-03-12") and the display form ("March 12, 2026").

    Args:
        value: Raw feed value

    Returns:
        The parsed date, or None for missing, boolean, "null" or unparsable input
    """
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text or text == "null":
        return None

    for fmt in (ISO_DATE_FORMAT, DISPLAY_DATE_FORMAT):
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def days_until(value: FeedDate, now: Optional[datetime] = None) -> Optional[int]:
    """
    Count whole days from now until local midnight of a date.

    The difference in epoch seconds is divided by 86400 and truncated toward
    zero, so a date that is today yields 0 for the rest of the day and a date
    ten days ago yields -10.

    Args:
        value: Raw feed value
        now: Reference time, local wall clock (defaults to datetime.now())

    Returns:
        Day count, or None when the date is missing or unparsable
    """
    target_date = parse_date(value)
    if target_date is None:
        return None

    reference = now or datetime.now()
    target = datetime.combine(target_date, time.min)
    diff_seconds = int(target.timestamp()) - int(reference.timestamp())

    days = abs(diff_seconds) // SECONDS_PER_DAY
    return days if diff_seconds >= 0 else -days


def format_date(value: FeedDate) -> str:
    """Render a lifecycle date as "Month DD, YYYY", or "N/A"."""
    parsed = parse_date(value)
    if parsed is None:
        return NOT_AVAILABLE
    return parsed.strftime(DISPLAY_DATE_FORMAT)


def date_band(days: int) -> DateBand:
    """Color band for a day count."""
    if days < 0:
        return DateBand.EXPIRED
    if days < URGENT_DAYS:
        return DateBand.URGENT
    if days < CAUTION_DAYS:
        return DateBand.CAUTION
    return DateBand.FINE
