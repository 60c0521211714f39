"""Severity evaluation and exit codes."""

from datetime import datetime
from typing import Optional

from .dates import CAUTION_DAYS, URGENT_DAYS, days_until
from .models import EvaluatedStatus, LifecycleRecord, Severity

EXIT_OK = 0
EXIT_WARNING = 1
EXIT_CRITICAL = 2
EXIT_SETUP_ERROR = 3


def evaluate_status(record: Optional[LifecycleRecord], now: Optional[datetime] = None) -> EvaluatedStatus:
    """
    Compute day counts and severity for a release cycle.

    Security end (eol) is checked first, active support second. Missing
    dates never count as zero. With no record at all the status is OK.

    Args:
        record: The matching lifecycle record, or None
        now: Reference time (defaults to datetime.now())

    Returns:
        EvaluatedStatus for the record
    """
    if record is None:
        return EvaluatedStatus(days_to_support_end=None, days_to_eol=None, severity=Severity.OK)

    days_to_support_end = days_until(record.support, now)
    days_to_eol = days_until(record.eol, now)

    if days_to_eol is not None and days_to_eol < 0:
        severity = Severity.CRITICAL
    elif days_to_eol is not None and days_to_eol < URGENT_DAYS:
        severity = Severity.WARNING_URGENT
    elif days_to_support_end is not None and days_to_support_end < CAUTION_DAYS:
        # Includes active support that has already ended
        severity = Severity.WARNING_PLANNING
    else:
        severity = Severity.OK

    return EvaluatedStatus(
        days_to_support_end=days_to_support_end,
        days_to_eol=days_to_eol,
        severity=severity,
    )


def exit_code_for(status: EvaluatedStatus) -> int:
    """
    Map a status to the process exit code.

    Only the security end date affects the exit code; a planning warning
    about active support still exits 0.
    """
    if status.severity is Severity.CRITICAL:
        return EXIT_CRITICAL
    if status.severity is Severity.WARNING_URGENT:
        return EXIT_WARNING
    return EXIT_OK
