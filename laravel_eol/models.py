"""Data models for the Laravel EOL report."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

# Feed date fields hold an ISO date string, boolean false ("not tracked") or nothing
FeedDate = Union[str, bool, None]


@dataclass(frozen=True)
class InstalledVersion:
    """The laravel/framework version recorded in composer.lock."""

    full: str
    major: int


@dataclass(frozen=True)
class LifecycleRecord:
    """One release cycle from the endoflife.date Laravel feed."""

    cycle: str
    release_date: Optional[str] = None
    support: FeedDate = None
    eol: FeedDate = None
    latest: Optional[str] = None
    lts: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LifecycleRecord":
        """
        Build a record from a raw feed object.

        ``releaseDate`` falls back to ``release`` and ``lts`` defaults to False.
        Values are kept verbatim; date parsing happens at evaluation time.

        Args:
            data: One object from the feed array

        Returns:
            LifecycleRecord for the object

        Raises:
            KeyError: If the object has no ``cycle`` field
        """
        release_date = data.get("releaseDate") or data.get("release")
        latest = data.get("latest")
        return cls(
            cycle=str(data["cycle"]),
            release_date=release_date if isinstance(release_date, str) else None,
            support=data.get("support"),
            eol=data.get("eol"),
            latest=str(latest) if latest not in (None, False) else None,
            lts=data.get("lts") is True,
        )

    @property
    def eol_tracked(self) -> bool:
        """False when the feed marks this cycle's EOL as not applicable."""
        return self.eol is not False


class Severity(Enum):
    """Severity of the installed release line."""

    OK = "ok"
    WARNING_PLANNING = "warning-planning"
    WARNING_URGENT = "warning-urgent"
    CRITICAL = "critical"


class DateBand(Enum):
    """Display banding for a day count, used only for coloring."""

    EXPIRED = "expired"
    URGENT = "urgent"
    CAUTION = "caution"
    FINE = "fine"


@dataclass(frozen=True)
class EvaluatedStatus:
    """Day counts and severity derived from a lifecycle record.

    A day count of None means the date was missing or unparsable.
    """

    days_to_support_end: Optional[int]
    days_to_eol: Optional[int]
    severity: Severity


@dataclass(frozen=True)
class RenderConfig:
    """Immutable inputs for the report renderer."""

    project_path: Path
