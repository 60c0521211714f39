"""Formatted EOL report for the terminal."""

from typing import Optional

from rich.console import Console
from rich.markup import escape

from .console import print_banner, print_warning
from .dates import date_band, format_date
from .models import (
    DateBand,
    EvaluatedStatus,
    FeedDate,
    InstalledVersion,
    LifecycleRecord,
    RenderConfig,
    Severity,
)

UPGRADE_GUIDE_URL = "https://laravel.com/docs/{major}.x/upgrade"
RELEASE_NOTES_URL = "https://laravel.com/docs/{major}.x/releases"

BAND_STYLES = {
    DateBand.EXPIRED: "error",
    DateBand.URGENT: "error",
    DateBand.CAUTION: "caution",
    DateBand.FINE: "success",
}


class ReportRenderer:
    """
    Render the Laravel EOL report.

    The project path comes in through RenderConfig and day counts through
    EvaluatedStatus; all output goes to the given console.
    """

    def __init__(self, console: Console, config: RenderConfig):
        self.console = console
        self.config = config

    def render(
        self,
        installed: InstalledVersion,
        record: Optional[LifecycleRecord],
        status: EvaluatedStatus,
        latest_major: str,
    ) -> None:
        """
        Render the full report.

        Without a matching record only a warning is printed after the
        version section, and recommendations are skipped.
        """
        print_banner(self.console)
        self.render_repository()
        self.render_version(installed)

        if record is None:
            print_warning(f"No EOL data found for Laravel {installed.major}", self.console)
            return

        self.render_support(installed, record)
        self.render_dates(record, status)
        self.render_recommendations(installed, status, latest_major)

    def render_repository(self) -> None:
        self._heading("Repository Information")
        self._field("Project Path", str(self.config.project_path))
        self.console.print()

    def render_version(self, installed: InstalledVersion) -> None:
        self._heading("Laravel Version")
        self._field("Installed Version", installed.full)
        self._field("Major Version", str(installed.major))
        self.console.print()

    def render_support(self, installed: InstalledVersion, record: LifecycleRecord) -> None:
        self._heading("Support Information")
        self._field(f"Latest {installed.major}.x Release", record.latest or "N/A")
        if record.lts:
            self.console.print("  Release Type: [success]LTS (Long Term Support)[/success]")
        else:
            self.console.print("  Release Type: Standard Release")
        self.console.print()

    def render_dates(self, record: LifecycleRecord, status: EvaluatedStatus) -> None:
        self._heading("Important Dates")
        self.console.print(f"  Released: {format_date(record.release_date)}")
        self._deadline("Active Support Until", record.support, status.days_to_support_end, "ENDED")
        self._deadline("Security Fixes Until", record.eol, status.days_to_eol, "END OF LIFE")
        self.console.print()

    def render_recommendations(self, installed: InstalledVersion, status: EvaluatedStatus, latest_major: str) -> None:
        """Print the severity-specific advice and the upgrade links."""
        target = escape(latest_major)
        self._heading("Recommendations")

        if status.severity is Severity.CRITICAL:
            self.console.print("  [error]⚠ CRITICAL: This version is no longer supported![/error]")
            self.console.print("  [error]⚠ No security updates are being released.[/error]")
            self.console.print(f"  Action: Upgrade to Laravel {target} immediately")
        elif status.severity is Severity.WARNING_URGENT:
            self.console.print("  [error]⚠ URGENT: Security support ends in less than 90 days![/error]")
            self.console.print(f"  Action: Plan upgrade to Laravel {target} soon")
        elif status.severity is Severity.WARNING_PLANNING and (status.days_to_support_end or 0) < 0:
            self.console.print("  [warning]⚠ Active support has ended (security fixes only)[/warning]")
            self.console.print(f"  Action: Consider upgrading to Laravel {target}")
        elif status.severity is Severity.WARNING_PLANNING:
            self.console.print("  [warning]⚠ Active support ends in less than 6 months[/warning]")
            self.console.print(f"  Action: Start planning upgrade to Laravel {target}")
        else:
            self.console.print("  [success]✓ Your Laravel version is currently supported[/success]")
            if str(installed.major) != latest_major:
                self.console.print(f"  Info: Latest major version is Laravel {target}")

        self.console.print()
        self._field("Upgrade Guide", UPGRADE_GUIDE_URL.format(major=latest_major))
        self._field("Release Notes", RELEASE_NOTES_URL.format(major=latest_major))

    def _heading(self, title: str) -> None:
        self.console.print(f"[heading]{title}:[/heading]")

    def _field(self, label: str, value: str) -> None:
        self.console.print(f"  {label}: [info]{escape(value)}[/info]")

    def _deadline(self, label: str, value: FeedDate, days: Optional[int], expired_text: str) -> None:
        # false or missing means the feed does not track this date
        if value is None or value is False or value == "null" or value == "":
            return

        line = f"  {label}: {format_date(value)}"
        if days is None:
            self.console.print(line)
            return

        style = BAND_STYLES[date_band(days)]
        annotation = expired_text if days < 0 else f"{days} days remaining"
        self.console.print(f"{line} [{style}]({annotation})[/{style}]")
