"""Text rendering of a :class:`ClimateReport`."""

from __future__ import annotations

from datetime import datetime, tzinfo

from climatestats.ingestion.normalize import seconds_to_datetime
from climatestats.models.report import ClimateReport, StateSummary


def format_datetime(value: datetime) -> str:
    """Render *value* in the C ``ctime()`` layout, e.g. ``Mon Aug  3 11:00:00 2015``."""
    return value.ctime()


def format_timestamp(seconds: int, tz: tzinfo | None = None) -> str:
    return format_datetime(seconds_to_datetime(seconds, tz))


def _format_state(state: StateSummary) -> list[str]:
    return [
        f"-- State: {state.code} --",
        f"Number of Records: {state.record_count}",
        f"Average Humidity: {state.average_humidity:.1f}%",
        f"Average Temperature: {state.average_temperature:.1f}F",
        f"Max Temperature: {state.max_temperature:.1f}F",
        f"Max Temperature on: {format_datetime(state.max_temperature_at)}",
        f"Min Temperature: {state.min_temperature:.1f}F",
        f"Min Temperature on: {format_datetime(state.min_temperature_at)}",
        f"Lightning Strikes: {state.lightning_strike_count}",
        f"Records with Snow Cover: {state.snow_cover_count}",
        f"Average Cloud Cover: {state.average_cloud_cover:.1f}%",
    ]


def format_report(report: ClimateReport) -> str:
    """Render the full text report, one block per state in first-seen order."""
    lines = ["States found:", " ".join(report.codes)]
    for state in report.states:
        lines.extend(_format_state(state))
    lines.append("")
    return "\n".join(lines) + "\n"
