"""Deterministic in-memory per-state aggregation.

This is the only component allowed to fold observation records into
running statistics.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Iterator
from datetime import tzinfo

from pydantic import BaseModel, ConfigDict

from climatestats.exceptions import ClimateInvariantError
from climatestats.ingestion.normalize import seconds_to_datetime
from climatestats.ingestion.parser import iter_records
from climatestats.models.observation import ObservationRecord
from climatestats.models.report import ClimateReport, StateSummary

_logger = logging.getLogger(__name__)


class StateStats(BaseModel):
    """Running statistics for one state code.

    Extrema start at -inf/+inf so the first folded record always sets
    them; their timestamps stay ``None`` until then.
    """

    model_config = ConfigDict(extra="forbid")

    code: str
    record_count: int = 0
    humidity_sum: float = 0.0
    cloud_cover_sum: float = 0.0
    temperature_sum: float = 0.0
    max_temperature: float = -math.inf
    max_temperature_timestamp: int | None = None
    min_temperature: float = math.inf
    min_temperature_timestamp: int | None = None
    lightning_strike_count: int = 0
    snow_cover_count: int = 0


class StateAggregator:
    """Single-pass accumulator keyed by state code.

    Given the same sequence of records, it produces the same report.
    Entries are kept in first-seen order and are never removed, so a
    fresh instance is needed per run.
    """

    def __init__(self) -> None:
        self._states: dict[str, StateStats] = {}

    def __len__(self) -> int:
        return len(self._states)

    def __iter__(self) -> Iterator[StateStats]:
        return iter(self._states.values())

    def __contains__(self, code: object) -> bool:
        return code in self._states

    @property
    def codes(self) -> list[str]:
        return list(self._states)

    def get(self, code: str) -> StateStats | None:
        return self._states.get(code)

    def find_or_create(self, code: str) -> StateStats:
        """Return the entry for *code*, inserting a fresh one if needed."""
        stats = self._states.get(code)
        if stats is None:
            _logger.debug("New state code=%r", code)
            stats = StateStats(code=code)
            self._states[code] = stats
        return stats

    @staticmethod
    def fold(stats: StateStats, record: ObservationRecord) -> None:
        """Fold one record into *stats*.

        Extrema only move on a strict improvement, so among equal
        readings the earliest-folded record keeps the timestamp.
        """
        temperature = record.temperature_fahrenheit

        stats.record_count += 1
        stats.humidity_sum += record.humidity_pct
        stats.cloud_cover_sum += record.cloud_cover_pct
        stats.temperature_sum += temperature
        if record.has_snow:
            stats.snow_cover_count += 1
        if record.has_lightning:
            stats.lightning_strike_count += 1

        if temperature > stats.max_temperature:
            stats.max_temperature = temperature
            stats.max_temperature_timestamp = record.timestamp_seconds
        if temperature < stats.min_temperature:
            stats.min_temperature = temperature
            stats.min_temperature_timestamp = record.timestamp_seconds

    def apply(self, record: ObservationRecord) -> StateStats:
        """Fold *record* into the entry for its state code."""
        stats = self.find_or_create(record.state_code)
        self.fold(stats, record)
        return stats

    def ingest(self, lines: Iterable[str]) -> int:
        """Parse and fold every record of one input source.

        Returns the number of records folded. Sources are not
        deduplicated: ingesting the same lines twice counts them twice.
        """
        count = 0
        for record in iter_records(lines):
            self.apply(record)
            count += 1
        _logger.debug("Ingested %d records, %d states known", count, len(self._states))
        return count

    def render(self, tz: tzinfo | None = None) -> ClimateReport:
        """Build the final report in first-seen state order.

        Extremum timestamps are converted with *tz*, or local time when
        ``None``.

        Raises
        ------
        ClimateInvariantError
            If a state holds no folded records.
        """
        summaries: list[StateSummary] = []
        for stats in self._states.values():
            if (
                stats.record_count == 0
                or stats.max_temperature_timestamp is None
                or stats.min_temperature_timestamp is None
            ):
                _logger.error("State %r has no folded records; refusing to render", stats.code)
                raise ClimateInvariantError(
                    f"State {stats.code!r} has no folded records",
                    code=stats.code,
                )
            count = stats.record_count
            summaries.append(
                StateSummary(
                    code=stats.code,
                    record_count=count,
                    average_humidity=stats.humidity_sum / count,
                    average_temperature=stats.temperature_sum / count,
                    max_temperature=stats.max_temperature,
                    max_temperature_at=seconds_to_datetime(stats.max_temperature_timestamp, tz),
                    min_temperature=stats.min_temperature,
                    min_temperature_at=seconds_to_datetime(stats.min_temperature_timestamp, tz),
                    lightning_strike_count=stats.lightning_strike_count,
                    snow_cover_count=stats.snow_cover_count,
                    average_cloud_cover=stats.cloud_cover_sum / count,
                )
            )
        return ClimateReport(states=tuple(summaries))
