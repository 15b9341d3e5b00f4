"""Aggregated report models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class StateSummary(BaseModel):
    """Final statistics for one state.

    Averages are computed over :attr:`record_count` records. The
    ``*_at`` fields hold the observation time of the first record
    that reached the extremum.
    """

    model_config = ConfigDict(frozen=True)

    code: str
    record_count: int
    average_humidity: float
    average_temperature: float
    max_temperature: float
    max_temperature_at: datetime
    min_temperature: float
    min_temperature_at: datetime
    lightning_strike_count: int
    snow_cover_count: int
    average_cloud_cover: float


class ClimateReport(BaseModel):
    """Immutable result of one aggregation run."""

    model_config = ConfigDict(frozen=True)

    states: tuple[StateSummary, ...] = Field(default_factory=tuple)

    @property
    def codes(self) -> list[str]:
        """State codes in first-seen order."""
        return [state.code for state in self.states]

    def get(self, code: str) -> StateSummary | None:
        for state in self.states:
            if state.code == code:
                return state
        return None
