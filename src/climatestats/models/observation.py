"""Observation record model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from climatestats.ingestion.normalize import (
    flag_set,
    float_or_zero,
    int_or_zero,
    kelvin_to_fahrenheit,
    millis_to_seconds,
)


class ObservationRecord(BaseModel):
    """One climate observation, as read from a single input line.

    Numeric fields are ``0`` when the source text is absent or
    unparseable. Flags are ``True`` only when the source text starts
    with ``'1'``.

    Parameters
    ----------
    state_code : str
        Two-letter state code, kept exactly as given (case-sensitive).
    timestamp_millis : int
        Observation time in milliseconds since the Unix epoch.
    geohash : str
        Location geohash (not aggregated).
    humidity_pct : float
        Relative humidity, 0-100.
    has_snow : bool
        Snow cover present.
    cloud_cover_pct : float
        Cloud cover, 0-100.
    has_lightning : bool
        Lightning strike observed.
    pressure_pa : float
        Surface pressure in Pa (not aggregated).
    surface_temp_kelvin : float
        Surface temperature in Kelvin.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
    )

    state_code: str = ""
    timestamp_millis: int = 0
    geohash: str = ""
    humidity_pct: float = 0.0
    has_snow: bool = False
    cloud_cover_pct: float = 0.0
    has_lightning: bool = False
    pressure_pa: float = 0.0
    surface_temp_kelvin: float = 0.0

    @field_validator("state_code", "geohash", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("timestamp_millis", mode="before")
    @classmethod
    def _coerce_ints(cls, value: Any) -> int:
        return int_or_zero(value)

    @field_validator("humidity_pct", "cloud_cover_pct", "pressure_pa", "surface_temp_kelvin", mode="before")
    @classmethod
    def _coerce_floats(cls, value: Any) -> float:
        return float_or_zero(value)

    @field_validator("has_snow", "has_lightning", mode="before")
    @classmethod
    def _coerce_flags(cls, value: Any) -> bool:
        return flag_set(value)

    @property
    def timestamp_seconds(self) -> int:
        """Observation time in whole epoch seconds."""
        return millis_to_seconds(self.timestamp_millis)

    @property
    def temperature_fahrenheit(self) -> float:
        return kelvin_to_fahrenheit(self.surface_temp_kelvin)
