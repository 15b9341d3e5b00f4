"""Pydantic models for observations and reports."""

from climatestats.models.observation import ObservationRecord
from climatestats.models.report import ClimateReport, StateSummary

__all__ = [
    "ClimateReport",
    "ObservationRecord",
    "StateSummary",
]
