"""climatestats - Per-state aggregation of tab-delimited NOAA climate observations."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("climatestats")
except PackageNotFoundError:
    __version__ = "0+local"
from climatestats.config import ClimateConfig
from climatestats.exceptions import (
    ClimateConfigError,
    ClimateError,
    ClimateInputError,
    ClimateInvariantError,
)
from climatestats.ingestion.parser import iter_records, parse_line
from climatestats.models import ClimateReport, ObservationRecord, StateSummary
from climatestats.report import format_report, format_timestamp
from climatestats.state.store import StateAggregator, StateStats

__all__ = [
    "__version__",
    "ClimateConfig",
    "ClimateConfigError",
    "ClimateError",
    "ClimateInputError",
    "ClimateInvariantError",
    "ClimateReport",
    "ObservationRecord",
    "StateAggregator",
    "StateStats",
    "StateSummary",
    "format_report",
    "format_timestamp",
    "iter_records",
    "parse_line",
]
