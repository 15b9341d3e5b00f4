"""Line parser for tab-delimited climate observations.

Each record is one line of nine tab-separated fields::

    CA  1428300000000  9prcjqk3yc80  93.0  0.0  100.0  0.0  95644.0  277.58716

in the order given by :data:`FIELD_NAMES`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from climatestats.models.observation import ObservationRecord

_logger = logging.getLogger(__name__)

DELIMITER = "\t"

FIELD_NAMES: tuple[str, ...] = (
    "state_code",
    "timestamp_millis",
    "geohash",
    "humidity_pct",
    "has_snow",
    "cloud_cover_pct",
    "has_lightning",
    "pressure_pa",
    "surface_temp_kelvin",
)


def parse_line(line: str) -> ObservationRecord | None:
    """Parse one input line.

    Returns ``None`` for blank lines. Missing trailing fields are read as
    empty text and extra fields are ignored.
    """
    text = line.rstrip("\r\n")
    if not text.strip():
        return None

    fields = text.split(DELIMITER)
    if len(fields) != len(FIELD_NAMES):
        _logger.debug("Expected %d fields, got %d: %r", len(FIELD_NAMES), len(fields), text)

    values = dict.fromkeys(FIELD_NAMES, "")
    values.update(zip(FIELD_NAMES, fields))
    return ObservationRecord.model_validate(values)


def iter_records(lines: Iterable[str]) -> Iterator[ObservationRecord]:
    """Yield a record for every non-blank line of *lines*.

    *lines* is consumed lazily, so an open text file is read one line
    at a time.
    """
    for line in lines:
        record = parse_line(line)
        if record is None:
            continue
        yield record
