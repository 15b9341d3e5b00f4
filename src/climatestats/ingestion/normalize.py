"""Normalization helpers.

Centralizes best-effort field parsing and unit conversion. Nothing here
raises on bad input: unparseable numbers become zero.
"""

from __future__ import annotations

import math
import re
from datetime import datetime, tzinfo
from typing import Any

# Leading numeric prefix, as accepted by C ``atof`` / ``atol``.
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")

KELVIN_TO_FAHRENHEIT_SCALE = 1.8
KELVIN_TO_FAHRENHEIT_OFFSET = 459.67


def float_or_zero(value: Any) -> float:
    """Parse the leading number of *value*, falling back to ``0.0``.

    ``"12.5abc"`` parses as ``12.5``; empty or non-numeric text, ``None``,
    NaN and infinities give ``0.0``.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        result = float(value)
    else:
        match = _FLOAT_PREFIX.match(str(value))
        if match is None:
            return 0.0
        result = float(match.group(1))
    if math.isnan(result) or math.isinf(result):
        return 0.0
    return result


def int_or_zero(value: Any) -> int:
    """Parse the leading integer of *value*, falling back to ``0``."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return 0 if math.isnan(value) or math.isinf(value) else int(value)
    match = _INT_PREFIX.match(str(value))
    if match is None:
        return 0
    return int(match.group(1))


def flag_set(value: Any) -> bool:
    """Return ``True`` iff the field text starts with ``'1'``."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).startswith("1")


def kelvin_to_fahrenheit(kelvin: float) -> float:
    return kelvin * KELVIN_TO_FAHRENHEIT_SCALE - KELVIN_TO_FAHRENHEIT_OFFSET


def millis_to_seconds(millis: int) -> int:
    """Convert epoch milliseconds to whole seconds, truncating toward zero."""
    seconds = abs(millis) // 1000
    return seconds if millis >= 0 else -seconds


def seconds_to_datetime(seconds: int, tz: tzinfo | None = None) -> datetime:
    """Convert epoch seconds to an aware datetime in *tz* (local time when ``None``).

    Values outside the range ``datetime`` supports fall back to the epoch.
    """
    try:
        return _from_epoch(seconds, tz)
    except (OverflowError, OSError, ValueError):
        return _from_epoch(0, tz)


def _from_epoch(seconds: int, tz: tzinfo | None) -> datetime:
    if tz is None:
        return datetime.fromtimestamp(seconds).astimezone()
    return datetime.fromtimestamp(seconds, tz=tz)
