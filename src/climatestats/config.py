"""Run configuration for climatestats."""

from __future__ import annotations

import dataclasses
import os
from datetime import UTC, tzinfo
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from climatestats.exceptions import ClimateConfigError

_LOCAL_ZONE_NAMES = frozenset({"", "local"})


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class ClimateConfig:
    """Run configuration.

    Parameters
    ----------
    time_zone : str or None
        IANA time zone used to render extremum timestamps (e.g.
        ``"America/Chicago"`` or ``"UTC"``). ``None`` or ``"local"``
        uses the process local time zone, like C ``ctime()``.
    encoding : str
        Text encoding of the input files.
    json_output : bool
        Emit the report as JSON instead of the text layout.
    """

    time_zone: str | None = None
    encoding: str = "utf-8"
    json_output: bool = False

    def resolve_tz(self) -> tzinfo | None:
        """Resolve :attr:`time_zone`.

        Returns ``None`` for local time.

        Raises
        ------
        ClimateConfigError
            If the zone name is unknown.
        """
        if self.time_zone is None:
            return None
        name = self.time_zone.strip()
        if name.lower() in _LOCAL_ZONE_NAMES:
            return None
        if name.upper() == "UTC":
            return UTC
        try:
            return ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ClimateConfigError(f"Unknown time zone: {self.time_zone!r}") from exc

    @classmethod
    def from_env(cls, **overrides: Any) -> ClimateConfig:
        """Create configuration from environment variables.

        Reads ``CLIMATE_TIME_ZONE``, ``CLIMATE_ENCODING`` and
        ``CLIMATE_JSON_OUTPUT``. Explicit keyword arguments override
        environment values.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "CLIMATE_TIME_ZONE": "time_zone",
            "CLIMATE_ENCODING": "encoding",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        if "json_output" not in overrides:
            config_kwargs["json_output"] = _env_bool(env.get("CLIMATE_JSON_OUTPUT"), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
