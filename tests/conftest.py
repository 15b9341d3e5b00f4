from __future__ import annotations

import pytest

CA_ROWS = [
    "CA\t0\tgeo\t50\t0\t10\t0\t100000\t273.15\n",
    "CA\t1000\tgeo\t60\t1\t20\t1\t100000\t283.15\n",
]


@pytest.fixture
def ca_rows() -> list[str]:
    return list(CA_ROWS)


@pytest.fixture(autouse=True)
def _clean_climate_env(monkeypatch) -> None:
    for key in ("CLIMATE_TIME_ZONE", "CLIMATE_ENCODING", "CLIMATE_JSON_OUTPUT"):
        monkeypatch.delenv(key, raising=False)
