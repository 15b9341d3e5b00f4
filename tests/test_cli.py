from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from climatestats.cli import main


def _write(tmp_path: Path, name: str, rows: list[str]) -> str:
    path = tmp_path / name
    path.write_text("".join(rows), encoding="utf-8")
    return str(path)


def test_requires_at_least_one_file(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([])

    assert excinfo.value.code != 0
    assert "usage:" in capsys.readouterr().err


def test_text_report_over_multiple_files(tmp_path: Path, ca_rows: list[str], capsys) -> None:
    first = _write(tmp_path, "data_ca.tdv", ca_rows)
    second = _write(tmp_path, "data_tx.tdv", ["TX\t0\tg\t40\t0\t50\t0\t0\t300\n"])

    assert main([first, second, "--time-zone", "UTC"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == f"Opening file: {first}"
    assert lines[1] == f"Opening file: {second}"
    assert lines[2:4] == ["States found:", "CA TX"]
    assert "Max Temperature on: Thu Jan  1 00:00:01 1970" in lines


def test_missing_file_is_reported_and_skipped(tmp_path: Path, ca_rows: list[str], capsys) -> None:
    missing = str(tmp_path / "nope.tdv")
    present = _write(tmp_path, "data_ca.tdv", ca_rows)

    assert main([missing, present, "--time-zone", "UTC"]) == 0

    out = capsys.readouterr().out
    assert f"Opening file: {missing}\nError File # 1 doesn't exist!\n" in out
    assert "Number of Records: 2" in out


def test_same_file_twice_is_counted_twice(tmp_path: Path, ca_rows: list[str], capsys) -> None:
    path = _write(tmp_path, "data_ca.tdv", ca_rows)

    assert main([path, path, "--time-zone", "UTC"]) == 0

    assert "Number of Records: 4" in capsys.readouterr().out


def test_json_output(tmp_path: Path, ca_rows: list[str], capsys) -> None:
    path = _write(tmp_path, "data_ca.tdv", ca_rows)
    missing = str(tmp_path / "nope.tdv")
    out = io.StringIO()

    assert main([missing, path, "--json", "--time-zone", "UTC"], out=out) == 0

    payload = json.loads(out.getvalue())
    err = capsys.readouterr().err
    assert f"Opening file: {path}" in err
    assert "Error File # 1 doesn't exist!" in err
    (state,) = payload["states"]
    assert state["code"] == "CA"
    assert state["record_count"] == 2
    assert state["average_humidity"] == 55.0
    assert state["min_temperature_at"].startswith("1970-01-01T00:00:00")


def test_json_output_from_env(tmp_path: Path, ca_rows: list[str], monkeypatch) -> None:
    monkeypatch.setenv("CLIMATE_JSON_OUTPUT", "1")
    monkeypatch.setenv("CLIMATE_TIME_ZONE", "UTC")
    path = _write(tmp_path, "data_ca.tdv", ca_rows)
    out = io.StringIO()

    assert main([path], out=out) == 0

    assert '"states"' in out.getvalue()


def test_invalid_time_zone_exits(tmp_path: Path, ca_rows: list[str]) -> None:
    path = _write(tmp_path, "data_ca.tdv", ca_rows)

    with pytest.raises(SystemExit) as excinfo:
        main([path, "--time-zone", "Nowhere/Special"])

    assert excinfo.value.code == 2


def test_invalid_utf8_bytes_are_replaced(tmp_path: Path, capsys) -> None:
    path = tmp_path / "data_ca.tdv"
    path.write_bytes(b"CA\t0\t\xff\xfe\t50\t0\t10\t0\t100000\t273.15\n")

    assert main([str(path), "--time-zone", "UTC"]) == 0

    out = capsys.readouterr().out
    assert "States found:\nCA\n" in out
    assert "Number of Records: 1" in out
    assert "Average Humidity: 50.0%" in out
