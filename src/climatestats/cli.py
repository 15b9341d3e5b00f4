"""Command-line entry point.

Usage
-----
::

    climatestats data_tn.tdv data_wa.tdv
    climatestats --json --time-zone UTC data_*.tdv

Environment variables ``CLIMATE_TIME_ZONE``, ``CLIMATE_ENCODING`` and
``CLIMATE_JSON_OUTPUT`` provide defaults (see :class:`ClimateConfig`).
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from climatestats.config import ClimateConfig
from climatestats.exceptions import ClimateConfigError, ClimateInputError
from climatestats.report import format_report
from climatestats.state.store import StateAggregator

_logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="climatestats",
        description="Summarize tab-delimited NOAA climate observations per US state.",
    )
    parser.add_argument("files", nargs="+", metavar="tdv_file", help="Tab-delimited data file(s) to analyze")
    parser.add_argument("--json", action="store_true", default=None, help="Output the report as JSON")
    parser.add_argument("--time-zone", help="Time zone for extremum timestamps (IANA name, UTC or local)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def analyze_file(aggregator: StateAggregator, path: str, *, index: int, encoding: str) -> int:
    """Fold every record of *path* into *aggregator*.

    Raises
    ------
    ClimateInputError
        If the file cannot be opened.
    """
    try:
        handle = open(path, encoding=encoding, errors="replace")  # noqa: SIM115
    except OSError as exc:
        raise ClimateInputError(f"Cannot open {path}: {exc}", path=path, index=index) from exc
    with handle:
        return aggregator.ingest(handle)


def run(files: Sequence[str], config: ClimateConfig, notices: TextIO) -> StateAggregator:
    """Process *files* in order, reporting unopenable ones and carrying on.

    Per-file notices are printed to *notices*.
    """
    aggregator = StateAggregator()
    for index, path in enumerate(files, start=1):
        print(f"Opening file: {path}", file=notices)
        try:
            count = analyze_file(aggregator, path, index=index, encoding=config.encoding)
        except ClimateInputError as exc:
            _logger.warning("%s", exc)
            print(f"Error File # {exc.index} doesn't exist!", file=notices)
            continue
        _logger.debug("Read %d records from %s", count, path)
    return aggregator


def main(argv: Sequence[str] | None = None, *, out: TextIO | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if out is None:
        out = sys.stdout

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    overrides: dict[str, object] = {}
    if args.json is not None:
        overrides["json_output"] = args.json
    if args.time_zone is not None:
        overrides["time_zone"] = args.time_zone
    config = ClimateConfig.from_env(**overrides)
    try:
        tz = config.resolve_tz()
    except ClimateConfigError as exc:
        parser.error(str(exc))

    # JSON output must be the only thing on the report stream.
    notices = sys.stderr if config.json_output else out
    aggregator = run(args.files, config, notices)
    report = aggregator.render(tz)

    if config.json_output:
        out.write(report.model_dump_json(indent=2) + "\n")
    else:
        out.write(format_report(report))
    return 0


def entrypoint() -> None:
    sys.exit(main())


if __name__ == "__main__":
    entrypoint()
