"""CLI entrypoint for the descriptive statistics report."""

from __future__ import annotations

import argparse
import logging

import structlog

from src.common import constants
from src.common.console import fail, warn
from src.common.logging import configure_structlog
from src.stats.loader import load_sample
from src.stats.registry import available_statistics
from src.stats.report import compute, fmt_stat, render_table, to_json


def _precision(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {raw!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative integer, got {value}")
    return value


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Compute mean, population stddev, lower median and L2 norm of a sample.",
        epilog="Numbers may be separated by whitespace, commas or semicolons; '#' starts a comment line.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="File with the sample; '-' or omitted reads stdin",
    )
    parser.add_argument(
        "-s",
        "--stat",
        action="append",
        type=str.lower,
        choices=available_statistics(),
        metavar="NAME",
        help=f"Statistic to compute, repeatable (default: all of {', '.join(available_statistics())})",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Emit a JSON document instead of a table",
    )
    parser.add_argument(
        "-p",
        "--precision",
        type=_precision,
        default=constants.STATS_PRECISION,
        help=f"Digits after the decimal point in table output. Default: {constants.STATS_PRECISION}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug logging on stderr",
    )
    args = parser.parse_args(argv)

    configure_structlog(logging.DEBUG if args.verbose else constants.STATS_LOG_LEVEL)
    log = structlog.get_logger("cli")

    try:
        sample = load_sample(args.file)
    except FileNotFoundError:
        fail(f"No such file: {args.file}")
    except ValueError as exc:
        fail(str(exc))
    log.debug("sample_loaded", source=args.file, size=len(sample))

    results = compute(sample, args.stat)
    undefined = [name for name, value in results.items() if value is None]
    for name in undefined:
        log.debug("statistic_undefined", statistic=name, size=len(sample))
    if not sample and undefined:
        warn(f"Sample is empty; undefined: {', '.join(undefined)}.")

    if args.json:
        print(to_json(results, size=len(sample)))
    else:
        print(render_table(results, size=len(sample), precision=args.precision))
        print(f"\n  {fmt_stat(results, size=len(sample))}")
