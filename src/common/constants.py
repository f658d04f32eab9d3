"""Shared constants for the stats toolkit."""

import os


def _precision_from_env() -> int:
    raw = os.environ.get("STATS_PRECISION", "4")
    value = int(raw)
    if value < 0:
        raise ValueError(f"STATS_PRECISION must be a non-negative integer, got {raw!r}")
    return value


# Digits after the decimal point in table output
STATS_PRECISION = _precision_from_env()

# structlog filtering level for the CLI (DEBUG, INFO, WARNING, ...)
STATS_LOG_LEVEL = os.environ.get("STATS_LOG_LEVEL", "INFO").upper()

# Width of the ═/─ rules drawn around report sections
REPORT_WIDTH = 44

# Rendered in place of a statistic that is undefined for the sample
UNDEFINED = "—"
