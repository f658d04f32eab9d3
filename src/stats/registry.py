"""Name -> statistic lookup table for runtime dispatch."""

from __future__ import annotations

from src.stats.descriptive import StatFn, l2, mean, median, stddev


# Insertion order is the display order used by reports.
STATISTICS: dict[str, StatFn] = {
    "mean":   mean,
    "stddev": stddev,
    "median": median,
    "l2":     l2,
}


def available_statistics() -> list[str]:
    return list(STATISTICS)


def get_statistic(name: str) -> StatFn:
    """Return the statistic registered under *name* (case-insensitive)."""
    try:
        return STATISTICS[name.strip().lower()]
    except KeyError:
        known = ", ".join(STATISTICS)
        raise ValueError(f"Unknown statistic {name!r} (expected one of: {known})") from None
