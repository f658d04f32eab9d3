"""Report generation: apply statistics to a sample and render the results.

Nothing here logs; the host decides what to report about undefined results.
"""

from __future__ import annotations

import json
import math
from collections.abc import Iterable, Sequence

from src.common import constants
from src.common.console import header, section
from src.stats.registry import STATISTICS, get_statistic


def compute(
    sample: Sequence[float],
    names: Iterable[str] | None = None,
) -> dict[str, float | None]:
    """Apply each named statistic to *sample*; ``None`` selects all of them."""
    selected = list(STATISTICS) if names is None else list(names)
    return {name.strip().lower(): get_statistic(name)(sample) for name in selected}


def fmt_value(value: float | None, precision: int | None = None) -> str:
    if value is None:
        return constants.UNDEFINED
    if precision is None:
        precision = constants.STATS_PRECISION
    return f"{value:,.{precision}f}"


def fmt_stat(results: dict[str, float | None], *, size: int) -> str:
    """One-line summary: mean ± σ  [other=...]  (n=...)."""
    if not results:
        return constants.UNDEFINED
    rest = dict(results)
    head = ""
    if "mean" in rest and "stddev" in rest:
        head = f"{fmt_value(rest.pop('mean'), 2)} ± {fmt_value(rest.pop('stddev'), 2)}  "
    extra = ", ".join(f"{name}={fmt_value(v, 2)}" for name, v in rest.items())
    if extra:
        head += f"[{extra}]  "
    return f"{head}(n={size})"


def render_table(
    results: dict[str, float | None],
    *,
    size: int,
    precision: int | None = None,
) -> str:
    lines = [header("DESCRIPTIVE STATISTICS"), f"  Sample size: {size}", ""]
    lines.append(section(f"{'Statistic':<12} {'Value':>24}"))
    for name, value in results.items():
        lines.append(f"  {name:<12} {fmt_value(value, precision):>24}")
    return "\n".join(lines)


def _json_value(value: float | None) -> float | str | None:
    # JSON has no NaN/Infinity literals
    if value is None or math.isfinite(value):
        return value
    return str(value)


def to_json(results: dict[str, float | None], *, size: int) -> str:
    doc = {
        "n": size,
        "statistics": {name: _json_value(v) for name, v in results.items()},
    }
    return json.dumps(doc, indent=2)
