"""Sample acquisition: parse numbers from text, files or stdin."""

from __future__ import annotations

import re
import sys
from pathlib import Path

import numpy as np

_SEPARATORS = re.compile(r"[\s,;]+")


def parse_sample(text: str) -> list[float]:
    """Parse whitespace/comma separated numbers into a list of floats.

    Lines starting with ``#`` are ignored.  ``nan``, ``inf`` and ``-inf`` are
    accepted as values.
    """
    tokens: list[str] = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        tokens.extend(t for t in _SEPARATORS.split(line) if t)
    try:
        values = np.asarray(tokens, dtype=np.float64)
    except ValueError as exc:
        raise ValueError(f"Invalid number in sample: {exc}") from exc
    return values.tolist()


def load_sample(path: Path | str) -> list[float]:
    """Read a sample from *path*, or from stdin when *path* is ``-``."""
    if str(path) == "-":
        return parse_sample(sys.stdin.read())
    return parse_sample(Path(path).read_text())
