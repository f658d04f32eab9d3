"""ANSI colour codes, status lines and report box helpers."""

from __future__ import annotations

import sys

from src.common.constants import REPORT_WIDTH


class C:
    """ANSI colour codes (no-op if stderr is not a tty)."""

    _tty = sys.stderr.isatty()
    RED = "\033[0;31m" if _tty else ""
    YELLOW = "\033[1;33m" if _tty else ""
    NC = "\033[0m" if _tty else ""


# Status lines go to stderr; stdout carries the report itself.


def warn(msg: str) -> None:
    print(f"{C.YELLOW}[WARN]{C.NC} {msg}", file=sys.stderr)


def fail(msg: str) -> None:
    print(f"{C.RED}[FAIL]{C.NC} {msg}", file=sys.stderr)
    sys.exit(1)


# ── Report formatting ────────────────────────────────────────────────────────


def header(title: str, width: int = REPORT_WIDTH) -> str:
    rule = "═" * width
    return f"{rule}\n  {title}\n{rule}"


def section(title: str, width: int = REPORT_WIDTH) -> str:
    rule = "─" * width
    return f"{rule}\n  {title}\n{rule}"
