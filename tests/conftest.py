from __future__ import annotations

import importlib

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Undo any configure_structlog() a test triggered through the CLI."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def samples() -> list[list[float]]:
    return [
        [1.0],
        [-1.0, 1.0],
        [0.0, 0.5, -1.0, 1.0],
        [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0],
        [3.5, -2.25, 10.0, 0.125, -7.0],
        [1e-3, 2e-3, 3e-3],
    ]


@pytest.fixture
def reload_constants(monkeypatch: pytest.MonkeyPatch):
    """Re-import src.common.constants under a patched environment."""
    from src.common import constants

    def _reload(**env: str):
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return importlib.reload(constants)

    yield _reload
    monkeypatch.undo()
    importlib.reload(constants)
