"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _clean_numeral_env(monkeypatch):
    """Keep a developer's NUMERAL_* variables out of the suite."""
    for var in ("NUMERAL_LANGUAGE", "NUMERAL_THRESHOLD", "NUMERAL_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    yield
