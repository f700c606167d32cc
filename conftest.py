"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from numeral_converter.config import Settings  # noqa: E402


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep a developer's .env / shell settings out of the test run."""
    for key in ("NUMERALS_SHORT_SCALE", "NUMERALS_MAX_PHRASE_LENGTH", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setitem(Settings.model_config, "env_file", None)
    yield
