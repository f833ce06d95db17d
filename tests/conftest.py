"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from slalom.context import reset_context
from slalom.logging_config import reset_logging
from slalom.store import JsonStore, reset_store


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")


@pytest.fixture(autouse=True)
def _isolate_globals(monkeypatch):
    """Keep environment-derived globals from leaking between tests."""
    for name in ("SLALOM_BASE_DIR", "SLALOM_LOG_LEVEL", "SLALOM_LOG_JSON", "SLALOM_LOG_DIR"):
        monkeypatch.delenv(name, raising=False)
    reset_context()
    reset_store()
    yield
    reset_context()
    reset_store()
    reset_logging()


@pytest.fixture
def store(tmp_path: Path) -> JsonStore:
    """Store rooted in a fresh temp directory."""
    return JsonStore(base_dir=tmp_path)
