"""Shared test configuration and pytest markers."""

import pytest

from config import settings


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "perf: timing regression checks for the arbiter (wall-clock bound)"
    )


@pytest.fixture
def saturation(monkeypatch):
    """Override the Cold Indicators saturation point for one test."""
    def _set(value: int) -> None:
        monkeypatch.setattr(settings, "indicator_saturation", value)
    return _set
