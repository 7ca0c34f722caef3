"""Pytest configuration and fixtures

Provides shared fixtures for all tests: a logger, a controllable clock, a
registry seeded with the bundled predefined styles and a style session.
"""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from layout_styles.editing import StaticConfirmation
from layout_styles.logger import DefaultLogger
from layout_styles.sessions import StyleSession
from layout_styles.styles import StyleRegistry

EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)


class FakeClock:
    """Deterministic clock. Each call advances one second unless frozen."""

    def __init__(self, start: datetime = EPOCH, step: timedelta = timedelta(seconds=1)):
        self.now = start
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + self.step
        return current

    def set(self, seconds: float) -> None:
        """Jump to EPOCH + ``seconds``."""
        self.now = EPOCH + timedelta(seconds=seconds)

    def freeze(self) -> None:
        self.step = timedelta(0)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep LAYOUT_STYLES_* variables from the host out of every test."""
    for name in (
        "LAYOUT_STYLES_LOG_LEVEL",
        "LAYOUT_STYLES_PREDEFINED_STYLES",
        "LAYOUT_STYLES_EDIT_MODE",
        "LAYOUT_STYLES_EXPORT_DIR",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def logger() -> DefaultLogger:
    return DefaultLogger()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def registry(logger: DefaultLogger, clock: FakeClock) -> StyleRegistry:
    return StyleRegistry(logger=logger, clock=clock)


@pytest.fixture
def empty_registry(logger: DefaultLogger, clock: FakeClock) -> StyleRegistry:
    return StyleRegistry(logger=logger, clock=clock, seed_predefined=False)


@pytest.fixture
def confirmation() -> StaticConfirmation:
    """Dialog that always refuses; flip ``.answer`` to accept."""
    return StaticConfirmation(False)


@pytest.fixture
def session(registry, logger, confirmation) -> StyleSession:
    return StyleSession(registry, logger=logger, confirmation=confirmation)
