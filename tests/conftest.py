"""Shared pytest fixtures for the dispatcher test suite."""

import sys
from pathlib import Path

import pytest


ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from eventdispatch.config.settings import DispatcherConfig
from eventdispatch.core import EventDispatcher


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep developer environment variables out of dispatcher configuration."""
    for name in ("EVENTDISPATCH_DEBUG", "EVENTDISPATCH_LOG_LEVEL", "EVENTDISPATCH_CONFIG_PATH"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def dispatcher():
    return EventDispatcher(config=DispatcherConfig())


@pytest.fixture
def calls():
    return []
