import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
TESTS = Path(__file__).resolve().parent
for path in (ROOT, TESTS):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from booking_ui.config import settings
from fakes import FakeClock, FakePage


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def fake_page():
    return FakePage()


@pytest.fixture
def fast_validation(monkeypatch):
    """Shrink validation timeouts and the retry cap so failure paths finish quickly."""
    monkeypatch.setattr(settings.timeouts, "validation_trigger", 0.02)
    monkeypatch.setattr(settings.timeouts, "expect", 0.02)
    monkeypatch.setattr(settings.timeouts, "form_visible", 0.02)
    monkeypatch.setattr(settings.timeouts, "continue_button", 0.02)
    monkeypatch.setattr(settings.retry, "validation_attempts", 3)
    return settings
