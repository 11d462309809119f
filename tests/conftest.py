"""Shared pytest fixtures for JetCounter tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402

from jetcounter.timer.engine import TimerEngine  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture
def engine(qapp):
    """Fresh TimerEngine with the real one-second interval.

    Tests drive it through ``_on_tick()`` so nothing waits on the clock.
    """
    eng = TimerEngine(parent=None)
    yield eng
    eng.shutdown()


@pytest.fixture
def fast_engine(qapp):
    """TimerEngine whose QTimer fires every 10 ms, for event-loop tests."""
    eng = TimerEngine(parent=None, interval_ms=10)
    yield eng
    eng.shutdown()


@pytest.fixture
def settings_dir(tmp_path, monkeypatch):
    """Redirect settings persistence into a temp directory."""
    monkeypatch.setattr("jetcounter.settings.APP_SUPPORT_DIR", tmp_path)
    monkeypatch.setattr("jetcounter.settings.SETTINGS_PATH", tmp_path / "settings.json")
    return tmp_path
