"""Shared pytest fixtures for the egg timer tests."""

import os
import sys

# Must be set before a QApplication exists
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from PyQt6.QtWidgets import QApplication

from eggtimer.timer.engine import CountdownEngine
from eggtimer.timer.presets import Preset
from eggtimer.shell import PresentationShell

from helpers import FakeAlarm, RecordingShell


SOFT_BOILED = Preset(300, "soft-boiled")
HARD_BOILED = Preset(600, "hard-boiled")


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    app.setQuitOnLastWindowClosed(False)
    yield app


@pytest.fixture(autouse=True)
def sounds_dir(tmp_path, monkeypatch):
    """Keep generated WAV files out of the real app-data directory."""
    path = tmp_path / "sounds"
    monkeypatch.setattr("eggtimer.audio.sounds.SOUNDS_DIR", path)
    return path


@pytest.fixture
def engine(qapp):
    """Fresh CountdownEngine with no preset selected."""
    eng = CountdownEngine(parent=None)
    yield eng
    eng.shutdown()


@pytest.fixture
def soft_boiled():
    return SOFT_BOILED


@pytest.fixture
def hard_boiled():
    return HARD_BOILED


@pytest.fixture
def shell(qapp):
    """Shell with no tray icon that records every request."""
    return RecordingShell(use_tray=False)


@pytest.fixture
def plain_shell(qapp):
    return PresentationShell(use_tray=False)


@pytest.fixture
def fake_alarm():
    return FakeAlarm()
