"""Shared fixtures: offscreen Qt, isolated settings file, wall-time helpers."""

from __future__ import annotations

import os
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import settings_store  # noqa: E402
from worldclock.wall_time import WallTime  # noqa: E402


def utc(year, month, day, hour=0, minute=0, second=0) -> datetime:
    return datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)


def wall(year, month, day, hour=0, minute=0) -> WallTime:
    return WallTime(year, month, day, hour, minute)


@pytest.fixture
def settings_file(tmp_path, monkeypatch) -> Path:
    """Redirect settings_store to a throwaway JSON file."""
    path = tmp_path / "settings.json"
    monkeypatch.setattr(settings_store, "settings_path", lambda: path)
    return path


@pytest.fixture(scope="session")
def app_instance():
    """Create a QApplication instance for the test session."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    return app
