"""Shared fixtures for the statusclock test suite.

- Offscreen QApplication for widget and QObject tests
- Settings store backed by a temporary file
- Fixed label tables and instants
"""

from __future__ import annotations

import os
from datetime import datetime

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication  # noqa: E402

from statusclock.text.display import WeekdayForm  # noqa: E402

# ============================================================================
# Qt
# ============================================================================


@pytest.fixture(scope="session")
def qapp():
    """One QApplication for the whole session."""
    app = QApplication.instance() or QApplication([])
    yield app


# ============================================================================
# Settings
# ============================================================================


@pytest.fixture
def settings_path(tmp_path):
    return str(tmp_path / "statusclock" / "settings.json")


@pytest.fixture
def store(qapp, settings_path):
    from statusclock.settings_store import SettingsStore

    return SettingsStore(settings_path, watch=False)


# ============================================================================
# Labels / instants
# ============================================================================


class FakeLabels:
    """Deterministic name tables, independent of CLDR data."""

    WEEKDAYS = ["sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday"]
    MONTHS = ["jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec"]

    def weekday(self, index, form):
        name = self.WEEKDAYS[index - 1]
        if form == WeekdayForm.SHORT:
            return name[:2]
        if form == WeekdayForm.MEDIUM:
            return name[:3]
        return name

    def month(self, index):
        return self.MONTHS[index]


@pytest.fixture
def fake_labels():
    return FakeLabels()


@pytest.fixture
def sunday_afternoon():
    """Sunday 2026-10-18 15:05."""
    return datetime(2026, 10, 18, 15, 5)


@pytest.fixture
def monday_morning():
    """Monday 2026-10-19 09:41."""
    return datetime(2026, 10, 19, 9, 41)
