"""Tests for the clock label widget (statusclock/components/clock.py)."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from PySide6.QtCore import QEvent

from statusclock import config
from statusclock.components.clock import ClockComponent, runs_to_html
from statusclock.config import Settings
from statusclock.text.runs import StyledRun, visible_text


@pytest.fixture
def clock_settings():
    settings = Settings()
    settings.clock_locale = "en_US"
    settings.clock_timezone = "UTC"
    settings.clock_font_size_px = 20
    return settings


@pytest.fixture
def fixed_now():
    return lambda: datetime(2026, 10, 18, 15, 5, 30, tzinfo=timezone.utc)


@pytest.fixture
def clock(qapp, clock_settings, store, fixed_now):
    store.put(config.KEY_USE_24H, 0)
    widget = ClockComponent(clock_settings, store, now=fixed_now)
    yield widget
    widget.subscription.cancel()
    widget.deleteLater()


# HTML output


def test_runs_to_html_sizes_and_colors():
    runs = (StyledRun("3:05", None, "#ffffff"), StyledRun(" PM", 0.7, "#ffffff"))
    assert runs_to_html(runs, 20) == (
        '<span style="color: #ffffff">3:05</span>'
        '<span style="color: #ffffff; font-size: 14px">&nbsp;PM</span>'
    )


def test_runs_to_html_escapes_text():
    assert runs_to_html((StyledRun("<b>", None, None),), 14) == "&lt;b&gt;"


# Widget behaviour


def test_default_settings_hide_designator(clock):
    assert visible_text(clock.last_runs) == "3:05"
    assert clock.text() == '<span style="color: #ffffff">3:05</span>'


def test_setting_change_rerenders(clock, store):
    store.put(config.KEY_SHOW_AM_PM, 1)
    assert visible_text(clock.last_runs) == "3:05 PM"
    assert clock.last_runs[-1].scale == 0.7

    store.put(config.KEY_SHOW_WEEKDAY, 1)
    assert visible_text(clock.last_runs) == "SUN 3:05 PM"


def test_color_setting_flips_text_color(clock, store):
    store.put(config.KEY_COLOR, "FFFFFFFF|FF000000|0")
    assert {run.color for run in clock.last_runs} == {"#000000"}


def test_clock_format_setting(clock, store):
    store.put(config.KEY_USE_24H, 1)
    assert visible_text(clock.last_runs) == "15:05"


def test_timezone_change(clock):
    clock.on_timezone_changed("Asia/Tokyo")
    assert visible_text(clock.last_runs) == "12:05"


def test_unknown_timezone_falls_back_to_local(clock):
    clock.on_timezone_changed("Mars/Olympus_Mons")
    assert clock.zone is None


def test_tick_scheduled_for_next_minute(clock):
    clock._schedule_tick()
    assert clock.tick_timer.isActive()
    assert 29000 <= clock.tick_timer.interval() <= 30000


def test_cancelled_subscription_stops_updates(clock, store):
    clock.subscription.cancel()
    store.put(config.KEY_SHOW_AM_PM, 1)
    assert visible_text(clock.last_runs) == "3:05"


def test_render_failure_falls_back_to_plain_time(clock, monkeypatch):
    def broken(moment):
        raise ValueError("bad pattern")

    monkeypatch.setattr(clock.renderer, "render", broken)
    clock.update_clock()
    assert clock.text() == "15:05"


# Locale


def test_locale_change_rebuilds_template(clock, store):
    store.put(config.KEY_USE_24H, -1)
    assert visible_text(clock.last_runs) == "3:05"

    clock.on_locale_changed("de_DE")
    assert str(clock.renderer.locale) == "de_DE"
    assert visible_text(clock.last_runs) == "15:05"


def test_locale_change_refreshes_labels(clock, store):
    store.put(config.KEY_SHOW_WEEKDAY, 1)
    store.put(config.KEY_WEEKDAY_FORMAT, 2)
    assert visible_text(clock.last_runs).startswith("SUNDAY ")

    clock.on_locale_changed("de_DE")
    assert visible_text(clock.last_runs).startswith("SONNTAG ")


def test_system_locale_event_reaches_clock(clock):
    seen = []
    clock.on_locale_changed = lambda locale=None: seen.append(locale)
    clock.changeEvent(QEvent(QEvent.LocaleChange))
    assert seen == [None]


# Attach / detach


def test_hide_stops_tick(clock):
    clock.show()
    assert clock.tick_timer.isActive()
    clock.hide()
    assert not clock.tick_timer.isActive()


def test_show_always_keeps_ticking_when_hidden(clock):
    clock.show_always = True
    clock.show()
    clock.hide()
    assert clock.tick_timer.isActive()
