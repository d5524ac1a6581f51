"""Tests for the clock settings popup (statusclock/components/clock_settings.py)."""

from __future__ import annotations

from statusclock import config
from statusclock.components.clock_settings import ClockSettingsUI


def test_toggles_reflect_and_write_store(qapp, store):
    store.put(config.KEY_SHOW_WEEKDAY, 1)
    ui = ClockSettingsUI(store)

    assert ui.btn_weekday.isChecked()
    assert not ui.btn_am_pm.isChecked()

    ui.btn_am_pm.setChecked(True)
    assert store.get_flag(config.KEY_SHOW_AM_PM) is True
    ui.btn_weekday.setChecked(False)
    assert store.get_flag(config.KEY_SHOW_WEEKDAY) is False


def test_combos_write_selected_value(qapp, store):
    ui = ClockSettingsUI(store)
    combo = ui.combos[config.KEY_WEEKDAY_FORMAT]
    assert combo.currentData() == 1

    combo.setCurrentIndex(combo.findData(2))
    assert store.get_int(config.KEY_WEEKDAY_FORMAT) == 2

    clock_format = ui.combos[config.KEY_USE_24H]
    assert clock_format.currentData() == -1
    clock_format.setCurrentIndex(clock_format.findData(1))
    assert store.get_int(config.KEY_USE_24H) == 1
