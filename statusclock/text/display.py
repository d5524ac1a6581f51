"""
Per-refresh snapshot of what the clock label should show.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .. import config
from .color import LIGHT, foreground_for_setting


class SizeMode(IntEnum):
    NORMAL = 0
    SMALL = 1


class WeekdayForm(IntEnum):
    SHORT = 0
    MEDIUM = 1
    LONG = 2


def _size(value):
    try:
        return SizeMode(value)
    except ValueError:
        return SizeMode.SMALL


def _form(value):
    try:
        return WeekdayForm(value)
    except ValueError:
        return WeekdayForm.MEDIUM


@dataclass(frozen=True)
class DisplayConfig:
    """
    Immutable view of the clock settings used for one render pass.

    Attributes:
        specifier_visible: Show the AM/PM designator.
        specifier_size: Size of the designator (and the whitespace before it).
        weekday_visible / weekday_size / weekday_form: Weekday prefix options.
        daymonth_visible / daymonth_size: Day-of-month + month prefix options.
        show_extended: The host allows the weekday/daymonth prefixes at all.
        foreground_color: "#rrggbb" colour applied to the whole label.
    """

    specifier_visible: bool = False
    specifier_size: SizeMode = SizeMode.SMALL
    weekday_visible: bool = False
    weekday_size: SizeMode = SizeMode.SMALL
    weekday_form: WeekdayForm = WeekdayForm.MEDIUM
    daymonth_visible: bool = False
    daymonth_size: SizeMode = SizeMode.SMALL
    show_extended: bool = True
    foreground_color: str = LIGHT

    @property
    def wraps_specifier(self) -> bool:
        """The template needs sentinels unless the designator is shown at normal size."""
        return self.specifier_size != SizeMode.NORMAL or not self.specifier_visible

    @classmethod
    def from_store(cls, store, show_extended=True) -> "DisplayConfig":
        """Reads every clock setting from a ``SettingsStore``."""
        if show_extended:
            weekday_visible = store.get_flag(config.KEY_SHOW_WEEKDAY)
            weekday_size = _size(store.get_int(config.KEY_WEEKDAY_SIZE))
            weekday_form = _form(store.get_int(config.KEY_WEEKDAY_FORMAT))
            daymonth_visible = store.get_flag(config.KEY_SHOW_DAYMONTH)
            daymonth_size = _size(store.get_int(config.KEY_DAYMONTH_SIZE))
        else:
            weekday_visible = daymonth_visible = False
            weekday_size = daymonth_size = SizeMode.SMALL
            weekday_form = WeekdayForm.MEDIUM

        return cls(
            specifier_visible=store.get_flag(config.KEY_SHOW_AM_PM),
            specifier_size=_size(store.get_int(config.KEY_AM_PM_SIZE)),
            weekday_visible=weekday_visible,
            weekday_size=weekday_size,
            weekday_form=weekday_form,
            daymonth_visible=daymonth_visible,
            daymonth_size=daymonth_size,
            show_extended=show_extended,
            foreground_color=foreground_for_setting(store.get_color_setting()),
        )
