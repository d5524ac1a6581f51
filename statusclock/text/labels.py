"""
Weekday and month names used for the optional clock prefixes.

Names come from Babel's CLDR data. The tables are keyed the way the clock
asks for them: weekdays 1 (Sunday) .. 7 (Saturday), months 0 .. 11.
"""

import logging

from babel.dates import get_day_names, get_month_names

from .display import WeekdayForm

logger = logging.getLogger(__name__)

_CLDR_WIDTH = {
    WeekdayForm.SHORT: "short",
    WeekdayForm.MEDIUM: "abbreviated",
    WeekdayForm.LONG: "wide",
}


class BabelLabels:
    """Static name tables for one locale."""

    def __init__(self, locale="en_US"):
        self.locale = locale
        self.weekdays = {}
        for form, width in _CLDR_WIDTH.items():
            names = get_day_names(width, locale=locale)
            for babel_index, name in names.items():
                # Babel counts Monday as 0, the clock counts Sunday as 1.
                self.weekdays[((babel_index + 1) % 7 + 1, form)] = name
        months = get_month_names("abbreviated", locale=locale)
        self.months = {number - 1: name for number, name in months.items()}

    def weekday(self, index, form):
        return self.weekdays.get((index, WeekdayForm(form)))

    def month(self, index):
        return self.months.get(index)


def weekday_index(moment):
    """1 = Sunday .. 7 = Saturday."""
    return moment.isoweekday() % 7 + 1


def weekday_prefix(labels, index, form):
    assert 1 <= index <= 7, f"weekday index out of range: {index}"
    name = labels.weekday(index, form)
    if name is None:
        logger.debug("No weekday label for %s/%s", index, form)
        return ""
    return name.upper() + " "


def daymonth_prefix(labels, day, month_index):
    assert 0 <= month_index <= 11, f"month index out of range: {month_index}"
    name = labels.month(month_index)
    if name is None:
        logger.debug("No month label for %s", month_index)
        return ""
    return f"{day} {name.upper()} "
