"""
CLDR time patterns rendered with Babel.

Babel treats every non-letter outside quotes as literal text, so the
sentinel characters survive formatting untouched.
"""

from babel import Locale, default_locale
from babel.dates import get_time_format, parse_pattern

TWELVE_HOUR_TIME_FORMAT = "h:mm a"
TWENTY_FOUR_HOUR_TIME_FORMAT = "HH:mm"

FALLBACK_LOCALE = "en_US"


def resolve_locale(name=None):
    """The configured locale, else the LC_TIME environment locale, else en_US."""
    name = name or default_locale("LC_TIME") or FALLBACK_LOCALE
    return Locale.parse(name)


def time_pattern(locale, use_24h=None):
    """
    Time template for the clock.

    ``use_24h`` None follows the locale's own short time pattern.
    """
    if use_24h is None:
        return get_time_format("short", locale=locale).pattern
    return TWENTY_FOUR_HOUR_TIME_FORMAT if use_24h else TWELVE_HOUR_TIME_FORMAT


class TimeFormatter:
    """A compiled template bound to a locale."""

    def __init__(self, template, locale):
        self.template = template
        self.locale = locale
        self._pattern = parse_pattern(template)

    def format(self, moment):
        """Renders ``moment`` as-is; convert it to the wanted zone first."""
        return self._pattern.apply(moment, self.locale)
