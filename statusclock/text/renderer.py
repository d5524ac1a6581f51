"""
One render pass of the clock label: template -> rendered text -> styled runs.
"""

from __future__ import annotations

import logging

from .display import DisplayConfig
from .formatter import TimeFormatter, resolve_locale, time_pattern
from .labels import BabelLabels, daymonth_prefix, weekday_index, weekday_prefix
from .locator import find_label, find_sentinels
from .pattern import annotate
from .runs import build_runs

logger = logging.getLogger(__name__)


class ClockRenderer:
    """
    Owns the compiled template cache.

    The cache key is the raw pattern string; it is cleared whenever the
    designator visibility or size changes, since those decide whether the
    template gets sentinels at all.
    """

    def __init__(self, locale=None, use_24h=None, labels=None):
        self.locale = resolve_locale(locale)
        self.use_24h = use_24h
        self.labels = labels or BabelLabels(self.locale)
        self.config = DisplayConfig()
        self._pattern_key = None
        self._formatter = None

    def invalidate(self):
        self._pattern_key = None

    def set_locale(self, locale, labels=None):
        self.locale = resolve_locale(locale)
        self.labels = labels or BabelLabels(self.locale)
        self.invalidate()

    def set_use_24h(self, use_24h):
        if use_24h != self.use_24h:
            self.use_24h = use_24h
            self.invalidate()

    def apply_config(self, config: DisplayConfig):
        old = self.config
        if (config.specifier_visible != old.specifier_visible
                or config.specifier_size != old.specifier_size):
            self.invalidate()
        self.config = config

    def formatter(self) -> TimeFormatter:
        pattern = time_pattern(self.locale, self.use_24h)
        if pattern != self._pattern_key:
            template = annotate(pattern) if self.config.wraps_specifier else pattern
            logger.debug("Rebuilding clock template %r -> %r", pattern, template)
            self._formatter = TimeFormatter(template, self.locale)
            self._pattern_key = pattern
        return self._formatter

    def render_text(self, moment):
        """
        Formats ``moment`` and applies the enabled prefixes.

        Returns (text, weekday_prefix, daymonth_prefix); absent prefixes are None.
        """
        config = self.config
        result = self.formatter().format(moment)

        weekday = daymonth = None
        if config.show_extended:
            if config.daymonth_visible:
                daymonth = daymonth_prefix(self.labels, moment.day, moment.month - 1)
                result = daymonth + result
            if config.weekday_visible:
                weekday = weekday_prefix(self.labels, weekday_index(moment), config.weekday_form)
                result = weekday + result
        return result, weekday, daymonth

    def render(self, moment):
        """Styled runs for ``moment`` under the current config."""
        config = self.config
        text, weekday, daymonth = self.render_text(moment)

        sentinels = find_sentinels(text)
        if sentinels is None and config.wraps_specifier:
            logger.debug("No designator markers in %r", text)

        weekday_span = daymonth_span = None
        if config.show_extended:
            weekday_span = find_label(text, weekday)
            daymonth_span = find_label(text, daymonth)

        return build_runs(
            text,
            config,
            sentinels=sentinels,
            weekday=weekday_span,
            daymonth=daymonth_span,
        )
