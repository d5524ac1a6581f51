import html
import logging
from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from PySide6.QtCore import QEvent, QTimer, Qt

from .. import config
from ..text.display import DisplayConfig
from ..text.renderer import ClockRenderer
from ..text.runs import visible_text
from .common import ClickableLabel

logger = logging.getLogger(__name__)


def runs_to_html(runs, base_px):
    """Qt rich text for a run list. Relative sizes become absolute pixel sizes."""
    parts = []
    for run in runs:
        style = []
        if run.color:
            style.append(f"color: {run.color}")
        if run.scale is not None:
            style.append(f"font-size: {max(1, round(base_px * run.scale))}px")
        text = html.escape(run.text).replace(" ", "&nbsp;")
        if style:
            parts.append(f'<span style="{"; ".join(style)}">{text}</span>')
        else:
            parts.append(text)
    return "".join(parts)


class ClockComponent(ClickableLabel):
    """
    Status bar clock. Re-renders on every minute boundary, on observed
    setting changes and when the host reports a time, zone or locale change.
    """

    def __init__(self, settings, store, parent=None, now=None):
        super().__init__("--:--", parent, settings)
        self.setObjectName("ClockLabel")
        self.cfg = settings
        self.store = store
        self.show_more = settings.clock_show_more
        self.show_always = settings.clock_show_always
        self._now = now or datetime.now

        self.text_lbl.setAlignment(Qt.AlignCenter)
        self.text_lbl.setTextFormat(Qt.RichText)
        self.text_lbl.setStyleSheet(f"""
            font-weight: bold;
            font-family: '{settings.font_family}';
            font-size: {settings.clock_font_size_px}px;
            padding: 0 10px;
            background: transparent;
        """)

        self.zone = self._load_zone(settings.clock_timezone)
        self.renderer = ClockRenderer(locale=settings.clock_locale)
        self.last_runs = ()

        self.tick_timer = QTimer(self)
        self.tick_timer.setSingleShot(True)
        self.tick_timer.timeout.connect(self._on_tick)

        self.subscription = store.subscribe(config.CLOCK_KEYS, self._on_setting_changed)
        self.update_settings()

    # --- SETTINGS ---
    def update_settings(self):
        use_24h = self.store.get_int(config.KEY_USE_24H)
        self.renderer.set_use_24h(None if use_24h < 0 else bool(use_24h))
        self.renderer.apply_config(DisplayConfig.from_store(self.store, self.show_more))
        self.update_clock()

    def _on_setting_changed(self, change):
        logger.debug("Clock setting %s -> %r", change.name, change.value)
        self.update_settings()

    # --- SIGNALS FROM THE HOST ---
    def on_time_changed(self):
        self._schedule_tick()
        self.update_clock()

    def on_timezone_changed(self, zone_name):
        self.zone = self._load_zone(zone_name)
        self.on_time_changed()

    def on_locale_changed(self, locale=None):
        self.renderer.set_locale(locale or self.cfg.clock_locale)
        self.update_clock()

    def changeEvent(self, event):
        if event.type() == QEvent.LocaleChange:
            self.on_locale_changed()
        super().changeEvent(event)

    # --- ATTACH / DETACH ---
    def showEvent(self, event):
        super().showEvent(event)
        self._schedule_tick()
        self.update_clock()

    def hideEvent(self, event):
        super().hideEvent(event)
        if not self.show_always:
            self.tick_timer.stop()

    # --- RENDERING ---
    def current_time(self):
        if self.zone is None:
            return self._now().astimezone()
        return self._now().astimezone(self.zone)

    def update_clock(self):
        moment = self.current_time()
        try:
            runs = self.renderer.render(moment)
        except Exception:
            logger.exception("Clock render failed")
            self.text_lbl.setTextFormat(Qt.PlainText)
            self.setText(moment.strftime("%H:%M"))
            return
        self.last_runs = runs
        self.text_lbl.setTextFormat(Qt.RichText)
        self.setText(runs_to_html(runs, self.cfg.clock_font_size_px))
        self.setToolTip(visible_text(runs))

    def _schedule_tick(self):
        now = self.current_time()
        ms = (60 - now.second) * 1000 - now.microsecond // 1000
        self.tick_timer.start(max(ms, 1))

    def _on_tick(self):
        self.update_clock()
        self._schedule_tick()

    @staticmethod
    def _load_zone(zone_name):
        if not zone_name:
            return None
        try:
            return ZoneInfo(zone_name)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning("Unknown time zone %r, using local time", zone_name)
            return None
