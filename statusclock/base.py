import logging
import os
import time

from babel.dates import format_date
from PySide6.QtWidgets import (QApplication, QWidget, QHBoxLayout, QSpacerItem, QSizePolicy)
from PySide6.QtCore import Qt, QTimer, QPoint

from . import config
from .components.common import BasePopupWidget
from .components.clock import ClockComponent
from .components.clock_settings import ClockSettingsComponent, ClockSettingsUI
from .text.color import parse_color_setting, to_css

logger = logging.getLogger(__name__)


def local_zone_key(localtime="/etc/localtime"):
    """
    Identifies the system zone without depending on DST: the TZ variable,
    else the zoneinfo path /etc/localtime points at, else the (std, dst)
    abbreviation pair.
    """
    tz = os.environ.get("TZ")
    if tz:
        return tz.lstrip(":")
    target = os.path.realpath(localtime)
    if "/zoneinfo/" in target:
        return target.split("/zoneinfo/", 1)[1]
    return tuple(time.tzname)


class SystemStatusBar(QWidget):
    def __init__(self, settings, store):
        super().__init__()
        self.cfg = settings
        self.store = store

        self.active_popup = None
        self._zone_key = local_zone_key()
        self._wall_ref = time.time()
        self._mono_ref = time.monotonic()

        self.setup_ui()

        # Bar colour follows the same setting the clock samples
        self.color_subscription = store.subscribe([config.KEY_COLOR], lambda _c: self.apply_style())

        # System clock monitor (time set / zone changed)
        self.monitor_timer = QTimer(self)
        self.monitor_timer.timeout.connect(self.monitor_clock)
        self.monitor_timer.start(self.cfg.monitor_interval)

    def setup_ui(self):
        self.screen = QApplication.primaryScreen()
        self.screen_width = self.screen.geometry().width()

        self.setWindowFlags(Qt.FramelessWindowHint | Qt.WindowStaysOnTopHint | Qt.Tool | Qt.WindowDoesNotAcceptFocus)
        self.setAttribute(Qt.WA_TranslucentBackground)
        self.setGeometry(0, 0, self.screen_width, self.cfg.bar_height)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.container = QWidget()
        self.container.setObjectName("MainContainer")
        inner = QHBoxLayout(self.container)
        inner.setContentsMargins(self.cfg.bar_margin_x, 0, self.cfg.bar_margin_x, 0)

        # --- INSTANTIATE COMPONENTS ---
        self.comp_clock = ClockComponent(self.cfg, self.store)
        self.comp_clock_settings = ClockSettingsComponent(self.cfg, self.store)

        # Click shows the full date, hold opens the clock settings
        self.comp_clock.clicked.connect(self.show_date_popup)
        self.comp_clock.long_clicked.connect(
            lambda: self.open_popup(self.comp_clock, "Clock", ClockSettingsUI(self.store)))
        self.comp_clock_settings.clicked.connect(lambda: self.handle_popup(self.comp_clock_settings))

        inner.addSpacerItem(QSpacerItem(40, 20, QSizePolicy.Expanding, QSizePolicy.Minimum))
        inner.addWidget(self.comp_clock)
        inner.addSpacerItem(QSpacerItem(40, 20, QSizePolicy.Expanding, QSizePolicy.Minimum))
        inner.addWidget(self.comp_clock_settings)

        layout.addWidget(self.container)
        self.apply_style()
        self.show()

    def bar_color(self):
        return to_css(parse_color_setting(self.store.get_color_setting()))

    def apply_style(self):
        self.container.setStyleSheet(f"""
            QWidget#MainContainer {{
                background-color: {self.bar_color()};
                border-bottom: 1px solid {self.cfg.border_color};
            }}
            ClickableLabel {{
                font-family: '{self.cfg.font_family}';
                font-size: {self.cfg.font_size};
                background: transparent;
                padding: 0 5px;
            }}
            ClickableLabel:hover {{
                background-color: {self.cfg.hover_bg};
                border-radius: 4px;
            }}
        """)
        self.comp_clock.update_clock()

    # --- POPUPS ---
    def show_date_popup(self):
        now = self.comp_clock.current_time()
        locale = self.comp_clock.renderer.locale
        self.open_popup(self.comp_clock, format_date(now, "EEEE", locale=locale),
                        format_date(now, "long", locale=locale))

    def handle_popup(self, component):
        title, content = component.get_popup_content()
        self.open_popup(component, title, content)

    def open_popup(self, component, title, content):
        """Positions the popup centred under the component and fades it in."""
        if self.active_popup:
            self.active_popup.close_animated()

        self.active_popup = BasePopupWidget(title, content, self.cfg)
        self.active_popup.adjustSize()
        popup_w = self.active_popup.width()

        comp_global_pos = component.mapToGlobal(QPoint(0, 0))
        target_x = comp_global_pos.x() + (component.width() // 2) - (popup_w // 2)
        target_y = self.cfg.bar_height + 5

        # Screen bounds
        if target_x + popup_w > self.screen_width - 10:
            target_x = self.screen_width - popup_w - 10
        if target_x < 10:
            target_x = 10

        self.active_popup.move(target_x, target_y)
        self.active_popup.show_animated()

    # --- SYSTEM CLOCK MONITOR ---
    def monitor_clock(self):
        wall, mono = time.time(), time.monotonic()
        drift = (wall - self._wall_ref) - (mono - self._mono_ref)
        self._wall_ref, self._mono_ref = wall, mono

        if hasattr(time, "tzset"):
            time.tzset()  # pick up /etc/localtime or TZ changes
        zone_key = local_zone_key()
        if zone_key != self._zone_key:
            logger.info("Time zone changed: %s -> %s", self._zone_key, zone_key)
            self._zone_key = zone_key
            # An explicitly configured zone wins over the system one
            self.comp_clock.on_timezone_changed(self.cfg.clock_timezone)
        elif abs(drift) > self.cfg.clock_drift_tolerance:
            logger.info("System time changed by %.1fs", drift)
            self.comp_clock.on_time_changed()
