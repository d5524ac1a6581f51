from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QGridLayout
from PySide6.QtCore import Qt

from .. import config
from .common import ClickableLabel, CompactToggleBtn, ModernComboBox, TEXT_WHITE, TEXT_SUB

SIZE_ITEMS = [("Normal", 0), ("Small", 1)]
WEEKDAY_FORMAT_ITEMS = [("Short", 0), ("Medium", 1), ("Long", 2)]
CLOCK_FORMAT_ITEMS = [("Locale", -1), ("12-hour", 0), ("24-hour", 1)]


class ClockSettingsComponent(ClickableLabel):
    def __init__(self, settings, store, parent=None):
        super().__init__("", parent, settings)
        self.store = store
        self.setIcon("mdi.clock-outline")

    def get_popup_content(self):
        return "Clock", ClockSettingsUI(self.store)


class ClockSettingsUI(QWidget):
    """Toggles and size pickers for each clock segment. Every edit goes straight to the store."""

    def __init__(self, store):
        super().__init__()
        self.store = store
        self.setFixedWidth(280)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(14)

        # 1. Visibility toggles
        toggles = QHBoxLayout()
        toggles.setSpacing(10)
        self.btn_am_pm = self._toggle("mdi.alpha-a-box-outline", "Show AM/PM", config.KEY_SHOW_AM_PM)
        self.btn_weekday = self._toggle("mdi.calendar-week", "Show weekday", config.KEY_SHOW_WEEKDAY)
        self.btn_daymonth = self._toggle("mdi.calendar-month", "Show day and month", config.KEY_SHOW_DAYMONTH)
        toggles.addWidget(self.btn_am_pm)
        toggles.addWidget(self.btn_weekday)
        toggles.addWidget(self.btn_daymonth)
        toggles.addStretch()
        layout.addLayout(toggles)

        # 2. Sizes & formats
        grid = QGridLayout()
        grid.setSpacing(8)
        rows = [
            ("AM/PM size", SIZE_ITEMS, config.KEY_AM_PM_SIZE),
            ("Weekday size", SIZE_ITEMS, config.KEY_WEEKDAY_SIZE),
            ("Weekday format", WEEKDAY_FORMAT_ITEMS, config.KEY_WEEKDAY_FORMAT),
            ("Date size", SIZE_ITEMS, config.KEY_DAYMONTH_SIZE),
            ("Clock format", CLOCK_FORMAT_ITEMS, config.KEY_USE_24H),
        ]
        self.combos = {}
        for row, (label, items, key) in enumerate(rows):
            lbl = QLabel(label)
            lbl.setStyleSheet(f"color: {TEXT_SUB}; font-size: 12px; background: transparent;")
            combo = ModernComboBox(items, current=store.get_int(key))
            combo.currentIndexChanged.connect(lambda _i, k=key, c=combo: self.store.put(k, c.currentData()))
            grid.addWidget(lbl, row, 0)
            grid.addWidget(combo, row, 1)
            self.combos[key] = combo
        layout.addLayout(grid)

        hint = QLabel("Hold the clock to open these settings.")
        hint.setAlignment(Qt.AlignCenter)
        hint.setStyleSheet(f"color: {TEXT_WHITE}; font-size: 11px; background: transparent;")
        layout.addWidget(hint)

    def _toggle(self, icon_name, tooltip, key):
        btn = CompactToggleBtn(icon_name, tooltip, active=self.store.get_flag(key))
        btn.toggled.connect(lambda checked: self.store.put(key, 1 if checked else 0))
        return btn
