import os

# Base directory for persisted clock settings
SETTINGS_DIR = os.path.join(os.path.expanduser("~"), ".statusclock")
SETTINGS_FILE = os.path.join(SETTINGS_DIR, "settings.json")

# --- CLOCK SETTING KEYS ---
KEY_SHOW_AM_PM = "status_bar_show_am_pm"
KEY_AM_PM_SIZE = "status_bar_am_pm_size"
KEY_SHOW_WEEKDAY = "status_bar_show_weekday"
KEY_WEEKDAY_SIZE = "status_bar_weekday_size"
KEY_WEEKDAY_FORMAT = "status_bar_weekday_format"
KEY_SHOW_DAYMONTH = "status_bar_show_daymonth"
KEY_DAYMONTH_SIZE = "status_bar_daymonth_size"
KEY_COLOR = "status_bar_color"
KEY_USE_24H = "clock_use_24h"  # -1 follows the locale

DEFAULTS = {
    KEY_SHOW_AM_PM: 0,
    KEY_AM_PM_SIZE: 1,
    KEY_SHOW_WEEKDAY: 0,
    KEY_WEEKDAY_SIZE: 1,
    KEY_WEEKDAY_FORMAT: 1,
    KEY_SHOW_DAYMONTH: 0,
    KEY_DAYMONTH_SIZE: 1,
    KEY_COLOR: "",
    KEY_USE_24H: -1,
}

# Every setting that changes what the clock label shows
CLOCK_KEYS = tuple(DEFAULTS)


class Settings:
    def __init__(self):
        # --- DIMENSIONS & POSITION ---
        self.bar_height = 32
        self.bar_margin_x = 20        # Inner padding at the bar's ends

        # --- TIMING ---
        self.monitor_interval = 1000  # System clock / time zone watch
        self.long_press_ms = 600      # Hold time that opens clock settings
        self.clock_drift_tolerance = 2.0

        # --- CLOCK ---
        self.clock_font_size_px = 14
        self.clock_locale = None      # None = LC_TIME / en_US
        self.clock_timezone = None    # None = system local zone
        self.clock_show_more = True   # Allow weekday / day-month prefixes
        self.clock_show_always = False

        # --- VISUALS / THEME ---
        self.border_color = "rgba(255, 255, 255, 40)"
        self.hover_bg = "rgba(255, 255, 255, 20)"
        self.font_family = "Segoe UI"
        self.font_size = "13px"

        # --- DIAGNOSTICS ---
        self.debug = os.environ.get("STATUSCLOCK_DEBUG") == "1"
        self.settings_file = SETTINGS_FILE
