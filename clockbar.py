import logging
import sys
from PySide6.QtWidgets import QApplication
from statusclock.config import Settings
from statusclock.settings_store import SettingsStore
from statusclock.base import SystemStatusBar


def main():
    app = QApplication(sys.argv)

    # 1. Initialize Configuration
    current_settings = Settings()
    logging.basicConfig(
        level=logging.DEBUG if current_settings.debug else logging.INFO,
        format="[%(asctime)s] [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
    )

    # 2. Clock settings (observed by the clock for changes)
    store = SettingsStore(current_settings.settings_file)

    # 3. Initialize Main Window with Config
    window = SystemStatusBar(current_settings, store)

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
