# statusclock/settings_store.py
import json
import logging
import os
from dataclasses import dataclass
from typing import Any

from PySide6.QtCore import QFileSystemWatcher, QObject, Signal

from .config import DEFAULTS, KEY_COLOR

logger = logging.getLogger(__name__)


class UnknownSettingError(KeyError):
    """Raised when a setting name has no registered default."""
    pass


@dataclass(frozen=True)
class SettingChange:
    name: str
    value: Any


class SettingsSubscription:
    """
    Handle returned by SettingsStore.subscribe().
    Delivers changes for the watched names only, until cancelled.
    """

    def __init__(self, store, names, callback):
        self._store = store
        self._names = frozenset(names)
        self._callback = callback
        self.active = True
        store.changed.connect(self._deliver)

    def _deliver(self, change):
        if self.active and change.name in self._names:
            self._callback(change)

    def cancel(self):
        if self.active:
            self.active = False
            self._store.changed.disconnect(self._deliver)


class SettingsStore(QObject):
    changed = Signal(object)  # SettingChange

    def __init__(self, path, parent=None, watch=True):
        super().__init__(parent)
        self.path = path
        self._values = dict(DEFAULTS)
        self._load()

        self._watcher = None
        if watch:
            self._watcher = QFileSystemWatcher(self)
            self._watcher.fileChanged.connect(self._on_file_changed)
            self._watch_file()

    # --- READS ---
    def _get(self, name):
        if name not in DEFAULTS:
            raise UnknownSettingError(name)
        return self._values[name]

    def get_flag(self, name):
        return int(self._get(name)) == 1

    def get_int(self, name):
        return int(self._get(name))

    def get_color_setting(self):
        return self._get(KEY_COLOR)

    # --- WRITES ---
    def put(self, name, value):
        if name not in DEFAULTS:
            raise UnknownSettingError(name)
        if self._values[name] == value:
            return
        self._values[name] = value
        self._save()
        self.changed.emit(SettingChange(name, value))

    def subscribe(self, names, callback):
        return SettingsSubscription(self, names, callback)

    # --- PERSISTENCE ---
    def reload(self):
        """Re-reads the file and emits one change per differing value."""
        before = dict(self._values)
        self._load()
        for name, value in self._values.items():
            if before.get(name) != value:
                self.changed.emit(SettingChange(name, value))

    def _read_file(self):
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Ignoring unreadable settings file %s: %s", self.path, e)
            return None
        if not isinstance(data, dict):
            logger.warning("Ignoring settings file %s: not an object", self.path)
            return None
        return data

    def _load(self):
        data = self._read_file()
        if data is None:
            return
        values = dict(DEFAULTS)
        for name, value in data.items():
            if name in DEFAULTS:
                values[name] = value
            else:
                logger.debug("Skipping unknown setting %r", name)
        self._values = values

    def _save(self):
        try:
            os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
            with open(self.path, "w") as f:
                json.dump(self._values, f, indent=4)
        except OSError as e:
            logger.warning("Settings Write Error: %s", e)
        self._watch_file()

    def _watch_file(self):
        if self._watcher is not None and os.path.exists(self.path):
            if self.path not in self._watcher.files():
                self._watcher.addPath(self.path)

    def _on_file_changed(self, _path):
        self.reload()
        # Editors replace the file, which drops it from the watcher
        self._watch_file()
