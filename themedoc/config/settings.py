"""Application settings via QSettings."""

from __future__ import annotations

import os
from pathlib import Path

from PySide6.QtCore import QSettings

from themedoc.themes.constants import DEFAULT_PRESET_ID


class AppSettings:
    """Wraps QSettings for persistent app configuration.

    Pass ``ini_path`` to keep settings in a standalone INI file.
    """

    def __init__(self, ini_path: Path | None = None) -> None:
        if ini_path is not None:
            self._qs = QSettings(str(ini_path), QSettings.Format.IniFormat)
        else:
            self._qs = QSettings("themedoc", "themedoc")

    # -- presets --

    @property
    def preset_id(self) -> str:
        raw = self._qs.value("theme/preset_id", DEFAULT_PRESET_ID, type=str)
        value = (raw or "").strip()
        return value or DEFAULT_PRESET_ID

    @preset_id.setter
    def preset_id(self, value: str) -> None:
        cleaned = (value or "").strip() or DEFAULT_PRESET_ID
        self._qs.setValue("theme/preset_id", cleaned)

    @property
    def preset_last_known_good_id(self) -> str:
        raw = self._qs.value("theme/preset_last_known_good_id", DEFAULT_PRESET_ID, type=str)
        value = (raw or "").strip()
        return value or DEFAULT_PRESET_ID

    @preset_last_known_good_id.setter
    def preset_last_known_good_id(self, value: str) -> None:
        cleaned = (value or "").strip() or DEFAULT_PRESET_ID
        self._qs.setValue("theme/preset_last_known_good_id", cleaned)

    # -- helpers --

    def sync(self) -> None:
        self._qs.sync()

    @property
    def app_data_dir(self) -> Path:
        path = self._app_data_dir()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def presets_dir(self) -> Path:
        path = self.app_data_dir / "presets"
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def log_dir(self) -> Path:
        path = self.app_data_dir / "logs"
        path.mkdir(parents=True, exist_ok=True)
        return path

    @staticmethod
    def _app_data_dir() -> Path:
        override = os.environ.get("THEMEDOC_HOME")
        if override:
            return Path(override)
        base = Path(os.environ.get("APPDATA", Path.home() / ".config"))
        return base / "themedoc"
