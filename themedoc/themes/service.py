"""Runtime theme layering and preset selection service."""

from __future__ import annotations

import logging
from typing import Any

from PySide6.QtCore import QObject, Signal

from themedoc.errors import ErrorCode
from themedoc.style.colors import audit_theme
from themedoc.themes.constants import DEFAULT_PRESET_ID
from themedoc.themes.models import DEFAULT_THEME, ThemePreset, ThemeState, apply_preset, merge_theme
from themedoc.themes.registry import PresetRegistry

logger = logging.getLogger(__name__)


class ThemeService(QObject):
    """Layer merchant overrides on a master theme and persist preset choice.

    ``computed_theme`` is always ``merge_theme(master, override)``.
    """

    theme_changed = Signal(object)  # ThemeState

    def __init__(
        self,
        settings,
        registry: PresetRegistry,
        master: ThemeState = DEFAULT_THEME,
    ) -> None:
        super().__init__()
        self._settings = settings
        self._registry = registry
        self._master = master
        self._override = ThemeState()
        self._computed = merge_theme(master, self._override)
        self._active_preset_id = ""

    @property
    def active_preset_id(self) -> str:
        return self._active_preset_id

    @property
    def master_config(self) -> ThemeState:
        return self._master

    @property
    def merchant_override(self) -> ThemeState:
        return self._override

    @property
    def computed_theme(self) -> ThemeState:
        return self._computed

    def reload_presets(self) -> list[str]:
        self._registry.reload()
        return self._registry.load_errors()

    def available_presets(self) -> list[ThemePreset]:
        return self._registry.list_presets()

    def set_master(self, theme: ThemeState) -> None:
        self._master = theme
        self._recompute()

    def set_override(self, **changes: Any) -> None:
        """Update merchant override fields; ``None`` clears a field."""
        self._override = self._override.replace(**changes)
        self._recompute()

    def clear_override(self) -> None:
        self._override = ThemeState()
        self._recompute()

    def apply_preset(self, preset_id: str, *, persist: bool = True) -> tuple[bool, str]:
        preset = self._registry.get_preset(preset_id)
        if preset is None:
            return False, f"Preset not found: {preset_id}"

        self._override = apply_preset(self._override, preset)
        self._active_preset_id = preset_id
        if persist:
            self._settings.preset_id = preset_id
        self._settings.preset_last_known_good_id = preset_id
        self._recompute()
        return True, f"Applied preset: {preset.name}"

    def apply_startup_preset(self) -> tuple[bool, str]:
        requested = self._settings.preset_id
        fallback = self._settings.preset_last_known_good_id
        candidates = [requested, fallback, DEFAULT_PRESET_ID]
        seen: set[str] = set()

        for candidate in candidates:
            if not candidate or candidate in seen:
                continue
            seen.add(candidate)
            ok, message = self.apply_preset(candidate, persist=True)
            if ok:
                return True, message
            logger.warning("startup preset %r unavailable", candidate)

        self._override = ThemeState()
        self._active_preset_id = DEFAULT_PRESET_ID
        self._settings.preset_id = DEFAULT_PRESET_ID
        self._settings.preset_last_known_good_id = DEFAULT_PRESET_ID
        self._recompute()
        return False, "No valid preset found; reverted to the built-in default theme."

    def _recompute(self) -> None:
        self._computed = merge_theme(self._master, self._override)
        for issue in audit_theme(self._computed):
            level = logging.WARNING if issue.code is ErrorCode.INVALID_COLOR_FORMAT else logging.DEBUG
            logger.log(level, "%s: %s", issue.code.name, issue.details)
        self.theme_changed.emit(self._computed)
