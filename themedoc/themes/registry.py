"""Theme preset discovery and registry."""

from __future__ import annotations

import logging
from pathlib import Path

from themedoc.themes.loader import load_preset_file
from themedoc.themes.models import PresetValidationError, ThemePreset

logger = logging.getLogger(__name__)

_MAX_PRESET_FILE_CANDIDATES = 256
_PRESET_SUFFIXES = (".yaml", ".yml")


class PresetRegistry:
    """Loads theme presets from builtin and user directories.

    Built-in presets keep their catalogue order; user presets follow, sorted
    by file name. A user preset reusing a built-in id replaces it in place.
    """

    def __init__(self, builtin_root: Path, user_root: Path) -> None:
        self._builtin_root = builtin_root
        self._user_root = user_root
        self._presets: dict[str, ThemePreset] = {}
        self._load_errors: list[str] = []

    @property
    def builtin_root(self) -> Path:
        return self._builtin_root

    @property
    def user_root(self) -> Path:
        return self._user_root

    def reload(self) -> None:
        self._presets = {}
        self._load_errors = []
        self._load_from_root(self._builtin_root, is_builtin=True, can_override=False)
        self._load_from_root(self._user_root, is_builtin=False, can_override=True)
        for message in self._load_errors:
            logger.warning("preset registry: %s", message)

    def list_presets(self) -> list[ThemePreset]:
        return list(self._presets.values())

    def get_preset(self, preset_id: str) -> ThemePreset | None:
        return self._presets.get(preset_id)

    def load_errors(self) -> list[str]:
        return list(self._load_errors)

    def _load_from_root(self, root: Path, *, is_builtin: bool, can_override: bool) -> None:
        if not root.exists():
            return
        try:
            all_files = sorted(
                path for path in root.iterdir()
                if path.is_file() and path.suffix.lower() in _PRESET_SUFFIXES
            )
        except OSError as exc:
            self._load_errors.append(f"Failed to list presets in {root}: {exc}")
            return

        candidates: list[Path] = []
        for path in all_files:
            if path.is_symlink():
                self._load_errors.append(f"Skipping symlink preset file: {path}")
                continue
            candidates.append(path)
        if len(candidates) > _MAX_PRESET_FILE_CANDIDATES:
            self._load_errors.append(
                f"Preset file limit exceeded in {root}; "
                f"only first {_MAX_PRESET_FILE_CANDIDATES} files were scanned."
            )
            candidates = candidates[:_MAX_PRESET_FILE_CANDIDATES]

        for preset_path in candidates:
            try:
                presets = load_preset_file(preset_path, is_builtin=is_builtin)
            except PresetValidationError as exc:
                self._load_errors.append(str(exc))
                continue

            for preset in presets:
                existing = self._presets.get(preset.id)
                if existing is not None and not can_override:
                    self._load_errors.append(
                        f"Duplicate builtin preset id {preset.id!r} in {preset_path}; skipping."
                    )
                    continue
                if existing is not None and can_override:
                    self._load_errors.append(
                        f"User preset {preset.id!r} overrides built-in preset."
                    )
                self._presets[preset.id] = preset
