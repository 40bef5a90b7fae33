"""Theme preset framework exports."""

from themedoc.themes.constants import DEFAULT_PRESET_ID
from themedoc.themes.models import (
    DEFAULT_THEME,
    PresetValidationError,
    ThemePreset,
    ThemeState,
    apply_preset,
    merge_theme,
)
from themedoc.themes.registry import PresetRegistry

__all__ = [
    "DEFAULT_PRESET_ID",
    "DEFAULT_THEME",
    "PresetRegistry",
    "PresetValidationError",
    "ThemePreset",
    "ThemeState",
    "apply_preset",
    "merge_theme",
]
