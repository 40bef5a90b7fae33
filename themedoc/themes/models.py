"""Theme framework models."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping

from themedoc.themes.constants import FIELD_KEYS, NUMBER_FIELDS


class PresetValidationError(ValueError):
    """Raised when a theme preset file fails validation."""


@dataclass(frozen=True, slots=True)
class ThemeState:
    """Abstract theme configuration.

    Every field is optional; ``None`` means the store did not supply it and
    resolvers fall back to a literal default.
    """

    # Color roles
    primary: str | None = None
    secondary: str | None = None
    background: str | None = None
    background2: str | None = None
    background3: str | None = None
    dark_text: str | None = None
    gray_text: str | None = None
    light_text: str | None = None
    active_color: str | None = None
    form_error_color: str | None = None
    input_border: str | None = None
    input_bg: str | None = None
    primary_btn_text: str | None = None
    secondary_btn_text: str | None = None
    tertiary_btn_text: str | None = None

    # Geometry
    border_radius: float | None = None
    btn_padding_x: float | None = None
    btn_padding_y: float | None = None
    layout_gap: float | None = None
    section_padding: float | None = None
    depth: float | None = None
    icon_gap: float | None = None

    # Typography
    font_family: str | None = None
    secondary_font_family: str | None = None

    # Fill and interaction
    fill_mode: str | None = None
    gradient_angle: float | None = None
    button_style: str | None = None
    button_hover_opacity: float | None = None

    # Forms
    form_variant: str | None = None
    form_label_style: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ThemeState:
        """Build a theme from a camelCase store mapping, ignoring unknown keys."""
        values: dict[str, Any] = {}
        for attr, key in FIELD_KEYS.items():
            raw = data.get(key)
            if raw is None:
                continue
            if attr in NUMBER_FIELDS:
                if isinstance(raw, (int, float)) and not isinstance(raw, bool):
                    values[attr] = raw
            elif isinstance(raw, str):
                values[attr] = raw
        return cls(**values)

    def to_mapping(self) -> dict[str, Any]:
        """Return the camelCase mapping of every field that is set."""
        return {
            FIELD_KEYS[item.name]: getattr(self, item.name)
            for item in fields(self)
            if getattr(self, item.name) is not None
        }

    def replace(self, **changes: Any) -> ThemeState:
        return replace(self, **changes)

    @property
    def heading_font(self) -> str:
        return self.font_family or DEFAULT_THEME.font_family or "Inter"

    @property
    def body_font(self) -> str:
        return self.secondary_font_family or self.heading_font


DEFAULT_THEME = ThemeState(
    primary="#7E22CE",
    secondary="#F3E8FF",
    background="#FFFFFF",
    background2="#F9FAFB",
    background3="#F3F4F6",
    dark_text="#1C1C1E",
    gray_text="#8E8E93",
    light_text="#FFFFFF",
    active_color="#7E22CE",
    form_error_color="#EF4444",
    input_border="#E5E7EB",
    input_bg="#FFFFFF",
    primary_btn_text="#FFFFFF",
    secondary_btn_text="#1C1C1E",
    tertiary_btn_text="#7E22CE",
    border_radius=12,
    btn_padding_x=24,
    btn_padding_y=12,
    layout_gap=32,
    section_padding=48,
    depth=1,
    icon_gap=8,
    font_family="Inter",
    secondary_font_family="Inter",
    fill_mode="solid",
    gradient_angle=135,
    button_style="flat",
    button_hover_opacity=90,
    form_variant="outlined",
    form_label_style="top",
)


def merge_theme(master: ThemeState, override: ThemeState) -> ThemeState:
    """Layer ``override`` onto ``master``; only fields that are set win."""
    changes = {
        item.name: getattr(override, item.name)
        for item in fields(override)
        if getattr(override, item.name) is not None
    }
    return replace(master, **changes)


@dataclass(frozen=True, slots=True)
class ThemePreset:
    """A named palette from the preset catalogue."""

    id: str
    name: str
    description: str
    colors: ThemeState
    is_builtin: bool = True
    source_path: Path | None = None


def apply_preset(theme: ThemeState, preset: ThemePreset) -> ThemeState:
    """Apply a preset's colors on top of ``theme``."""
    return merge_theme(theme, preset.colors)
