"""Ordered color catalogue for a theme."""

from __future__ import annotations

from dataclasses import asdict, dataclass

from themedoc.style.colors import theme_color
from themedoc.themes.models import ThemeState

BRAND_IDENTITY = "Brand Identity"
SURFACES = "Surfaces"
TYPOGRAPHY = "Typography"
INTERACTIVE = "Interactive"
COMPONENT_SPECIFIC = "Component Specific"

CATEGORY_ORDER: tuple[str, ...] = (
    BRAND_IDENTITY,
    SURFACES,
    TYPOGRAPHY,
    INTERACTIVE,
    COMPONENT_SPECIFIC,
)


@dataclass(frozen=True, slots=True)
class ColorEntry:
    name: str
    usage: str
    hex: str
    var: str
    category: str

    def to_mapping(self) -> dict[str, str]:
        return asdict(self)


# (name, usage, theme field, css var, category, fallback)
_CATALOG: tuple[tuple[str, str, str, str, str, str | None], ...] = (
    ("Primary", "Brand Identity", "primary", "primary", BRAND_IDENTITY, None),
    ("Secondary", "Brand Identity", "secondary", "secondary", BRAND_IDENTITY, None),
    ("Background", "Page (L1)", "background", "background", SURFACES, None),
    ("Surface", "Card (L2)", "background2", "surface-2", SURFACES, None),
    ("Surface", "Input (L3)", "background3", "surface-3", SURFACES, None),
    ("Dark Text", "Headings", "dark_text", "text-dark", TYPOGRAPHY, None),
    ("Gray Text", "Body", "gray_text", "text-gray", TYPOGRAPHY, None),
    ("Light Text", "Inverse", "light_text", "text-light", TYPOGRAPHY, None),
    ("Active", "Focus Ring", "active_color", "active-color", INTERACTIVE, None),
    ("Error", "Destructive", "form_error_color", "status-error", INTERACTIVE, "#EF4444"),
    ("Border", "UI Elements", "input_border", "ui-border", INTERACTIVE, "#E5E7EB"),
    ("Primary Text", "Button", "primary_btn_text", "btn-text-primary", COMPONENT_SPECIFIC, None),
    ("Secondary Text", "Button", "secondary_btn_text", "btn-text-secondary", COMPONENT_SPECIFIC, None),
    ("Tertiary", "Icon / Link", "tertiary_btn_text", "btn-text-tertiary", COMPONENT_SPECIFIC, None),
)


def build_color_catalog(theme: ThemeState) -> list[ColorEntry]:
    """Project the theme onto the fixed catalogue, always in category order."""
    return [
        ColorEntry(
            name=name,
            usage=usage,
            hex=theme_color(theme, field_name, fallback),
            var=var,
            category=category,
        )
        for name, usage, field_name, var, category, fallback in _CATALOG
    ]


def group_by_category(entries: list[ColorEntry]) -> dict[str, list[ColorEntry]]:
    grouped: dict[str, list[ColorEntry]] = {category: [] for category in CATEGORY_ORDER}
    for entry in entries:
        grouped.setdefault(entry.category, []).append(entry)
    return {category: rows for category, rows in grouped.items() if rows}
