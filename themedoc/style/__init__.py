"""Theme token resolution exports."""

from themedoc.style.buttons import (
    ButtonStyle,
    ButtonVariant,
    LinearGradient,
    VisualStyle,
    resolve_button_matrix,
    resolve_button_style,
)
from themedoc.style.catalog import CATEGORY_ORDER, ColorEntry, build_color_catalog, group_by_category
from themedoc.style.colors import (
    audit_theme,
    ColorRole,
    ContrastText,
    color_for_role,
    hex_to_rgb,
    resolve_contrast_text,
)
from themedoc.style.swatch import SwatchGeometry, resolve_swatch_geometry

__all__ = [
    "audit_theme",
    "ButtonStyle",
    "ButtonVariant",
    "CATEGORY_ORDER",
    "ColorEntry",
    "ColorRole",
    "ContrastText",
    "LinearGradient",
    "SwatchGeometry",
    "VisualStyle",
    "build_color_catalog",
    "color_for_role",
    "group_by_category",
    "hex_to_rgb",
    "resolve_button_matrix",
    "resolve_button_style",
    "resolve_contrast_text",
    "resolve_swatch_geometry",
]
