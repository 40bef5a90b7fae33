"""Hex color parsing, contrast and theme color-role lookups."""

from __future__ import annotations

import re
from enum import Enum

from themedoc.errors import ErrorCode, ThemeDocError
from themedoc.themes.constants import COLOR_FIELDS
from themedoc.themes.models import DEFAULT_THEME, ThemeState

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")

# Brightness above this reads as a light background.
CONTRAST_THRESHOLD = 155


class ContrastText(str, Enum):
    """Text tone that stays legible on a given background."""

    DARK = "dark"
    LIGHT = "light"


class ColorRole(str, Enum):
    """Semantic color roles a block or component can reference."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    BACKGROUND = "background"
    BACKGROUND2 = "background2"
    BACKGROUND3 = "background3"
    DARK_TEXT = "darkText"
    GRAY_TEXT = "grayText"
    LIGHT_TEXT = "lightText"
    ACTIVE_COLOR = "activeColor"
    FORM_ERROR_COLOR = "formErrorColor"
    INPUT_BORDER = "inputBorder"
    INPUT_BG = "inputBg"
    PRIMARY_BTN_TEXT = "primaryBtnText"
    SECONDARY_BTN_TEXT = "secondaryBtnText"
    TERTIARY_BTN_TEXT = "tertiaryBtnText"

    @classmethod
    def parse(cls, value: str | ColorRole) -> ColorRole:
        if isinstance(value, ColorRole):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Unknown color role: {value!r}") from None

    @property
    def label(self) -> str:
        """Human label, e.g. ``primaryBtnText`` -> ``Primary Button Text``."""
        words = re.sub(r"([A-Z])", r" \1", self.value).replace("Btn", " Button")
        return " ".join(word.capitalize() for word in words.split())


_ROLE_FIELDS: dict[ColorRole, str] = {
    ColorRole.PRIMARY: "primary",
    ColorRole.SECONDARY: "secondary",
    ColorRole.BACKGROUND: "background",
    ColorRole.BACKGROUND2: "background2",
    ColorRole.BACKGROUND3: "background3",
    ColorRole.DARK_TEXT: "dark_text",
    ColorRole.GRAY_TEXT: "gray_text",
    ColorRole.LIGHT_TEXT: "light_text",
    ColorRole.ACTIVE_COLOR: "active_color",
    ColorRole.FORM_ERROR_COLOR: "form_error_color",
    ColorRole.INPUT_BORDER: "input_border",
    ColorRole.INPUT_BG: "input_bg",
    ColorRole.PRIMARY_BTN_TEXT: "primary_btn_text",
    ColorRole.SECONDARY_BTN_TEXT: "secondary_btn_text",
    ColorRole.TERTIARY_BTN_TEXT: "tertiary_btn_text",
}


def is_hex_color(value: object) -> bool:
    return isinstance(value, str) and _HEX_RE.match(value) is not None


def normalize_hex(value: str) -> str:
    """Return ``#RRGGBB`` in upper case; the input must be a valid hex color."""
    match = _HEX_RE.match(value)
    if match is None:
        raise ValueError(f"Invalid hex color: {value!r}")
    return "#" + "".join(match.groups()).upper()


def hex_to_rgb(value: str | None) -> tuple[int, int, int]:
    """Parse a 6-digit hex color; anything malformed yields black."""
    match = _HEX_RE.match(value or "#000000")
    if match is None:
        return (0, 0, 0)
    red, green, blue = (int(part, 16) for part in match.groups())
    return (red, green, blue)


def format_rgb(value: str | None) -> str:
    return ", ".join(str(channel) for channel in hex_to_rgb(value))


def luminance(value: str) -> float:
    red, green, blue = hex_to_rgb(value)
    return (red * 299 + green * 587 + blue * 114) / 1000


def resolve_contrast_text(value: str | None) -> ContrastText:
    """Pick the text tone for a background color.

    Malformed colors resolve to ``ContrastText.DARK``.
    """
    if not is_hex_color(value):
        return ContrastText.DARK
    if luminance(value) > CONTRAST_THRESHOLD:
        return ContrastText.DARK
    return ContrastText.LIGHT


def with_alpha(value: str, alpha_hex: str) -> str:
    """Append a two-digit alpha suffix (``#RRGGBB`` -> ``#RRGGBBAA``)."""
    if not value.startswith("#"):
        value = f"#{value}"
    return f"{value}{alpha_hex}"


def theme_color(theme: ThemeState, field_name: str, fallback: str | None = None) -> str:
    """Read a color field, falling back when it is absent or malformed."""
    value = getattr(theme, field_name, None)
    if is_hex_color(value):
        return value
    if fallback is not None:
        return fallback
    if field_name == "active_color":
        return theme_color(theme, "primary")
    default = getattr(DEFAULT_THEME, field_name, None)
    return default if is_hex_color(default) else "#000000"


def color_for_role(theme: ThemeState, role: str | ColorRole) -> str:
    role = ColorRole.parse(role)
    return theme_color(theme, _ROLE_FIELDS[role])


def audit_theme(theme: ThemeState) -> list[ThemeDocError]:
    """List color fields that will resolve through a fallback."""
    issues: list[ThemeDocError] = []
    for attr, key in COLOR_FIELDS.items():
        value = getattr(theme, attr)
        if value is None:
            issues.append(ThemeDocError(ErrorCode.MISSING_THEME_FIELD, details={"field": key}))
        elif not is_hex_color(value):
            issues.append(
                ThemeDocError(ErrorCode.INVALID_COLOR_FORMAT, details={"field": key, "value": value})
            )
    return issues
