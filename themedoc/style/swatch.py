"""Color swatch geometry."""

from __future__ import annotations

from dataclasses import dataclass

from themedoc.style.colors import (
    ContrastText,
    is_hex_color,
    normalize_hex,
    resolve_contrast_text,
    theme_color,
    with_alpha,
)
from themedoc.themes.models import ThemeState

NEUTRAL_SHADOW = "#00000010"


@dataclass(frozen=True, slots=True)
class SwatchGeometry:
    radius: float
    padding: float
    margin_bottom: float
    shadow: str
    text: ContrastText


def resolve_swatch_geometry(
    theme: ThemeState,
    hex_color: str | None = None,
    *,
    copied: bool = False,
) -> SwatchGeometry:
    """Size and shadow a swatch for ``hex_color`` (defaults to primary).

    Shadow offset and blur scale with ``theme.depth``; pure white swatches
    get a neutral shadow instead of a self-tinted one.
    """
    if hex_color is None:
        hex_color = theme_color(theme, "primary")
    radius = theme.border_radius if theme.border_radius is not None else 16
    gap = theme.layout_gap if theme.layout_gap is not None else 32
    depth = theme.depth if theme.depth is not None else 1

    if copied:
        shadow = f"0 0 0 4px {with_alpha(hex_color, '40')}"
    else:
        if is_hex_color(hex_color) and normalize_hex(hex_color) == "#FFFFFF":
            tint = NEUTRAL_SHADOW
        else:
            tint = with_alpha(hex_color, "30")
        shadow = f"0 {_px(4 * depth)} {_px(8 * depth)} {tint}"

    return SwatchGeometry(
        radius=radius,
        padding=gap * 0.625,
        margin_bottom=gap * 0.5,
        shadow=shadow,
        text=resolve_contrast_text(hex_color),
    )


def _px(value: float) -> str:
    if float(value).is_integer():
        return f"{int(value)}px"
    return f"{value}px"
