"""Button style resolution."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from themedoc.style.colors import theme_color, with_alpha
from themedoc.themes.models import ThemeState

TRANSPARENT = "transparent"
DISABLED_BACKGROUND = "#F3F4F6"
DISABLED_TEXT = "#9CA3AF"
DEFAULT_GRADIENT_ANGLE = 135
DEFAULT_ICON_GAP = 8
DEFAULT_HOVER_OPACITY = 90


class ButtonVariant(str, Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"


class VisualStyle(str, Enum):
    FLAT = "flat"
    SOFT = "soft"
    NEO = "neo"
    GLOW = "glow"


@dataclass(frozen=True, slots=True)
class LinearGradient:
    """A linear gradient background; stops are ``(color, percent)`` pairs."""

    angle: float
    stops: tuple[tuple[str, int], ...]

    @property
    def colors(self) -> tuple[str, ...]:
        return tuple(color for color, _ in self.stops)

    def __str__(self) -> str:
        stops = ", ".join(f"{color} {offset}%" for color, offset in self.stops)
        return f"linear-gradient({_fmt(self.angle)}deg, {stops})"


@dataclass(frozen=True, slots=True)
class ButtonStyle:
    """Concrete values for one button variant in one visual style."""

    background: str | LinearGradient
    color: str
    border: str
    border_radius: float
    padding_x: float
    padding_y: float
    box_shadow: str
    font_family: str
    gap: float
    hover_opacity: float
    font_size: int = 14
    font_weight: int = 600
    cursor: str = "pointer"

    @property
    def is_gradient(self) -> bool:
        return isinstance(self.background, LinearGradient)

    def to_mapping(self) -> dict[str, str | int | float]:
        """CSS-ready property values keyed by camelCase property name."""
        return {
            "background": str(self.background),
            "color": self.color,
            "border": self.border,
            "borderRadius": f"{_fmt(self.border_radius)}px",
            "paddingTop": f"{_fmt(self.padding_y)}px",
            "paddingBottom": f"{_fmt(self.padding_y)}px",
            "paddingLeft": f"{_fmt(self.padding_x)}px",
            "paddingRight": f"{_fmt(self.padding_x)}px",
            "boxShadow": self.box_shadow,
            "fontFamily": self.font_family,
            "fontSize": f"{self.font_size}px",
            "fontWeight": self.font_weight,
            "cursor": self.cursor,
            "gap": f"{_fmt(self.gap)}px",
            "hoverOpacity": self.hover_opacity,
        }


def resolve_button_style(
    theme: ThemeState,
    variant: str | ButtonVariant = ButtonVariant.PRIMARY,
    visual_style: str | VisualStyle | None = None,
    *,
    disabled: bool = False,
) -> ButtonStyle:
    """Resolve the style of a themed button.

    ``visual_style`` defaults to the theme's ``button_style`` (``flat`` when
    unset or unknown). Unknown ``variant`` or explicit ``visual_style`` values
    raise ``ValueError``.
    """
    variant = ButtonVariant(variant)
    if visual_style is None:
        visual_style = _theme_visual_style(theme)
    visual_style = VisualStyle(visual_style)

    primary = theme_color(theme, "primary")
    if variant is ButtonVariant.PRIMARY:
        background = primary
        color = theme_color(theme, "primary_btn_text")
    elif variant is ButtonVariant.SECONDARY:
        background = theme_color(theme, "secondary")
        color = theme_color(theme, "secondary_btn_text")
    else:
        background = TRANSPARENT
        color = theme_color(theme, "tertiary_btn_text")

    if variant is ButtonVariant.TERTIARY:
        border = f"1px solid {color}"
    else:
        border = f"1px solid {TRANSPARENT}"

    if disabled:
        background = DISABLED_BACKGROUND
        color = DISABLED_TEXT
        border = f"1px solid {TRANSPARENT}"
        shadow = "none"
    else:
        shadow = _shadow_for(visual_style, variant, background, primary)

    resolved_background: str | LinearGradient = background
    if theme.fill_mode == "gradient" and variant is ButtonVariant.PRIMARY and not disabled:
        resolved_background = LinearGradient(
            angle=theme.gradient_angle or DEFAULT_GRADIENT_ANGLE,
            stops=((primary, 0), (theme_color(theme, "secondary"), 100)),
        )

    hover = theme.button_hover_opacity
    if hover is None or not 0 <= hover <= 100:
        hover = DEFAULT_HOVER_OPACITY

    return ButtonStyle(
        background=resolved_background,
        color=color,
        border=border,
        border_radius=_number(theme.border_radius, 12),
        padding_x=_number(theme.btn_padding_x, 24),
        padding_y=_number(theme.btn_padding_y, 12),
        box_shadow=shadow,
        font_family=theme.heading_font,
        gap=theme.icon_gap or DEFAULT_ICON_GAP,
        hover_opacity=hover / 100,
        cursor="not-allowed" if disabled else "pointer",
    )


def resolve_button_matrix(
    theme: ThemeState,
    visual_style: str | VisualStyle | None = None,
) -> dict[str, dict[str, ButtonStyle]]:
    """Enabled and disabled styles for every variant."""
    return {
        variant.value: {
            "enabled": resolve_button_style(theme, variant, visual_style),
            "disabled": resolve_button_style(theme, variant, visual_style, disabled=True),
        }
        for variant in ButtonVariant
    }


def _shadow_for(
    visual_style: VisualStyle,
    variant: ButtonVariant,
    background: str,
    primary: str,
) -> str:
    if visual_style is VisualStyle.NEO:
        alpha = "99" if variant is ButtonVariant.SECONDARY else "66"
        return f"3px 3px 0px {with_alpha(primary, alpha)}"
    # Soft and glow tint with the background, which tertiary buttons lack.
    if background == TRANSPARENT:
        return "none"
    if visual_style is VisualStyle.SOFT:
        return f"0 4px 12px -2px {with_alpha(background, '66')}"
    if visual_style is VisualStyle.GLOW:
        return f"0 0 10px {with_alpha(background, '80')}"
    return "none"


def _theme_visual_style(theme: ThemeState) -> VisualStyle:
    try:
        return VisualStyle(theme.button_style or VisualStyle.FLAT.value)
    except ValueError:
        return VisualStyle.FLAT


def _number(value: float | None, fallback: float) -> float:
    if value is None or value < 0:
        return fallback
    return value


def _fmt(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)
