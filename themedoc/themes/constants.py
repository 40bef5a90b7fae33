"""Theme framework constants."""

from __future__ import annotations

DEFAULT_PRESET_ID = "orbit-default"
PRESET_SCHEMA_VERSION = "1"

# ThemeState attribute -> mapping key used by stores and preset files.
COLOR_FIELDS: dict[str, str] = {
    "primary": "primary",
    "secondary": "secondary",
    "background": "background",
    "background2": "background2",
    "background3": "background3",
    "dark_text": "darkText",
    "gray_text": "grayText",
    "light_text": "lightText",
    "active_color": "activeColor",
    "form_error_color": "formErrorColor",
    "input_border": "inputBorder",
    "input_bg": "inputBg",
    "primary_btn_text": "primaryBtnText",
    "secondary_btn_text": "secondaryBtnText",
    "tertiary_btn_text": "tertiaryBtnText",
}

NUMBER_FIELDS: dict[str, str] = {
    "border_radius": "borderRadius",
    "btn_padding_x": "btnPaddingX",
    "btn_padding_y": "btnPaddingY",
    "layout_gap": "layoutGap",
    "section_padding": "sectionPadding",
    "depth": "depth",
    "icon_gap": "iconGap",
    "gradient_angle": "gradientAngle",
    "button_hover_opacity": "buttonHoverOpacity",
}

TEXT_FIELDS: dict[str, str] = {
    "font_family": "fontFamily",
    "secondary_font_family": "secondaryFontFamily",
    "fill_mode": "fillMode",
    "button_style": "buttonStyle",
    "form_variant": "formVariant",
    "form_label_style": "formLabelStyle",
}

FIELD_KEYS: dict[str, str] = {**COLOR_FIELDS, **NUMBER_FIELDS, **TEXT_FIELDS}
