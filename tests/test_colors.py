"""Tests for hex parsing, contrast and color-role lookups."""

import pytest

from themedoc.errors import ErrorCode
from themedoc.style.colors import (
    ColorRole,
    ContrastText,
    audit_theme,
    color_for_role,
    format_rgb,
    hex_to_rgb,
    luminance,
    normalize_hex,
    resolve_contrast_text,
    theme_color,
)
from themedoc.themes.models import DEFAULT_THEME, ThemeState


class TestHexParsing:
    def test_hex_to_rgb(self):
        assert hex_to_rgb("#7E22CE") == (126, 34, 206)

    def test_hex_to_rgb_without_hash(self):
        assert hex_to_rgb("7e22ce") == (126, 34, 206)

    @pytest.mark.parametrize("value", ["", None, "#12345", "#GGGGGG", "purple", "#7E22CE00"])
    def test_malformed_is_black(self, value):
        assert hex_to_rgb(value) == (0, 0, 0)

    def test_format_rgb(self):
        assert format_rgb("#FF8000") == "255, 128, 0"

    def test_normalize_hex(self):
        assert normalize_hex("7e22ce") == "#7E22CE"

    def test_normalize_hex_rejects_garbage(self):
        with pytest.raises(ValueError):
            normalize_hex("not-a-color")


class TestContrast:
    def test_white_gets_dark_text(self):
        assert resolve_contrast_text("#FFFFFF") is ContrastText.DARK

    def test_black_gets_light_text(self):
        assert resolve_contrast_text("#000000") is ContrastText.LIGHT

    def test_threshold_is_exclusive(self):
        assert luminance("#9B9B9B") == 155
        assert resolve_contrast_text("#9B9B9B") is ContrastText.LIGHT
        assert resolve_contrast_text("#9C9C9C") is ContrastText.DARK

    def test_case_insensitive(self):
        assert resolve_contrast_text("#f3e8ff") is resolve_contrast_text("#F3E8FF")

    def test_malformed_defaults_to_dark(self):
        assert resolve_contrast_text("nope") is ContrastText.DARK
        assert resolve_contrast_text(None) is ContrastText.DARK

    def test_brand_primary_is_dark_background(self):
        assert resolve_contrast_text("#7E22CE") is ContrastText.LIGHT


class TestRoles:
    def test_parse_known_role(self):
        assert ColorRole.parse("primaryBtnText") is ColorRole.PRIMARY_BTN_TEXT

    def test_parse_unknown_role(self):
        with pytest.raises(ValueError, match="Unknown color role"):
            ColorRole.parse("chartreuse")

    def test_label(self):
        assert ColorRole.PRIMARY_BTN_TEXT.label == "Primary Button Text"
        assert ColorRole.DARK_TEXT.label == "Dark Text"

    def test_color_for_role_reads_theme(self):
        theme = ThemeState(secondary="#123456")
        assert color_for_role(theme, "secondary") == "#123456"

    def test_missing_field_uses_default(self):
        assert color_for_role(ThemeState(), ColorRole.DARK_TEXT) == DEFAULT_THEME.dark_text

    def test_active_color_falls_back_to_primary(self):
        theme = ThemeState(primary="#ABCDEF")
        assert theme_color(theme, "active_color") == "#ABCDEF"

    def test_explicit_fallback_wins_over_default(self):
        assert theme_color(ThemeState(form_error_color="red"), "form_error_color", "#EF0000") == "#EF0000"


class TestAuditTheme:
    def test_complete_theme_is_clean(self):
        assert audit_theme(DEFAULT_THEME) == []

    def test_invalid_and_missing_colors_reported(self):
        issues = audit_theme(ThemeState(primary="purple", secondary="#112233"))
        by_field = {issue.details["field"]: issue.code for issue in issues}
        assert by_field["primary"] is ErrorCode.INVALID_COLOR_FORMAT
        assert by_field["darkText"] is ErrorCode.MISSING_THEME_FIELD
        assert "secondary" not in by_field
