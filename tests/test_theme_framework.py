"""Tests for theme preset loader, registry and layering behavior."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from themedoc.runtime_paths import builtin_presets_root
from themedoc.themes.compiler import compile_css_variables, compile_stylesheet, css_variable_name
from themedoc.themes.loader import load_preset_file
from themedoc.themes.models import (
    DEFAULT_THEME,
    PresetValidationError,
    ThemeState,
    apply_preset,
    merge_theme,
)
from themedoc.themes.registry import PresetRegistry

BUILTIN_IDS = [
    "orbit-default",
    "midnight-pro",
    "emerald-city",
    "corporate-blue",
    "sunset-orange",
    "slate-minimal",
    "rose-gold",
    "cyber-neon",
]


def _write_yaml(path: Path, data: dict[str, object]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data), encoding="utf-8")


def _preset(preset_id: str, primary: str = "#22AA66") -> dict[str, object]:
    return {
        "id": preset_id,
        "name": preset_id,
        "description": "test preset",
        "colors": {"primary": primary, "secondary": "#112233"},
    }


def _write_presets(path: Path, *presets: dict[str, object]) -> None:
    _write_yaml(path, {"schema_version": "1", "presets": list(presets)})


def test_load_preset_file_valid(tmp_path: Path) -> None:
    path = tmp_path / "mine.yaml"
    _write_presets(path, _preset("test-preset"))

    presets = load_preset_file(path)
    assert presets[0].id == "test-preset"
    assert presets[0].colors.primary == "#22AA66"
    assert presets[0].colors.background is None
    assert presets[0].is_builtin is False


def test_load_rejects_unknown_color_key(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    preset = _preset("bad")
    preset["colors"]["evilKey"] = "#000000"
    _write_presets(path, preset)

    with pytest.raises(PresetValidationError):
        load_preset_file(path)


def test_load_rejects_invalid_color(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    _write_presets(path, _preset("bad", primary="purple"))

    with pytest.raises(PresetValidationError):
        load_preset_file(path)


def test_load_rejects_unknown_preset_key(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    preset = _preset("bad")
    preset["sql"] = "DROP TABLE presets"
    _write_presets(path, preset)

    with pytest.raises(PresetValidationError):
        load_preset_file(path)


def test_load_rejects_schema_version(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    _write_yaml(path, {"schema_version": "2", "presets": [_preset("x")]})

    with pytest.raises(PresetValidationError, match="schema_version"):
        load_preset_file(path)


def test_load_rejects_duplicate_ids(tmp_path: Path) -> None:
    path = tmp_path / "dup.yaml"
    _write_presets(path, _preset("same"), _preset("same"))

    with pytest.raises(PresetValidationError, match="duplicate"):
        load_preset_file(path)


def test_load_rejects_field_length_and_newlines(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    preset = _preset("bad")
    preset["name"] = "A" * 200
    _write_presets(path, preset)
    with pytest.raises(PresetValidationError):
        load_preset_file(path)

    preset["name"] = "bad\nname"
    _write_presets(path, preset)
    with pytest.raises(PresetValidationError):
        load_preset_file(path)


def test_load_rejects_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text("presets: [unclosed", encoding="utf-8")

    with pytest.raises(PresetValidationError, match="Invalid YAML"):
        load_preset_file(path)


def test_registry_user_preset_overrides_builtin(tmp_path: Path) -> None:
    builtin_root = tmp_path / "builtin"
    user_root = tmp_path / "user"
    _write_presets(builtin_root / "presets.yaml", _preset("first"), _preset("shared", "#00FF00"))
    _write_presets(user_root / "mine.yaml", _preset("shared", "#FF00FF"))

    registry = PresetRegistry(builtin_root=builtin_root, user_root=user_root)
    registry.reload()

    preset = registry.get_preset("shared")
    assert preset is not None
    assert preset.colors.primary == "#FF00FF"
    assert preset.is_builtin is False
    assert [p.id for p in registry.list_presets()] == ["first", "shared"]
    assert any("overrides built-in" in msg for msg in registry.load_errors())


def test_registry_rejects_invalid_preset_id(tmp_path: Path) -> None:
    builtin_root = tmp_path / "builtin"
    user_root = tmp_path / "user"
    _write_presets(user_root / "bad.yaml", _preset("Bad Preset"))

    registry = PresetRegistry(builtin_root=builtin_root, user_root=user_root)
    registry.reload()

    assert registry.get_preset("Bad Preset") is None
    assert any("id must match pattern" in msg for msg in registry.load_errors())


def test_registry_skips_duplicate_builtin(tmp_path: Path) -> None:
    builtin_root = tmp_path / "builtin"
    _write_presets(builtin_root / "a.yaml", _preset("dup", "#111111"))
    _write_presets(builtin_root / "b.yaml", _preset("dup", "#222222"))

    registry = PresetRegistry(builtin_root=builtin_root, user_root=tmp_path / "none")
    registry.reload()

    assert registry.get_preset("dup").colors.primary == "#111111"
    assert any("Duplicate builtin" in msg for msg in registry.load_errors())


def test_builtin_catalogue_loads_in_order() -> None:
    registry = PresetRegistry(builtin_root=builtin_presets_root(), user_root=Path("/nonexistent"))
    registry.reload()

    assert registry.load_errors() == []
    assert [p.id for p in registry.list_presets()] == BUILTIN_IDS
    assert registry.get_preset("orbit-default").colors.primary == "#7E22CE"


class TestThemeLayering:
    def test_merge_only_set_fields_win(self):
        merged = merge_theme(DEFAULT_THEME, ThemeState(primary="#000000"))
        assert merged.primary == "#000000"
        assert merged.secondary == DEFAULT_THEME.secondary

    def test_merge_with_empty_override_is_identity(self):
        assert merge_theme(DEFAULT_THEME, ThemeState()) == DEFAULT_THEME

    def test_apply_preset_keeps_geometry(self, tmp_path):
        path = tmp_path / "p.yaml"
        _write_presets(path, _preset("p"))
        preset = load_preset_file(path)[0]
        theme = apply_preset(DEFAULT_THEME.replace(border_radius=3), preset)
        assert theme.primary == "#22AA66"
        assert theme.border_radius == 3

    def test_from_mapping_round_trip(self):
        data = DEFAULT_THEME.to_mapping()
        assert data["primaryBtnText"] == "#FFFFFF"
        assert ThemeState.from_mapping(data) == DEFAULT_THEME

    def test_from_mapping_ignores_bad_values(self):
        theme = ThemeState.from_mapping({"borderRadius": "12", "depth": True, "mystery": 1, "primary": "#010101"})
        assert theme.border_radius is None
        assert theme.depth is None
        assert theme.primary == "#010101"

    def test_body_font_falls_back_to_heading(self):
        theme = ThemeState(font_family="Manrope")
        assert theme.body_font == "Manrope"


class TestCompiler:
    def test_variable_name(self):
        assert css_variable_name("primaryBtnText") == "--primary-btn-text"

    def test_numeric_fields_get_px_twin(self):
        variables = compile_css_variables(DEFAULT_THEME)
        assert variables["--border-radius"] == "12"
        assert variables["--border-radius-px"] == "12px"
        assert variables["--button-hover-opacity"] == "90"
        assert "--button-hover-opacity-px" not in variables
        assert variables["--primary"] == "#7E22CE"

    def test_stylesheet_root_block(self):
        css = compile_stylesheet(ThemeState(primary="#123456"))
        assert css == ":root {\n    --primary: #123456;\n}\n"
