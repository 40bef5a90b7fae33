"""Theme preset parsing and validation."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Mapping

import yaml

from themedoc.themes.constants import COLOR_FIELDS, PRESET_SCHEMA_VERSION
from themedoc.themes.models import PresetValidationError, ThemePreset, ThemeState

_PRESET_ID_RE = re.compile(r"^[a-z0-9][a-z0-9-]*$")
_HEX_COLOR_RE = re.compile(r"^#?[0-9a-fA-F]{6}$")

_MAX_PRESET_FILE_BYTES = 64 * 1024
_MAX_PRESETS_PER_FILE = 64
_MAX_PRESET_ID_LEN = 64
_MAX_SHORT_FIELD_LEN = 120
_MAX_DESC_LEN = 240

_COLOR_KEYS = {key: attr for attr, key in COLOR_FIELDS.items()}


def load_preset_file(path: Path, *, is_builtin: bool = False) -> list[ThemePreset]:
    """Load and validate every preset in a YAML preset file."""
    if not path.exists() or not path.is_file():
        raise PresetValidationError(f"Preset path is not a file: {path}")
    if path.is_symlink():
        raise PresetValidationError(f"Preset file cannot be a symlink: {path}")

    data = _load_yaml(path, max_bytes=_MAX_PRESET_FILE_BYTES)
    _reject_unknown_keys(data, allowed={"schema_version", "presets"}, context=str(path))

    schema_version = data.get("schema_version")
    if str(schema_version) != PRESET_SCHEMA_VERSION:
        raise PresetValidationError(
            f"{path}: unsupported schema_version {schema_version!r}; "
            f"expected {PRESET_SCHEMA_VERSION!r}"
        )

    rows = data.get("presets")
    if not isinstance(rows, list) or not rows:
        raise PresetValidationError(f"{path}: 'presets' must be a non-empty list")
    if len(rows) > _MAX_PRESETS_PER_FILE:
        raise PresetValidationError(
            f"{path}: too many presets ({len(rows)} > {_MAX_PRESETS_PER_FILE})"
        )

    presets: list[ThemePreset] = []
    seen: set[str] = set()
    for index, row in enumerate(rows):
        context = f"{path}: presets[{index}]"
        if not isinstance(row, dict):
            raise PresetValidationError(f"{context} must be a mapping")
        preset = _parse_preset(row, context, path=path, is_builtin=is_builtin)
        if preset.id in seen:
            raise PresetValidationError(f"{context}: duplicate preset id {preset.id!r}")
        seen.add(preset.id)
        presets.append(preset)
    return presets


def _load_yaml(path: Path, *, max_bytes: int) -> Mapping[str, object]:
    content = _read_text_limited(path, max_bytes=max_bytes)
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise PresetValidationError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise PresetValidationError(f"Expected YAML mapping in {path}")
    return data


def _parse_preset(
    data: Mapping[str, object],
    context: str,
    *,
    path: Path,
    is_builtin: bool,
) -> ThemePreset:
    _reject_unknown_keys(data, allowed={"id", "name", "description", "colors"}, context=context)

    preset_id = _required_str(data, "id", context, max_len=_MAX_PRESET_ID_LEN)
    if not _PRESET_ID_RE.match(preset_id):
        raise PresetValidationError(
            f"{context}: id must match pattern [a-z0-9-], got {preset_id!r}"
        )

    return ThemePreset(
        id=preset_id,
        name=_required_str(data, "name", context, max_len=_MAX_SHORT_FIELD_LEN),
        description=_required_str(data, "description", context, max_len=_MAX_DESC_LEN),
        colors=_parse_colors(data.get("colors"), context),
        is_builtin=is_builtin,
        source_path=path,
    )


def _parse_colors(raw: object, context: str) -> ThemeState:
    if not isinstance(raw, dict) or not raw:
        raise PresetValidationError(f"{context}: 'colors' must be a non-empty mapping")
    _reject_unknown_keys(raw, allowed=set(_COLOR_KEYS), context=f"{context}.colors")

    colors: dict[str, str] = {}
    for key, value in raw.items():
        if not isinstance(value, str) or not _HEX_COLOR_RE.match(value.strip()):
            raise PresetValidationError(f"{context}: color {key!r} has invalid value {value!r}")
        colors[_COLOR_KEYS[key]] = value.strip()
    return ThemeState(**colors)


def _required_str(data: Mapping[str, object], key: str, context: str, *, max_len: int) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        raise PresetValidationError(f"{context}: field {key!r} must be a non-empty string")
    cleaned = value.strip()
    if len(cleaned) > max_len:
        raise PresetValidationError(f"{context}: field {key!r} exceeds max length {max_len}")
    if any(ch in cleaned for ch in ("\n", "\r", "\t")):
        raise PresetValidationError(f"{context}: field {key!r} must be a single line string")
    return cleaned


def _reject_unknown_keys(
    data: Mapping[str, object],
    *,
    allowed: set[str],
    context: str,
) -> None:
    unknown = sorted(str(key) for key in data.keys() if key not in allowed)
    if unknown:
        joined = ", ".join(unknown)
        raise PresetValidationError(f"{context}: unsupported keys found: {joined}")


def _read_text_limited(path: Path, *, max_bytes: int) -> str:
    try:
        size = path.stat().st_size
    except OSError as exc:
        raise PresetValidationError(f"Unable to stat {path}: {exc}") from exc
    if size > max_bytes:
        raise PresetValidationError(f"{path}: file exceeds max size ({max_bytes} bytes)")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise PresetValidationError(f"Unable to read {path}: {exc}") from exc
