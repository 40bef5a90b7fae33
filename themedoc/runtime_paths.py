"""Locate packaged data (the built-in preset catalogue) at runtime.

A source checkout or wheel keeps data beside the modules; a PyInstaller
build unpacks it under ``sys._MEIPASS``, optionally inside a ``themedoc``
folder.
"""

from __future__ import annotations

from pathlib import Path
import sys


def is_frozen() -> bool:
    return bool(getattr(sys, "frozen", False))


def bundle_root() -> Path:
    """Directory the frozen build unpacked into; the checkout root otherwise."""
    if is_frozen():
        meipass = getattr(sys, "_MEIPASS", None)
        if meipass:
            return Path(meipass)
    return Path(__file__).resolve().parent.parent


def package_root() -> Path:
    """Directory holding ``themes/builtin`` and the other package data."""
    if is_frozen():
        root = bundle_root()
        candidate = root / "themedoc"
        if candidate.exists():
            return candidate
        return root
    return Path(__file__).resolve().parent


def builtin_presets_root() -> Path:
    """Directory scanned by ``PresetRegistry`` for the shipped ``presets.yaml``."""
    return package_root() / "themes" / "builtin"
