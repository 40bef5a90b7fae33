"""Command-line bootstrap: resolve the active theme and export a style guide."""

from __future__ import annotations

import argparse
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
import sys

from PySide6.QtCore import QCoreApplication

from themedoc.config.settings import AppSettings
from themedoc.core.style_guide import StyleGuideExporter
from themedoc.errors import ThemeDocError, format_error_for_user
from themedoc.runtime_paths import builtin_presets_root, is_frozen, package_root
from themedoc.themes.registry import PresetRegistry
from themedoc.themes.service import ThemeService

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def configure_logging(settings: AppSettings) -> logging.Logger:
    logger = logging.getLogger("themedoc")
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    handler = RotatingFileHandler(
        settings.log_dir / "themedoc.log",
        maxBytes=512_000,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="themedoc",
        description="Resolve a theme preset and write the merchant style guide.",
    )
    parser.add_argument("--preset", help="preset id to apply (defaults to the saved preset)")
    parser.add_argument("--user-presets", type=Path, help="directory of user preset YAML files")
    parser.add_argument("--output", type=Path, help="where to write the style guide YAML")
    parser.add_argument("--list", action="store_true", help="list available presets and exit")
    parser.add_argument("--settings", type=Path, help=argparse.SUPPRESS)
    return parser


def run_app(argv: list[str] | None = None, settings: AppSettings | None = None) -> int:
    """Run the exporter and return a process exit code."""
    args = build_parser().parse_args(argv)
    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])
    app.setApplicationName("themedoc")
    app.setOrganizationName("themedoc")

    settings = settings or AppSettings(args.settings)
    logger = configure_logging(settings)
    logger.info("startup mode frozen=%s package_root=%s", is_frozen(), package_root())

    builtin_presets = builtin_presets_root()
    if not builtin_presets.exists():
        logger.warning("builtin preset root missing at %s", builtin_presets)

    registry = PresetRegistry(
        builtin_root=builtin_presets,
        user_root=args.user_presets or settings.presets_dir,
    )
    service = ThemeService(settings, registry)
    errors = service.reload_presets()
    if errors:
        logger.warning("preset load warnings: %s", " | ".join(errors[:6]))

    if args.list:
        for preset in service.available_presets():
            marker = "*" if preset.id == settings.preset_id else " "
            print(f"{marker} {preset.id:<16} {preset.name}")
        return 0

    if args.preset:
        ok, message = service.apply_preset(args.preset)
    else:
        ok, message = service.apply_startup_preset()
    logger.info(message)
    if not ok:
        print(message, file=sys.stderr)
        if args.preset:
            return 2

    exporter = StyleGuideExporter(settings, args.output)
    try:
        path = exporter.write(service.computed_theme, preset_id=service.active_preset_id)
    except ThemeDocError as exc:
        logger.error("style guide export failed: %s", exc)
        print(format_error_for_user(exc), file=sys.stderr)
        return 1
    settings.sync()
    print(f"Wrote style guide to {path}")
    return 0
