"""Error codes and error handling utilities for themedoc."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for themedoc operations."""

    # Document errors
    MALFORMED_DROP_PAYLOAD = auto()
    UNKNOWN_BLOCK_ID = auto()

    # Theme errors
    INVALID_COLOR_FORMAT = auto()
    MISSING_THEME_FIELD = auto()
    PRESET_INVALID = auto()
    PRESET_NOT_FOUND = auto()

    # Configuration / output errors
    CONFIG_INVALID = auto()
    EXPORT_FAILED = auto()


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.MALFORMED_DROP_PAYLOAD: "The dropped item could not be read. Nothing was added to the page.",
    ErrorCode.UNKNOWN_BLOCK_ID: "The block no longer exists on this page.",
    ErrorCode.INVALID_COLOR_FORMAT: "Color values must be 6-digit hex strings such as #7E22CE.",
    ErrorCode.MISSING_THEME_FIELD: "The theme is missing a value. A default is used instead.",
    ErrorCode.PRESET_INVALID: "The theme preset file is invalid. Check its structure and colors.",
    ErrorCode.PRESET_NOT_FOUND: "The requested theme preset is not installed.",
    ErrorCode.CONFIG_INVALID: "Configuration is invalid. Reset to defaults?",
    ErrorCode.EXPORT_FAILED: "The style guide could not be written. Check folder permissions.",
}


@dataclass
class ThemeDocError(Exception):
    """Base exception for themedoc with error code and context."""

    code: ErrorCode
    message: str = ""
    path: Path | None = None
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = ""

    def __post_init__(self) -> None:
        if not self.message:
            self.message = ERROR_MESSAGES.get(self.code, "An unexpected error occurred.")
        if not self.suggestion and self.code in ERROR_MESSAGES:
            self.suggestion = ERROR_MESSAGES[self.code]

    def __str__(self) -> str:
        parts = [self.message]
        if self.path:
            parts.append(f"\nFile: {self.path}")
        if self.details:
            details_str = " | ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"\nDetails: {details_str}")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging or UI display."""
        return {
            "code": self.code.name,
            "message": self.message,
            "path": str(self.path) if self.path else None,
            "details": self.details,
            "suggestion": self.suggestion,
        }


@dataclass
class DropError(ThemeDocError):
    """A drag-and-drop payload that could not be turned into a block.

    Returned by ``ingest_drop`` rather than raised.
    """

    code: ErrorCode = ErrorCode.MALFORMED_DROP_PAYLOAD
    payload: str = ""


def classify_exception(exc: Exception, path: Path | None = None) -> ThemeDocError:
    """Classify a generic exception into a ThemeDocError with appropriate code."""
    exc_str = str(exc)
    if isinstance(exc, OSError):
        return ThemeDocError(ErrorCode.EXPORT_FAILED, path=path, details={"original": exc_str})
    if isinstance(exc, KeyError):
        return ThemeDocError(ErrorCode.PRESET_NOT_FOUND, path=path, details={"original": exc_str})
    if isinstance(exc, ValueError):
        return ThemeDocError(ErrorCode.PRESET_INVALID, path=path, details={"original": exc_str})
    return ThemeDocError(
        ErrorCode.CONFIG_INVALID,
        message=f"{type(exc).__name__}: {exc}",
        path=path,
        details={"original": exc_str},
    )


def format_error_for_user(error: ThemeDocError | Exception) -> str:
    """Format an error for display to the user with actionable suggestions."""
    if isinstance(error, ThemeDocError):
        parts = [error.message]
        if error.suggestion and error.suggestion != error.message:
            parts.append(f"\n\n{error.suggestion}")
        if error.path:
            parts.append(f"\n\nFile: {error.path.name}")
        return "".join(parts)

    return format_error_for_user(classify_exception(error))
