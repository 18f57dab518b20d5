"""Custom exceptions for centralized error handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class AppError(Exception):
    """Base application error."""

    code: str
    message: str
    exit_code: int
    details: Any | None = None

    def __str__(self) -> str:
        return self.message

    def describe(self) -> str:
        """One-line diagnostic: file, stage and underlying cause."""

        details = self.details if isinstance(self.details, dict) else {}
        parts = [self.code]
        if details.get("path"):
            parts.append(f"file={details['path']}")
        if details.get("stage"):
            parts.append(f"stage={details['stage']}")
        parts.append(self.message)
        if details.get("cause"):
            parts.append(f"cause={details['cause']}")
        return " ".join(parts)


class DirectoryNotFoundError(AppError):
    """Input directory does not exist."""

    def __init__(self, message: str = "Input directory not found", details: Any | None = None) -> None:
        super().__init__(code="directory_not_found", message=message, exit_code=2, details=details)


class LoadError(AppError):
    """Bet file could not be read or parsed."""

    def __init__(self, message: str = "Could not load bets", details: Any | None = None) -> None:
        super().__init__(code="load_error", message=message, exit_code=3, details=details)


class MissingDataError(AppError):
    """Bet file parsed but lacks a required key or field."""

    def __init__(self, message: str = "Missing required data", details: Any | None = None) -> None:
        super().__init__(code="missing_data", message=message, exit_code=4, details=details)


class WriteError(AppError):
    """Report could not be written."""

    def __init__(self, message: str = "Could not write report", details: Any | None = None) -> None:
        super().__init__(code="write_error", message=message, exit_code=5, details=details)


class ConfigError(AppError):
    """Invalid configuration value."""

    def __init__(self, message: str = "Invalid configuration", details: Any | None = None) -> None:
        super().__init__(code="config_error", message=message, exit_code=6, details=details)
