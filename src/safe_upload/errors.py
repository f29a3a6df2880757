"""Exception types raised by safe-upload."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import CommandResult


class SafeUploadError(Exception):
    """Base exception for safe-upload errors."""

    pass


class UsageError(SafeUploadError):
    """Raised when the command line is missing or has invalid arguments."""

    pass


class ToolNotFoundError(SafeUploadError):
    """Raised when the git executable is missing or does not respond."""

    pass


class PathInspectionError(SafeUploadError):
    """Raised when a single path cannot be inspected during a scan."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Error checking path: {path} ({reason})")


class CommandFailureError(SafeUploadError):
    """Raised when an external command exits nonzero or cannot be started."""

    def __init__(
        self,
        command: list[str],
        result: CommandResult | None = None,
        reason: str | None = None,
    ) -> None:
        self.command = command
        self.result = result
        message = f"Command failed: {' '.join(command)}"
        if reason:
            message = f"{message} ({reason})"
        elif result is not None:
            message = f"{message} (exit status {result.returncode})"
        super().__init__(message)
