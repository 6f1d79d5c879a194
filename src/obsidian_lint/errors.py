"""Error types for obsidian-lint.

Every failure that aborts a run is a LintError carrying a stable error code,
so the CLI can report it as text or, with --json-errors, as structured JSON.
Filesystem errors are wrapped with context and chained to the original
exception; no partial result is ever returned alongside an error.
"""

from __future__ import annotations

import json
from enum import StrEnum
from pathlib import Path
from typing import Any


class ErrorCode(StrEnum):
    """Stable identifiers for programmatic error handling."""

    VAULT_NOT_FOUND = "VAULT_NOT_FOUND"
    SCAN_FAILED = "SCAN_FAILED"
    INDEX_BUILD_FAILED = "INDEX_BUILD_FAILED"
    DOCUMENT_READ_FAILED = "DOCUMENT_READ_FAILED"
    UNSUPPORTED_FORMAT = "UNSUPPORTED_FORMAT"
    INTERNAL_ERROR = "INTERNAL_ERROR"


def format_error_json(code: str, message: str, details: dict[str, Any] | None = None) -> str:
    """Format an error as a JSON string."""
    error: dict[str, Any] = {"code": str(code), "message": message}
    if details:
        error["details"] = details
    return json.dumps({"error": error}, default=str)


class LintError(Exception):
    """Base class for errors that abort a lint run."""

    code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        error: dict[str, Any] = {"code": str(self.code), "message": self.message}
        if self.details:
            error["details"] = self.details
        return {"error": error}

    def to_json(self) -> str:
        return format_error_json(self.code, self.message, self.details)


class PipelineError(LintError):
    """Raised when the validation pipeline cannot complete."""


class ScanError(PipelineError):
    """Raised when the vault tree cannot be enumerated."""

    code = ErrorCode.SCAN_FAILED

    def __init__(self, path: Path | str, message: str) -> None:
        self.path = Path(path)
        super().__init__(f"{path}: {message}", {"path": str(path)})


class VaultNotFoundError(ScanError):
    """Raised when the vault root is missing or is not a directory."""

    code = ErrorCode.VAULT_NOT_FOUND


class DocumentReadError(PipelineError):
    """Raised when a note cannot be read or decoded."""

    code = ErrorCode.DOCUMENT_READ_FAILED

    def __init__(self, path: Path | str, message: str) -> None:
        self.path = Path(path)
        super().__init__(f"{path}: {message}", {"path": str(path)})


class IndexBuildError(PipelineError):
    """Raised when the vault index cannot be constructed."""

    code = ErrorCode.INDEX_BUILD_FAILED


class UnsupportedFormatError(LintError):
    """Raised when an unknown output format is requested."""

    code = ErrorCode.UNSUPPORTED_FORMAT

    def __init__(self, name: str, supported: tuple[str, ...]) -> None:
        self.name = name
        super().__init__(
            f"invalid format: {name} (must be {' or '.join(repr(s) for s in supported)})",
            {"format": name, "supported": list(supported)},
        )
