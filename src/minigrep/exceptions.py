"""
Exception hierarchy for minigrep.

Every error is fatal: argument problems surface as ConfigError subclasses,
failures to load the target file as FileReadError.
"""

from enum import Enum
from typing import Any, Dict, Optional


class MinigrepError(Exception):
    """Base exception for all minigrep errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize the exception.

        Args:
            message: Human-readable error description
            details: Optional dictionary with additional context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigErrorKind(Enum):
    """Reasons an argument list cannot be turned into a configuration."""
    MISSING_QUERY = "missing_query"
    MISSING_FILE_PATH = "missing_file_path"


class ConfigError(MinigrepError):
    """Raised when required positional arguments are absent."""

    kind: ConfigErrorKind

    def __init__(self, kind: ConfigErrorKind, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
        self.kind = kind


class MissingQueryError(ConfigError):
    """No query token was found after flag extraction."""

    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            ConfigErrorKind.MISSING_QUERY,
            "not enough arguments: missing query",
            details
        )


class MissingFilePathError(ConfigError):
    """No file path token was found after flag extraction."""

    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            ConfigErrorKind.MISSING_FILE_PATH,
            "not enough arguments: missing file path",
            details
        )


class FileReadError(MinigrepError):
    """Raised when the target file cannot be opened, read or decoded."""

    def __init__(self, path: str, reason: str):
        """
        Initialize the read error.

        Args:
            path: Path that was being read
            reason: Text of the underlying failure
        """
        super().__init__(f"cannot read {path}: {reason}", {"path": path})
        self.path = path
