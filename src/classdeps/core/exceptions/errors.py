"""Custom exception definitions for classdeps."""

from typing import Any


class ClassDepsError(Exception):
    """Base exception for all classdeps errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Error message.
            details: Additional error details.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class ConfigurationError(ClassDepsError):
    """Exception raised for configuration errors.

    Covers an unloadable grammar as well as a missing or invalid
    configuration file. Not recoverable: the whole run aborts.
    """

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error.

        Args:
            message: Error message.
            config_key: Configuration key that caused the error.
            details: Additional error details.
        """
        details = details or {}
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, details)


class SourceFileError(ClassDepsError):
    """Base for per-file errors that aggregate scans record and skip."""

    kind: str = "file"

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the per-file error.

        Args:
            message: Error message.
            file_path: Path of the offending source file.
            details: Additional error details.
        """
        details = details or {}
        if file_path:
            details["file_path"] = file_path
        super().__init__(message, details)
        self.file_path = file_path


class SourceReadError(SourceFileError):
    """Exception raised when a source file cannot be read or decoded."""

    kind = "io"


class SourceParseError(SourceFileError):
    """Exception raised when source text does not yield a valid syntax tree."""

    kind = "parse"


class StructuralError(ClassDepsError):
    """Exception raised when the syntax tree does not have the expected shape.

    This means the grammar and the extractor disagree, e.g. a class
    declaration without a ``name`` field. It is never caught by the
    aggregators.
    """

    def __init__(
        self,
        message: str,
        node_type: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize structural error.

        Args:
            message: Error message.
            node_type: Syntax node kind that violated the expectation.
            details: Additional error details.
        """
        details = details or {}
        if node_type:
            details["node_type"] = node_type
        super().__init__(message, details)
