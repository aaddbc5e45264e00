"""Exception definitions module."""

from classdeps.core.exceptions.errors import (
    ClassDepsError,
    ConfigurationError,
    SourceFileError,
    SourceParseError,
    SourceReadError,
    StructuralError,
)

__all__ = [
    "ClassDepsError",
    "ConfigurationError",
    "SourceFileError",
    "SourceReadError",
    "SourceParseError",
    "StructuralError",
]
