"""Language-specific class extractors."""

from .base import ClassExtractorBase
from .java_extractor import JavaClassExtractor

__all__ = [
    "ClassExtractorBase",
    "JavaClassExtractor",
]
