"""Base class for language-specific class extractors."""

from abc import ABC, abstractmethod
from typing import Any

from ..models import ClassDepsReport


class ClassExtractorBase(ABC):
    """Abstract base class for extractors that walk a syntax tree for classes."""

    @abstractmethod
    def extract_package(self, root: Any, content: bytes) -> str | None:
        """Extract the package declaration of a file.

        Args:
            root: Root AST node.
            content: Source code content.

        Returns:
            Package name if found.
        """

    @abstractmethod
    def extract_imports(self, root: Any, content: bytes) -> list[str]:
        """Extract file-scope imports as dependency names.

        Args:
            root: Root AST node.
            content: Source code content.

        Returns:
            Import paths in declaration order.
        """

    @abstractmethod
    def extract_classes(
        self,
        node: Any,
        content: bytes,
        file_imports: list[str],
        parent_name: str = "",
    ) -> list[ClassDepsReport]:
        """Extract class reports for the class declarations directly under a node.

        Args:
            node: Root node or class body node.
            content: Source code content.
            file_imports: Imports of the enclosing file.
            parent_name: Qualified name of the enclosing scope.

        Returns:
            Class reports in source order.
        """
