"""Tree-sitter adapter producing Java concrete syntax trees."""

from functools import lru_cache
from typing import Any

import tree_sitter_java as tsjava
from tree_sitter import Language, Parser, Tree

from classdeps.core.exceptions.errors import ConfigurationError, SourceParseError
from classdeps.core.logger.logger import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def load_java_grammar() -> Language:
    """Load the Java grammar once per process.

    Returns:
        The tree-sitter Java language.

    Raises:
        ConfigurationError: If the grammar cannot be loaded.
    """
    try:
        # tree-sitter 0.25+ requires wrapping the language capsule
        language = Language(tsjava.language())
    except Exception as e:
        raise ConfigurationError(
            "Failed to load the tree-sitter Java grammar",
            config_key="tree_sitter_java",
            details={"error": str(e)},
        ) from e
    logger.debug("Loaded tree-sitter Java grammar")
    return language


def node_text(content: bytes, node: Any) -> str:
    """Get text content of a node.

    Args:
        content: Full source code as bytes.
        node: Tree-sitter node.

    Returns:
        Text content of the node.
    """
    return content[node.start_byte : node.end_byte].decode("utf-8", errors="replace")


class SyntaxTreeAdapter:
    """Parses Java source text with a shared, read-only grammar.

    The grammar is shared between threads. A new ``Parser`` is created for
    every call, so one adapter can serve concurrent parses.
    """

    def __init__(self, language: Language | None = None, strict: bool = True) -> None:
        """Initialize the adapter.

        Args:
            language: Grammar to parse with. Defaults to the process-wide Java grammar.
            strict: Reject trees that contain syntax-error nodes.
        """
        self.language = language if language is not None else load_java_grammar()
        self.strict = strict

    def parse(self, content: bytes, file_path: str | None = None) -> Tree:
        """Parse source bytes into a syntax tree.

        Args:
            content: Source code as UTF-8 bytes.
            file_path: Path used in error messages.

        Returns:
            Tree-sitter tree object.

        Raises:
            SourceParseError: If parsing fails or, in strict mode, the tree has errors.
        """
        try:
            tree = Parser(self.language).parse(content)
        except Exception as e:
            raise SourceParseError(
                f"Failed to parse {file_path or '<source>'}: {e}",
                file_path=file_path,
            ) from e

        if tree is None:
            raise SourceParseError(
                f"Parser returned no tree for {file_path or '<source>'}",
                file_path=file_path,
            )

        if self.strict and tree.root_node.has_error:
            line = _first_error_line(tree.root_node)
            raise SourceParseError(
                f"Syntax error in {file_path or '<source>'} near line {line}",
                file_path=file_path,
                details={"line": line},
            )

        return tree


def _first_error_line(node: Any) -> int:
    """Find the 1-based line of the first error or missing node."""
    if node.type == "ERROR" or node.is_missing:
        return node.start_point[0] + 1
    for child in node.children:
        if child.has_error or child.is_missing:
            return _first_error_line(child)
    return node.start_point[0] + 1
