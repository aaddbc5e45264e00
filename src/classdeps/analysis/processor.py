"""Single-file processing: read, parse and extract class reports."""

from pathlib import Path

from classdeps.core.exceptions.errors import SourceReadError
from classdeps.core.logger.logger import get_logger

from .languages.base import ClassExtractorBase
from .languages.java_extractor import JavaClassExtractor
from .models import ExtractionOptions, FileReport
from .syntax_tree import SyntaxTreeAdapter

logger = get_logger(__name__)


class FileProcessor:
    """Turns one source file into a FileReport.

    Holds no per-file state, so a single instance can be shared by worker
    threads.
    """

    def __init__(
        self,
        options: ExtractionOptions | None = None,
        adapter: SyntaxTreeAdapter | None = None,
        extractor: ClassExtractorBase | None = None,
    ) -> None:
        """Initialize the processor.

        Args:
            options: Extraction options.
            adapter: Syntax tree adapter. Built from options if not provided.
            extractor: Class extractor. Built from options if not provided.
        """
        self.options = options or ExtractionOptions()
        self.adapter = adapter or SyntaxTreeAdapter(strict=self.options.strict_parse)
        self.extractor = extractor or JavaClassExtractor(self.options.declaration_kinds)

    def read_source(self, file_path: Path) -> str:
        """Read a source file, trying each configured encoding in turn.

        Args:
            file_path: Path to the source file.

        Returns:
            Decoded source text.

        Raises:
            SourceReadError: If the file cannot be read or decoded, or is
                larger than ``max_file_size``.
        """
        try:
            size = file_path.stat().st_size
            if size > self.options.max_file_size:
                raise SourceReadError(
                    f"File too large: {file_path} is {size} bytes "
                    f"(limit {self.options.max_file_size})",
                    file_path=str(file_path),
                    details={"size": size},
                )
            raw = file_path.read_bytes()
        except OSError as e:
            raise SourceReadError(
                f"Failed to read {file_path}: {e.strerror or e}",
                file_path=str(file_path),
            ) from e

        for encoding in self.options.encodings:
            try:
                return raw.decode(encoding)
            except (UnicodeDecodeError, LookupError):
                continue

        raise SourceReadError(
            f"Failed to decode {file_path} with any of {self.options.encodings}",
            file_path=str(file_path),
        )

    def process_file(self, file_path: Path | str) -> FileReport:
        """Process a source file.

        Args:
            file_path: Path to the source file.

        Returns:
            Report with the top-level class trees of the file.

        Raises:
            SourceReadError: If the file cannot be read.
            SourceParseError: If the file does not parse.
        """
        file_path = Path(file_path)
        return self.process_source(self.read_source(file_path), str(file_path))

    def process_source(self, source: str, file_path: str = "<source>") -> FileReport:
        """Process source text.

        Args:
            source: Source code content.
            file_path: Path for reference.

        Returns:
            Report with the top-level class trees of the source.
        """
        content = source.encode("utf-8")
        tree = self.adapter.parse(content, file_path)
        root = tree.root_node

        package = self.extractor.extract_package(root, content)
        imports = self.extractor.extract_imports(root, content)
        classes = self.extractor.extract_classes(root, content, imports, package or "")

        logger.debug(f"{file_path}: {len(classes)} top-level classes, {len(imports)} imports")

        return FileReport(file_path=file_path, package=package, classes=classes)
