"""Dependency analysis entry points for files, packages and projects."""

from collections.abc import Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from classdeps.core.exceptions.errors import SourceFileError, SourceReadError
from classdeps.core.logger.logger import get_logger

from .aggregator import ReportAggregator
from .models import (
    ClassDepsReport,
    ExtractionOptions,
    FileErrorKind,
    FileReport,
    PackageDepsReport,
    ProjectDepsReport,
)
from .processor import FileProcessor
from .walker import find_source_files, list_source_files

logger = get_logger(__name__)


class DependencyAnalyzer:
    """Analyzer for single files, directories and whole projects."""

    def __init__(
        self,
        options: ExtractionOptions | None = None,
        processor: FileProcessor | None = None,
    ) -> None:
        """Initialize the analyzer.

        Args:
            options: Extraction options.
            processor: File processor. Built from options if not provided.
        """
        self.options = options or ExtractionOptions()
        self.processor = processor or FileProcessor(self.options)

    def get_class_dependencies(self, file_path: Path | str) -> list[ClassDepsReport]:
        """Extract the class report trees of a single file.

        Args:
            file_path: Path to the source file.

        Returns:
            Top-level class reports in source order.

        Raises:
            SourceReadError: If the file cannot be read.
            SourceParseError: If the file does not parse.
        """
        return self.processor.process_file(Path(file_path)).classes

    def get_package_dependencies(self, dir_path: Path | str) -> PackageDepsReport:
        """Aggregate own class dependencies of the files directly inside a directory.

        Args:
            dir_path: Directory to analyze (subdirectories are ignored).

        Returns:
            Package report; failed files are listed in ``errors``.
        """
        dir_path = self._require_directory(dir_path)
        aggregator = ReportAggregator(str(dir_path), recursive=False)

        files = list_source_files(dir_path, self.options)
        self._collect(aggregator, self._process_files_sequential(files))

        report = aggregator.package_report()
        logger.info(
            f"Package {dir_path}: {report.file_count} files, "
            f"{len(report.package_deps)} dependencies, {len(report.errors)} failures"
        )
        return report

    def get_project_dependencies(self, root_path: Path | str) -> ProjectDepsReport:
        """Aggregate flattened class dependencies of a whole directory tree.

        Args:
            root_path: Root directory of the project.

        Returns:
            Project report; failed files are listed in ``errors``.
        """
        root_path = self._require_directory(root_path)
        aggregator = ReportAggregator(str(root_path), recursive=True)

        files = list(find_source_files(root_path, self.options))
        logger.info(f"Found {len(files)} source files to analyze")

        self._collect(aggregator, self._process_files_parallel(files))

        report = aggregator.project_report()
        logger.info(
            f"Project {root_path}: {report.file_count} files, "
            f"{len(report.project_deps)} dependencies, {len(report.errors)} failures"
        )
        return report

    def _collect(
        self,
        aggregator: ReportAggregator,
        results: Iterable[tuple[Path, FileReport | SourceFileError]],
    ) -> None:
        for file_path, result in results:
            if isinstance(result, SourceFileError):
                logger.warning(f"Skipping {file_path}: {result.message}")
                aggregator.add_error(str(file_path), FileErrorKind(result.kind), result.message)
            else:
                aggregator.add_file(result)

    def _process_files_sequential(
        self, files: list[Path]
    ) -> Iterator[tuple[Path, FileReport | SourceFileError]]:
        for file_path in files:
            try:
                yield file_path, self.processor.process_file(file_path)
            except SourceFileError as e:
                yield file_path, e

    def _process_files_parallel(
        self, files: list[Path]
    ) -> Iterator[tuple[Path, FileReport | SourceFileError]]:
        """Process files on a thread pool, yielding results as they complete.

        Per-file read and parse errors are yielded; any other exception
        propagates to the caller after files not yet started are cancelled.

        Args:
            files: List of file paths to process.

        Yields:
            (path, report or error) pairs in completion order.
        """
        with ThreadPoolExecutor(max_workers=self.options.max_workers) as executor:
            future_to_path = {
                executor.submit(self.processor.process_file, fp): fp for fp in files
            }

            try:
                for future in as_completed(future_to_path):
                    file_path = future_to_path[future]
                    try:
                        yield file_path, future.result()
                    except SourceFileError as e:
                        yield file_path, e
            except BaseException:
                # also reached on GeneratorExit when the consumer stops early
                executor.shutdown(wait=False, cancel_futures=True)
                raise

    @staticmethod
    def _require_directory(path: Path | str) -> Path:
        path = Path(path)
        if not path.is_dir():
            raise SourceReadError(f"Not a directory: {path}", file_path=str(path))
        return path


def get_class_dependencies(
    file_path: Path | str, options: ExtractionOptions | None = None
) -> list[ClassDepsReport]:
    """Convenience function to extract class reports from a single file.

    Args:
        file_path: Path to the file.
        options: Extraction options.

    Returns:
        Top-level class reports.
    """
    return DependencyAnalyzer(options).get_class_dependencies(file_path)


def get_package_dependencies(
    dir_path: Path | str, options: ExtractionOptions | None = None
) -> PackageDepsReport:
    """Convenience function to aggregate one directory.

    Args:
        dir_path: Directory to analyze.
        options: Extraction options.

    Returns:
        Package report.
    """
    return DependencyAnalyzer(options).get_package_dependencies(dir_path)


def get_project_dependencies(
    root_path: Path | str, options: ExtractionOptions | None = None
) -> ProjectDepsReport:
    """Convenience function to aggregate a directory tree.

    Args:
        root_path: Root directory of the project.
        options: Extraction options.

    Returns:
        Project report.
    """
    return DependencyAnalyzer(options).get_project_dependencies(root_path)
