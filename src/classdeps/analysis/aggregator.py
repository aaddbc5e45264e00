"""Merging per-file class reports into package and project reports."""

from .models import (
    ClassDepsReport,
    FileError,
    FileErrorKind,
    FileReport,
    PackageDepsReport,
    ProjectDepsReport,
)


def flatten(report: ClassDepsReport) -> list[str]:
    """Flatten a class report with all nested classes into one sorted set."""
    return report.get_dependencies()


class ReportAggregator:
    """Accumulates file reports into one dependency set.

    Package scope unions each top-level class's own ``class_deps``;
    project scope unions the flattened dependencies of every class.
    Set union makes the result independent of arrival order.
    """

    def __init__(self, scope_name: str, recursive: bool) -> None:
        """Initialize the aggregator.

        Args:
            scope_name: Directory path identifying the package or project.
            recursive: Flatten nested classes (project scope).
        """
        self.scope_name = scope_name
        self.recursive = recursive
        self._deps: set[str] = set()
        self._errors: list[FileError] = []
        self._file_count = 0

    def add_file(self, file_report: FileReport) -> None:
        """Merge the classes of one processed file.

        Args:
            file_report: Report of a successfully processed file.
        """
        for cls in file_report.classes:
            if self.recursive:
                self._deps.update(flatten(cls))
            else:
                self._deps.update(cls.class_deps)
        self._file_count += 1

    def add_error(self, file_path: str, kind: FileErrorKind, message: str) -> None:
        """Record a file that could not be processed.

        Args:
            file_path: Path of the failed file.
            kind: Failure kind.
            message: Human-readable message.
        """
        self._errors.append(FileError(file_path=file_path, kind=kind, message=message))

    @property
    def dependencies(self) -> list[str]:
        """Get the accumulated dependencies, sorted."""
        return sorted(self._deps)

    def _sorted_errors(self) -> list[FileError]:
        return sorted(self._errors, key=lambda e: e.file_path)

    def package_report(self) -> PackageDepsReport:
        """Build the package-scope report."""
        return PackageDepsReport(
            package_name=self.scope_name,
            package_deps=self.dependencies,
            file_count=self._file_count,
            errors=self._sorted_errors(),
        )

    def project_report(self) -> ProjectDepsReport:
        """Build the project-scope report."""
        return ProjectDepsReport(
            project_folder=self.scope_name,
            project_deps=self.dependencies,
            file_count=self._file_count,
            errors=self._sorted_errors(),
        )
