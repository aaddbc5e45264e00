"""Tests for dependency analysis entry points."""

import time
from pathlib import Path
from unittest.mock import patch

import pytest

from classdeps.analysis import (
    DependencyAnalyzer,
    ExtractionOptions,
    FileErrorKind,
    get_class_dependencies,
    get_package_dependencies,
    get_project_dependencies,
)
from classdeps.analysis.aggregator import ReportAggregator
from classdeps.analysis.models import ClassDepsReport, FileReport
from classdeps.core.config.settings import AnalysisSettings
from classdeps.core.exceptions.errors import SourceReadError, StructuralError


@pytest.fixture
def options() -> ExtractionOptions:
    """Create options that exclude the build directory."""
    return ExtractionOptions(excluded_dirs=["build"])


class TestClassDependencies:
    """Tests for single-file extraction."""

    def test_single_file(self, java_project: Path):
        """Test extracting a file with a nested class."""
        reports = get_class_dependencies(java_project / "app" / "Main.java")

        assert len(reports) == 1
        main = reports[0]
        assert main.qualified_name == "app.Main"
        assert main.class_deps == ["Service", "lib.Service"]
        assert main.nested_classes[0].class_deps == ["Formatter", "lib.Service"]

    def test_missing_file_raises(self, temp_dir: Path):
        """Test that a failed single-file lookup raises with the path."""
        with pytest.raises(SourceReadError) as exc_info:
            get_class_dependencies(temp_dir / "Nope.java")
        assert "Nope.java" in exc_info.value.message


class TestPackageDependencies:
    """Tests for directory-scoped aggregation."""

    def test_deduplicated_across_files(self, temp_dir: Path):
        """Test that the same type in two files is reported once."""
        (temp_dir / "A.java").write_text("class A { Foo foo; }")
        (temp_dir / "B.java").write_text("class B { Foo foo; }")

        report = get_package_dependencies(temp_dir)

        assert report.package_name == str(temp_dir)
        assert report.package_deps == ["Foo"]
        assert report.file_count == 2
        assert not report.has_errors

    def test_own_deps_only(self, java_project: Path):
        """Test that nested-class dependencies are not included."""
        report = get_package_dependencies(java_project / "app")

        assert report.package_deps == ["Service", "lib.Service"]
        assert "Formatter" not in report.package_deps

    def test_subdirectories_ignored(self, java_project: Path):
        """Test that files in subdirectories are not processed."""
        report = get_package_dependencies(java_project / "lib")

        assert report.package_deps == ["BaseService"]
        assert report.file_count == 1
        assert report.errors == []

    def test_parse_error_recorded(self, java_project: Path):
        """Test that a broken file is listed as an error."""
        report = get_package_dependencies(java_project / "lib" / "broken")

        assert report.package_deps == []
        assert report.file_count == 0
        assert len(report.errors) == 1
        assert report.errors[0].kind == FileErrorKind.PARSE
        assert report.errors[0].file_path.endswith("Broken.java")

    def test_not_a_directory(self, java_project: Path):
        """Test that a file path is rejected."""
        with pytest.raises(SourceReadError):
            get_package_dependencies(java_project / "app" / "Main.java")


class TestProjectDependencies:
    """Tests for recursive aggregation."""

    def test_project(self, java_project: Path, options: ExtractionOptions):
        """Test the full tree with a malformed file and an excluded directory."""
        report = get_project_dependencies(java_project, options)

        assert report.project_folder == str(java_project)
        assert report.project_deps == ["BaseService", "Formatter", "Service", "lib.Service"]
        assert report.file_count == 3
        assert [Path(e.file_path).name for e in report.errors] == ["Broken.java"]
        assert report.errors[0].kind == FileErrorKind.PARSE

    def test_superset_of_package(self, java_project: Path):
        """Test that project scope adds exactly the nested-class dependencies."""
        app = java_project / "app"
        package = get_package_dependencies(app)
        project = get_project_dependencies(app)

        nested: set[str] = set()
        for report in get_class_dependencies(app / "Main.java"):
            for cls in report.nested_classes:
                nested.update(cls.get_dependencies())

        assert project.project_deps == sorted(set(package.package_deps) | nested)

    def test_worker_count_does_not_change_result(self, java_project: Path):
        """Test that concurrent and sequential scans agree."""
        serial = get_project_dependencies(java_project, ExtractionOptions(max_workers=1))
        parallel = get_project_dependencies(java_project, ExtractionOptions(max_workers=8))

        assert serial.project_deps == parallel.project_deps
        assert serial.errors == parallel.errors

    def test_unreadable_file_recorded(self, java_project: Path, options: ExtractionOptions):
        """Test that read failures are recorded as io errors."""
        analyzer = DependencyAnalyzer(options)
        original = analyzer.processor.read_source

        def flaky_read(file_path: Path) -> str:
            if file_path.name == "Util.java":
                raise SourceReadError("Permission denied", file_path=str(file_path))
            return original(file_path)

        with patch.object(analyzer.processor, "read_source", side_effect=flaky_read):
            report = analyzer.get_project_dependencies(java_project)

        kinds = {Path(e.file_path).name: e.kind for e in report.errors}
        assert kinds == {"Util.java": FileErrorKind.IO, "Broken.java": FileErrorKind.PARSE}
        assert report.file_count == 2

    def test_structural_error_propagates(self, java_project: Path, options: ExtractionOptions):
        """Test that grammar mismatches abort the scan."""
        analyzer = DependencyAnalyzer(options)

        with patch.object(
            analyzer.processor.extractor,
            "extract_classes",
            side_effect=StructuralError("class_declaration without a name"),
        ):
            with pytest.raises(StructuralError):
                analyzer.get_project_dependencies(java_project)

    def test_structural_error_cancels_pending_files(self, temp_dir: Path):
        """Test that files still queued are not processed after a fatal error."""
        for i in range(20):
            (temp_dir / f"C{i:02d}.java").write_text(f"class C{i:02d} {{ }}")
        analyzer = DependencyAnalyzer(ExtractionOptions(max_workers=1))
        calls: list[Path] = []

        def process(file_path: Path):
            calls.append(file_path)
            if len(calls) == 1:
                raise StructuralError("class_declaration without a name")
            time.sleep(0.05)
            return FileReport(file_path=str(file_path))

        with patch.object(analyzer.processor, "process_file", side_effect=process):
            with pytest.raises(StructuralError):
                analyzer.get_project_dependencies(temp_dir)

        assert len(calls) < 20

    def test_oversized_file_recorded(self, temp_dir: Path):
        """Test that files over the size limit appear in errors."""
        (temp_dir / "Small.java").write_text("class Small { Gadget g; }")
        (temp_dir / "Big.java").write_text("class Big { Widget w; }\n" + "// padding\n" * 50)

        report = get_project_dependencies(temp_dir, ExtractionOptions(max_file_size=200))

        assert report.project_deps == ["Gadget"]
        assert report.file_count == 1
        assert [Path(e.file_path).name for e in report.errors] == ["Big.java"]
        assert report.errors[0].kind == FileErrorKind.IO
        assert "too large" in report.errors[0].message

    def test_build_named_package_scanned(self, temp_dir: Path):
        """Test that a package named like a build directory contributes with default settings."""
        package_dir = temp_dir / "src" / "com" / "acme" / "build"
        package_dir.mkdir(parents=True)
        (package_dir / "Task.java").write_text("package com.acme.build;\nclass Task { Widget w; }")

        options = ExtractionOptions.from_settings(AnalysisSettings())
        report = get_project_dependencies(temp_dir, options)

        assert report.project_deps == ["Widget"]
        assert report.file_count == 1

    def test_empty_tree(self, temp_dir: Path):
        """Test a directory without source files."""
        report = get_project_dependencies(temp_dir)
        assert report.project_deps == []
        assert report.file_count == 0


class TestReportAggregator:
    """Tests for ReportAggregator merge policies."""

    def _file(self) -> FileReport:
        return FileReport(
            file_path="A.java",
            classes=[
                ClassDepsReport(
                    class_name="A",
                    class_deps=["Own"],
                    nested_classes=[ClassDepsReport(class_name="N", class_deps=["Nested"])],
                )
            ],
        )

    def test_package_scope(self):
        """Test that package scope ignores nested classes."""
        aggregator = ReportAggregator("pkg", recursive=False)
        aggregator.add_file(self._file())
        assert aggregator.package_report().package_deps == ["Own"]

    def test_project_scope(self):
        """Test that project scope flattens nested classes."""
        aggregator = ReportAggregator("root", recursive=True)
        aggregator.add_file(self._file())
        aggregator.add_file(self._file())
        report = aggregator.project_report()
        assert report.project_deps == ["Nested", "Own"]
        assert report.file_count == 2

    def test_errors_sorted_by_path(self):
        """Test deterministic error ordering."""
        aggregator = ReportAggregator("root", recursive=True)
        aggregator.add_error("b/B.java", FileErrorKind.IO, "gone")
        aggregator.add_error("a/A.java", FileErrorKind.PARSE, "bad")
        assert [e.file_path for e in aggregator.project_report().errors] == ["a/A.java", "b/B.java"]
