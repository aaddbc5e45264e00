"""Class dependency analysis module.

This module extracts, for every class in a Java source tree, the names of
the types it references, and aggregates them per directory and per project.

Example usage:
    from classdeps.analysis import get_class_dependencies, get_project_dependencies

    # Single file
    for report in get_class_dependencies("src/Outer.java"):
        print(report.class_name, report.class_deps)

    # Whole tree
    project = get_project_dependencies("path/to/project")
    print(f"Dependencies: {len(project.project_deps)}")
    print(f"Failed files: {len(project.errors)}")
"""

from .aggregator import ReportAggregator, flatten
from .analyzer import (
    DependencyAnalyzer,
    get_class_dependencies,
    get_package_dependencies,
    get_project_dependencies,
)
from .languages import ClassExtractorBase, JavaClassExtractor
from .models import (
    ClassDepsReport,
    ExtractionOptions,
    FileError,
    FileErrorKind,
    FileReport,
    PackageDepsReport,
    ProjectDepsReport,
)
from .normalizer import filter_primitives, normalize_type
from .processor import FileProcessor
from .syntax_tree import SyntaxTreeAdapter, load_java_grammar
from .walker import find_source_files, list_source_files

__all__ = [
    # Data models
    "ClassDepsReport",
    "ExtractionOptions",
    "FileError",
    "FileErrorKind",
    "FileReport",
    "PackageDepsReport",
    "ProjectDepsReport",
    # Components
    "ClassExtractorBase",
    "DependencyAnalyzer",
    "FileProcessor",
    "JavaClassExtractor",
    "ReportAggregator",
    "SyntaxTreeAdapter",
    # Functions
    "filter_primitives",
    "find_source_files",
    "flatten",
    "get_class_dependencies",
    "get_package_dependencies",
    "get_project_dependencies",
    "list_source_files",
    "load_java_grammar",
    "normalize_type",
]
