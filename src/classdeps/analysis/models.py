"""Data models for class dependency reports."""

from collections.abc import Iterator
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_DECLARATION_KINDS = ("class_declaration",)
ALL_DECLARATION_KINDS = (
    "class_declaration",
    "interface_declaration",
    "enum_declaration",
    "record_declaration",
)


class FileErrorKind(str, Enum):
    """Kind of per-file failure recorded by aggregate scans."""

    IO = "io"
    PARSE = "parse"


class ClassDepsReport(BaseModel):
    """Dependencies of one class declaration and its nested classes."""

    model_config = ConfigDict(frozen=True)

    class_name: str
    qualified_name: str = ""  # package.Outer.Inner
    class_deps: list[str] = Field(default_factory=list)
    nested_classes: list["ClassDepsReport"] = Field(default_factory=list)

    def get_dependencies(self) -> list[str]:
        """Get own and nested-class dependencies as one sorted, deduplicated list."""
        deps = set(self.class_deps)
        for nested in self.nested_classes:
            deps.update(nested.get_dependencies())
        return sorted(deps)

    def iter_classes(self) -> Iterator["ClassDepsReport"]:
        """Yield this report and every nested report, depth first."""
        yield self
        for nested in self.nested_classes:
            yield from nested.iter_classes()

    @property
    def class_count(self) -> int:
        """Get total class count including nested."""
        return sum(1 for _ in self.iter_classes())


class FileError(BaseModel):
    """A source file that could not be processed during an aggregate scan."""

    file_path: str
    kind: FileErrorKind
    message: str


class FileReport(BaseModel):
    """Classes extracted from a single source file."""

    file_path: str
    package: str | None = None
    classes: list[ClassDepsReport] = Field(default_factory=list)


class PackageDepsReport(BaseModel):
    """Union of own class dependencies for the files directly inside one directory."""

    package_name: str
    package_deps: list[str] = Field(default_factory=list)
    file_count: int = 0
    errors: list[FileError] = Field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """Check whether any file failed."""
        return bool(self.errors)


class ProjectDepsReport(BaseModel):
    """Union of flattened class dependencies for a whole directory tree."""

    project_folder: str
    project_deps: list[str] = Field(default_factory=list)
    file_count: int = 0
    errors: list[FileError] = Field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """Check whether any file failed."""
        return bool(self.errors)


class ExtractionOptions(BaseModel):
    """Options for dependency extraction."""

    extensions: list[str] = Field(default_factory=lambda: [".java"])
    excluded_dirs: list[str] = Field(default_factory=list)
    max_file_size: int = 1024 * 1024  # larger files become io errors
    max_workers: int = 4
    encodings: list[str] = Field(default_factory=lambda: ["utf-8", "latin-1"])
    strict_parse: bool = True
    declaration_kinds: tuple[str, ...] = DEFAULT_DECLARATION_KINDS

    @classmethod
    def from_settings(cls, settings) -> "ExtractionOptions":
        """Build options from AnalysisSettings.

        Args:
            settings: Analysis settings.

        Returns:
            Extraction options.
        """
        return cls(
            extensions=list(settings.extensions),
            excluded_dirs=list(settings.excluded_dirs),
            max_file_size=settings.max_file_size,
            max_workers=settings.max_workers,
            encodings=list(settings.encodings),
            strict_parse=settings.strict_parse,
            declaration_kinds=(
                ALL_DECLARATION_KINDS if settings.include_all_types else DEFAULT_DECLARATION_KINDS
            ),
        )
