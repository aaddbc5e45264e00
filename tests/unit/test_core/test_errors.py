"""Tests for the exception hierarchy."""

from classdeps.core.exceptions.errors import (
    ClassDepsError,
    ConfigurationError,
    SourceFileError,
    SourceParseError,
    SourceReadError,
    StructuralError,
)


class TestErrors:
    """Tests for error classes."""

    def test_str_without_details(self):
        """Test plain message rendering."""
        assert str(ClassDepsError("boom")) == "boom"

    def test_str_with_details(self):
        """Test details rendering."""
        error = ConfigurationError("bad config", config_key="analysis")
        assert str(error) == "bad config - Details: {'config_key': 'analysis'}"

    def test_file_errors(self):
        """Test per-file error kinds and paths."""
        read = SourceReadError("cannot read", file_path="A.java")
        parse = SourceParseError("cannot parse", file_path="B.java")

        assert isinstance(read, SourceFileError)
        assert isinstance(parse, SourceFileError)
        assert (read.kind, read.file_path) == ("io", "A.java")
        assert (parse.kind, parse.details["file_path"]) == ("parse", "B.java")

    def test_structural_error_not_per_file(self):
        """Test that structural errors are not per-file errors."""
        error = StructuralError("no name", node_type="class_declaration")
        assert not isinstance(error, SourceFileError)
        assert error.details == {"node_type": "class_declaration"}
