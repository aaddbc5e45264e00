"""Source file discovery."""

from collections.abc import Iterator
from pathlib import Path

from classdeps.core.logger.logger import get_logger

from .models import ExtractionOptions

logger = get_logger(__name__)


def _is_candidate(file_path: Path, options: ExtractionOptions) -> bool:
    """Check extension and file type of a single entry.

    Size is not checked here: oversized files are rejected by the file
    processor so that they show up in the report's errors.
    """
    if file_path.suffix.lower() not in options.extensions:
        return False

    try:
        return file_path.is_file()
    except OSError as e:
        logger.debug(f"Skipping unreadable entry {file_path}: {e}")
        return False


def find_source_files(root_path: Path, options: ExtractionOptions | None = None) -> Iterator[Path]:
    """Find all source files under a directory, recursively.

    Unreadable directories and broken links are skipped. A directory is
    pruned when its name is in ``options.excluded_dirs``, at any depth below
    the root; the root itself is never pruned.

    Args:
        root_path: Root directory to search.
        options: Extraction options.

    Yields:
        Paths to source files.
    """
    options = options or ExtractionOptions()
    excluded_dirs = set(options.excluded_dirs)

    for file_path in root_path.rglob("*"):
        relative_parts = file_path.relative_to(root_path).parts[:-1]
        if any(part in excluded_dirs for part in relative_parts):
            continue

        if _is_candidate(file_path, options):
            yield file_path


def list_source_files(dir_path: Path, options: ExtractionOptions | None = None) -> list[Path]:
    """List source files directly inside a directory (non-recursive).

    Args:
        dir_path: Directory to list.
        options: Extraction options.

    Returns:
        Sorted paths to source files.
    """
    options = options or ExtractionOptions()

    try:
        entries = list(dir_path.iterdir())
    except OSError as e:
        logger.warning(f"Cannot list {dir_path}: {e}")
        return []

    return sorted(p for p in entries if _is_candidate(p, options))
