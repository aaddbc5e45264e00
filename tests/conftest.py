"""Pytest configuration and shared fixtures."""

import shutil
import tempfile
from pathlib import Path
from typing import Generator

import pytest


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory that is cleaned up after the test.

    Yields:
        Path to the temporary directory.
    """
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def java_project(temp_dir: Path) -> Path:
    """Create a small Java source tree.

    Layout::

        project/
            app/Main.java          Main (+ nested Helper), imports lib.Service
            app/Util.java          Util
            app/notes.txt          not a source file
            lib/Service.java       Service extends BaseService
            lib/broken/Broken.java syntax error
            build/Generated.java   inside an excluded directory

    Args:
        temp_dir: Temporary directory fixture.

    Returns:
        Path to the project root.
    """
    root = temp_dir / "project"
    (root / "app").mkdir(parents=True)
    (root / "lib" / "broken").mkdir(parents=True)
    (root / "build").mkdir()

    (root / "app" / "Main.java").write_text(
        """
package app;

import lib.Service;

public class Main {
    private Service service;

    static class Helper {
        private Formatter fmt;
    }
}
""",
        encoding="utf-8",
    )
    (root / "app" / "Util.java").write_text(
        """
package app;

class Util {
    Service service;
}
""",
        encoding="utf-8",
    )
    (root / "app" / "notes.txt").write_text("class NotJava { Ignored i; }\n", encoding="utf-8")
    (root / "lib" / "Service.java").write_text(
        """
package lib;

public class Service extends BaseService {
}
""",
        encoding="utf-8",
    )
    (root / "lib" / "broken" / "Broken.java").write_text(
        "public class Broken {\n    void run( {\n",
        encoding="utf-8",
    )
    (root / "build" / "Generated.java").write_text(
        "class Generated { ShouldBeSkipped s; }\n",
        encoding="utf-8",
    )

    return root
