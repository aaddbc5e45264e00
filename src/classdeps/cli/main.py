"""Main CLI entry point for classdeps."""

import json
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError

from classdeps import __version__
from classdeps.analysis import DependencyAnalyzer, ExtractionOptions, FileError
from classdeps.cli.display import print_json, show_error, show_file_errors, show_success
from classdeps.core.config.settings import Settings, get_settings
from classdeps.core.exceptions.errors import ClassDepsError, SourceFileError
from classdeps.core.logger.logger import setup_logging


def _build_analyzer(
    ctx: click.Context, all_types: bool, workers: int | None = None
) -> DependencyAnalyzer:
    """Build an analyzer from the loaded settings and command options."""
    settings: Settings = ctx.obj["settings"]
    analysis = settings.analysis.model_copy()
    if all_types:
        analysis.include_all_types = True
    if workers is not None:
        analysis.max_workers = workers
    return DependencyAnalyzer(ExtractionOptions.from_settings(analysis))


def _emit(data: Any, output: str | None) -> None:
    """Write JSON to a file or print it."""
    if output:
        Path(output).write_text(json.dumps(data, indent=2), encoding="utf-8")
        show_success("Report Written", f"Output written to: {output}")
    else:
        print_json(data)


def _finish(ctx: click.Context, errors: list[FileError]) -> None:
    """List skipped files and exit 1 if there were any.

    The report has already been written at this point; the exit status
    only tells scripts that it is partial.
    """
    if errors:
        show_file_errors(errors)
        ctx.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="classdeps")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML configuration file",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
def main(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """classdeps - class dependency extraction for Java source trees.

    Exit status is 0 on success, 1 when a file could not be analyzed
    (package and project reports are still written) and 2 on a
    configuration error.
    """
    try:
        settings = Settings.from_yaml(Path(config_path)) if config_path else get_settings()
    except (ClassDepsError, ValidationError) as e:
        show_error("Configuration Error", str(e))
        ctx.exit(2)

    settings = settings.model_copy(deep=True)
    if verbose:
        settings.logging.level = "DEBUG"
    setup_logging(settings.logging)

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


@main.command("class")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--all-types", is_flag=True, help="Also report interfaces, enums and records")
@click.option("--output", "-o", type=click.Path(), help="Output file for JSON report")
@click.pass_context
def class_(ctx: click.Context, path: str, all_types: bool, output: str | None) -> None:
    """Report the dependencies of every class in a single source file.

    Examples:
        classdeps class src/main/java/com/example/Outer.java
    """
    analyzer = _build_analyzer(ctx, all_types)
    try:
        reports = analyzer.get_class_dependencies(path)
    except SourceFileError as e:
        show_error("Analysis Failed", e.message)
        ctx.exit(1)

    _emit([report.model_dump(mode="json") for report in reports], output)


@main.command()
@click.argument("path", type=click.Path(exists=True, file_okay=False))
@click.option("--all-types", is_flag=True, help="Also report interfaces, enums and records")
@click.option("--output", "-o", type=click.Path(), help="Output file for JSON report")
@click.pass_context
def package(ctx: click.Context, path: str, all_types: bool, output: str | None) -> None:
    """Report the dependencies of the files directly inside a directory.

    Examples:
        classdeps package src/main/java/com/example
    """
    analyzer = _build_analyzer(ctx, all_types)
    report = analyzer.get_package_dependencies(path)

    _emit(report.model_dump(mode="json"), output)
    _finish(ctx, report.errors)


@main.command()
@click.argument("path", type=click.Path(exists=True, file_okay=False))
@click.option("--all-types", is_flag=True, help="Also report interfaces, enums and records")
@click.option("--workers", "-w", type=click.IntRange(1, 64), help="Worker threads")
@click.option("--output", "-o", type=click.Path(), help="Output file for JSON report")
@click.pass_context
def project(
    ctx: click.Context, path: str, all_types: bool, workers: int | None, output: str | None
) -> None:
    """Report the dependencies of a whole directory tree, nested classes included.

    Examples:
        classdeps project .
        classdeps project ./src -w 8 -o deps.json
    """
    analyzer = _build_analyzer(ctx, all_types, workers)
    report = analyzer.get_project_dependencies(path)

    _emit(report.model_dump(mode="json"), output)
    _finish(ctx, report.errors)


if __name__ == "__main__":
    main()
