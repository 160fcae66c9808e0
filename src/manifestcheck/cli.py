"""CLI interface for manifestcheck using Typer framework."""

import asyncio
import importlib
import json as jsonlib
import logging
from pathlib import Path
from typing import Annotated, Any, List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from manifestcheck import __description__, __version__
from manifestcheck.config import LogLevel, load_config
from manifestcheck.models import ManifestInfo, ValidationReport
from manifestcheck.validation import ManifestCheckError, ManifestValidator, load_validation_rules
from manifestcheck.validation.rule import rule_name

app = typer.Typer(
    name="manifestcheck",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()

_LOG_LEVELS = {
    LogLevel.ERROR.value: logging.ERROR,
    LogLevel.WARN.value: logging.WARNING,
    LogLevel.INFO.value: logging.INFO,
    LogLevel.DEBUG.value: logging.DEBUG,
}


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"manifestcheck version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
) -> None:
    """manifestcheck - Pluggable validation of web application manifests."""


def _setup_logging(level: str, verbose: bool) -> None:
    """Route library logging through rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else _LOG_LEVELS.get(level, logging.WARNING),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _import_platform_modules(names: list[str]) -> list[Any]:
    """Import platform rule packs by dotted module name."""
    modules = []
    for name in names:
        module = importlib.import_module(name)
        if not callable(getattr(module, "get_validation_rules", None)):
            raise ValueError(f"Platform module '{name}' does not define get_validation_rules(platforms)")
        modules.append(module)
    return modules


def _output_report_table(report: ValidationReport) -> None:
    status_color = "green" if report.status.value == "pass" else "yellow" if report.status.value == "warn" else "red"
    console.print(f"[{status_color}]Validation Status: {report.status.value.upper()}[/{status_color}]")
    console.print(f"Exit Code: {report.exit_code}")

    if report.results:
        console.print("\n[blue]Results:[/blue]")
        table = Table()
        table.add_column("Level", style="white")
        table.add_column("Platform", style="cyan")
        table.add_column("Member", style="cyan")
        table.add_column("Code", style="dim")
        table.add_column("Description", style="white")
        table.add_column("Data", style="dim")

        for result in report.results:
            level_color = "red" if result.level.value == "error" else "yellow"
            table.add_row(
                f"[{level_color}]{result.level.value.upper()}[/{level_color}]",
                result.platform,
                result.member,
                result.code,
                escape(result.description),
                escape(", ".join(str(item) for item in result.data))
            )

        console.print(table)
    else:
        console.print("\n[green]No issues found![/green]")

    if report.failures:
        console.print("\n[yellow]Rules that failed to run:[/yellow]")
        for failure in report.failures:
            console.print(f"- {escape(failure.rule)}: {failure.error_type}: {escape(failure.message)}")


def _output_report_markdown(report: ValidationReport) -> None:
    console.print("# Manifest Validation Report")
    console.print(f"**Status:** {report.status.value}")
    console.print(f"**Exit Code:** {report.exit_code}")
    console.print()

    if report.results:
        console.print("## Results")
        for result in report.results:
            detail = f" ({', '.join(str(item) for item in result.data)})" if result.data else ""
            console.print(
                f"- **{result.level.value.upper()}** ({result.platform}) "
                f"{result.member}: {escape(result.description + detail)}"
            )
        console.print()

    if report.failures:
        console.print("## Failed Rules")
        for failure in report.failures:
            console.print(f"- {escape(failure.rule)}: {escape(failure.message)}")


@app.command()
def validate(
    manifest: Annotated[
        Path,
        typer.Argument(help="Path to the W3C manifest JSON file")
    ],
    platform: Annotated[
        Optional[List[str]],
        typer.Option("--platform", "-p", help="Platform to validate for (repeatable, default: from config)")
    ] = None,
    platform_module: Annotated[
        Optional[List[str]],
        typer.Option("--platform-module", "-m", help="Dotted module supplying platform rules (repeatable)")
    ] = None,
    rules_dir: Annotated[
        Optional[Path],
        typer.Option("--rules-dir", help="Directory of common rules (default: built-in rules)")
    ] = None,
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: table, json, markdown (default: table)")
    ] = "table",
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .manifestcheck.json)")
    ] = None,
    fail_on_warnings: Annotated[
        bool,
        typer.Option("--fail-on-warnings", help="Exit with 1 when only warnings were found")
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging")
    ] = False,
) -> None:
    """Validate a manifest against common and platform rules."""
    valid_formats = ["table", "json", "markdown"]

    if format not in valid_formats:
        console.print(f"[red]Error:[/red] Invalid format '{format}'. Must be one of: {', '.join(valid_formats)}")
        raise typer.Exit(1)

    try:
        settings = load_config(config)
        _setup_logging(settings.logging.level, verbose)

        if fail_on_warnings:
            settings.validation.fail_on_warnings = True

        manifest_info = ManifestInfo.from_file(manifest, format=settings.validation.base_format)
        sources = _import_platform_modules(platform_module or [])

        validator = ManifestValidator(settings, rules_dir=rules_dir)
        report = asyncio.run(validator.validate(manifest_info, sources, platform or None))

    except (ManifestCheckError, FileNotFoundError, ValueError, ImportError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if format == "json":
        console.print(jsonlib.dumps(report.to_dict(), indent=2), markup=False, highlight=False, soft_wrap=True)
    elif format == "markdown":
        _output_report_markdown(report)
    else:
        _output_report_table(report)

    raise typer.Exit(report.exit_code)


@app.command()
def rules(
    platform: Annotated[
        Optional[List[str]],
        typer.Option("--platform", "-p", help="Platform whose rule folder should be included (repeatable)")
    ] = None,
    rules_dir: Annotated[
        Optional[Path],
        typer.Option("--rules-dir", help="Directory of common rules (default: built-in rules)")
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .manifestcheck.json)")
    ] = None,
) -> None:
    """List the rules a rule directory provides for the given platforms."""
    try:
        settings = load_config(config)
        _setup_logging(settings.logging.level, False)

        validator = ManifestValidator(settings, rules_dir=rules_dir)
        platforms = platform or settings.validation.platforms
        loaded = asyncio.run(load_validation_rules(validator.rules_dir, platforms))
    except (ManifestCheckError, ValueError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print(f"[green]Rules directory:[/green] {validator.rules_dir}")
    console.print(f"[green]Platforms:[/green] {', '.join(platforms) or '(none)'}")

    table = Table()
    table.add_column("#", style="dim", justify="right")
    table.add_column("Rule", style="cyan")
    for index, rule in enumerate(loaded, start=1):
        table.add_row(str(index), escape(rule_name(rule)))
    console.print(table)
    console.print(f"\n{len(loaded)} rules")


if __name__ == "__main__":
    app()
