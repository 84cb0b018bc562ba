"""CLI interface for fieldcheck using Typer framework."""

import json as jsonlib
import logging
from pathlib import Path
from typing import Annotated, Any, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from fieldcheck import __description__, __version__
from fieldcheck.config import FieldcheckConfig, load_config
from fieldcheck.errors import FieldCheckError, ValidationError
from fieldcheck.examples import sample_product
from fieldcheck.report import ValidationReport
from fieldcheck.rules import default_registry
from fieldcheck.schema import MappingRecord, schema_from_mapping
from fieldcheck.validator import Validator

app = typer.Typer(
    name="fieldcheck",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()


def _setup_logging(config: FieldcheckConfig) -> None:
    root = logging.getLogger("fieldcheck")
    root.handlers.clear()
    root.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    root.setLevel(config.logging.python_level)


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"fieldcheck version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
) -> None:
    """fieldcheck - Declarative field validation for structured records."""


@app.command()
def rules() -> None:
    """List registered validation rules."""
    table = Table(title="Registered Rules")
    table.add_column("Rule", style="cyan", no_wrap=True)
    table.add_column("Applies To", style="white")
    table.add_column("Message", style="dim")

    for rule in default_registry:
        applies_to = "any" if rule.value_type is object else rule.value_type.__name__
        table.add_row(rule.name, applies_to, rule.message)

    console.print(table)


def _print_report(report: ValidationReport, format: str) -> None:
    if format == "json":
        typer.echo(jsonlib.dumps(report.to_dict(), indent=2))
        return

    status_color = "green" if report.ok else "red"
    console.print(f"[{status_color}]Validation Status: {report.status.value.upper()}[/{status_color}]")

    if report.violations:
        table = Table()
        table.add_column("Field", style="cyan", no_wrap=True)
        table.add_column("Rule", style="white", no_wrap=True)
        table.add_column("Message", style="white")
        for violation in report.violations:
            table.add_row(violation.field, violation.rule, violation.message)
        console.print(table)
    else:
        console.print("[green]No violations found![/green]")


def _run(record: Any, silent: bool, config: FieldcheckConfig, format: str) -> None:
    try:
        report = Validator(
            record,
            silent,
            use_declared_names=config.validation.use_declared_names,
        ).validate()
    except ValidationError as e:
        if format == "json":
            typer.echo(jsonlib.dumps({
                "status": "fail",
                "exit_code": 1,
                "error": {"field": e.field, "rule": e.rule, "message": e.message},
            }, indent=2))
        else:
            console.print(f"[red]Validation failed:[/red] {e}")
        raise typer.Exit(1)
    except FieldCheckError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    _print_report(report, format)
    raise typer.Exit(report.exit_code)


def _load_settings(config: Optional[Path], silent: Optional[bool], format: str) -> tuple[FieldcheckConfig, bool]:
    valid_formats = ["table", "json"]
    if format not in valid_formats:
        console.print(f"[red]Error:[/red] Invalid format '{format}'. Must be one of: {', '.join(valid_formats)}")
        raise typer.Exit(2)

    try:
        settings = load_config(config)
    except FieldCheckError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    _setup_logging(settings)
    return settings, settings.validation.fail_silently if silent is None else silent


@app.command()
def check(
    record_path: Annotated[
        Path,
        typer.Argument(help="Path to a JSON file holding the record")
    ],
    schema: Annotated[
        Path,
        typer.Option("--schema", "-s", help="JSON file mapping field names to rule tags")
    ],
    silent: Annotated[
        Optional[bool],
        typer.Option("--silent/--strict", help="Collect violations instead of stopping at the first one")
    ] = None,
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: table, json (default: table)")
    ] = "table",
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .fieldcheck.json)")
    ] = None,
) -> None:
    """Validate a JSON record against a JSON field schema."""
    settings, silent = _load_settings(config, silent, format)

    try:
        with open(record_path, encoding="utf-8") as f:
            data = jsonlib.load(f)
        with open(schema, encoding="utf-8") as f:
            declarations = jsonlib.load(f)
        if not isinstance(declarations, dict):
            raise ValueError("schema file must contain a JSON object")
        record_schema = schema_from_mapping(declarations)
    except (OSError, ValueError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    # non-object JSON is passed through so the validator reports its kind
    record = MappingRecord(data, record_schema) if isinstance(data, dict) else data
    _run(record, silent, settings, format)


@app.command()
def demo(
    quantity: Annotated[
        int,
        typer.Option("--quantity", "-q", help="Quantity of the sample product")
    ] = 5,
    silent: Annotated[
        Optional[bool],
        typer.Option("--silent/--strict", help="Collect violations instead of stopping at the first one")
    ] = None,
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: table, json (default: table)")
    ] = "table",
) -> None:
    """Validate the built-in sample product."""
    settings, silent = _load_settings(None, silent, format)
    _run(sample_product(quantity=quantity), silent, settings, format)


if __name__ == "__main__":
    app()
