"""CLI entry point and commands.

Provides the main CLI application with commands for:
- validate: Validate a JSON/YAML document against a schema file
- version: Show version information
"""

import json
from enum import StrEnum
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from schemavalidator import __version__
from schemavalidator.exceptions import SchemaValidatorError
from schemavalidator.logging_config import configure_logging
from schemavalidator.models import InvalidResult, ValidationResult
from schemavalidator.registry import load_document
from schemavalidator.settings import get_settings
from schemavalidator.validator import SchemaValidator

app = typer.Typer(
    name="schemavalidator",
    help="Validate JSON and YAML documents against JSON Schema draft-07 schemas",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


class OutputFormat(StrEnum):
    """Output formats of the validate command."""

    TABLE = "table"
    JSON = "json"


class LogLevel(StrEnum):
    """Console log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


@app.callback()
def main(
    log_level: Annotated[
        Optional[LogLevel],  # noqa: UP007
        typer.Option("--log-level", "-l", help="Console log level (defaults to settings)"),
    ] = None,
) -> None:
    """Validate JSON and YAML documents against JSON Schema draft-07 schemas."""
    try:
        configure_logging(log_level.value if log_level else None)
    except SchemaValidatorError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=2) from e


@app.command()
def validate(
    schema_file: Annotated[
        Path,
        typer.Argument(help="Schema file (.json, .yaml or .yml)"),
    ],
    document_file: Annotated[
        Path,
        typer.Argument(help="Document file to validate (.json, .yaml or .yml)"),
    ],
    output_format: Annotated[
        Optional[OutputFormat],  # noqa: UP007
        typer.Option("--format", "-f", help="Output format (defaults to settings)"),
    ] = None,
    show_result: Annotated[
        bool,
        typer.Option("--show-result", "-r", help="Print the validated value with defaults applied"),
    ] = False,
) -> None:
    """Validate a document against a schema.

    Exits with 0 when the document is valid, 1 when it is not and 2 when
    either file cannot be loaded or the schema is malformed.

    Examples:
        schemavalidator validate schema.json config.yaml
        schemavalidator validate schema.json config.json --format json
    """
    settings = get_settings()
    fmt = output_format or OutputFormat(settings.output_format)

    try:
        schema = load_document(schema_file)
        document = load_document(document_file)
        result = SchemaValidator(schema).validate(document)
    except SchemaValidatorError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=2) from e

    if fmt == OutputFormat.JSON:
        typer.echo(json.dumps(result.to_dict(), indent=2, default=str))
    else:
        _display_result(result, document_file, show_result, settings.max_table_rows)

    if not result.is_valid:
        raise typer.Exit(code=1)


def _display_result(
    result: ValidationResult,
    document_file: Path,
    show_result: bool,
    max_rows: int,
) -> None:
    """Render a validation result as rich output."""
    if not isinstance(result, InvalidResult):
        console.print(f"[bold green]✓ {escape(str(document_file))} is valid[/bold green]")
        if show_result:
            console.print_json(data=result.result, default=str)
        return

    violations = result.result
    if not violations:
        console.print(
            f"[bold red]✗ {escape(str(document_file))} is invalid[/bold red] "
            "[dim](no violations reported)[/dim]"
        )
        return

    table = Table(
        title=f"Violations ({len(violations)})",
        show_header=True,
    )
    table.add_column("Schema location", style="cyan")
    table.add_column("Value path", style="magenta")
    table.add_column("Reason")

    for violation in violations[:max_rows]:
        table.add_row(
            escape(violation.schema_location),
            escape(violation.value_path),
            escape(violation.reason),
        )

    console.print(f"[bold red]✗ {escape(str(document_file))} is invalid[/bold red]")
    console.print(table)
    if len(violations) > max_rows:
        console.print(f"[dim]... {len(violations) - max_rows} more violation(s) not shown[/dim]")


@app.command()
def version() -> None:
    """Show schemavalidator version information."""
    console.print(
        Panel(
            f"[bold]schemavalidator[/bold] v{__version__}\n"
            "JSON Schema draft-07 structural validator",
            title="Version",
            border_style="blue",
        )
    )


# Entry point for: python -m schemavalidator.cli.main
if __name__ == "__main__":
    app()
