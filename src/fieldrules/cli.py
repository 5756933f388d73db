"""CLI interface for fieldrules using Typer framework."""

import importlib
import json as jsonlib
import logging
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from fieldrules import __description__, __version__
from fieldrules.annotations import parse_rule
from fieldrules.config import FieldRulesConfig, LogLevel, load_config
from fieldrules.constants import RULE_IN, RULE_LEN, RULE_MAX, RULE_MIN
from fieldrules.errors import FieldRulesError, InvalidValidatorSyntaxError, ValidationErrors
from fieldrules.rules import RULES
from fieldrules.validator import Validator

app = typer.Typer(
    name="fieldrules",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()

RULE_DESCRIPTIONS = {
    RULE_LEN: "Text length must equal N (code points)",
    RULE_MIN: "Integer >= N, or non-empty text of length >= N",
    RULE_MAX: "Integer <= N, or non-empty text of length <= N",
    RULE_IN: "Value must equal one of the comma separated candidates",
}


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"fieldrules version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
) -> None:
    """Declarative rule validation for record fields."""
    pass


def _setup_logging(config: FieldRulesConfig, verbose: bool) -> None:
    level = logging.DEBUG if verbose else LogLevel(config.logging.level).to_logging()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_target(target: str) -> type:
    """Import a record class given as ``module:Class``."""
    module_name, separator, attr_path = target.partition(":")
    if not separator or not module_name or not attr_path:
        raise ValueError(f"Target must be 'module:Class', got: {target}")

    obj: Any = importlib.import_module(module_name)
    for attr in attr_path.split("."):
        obj = getattr(obj, attr)

    if not isinstance(obj, type):
        raise ValueError(f"Target is not a class: {target}")
    return obj


def _load_records(data_path: Path) -> list[dict[str, Any]]:
    with open(data_path, encoding="utf-8") as f:
        data = jsonlib.load(f)

    if isinstance(data, dict):
        return [data]
    if isinstance(data, list) and all(isinstance(item, dict) for item in data):
        return data
    raise ValueError("Data file must contain an object or a list of objects")


def _error_to_dict(error: FieldRulesError) -> dict[str, Any]:
    if isinstance(error, ValidationErrors):
        return error.to_dict()
    return {
        "valid": False,
        "total": 1,
        "errors": [{
            "field": None,
            "kind": type(error).__name__,
            "rule": None,
            "message": str(error),
        }],
    }


@app.command()
def check(
    target: Annotated[
        str,
        typer.Argument(help="Record class to validate, as module:Class")
    ],
    data: Annotated[
        Path,
        typer.Argument(help="JSON file with an object (or list of objects) of field values")
    ],
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: table, json (default: table)")
    ] = "table",
    config: Annotated[
        Path,
        typer.Option("--config", "-c", help="Configuration file path (default: search for .fieldrules.json)")
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging")
    ] = False,
) -> None:
    """Build records from JSON data and validate their field rules."""
    valid_formats = ["table", "json"]

    if format not in valid_formats:
        console.print(f"[red]Error:[/red] Invalid format '{format}'. Must be one of: {', '.join(valid_formats)}")
        raise typer.Exit(1)

    if config is not None and not config.exists():
        console.print(f"[red]Error:[/red] Configuration file not found: {config}")
        raise typer.Exit(1)

    try:
        fieldrules_config = load_config(config)
        _setup_logging(fieldrules_config, verbose)

        record_cls = _load_target(target)
        items = _load_records(data)
        validator = Validator(fieldrules_config)

        results: list[tuple[int, FieldRulesError | None]] = []
        for index, item in enumerate(items):
            results.append((index, validator.validate(record_cls(**item))))
    except (FileNotFoundError, ImportError, AttributeError, ValueError, TypeError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    failed = sum(1 for _, error in results if error is not None)

    if format == "json":
        payload = {
            "target": target,
            "total": len(results),
            "failed": failed,
            "records": [
                {"index": index, **(_error_to_dict(error) if error else {"valid": True, "total": 0, "errors": []})}
                for index, error in results
            ],
        }
        print(jsonlib.dumps(payload, indent=2))
    else:
        table = Table(title=f"{target} ({len(results)} records)")
        table.add_column("Record", style="cyan", justify="right")
        table.add_column("Field", style="white")
        table.add_column("Message", style="white")

        for index, error in results:
            if error is None:
                continue
            for entry in _error_to_dict(error)["errors"]:
                table.add_row(str(index), entry["field"] or "-", entry["message"])

        if failed:
            console.print(table)
            console.print(f"[red]{failed} of {len(results)} records failed validation[/red]")
        else:
            console.print(f"[green]All {len(results)} records are valid[/green]")

    raise typer.Exit(1 if failed else 0)


@app.command()
def parse(
    tag: Annotated[
        str,
        typer.Argument(help="Rule annotation, e.g. 'len:5' or 'in:a,b'")
    ],
) -> None:
    """Show how a rule annotation is parsed."""
    try:
        rule = parse_rule(tag)
    except InvalidValidatorSyntaxError as e:
        console.print(f"[red]Error:[/red] {e}: {tag!r}")
        raise typer.Exit(1)

    console.print(f"[cyan]Kind:[/cyan] {rule.kind}")
    console.print(f"[cyan]Argument:[/cyan] {rule.argument}")
    if rule.kind not in RULES:
        console.print("[yellow]Unknown rule kind, no validation will be performed[/yellow]")


@app.command()
def rules() -> None:
    """List the supported rule kinds."""
    table = Table(title="Rule kinds")
    table.add_column("Kind", style="cyan")
    table.add_column("Description", style="white")

    for kind in RULES:
        table.add_row(kind, RULE_DESCRIPTIONS[kind])

    console.print(table)


if __name__ == "__main__":
    app()
