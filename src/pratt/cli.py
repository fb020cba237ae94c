"""
Pratt CLI.

Commands:
- convert: Convert infix expressions to postfix
- check: Run input/expected cases (pratt.toml or the reference table)
- operators: Show the operator table
"""

from __future__ import annotations

import logging
import os
import platform
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from pratt._version import get_version
from pratt.core.manifest import MANIFEST_NAME, ManifestError, ProjectManifest, load_manifest
from pratt.core.operators import OPERATORS, PREFIX_OPERATOR
from pratt.core.parser import try_parse
from pratt.harness import REFERENCE_CASES, run_cases

logger = logging.getLogger(__name__)

console = Console()

app = typer.Typer(
    help="Pratt – convert infix expressions to postfix (reverse-Polish) notation",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"pratt {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def resolve_manifest(manifest: str | None) -> ProjectManifest:
    """Load an explicit manifest, else ./pratt.toml if present, else defaults.

    Exits with code 1 if an explicit manifest is missing or any manifest is invalid.
    """
    if manifest is None:
        path = Path(MANIFEST_NAME)
        if not path.exists():
            return ProjectManifest()
    else:
        path = Path(manifest)
        if not path.exists():
            typer.echo(f"Manifest not found: {path}", err=True)
            raise typer.Exit(code=1)

    try:
        project = load_manifest(path)
    except ManifestError as e:
        typer.echo(f"Invalid manifest: {e}", err=True)
        raise typer.Exit(code=1)
    logger.debug("loaded %s: %d cases", path, len(project.cases))
    return project


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version information",
    ),
    log_level: str = typer.Option(
        os.getenv("LOG_LEVEL", "WARNING"),
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ...); defaults to $LOG_LEVEL",
    ),
) -> None:
    """Pratt CLI main callback for global options."""
    configure_logging(log_level)


@app.command(name="convert")
def convert_command(
    expressions: list[str] = typer.Argument(..., help="Infix expressions, e.g. '(a+b)*c'"),
    capacity: int | None = typer.Option(
        None, "--capacity", "-c", min=1, help="Output capacity, end marker included"
    ),
    manifest: str | None = typer.Option(
        None, "--manifest", "-m", help=f"Path to {MANIFEST_NAME} (default: ./{MANIFEST_NAME})"
    ),
) -> None:
    """Convert infix expressions to postfix. Stops at the first invalid expression."""
    config = resolve_manifest(manifest).parser
    limit = capacity if capacity is not None else config.capacity

    for source in expressions:
        outcome = try_parse(source, limit)
        error = outcome.to_error()
        if error is not None:
            typer.echo(error.format_with_source(source), err=True)
            raise typer.Exit(code=1)
        typer.echo(f"{source} -> {outcome.output}")


@app.command(name="check")
def check_command(
    manifest: str | None = typer.Option(
        None, "--manifest", "-m", help=f"Path to {MANIFEST_NAME} (default: ./{MANIFEST_NAME})"
    ),
    reference: bool = typer.Option(
        False, "--reference", "-r", help="Run the built-in reference cases even if cases are configured"
    ),
) -> None:
    """Run input/expected cases and report pass/fail."""
    project = resolve_manifest(manifest)
    cases = list(REFERENCE_CASES) if reference or not project.cases else project.cases

    report = run_cases(cases, project.parser.capacity)

    table = Table(title="Parse cases")
    table.add_column("Input")
    table.add_column("Expected")
    table.add_column("Actual")
    table.add_column("Result")
    for result in report.results:
        verdict = "[green]PASS[/green]" if result.passed else "[red]FAIL[/red]"
        table.add_row(result.case.input, result.expected_text, result.actual_text, verdict)
    console.print(table)

    for result in report.failures:
        typer.echo(f"FAILURE: {result.describe()}")

    if not report.passed:
        console.print("[red]FAILURE!![/red]")
        raise typer.Exit(code=1)
    console.print("[green]SUCCESS!![/green]")


@app.command(name="operators")
def operators_command() -> None:
    """Show operator precedence and associativity."""
    table = Table(title="Operators")
    table.add_column("Operator")
    table.add_column("Precedence", justify="right")
    table.add_column("Associativity")
    for op in sorted(OPERATORS.values(), key=lambda o: (o.precedence, o.symbol)):
        table.add_row(op.symbol, str(op.precedence), op.associativity.value)
    table.add_row(PREFIX_OPERATOR, "prefix", "n/a")
    console.print(table)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
