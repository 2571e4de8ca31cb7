"""
Command-line interface for MedRefer.

Runs the form validators from the terminal and renders the resulting outcome,
which is handy for checking how a given input will be treated by the service
layer before wiring it into a form.
"""

import logging
import sys
from collections.abc import Callable
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Annotated, Any, TypeAlias

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .app.config import APP_NAME, DOCUMENT_EXTENSIONS, LOG_DATE_FORMAT, LOG_FORMAT, VERSION
from .functional_types import Error, Loading, Outcome, Success
from .interop import attempt
from .validation import ValidationService

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="medrefer",
    help="🩺 Validate referral form input and inspect the resulting outcome",
    add_completion=False,
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

__version__ = VERSION


class ValidatorKind(str, Enum):
    EMAIL = "email"
    PASSWORD = "password"
    PHONE = "phone"
    NAME = "name"
    MRN = "mrn"
    AGE = "age"
    DATE_OF_BIRTH = "dob"
    ADDRESS = "address"
    ICD10 = "icd10"
    MEDICATION = "medication"
    DOSAGE = "dosage"
    FREQUENCY = "frequency"
    URL = "url"
    NUMERIC = "numeric"
    POSITIVE_NUMERIC = "positive-numeric"
    INTEGER = "integer"
    POSITIVE_INTEGER = "positive-integer"
    REQUIRED = "required"
    SANITIZE = "sanitize"
    FILE_SIZE = "file-size"
    FILE_TYPE = "file-type"


_Runner: TypeAlias = Callable[[ValidationService, str, str | None, tuple[str, ...]], Outcome[Any]]

parse_date = attempt(date.fromisoformat)

_RUNNERS: dict[ValidatorKind, tuple[_Runner, str]] = {
    ValidatorKind.EMAIL: (lambda s, v, f, a: s.validate_email(v), "Email address"),
    ValidatorKind.PASSWORD: (lambda s, v, f, a: s.validate_password(v), "Password strength"),
    ValidatorKind.PHONE: (lambda s, v, f, a: s.validate_phone_number(v), "Phone number"),
    ValidatorKind.NAME: (lambda s, v, f, a: s.validate_name(v, f or "Name"), "Person name"),
    ValidatorKind.MRN: (
        lambda s, v, f, a: s.validate_medical_record_number(v),
        "Medical record number",
    ),
    ValidatorKind.AGE: (
        lambda s, v, f, a: s.validate_integer(v, "Age").and_then_sync(s.validate_age),
        "Age in years",
    ),
    ValidatorKind.DATE_OF_BIRTH: (
        lambda s, v, f, a: parse_date(v).and_then_sync(s.validate_date_of_birth),
        "Date of birth (YYYY-MM-DD)",
    ),
    ValidatorKind.ADDRESS: (lambda s, v, f, a: s.validate_address(v), "Postal address"),
    ValidatorKind.ICD10: (lambda s, v, f, a: s.validate_icd10_code(v), "ICD-10 diagnosis code"),
    ValidatorKind.MEDICATION: (
        lambda s, v, f, a: s.validate_medication_name(v),
        "Medication name",
    ),
    ValidatorKind.DOSAGE: (lambda s, v, f, a: s.validate_dosage(v), "Dosage"),
    ValidatorKind.FREQUENCY: (lambda s, v, f, a: s.validate_frequency(v), "Dosing frequency"),
    ValidatorKind.URL: (lambda s, v, f, a: s.validate_url(v), "http(s) URL"),
    ValidatorKind.NUMERIC: (lambda s, v, f, a: s.validate_numeric(v, f or "Value"), "Any number"),
    ValidatorKind.POSITIVE_NUMERIC: (
        lambda s, v, f, a: s.validate_positive_numeric(v, f or "Value"),
        "Number greater than zero",
    ),
    ValidatorKind.INTEGER: (lambda s, v, f, a: s.validate_integer(v, f or "Value"), "Whole number"),
    ValidatorKind.POSITIVE_INTEGER: (
        lambda s, v, f, a: s.validate_positive_integer(v, f or "Value"),
        "Whole number greater than zero",
    ),
    ValidatorKind.REQUIRED: (
        lambda s, v, f, a: s.validate_required(v, f or "Field"),
        "Non-blank text",
    ),
    ValidatorKind.SANITIZE: (
        lambda s, v, f, a: s.validate_and_sanitize(v, f or "Field"),
        "Free text with markup stripped",
    ),
    ValidatorKind.FILE_SIZE: (lambda s, v, f, a: s.validate_file_size(Path(v)), "Upload size"),
    ValidatorKind.FILE_TYPE: (
        lambda s, v, f, a: s.validate_file_type(Path(v), a),
        "Upload extension",
    ),
}


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=[RichHandler(console=err_console, rich_tracebacks=True)],
        force=True,
    )


def render_outcome(outcome: Outcome[Any]) -> int:
    """Prints an outcome and returns the matching process exit code."""
    match outcome:
        case Success():
            console.print(f"[bold green]✅ {escape(str(outcome))}[/bold green]")
            return 0
        case Error(message):
            err_console.print(f"[bold red]❌ {escape(message)}[/bold red]")
            return 1
        case Loading():
            err_console.print("[yellow]⏳ Still in progress[/yellow]")
            return 1


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging",
        ),
    ] = False,
) -> None:
    """MedRefer form validation toolkit."""
    _configure_logging(verbose)


@app.command()
def validate(
    kind: Annotated[
        ValidatorKind,
        typer.Argument(
            help="Which validator to run (see the 'kinds' command)",
            metavar="KIND",
            case_sensitive=False,
        ),
    ],
    value: Annotated[
        str,
        typer.Argument(
            help="Raw input to validate",
            metavar="VALUE",
        ),
    ],
    field_name: Annotated[
        str | None,
        typer.Option(
            "--field-name",
            "-f",
            help="Label used in error messages for generic validators",
        ),
    ] = None,
    allow: Annotated[
        list[str] | None,
        typer.Option(
            "--allow",
            help="Allowed file extension for 'file-type' (repeatable)",
        ),
    ] = None,
) -> None:
    """
    Validate a single VALUE with the KIND validator.

    Exits with status 0 when the input is accepted and 1 when it is rejected.

    Examples:

        medrefer validate email "Jane.Doe@Example.com"

        medrefer validate positive-integer 0 --field-name Quantity
    """
    runner, _ = _RUNNERS[kind]
    extensions = tuple(allow) if allow else DOCUMENT_EXTENSIONS
    outcome = runner(ValidationService(), value, field_name, extensions)
    raise typer.Exit(render_outcome(outcome))


@app.command()
def kinds() -> None:
    """List the available validators."""
    table = Table(title="Validators", show_header=True, header_style="bold cyan")
    table.add_column("Kind", style="green")
    table.add_column("Checks")
    for kind, (_, description) in _RUNNERS.items():
        table.add_row(kind.value, description)
    console.print(table)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(
        Panel(
            f"[bold blue]🩺 {APP_NAME}[/bold blue]\n\n"
            f"Version: [green]{__version__}[/green]\n"
            f"Python: [yellow]{sys.version.split()[0]}[/yellow]",
            title="About",
            border_style="blue",
        )
    )


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
