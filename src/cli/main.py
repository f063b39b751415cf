"""CLI principal (Typer).

Por qué Typer:
- Opciones tipadas y ayuda generada sin escribir parsers a mano.
- La CLI solo orquesta: lee input, llama al pipeline y delega en los sinks.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from adapters.address_source import read_addresses
from adapters.csv_exporter import export_valid_csv
from adapters.json_exporter import export_run_json
from adapters.text_exporter import export_valid_text
from cli import doctor
from cli.logging_setup import configure_logging
from cli.ui_components import (
    build_summary_table,
    format_result_line,
    format_summary,
    print_banner,
    printable,
)
from core.config import AppSettings
from core.domain.errors import AzCheckError
from core.domain.models import CheckResult, PipelineResult
from core.services.probe_pipeline import PipelineHooks, check_address, check_addresses

app = typer.Typer(
    no_args_is_help=True,
    help="Checks whether email addresses exist on Microsoft / Azure without submitting login attempts.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def _write_sinks(
    result: PipelineResult,
    *,
    output: Path | None,
    csv_path: Path | None,
    json_path: Path | None,
    append: bool,
    csv_header: bool,
) -> list[Path]:
    written: list[Path] = []
    if output:
        written.append(export_valid_text(aggregate=result.aggregate, output_path=output, append=append))
    if csv_path:
        written.append(export_valid_csv(aggregate=result.aggregate, output_path=csv_path, header=csv_header))
    if json_path:
        written.append(export_run_json(result=result, output_path=json_path))
    return written


@app.command()
def check(
    ctx: typer.Context,
    email: Optional[str] = typer.Option(None, "--email", "-e", help="Email address to be validated."),
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", help="File containing email addresses to be validated, one per line."
    ),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Text output file for valid addresses."),
    csv_path: Optional[Path] = typer.Option(None, "--csv", help="CSV output file (index,address) for valid addresses."),
    json_path: Optional[Path] = typer.Option(None, "--json", help="JSON dump of the whole run."),
    append: bool = typer.Option(False, "--append", help="Append to the text output file instead of recreating it."),
    csv_header: Optional[bool] = typer.Option(
        None, "--csv-header/--no-csv-header", help="Write an 'index,address' header row."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show the VALID/INVALID/UNKNOWN result of every address."
    ),
    concurrency: Optional[int] = typer.Option(
        None, "--concurrency", min=1, help="Maximum probes in flight (default: unbounded)."
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", min=0.1, help="Per-request timeout in seconds (default: none)."
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level for stderr."),
    no_banner: bool = typer.Option(False, "--no-banner", help="Do not print the banner."),
) -> None:
    """Validate a single address (--email) or a list of addresses (--file)."""

    if email is None and file is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=0)

    overrides: dict[str, object] = {}
    if concurrency is not None:
        overrides["max_concurrency"] = concurrency
    if timeout is not None:
        overrides["http_timeout_seconds"] = timeout
    if log_level is not None:
        overrides["log_level"] = log_level
    if csv_header is not None:
        overrides["csv_header"] = csv_header
    try:
        settings = AppSettings(**overrides)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    configure_logging(settings.log_level)

    single = email is not None
    try:
        if single:
            assert email is not None
            result = asyncio.run(check_address(settings=settings, address=email))
        else:
            assert file is not None
            addresses = read_addresses(file)
            if not no_banner:
                print_banner(_console)
            hooks = PipelineHooks(on_start=_print_start, on_result=_print_result) if verbose else None
            result = asyncio.run(check_addresses(settings=settings, addresses=addresses, hooks=hooks))

        written = _write_sinks(
            result,
            output=output,
            csv_path=csv_path,
            json_path=json_path,
            append=append,
            csv_header=settings.csv_header,
        )
    except AzCheckError as exc:
        _err_console.print(f"[red]Error:[/red] {escape(printable(str(exc)))}", soft_wrap=True)
        raise typer.Exit(code=1) from exc

    if single:
        _print_result(result.results[0])
        return

    if verbose:
        _console.print(build_summary_table(result.aggregate))
    _console.print(format_summary(result.aggregate, written), soft_wrap=True)


def _print_start(count: int) -> None:
    _console.print(f"Checking {count} address(es)...", style="dim", markup=False)


def _print_result(result: CheckResult) -> None:
    _console.print(format_result_line(result), soft_wrap=True)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
