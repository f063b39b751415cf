"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio
from typing import Optional

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.credential_type import CredentialTypeProber
from adapters.http_client import build_async_client
from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.domain.errors import ProbeError
from core.domain.models import Outcome

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

# Dominio reservado (RFC 2606): nunca corresponde a una cuenta real.
_CANARY_ADDRESS = "azcheck-doctor@example.invalid"


async def _check_endpoint(
    settings: AppSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> tuple[str, str]:
    """Sondea una dirección inexistente y comprueba que el marcador se reconoce."""

    async with build_async_client(settings, transport=transport) as client:
        try:
            outcome = await CredentialTypeProber(client, settings).probe(_CANARY_ADDRESS)
        except ProbeError as exc:
            return "FAIL", exc.reason
    if outcome is Outcome.UNKNOWN:
        return "WARN", "Response matched no marker; the provider format may have changed"
    return "OK", f"Canary classified as {outcome.label()}"


@app.command()
def run() -> None:
    """Run baseline diagnostics against the configured endpoint."""

    settings = AppSettings()

    table = Table(title="azcheck Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Endpoint", "OK", settings.endpoint_url)
    table.add_row(
        "Timeout",
        "OK",
        f"{settings.http_timeout_seconds}s" if settings.http_timeout_seconds else "none",
    )
    table.add_row("Concurrency", "OK", str(settings.max_concurrency or "unbounded"))
    env_file = get_user_env_file()
    table.add_row("User config", "OK" if env_file.exists() else "OPTIONAL", str(env_file))

    status, detail = asyncio.run(_check_endpoint(settings))
    table.add_row("Endpoint probe", status, detail)

    _console.print(table)


@app.command(name="set")
def set_config(
    endpoint: Optional[str] = typer.Option(None, "--endpoint", help="GetCredentialType endpoint URL."),
    timeout: Optional[float] = typer.Option(None, "--timeout", min=0.1, help="Per-request timeout (seconds)."),
    concurrency: Optional[int] = typer.Option(None, "--concurrency", min=1, help="Maximum probes in flight."),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Default logging level."),
) -> None:
    """Store defaults in the user config .env."""

    values: dict[str, str] = {}
    if endpoint is not None:
        values["AZCHECK_ENDPOINT_URL"] = endpoint
    if timeout is not None:
        values["AZCHECK_HTTP_TIMEOUT_SECONDS"] = str(timeout)
    if concurrency is not None:
        values["AZCHECK_MAX_CONCURRENCY"] = str(concurrency)
    if log_level is not None:
        values["AZCHECK_LOG_LEVEL"] = log_level.upper()

    if not values:
        raise typer.BadParameter("nothing to store; pass at least one option")

    env_path = write_user_env_vars(values)
    _console.print(f"[green]Saved config to:[/green] {env_path}")
