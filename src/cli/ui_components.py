"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Los reporters de terminal solo leen el agregado, nunca lo modifican.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import Aggregate, CheckResult, Outcome

_OUTCOME_STYLES: dict[Outcome, str] = {
    Outcome.VALID: "green",
    Outcome.INVALID: "red",
    Outcome.UNKNOWN: "yellow",
}


def print_banner(console: Console) -> None:
    title = Text("azcheck", style="bold cyan")
    subtitle = Text("Microsoft / Azure account validation • no login attempts", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def printable(value: str) -> str:
    """Sustituye surrogates (bytes no-UTF-8 de argv) por `\\udcXX` para la terminal."""

    return value.encode("utf-8", errors="backslashreplace").decode("utf-8")


def format_result_line(result: CheckResult) -> Text:
    """`<address> - VALID|INVALID|UNKNOWN|ERROR (motivo)`."""

    line = Text(f"{printable(result.address)} - ")
    if result.failed:
        line.append("ERROR", style="magenta")
        line.append(f" ({result.error})", style="dim")
    else:
        assert result.outcome is not None
        line.append(result.outcome.label(), style=_OUTCOME_STYLES[result.outcome])
    return line


def format_summary(aggregate: Aggregate, written: Sequence[Path]) -> Text:
    destination = ", ".join(f"'{p}'" for p in written) if written else "'No file specified'"
    text = Text(
        f"Validation completed: {aggregate.valid} valid emails out of "
        f"{aggregate.processed} processed. Results saved to {destination}"
    )
    if aggregate.failed:
        text.append(f" ({aggregate.failed} probe(s) failed)", style="magenta")
    return text


def build_summary_table(aggregate: Aggregate) -> Table:
    table = Table(title="Summary")
    table.add_column("Outcome", style="cyan", no_wrap=True)
    table.add_column("Count", justify="right")
    table.add_row("VALID", str(aggregate.valid), style="green")
    table.add_row("INVALID", str(aggregate.invalid), style="red")
    table.add_row("UNKNOWN", str(aggregate.unknown), style="yellow")
    table.add_row("ERROR", str(aggregate.failed), style="magenta")
    table.add_row("TOTAL", str(aggregate.total), style="bold")
    return table
