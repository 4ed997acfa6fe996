"""Rich terminal output for the CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from formatkit.core.models import HandlerInfo, ParseStrategy, ValidationResult

console = Console()
err_console = Console(stderr=True)

_STRATEGY_STYLES: dict[str, str] = {
    ParseStrategy.PARSER.value: "bold green",
    ParseStrategy.HEURISTIC.value: "bold yellow",
}


def setup_logging(verbose: bool) -> None:
    """Route log records through rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def print_error(msg: str) -> None:
    """Print an error message."""
    err_console.print(f"[bold red]Error:[/] {msg}")


def print_validation(result: ValidationResult, language: str) -> None:
    """Print a one-line validity verdict."""
    verdict = Text()
    if result.is_valid:
        verdict.append(" VALID ", style="bold white on green")
        verdict.append(f" Your {language.upper()} code is valid.")
    else:
        verdict.append(" INVALID ", style="bold white on red")
        verdict.append(f" {result.error_message}")
    console.print(verdict)


def print_languages(handlers: list[HandlerInfo]) -> None:
    """Print the capability matrix."""
    table = Table(title="Supported Languages", show_lines=False)
    table.add_column("Language", style="bold")
    table.add_column("Validation")
    table.add_column("Description")

    for info in handlers:
        style = _STRATEGY_STYLES.get(info.strategy.value, "")
        table.add_row(
            info.language.value,
            Text(info.strategy.value.upper(), style=style),
            info.description,
        )

    console.print(table)
    console.print(
        "\n  [dim]Heuristic handlers report every non-empty input as valid.[/]"
    )
