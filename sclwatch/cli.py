"""
Inspector de línea de comandos para el SCL de mensajes de correo.

Lee ficheros .eml o volcados de cabeceras, extrae el SCL de las cabeceras
X-Forefront-Antispam-Report y lo muestra en una tabla.
"""

import logging
from pathlib import Path
from typing import List

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .headers import headers_from_file
from .scl import describe_scl, extract_scl

app = typer.Typer(
    name="scl-watch",
    help="Inspect the Spam Confidence Level of email messages",
    add_completion=False,
)
console = Console()
logger = logging.getLogger(__name__)


def setup_logging(log_level: str) -> None:
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level.upper())
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))


@app.callback()
def main(
    log_level: str = typer.Option(
        "warning",
        "--log-level",
        "-l",
        help="Logging level (debug, info, warning, error)",
    ),
):
    """Inspect the Spam Confidence Level of email messages."""
    setup_logging(log_level)


@app.command()
def inspect(
    files: List[Path] = typer.Argument(..., help="Message files (.eml or header dumps; export .msg files to one of these first)"),
    raw: bool = typer.Option(False, "--raw", "-r", help="Show the sanitized raw header"),
):
    """Extract and classify the SCL of each message.

    Outlook .msg files are not read directly: save them as .eml or dump
    their transport headers to a text file first.
    """
    table = Table(title="Spam Confidence Level")
    table.add_column("File", style="cyan")
    table.add_column("SCL", justify="right")
    table.add_column("Description")
    table.add_column("Header", style="dim")
    if raw:
        table.add_column("Raw header", style="dim")

    failed = 0
    for path in files:
        try:
            headers = headers_from_file(path)
        except OSError as e:
            console.print(f"[red]Error:[/red] Cannot read {escape(str(path))}: {escape(str(e))}")
            failed += 1
            continue

        logger.debug("Read %d header names from %s", len(headers), path)
        result = extract_scl(headers)
        if result is None:
            row = [escape(path.name), "-", "[yellow]no SCL header[/yellow]", "-"]
            if raw:
                row.append("-")
        else:
            row = [escape(path.name), str(result.score), result.description, result.header_source]
            if raw:
                row.append(escape(result.raw_header))
        table.add_row(*row)

    if table.row_count:
        console.print(table)
    if failed:
        raise typer.Exit(1)


@app.command()
def describe(score: int = typer.Argument(..., help="SCL value (use -- before negative values)")):
    """Print the category of an SCL value."""
    console.print(describe_scl(score))


if __name__ == "__main__":
    app()
