"""SmartDate CLI commands.

Thin front end over the engine for trying out inputs from a terminal:
    smartdate parse "next friday 2pm"
    smartdate suggest "tom" --time
    smartdate due "tomorrow 5pm" --now 2024-01-17T10:30
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from smartdate.configuration.settings import resolve_settings
from smartdate.display.due_dates import due_date_status
from smartdate.display.formatters import (
    confidence_percent_text,
    confidence_style_tier,
    format_for_editing,
)
from smartdate.errors import InvalidReferenceTimeError, SmartDateError, format_error_for_cli
from smartdate.parsing.parser import SmartDateParser
from smartdate.suggestions.engine import SuggestionEngine

console = Console()
cli = typer.Typer(help="SmartDate natural-language date tools")

_TIER_COLORS = {"high": "green", "medium": "yellow", "low": "dark_orange"}


@cli.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Interpret free-form dates and suggest completions."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(name)s: %(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


def _fail(error: SmartDateError) -> NoReturn:
    typer.echo(format_error_for_cli(error))
    raise typer.Exit(code=1)


def _reference_time(now: Optional[str]) -> Optional[datetime]:
    if now is None:
        return None
    try:
        return datetime.fromisoformat(now)
    except ValueError as exc:
        raise InvalidReferenceTimeError(f"Not an ISO timestamp: {now!r}", details={"now": now}) from exc


def _parser(config: Optional[Path]) -> SmartDateParser:
    return SmartDateParser(resolve_settings(config))


def _confidence_cell(confidence: float) -> str:
    color = _TIER_COLORS[confidence_style_tier(confidence).value]
    return f"[{color}]{confidence_percent_text(confidence)}[/{color}]"


@cli.command("parse")
def parse_command(
    text: str = typer.Argument(..., help="Text to interpret, e.g. 'tomorrow 7am'"),
    now: Optional[str] = typer.Option(None, "--now", help="Reference time (ISO 8601)"),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to settings JSON"),
    output_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """Interpret TEXT as a date/time with a confidence score."""
    try:
        reference_time = _reference_time(now)
        parser = _parser(config)
    except SmartDateError as exc:
        _fail(exc)

    result = parser.parse(text, reference_time)
    if result is None:
        typer.echo("No date recognised")
        raise typer.Exit(code=1)

    if output_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
        return

    table = Table(title="Parse Result", show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Input", escape(result.original_input))
    table.add_row("Date", format_for_editing(result.date, include_time=True))
    table.add_row("Confidence", _confidence_cell(result.confidence))
    for family, matched in result.parsed_components.to_dict().items():
        table.add_row(family.capitalize(), escape(str(matched)))
    console.print(table)


@cli.command("suggest")
def suggest_command(
    text: str = typer.Argument("", help="Partial input typed so far"),
    time_enabled: bool = typer.Option(False, "--time", help="Include time-of-day suggestions"),
    now: Optional[str] = typer.Option(None, "--now", help="Reference time (ISO 8601)"),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to settings JSON"),
    output_json: bool = typer.Option(False, "--json", help="Print suggestions as JSON"),
) -> None:
    """Rank completions for partial TEXT."""
    try:
        reference_time = _reference_time(now)
        engine = SuggestionEngine(_parser(config))
    except SmartDateError as exc:
        _fail(exc)

    suggestions = engine.suggest(text, time_enabled=time_enabled, reference_time=reference_time)

    if output_json:
        typer.echo(json.dumps([s.to_dict() for s in suggestions], indent=2))
        return

    if not suggestions:
        typer.echo("No suggestions")
        return

    table = Table(title="Suggestions")
    table.add_column("Value", style="cyan")
    table.add_column("Preview")
    table.add_column("Confidence", justify="right")
    table.add_column("Category")
    for suggestion in suggestions:
        table.add_row(
            escape(suggestion.value),
            suggestion.preview,
            _confidence_cell(suggestion.confidence),
            suggestion.category.value,
        )
    console.print(table)


@cli.command("due")
def due_command(
    text: str = typer.Argument(..., help="Due date as free-form text"),
    now: Optional[str] = typer.Option(None, "--now", help="Reference time (ISO 8601)"),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to settings JSON"),
    output_json: bool = typer.Option(False, "--json", help="Print the status as JSON"),
) -> None:
    """Classify the date in TEXT as overdue, due today, due soon or not due."""
    try:
        reference_time = _reference_time(now)
        parser = _parser(config)
    except SmartDateError as exc:
        _fail(exc)

    reference_time = reference_time or parser.clock()
    due = parser.parse_date(text, reference_time)
    if due is None:
        typer.echo("No date recognised")
        raise typer.Exit(code=1)

    status = due_date_status(due, reference_time)
    if output_json:
        typer.echo(json.dumps(status.to_dict(), indent=2))
        return
    typer.echo(f"{status.text} ({status.status.value})")
