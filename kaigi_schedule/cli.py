"""CLI for the RubyKaigi schedule scraper."""

import asyncio
import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console

from kaigi_schedule.enrichers import BASE_URL
from kaigi_schedule.errors import FetchError
from kaigi_schedule.extractors.fetch import DEFAULT_TIMEOUT
from kaigi_schedule.pipeline import SCHEDULE_URL, run_pipeline, layout_warning
from kaigi_schedule.renderers import print_stats, print_summary, render_json, render_markdown

# Load environment variables (override=True to beat shell env vars)
load_dotenv(override=True)

app = typer.Typer(
    name="kaigi-schedule",
    help="Fetch the RubyKaigi 2025 timetable and summarize it",
    add_completion=False,
)
console = Console()


def write_output(path: Path, content: str, kind: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    console.print(f"[green]Saved {kind} to {path}[/green]")


@app.command()
def main(
    markdown: Optional[Path] = typer.Option(None, "--markdown", metavar="FILE", help="Save a Markdown summary"),
    json_file: Optional[Path] = typer.Option(None, "--json", metavar="FILE", help="Save the schedule as JSON"),
    url: Optional[str] = typer.Option(
        None, "--url",
        help=f"Schedule page URL (default: KAIGI_SCHEDULE_URL env var or {SCHEDULE_URL})"
    ),
    fetch_details: bool = typer.Option(
        False, "--fetch-details",
        help="Fetch each presentation page for descriptions, bios and social links (slow)"
    ),
    base_url: Optional[str] = typer.Option(
        None, "--base-url",
        help=f"Presentation page origin (default: KAIGI_BASE_URL env var or {BASE_URL})"
    ),
    show_stats: bool = typer.Option(False, "--stats/--no-stats", help="Show per-day statistics"),
):
    """Fetch the schedule, print a summary, and optionally save Markdown/JSON."""
    url = url or os.environ.get("KAIGI_SCHEDULE_URL", SCHEDULE_URL)
    base_url = base_url or os.environ.get("KAIGI_BASE_URL", BASE_URL)
    try:
        timeout = float(os.environ.get("KAIGI_HTTP_TIMEOUT", DEFAULT_TIMEOUT))
    except ValueError:
        console.print("[red]Error: KAIGI_HTTP_TIMEOUT must be a number of seconds[/red]")
        raise typer.Exit(1)

    try:
        schedule = asyncio.run(run_pipeline(
            url=url,
            fetch_details=fetch_details,
            base_url=base_url,
            timeout=timeout,
        ))
    except FetchError as e:
        console.print("[red]Error: could not fetch the schedule page[/red]")
        console.print(f"[dim]{e}[/dim]")
        raise typer.Exit(1)

    warning = layout_warning(schedule)
    if warning:
        console.print(f"[yellow]{warning}[/yellow]")

    print_summary(schedule)

    if show_stats:
        print_stats(schedule)

    if markdown:
        write_output(markdown, render_markdown(schedule), "Markdown")

    if json_file:
        write_output(json_file, render_json(schedule), "JSON")


if __name__ == "__main__":
    app()
