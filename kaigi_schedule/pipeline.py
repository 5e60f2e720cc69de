"""Main pipeline orchestration."""

from typing import Optional

from rich.console import Console

from kaigi_schedule.enrichers import BASE_URL, enrich_schedule
from kaigi_schedule.extractors.fetch import DEFAULT_TIMEOUT, fetch_document
from kaigi_schedule.extractors.schedule import parse_schedule
from kaigi_schedule.models import Schedule

console = Console()

SCHEDULE_URL = "https://rubykaigi.org/2025/schedule/"


async def run_pipeline(
    url: str = SCHEDULE_URL,
    fetch_details: bool = False,
    base_url: str = BASE_URL,
    timeout: float = DEFAULT_TIMEOUT,
) -> Schedule:
    """Run the full data pipeline.

    1. Fetch the schedule page
    2. Extract days, venues and events
    3. Optionally enrich sessions from their presentation pages

    Raises:
        FetchError: the schedule page could not be fetched
    """
    console.print(f"[cyan]Fetching schedule from {url}...[/cyan]")
    document = await fetch_document(url, timeout=timeout)
    console.print("[dim]Schedule page fetched[/dim]")

    schedule = parse_schedule(document)
    breaks = sum(len(day.breaks) for day in schedule.days.values())
    console.print(f"[green]Extracted {schedule.session_count} sessions and {breaks} breaks[/green]")

    if fetch_details:
        await enrich_schedule(schedule, base_url=base_url, timeout=timeout)

    return schedule


def layout_warning(schedule: Schedule) -> Optional[str]:
    """Warning text when no day produced any event, else None."""
    if any(day.events for day in schedule.days.values()):
        return None
    return "No events found. The schedule page layout may have changed."
