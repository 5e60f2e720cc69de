"""Presentation-page enrichment for extracted sessions.

Runs one request at a time, in schedule order, with a fixed pause after every
successful fetch so the conference site is not hammered. A failure on one
session is reported and skipped; the rest of the batch still runs.
"""

import asyncio
from dataclasses import dataclass, field
from functools import partial
from typing import Awaitable, Callable, Optional

import httpx
from bs4 import BeautifulSoup
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, BarColumn, TextColumn

from kaigi_schedule.errors import FetchError
from kaigi_schedule.extractors.details import (
    PresentationDetails,
    parse_presentation,
    presentation_url,
)
from kaigi_schedule.extractors.fetch import DEFAULT_TIMEOUT, fetch_document
from kaigi_schedule.models import Schedule, SessionEvent

console = Console()

BASE_URL = "https://rubykaigi.org"

# Pause after each successful presentation fetch (seconds)
DETAIL_FETCH_DELAY = 1.0

FetchFn = Callable[[str], Awaitable[BeautifulSoup]]


@dataclass
class EnrichmentReport:
    """Outcome of an enrichment run."""

    total: int = 0
    enriched: int = 0
    skipped: list[str] = field(default_factory=list)  # session titles
    failed: list[str] = field(default_factory=list)  # session titles


def apply_details(session: SessionEvent, details: PresentationDetails) -> SessionEvent:
    """Copy presentation data onto a session and its speakers, in place.

    Member blocks are matched to speakers by position; extra blocks are ignored.
    """
    if details.description:
        session.description = details.description

    for speaker, member in zip(session.speakers, details.members):
        if member.bio:
            speaker.bio = member.bio
        if member.sns is not None:
            speaker.sns = member.sns
    return session


async def enrich_session(
    session: SessionEvent,
    day_id: str,
    fetch: FetchFn,
    base_url: str = BASE_URL,
    delay: float = DETAIL_FETCH_DELAY,
) -> SessionEvent:
    """Fetch and apply one session's presentation page.

    Raises:
        FetchError: the page could not be retrieved
    """
    url = presentation_url(base_url, session.speakers[0].id, day_id)
    document = await fetch(url)
    await asyncio.sleep(delay)
    return apply_details(session, parse_presentation(document))


async def enrich_schedule(
    schedule: Schedule,
    base_url: str = BASE_URL,
    fetch: Optional[FetchFn] = None,
    delay: float = DETAIL_FETCH_DELAY,
    timeout: float = DEFAULT_TIMEOUT,
) -> EnrichmentReport:
    """Enrich every linked session with its presentation page.

    Args:
        schedule: Extracted schedule, mutated in place
        base_url: Origin for presentation URLs
        fetch: Async url -> document function (a shared httpx client is used otherwise)
        delay: Pause after each successful fetch
        timeout: Request timeout when using the default fetcher

    Returns:
        EnrichmentReport with counts and the titles of skipped/failed sessions
    """
    targets = [(day_id, s) for day_id, s in schedule.iter_sessions() if s.link]
    report = EnrichmentReport(total=len(targets))

    if not targets:
        console.print("[yellow]No linked sessions to enrich[/yellow]")
        return report

    client = None
    if fetch is None:
        client = httpx.AsyncClient(timeout=timeout, follow_redirects=True)
        fetch = partial(fetch_document, client=client, timeout=timeout)

    console.print(f"[cyan]Fetching presentation details for {len(targets)} sessions...[/cyan]")

    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TextColumn("{task.completed}/{task.total}"),
            console=console,
        ) as progress:
            task = progress.add_task("Enriching...", total=len(targets))

            for day_id, session in targets:
                title = escape(session.title)
                progress.update(task, description=f"{day_id}: {title[:40]}")

                if not session.speakers:
                    console.print(f"[yellow]Skipping '{title}': no speakers to build a presentation URL[/yellow]")
                    report.skipped.append(session.title)
                    progress.advance(task)
                    continue

                if not session.speakers[0].handle:
                    console.print(f"[yellow]Skipping '{title}': first speaker has no handle for a presentation URL[/yellow]")
                    report.skipped.append(session.title)
                    progress.advance(task)
                    continue

                try:
                    await enrich_session(session, day_id, fetch, base_url=base_url, delay=delay)
                    report.enriched += 1
                except FetchError as e:
                    console.print(f"[yellow]Could not fetch details for '{title}': {escape(e.reason)}[/yellow]")
                    report.failed.append(session.title)
                except Exception as e:
                    console.print(f"[yellow]Could not extract details for '{title}': {escape(str(e))}[/yellow]")
                    report.failed.append(session.title)

                progress.advance(task)
    finally:
        if client is not None:
            await client.aclose()

    console.print(
        f"[green]Enriched {report.enriched}/{report.total} sessions[/green] "
        f"[dim](skipped {len(report.skipped)}, failed {len(report.failed)})[/dim]"
    )
    return report
