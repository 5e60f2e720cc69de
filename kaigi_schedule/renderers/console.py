"""Plain-text timetable summary, printed by the CLI."""

from rich.console import Console
from rich.table import Table

from kaigi_schedule.models import Event, Schedule, SessionEvent
from kaigi_schedule.renderers.timeline import split_day, highlighted_sessions

TITLE = "# RubyKaigi 2025 Timetable Summary"

# Width of "HH:MM-HH:MM"; repeated slots print this many spaces instead
TIME_COLUMN_WIDTH = 11

console = Console()


def format_event_line(event: Event, time_display: str) -> str:
    if not isinstance(event, SessionEvent):
        return f"{time_display} | {event.title}"
    meta_info = f" ({', '.join(event.meta)})" if event.meta else ""
    return f"{time_display} | {event.title}{meta_info} - {event.speaker_names}"


def render_section(heading: str, events: list[Event]) -> list[str]:
    lines = ["", f"### {heading}"]
    last_time_slot = ""
    for event in events:
        time_display = event.time_slot if event.time_slot != last_time_slot else " " * TIME_COLUMN_WIDTH
        last_time_slot = event.time_slot
        lines.append(format_event_line(event, time_display))

        if isinstance(event, SessionEvent) and event.description:
            lines.append(f"{' ' * TIME_COLUMN_WIDTH} | {event.description}")
    return lines


def render_highlights(schedule: Schedule) -> list[str]:
    lines = ["", "## Highlighted Sessions"]
    for day_id, day in schedule.items():
        keynotes = highlighted_sessions(day.events)
        if not keynotes:
            continue

        lines.append("")
        lines.append(f"### {day_id.upper()} Keynotes:")
        for keynote in keynotes:
            lines.append(f"- {keynote.time_slot}: {keynote.title} - {keynote.speaker_names}")
            if keynote.description:
                lines.append(f"  {keynote.description}")
    return lines


def render_summary(schedule: Schedule) -> str:
    """Console summary: per day morning/afternoon listings, then keynotes."""
    lines = [TITLE]
    for day_id, day in schedule.items():
        lines.append("")
        lines.append(f"## {day_id.upper()}: {day.date}")

        morning, afternoon = split_day(day.events)
        lines.extend(render_section("Morning", morning))
        lines.extend(render_section("Afternoon", afternoon))

    lines.extend(render_highlights(schedule))
    return "\n".join(lines) + "\n"


def print_summary(schedule: Schedule) -> None:
    """Print the summary verbatim: no markup, highlighting or :emoji: codes."""
    console.print(
        render_summary(schedule),
        markup=False, highlight=False, emoji=False, soft_wrap=True, end="",
    )


def print_stats(schedule: Schedule) -> None:
    """Print per-day counts as a table."""
    table = Table(title=f"Schedule Statistics ({schedule.session_count} sessions)")
    table.add_column("Day", style="cyan")
    table.add_column("Date", style="green")
    table.add_column("Venues", justify="right")
    table.add_column("Sessions", style="magenta", justify="right")
    table.add_column("Breaks", justify="right")
    table.add_column("Keynotes", style="yellow", justify="right")

    for day_id, day in schedule.items():
        table.add_row(
            day_id.upper(),
            day.date,
            str(len(day.venues)),
            str(len(day.sessions)),
            str(len(day.breaks)),
            str(len(highlighted_sessions(day.events))),
        )

    console.print(table)
