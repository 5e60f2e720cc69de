"""Markdown rendering of the timetable."""

from kaigi_schedule.models import Event, Schedule, SessionEvent, Speaker
from kaigi_schedule.renderers.timeline import split_day, highlighted_sessions

TITLE = "# RubyKaigi 2025 Timetable Summary"


# Characters that would end the link text or destination early
LINK_TEXT_SPECIALS = "\\[]()"
LINK_URL_ESCAPES = {" ": "%20", "(": "%28", ")": "%29", "<": "%3C", ">": "%3E"}


def escape_link_text(text: str) -> str:
    return "".join(f"\\{c}" if c in LINK_TEXT_SPECIALS else c for c in text)


def escape_link_url(url: str) -> str:
    return "".join(LINK_URL_ESCAPES.get(c, c) for c in url)


def format_title(session: SessionEvent) -> str:
    if session.link:
        return f"[{escape_link_text(session.title)}]({escape_link_url(session.link)})"
    return session.title


def format_speaker(speaker: Speaker) -> list[str]:
    """Nested bullets for an enriched speaker, nothing for a bare one."""
    if not speaker.has_profile:
        return []

    line = f"  - {speaker.name}"
    if speaker.id:
        line += f" ({speaker.id})"
    if speaker.sns and speaker.sns.present:
        line += ": " + ", ".join(f"[{label}]({url})" for label, url in speaker.sns.present)

    lines = [line]
    if speaker.bio:
        lines.append(f"    - {speaker.bio}")
    return lines


def format_event(event: Event) -> list[str]:
    if not isinstance(event, SessionEvent):
        return [f"- **{event.time_slot}** {event.title}"]

    meta_info = f" ({', '.join(event.meta)})" if event.meta else ""
    venue_info = f" at {event.venue}" if event.venue else ""
    lines = [
        f"- **{event.time_slot}** {format_title(event)}{meta_info} - {event.speaker_names}{venue_info}"
    ]
    if event.description:
        lines.append(f"  - {event.description}")
    for speaker in event.speakers:
        lines.extend(format_speaker(speaker))
    return lines


def render_markdown(schedule: Schedule) -> str:
    """Full Markdown document. Writing it to disk is left to the caller."""
    lines = [TITLE, ""]

    for day_id, day in schedule.items():
        lines.append(f"## {day_id.upper()}: {day.date}")
        lines.append("")

        morning, afternoon = split_day(day.events)
        lines.append("### Morning")
        for event in morning:
            lines.extend(format_event(event))

        lines.append("")
        lines.append("### Afternoon")
        for event in afternoon:
            lines.extend(format_event(event))
        lines.append("")

    lines.append("## Highlighted Sessions")
    lines.append("")
    for day_id, day in schedule.items():
        keynotes = highlighted_sessions(day.events)
        if not keynotes:
            continue

        lines.append(f"### {day_id.upper()} Keynotes")
        for keynote in keynotes:
            venue_info = f" at {keynote.venue}" if keynote.venue else ""
            lines.append(
                f"- **{keynote.time_slot}** {format_title(keynote)} - {keynote.speaker_names}{venue_info}"
            )
            if keynote.description:
                lines.append(f"  - {keynote.description}")
        lines.append("")

    return "\n".join(lines) + "\n"
