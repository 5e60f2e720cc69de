"""Ordering policy shared by every renderer."""

import re

from kaigi_schedule.models import Event, SessionEvent

NOON = 12
TIME_PATTERN = re.compile(r"(\d{1,2}):(\d{2})")

# Sort key for a start time that does not look like HH:MM
UNPARSEABLE_TIME = 24 * 60


def start_time(time_slot: str) -> str:
    """'10:00' from '10:00-10:30'."""
    return time_slot.split("-")[0].strip()


def start_minutes(time_slot: str) -> int:
    """Minutes since midnight of the slot's start. Unparseable times sort last."""
    match = TIME_PATTERN.match(start_time(time_slot))
    if not match:
        return UNPARSEABLE_TIME
    return int(match.group(1)) * 60 + int(match.group(2))


def sort_events(events: list[Event]) -> list[Event]:
    """Stable ascending sort on start time."""
    return sorted(events, key=lambda e: start_minutes(e.time_slot))


def split_day(events: list[Event]) -> tuple[list[Event], list[Event]]:
    """Sort events, then split into (morning, afternoon) at noon."""
    morning: list[Event] = []
    afternoon: list[Event] = []
    for event in sort_events(events):
        if start_minutes(event.time_slot) < NOON * 60:
            morning.append(event)
        else:
            afternoon.append(event)
    return morning, afternoon


def highlighted_sessions(events: list[Event]) -> list[SessionEvent]:
    """Keynote sessions in document order."""
    return [e for e in events if isinstance(e, SessionEvent) and e.is_keynote]
