"""Data models for the schedule pipeline."""

from kaigi_schedule.models.speaker import Speaker, SocialLinks
from kaigi_schedule.models.schedule import (
    Schedule,
    DaySchedule,
    Venue,
    Event,
    BreakEvent,
    SessionEvent,
    UNKNOWN_VENUE,
    KEYNOTE_MARKER,
    DEFAULT_DAY_LABELS,
    schedule_to_dict,
    schedule_from_dict,
)

__all__ = [
    "Speaker",
    "SocialLinks",
    "Schedule",
    "DaySchedule",
    "Venue",
    "Event",
    "BreakEvent",
    "SessionEvent",
    "UNKNOWN_VENUE",
    "KEYNOTE_MARKER",
    "DEFAULT_DAY_LABELS",
    "schedule_to_dict",
    "schedule_from_dict",
]
