"""Schedule models: days, venues and the break/session event union."""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from kaigi_schedule.models.speaker import Speaker

UNKNOWN_VENUE = "Unknown Venue"
KEYNOTE_MARKER = "Keynote"

# Seed labels, replaced by the day tabs when the page provides them
DEFAULT_DAY_LABELS = {
    "day1": "Apr 16",
    "day2": "Apr 17",
    "day3": "Apr 18",
}


class Venue(BaseModel):
    """A room column in a day's timetable."""

    name: str
    tag: str = ""  # e.g. "#rubykaigiA"


class BreakEvent(BaseModel):
    """A row spanning all rooms: lunch, coffee break, ..."""

    type: Literal["break"] = "break"
    time_slot: str = Field(description="'HH:MM-HH:MM'")
    title: str


class SessionEvent(BaseModel):
    """A talk in one room at one time slot."""

    type: Literal["session"] = "session"
    time_slot: str = Field(description="'HH:MM-HH:MM'")
    title: str
    venue: str = UNKNOWN_VENUE
    meta: list[str] = Field(
        default_factory=list,
        description="Tag texts in page order: ['EN', 'Keynote']"
    )
    speakers: list[Speaker] = Field(default_factory=list)
    link: Optional[str] = Field(
        default=None,
        description="href of the presentation page as found in the grid"
    )

    # ===== ENRICHMENT (presentation page) =====
    description: Optional[str] = None

    @property
    def speaker_names(self) -> str:
        return ", ".join(s.name for s in self.speakers)

    @property
    def is_keynote(self) -> bool:
        return any(KEYNOTE_MARKER in m for m in self.meta)


Event = Annotated[Union[BreakEvent, SessionEvent], Field(discriminator="type")]


class DaySchedule(BaseModel):
    """One conference day."""

    date: str
    venues: list[Venue] = Field(default_factory=list)
    events: list[Event] = Field(default_factory=list)

    @property
    def sessions(self) -> list[SessionEvent]:
        return [e for e in self.events if isinstance(e, SessionEvent)]

    @property
    def breaks(self) -> list[BreakEvent]:
        return [e for e in self.events if isinstance(e, BreakEvent)]

    def venue_at(self, index: int) -> str:
        """Venue name for a 0-based column index."""
        if 0 <= index < len(self.venues):
            return self.venues[index].name
        return UNKNOWN_VENUE


def seed_days() -> dict[str, DaySchedule]:
    """The three known days with their placeholder labels."""
    return {day_id: DaySchedule(date=label) for day_id, label in DEFAULT_DAY_LABELS.items()}


class Schedule(BaseModel):
    """Whole conference timetable, keyed by day id in day order."""

    days: dict[str, DaySchedule] = Field(default_factory=seed_days)

    def __getitem__(self, day_id: str) -> DaySchedule:
        return self.days[day_id]

    def items(self):
        return self.days.items()

    def iter_sessions(self):
        """Yield (day_id, SessionEvent) in day order, then document order."""
        for day_id, day in self.days.items():
            for event in day.events:
                if isinstance(event, SessionEvent):
                    yield day_id, event

    @property
    def session_count(self) -> int:
        return sum(len(day.sessions) for day in self.days.values())


def schedule_to_dict(schedule: Schedule) -> dict:
    """Convert Schedule to a plain dict keyed by day id, dropping unset optionals."""
    return {
        day_id: day.model_dump(mode="json", exclude_none=True)
        for day_id, day in schedule.days.items()
    }


def schedule_from_dict(data: dict) -> Schedule:
    """Rebuild a Schedule from the dict produced by schedule_to_dict."""
    return Schedule(days={
        day_id: DaySchedule.model_validate(day)
        for day_id, day in data.items()
    })
