"""Timetable extraction from the RubyKaigi schedule page.

Page structure:
- Day tabs (`.m-day-tabs__item[data-day]`) carry the display date per day
- One `.tab-pane[data-day]` per day holds a table
- Header cells (`th.m-schedule-table__room`) list the rooms, left to right
- Each `tr` has a time cell with `<time>` start/end markers, then either a
  single break cell or one `.m-schedule-table__event` cell per room

Session cells are matched to rooms purely by column position. A row that
omits a room cell shifts every later session one room to the left; nothing
in the markup lets us detect that.
"""

from typing import Optional

from bs4 import BeautifulSoup, Tag

from kaigi_schedule.models import (
    Schedule,
    DaySchedule,
    Venue,
    Event,
    BreakEvent,
    SessionEvent,
    Speaker,
)

DAY_TAB_SELECTOR = ".m-day-tabs__item"
ROOM_SELECTOR = "th.m-schedule-table__room:not(.is-blank)"
TIME_CELL_SELECTOR = ".m-schedule-table__time"
BREAK_ROW_CLASS = "m-schedule-table__break"
BREAK_TITLE_SELECTOR = ".m-schedule-table__event.is-break span"
EVENT_CELL_SELECTOR = ".m-schedule-table__event"


def _text(node: Optional[Tag]) -> str:
    return node.get_text().strip() if node is not None else ""


def _select_text(parent: Tag, selector: str) -> str:
    """Stripped text of the first node matching selector, '' if none."""
    return _text(parent.select_one(selector))


def parse_day_labels(document: BeautifulSoup, schedule: Schedule) -> None:
    """Overwrite seeded day labels with the tab texts. Unknown day ids are ignored."""
    for item in document.select(DAY_TAB_SELECTOR):
        day_id = item.get("data-day")
        if day_id in schedule.days:
            schedule.days[day_id].date = item.get_text().strip()


def find_day_pane(document: BeautifulSoup, day_id: str) -> Optional[Tag]:
    return document.select_one(f'.tab-pane[data-day="{day_id}"]')


def parse_venues(pane: Tag) -> list[Venue]:
    """Room header cells in column order. Cells without a name are dropped."""
    venues = []
    for room in pane.select(ROOM_SELECTOR):
        name = _select_text(room, ".m-schedule-table__room-name")
        if not name:
            continue
        tag = _select_text(room, ".m-schedule-table__room-tag")
        venues.append(Venue(name=name, tag=tag))
    return venues


def parse_time_slot(row: Tag) -> Optional[str]:
    """'start-end' from the row's time cell, None when the row has no usable time."""
    time_cell = row.select_one(TIME_CELL_SELECTOR)
    if time_cell is None:
        return None

    markers = time_cell.find_all("time")
    if not markers:
        return None

    # Start is the first marker and end the last, however many there are
    start = markers[0].get_text().strip()
    end = markers[-1].get_text().strip()
    if not start or not end:
        return None
    return f"{start}-{end}"


def is_break_row(row: Tag) -> bool:
    return BREAK_ROW_CLASS in (row.get("class") or [])


def parse_break(row: Tag, time_slot: str) -> BreakEvent:
    spans = row.select(BREAK_TITLE_SELECTOR)
    title = "".join(span.get_text() for span in spans).strip()
    return BreakEvent(time_slot=time_slot, title=title)


def parse_speakers(item: Tag) -> list[Speaker]:
    speakers = []
    for node in item.select(".m-schedule-item-speaker"):
        name = _select_text(node, ".m-schedule-item-speaker__name")
        if not name:
            continue
        speaker_id = _select_text(node, ".m-schedule-item-speaker__id")
        speakers.append(Speaker(name=name, id=speaker_id))
    return speakers


def parse_meta(item: Tag) -> list[str]:
    return [span.get_text().strip() for span in item.select(".m-schedule-item__meta span")]


def parse_link(item: Tag) -> Optional[str]:
    """href of a nested anchor, else of the anchor wrapping the item."""
    nested = item.find("a", href=True)
    if nested is not None:
        return nested["href"]

    parent = item.parent
    if parent is not None and parent.name == "a" and parent.get("href"):
        return parent["href"]
    return None


def parse_session_cell(cell: Tag, time_slot: str, venue: str) -> Optional[SessionEvent]:
    """SessionEvent for one room cell, None for an empty slot or a cell with no title."""
    item = cell.select_one(".m-schedule-item")
    if item is None:
        return None

    title = _select_text(item, ".m-schedule-item__title")
    if not title:
        return None

    return SessionEvent(
        time_slot=time_slot,
        title=title,
        venue=venue,
        meta=parse_meta(item),
        speakers=parse_speakers(item),
        link=parse_link(item),
    )


def parse_row(row: Tag, day: DaySchedule) -> list[Event]:
    """Events of one table row, in cell order. Rows without a time yield nothing."""
    time_slot = parse_time_slot(row)
    if time_slot is None:
        return []

    if is_break_row(row):
        return [parse_break(row, time_slot)]

    events: list[Event] = []
    for index, cell in enumerate(row.select(EVENT_CELL_SELECTOR)):
        session = parse_session_cell(cell, time_slot, day.venue_at(index))
        if session is not None:
            events.append(session)
    return events


def parse_day(pane: Tag, day: DaySchedule) -> DaySchedule:
    """Fill a DaySchedule's venues and events from its tab pane."""
    day.venues = parse_venues(pane)
    for row in pane.select("tr"):
        day.events.extend(parse_row(row, day))
    return day


def parse_schedule(document: BeautifulSoup, schedule: Optional[Schedule] = None) -> Schedule:
    """Extract the full timetable from a parsed schedule page.

    Days whose pane is missing keep empty venues and events.
    """
    if schedule is None:
        schedule = Schedule()
    parse_day_labels(document, schedule)

    for day_id, day in schedule.days.items():
        pane = find_day_pane(document, day_id)
        if pane is None:
            continue
        parse_day(pane, day)

    return schedule
