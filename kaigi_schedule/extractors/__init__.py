"""Page → model extraction.

This module provides:
1. Fetching pages as BeautifulSoup documents (httpx)
2. Timetable extraction from the schedule page:
   - Day labels from the day tabs
   - Rooms from the table headers
   - Breaks and sessions from table rows
3. Presentation page extraction (description, speaker bios, social links)
"""

from kaigi_schedule.extractors.fetch import fetch_document, fetch_html, parse_html
from kaigi_schedule.extractors.schedule import parse_schedule, parse_day, parse_venues
from kaigi_schedule.extractors.details import (
    parse_presentation,
    presentation_url,
    PresentationDetails,
    MemberDetails,
)

__all__ = [
    "fetch_document",
    "fetch_html",
    "parse_html",
    "parse_schedule",
    "parse_day",
    "parse_venues",
    "parse_presentation",
    "presentation_url",
    "PresentationDetails",
    "MemberDetails",
]
