"""Renderers: console summary, Markdown and JSON."""

from kaigi_schedule.renderers.timeline import (
    sort_events,
    split_day,
    start_minutes,
    highlighted_sessions,
)
from kaigi_schedule.renderers.console import render_summary, print_summary, print_stats
from kaigi_schedule.renderers.markdown import render_markdown
from kaigi_schedule.renderers.export import render_json, load_schedule_json

__all__ = [
    "sort_events",
    "split_day",
    "start_minutes",
    "highlighted_sessions",
    "render_summary",
    "print_summary",
    "print_stats",
    "render_markdown",
    "render_json",
    "load_schedule_json",
]
