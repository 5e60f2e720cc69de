"""Exceptions raised by the schedule pipeline."""

from typing import Optional


class KaigiScheduleError(Exception):
    """Base class for pipeline errors."""


class FetchError(KaigiScheduleError):
    """A page could not be retrieved or parsed as HTML."""

    def __init__(
        self,
        url: str,
        reason: str,
        status: Optional[int] = None,
    ):
        self.url = url
        self.reason = reason  # "timeout", "connection", "404", "empty", ...
        self.status = status
        super().__init__(f"Failed to fetch {url}: {reason}")
