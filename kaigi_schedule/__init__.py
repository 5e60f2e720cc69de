"""RubyKaigi schedule scraper: fetch, extract, enrich and render the timetable."""

__version__ = "0.1.0"
