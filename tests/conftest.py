"""Shared test fixtures and configuration."""

import pytest
from bs4 import BeautifulSoup

from kaigi_schedule.extractors import parse_schedule
from kaigi_schedule.models import Schedule


SCHEDULE_HTML = """
<html><body>
<ul class="m-day-tabs">
  <li class="m-day-tabs__item" data-day="day1">Apr 16 (Wed)</li>
  <li class="m-day-tabs__item" data-day="day2">Apr 17 (Thu)</li>
  <li class="m-day-tabs__item" data-day="day9">Bonus day</li>
</ul>

<div class="tab-pane" data-day="day1">
<table class="m-schedule-table">
  <thead>
    <tr>
      <th class="m-schedule-table__room is-blank"></th>
      <th class="m-schedule-table__room">
        <span class="m-schedule-table__room-name">Hall A</span>
        <span class="m-schedule-table__room-tag">#rubykaigiA</span>
      </th>
      <th class="m-schedule-table__room">
        <span class="m-schedule-table__room-name">Hall B</span>
      </th>
      <th class="m-schedule-table__room">
        <span class="m-schedule-table__room-name"> </span>
      </th>
    </tr>
  </thead>
  <tbody>
    <tr>
      <td class="m-schedule-table__time"><time>13:00</time> - <time>13:30</time></td>
      <td class="m-schedule-table__event">
        <a href="/2025/presentations/alice.html#day1">
          <div class="m-schedule-item">
            <p class="m-schedule-item__title">Intro to Ruby</p>
            <div class="m-schedule-item-speaker">
              <span class="m-schedule-item-speaker__name">Alice</span>
              <span class="m-schedule-item-speaker__id">@alice</span>
            </div>
            <div class="m-schedule-item__meta"><span>EN</span></div>
          </div>
        </a>
      </td>
      <td class="m-schedule-table__event">
        <div class="m-schedule-item">
          <p class="m-schedule-item__title"><a href="/2025/presentations/bob.html#day1">Deep Dive</a></p>
          <div class="m-schedule-item-speaker">
            <span class="m-schedule-item-speaker__name">Bob</span>
            <span class="m-schedule-item-speaker__id">@bob</span>
          </div>
          <div class="m-schedule-item__meta"><span>Keynote</span></div>
        </div>
      </td>
    </tr>
    <tr class="m-schedule-table__break">
      <td class="m-schedule-table__time"><time>12:00</time> - <time>13:00</time></td>
      <td class="m-schedule-table__event is-break" colspan="2"><span>Lunch</span></td>
    </tr>
    <tr>
      <td class="m-schedule-table__time"><time>10:00</time> - <time>10:40</time></td>
      <td class="m-schedule-table__event"></td>
      <td class="m-schedule-table__event">
        <div class="m-schedule-item">
          <a href="/2025/presentations/carol.html#day1">
            <p class="m-schedule-item__title">Parser Talk</p>
          </a>
          <div class="m-schedule-item-speaker">
            <span class="m-schedule-item-speaker__name">Carol</span>
            <span class="m-schedule-item-speaker__id">@carol</span>
          </div>
          <div class="m-schedule-item__meta"><span>JA</span><span>JA</span></div>
        </div>
      </td>
      <td class="m-schedule-table__event">
        <div class="m-schedule-item">
          <p class="m-schedule-item__title">Overflow Talk</p>
          <div class="m-schedule-item-speaker">
            <span class="m-schedule-item-speaker__name"></span>
            <span class="m-schedule-item-speaker__id">@ghost</span>
          </div>
          <div class="m-schedule-item-speaker">
            <span class="m-schedule-item-speaker__name">Dave</span>
            <span class="m-schedule-item-speaker__id">@dave</span>
          </div>
        </div>
      </td>
    </tr>
    <tr>
      <td colspan="3">Doors open</td>
    </tr>
    <tr>
      <td class="m-schedule-table__time">TBA</td>
      <td class="m-schedule-table__event">
        <div class="m-schedule-item"><p class="m-schedule-item__title">Ghost Session</p></div>
      </td>
    </tr>
    <tr>
      <td class="m-schedule-table__time"><time>09:30</time> - <time>10:00</time></td>
      <td class="m-schedule-table__event">
        <div class="m-schedule-item">
          <p class="m-schedule-item__title">Opening Keynote</p>
          <div class="m-schedule-item-speaker">
            <span class="m-schedule-item-speaker__name">Matz</span>
            <span class="m-schedule-item-speaker__id">@yukihiro_matz</span>
          </div>
          <div class="m-schedule-item__meta"><span>JA</span><span>Keynote</span></div>
        </div>
      </td>
      <td class="m-schedule-table__event">
        <div class="m-schedule-item"><div class="m-schedule-item__meta"><span>EN</span></div></div>
      </td>
    </tr>
  </tbody>
</table>
</div>

<div class="tab-pane" data-day="day2">
<table class="m-schedule-table">
  <tr>
    <th class="m-schedule-table__room">
      <span class="m-schedule-table__room-name">Main Hall</span>
    </th>
  </tr>
  <tr class="m-schedule-table__break">
    <td class="m-schedule-table__time"><time>15:00</time><time>15:10</time><time>15:20</time></td>
    <td class="m-schedule-table__event is-break"><span>Coffee</span></td>
  </tr>
</table>
</div>
</body></html>
"""

PRESENTATION_HTML = """
<html><body>
<div class="m-presentation">
  <div class="m-presentation__description"><p>All about internals.</p></div>
  <div class="m-speaker">
    <p class="m-speaker__name">Bob</p>
    <p class="m-speaker__bio">Bob hacks on YJIT.</p>
    <ul class="m-speaker__sns">
      <li><a class="m-speaker__sns-link is-github" href="https://github.com/bob-old">GitHub</a></li>
      <li><a class="m-speaker__sns-link is-twitter" href="https://twitter.com/bob">Twitter</a></li>
      <li><a class="m-speaker__sns-link is-github" href="https://github.com/bob">GitHub</a></li>
      <li><a class="m-speaker__sns-link is-mastodon" href="https://ruby.social/@bob">Mastodon</a></li>
    </ul>
  </div>
  <div class="m-speaker">
    <p class="m-speaker__bio">Someone not on the grid.</p>
  </div>
</div>
</body></html>
"""

EMPTY_PRESENTATION_HTML = """
<html><body><div class="m-presentation"><p>Coming soon</p></div></body></html>
"""


@pytest.fixture
def schedule_document() -> BeautifulSoup:
    return BeautifulSoup(SCHEDULE_HTML, "html.parser")


@pytest.fixture
def presentation_document() -> BeautifulSoup:
    return BeautifulSoup(PRESENTATION_HTML, "html.parser")


@pytest.fixture
def empty_presentation_document() -> BeautifulSoup:
    return BeautifulSoup(EMPTY_PRESENTATION_HTML, "html.parser")


@pytest.fixture
def schedule(schedule_document) -> Schedule:
    """Schedule extracted from SCHEDULE_HTML."""
    return parse_schedule(schedule_document)
