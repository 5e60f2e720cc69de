"""Tests for the command-line entry point."""

import json

import pytest
from typer.testing import CliRunner

from kaigi_schedule import cli
from kaigi_schedule.errors import FetchError
from kaigi_schedule.pipeline import SCHEDULE_URL

runner = CliRunner()


@pytest.fixture
def pipeline_calls(monkeypatch, schedule) -> list[dict]:
    """Replace the network pipeline with one returning the fixture schedule."""
    calls: list[dict] = []

    async def fake_run_pipeline(**kwargs):
        calls.append(kwargs)
        return schedule

    monkeypatch.delenv("KAIGI_SCHEDULE_URL", raising=False)
    monkeypatch.delenv("KAIGI_BASE_URL", raising=False)
    monkeypatch.delenv("KAIGI_HTTP_TIMEOUT", raising=False)
    monkeypatch.setattr(cli, "run_pipeline", fake_run_pipeline)
    return calls


class TestCli:
    """Flag handling and exit codes."""

    def test_default_prints_summary(self, pipeline_calls):
        result = runner.invoke(cli.app, [])
        assert result.exit_code == 0
        assert "## DAY1: Apr 16 (Wed)" in result.output
        assert pipeline_calls[0]["url"] == SCHEDULE_URL
        assert pipeline_calls[0]["fetch_details"] is False

    def test_help_does_not_fetch(self, pipeline_calls):
        result = runner.invoke(cli.app, ["--help"])
        assert result.exit_code == 0
        assert "--fetch-details" in result.output
        assert pipeline_calls == []

    def test_url_and_details_flags(self, pipeline_calls):
        result = runner.invoke(cli.app, ["--url", "https://example.com/s", "--fetch-details"])
        assert result.exit_code == 0
        assert pipeline_calls[0]["url"] == "https://example.com/s"
        assert pipeline_calls[0]["fetch_details"] is True

    def test_env_url(self, pipeline_calls, monkeypatch):
        monkeypatch.setenv("KAIGI_SCHEDULE_URL", "https://mirror.example.com/schedule/")
        runner.invoke(cli.app, [])
        assert pipeline_calls[0]["url"] == "https://mirror.example.com/schedule/"

    def test_writes_markdown_and_json(self, pipeline_calls, tmp_path):
        md_path = tmp_path / "out" / "schedule.md"
        json_path = tmp_path / "schedule.json"

        result = runner.invoke(cli.app, ["--markdown", str(md_path), "--json", str(json_path)])

        assert result.exit_code == 0
        assert md_path.read_text(encoding="utf-8").startswith("# RubyKaigi 2025 Timetable Summary")
        data = json.loads(json_path.read_text(encoding="utf-8"))
        assert list(data) == ["day1", "day2", "day3"]

    def test_stats_table(self, pipeline_calls):
        result = runner.invoke(cli.app, ["--stats"])
        assert result.exit_code == 0
        assert "Schedule Statistics" in result.output

    def test_fetch_failure_exits_non_zero(self, monkeypatch):
        async def failing_pipeline(**kwargs):
            raise FetchError(kwargs["url"], "connection")

        monkeypatch.setattr(cli, "run_pipeline", failing_pipeline)
        result = runner.invoke(cli.app, ["--url", "https://example.com/s"])

        assert result.exit_code == 1
        assert "could not fetch the schedule page" in result.output

    def test_bad_timeout_env_exits_non_zero(self, pipeline_calls, monkeypatch):
        monkeypatch.setenv("KAIGI_HTTP_TIMEOUT", "soon")
        result = runner.invoke(cli.app, [])

        assert result.exit_code == 1
        assert "KAIGI_HTTP_TIMEOUT must be a number" in result.output
        assert pipeline_calls == []

    def test_timeout_env_passed_through(self, pipeline_calls, monkeypatch):
        monkeypatch.setenv("KAIGI_HTTP_TIMEOUT", "7.5")
        runner.invoke(cli.app, [])
        assert pipeline_calls[0]["timeout"] == 7.5
