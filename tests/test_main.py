# ABOUTME: Tests for the pagescout CLI
# ABOUTME: Exercises command wiring, output formats and error exit codes with asyncclick's runner

from unittest.mock import AsyncMock, patch

import pytest
from asyncclick.testing import CliRunner

from pagescout.core.models import ProblemOfDayRecord
from pagescout.extraction.base import TransportError
from pagescout.main import app

LINKS = ["/wiki/Ownership_(computer_science)", "/wiki/Rust_(programming_language)"]


@pytest.fixture(autouse=True)
def production_logging(monkeypatch):
    monkeypatch.setenv("PAGESCOUT_LOG_MODE", "production")
    from pagescout.config import reload_config

    reload_config()


def test_app_is_callable():
    assert callable(app)


@pytest.mark.asyncio
async def test_help():
    result = await CliRunner().invoke(app, ["--help"])

    assert result.exit_code == 0
    assert "pagescout" in result.output
    assert "wiki-links" in result.output


@pytest.mark.asyncio
async def test_logging_status():
    result = await CliRunner().invoke(app, ["logging-status"])

    assert result.exit_code == 0
    assert "Logging Configuration" in result.output


class TestWikiLinksCommand:
    @pytest.mark.asyncio
    async def test_prints_debug_list(self):
        with patch("pagescout.main.WikiLinksService.links", return_value=LINKS) as links:
            result = await CliRunner().invoke(app, ["wiki-links", "/wiki/Rust_(programming_language)"])

        assert result.exit_code == 0
        assert result.output.strip().splitlines()[-1] == repr(LINKS)
        links.assert_called_once_with("/wiki/Rust_(programming_language)")

    @pytest.mark.asyncio
    async def test_json_output(self):
        with patch("pagescout.main.WikiLinksService.links", return_value=LINKS):
            result = await CliRunner().invoke(app, ["--json", "wiki-links", "/wiki/Rust"])

        assert result.exit_code == 0
        assert '["/wiki/Ownership_(computer_science)", "/wiki/Rust_(programming_language)"]' in result.output

    @pytest.mark.asyncio
    async def test_invalid_reference_fails(self):
        result = await CliRunner().invoke(app, ["wiki-links", "https://en.wikipedia.org/wiki/Rust"])

        assert result.exit_code == 1
        assert "not a relative wiki path" in result.output

    @pytest.mark.asyncio
    async def test_transport_error_fails(self):
        with patch("pagescout.main.WikiLinksService.links", side_effect=TransportError("Failed to fetch")):
            result = await CliRunner().invoke(app, ["wiki-links", "/wiki/Rust"])

        assert result.exit_code == 1
        assert "Failed to fetch" in result.output

    @pytest.mark.asyncio
    async def test_missing_argument_is_usage_error(self):
        result = await CliRunner().invoke(app, ["wiki-links"])

        assert result.exit_code == 2


class TestPotdCommand:
    @pytest.mark.asyncio
    async def test_missing_output_path_fails(self, tmp_path):
        result = await CliRunner().invoke(app, ["potd", str(tmp_path / "missing.toml")])

        assert result.exit_code == 1
        assert "does not exist" in result.output

    @pytest.mark.asyncio
    async def test_success_prints_summary(self, tmp_path):
        output = tmp_path / "potd.toml"
        output.touch()
        record = ProblemOfDayRecord(number=1, name="Two Sum", url="https://leetcode.com/problems/two-sum/")

        with patch("pagescout.main.ProblemOfDayService.run", new=AsyncMock(return_value=record)) as run:
            result = await CliRunner().invoke(app, ["potd", str(output)])

        assert result.exit_code == 0
        assert "Two Sum" in result.output
        run.assert_awaited_once_with(str(output))

    @pytest.mark.asyncio
    async def test_session_failure_fails(self, tmp_path):
        output = tmp_path / "potd.toml"
        output.touch()

        failing = AsyncMock(side_effect=TransportError("Could not start browser session"))
        with patch("pagescout.main.ProblemOfDayService.run", new=failing):
            result = await CliRunner().invoke(app, ["potd", str(output)])

        assert result.exit_code == 1
        assert "Could not start browser session" in result.output
