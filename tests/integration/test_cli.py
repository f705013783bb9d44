"""Integration tests for CLI module."""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from traveljournal.cli import cli, summarize_block
from traveljournal.models.block import EditorBlock
from traveljournal.models.enums import Rating, RecommendationCategory
from traveljournal.themes.presets import PASSPORT_THEME
from traveljournal.utils import logging as tj_logging


@pytest.fixture(scope="session")
def session_log_file(tmp_path_factory):
    """One log file for all CLI runs, so no run writes to the real log directory."""
    return tmp_path_factory.mktemp("logs") / "traveljournal.log"


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("api:\n  base_url: https://api.test.com/api\n  access_token: test-token\n")
    return path


@pytest.fixture
def runner(session_log_file):
    return CliRunner(
        env={"TRAVELJOURNAL_LOG_FILE": str(session_log_file), "TRAVELJOURNAL_LOG_LEVEL": "INFO"}
    )


class TestLogging:
    """Test CLI log file handling."""

    def test_repeated_runs_reuse_one_log_handle(
        self, runner, config_file, mock_http_client, trip_id, tmp_path
    ):
        log_file = tmp_path / "run.log"
        args = ["--config", str(config_file), "--log-file", str(log_file), "draft", str(trip_id)]

        handles = []
        for _ in range(2):
            mock_client = mock_http_client(json_body={"tripId": str(trip_id), "blocks": []})
            with patch("httpx.AsyncClient", return_value=mock_client):
                result = runner.invoke(cli, args, obj={})
            assert result.exit_code == 0
            handles.append(tj_logging._open_log_files[log_file.resolve()])

        assert handles[0] is handles[1]
        assert not handles[0].closed
        events = [json.loads(line)["event"] for line in log_file.read_text().splitlines()]
        assert events.count("draft_command_started") == 2
        assert "draft_loaded" in events


class TestThemesCommand:
    """Test `traveljournal themes`."""

    def test_offline_lists_builtin_themes(self, runner):
        result = runner.invoke(cli, ["themes", "--offline"], obj={})

        assert result.exit_code == 0
        for slug in ("default", "passport", "retro"):
            assert slug in result.output

    def test_falls_back_when_api_unreachable(self, runner, config_file, mock_http_client):
        mock_client = mock_http_client(status_code=503, json_body={})

        with patch("httpx.AsyncClient", return_value=mock_client):
            result = runner.invoke(cli, ["--config", str(config_file), "themes"], obj={})

        assert result.exit_code == 0
        assert "passport" in result.output


class TestThemeCommand:
    """Test `traveljournal theme SLUG`."""

    def test_offline_shows_palette_and_badges(self, runner):
        result = runner.invoke(cli, ["theme", "passport", "--offline"], obj={})

        assert result.exit_code == 0
        assert "Passport (passport)" in result.output
        assert "#CE1126" in result.output
        assert "Stay" in result.output
        assert "heading=system-serif" in result.output

    def test_offline_unknown_slug(self, runner):
        result = runner.invoke(cli, ["theme", "vaporwave", "--offline"], obj={})

        assert result.exit_code == 2
        assert "Unknown theme 'vaporwave'" in result.output

    def test_fetches_theme_from_api(self, runner, config_file, mock_http_client):
        mock_client = mock_http_client(json_body=PASSPORT_THEME.to_wire())

        with patch("httpx.AsyncClient", return_value=mock_client):
            result = runner.invoke(cli, ["--config", str(config_file), "theme", "passport"], obj={})

        assert result.exit_code == 0
        assert "Passport (passport)" in result.output
        url = mock_client.request.call_args.args[1]
        assert url == "https://api.test.com/api/themes/slug/passport"

    def test_api_error_exits_with_message(self, runner, config_file, mock_http_client):
        mock_client = mock_http_client(status_code=404, json_body={})

        with patch("httpx.AsyncClient", return_value=mock_client):
            result = runner.invoke(cli, ["--config", str(config_file), "theme", "nope"], obj={})

        assert result.exit_code == 1
        assert "Not found" in result.output


class TestDraftCommand:
    """Test `traveljournal draft TRIP_ID`."""

    def test_shows_draft_blocks(self, runner, config_file, mock_http_client, trip_id):
        body = {
            "tripId": str(trip_id),
            "lastUpdatedAt": "2026-02-08T10:15:00Z",
            "blocks": [
                {
                    "id": "0b7f6a4e-55c4-4c8e-9d7a-3f2b1e0c9d8a",
                    "order": 0,
                    "type": "tip",
                    "data": {"title": "Suica"},
                },
            ],
        }
        mock_client = mock_http_client(json_body=body)

        with patch("httpx.AsyncClient", return_value=mock_client):
            result = runner.invoke(
                cli,
                ["--config", str(config_file), "draft", str(trip_id), "--theme", "retro"],
                obj={},
            )

        assert result.exit_code == 0
        assert "Suica" in result.output
        assert "Last updated: 2026-02-08T10:15:00+00:00" in result.output

    def test_empty_draft(self, runner, config_file, mock_http_client, trip_id):
        mock_client = mock_http_client(json_body={"tripId": str(trip_id), "blocks": []})

        with patch("httpx.AsyncClient", return_value=mock_client):
            result = runner.invoke(cli, ["--config", str(config_file), "draft", str(trip_id)], obj={})

        assert result.exit_code == 0
        assert "Draft is empty." in result.output

    def test_invalid_trip_id(self, runner, config_file):
        result = runner.invoke(cli, ["--config", str(config_file), "draft", "not-a-uuid"], obj={})

        assert result.exit_code == 2
        assert "Not a valid trip id" in result.output

    def test_unauthorized(self, runner, config_file, mock_http_client, trip_id):
        mock_client = mock_http_client(status_code=401)

        with patch("httpx.AsyncClient", return_value=mock_client):
            result = runner.invoke(cli, ["--config", str(config_file), "draft", str(trip_id)], obj={})

        assert result.exit_code == 1
        assert "Not authorized" in result.output


class TestJournalCommand:
    """Test `traveljournal journal TRIP_ID`."""

    def test_shows_published_entries(self, runner, config_file, mock_http_client, trip_id, published_entries):
        body = [entry.to_wire() for entry in published_entries]
        mock_client = mock_http_client(json_body=body)

        with patch("httpx.AsyncClient", return_value=mock_client):
            result = runner.invoke(cli, ["--config", str(config_file), "journal", str(trip_id)], obj={})

        assert result.exit_code == 0
        assert "Ichiran Ramen" in result.output
        assert "Getting Around" in result.output

    def test_no_entries(self, runner, config_file, mock_http_client, trip_id):
        mock_client = mock_http_client(json_body=[])

        with patch("httpx.AsyncClient", return_value=mock_client):
            result = runner.invoke(cli, ["--config", str(config_file), "journal", str(trip_id)], obj={})

        assert result.exit_code == 0
        assert "Journal has no published entries." in result.output


class TestSummarizeBlock:
    def test_recommendation_summary(self, shibuya_location):
        block = EditorBlock.new_recommendation(
            name="Ichiran",
            category=RecommendationCategory.EAT,
            rating=Rating.S,
            price_level=2,
            location=shibuya_location,
        )
        assert summarize_block(block) == "Ichiran [Eat] S $$ @ Shibuya"

    def test_moment_summary(self):
        block = EditorBlock.new_moment(date="Jan 15", title="Arrived")
        assert summarize_block(block) == "Jan 15 - Arrived"

    def test_empty_tip_summary(self):
        assert summarize_block(EditorBlock.new_tip()) == "(empty tip)"
