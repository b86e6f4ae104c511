"""
Tests for CLI functionality.

These tests verify the command-line interface logic.
"""

from __future__ import annotations

import argparse
from datetime import date
from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest
import requests

from meteomatics_query.cli import cmd_fetch, cmd_info, cmd_url, create_parser, main

if TYPE_CHECKING:
    from pathlib import Path


def _response(status: int = 200, body: bytes = b'{"data": []}') -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp._content = body
    return resp


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("METEO_USERNAME", raising=False)
    monkeypatch.delenv("METEO_PASSWORD", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("METEO_USERNAME", "user")
    monkeypatch.setenv("METEO_PASSWORD", "pass")


def _query_args(metric: str, **overrides: object) -> argparse.Namespace:
    values: dict[str, object] = {
        "metric": metric,
        "lat": 45.5,
        "lon": -122.6,
        "start": date(2024, 6, 15),
        "end": date(2024, 6, 16),
        "elevation": 2.0,
        "frequency": None,
        "debug": False,
    }
    values.update(overrides)
    return argparse.Namespace(**values)


class TestCreateParser:
    """Tests for create_parser function."""

    def test_creates_parser(self) -> None:
        """Parser is created successfully."""
        parser = create_parser()
        assert isinstance(parser, argparse.ArgumentParser)
        assert parser.prog == "meteomatics-query"

    def test_parser_has_version(self) -> None:
        """Parser has version argument."""
        parser = create_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(["--version"])

    def test_parser_has_debug_flag(self) -> None:
        """Parser accepts --debug flag."""
        args = create_parser().parse_args(["--debug", "info"])
        assert args.debug is True

    def test_parser_url_command(self) -> None:
        """Parser accepts url command with query options."""
        args = create_parser().parse_args(
            ["url", "temperature", "--lat", "47", "--lon", "8", "--start", "2024-02-28"]
        )
        assert args.command == "url"
        assert args.metric == "temperature"
        assert args.lat == 47.0
        assert args.start == date(2024, 2, 28)
        assert args.end is None
        assert args.elevation == 2

    def test_parser_fetch_all(self) -> None:
        """Parser accepts 'all' for fetch."""
        args = create_parser().parse_args(["fetch", "all", "--elevation", "2000"])
        assert args.metric == "all"
        assert args.elevation == 2000.0

    def test_parser_rejects_unknown_metric(self) -> None:
        """Unknown metric names are rejected."""
        with pytest.raises(SystemExit):
            create_parser().parse_args(["url", "visibility"])

    def test_url_does_not_accept_all(self) -> None:
        """'all' is only valid for fetch."""
        with pytest.raises(SystemExit):
            create_parser().parse_args(["url", "all"])


class TestCmdInfo:
    """Tests for cmd_info function."""

    def test_reports_missing_credentials(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cmd_info(argparse.Namespace()) == 0
        out = capsys.readouterr().out
        assert "meteomatics-query" in out
        assert "Credentials: missing" in out

    @pytest.mark.usefixtures("credentials")
    def test_reports_configured_credentials(self, capsys: pytest.CaptureFixture[str]) -> None:
        cmd_info(argparse.Namespace())
        out = capsys.readouterr().out
        assert "Credentials: configured" in out
        assert "pass" not in out


class TestCmdUrl:
    """Tests for cmd_url function."""

    def test_prints_url(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cmd_url(_query_args("temperature", elevation=1500)) == 0
        out = capsys.readouterr().out.strip()
        assert out == (
            "https://api.meteomatics.com/2024-06-15Z--2024-06-16Z:PT1H"
            "/t_1500m:C/45.5,-122.6/json"
        )

    def test_no_credentials_needed(self) -> None:
        with patch.object(requests.adapters.HTTPAdapter, "send") as mock_send:
            assert cmd_url(_query_args("snow_probability")) == 0
            mock_send.assert_not_called()

    def test_end_defaults_to_start(self, capsys: pytest.CaptureFixture[str]) -> None:
        cmd_url(_query_args("snow_probability", end=None))
        assert "2024-06-15Z--2024-06-15Z" in capsys.readouterr().out

    def test_custom_frequency(self, capsys: pytest.CaptureFixture[str]) -> None:
        cmd_url(_query_args("snow_probability", frequency="PT15M"))
        assert ":PT15M/" in capsys.readouterr().out

    def test_invalid_frequency(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cmd_url(_query_args("snow_probability", frequency="hourly")) == 1
        assert "Error" in capsys.readouterr().err

    def test_reversed_dates(self, capsys: pytest.CaptureFixture[str]) -> None:
        args = _query_args("humidity", start=date(2024, 6, 16), end=date(2024, 6, 15))
        assert cmd_url(args) == 1


class TestCmdFetch:
    """Tests for cmd_fetch function."""

    def test_missing_credentials(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch.object(requests.adapters.HTTPAdapter, "send") as mock_send:
            assert cmd_fetch(_query_args("temperature")) == 1
            mock_send.assert_not_called()
        assert "METEO_USERNAME" in capsys.readouterr().err

    @pytest.mark.usefixtures("credentials")
    def test_malformed_settings(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("METEO_TIMEOUT", "soon")
        with patch.object(requests.adapters.HTTPAdapter, "send") as mock_send:
            assert cmd_fetch(_query_args("temperature")) == 1
            mock_send.assert_not_called()
        assert "Error" in capsys.readouterr().err

    @pytest.mark.usefixtures("credentials")
    def test_single_metric(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=_response()
        ) as mock_send:
            assert cmd_fetch(_query_args("wind_speed", elevation=10)) == 0
            assert mock_send.call_count == 1
            assert "/wind_speed_10m:kmh/" in mock_send.call_args.args[0].url
        out = capsys.readouterr().out
        assert "== wind_speed [200]" in out
        assert '{"data": []}' in out

    @pytest.mark.usefixtures("credentials")
    def test_all_metrics(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=_response()
        ) as mock_send:
            assert cmd_fetch(_query_args("all", elevation=2000)) == 0
            assert mock_send.call_count == 6
        out = capsys.readouterr().out
        assert out.index("== snow_probability") < out.index("== pressure")

    @pytest.mark.usefixtures("credentials")
    def test_error_status_exit_code(self) -> None:
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=_response(401, b"denied")
        ):
            assert cmd_fetch(_query_args("snow_probability")) == 1

    @pytest.mark.usefixtures("credentials")
    def test_transport_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch.object(
            requests.adapters.HTTPAdapter,
            "send",
            side_effect=requests.ConnectionError("unreachable"),
        ):
            assert cmd_fetch(_query_args("snow_probability")) == 1
        assert "Request failed" in capsys.readouterr().err


class TestMain:
    """Tests for main entry point."""

    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([]) == 0
        assert "meteomatics-query" in capsys.readouterr().out

    def test_info(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["info"]) == 0
        assert "Version" in capsys.readouterr().out

    def test_url(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(
            ["url", "pressure", "--lat", "47", "--lon", "8", "--start", "2024-01-01",
             "--elevation", "100"]
        )
        assert code == 0
        assert "/pressure_100m:hPa/47,8/json" in capsys.readouterr().out
