"""
Unit Tests for the Command Line Interface
=========================================
"""

import json
from unittest.mock import patch
from urllib.parse import parse_qsl, urlsplit

import pytest

from htmlcsstoimage.cli import (
    EXIT_CONFIG_ERROR,
    EXIT_OK,
    EXIT_REJECTED,
    build_parser,
    main,
    parse_template_values,
)

from tests.utils.mocks import MockResponse, MockTransport


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep the CLI from pointing log handlers at per-test capture streams."""
    with patch("htmlcsstoimage.cli.setup_logging") as mock_setup:
        yield mock_setup


@pytest.fixture
def credentials(monkeypatch):
    monkeypatch.setenv("HCTI_API_ID", "user_id")
    monkeypatch.setenv("HCTI_API_KEY", "api_key")


class TestParser:
    """Test argument parsing."""

    def test_command_is_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_repeatable_fonts(self):
        args = build_parser().parse_args(
            ["html", "--html", "<p/>", "--font", "Roboto", "--font", "Open Sans"]
        )
        assert args.fonts == ["Roboto", "Open Sans"]

    def test_color_scheme_choices(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["url", "--url", "https://example.com", "--color-scheme", "blue"])


class TestParseTemplateValues:
    """Test KEY=VALUE parsing."""

    def test_plain_and_json_values(self):
        values = parse_template_values(["name=Bob", "count=3", "tags=[\"a\",\"b\"]"])
        assert values == {"name": "Bob", "count": 3, "tags": ["a", "b"]}

    def test_value_may_contain_equals(self):
        assert parse_template_values(["expr=a=b"]) == {"expr": "a=b"}

    @pytest.mark.parametrize("pair", ["novalue", "=value"])
    def test_malformed_pairs(self, pair):
        with pytest.raises(ValueError):
            parse_template_values([pair])


class TestMain:
    """Test command execution."""

    def test_html_command(self, credentials, capsys):
        transport = MockTransport(MockResponse(200, {"id": "1", "url": "https://hcti.io/v1/image/1"}))

        code = main(
            ["html", "--html", "<h1>Hi</h1>", "--font", "Open Sans", "--viewport-width", "640"],
            transport=transport,
        )

        assert code == EXIT_OK
        assert transport.last_json_body() == {
            "html": "<h1>Hi</h1>",
            "google_fonts": "Open+Sans",
            "viewport_width": 640,
        }
        output = json.loads(capsys.readouterr().out)
        assert output["url"] == "https://hcti.io/v1/image/1"

    def test_url_command_rejected(self, credentials, capsys):
        transport = MockTransport(MockResponse(400, {"error": "Bad Request"}))

        code = main(["url", "--url", "https://example.com", "--full-screen"], transport=transport)

        assert code == EXIT_REJECTED
        assert transport.last_json_body() == {"url": "https://example.com", "full_screen": True}
        assert json.loads(capsys.readouterr().out)["error"] == "Bad Request"

    def test_template_url_command(self, credentials, capsys):
        transport = MockTransport()

        code = main(
            ["template-url", "my-template", "--value", "name=Bob", "--version", "2"],
            transport=transport,
        )

        assert code == EXIT_OK
        url = capsys.readouterr().out.strip()
        parts = urlsplit(url)
        assert parts.path.startswith("/v1/image/my-template/")
        assert parse_qsl(parts.query) == [("template_version", "2"), ("name", "Bob")]
        assert transport.call_count == 0

    def test_render_url_command(self, credentials, capsys):
        code = main(
            ["render-url", "--url", "https://example.com", "--viewport-width", "800"],
            transport=MockTransport(),
        )

        assert code == EXIT_OK
        url = capsys.readouterr().out.strip()
        assert url.startswith("https://hcti.io/v1/image/create-and-render/user_id/")
        assert parse_qsl(urlsplit(url).query) == [
            ("url", "https://example.com"),
            ("viewport_width", "800"),
        ]

    def test_missing_credentials(self, capsys):
        code = main(["render-url", "--url", "https://example.com"], transport=MockTransport())

        assert code == EXIT_CONFIG_ERROR
        assert "HCTI_API_ID" in capsys.readouterr().err

    def test_invalid_environment_setting(self, credentials, monkeypatch, capsys):
        monkeypatch.setenv("HCTI_ENVIRONMENT", "staging")

        code = main(["render-url", "--url", "https://example.com"], transport=MockTransport())

        assert code == EXIT_CONFIG_ERROR
        assert "environment" in capsys.readouterr().err

    def test_malformed_template_value(self, credentials, capsys):
        code = main(["template-url", "t", "--value", "broken"], transport=MockTransport())
        assert code == EXIT_CONFIG_ERROR
