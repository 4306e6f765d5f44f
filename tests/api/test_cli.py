"""Tests for the linktags CLI."""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from linktags.cli import cli
from linktags.config.settings import Settings


@pytest.fixture(autouse=True)
def _settings():
    with patch("linktags.cli.get_settings", return_value=Settings(_env_file=None)):
        yield


@pytest.fixture
def pages_file(tmp_path):
    path = tmp_path / "pages.json"
    path.write_text(json.dumps([{"id": 1, "title": "foo page"}]), encoding="utf-8")
    return str(path)


class TestResolve:
    def test_internal_link_human(self, pages_file):
        result = CliRunner().invoke(cli, ["resolve", "foo-page#top", "--pages", pages_file])
        assert result.exit_code == 0
        assert "Kind:      internal" in result.output
        assert "Href:      /wiki/1/foo-page#top" in result.output
        assert "CSS class: (none)" in result.output

    def test_missing_page_json(self, pages_file):
        result = CliRunner().invoke(
            cli, ["resolve", "nowhere", "--pages", pages_file, "--json"]
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["href"] == "nowhere"
        assert data["original_href"] == "nowhere"
        assert data["css_class"] == "missing-page-link"
        assert data["kind"] == "internal"

    def test_external_link_json(self):
        result = CliRunner().invoke(
            cli, ["resolve", "mailto:spam@gmail.com", "--text", "mail", "--json"]
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["css_class"] == "external-link"
        assert data["text"] == "mail"
        assert data["kind"] == "external"

    def test_unreadable_page_index_exits_1(self, tmp_path):
        result = CliRunner().invoke(
            cli, ["resolve", "foo", "--pages", str(tmp_path / "absent.json")]
        )
        assert result.exit_code == 1
        assert "Cannot read page index" in result.output

    def test_non_utf8_page_index_exits_1(self, tmp_path):
        path = tmp_path / "pages.json"
        path.write_bytes(b'[{"id": 1, "title": "caf\xe9"}]')
        result = CliRunner().invoke(cli, ["resolve", "foo", "--pages", str(path)])
        assert result.exit_code == 1
        assert "not valid UTF-8" in result.output

    def test_configuration_error_exits_1(self):
        bad = Settings(_env_file=None, attachments_base_path="")
        with patch("linktags.cli.get_settings", return_value=bad):
            result = CliRunner().invoke(cli, ["resolve", "~/a.png"])
        assert result.exit_code == 1
        assert "attachments_base_path" in result.output
