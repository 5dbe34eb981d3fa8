"""Tests for the command line entry point."""

import json

from click.testing import CliRunner

import fightcard.cli as cli_module


class FakeScraper:
    pages = {}

    def __init__(self, sleep_delay=None):
        pass

    def fetch(self, uri, cancel_event=None):
        return self.pages.get(uri, "")


def test_cli_json(monkeypatch, fake_fetch):
    FakeScraper.pages = fake_fetch.pages
    monkeypatch.setattr(cli_module, "WikipediaScraper", FakeScraper)
    monkeypatch.setattr(cli_module, "setup_logging", lambda verbose=False: None)

    result = CliRunner().invoke(cli_module.cli, ["--scheduled", "1", "--past", "1"])

    assert result.exit_code == 0, result.output
    events = json.loads(result.output)
    assert [e["name"] for e in events] == ["UFC 399", "UFC 398"]
    assert events[1]["is_scheduled"] is False
    assert "Announced bouts" in events[1]["fight_card"]


def test_cli_table(monkeypatch, fake_fetch):
    FakeScraper.pages = fake_fetch.pages
    monkeypatch.setattr(cli_module, "WikipediaScraper", FakeScraper)
    monkeypatch.setattr(cli_module, "setup_logging", lambda verbose=False: None)

    result = CliRunner().invoke(cli_module.cli, ["--format", "table", "--past", "1"])

    assert result.exit_code == 0, result.output
    assert "UFC 398" in result.output
    assert "Madison Square Garden" in result.output


def test_cli_bad_date_exits_nonzero(monkeypatch, listing_html):
    FakeScraper.pages = {
        cli_module.layout.LIST_OF_EVENTS_URI: listing_html.replace("Mar 1, 2025", "TBD")
    }
    monkeypatch.setattr(cli_module, "WikipediaScraper", FakeScraper)
    monkeypatch.setattr(cli_module, "setup_logging", lambda verbose=False: None)

    result = CliRunner().invoke(cli_module.cli, [])

    assert result.exit_code == 1
