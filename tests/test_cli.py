"""Tests for the command-line interface."""

from __future__ import annotations

import json

import pytest

from news_aggregator import cli
from news_aggregator.core.config import Settings
from news_aggregator.providers import get_default_providers
from news_aggregator.services import NewsAggregator

from conftest import guardian_result, newsapi_article


@pytest.fixture
def stubbed_cli(monkeypatch, settings, stub):
    """Point the CLI at an aggregator backed by the stub endpoints."""

    def _aggregator() -> NewsAggregator:
        return NewsAggregator(providers=get_default_providers(settings, transport=stub.transport), settings=settings)

    monkeypatch.setattr(cli, "get_aggregator", _aggregator)
    return stub


def test_top_json(stubbed_cli, capsys) -> None:
    stubbed_cli.newsapi["technology"] = [newsapi_article("Older", "2024-01-01T00:00:00Z")]
    stubbed_cli.guardian["technology"] = [guardian_result("Newer", "2024-01-02T00:00:00Z")]

    exit_code = cli.main(["top", "technology", "--limit", "1", "--json"])

    assert exit_code == 0
    articles = json.loads(capsys.readouterr().out)
    assert [a["title"] for a in articles] == ["Newer"]
    assert articles[0]["source"] == "The Guardian"


def test_top_invalid_category(stubbed_cli, capsys) -> None:
    exit_code = cli.main(["top", "astrology"])

    assert exit_code == 2
    assert "astrology" in capsys.readouterr().err
    assert stubbed_cli.requests == []


def test_all_text(stubbed_cli, capsys, settings) -> None:
    stubbed_cli.newsapi["science"] = [newsapi_article("Comet sighted", "2024-01-01T00:00:00Z")]

    exit_code = cli.main(["all"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "SCIENCE (1)" in out
    assert "Comet sighted" in out
    for category in settings.categories:
        assert category.upper() in out


def test_all_json(stubbed_cli, capsys, settings) -> None:
    exit_code = cli.main(["all", "--json"])

    assert exit_code == 0
    assert list(json.loads(capsys.readouterr().out)) == list(settings.categories)


def test_unexpected_error_returns_one(monkeypatch) -> None:
    def _broken():
        raise RuntimeError("boom")

    monkeypatch.setattr(cli, "get_aggregator", _broken)

    assert cli.main(["all"]) == 1


def test_no_command_prints_help(capsys) -> None:
    assert cli.main([]) == 0
    assert "usage" in capsys.readouterr().out.lower()


def test_top_help_shows_configured_limit(monkeypatch, capsys) -> None:
    monkeypatch.setattr(cli, "get_settings", lambda: Settings(_env_file=None, default_top_limit=7))

    with pytest.raises(SystemExit):
        cli.main(["top", "--help"])

    assert "(default: 7)" in capsys.readouterr().out
