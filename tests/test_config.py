"""Tests for src.retrieval.config and src.releases.config covering defaults, env overrides and CLI parsing.

Run with coverage to validate configuration handling:
    pytest tests/test_config.py --maxfail=1 -v --cov=src.releases.config --cov=src.retrieval.config --cov-report=term-missing
"""

from importlib import reload

import pytest

import src.retrieval.config as retrieval_config
from src.releases import config
from src.releases.models import RepositoryIdentifier


def test_config_defaults_are_present():
    assert isinstance(retrieval_config.REPOS, list) and retrieval_config.REPOS
    assert retrieval_config.PER_PAGE == 100
    assert retrieval_config.ENRICH_DELAY_SEC > 0
    assert retrieval_config.USER_AGENT.startswith("release-history")


def test_env_override_for_delay(monkeypatch):
    monkeypatch.setenv("ENRICH_DELAY_SEC", "1.5")
    reloaded = reload(retrieval_config)
    try:
        assert reloaded.ENRICH_DELAY_SEC == 1.5
    finally:
        monkeypatch.delenv("ENRICH_DELAY_SEC", raising=False)
        reload(retrieval_config)


def test_resolve_settings_uses_configured_repos(monkeypatch):
    monkeypatch.setattr(config, "REPOS", ["a/b", "c/d"])
    settings = config.resolve_settings()
    assert settings.repositories == (RepositoryIdentifier("a", "b"), RepositoryIdentifier("c", "d"))
    assert settings.output_path == config.OUTPUT_PATH
    assert settings.delay_sec == config.ENRICH_DELAY_SEC


def test_resolve_settings_from_cli():
    args = config.parse_args([
        "x/y",
        "--output",
        "out/r.csv",
        "--cadence-output",
        "",
        "--delay",
        "0",
        "--timeout",
        "5",
    ])
    settings = config.resolve_settings(args)
    assert settings.repositories == (RepositoryIdentifier("x", "y"),)
    assert settings.output_path == "out/r.csv"
    assert settings.cadence_output_path is None
    assert settings.delay_sec == 0.0
    assert settings.timeout_sec == 5.0


def test_repository_identifier_parse():
    repo = RepositoryIdentifier.parse(" daangn/stackflow ")
    assert repo.full_name == "daangn/stackflow"
    assert str(repo) == "daangn/stackflow"
    for bad in ["nope", "/x", "a/", "a/b/c"]:
        with pytest.raises(ValueError):
            RepositoryIdentifier.parse(bad)
