"""Tests for member_init.config."""

import logging

from member_init.config import InitOptions, default_options


def test_defaults(monkeypatch):
    monkeypatch.delenv("MEMBER_INIT_STRICT_MARKERS", raising=False)
    monkeypatch.delenv("MEMBER_INIT_WARN_ORPHANS", raising=False)
    assert default_options() == InitOptions(strict_markers=False, warn_orphans=True)


def test_env_override(monkeypatch):
    monkeypatch.setenv("MEMBER_INIT_STRICT_MARKERS", "yes")
    monkeypatch.setenv("MEMBER_INIT_WARN_ORPHANS", "0")
    assert default_options() == InitOptions(strict_markers=True, warn_orphans=False)


def test_env_invalid_falls_back(monkeypatch, caplog):
    monkeypatch.setenv("MEMBER_INIT_STRICT_MARKERS", "maybe")
    monkeypatch.delenv("MEMBER_INIT_WARN_ORPHANS", raising=False)
    with caplog.at_level(logging.WARNING, logger="member_init.config"):
        assert default_options() == InitOptions()
    assert "MEMBER_INIT_STRICT_MARKERS" in caplog.text
