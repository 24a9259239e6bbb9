import logging

import pytest

from mallow import config


def test_prompt_default_and_override(monkeypatch):
    monkeypatch.delenv("MALLOW_PROMPT", raising=False)
    assert config.get_prompt() == "user> "
    monkeypatch.setenv("MALLOW_PROMPT", "> ")
    assert config.get_prompt() == "> "


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, logging.WARNING),
        ("debug", logging.DEBUG),
        ("INFO", logging.INFO),
        ("bogus", logging.WARNING),
        ("  ", logging.WARNING),
    ]
)
def test_log_level(monkeypatch, raw, expected):
    if raw is None:
        monkeypatch.delenv("MALLOW_LOG_LEVEL", raising=False)
    else:
        monkeypatch.setenv("MALLOW_LOG_LEVEL", raw)
    assert config.get_log_level() == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, None),
        ("5000", 5000),
        ("abc", None),
        ("-1", None),
    ]
)
def test_recursion_limit(monkeypatch, raw, expected):
    if raw is None:
        monkeypatch.delenv("MALLOW_RECURSION_LIMIT", raising=False)
    else:
        monkeypatch.setenv("MALLOW_RECURSION_LIMIT", raw)
    assert config.get_recursion_limit() == expected
