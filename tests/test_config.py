"""Tests for environment-driven settings."""

import logging

from schemarules import config


def test_env_flag_parsing(monkeypatch):
    monkeypatch.setenv("SCHEMARULES_TEST_FLAG", " Yes ")
    assert config._env_flag("SCHEMARULES_TEST_FLAG") is True

    monkeypatch.setenv("SCHEMARULES_TEST_FLAG", "off")
    assert config._env_flag("SCHEMARULES_TEST_FLAG") is False

    monkeypatch.delenv("SCHEMARULES_TEST_FLAG")
    assert config._env_flag("SCHEMARULES_TEST_FLAG") is False


def test_configure_logging_installs_handler(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    config.configure_logging("debug")

    assert calls == [{"level": "DEBUG", "format": "%(levelname)s | %(name)s | %(message)s"}]
