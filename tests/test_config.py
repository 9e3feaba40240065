"""Tests for KL_* environment configuration."""

from __future__ import annotations

import importlib
import os

import pytest

from keyloc import config


@pytest.fixture
def reload_config(monkeypatch):
    """Reload keyloc.config against a clean KL_* environment."""
    for key in list(os.environ):
        if key.startswith("KL_"):
            monkeypatch.delenv(key, raising=False)

    def _reload(env):
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return importlib.reload(config)

    yield _reload
    monkeypatch.undo()
    importlib.reload(config)


def test_defaults(reload_config):
    mod = reload_config({})
    assert mod.settings.platform == ""
    assert mod.settings.command_timeout_sec == 0.0
    assert mod.settings.parallel_readers is False
    assert mod.settings.log_dir == ""


def test_env_overrides(reload_config):
    mod = reload_config(
        {
            "KL_PLATFORM": "darwin",
            "KL_COMMAND_TIMEOUT": "2",
            "KL_PARALLEL_READERS": "yes",
            "KL_LOG_DIR": "/tmp/keyloc-logs",
        }
    )
    assert mod.settings.platform == "darwin"
    assert mod.settings.command_timeout_sec == 2.0
    assert mod.settings.parallel_readers is True
    assert mod.settings.log_dir == "/tmp/keyloc-logs"


@pytest.mark.parametrize(
    "raw, expected",
    [("500ms", 0.5), ("3s", 3.0), ("1m", 60.0), ("1.5", 1.5), ("soon", 0.0)],
)
def test_timeout_units(reload_config, raw, expected):
    mod = reload_config({"KL_COMMAND_TIMEOUT": raw})
    assert mod.settings.command_timeout_sec == pytest.approx(expected)


def test_prefix_enforced():
    with pytest.raises(ValueError, match="Only KL_"):
        config._env("LANG", "C")


def test_settings_frozen():
    with pytest.raises(Exception):
        config.settings.platform = "linux"  # type: ignore[misc]


def test_platform_setting_selects_backend(reload_config, linux_runner):
    reload_config({"KL_PLATFORM": "linux"})
    from keyloc.aggregator import LanguageAggregator

    agg = LanguageAggregator(runner=linux_runner)
    assert agg.platform == "linux"
    assert agg.languages() == ["en", "ko"]
