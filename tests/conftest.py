# tests/conftest.py
# Language sources are always fed canned output; no test touches real OS state.

from __future__ import annotations

import pytest

from keyloc.sources import runner as runner_mod
from tests.fakes import os_output as out
from tests.fakes.fake_runner import FakeRunner


@pytest.fixture
def darwin_runner() -> FakeRunner:
    """Runner answering all three macOS sources."""
    return FakeRunner(
        {
            out.DEFAULTS_INPUT_SOURCES: out.INPUT_SOURCES,
            out.DEFAULTS_APPLE_LANGUAGES: out.APPLE_LANGUAGES,
            out.DEFAULTS_VOICE_SERVICES: out.VOICE_SERVICES,
        }
    )


@pytest.fixture
def linux_runner() -> FakeRunner:
    """Runner with systemd-localed reporting us,kr."""
    return FakeRunner({out.LOCALECTL: out.LOCALECTL_STATUS})


@pytest.fixture
def missing_commands_runner() -> FakeRunner:
    """Runner for which every command is missing."""
    return FakeRunner()


@pytest.fixture(autouse=True)
def no_real_commands(monkeypatch):
    """Fail loudly if anything reaches subprocess from library code."""

    def guarded(*args, **kwargs):
        raise AssertionError(f"Unexpected real command: {args!r}")

    monkeypatch.setattr(runner_mod.subprocess, "run", guarded)
