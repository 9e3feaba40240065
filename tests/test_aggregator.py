"""Tests for merging languages across sources."""

from __future__ import annotations

import threading

import pytest

from keyloc.aggregator import LanguageAggregator, LanguageReport
from keyloc.capabilities import UNKNOWN
from keyloc.errors import CommandInvocationError, SourceUnavailableError
from keyloc.sources.windows import KeyboardLayoutReader
from tests.fakes import os_output as out
from tests.fakes.fake_runner import FakeRunner, failing_layout_list


class StaticReader:
    """Reader with fixed identifiers and a resolution table."""

    def __init__(self, name, identifiers, table=None, error=None):
        self.name = name
        self.identifiers = identifiers
        self.table = table or {}
        self.error = error
        self.thread_name = None

    def read(self):
        self.thread_name = threading.current_thread().name
        if self.error is not None:
            raise self.error
        return list(self.identifiers)

    def resolve(self, identifier):
        return self.table.get(identifier, identifier)


class TestLanguageAggregator:
    def test_darwin_sources_merged(self, darwin_runner):
        agg = LanguageAggregator(platform="darwin", runner=darwin_runner, parallel=False)
        assert agg.languages() == ["en", "ja", "ko", "zh"]

    def test_linux_sources(self, linux_runner):
        agg = LanguageAggregator(platform="linux", runner=linux_runner)
        assert agg.languages() == ["en", "ko"]

    def test_linux_fallback_keeps_unmapped_layout(self):
        runner = FakeRunner({out.SETXKBMAP: out.SETXKBMAP_QUERY})
        agg = LanguageAggregator(platform="linux", runner=runner)
        assert agg.languages() == ["en", "ru", "xx"]

    def test_windows_layouts_deduplicated(self):
        reader = KeyboardLayoutReader(lambda: [0x04090409, 0x08090809, 0xE0010412, 0x00000000])
        agg = LanguageAggregator([reader], platform="win32")
        assert agg.languages() == ["en", "ko"]

    def test_regional_tags_are_normalized(self):
        reader = KeyboardLayoutReader(lambda: [0x08040804, 0x04040404])
        assert LanguageAggregator([reader]).languages() == ["zh"]

    def test_unknown_never_in_result(self):
        reader = StaticReader("static", ["a", "b", "c"], {"a": UNKNOWN, "b": None, "c": ""})
        assert LanguageAggregator([reader]).languages() == []

    def test_failed_source_is_skipped(self):
        good = StaticReader("good", ["en-US"])
        bad = StaticReader("bad", [], error=SourceUnavailableError("defaults: not found"))
        agg = LanguageAggregator([bad, good])
        assert agg.languages() == ["en"]

    def test_all_sources_failing_gives_empty_result(self, missing_commands_runner):
        agg = LanguageAggregator(platform="darwin", runner=missing_commands_runner)
        assert agg.languages() == []
        assert len(missing_commands_runner.calls) == 3

    def test_windows_api_failure_gives_empty_result(self):
        agg = LanguageAggregator([KeyboardLayoutReader(failing_layout_list)])
        assert agg.languages() == []

    def test_invocation_error_propagates(self):
        reader = StaticReader("broken", [], error=CommandInvocationError("cannot fork"))
        with pytest.raises(CommandInvocationError):
            LanguageAggregator([reader]).languages()

    def test_unsupported_platform(self, linux_runner):
        agg = LanguageAggregator(platform="plan9", runner=linux_runner)
        assert agg.readers == []
        assert agg.languages() == []
        assert linux_runner.calls == []

    def test_result_is_sorted_and_stable(self, darwin_runner):
        agg = LanguageAggregator(platform="darwin", runner=darwin_runner)
        first = agg.languages()
        assert first == sorted(first)
        assert agg.languages() == first


class TestReport:
    def test_report_records_each_source(self):
        runner = FakeRunner(
            {
                out.DEFAULTS_INPUT_SOURCES: out.INPUT_SOURCES,
                out.DEFAULTS_APPLE_LANGUAGES: out.APPLE_LANGUAGES,
            }
        )
        report = LanguageAggregator(platform="darwin", runner=runner).report()

        assert isinstance(report, LanguageReport)
        assert report.platform == "darwin"
        assert report.languages == ["en", "ko", "zh"]

        by_name = {source.name: source for source in report.sources}
        assert by_name["input_sources"].available is True
        assert by_name["input_sources"].languages == ["en", "ko"]
        assert by_name["preferred_languages"].identifiers == ["en-US", "ko", "zh-Hant-KR"]
        assert by_name["voice_languages"].available is False
        assert by_name["voice_languages"].error == "Command not found: defaults"

    def test_integer_identifiers_described_in_hex(self):
        reader = KeyboardLayoutReader(lambda: [0x04090409])
        report = LanguageAggregator([reader], platform="win32").report()
        assert report.sources[0].identifiers == ["0x04090409"]

    def test_to_dict(self, linux_runner):
        data = LanguageAggregator(platform="linux", runner=linux_runner).report().to_dict()
        assert data["platform"] == "linux"
        assert data["languages"] == ["en", "ko"]
        assert data["sources"][0]["name"] == "xkb_layouts"
        assert data["sources"][0]["identifiers"] == ["us", "kr"]


class TestParallel:
    def test_parallel_matches_sequential(self, darwin_runner):
        sequential = LanguageAggregator(platform="darwin", runner=darwin_runner, parallel=False)
        parallel = LanguageAggregator(platform="darwin", runner=darwin_runner, parallel=True)
        assert parallel.languages() == sequential.languages()

    def test_parallel_runs_readers_on_worker_threads(self):
        readers = [StaticReader("one", ["en"]), StaticReader("two", ["ko"])]
        report = LanguageAggregator(readers, parallel=True).report()

        assert report.languages == ["en", "ko"]
        assert [source.name for source in report.sources] == ["one", "two"]
        assert readers[0].thread_name == "keyloc-one"
        assert readers[1].thread_name == "keyloc-two"

    def test_parallel_failures_are_independent(self):
        readers = [
            StaticReader("bad", [], error=SourceUnavailableError("gone")),
            StaticReader("good", ["fr-CA"]),
        ]
        assert LanguageAggregator(readers, parallel=True).languages() == ["fr"]

    def test_parallel_invocation_error_propagates(self):
        readers = [
            StaticReader("good", ["en"]),
            StaticReader("broken", [], error=CommandInvocationError("cannot fork")),
        ]
        with pytest.raises(CommandInvocationError, match="cannot fork"):
            LanguageAggregator(readers, parallel=True).languages()
