"""Tests for language tag normalization."""

from __future__ import annotations

import pytest

from keyloc.capabilities import UNKNOWN, is_language_code, normalize_language_code


class TestNormalizeLanguageCode:
    """Test normalize_language_code."""

    @pytest.mark.parametrize(
        "tag, expected",
        [
            ("en-US", "en"),
            ("en_GB", "en"),
            ("EN", "en"),
            ("fr_CA", "fr"),
            ("ZH-Hant", "zh"),
            ("zh-Hans-CN", "zh"),
            ("es", "es"),
            ("DE", "de"),
            ("", ""),
            ("-US", ""),
        ],
    )
    def test_normalize(self, tag, expected):
        assert normalize_language_code(tag) == expected

    def test_case_and_separator_insensitive(self):
        assert (
            normalize_language_code("EN")
            == normalize_language_code("en-US")
            == normalize_language_code("en_GB")
            == "en"
        )

    @pytest.mark.parametrize("tag", ["en-US", "ZH_hant", "pt-BR", "", "x", "a_b-c", "UNKNOWN"])
    def test_idempotent(self, tag):
        once = normalize_language_code(tag)
        assert normalize_language_code(once) == once

    def test_script_variants_collapse(self):
        assert normalize_language_code("zh-Hant") == normalize_language_code("zh-Hans")


def test_is_language_code():
    assert is_language_code("en") is True
    assert is_language_code("") is False
    assert is_language_code(None) is False
    assert is_language_code(UNKNOWN) is False
