"""Tests for Windows LCID resolution."""

from __future__ import annotations

from keyloc.capabilities import UNKNOWN, lcid_to_tag, primary_language_id, resolve_lcid
from keyloc.capabilities.lcid import LCID_TAGS


def test_exact_lookup():
    assert lcid_to_tag(0x0409) == "en"
    assert lcid_to_tag(0x0412) == "ko"
    assert lcid_to_tag(0x0804) == "zh-CN"
    assert lcid_to_tag(0x7c04) == "zh-TW"


def test_exact_lookup_has_no_fallback():
    assert lcid_to_tag(0x0c12) == UNKNOWN
    assert lcid_to_tag(0xFFFF) == UNKNOWN


def test_primary_language_id():
    assert primary_language_id(0x0409) == 0x0009
    assert primary_language_id(0x0c12) == 0x0012
    assert primary_language_id(0x7c14) == 0x0014


def test_resolve_regional_ids():
    assert resolve_lcid(0x0409) == "en"
    assert resolve_lcid(0x0412) == "ko"
    assert resolve_lcid(0x0414) != UNKNOWN


def test_resolve_falls_back_to_primary_language():
    # 0x0c12 is not listed; its primary language 0x12 is Korean.
    assert resolve_lcid(0x0c12) == "ko"
    assert resolve_lcid(0x4c01) == "ar"


def test_resolve_unknown():
    assert resolve_lcid(0x0000) == UNKNOWN
    assert resolve_lcid(0x03ff) == UNKNOWN


def test_table_values():
    assert len(LCID_TAGS) > 300
    for lcid, tag in LCID_TAGS.items():
        assert 0 < lcid <= 0xFFFF
        assert tag and tag != UNKNOWN
