"""Capabilities module for language code normalization and identifier mapping.

This module provides the single language-tag normalizer and the per-platform
tables that translate keyboard and locale identifiers into language codes.
"""

from .canonicalize import UNKNOWN, is_language_code, normalize_language_code
from .lcid import lcid_to_tag, primary_language_id, resolve_lcid
from .mapper import map_input_source, map_xkb_layout

__all__ = [
    "UNKNOWN",
    "is_language_code",
    "normalize_language_code",
    "lcid_to_tag",
    "primary_language_id",
    "resolve_lcid",
    "map_input_source",
    "map_xkb_layout",
]
