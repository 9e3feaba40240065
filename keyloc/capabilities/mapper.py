"""Mapping of platform keyboard identifiers to language codes.

Two identifier schemes are handled here:

- macOS input source names and bundle ids (free text), matched by keyword
  containment against an ordered rule table.
- X11/XKB layout codes (``us``, ``kr``, ...), matched by direct lookup.

Windows locale identifiers live in :mod:`keyloc.capabilities.lcid`.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

# Ordered (keywords, code) rules; the first rule with a keyword contained in
# the lower-cased identifier wins. Keywords that occur inside other language
# names must come after the longer names ("malayalam" before "malay").
INPUT_SOURCE_RULES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("korean", "hangul"), "ko"),
    (("chinese", "pinyin", "zhuyin", "cangjie", "scim", "tcim"), "zh"),
    (("u.s.", "keylayout.us", "abc", "english"), "en"),
    (("russian",), "ru"),
    (("kannada",), "kn"),
    (("japanese", "kana", "romaji"), "ja"),
    (("french",), "fr"),
    (("german",), "de"),
    (("spanish",), "es"),
    (("italian",), "it"),
    (("portuguese",), "pt"),
    (("dutch",), "nl"),
    (("swedish",), "sv"),
    (("danish",), "da"),
    (("norwegian",), "no"),
    (("finnish",), "fi"),
    (("polish",), "pl"),
    (("turkish",), "tr"),
    (("arabic",), "ar"),
    (("hebrew",), "he"),
    (("greek",), "el"),
    (("thai",), "th"),
    (("vietnamese",), "vi"),
    (("hindi",), "hi"),
    (("bengali",), "bn"),
    (("punjabi",), "pa"),
    (("gujarati",), "gu"),
    (("tamil",), "ta"),
    (("telugu",), "te"),
    (("malayalam",), "ml"),
    (("indonesian",), "id"),
    (("malay",), "ms"),
    (("filipino",), "fil"),
    (("ukrainian",), "uk"),
    (("czech",), "cs"),
    (("slovak",), "sk"),
    (("hungarian",), "hu"),
    (("romanian",), "ro"),
    (("bulgarian",), "bg"),
    (("croatian",), "hr"),
    (("serbian",), "sr"),
    (("slovenian",), "sl"),
    (("estonian",), "et"),
    (("latvian",), "lv"),
    (("lithuanian",), "lt"),
    (("cyrillic",), "ru"),
)

# Common XKB layout codes whose name differs from the language code.
XKB_LAYOUTS = {
    "us": "en",
    "gb": "en",
    "ca": "en",
    "au": "en",
    "kr": "ko",
    "ru": "ru",
    "jp": "ja",
    "cn": "zh",
    "tw": "zh",
    "de": "de",
    "fr": "fr",
    "es": "es",
    "latam": "es",
    "br": "pt",
    "se": "sv",
    "dk": "da",
    "gr": "el",
    "il": "he",
    "ua": "uk",
    "cz": "cs",
    "vn": "vi",
    "ara": "ar",
    "in": "hi",
}


def map_input_source(identifier: str) -> Optional[str]:
    """Map a macOS input source name or bundle id to a language code.

    Args:
        identifier: Layout name ("U.S.", "2-Set Korean") or bundle id
            ("com.apple.inputmethod.Korean")

    Returns:
        Language code, or None when no rule matches

    Examples:
        >>> map_input_source("com.apple.keylayout.ABC")
        'en'
        >>> map_input_source("com.apple.inputmethod.Korean.2SetKorean")
        'ko'
        >>> map_input_source("com.apple.CharacterPaletteIM") is None
        True
    """
    lowered = identifier.lower()
    for keywords, code in INPUT_SOURCE_RULES:
        if any(keyword in lowered for keyword in keywords):
            return code
    logger.debug(f"No language rule matches input source '{identifier}'")
    return None


def map_xkb_layout(layout: str) -> str:
    """Map an XKB layout code to a language code.

    Codes without an entry are returned unchanged, since many XKB layout
    names ("it", "pl", "fi") already are language codes.

    Examples:
        >>> map_xkb_layout("kr")
        'ko'
        >>> map_xkb_layout("xx")
        'xx'
    """
    return XKB_LAYOUTS.get(layout, layout)
