"""Language tag canonicalization.

Every language tag that enters or leaves keyloc passes through
``normalize_language_code``, so two tags are equivalent exactly when their
normalized forms are equal.
"""

from __future__ import annotations

# Returned by identifier lookups that have no mapping; never a language code.
UNKNOWN = "unknown"


def normalize_language_code(tag: str) -> str:
    """Reduce a language tag to its lower-cased primary subtag.

    Region and script subtags are dropped, and ``_`` is accepted as a
    separator. Empty input yields an empty string.

    Examples:
        >>> normalize_language_code("en-US")
        'en'
        >>> normalize_language_code("en_GB")
        'en'
        >>> normalize_language_code("ZH-Hant")
        'zh'
    """
    return tag.lower().replace("_", "-").split("-")[0]


def is_language_code(code: str | None) -> bool:
    """Check whether a resolved value may enter a language set."""
    return bool(code) and code != UNKNOWN
