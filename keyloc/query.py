"""Public query surface: which languages can this machine type in?"""

from __future__ import annotations

from typing import List, Optional

from keyloc.aggregator import LanguageAggregator, LanguageReport
from keyloc.capabilities import normalize_language_code
from keyloc.sources import CommandRunner


def get_languages(
    *, platform: Optional[str] = None, runner: Optional[CommandRunner] = None
) -> List[str]:
    """Return the input languages available on this machine.

    Unavailable sources only shrink the result; an empty list means no
    source had anything to report.

    Args:
        platform: Platform whose sources are queried (default: the running one)
        runner: Command runner override, mainly for tests

    Returns:
        Sorted language codes such as ``["en", "ko"]``

    Raises:
        KeylocError: If the command invocation machinery itself fails
    """
    return LanguageAggregator(platform=platform, runner=runner).languages()


def check_language(
    code: str, *, platform: Optional[str] = None, runner: Optional[CommandRunner] = None
) -> bool:
    """Check whether a language can be typed on this machine.

    The code is compared after normalization, so ``"ko-KR"``, ``"KO"`` and
    ``"ko"`` are equivalent.

    Examples:
        >>> check_language("en-US")  # doctest: +SKIP
        True
    """
    languages = get_languages(platform=platform, runner=runner)
    if not languages:
        return False

    wanted = normalize_language_code(code)
    return any(normalize_language_code(language) == wanted for language in languages)


def collect_report(
    *, platform: Optional[str] = None, runner: Optional[CommandRunner] = None
) -> LanguageReport:
    """Return the languages together with the outcome of every source."""
    return LanguageAggregator(platform=platform, runner=runner).report()
