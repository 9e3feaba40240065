"""keyloc: report the natural languages usable as keyboard input on this machine.

Example:
    >>> import keyloc
    >>> keyloc.get_languages()  # doctest: +SKIP
    ['en', 'ko']
    >>> keyloc.check_language("ko-KR")  # doctest: +SKIP
    True
"""

from keyloc.aggregator import LanguageAggregator, LanguageReport, SourceOutcome
from keyloc.capabilities import normalize_language_code
from keyloc.errors import CommandInvocationError, KeylocError, SourceUnavailableError
from keyloc.query import check_language, collect_report, get_languages

__version__ = "0.2.0"

__all__ = [
    "get_languages",
    "check_language",
    "collect_report",
    "normalize_language_code",
    "LanguageAggregator",
    "LanguageReport",
    "SourceOutcome",
    "KeylocError",
    "SourceUnavailableError",
    "CommandInvocationError",
]
