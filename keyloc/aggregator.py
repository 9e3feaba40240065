"""Aggregation of language codes across a platform's sources.

Every reader registered for the platform is queried; each raw identifier is
mapped by its reader, normalized, and merged into one deduplicated set. A
reader that cannot reach its source contributes nothing and the others carry
on. Only errors of the invocation machinery itself propagate.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from keyloc import config
from keyloc.capabilities import is_language_code, normalize_language_code
from keyloc.errors import SourceUnavailableError
from keyloc.sources import (
    CommandRunner,
    RawIdentifier,
    SourceReader,
    create,
    current_platform,
    make_runner,
)

logger = logging.getLogger(__name__)


@dataclass
class SourceOutcome:
    """Result of querying one language source."""

    name: str
    available: bool
    identifiers: List[str] = field(default_factory=list)
    languages: List[str] = field(default_factory=list)
    error: Optional[str] = None


@dataclass
class LanguageReport:
    """Languages found on this machine and where each source stood."""

    platform: str
    languages: List[str]
    sources: List[SourceOutcome]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)


def _describe(identifier: RawIdentifier) -> str:
    if isinstance(identifier, int):
        return f"0x{identifier:08x}"
    return identifier


class LanguageAggregator:
    """Collect input languages from every source of one platform.

    Args:
        readers: Explicit readers; built from the platform backend when omitted
        platform: Platform name (defaults to KL_PLATFORM, then sys.platform)
        runner: Command runner handed to the platform backend
        parallel: Query sources on separate threads (defaults to KL_PARALLEL_READERS)
    """

    def __init__(
        self,
        readers: Optional[Sequence[SourceReader]] = None,
        *,
        platform: Optional[str] = None,
        runner: Optional[CommandRunner] = None,
        parallel: Optional[bool] = None,
    ) -> None:
        settings = config.settings
        self.platform = current_platform(platform or settings.platform)
        self.parallel = settings.parallel_readers if parallel is None else parallel

        if readers is None:
            runner = runner or make_runner(settings.command_timeout_sec)
            try:
                readers = create(self.platform, runner)
            except ValueError as e:
                logger.warning(f"{e}; no input languages can be reported")
                readers = []
        self.readers: List[SourceReader] = list(readers)

    def languages(self) -> List[str]:
        """Return the sorted, deduplicated language codes of all sources."""
        return self.report().languages

    def report(self) -> LanguageReport:
        """Query all sources and return the merged result with per-source detail."""
        if self.parallel and len(self.readers) > 1:
            outcomes = self._read_parallel()
        else:
            outcomes = [self._read_source(reader) for reader in self.readers]

        merged: set[str] = set()
        for outcome in outcomes:
            merged.update(outcome.languages)

        return LanguageReport(
            platform=self.platform,
            languages=sorted(merged),
            sources=outcomes,
        )

    def _read_source(self, reader: SourceReader) -> SourceOutcome:
        try:
            identifiers = reader.read()
        except SourceUnavailableError as e:
            logger.warning(f"Language source '{reader.name}' unavailable: {e}")
            return SourceOutcome(name=reader.name, available=False, error=str(e))

        codes: set[str] = set()
        for identifier in identifiers:
            code = normalize_language_code(reader.resolve(identifier) or "")
            if is_language_code(code):
                codes.add(code)
            else:
                logger.debug(f"No language for {reader.name} identifier {_describe(identifier)!r}")

        return SourceOutcome(
            name=reader.name,
            available=True,
            identifiers=[_describe(identifier) for identifier in identifiers],
            languages=sorted(codes),
        )

    def _read_parallel(self) -> List[SourceOutcome]:
        # Workers write only to their own slot; merging happens on this thread.
        outcomes: List[Optional[SourceOutcome]] = [None] * len(self.readers)
        failures: List[Optional[BaseException]] = [None] * len(self.readers)

        def work(index: int, reader: SourceReader) -> None:
            try:
                outcomes[index] = self._read_source(reader)
            except BaseException as e:  # re-raised on the calling thread
                failures[index] = e

        threads = [
            threading.Thread(target=work, args=(i, reader), name=f"keyloc-{reader.name}", daemon=True)
            for i, reader in enumerate(self.readers)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        for failure in failures:
            if failure is not None:
                raise failure
        return [outcome for outcome in outcomes if outcome is not None]
