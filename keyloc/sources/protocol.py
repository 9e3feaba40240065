"""Source reader interface."""

from __future__ import annotations

from typing import List, Optional, Protocol, Union, runtime_checkable

# Platform-native identifier: a layout name, locale tag or keyboard layout handle.
RawIdentifier = Union[str, int]


@runtime_checkable
class SourceReader(Protocol):
    """One OS data source that yields language identifiers."""

    name: str

    def read(self) -> List[RawIdentifier]:
        """Query the source, raising SourceUnavailableError when it cannot."""
        ...

    def resolve(self, identifier: RawIdentifier) -> Optional[str]:
        """Map a raw identifier to a language tag, or None if unmapped."""
        ...
