"""keyloc error types."""

from __future__ import annotations


class KeylocError(Exception):
    """Base keyloc error."""
    pass


class SourceUnavailableError(KeylocError):
    """An OS data source could not be queried (missing command, failed call)."""
    pass


class CommandInvocationError(KeylocError):
    """The command invocation machinery itself failed."""
    pass
