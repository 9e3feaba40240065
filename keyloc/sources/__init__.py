"""OS language sources.

Platform modules register their readers on import.
"""

from . import darwin, linux, windows  # noqa: F401
from .protocol import RawIdentifier, SourceReader
from .registry import available, create, current_platform, register_backend
from .runner import CommandRunner, make_runner, run_command

__all__ = [
    "RawIdentifier",
    "SourceReader",
    "available",
    "create",
    "current_platform",
    "register_backend",
    "CommandRunner",
    "make_runner",
    "run_command",
]
