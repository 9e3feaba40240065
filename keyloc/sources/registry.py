"""Platform backend registry.

Each platform module registers a factory that builds its source readers;
the aggregator picks the one matching the running platform.
"""

from __future__ import annotations

import sys
from typing import Callable, Dict, List, Optional

from .protocol import SourceReader
from .runner import CommandRunner

BackendFactory = Callable[[CommandRunner], List[SourceReader]]
_registry: Dict[str, BackendFactory] = {}


def register_backend(platform: str, factory: BackendFactory) -> None:
    """Register a reader factory for a ``sys.platform`` value."""
    _registry[platform] = factory


def available() -> list[str]:
    """Get list of platforms with a registered backend."""
    return sorted(_registry.keys())


def current_platform(override: Optional[str] = None) -> str:
    """Return the platform name used for backend selection."""
    return override or sys.platform


def create(platform: str, runner: CommandRunner) -> List[SourceReader]:
    """Create the readers for a platform.

    Raises:
        ValueError: If no backend is registered for the platform
    """
    try:
        factory = _registry[platform]
    except KeyError:
        raise ValueError(f"No language source backend for platform: {platform}")
    return factory(runner)
