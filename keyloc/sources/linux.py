"""Linux keyboard layouts from systemd-localed or the X server.

``localectl status`` reports ``X11 Layout: us,kr``; without systemd the same
information comes from ``setxkbmap -query`` as ``layout:     us,kr``.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from keyloc.capabilities import map_xkb_layout
from keyloc.errors import SourceUnavailableError

from .protocol import RawIdentifier
from .registry import register_backend
from .runner import CommandRunner

logger = logging.getLogger(__name__)

LOCALECTL_COMMAND = ["localectl", "status"]
SETXKBMAP_COMMAND = ["setxkbmap", "-query"]

# Placeholder localectl prints when no X11 layout is configured.
_NOT_AVAILABLE = "n/a"


def parse_layouts(output: str) -> List[str]:
    """Extract layout codes from the first layout line of command output."""
    for line in output.splitlines():
        if "Layout:" in line or "layout:" in line:
            _, _, value = line.partition(":")
            layouts = [layout.strip() for layout in value.split(",")]
            return [layout for layout in layouts if layout and layout != _NOT_AVAILABLE]
    return []


class XkbLayoutReader:
    """Configured X11 keyboard layouts."""

    name = "xkb_layouts"

    def __init__(self, runner: CommandRunner) -> None:
        self._run = runner

    def read(self) -> List[RawIdentifier]:
        primary_error: Optional[SourceUnavailableError] = None
        try:
            layouts = parse_layouts(self._run(LOCALECTL_COMMAND))
            if layouts:
                return list(layouts)
            logger.info("localectl reported no X11 layout, querying setxkbmap")
        except SourceUnavailableError as e:
            primary_error = e
            logger.info(f"localectl unavailable ({e}), querying setxkbmap")

        try:
            return list(parse_layouts(self._run(SETXKBMAP_COMMAND)))
        except SourceUnavailableError:
            if primary_error is None:
                # localectl answered, it just had nothing configured
                return []
            raise

    def resolve(self, identifier: RawIdentifier) -> Optional[str]:
        return map_xkb_layout(str(identifier))


def linux_readers(runner: CommandRunner) -> list:
    return [XkbLayoutReader(runner)]


register_backend("linux", linux_readers)
