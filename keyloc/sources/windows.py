"""Windows keyboard layouts from ``user32.GetKeyboardLayoutList``."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from keyloc.capabilities import resolve_lcid
from keyloc.errors import SourceUnavailableError

from .protocol import RawIdentifier
from .registry import register_backend
from .runner import CommandRunner

logger = logging.getLogger(__name__)

# Returns the keyboard layout handles (HKL) loaded for the current user.
LayoutListFn = Callable[[], List[int]]


def get_keyboard_layout_list() -> List[int]:
    """Call GetKeyboardLayoutList through ctypes.

    Raises:
        SourceUnavailableError: If user32 cannot be loaded or the call fails
    """
    try:
        import ctypes

        user32 = ctypes.WinDLL("user32", use_last_error=True)  # type: ignore[attr-defined]
    except (ImportError, AttributeError, OSError) as e:
        raise SourceUnavailableError(f"user32 is not available: {e}") from e

    fn = user32.GetKeyboardLayoutList
    fn.argtypes = [ctypes.c_int, ctypes.POINTER(ctypes.c_void_p)]
    fn.restype = ctypes.c_int

    count = fn(0, None)
    if count == 0:
        raise SourceUnavailableError(
            f"Failed to get number of keyboard layouts: error {ctypes.get_last_error()}"
        )

    handles = (ctypes.c_void_p * count)()
    count = fn(count, handles)
    if count == 0:
        raise SourceUnavailableError(
            f"Failed to get keyboard layouts: error {ctypes.get_last_error()}"
        )
    return [handle or 0 for handle in handles[:count]]


class KeyboardLayoutReader:
    """Keyboard layouts loaded for the current user."""

    name = "keyboard_layouts"

    def __init__(self, layout_list: Optional[LayoutListFn] = None) -> None:
        self._layout_list = layout_list or get_keyboard_layout_list

    def read(self) -> List[RawIdentifier]:
        handles = list(self._layout_list())
        logger.debug(f"Loaded keyboard layouts: {[hex(h) for h in handles]}")
        return handles

    def resolve(self, identifier: RawIdentifier) -> Optional[str]:
        # The low word of an HKL is the layout's language identifier.
        return resolve_lcid(int(identifier) & 0xFFFF)


def windows_readers(runner: CommandRunner) -> list:  # noqa: ARG001
    return [KeyboardLayoutReader()]


register_backend("win32", windows_readers)
