"""External command execution for source readers.

Readers never call :mod:`subprocess` directly; they receive a
``CommandRunner`` so tests can substitute canned output.
"""

from __future__ import annotations

import logging
import subprocess
from typing import Callable, Optional, Sequence

from keyloc.errors import CommandInvocationError, SourceUnavailableError

logger = logging.getLogger(__name__)

# Runs a command and returns its stdout as text.
CommandRunner = Callable[[Sequence[str]], str]


def run_command(args: Sequence[str], timeout: Optional[float] = None) -> str:
    """Run an external command and return its standard output.

    Args:
        args: Command name followed by its arguments
        timeout: Optional limit in seconds; None waits for the command

    Returns:
        Decoded standard output

    Raises:
        SourceUnavailableError: The command is missing, not permitted,
            exits non-zero or times out
        CommandInvocationError: The command could not be invoked at all
    """
    cmd = list(args)
    if not cmd:
        raise CommandInvocationError("Empty command")

    logger.debug(f"Running {' '.join(cmd)}")
    try:
        proc = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
            check=True,
        )
    except FileNotFoundError as e:
        raise SourceUnavailableError(f"Command not found: {cmd[0]}") from e
    except PermissionError as e:
        raise SourceUnavailableError(f"Permission denied running {cmd[0]}") from e
    except subprocess.CalledProcessError as e:
        raise SourceUnavailableError(
            f"{cmd[0]} exited with status {e.returncode}: {(e.stderr or '').strip()}"
        ) from e
    except subprocess.TimeoutExpired as e:
        raise SourceUnavailableError(f"{cmd[0]} timed out after {timeout}s") from e
    except (OSError, ValueError) as e:
        raise CommandInvocationError(f"Failed to invoke {cmd[0]}: {e}") from e

    return proc.stdout


def make_runner(timeout: Optional[float] = None) -> CommandRunner:
    """Build a runner bound to a timeout (0 or None disables it)."""
    bound = timeout or None

    def runner(args: Sequence[str]) -> str:
        return run_command(args, timeout=bound)

    return runner
