"""Structured JSONL logging for keyloc query records."""

from __future__ import annotations

import json
import sys
import time
import uuid
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, TextIO, Union

from keyloc import config


class LogLevel(Enum):
    """Standard log levels."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class StructuredLogger:
    """Write one JSON object per log entry to a file and/or the console."""

    def __init__(
        self,
        component: str,
        session_id: Optional[str] = None,
        output_file: Optional[Union[str, Path, TextIO]] = None,
        enable_console: bool = False,
    ) -> None:
        """Initialize structured logger.

        Args:
            component: Component identifier (e.g., 'cli', 'aggregator')
            session_id: Optional session ID for correlation
            output_file: Optional file path or handle for log output
            enable_console: Whether to also write entries to stderr
        """
        self.component = component
        self.session_id = session_id or str(uuid.uuid4())[:8]
        self.start_time = time.time()
        self.console_enabled = enable_console
        self.log_file: Optional[TextIO] = None
        self._owns_file = False

        if isinstance(output_file, (str, Path)):
            path = Path(output_file)
            path.parent.mkdir(parents=True, exist_ok=True)
            self.log_file = open(path, "a", encoding="utf-8")
            self._owns_file = True
        elif output_file is not None:
            self.log_file = output_file

    def _format_log_entry(self, level: LogLevel, message: str, **context: Any) -> Dict[str, Any]:
        return {
            "timestamp": time.time(),
            "iso_timestamp": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
            "level": level.value,
            "component": self.component,
            "session_id": self.session_id,
            "session_time": time.time() - self.start_time,
            "message": message,
            **context,
        }

    def _write_log(self, entry: Dict[str, Any]) -> None:
        json_line = json.dumps(entry, default=str, separators=(",", ":"))

        if self.console_enabled:
            print(json_line, file=sys.stderr, flush=True)

        if self.log_file:
            self.log_file.write(json_line + "\n")
            self.log_file.flush()

    def debug(self, message: str, **context: Any) -> None:
        self._write_log(self._format_log_entry(LogLevel.DEBUG, message, **context))

    def info(self, message: str, **context: Any) -> None:
        self._write_log(self._format_log_entry(LogLevel.INFO, message, **context))

    def warning(self, message: str, **context: Any) -> None:
        self._write_log(self._format_log_entry(LogLevel.WARNING, message, **context))

    def error(self, message: str, **context: Any) -> None:
        self._write_log(self._format_log_entry(LogLevel.ERROR, message, **context))

    def close(self) -> None:
        """Close the log file if this logger opened it."""
        if self.log_file and self._owns_file:
            self.log_file.close()
        self.log_file = None


def create_logger(
    component: str,
    session_id: Optional[str] = None,
    log_dir: Optional[Union[str, Path]] = None,
    **kwargs: Any,
) -> StructuredLogger:
    """Create a structured logger writing to ``<log_dir>/<component>_<session>.jsonl``.

    Args:
        component: Component identifier
        session_id: Optional session ID for correlation
        log_dir: Directory for log files (uses KL_LOG_DIR if not provided)
        **kwargs: Additional arguments passed to StructuredLogger

    Returns:
        Configured StructuredLogger instance; without a log directory it
        writes nowhere unless console output is enabled
    """
    if log_dir is None:
        log_dir = config.settings.log_dir or None

    output_file = None
    if log_dir:
        output_file = Path(log_dir) / f"{component}_{session_id or 'default'}.jsonl"

    return StructuredLogger(
        component=component, session_id=session_id, output_file=output_file, **kwargs
    )
