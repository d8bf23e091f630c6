"""Writes log entries to a per-session log file."""

from __future__ import annotations

import threading
import time
from datetime import datetime
from pathlib import Path
from typing import Union

from .log_buffer import LogEntry, category_label

LOG_FORMAT_LINE = "Log format: [timestamp_ms] Frame # | CATEGORY | message | data"


def format_entry(entry: LogEntry) -> str:
    """Render an entry as one log line, without the newline."""
    data = f" | data: {entry.data}" if entry.data is not None else ""
    return (
        f"[{entry.timestamp_ms}] Frame {entry.frame} | "
        f"{category_label(entry.category)} | {entry.message}{data}"
    )


class LogWriter:
    """Owns a session directory and its log.txt, written line by line and flushed."""

    def __init__(self, session_name: str, root: Union[str, Path] = "logs") -> None:
        self.log_dir = Path(root) / session_name
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.log_path = self.log_dir / "log.txt"
        self._lock = threading.Lock()
        self._file = open(self.log_path, "w", encoding="utf-8")

    @classmethod
    def for_new_session(cls, root: Union[str, Path] = "logs") -> LogWriter:
        """Create a writer for a session named after the current Unix time in seconds."""
        return cls(f"session_{int(time.time())}", root)

    def _write_lines(self, lines: list[str]) -> None:
        with self._lock:
            self._file.write("".join(f"{line}\n" for line in lines))
            self._file.flush()

    def write_entry(self, entry: LogEntry) -> None:
        """Append one entry to the log file."""
        self._write_lines([format_entry(entry)])

    def write_header(self) -> None:
        """Write the session header block."""
        self._write_lines(
            [
                "=== ISOWORLD DEBUG LOG ===",
                f"Started at: {datetime.now().isoformat()}",
                LOG_FORMAT_LINE,
                f'Session directory: "{self.log_dir}"',
                "=" * 44,
                "",
            ]
        )

    def screenshot_path(self, timestamp: int) -> Path:
        """Path for a screenshot taken at the given timestamp."""
        return self.log_dir / f"screenshot_{timestamp}.png"

    def close(self) -> None:
        """Close the log file."""
        with self._lock:
            self._file.close()

    def __enter__(self) -> LogWriter:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()