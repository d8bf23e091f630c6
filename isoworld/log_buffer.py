"""In-memory log records: categories, entries, events and a bounded buffer."""

from __future__ import annotations

import enum
import time
from collections import deque
from dataclasses import dataclass, field
from typing import Optional, Union


class LogCategory(enum.Enum):
    """Built-in log categories; the value is the label written to the log file."""

    KEYPRESS = "KEYPRESS"
    MOUSE_CLICK = "MOUSE_CLICK"
    MOUSE_MOVE = "MOUSE_MOVE"
    GAME_EVENT = "GAME_EVENT"
    SYSTEM_EVENT = "SYSTEM"
    PERFORMANCE_METRIC = "PERFORMANCE"
    STATE_CHANGE = "STATE_CHANGE"
    SCREENSHOT = "SCREENSHOT"


# A category is either a built-in one or a custom label given as a string.
Category = Union[LogCategory, str]


def category_label(category: Category) -> str:
    """Return the label a category is written under."""
    if isinstance(category, LogCategory):
        return category.value
    if isinstance(category, str):
        return category
    raise TypeError(f"not a log category: {category!r}")


@dataclass(frozen=True)
class LogEntry:
    """One recorded log line."""

    category: Category
    message: str
    data: Optional[str] = None
    frame: int = 0
    timestamp_ns: int = field(default_factory=time.time_ns)

    @property
    def timestamp_ms(self) -> int:
        """Milliseconds since the Unix epoch."""
        return self.timestamp_ns // 1_000_000


@dataclass(frozen=True)
class LogEvent:
    """A request to record a log entry."""

    category: Category
    message: str
    data: Optional[str] = None


class LogBuffer:
    """Keeps the most recent log entries and the current frame number."""

    def __init__(self, max_entries: int = 10_000) -> None:
        if max_entries < 0:
            raise ValueError(f"max_entries must not be negative: {max_entries}")
        self.max_entries = max_entries
        self.entries: deque[LogEntry] = deque(maxlen=max_entries)
        self.current_frame = 0

    def add_entry(
        self, category: Category, message: str, data: Optional[str] = None
    ) -> LogEntry:
        """Record an entry stamped with the current time and frame; the oldest falls out when full."""
        category_label(category)
        entry = LogEntry(
            category=category,
            message=message,
            data=data,
            frame=self.current_frame,
        )
        self.entries.append(entry)
        return entry

    def increment_frame(self) -> None:
        """Advance the frame counter by one."""
        self.current_frame += 1

    def __len__(self) -> int:
        return len(self.entries)