"""Turning input into log events and feeding events through the buffer to the log file."""

from __future__ import annotations

import logging
import string
from collections.abc import Iterable
from typing import Optional

from .log_buffer import LogBuffer, LogCategory, LogEntry, LogEvent
from .log_writer import LogWriter

logger = logging.getLogger(__name__)

_KEY_NAMES: dict[str, str] = {
    **{f"Key{letter}": letter for letter in string.ascii_uppercase},
    **{f"Digit{digit}": digit for digit in string.digits},
    "Space": "Space",
    "Enter": "Enter",
    "Escape": "Escape",
    "Backspace": "Backspace",
    "Tab": "Tab",
    "ShiftLeft": "LeftShift",
    "ShiftRight": "RightShift",
    "ControlLeft": "LeftCtrl",
    "ControlRight": "RightCtrl",
    "AltLeft": "LeftAlt",
    "AltRight": "RightAlt",
    "ArrowUp": "Up",
    "ArrowDown": "Down",
    "ArrowLeft": "Left",
    "ArrowRight": "Right",
}

_MOUSE_BUTTONS = frozenset({"Left", "Right", "Middle", "Back", "Forward"})

MOTION_LOG_EVERY = 10


def setup_logging(writer: LogWriter) -> bool:
    """Write the log header; a failure is logged and reported as False."""
    try:
        writer.write_header()
    except (OSError, ValueError) as exc:
        logger.error("Failed to write log header: %s", exc)
        return False
    return True


def key_name(key_code: str) -> str:
    """Readable name of a key code such as 'KeyA' or 'ArrowUp'; 'Unknown' otherwise."""
    return _KEY_NAMES.get(key_code, "Unknown")


def log_keypress(key_code: str, pressed: bool) -> LogEvent:
    """Log event for a key press or release."""
    state = "pressed" if pressed else "released"
    return LogEvent(
        category=LogCategory.KEYPRESS,
        message=f"Key {key_name(key_code)} {state}",
        data=f"keycode: {key_code}",
    )


def log_mouse_button(
    button: str, pressed: bool, cursor: Optional[tuple[float, float]] = None
) -> Optional[LogEvent]:
    """Log event for a mouse button, or None for buttons other than the five named ones."""
    if button not in _MOUSE_BUTTONS:
        return None
    state = "pressed" if pressed else "released"
    position = f"({cursor[0]:.1f}, {cursor[1]:.1f})" if cursor is not None else "unknown"
    return LogEvent(
        category=LogCategory.MOUSE_CLICK,
        message=f"{button} mouse button {state}",
        data=f"position: {position}",
    )


class MouseMotionLogger:
    """Logs only every tenth mouse motion to keep the log readable."""

    def __init__(self) -> None:
        self.count = 0

    def log(self, dx: float, dy: float) -> Optional[LogEvent]:
        """Count a motion; return an event on every tenth one."""
        self.count += 1
        if self.count % MOTION_LOG_EVERY:
            return None
        return LogEvent(
            category=LogCategory.MOUSE_MOVE,
            message="Mouse moved",
            data=f"delta: ({dx:.1f}, {dy:.1f})",
        )


class LogPipeline:
    """Per-frame log processing: buffer events, write them, and add a metric once a second."""

    def __init__(self, buffer: LogBuffer, writer: LogWriter) -> None:
        self.buffer = buffer
        self.writer = writer
        self.perf_timer = 0.0

    def _write(self, entry: LogEntry, what: str) -> None:
        try:
            self.writer.write_entry(entry)
        except (OSError, ValueError) as exc:
            logger.error("Failed to write %s: %s", what, exc)

    def process(self, events: Iterable[LogEvent], delta_secs: float) -> list[LogEntry]:
        """Advance a frame and record the events; returns the entries added this frame."""
        self.buffer.increment_frame()
        added: list[LogEntry] = []
        for event in events:
            entry = self.buffer.add_entry(event.category, event.message, event.data)
            self._write(entry, "log entry")
            added.append(entry)

        self.perf_timer += delta_secs
        if self.perf_timer >= 1.0:
            self.perf_timer = 0.0
            fps = 1.0 / delta_secs if delta_secs else float("inf")
            entry = self.buffer.add_entry(
                LogCategory.PERFORMANCE_METRIC,
                f"FPS: {fps:.1f}",
                f"delta_time: {delta_secs * 1000.0:.3f}ms",
            )
            self._write(entry, "performance log")
            added.append(entry)
        return added