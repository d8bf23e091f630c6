import pytest

from isoworld.log_buffer import (
    LogBuffer,
    LogCategory,
    LogEntry,
    LogEvent,
    category_label,
)


def test_log_buffer_creation():
    buffer = LogBuffer(100)
    assert len(buffer.entries) == 0
    assert buffer.max_entries == 100
    assert buffer.current_frame == 0


def test_log_buffer_default_capacity():
    assert LogBuffer().max_entries == 10000


def test_log_buffer_add_entry():
    buffer = LogBuffer(10)
    buffer.add_entry(LogCategory.KEYPRESS, "Test keypress", "key: A")
    assert len(buffer.entries) == 1
    entry = buffer.entries[0]
    assert entry.message == "Test keypress"
    assert entry.data == "key: A"
    assert entry.category is LogCategory.KEYPRESS


def test_log_buffer_overflow():
    buffer = LogBuffer(3)
    for i in range(5):
        buffer.add_entry(LogCategory.SYSTEM_EVENT, f"Event {i}")
    assert len(buffer.entries) == 3
    assert [e.message for e in buffer.entries] == ["Event 2", "Event 3", "Event 4"]


@pytest.mark.parametrize(
    "category, expected",
    [
        (LogCategory.KEYPRESS, "KEYPRESS"),
        (LogCategory.MOUSE_CLICK, "MOUSE_CLICK"),
        (LogCategory.MOUSE_MOVE, "MOUSE_MOVE"),
        (LogCategory.GAME_EVENT, "GAME_EVENT"),
        (LogCategory.SYSTEM_EVENT, "SYSTEM"),
        (LogCategory.PERFORMANCE_METRIC, "PERFORMANCE"),
        (LogCategory.STATE_CHANGE, "STATE_CHANGE"),
        (LogCategory.SCREENSHOT, "SCREENSHOT"),
        ("TEST", "TEST"),
    ],
)
def test_log_categories(category, expected):
    buffer = LogBuffer(10)
    buffer.add_entry(category, "Test")
    assert buffer.entries[0].category == category
    assert category_label(category) == expected


def test_category_label_rejects_other_types():
    with pytest.raises(TypeError):
        category_label(42)


def test_entry_takes_current_frame():
    buffer = LogBuffer(10)
    buffer.add_entry(LogCategory.GAME_EVENT, "first")
    buffer.increment_frame()
    buffer.increment_frame()
    buffer.add_entry(LogCategory.GAME_EVENT, "second")
    assert buffer.current_frame == 2
    assert [e.frame for e in buffer.entries] == [0, 2]


def test_entry_timestamp_ms():
    entry = LogEntry(LogCategory.GAME_EVENT, "x", timestamp_ns=1_234_567_890_123)
    assert entry.timestamp_ms == 1_234_567


def test_zero_capacity_keeps_nothing():
    buffer = LogBuffer(0)
    buffer.add_entry(LogCategory.GAME_EVENT, "dropped")
    assert len(buffer) == 0


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        LogBuffer(-1)


def test_log_event_defaults_to_no_data():
    event = LogEvent(LogCategory.STATE_CHANGE, "changed")
    assert event.data is None