import pytest

from isoworld.input_logging import (
    LogPipeline,
    MouseMotionLogger,
    key_name,
    log_keypress,
    log_mouse_button,
    setup_logging,
)
from isoworld.log_buffer import LogBuffer, LogCategory, LogEvent
from isoworld.log_writer import LogWriter


@pytest.fixture
def writer(tmp_path):
    with LogWriter("session", tmp_path) as log_writer:
        yield log_writer


@pytest.mark.parametrize(
    "code, name",
    [("KeyA", "A"), ("Digit0", "0"), ("ShiftLeft", "LeftShift"), ("ArrowUp", "Up")],
)
def test_key_name(code, name):
    assert key_name(code) == name


def test_key_name_unknown():
    assert key_name("F13") == "Unknown"


def test_log_keypress_carries_key_and_state():
    pressed = log_keypress("KeyW", True)
    released = log_keypress("KeyW", False)
    assert pressed.category is LogCategory.KEYPRESS
    assert pressed.message.endswith("pressed")
    assert released.message.endswith("released")
    assert pressed.data == "keycode: KeyW"


def test_log_mouse_button_unknown_position():
    event = log_mouse_button("Left", True)
    assert event.category is LogCategory.MOUSE_CLICK
    assert event.data.endswith("unknown")


def test_log_mouse_button_other_is_ignored():
    assert log_mouse_button("Other", True) is None


def test_log_mouse_button_formats_position():
    event = log_mouse_button("Right", False, (10.0, 20.0))
    assert "10.0" in event.data and "20.0" in event.data


def test_mouse_motion_logged_every_tenth():
    motion = MouseMotionLogger()
    events = [motion.log(1.0, 1.0) for _ in range(25)]
    logged = [i for i, e in enumerate(events) if e is not None]
    assert logged == [9, 19]
    assert events[9].message == "Mouse moved"
    assert events[9].category is LogCategory.MOUSE_MOVE


def test_setup_logging_writes_header(writer):
    assert setup_logging(writer) is True
    assert "Log format" in writer.log_path.read_text()


def test_setup_logging_reports_failure(tmp_path):
    closed = LogWriter("closed", tmp_path)
    closed.close()
    assert setup_logging(closed) is False


def test_pipeline_buffers_and_writes_events(writer):
    buffer = LogBuffer(10)
    pipeline = LogPipeline(buffer, writer)
    added = pipeline.process([LogEvent(LogCategory.GAME_EVENT, "spawned", "id: 1")], 0.1)
    assert len(added) == 1
    assert buffer.current_frame == 1
    assert added[0].frame == 1
    assert "spawned | data: id: 1" in writer.log_path.read_text()


def test_pipeline_adds_performance_metric_once_per_second(writer):
    buffer = LogBuffer(10)
    pipeline = LogPipeline(buffer, writer)
    first = pipeline.process([], 0.5)
    second = pipeline.process([], 0.5)
    third = pipeline.process([], 0.5)
    assert first == []
    assert third == []
    assert len(second) == 1
    assert second[0].category is LogCategory.PERFORMANCE_METRIC
    assert second[0].message.startswith("FPS: ")
    assert pipeline.perf_timer == 0.5