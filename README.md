# isoworld

This package holds the state and input logic of an isometric world game. It covers the following areas.

**Game flow (`isoworld.game_state`)**
- `GameState` lists the states: main menu, playing, paused and game over.
- `GameFlow` holds the current state and one pending transition. `apply_pending()` carries out that transition.
- Escape requests a pause through `handle_pause_input` and a resume through `handle_resume_input`.
- `handle_menu_buttons` recolours the start buttons. A pressed button requests play.
- `update()` runs one frame: it applies the pending transition, then handles input for the current state.
- `build_main_menu()` and `build_pause_menu()` describe the two overlay `Screen`s.

**Top bar (`isoworld.top_bar`)**
- `build_top_bar()` returns a `TopBar` with Pause, Menu and Quit `ControlButton`s.
- `handle_control_buttons(buttons, flow)` recolours the buttons and requests state changes on a `GameFlow`. It returns whether Quit was pressed.

**Camera (`isoworld.camera_state`, `isoworld.camera_controls`)**
- `CameraState.apply_zoom` keeps the zoom between `min_zoom` and `max_zoom`.
- `CameraState.update_velocity` slows the velocity by friction scaled to the frame time. A very small velocity becomes zero.
- `keyboard_camera` pans with WASD or the arrow keys.
- `keyboard_zoom` zooms with Q and E, and sets the `CameraTransform` scale to match the zoom.
- `mouse_zoom` zooms by `ScrollEvent`s. Pixel-unit scrolls are scaled down.
- Keys are given as key-code strings such as `"KeyW"` or `"ArrowUp"`.

**Session logging (`isoworld.log_buffer`, `isoworld.log_writer`, `isoworld.input_logging`)**
- `LogBuffer` keeps the most recent `LogEntry` records and a frame counter. It holds 10,000 entries by default.
- `LogWriter` creates `logs/<session>/log.txt` and writes each entry as one flushed line:
  `[timestamp_ms] Frame N | CATEGORY | message | data`
- `LogWriter.screenshot_path` gives the path for a screenshot file in the session directory.
- `key_name`, `log_keypress`, `log_mouse_button` and `MouseMotionLogger` turn input into `LogEvent`s. `MouseMotionLogger` keeps one motion in ten.
- `LogPipeline.process` advances the frame, records and writes the events, and adds an FPS line once a second.

**UI styling (`isoworld.styles`, `isoworld.ui_components`)**
- `UiColors` and the button colour constants make up the palette.
- `default_button_style()` returns the standard button layout as a `NodeStyle`.
- `InteractiveButton` carries a `ButtonAction`: navigate, open dialog, close dialog or custom.

## What it does not do

The package has no rendering, window, world map or main loop, and no command to run. It also does not capture screenshots. It only computes where a screenshot would be saved. The caller supplies the input each frame and draws the result.

## Installation

```
pip install .
```

To install with the test tools:

```
pip install ".[test]"
```

## Example

```python
from isoworld.game_state import GameFlow, GameState
from isoworld.camera_state import CameraState
from isoworld.camera_controls import CameraTransform, keyboard_camera
from isoworld.log_buffer import LogBuffer, LogCategory

flow = GameFlow(GameState.PLAYING)
flow.handle_pause_input(escape_just_pressed=True)
flow.apply_pending()
assert flow.state is GameState.PAUSED

camera = CameraState()
camera.apply_zoom(10.0)          # clamped to camera.max_zoom
transform = CameraTransform()
keyboard_camera(camera, transform, {"KeyD"}, 1 / 60)

buffer = LogBuffer(max_entries=3)
buffer.add_entry(LogCategory.KEYPRESS, "Key A pressed", "keycode: KeyA")
```

## Writing a session log

```python
from isoworld.log_buffer import LogBuffer, LogEvent, LogCategory
from isoworld.log_writer import LogWriter
from isoworld.input_logging import LogPipeline, setup_logging

with LogWriter.for_new_session() as writer:
    setup_logging(writer)
    pipeline = LogPipeline(LogBuffer(), writer)
    pipeline.process([LogEvent(LogCategory.GAME_EVENT, "World ready")], 0.016)
    print(writer.screenshot_path(1234567890))
```

## Running the tests

```
pytest
```