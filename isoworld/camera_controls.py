"""Camera input handling: keyboard panning, keyboard zoom and scroll-wheel zoom."""

from __future__ import annotations

import enum
from collections.abc import Collection, Iterable
from dataclasses import dataclass

from .camera_state import CameraState, Vec2
from .constants import KEYBOARD_ZOOM_MULTIPLIER, PIXEL_SCROLL_SCALE

_UP_KEYS = ("KeyW", "ArrowUp")
_DOWN_KEYS = ("KeyS", "ArrowDown")
_LEFT_KEYS = ("KeyA", "ArrowLeft")
_RIGHT_KEYS = ("KeyD", "ArrowRight")
ZOOM_IN_KEY = "KeyQ"
ZOOM_OUT_KEY = "KeyE"


class ScrollUnit(enum.Enum):
    """How a scroll amount is measured."""

    LINE = "line"
    PIXEL = "pixel"


@dataclass(frozen=True)
class ScrollEvent:
    """A mouse wheel or trackpad scroll."""

    unit: ScrollUnit
    y: float
    x: float = 0.0


@dataclass
class CameraTransform:
    """Camera position in world space and its uniform scale."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    scale: float = 1.0


def _any_pressed(pressed: Collection[str], keys: Iterable[str]) -> bool:
    return any(key in pressed for key in keys)


def keyboard_camera(
    state: CameraState,
    transform: CameraTransform,
    pressed: Collection[str],
    delta_secs: float,
) -> None:
    """Pan with WASD or the arrow keys: accelerate, move, then apply friction."""
    dx = float(_any_pressed(pressed, _RIGHT_KEYS)) - float(_any_pressed(pressed, _LEFT_KEYS))
    dy = float(_any_pressed(pressed, _UP_KEYS)) - float(_any_pressed(pressed, _DOWN_KEYS))
    movement = Vec2(dx, dy)
    if movement.length_squared() > 0.0:
        movement = movement.normalize()

    state.velocity = state.velocity + movement * (state.move_speed * delta_secs)
    transform.x += state.velocity.x * delta_secs
    transform.y += state.velocity.y * delta_secs
    state.update_velocity(delta_secs)


def mouse_zoom(state: CameraState, scroll_events: Iterable[ScrollEvent]) -> float:
    """Zoom by each scroll event in turn; pixel scrolls are scaled down. Returns the zoom."""
    for event in scroll_events:
        delta = event.y * state.zoom_speed
        if event.unit is ScrollUnit.PIXEL:
            delta *= PIXEL_SCROLL_SCALE
        state.apply_zoom(delta)
    return state.zoom


def keyboard_zoom(
    state: CameraState,
    transform: CameraTransform,
    pressed: Collection[str],
    delta_secs: float,
) -> float:
    """Q zooms in and E zooms out; the transform's scale follows the zoom. Returns the zoom."""
    zoom_delta = 0.0
    if ZOOM_IN_KEY in pressed:
        zoom_delta += state.zoom_speed
    if ZOOM_OUT_KEY in pressed:
        zoom_delta -= state.zoom_speed
    if zoom_delta != 0.0:
        state.apply_zoom(zoom_delta * delta_secs * KEYBOARD_ZOOM_MULTIPLIER)
    transform.scale = state.zoom
    return state.zoom