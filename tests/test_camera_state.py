import math

import pytest

from isoworld.camera_state import CameraState, Vec2
from isoworld.constants import (
    DEFAULT_FRICTION,
    DEFAULT_MOVE_SPEED,
    DEFAULT_ZOOM,
    DEFAULT_ZOOM_SPEED,
    MAX_ZOOM,
    MIN_ZOOM,
)

F32_EPSILON = 1.1920929e-07


def test_camera_state_default():
    state = CameraState()
    assert state.zoom == DEFAULT_ZOOM
    assert state.min_zoom == MIN_ZOOM
    assert state.max_zoom == MAX_ZOOM
    assert state.velocity == Vec2()
    assert state.move_speed == DEFAULT_MOVE_SPEED
    assert state.zoom_speed == DEFAULT_ZOOM_SPEED
    assert state.friction == DEFAULT_FRICTION


def test_apply_zoom_within_limits():
    state = CameraState()
    state.apply_zoom(0.5)
    assert state.zoom == 1.5
    state.apply_zoom(-0.5)
    assert state.zoom == 1.0


def test_apply_zoom_returns_new_zoom():
    state = CameraState()
    assert state.apply_zoom(0.5) == state.zoom


def test_apply_zoom_clamps_to_max():
    state = CameraState()
    state.apply_zoom(10.0)
    assert state.zoom == state.max_zoom


def test_apply_zoom_clamps_to_min():
    state = CameraState()
    state.apply_zoom(-10.0)
    assert state.zoom == state.min_zoom


def test_apply_zoom_edge_cases():
    state = CameraState()
    original = state.zoom
    state.apply_zoom(0.0)
    assert state.zoom == original

    state.apply_zoom(0.0001)
    assert abs(state.zoom - 1.0001) < F32_EPSILON

    state.zoom = state.max_zoom
    state.apply_zoom(-0.1)
    assert state.zoom == state.max_zoom - 0.1


def test_update_velocity_applies_friction():
    state = CameraState(velocity=Vec2(100.0, 100.0))
    initial = state.velocity.length()
    state.update_velocity(1.0 / 60.0)
    new_speed = state.velocity.length()
    assert new_speed < initial
    assert new_speed > 0.0


def test_update_velocity_zeros_small_values():
    state = CameraState(velocity=Vec2(0.001, 0.001))
    state.update_velocity(1.0 / 60.0)
    assert state.velocity == Vec2()


def test_update_velocity_with_different_delta_times():
    state1 = CameraState(velocity=Vec2(100.0, 100.0))
    state2 = CameraState(velocity=Vec2(100.0, 100.0))
    state1.update_velocity(1.0 / 60.0)
    state2.update_velocity(1.0 / 30.0)
    assert state1.velocity.length() < 100.0 * math.sqrt(2)
    assert state2.velocity.length() < 100.0 * math.sqrt(2)
    assert state2.velocity.length() < state1.velocity.length()


def test_update_velocity_keeps_direction():
    state = CameraState(velocity=Vec2(100.0, 50.0))
    state.update_velocity(1.0 / 60.0)
    assert state.velocity.x == pytest.approx(2 * state.velocity.y)


def test_camera_state_custom_values():
    state = CameraState(
        zoom=1.5,
        min_zoom=0.25,
        max_zoom=4.0,
        velocity=Vec2(50.0, -50.0),
        move_speed=300.0,
        zoom_speed=0.2,
        friction=0.85,
    )
    assert state.zoom == 1.5
    assert state.min_zoom == 0.25
    assert state.max_zoom == 4.0
    assert state.velocity == Vec2(50.0, -50.0)
    assert state.move_speed == 300.0
    assert state.zoom_speed == 0.2
    assert state.friction == 0.85


def test_velocity_friction_over_multiple_frames():
    state = CameraState(velocity=Vec2(1000.0, 0.0))
    for _ in range(60):
        state.update_velocity(1.0 / 60.0)
    assert state.velocity.x < 100.0


def test_vec2_length():
    assert Vec2(3.0, 4.0).length() == 5.0


def test_vec2_length_squared_matches_length():
    v = Vec2(1.5, -2.5)
    assert v.length_squared() == pytest.approx(v.length() ** 2)


def test_vec2_normalize_gives_unit_length():
    v = Vec2(7.0, -3.0).normalize()
    assert v.length() == pytest.approx(1.0)


def test_vec2_normalize_zero_raises():
    with pytest.raises(ValueError):
        Vec2().normalize()


def test_vec2_arithmetic_round_trip():
    a = Vec2(1.0, 2.0)
    b = Vec2(-4.0, 0.5)
    assert (a + b) - b == a
    assert 2.0 * a == a * 2.0
    assert -(-a) == a