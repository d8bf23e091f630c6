"""Camera state: a small 2D vector type, zoom limits and velocity with friction."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from .constants import (
    DEFAULT_FRICTION,
    DEFAULT_MOVE_SPEED,
    DEFAULT_ZOOM,
    DEFAULT_ZOOM_SPEED,
    FRICTION_FPS_BASE,
    MAX_ZOOM,
    MIN_ZOOM,
    VELOCITY_STOP_THRESHOLD,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def length(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def length_squared(self) -> float:
        """Squared Euclidean length."""
        return self.x * self.x + self.y * self.y

    def normalize(self) -> Vec2:
        """Unit vector in the same direction; a zero vector has no direction."""
        length = self.length()
        if length == 0.0 or not math.isfinite(length):
            raise ValueError(f"cannot normalize {self}")
        return Vec2(self.x / length, self.y / length)


@dataclass
class CameraState:
    """Zoom level and limits, and the velocity that gives the camera smooth motion.

    A zoom above 1 is zoomed in, below 1 zoomed out.
    """

    zoom: float = DEFAULT_ZOOM
    min_zoom: float = MIN_ZOOM
    max_zoom: float = MAX_ZOOM
    velocity: Vec2 = field(default_factory=Vec2)
    move_speed: float = DEFAULT_MOVE_SPEED
    zoom_speed: float = DEFAULT_ZOOM_SPEED
    friction: float = DEFAULT_FRICTION

    def apply_zoom(self, delta: float) -> float:
        """Change the zoom by ``delta``, kept within the limits; returns the new zoom."""
        old_zoom = self.zoom
        self.zoom = min(max(self.zoom + delta, self.min_zoom), self.max_zoom)
        if (self.zoom == self.min_zoom and delta < 0.0) or (
            self.zoom == self.max_zoom and delta > 0.0
        ):
            logger.info(
                "Zoom clamped: old=%.3f, new=%.3f, delta=%.3f, limits=[%.3f, %.3f]",
                old_zoom,
                self.zoom,
                delta,
                self.min_zoom,
                self.max_zoom,
            )
        return self.zoom

    def update_velocity(self, delta_time: float) -> Vec2:
        """Slow the velocity by friction scaled to frame time; tiny velocities stop."""
        self.velocity = self.velocity * (self.friction ** (delta_time * FRICTION_FPS_BASE))
        if self.velocity.length_squared() < VELOCITY_STOP_THRESHOLD:
            self.velocity = Vec2()
        return self.velocity