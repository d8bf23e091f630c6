"""Shared constants and the colour type used throughout the application."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Color:
    """An sRGB colour with an alpha channel, components in the 0..1 range."""

    r: float
    g: float
    b: float
    a: float = 1.0

    @classmethod
    def srgb(cls, r: float, g: float, b: float) -> Color:
        """Build an opaque colour."""
        return cls(r, g, b, 1.0)

    @classmethod
    def srgba(cls, r: float, g: float, b: float, a: float) -> Color:
        """Build a colour with an explicit alpha."""
        return cls(r, g, b, a)

    def with_alpha(self, alpha: float) -> Color:
        """Return a copy of this colour with a different alpha."""
        return replace(self, a=alpha)


WHITE = Color.srgb(1.0, 1.0, 1.0)
BLACK = Color.srgb(0.0, 0.0, 0.0)

# Grid and map
DEFAULT_TILE_SIZE = 64.0
DEFAULT_MAP_WIDTH = 200
DEFAULT_MAP_HEIGHT = 200
WATER_BORDER_SIZE = 5

# Camera
DEFAULT_ZOOM = 1.0
MIN_ZOOM = 0.1
MAX_ZOOM = 5.0
DEFAULT_MOVE_SPEED = 500.0
DEFAULT_ZOOM_SPEED = 0.1
DEFAULT_FRICTION = 0.9
FRICTION_FPS_BASE = 60.0
VELOCITY_STOP_THRESHOLD = 0.01
KEYBOARD_ZOOM_MULTIPLIER = 5.0
PIXEL_SCROLL_SCALE = 0.01
ISOMETRIC_HEIGHT_RATIO = 0.5
BOUNDS_PADDING_MULTIPLIER = 2.0
MIN_CAMERA_SCALE = 0.1

# UI dimensions
HEADER_HEIGHT = 60.0
SIDEBAR_WIDTH = 200.0
BUTTON_HEIGHT = 40.0
PADDING = 10.0
BUTTON_GAP = 10.0

# Info panel
INFO_PANEL_WIDTH = 250.0
INFO_PANEL_HEIGHT = 300.0
INFO_PANEL_PADDING = 15.0
INFO_PANEL_ROW_GAP = 10.0
INFO_PANEL_TITLE_FONT_SIZE = 24.0
INFO_PANEL_TEXT_FONT_SIZE = 16.0
INFO_PANEL_SEPARATOR_HEIGHT = 2.0
INFO_PANEL_SEPARATOR_MARGIN = 5.0
INFO_PANEL_BACKGROUND_ALPHA = 0.9
INFO_PANEL_RIGHT_MARGIN = 10.0
INFO_PANEL_TOP_MARGIN = 70.0

# Performance overlay
PERFORMANCE_MARGIN = 10.0
PERFORMANCE_PADDING = 10.0
PERFORMANCE_ROW_GAP = 5.0
PERFORMANCE_FONT_SIZE = 14.0
PERFORMANCE_BACKGROUND_ALPHA = 0.8

# View culling
CULLING_DEFAULT_BUFFER_TILES = 5
CULLING_DEFAULT_TILES_PER_FRAME = 5000
CULLING_MIN_DYNAMIC_BUFFER = 2.0
CULLING_DEBUG_LOG_INTERVAL_SECS = 1

# World generation
DEFAULT_SEED = 42
DEFAULT_NOISE_SCALE = 0.05
WATER_LEVEL = 0.3
MOUNTAIN_LEVEL = 0.7
MOISTURE_SCALE_MULTIPLIER = 1.5
ISLAND_DISTANCE_FACTOR = 0.8
BIOME_DESERT_MOISTURE = 0.3
BIOME_FOREST_MOISTURE = 0.7

# Mesh generation
DIAMOND_WIDTH = 1.0
DIAMOND_HEIGHT_RATIO = 0.5
DIAMOND_VERTEX_COUNT = 4
HEXAGON_SIDES = 6
HEXAGON_ANGLE_MULTIPLIER = 2.0
UV_MIN = 0.0
UV_MID = 0.5
UV_MAX = 1.0
BEVEL_UV_INSET = 0.2

# Colours
UI_BACKGROUND_DARK = Color.srgb(0.1, 0.1, 0.1)
UI_BACKGROUND_MEDIUM = Color.srgb(0.15, 0.15, 0.15)
UI_BACKGROUND_LIGHT = Color.srgb(0.2, 0.2, 0.2)
BUTTON_NORMAL = Color.srgb(0.3, 0.3, 0.3)
BUTTON_HOVERED = Color.srgb(0.4, 0.4, 0.4)
BUTTON_PRESSED = Color.srgb(0.5, 0.5, 0.5)
TEXT_PRIMARY = Color.srgb(0.8, 0.8, 0.8)
TEXT_SECONDARY = Color.srgb(0.6, 0.6, 0.6)
TILE_HOVERED = Color.srgba(1.0, 1.0, 0.0, 0.3)
TILE_SELECTED = Color.srgba(0.0, 1.0, 0.0, 0.5)

# Timing
EXPECTED_FRAME_TIME = 0.016
MOVEMENT_SPEED_TOLERANCE = 10.0