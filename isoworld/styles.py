"""UI layout dimensions, colour palette and default node styles."""

from __future__ import annotations

from dataclasses import dataclass

from . import constants
from .constants import (
    BUTTON_GAP,
    BUTTON_HEIGHT,
    HEADER_HEIGHT,
    PADDING,
    SIDEBAR_WIDTH,
    WHITE,
)

__all__ = [
    "BUTTON_GAP",
    "BUTTON_HEIGHT",
    "HEADER_HEIGHT",
    "PADDING",
    "SIDEBAR_WIDTH",
    "BUTTON_COLOR",
    "BUTTON_HOVER_COLOR",
    "BUTTON_PRESSED_COLOR",
    "UiColors",
    "NodeStyle",
    "default_button_style",
]

BUTTON_COLOR = constants.BUTTON_NORMAL
BUTTON_HOVER_COLOR = constants.BUTTON_HOVERED
BUTTON_PRESSED_COLOR = constants.BUTTON_PRESSED


class UiColors:
    """The palette used by UI panels."""

    BACKGROUND = constants.UI_BACKGROUND_DARK
    HEADER_BG = constants.UI_BACKGROUND_MEDIUM
    SIDEBAR_BG = constants.UI_BACKGROUND_LIGHT
    BUTTON_NORMAL = constants.BUTTON_NORMAL
    BUTTON_HOVER = constants.BUTTON_HOVERED
    BUTTON_PRESSED = constants.BUTTON_PRESSED
    TEXT_PRIMARY = WHITE
    TEXT_SECONDARY = constants.TEXT_PRIMARY


def _px(value: float) -> str:
    return f"{value:g}px"


def _percent(value: float) -> str:
    return f"{value:g}%"


@dataclass(frozen=True)
class NodeStyle:
    """Layout of a UI node; lengths are CSS-like strings such as '40px' or '100%'."""

    width: str = "auto"
    height: str = "auto"
    justify_content: str = "start"
    align_items: str = "stretch"


def default_button_style() -> NodeStyle:
    """Full-width, fixed-height button with centred content."""
    return NodeStyle(
        width=_percent(100.0),
        height=_px(BUTTON_HEIGHT),
        justify_content="center",
        align_items="center",
    )