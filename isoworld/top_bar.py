"""Top bar shown during play: the title and the game control buttons."""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from .constants import WHITE, Color
from .game_state import GameFlow, GameState
from .styles import BUTTON_COLOR, BUTTON_HOVER_COLOR, BUTTON_PRESSED_COLOR
from .ui_components import Interaction

logger = logging.getLogger(__name__)

TOP_BAR_HEIGHT = 60.0
TOP_BAR_BACKGROUND = Color.srgba(0.15, 0.15, 0.15, 0.95)


class ControlAction(enum.Enum):
    """What a game control button does when pressed."""

    PAUSE = "Pause"
    RESUME = "Resume"
    MAIN_MENU = "MainMenu"
    QUIT = "Quit"


@dataclass
class ControlButton:
    """A game control button in the top bar."""

    action: ControlAction
    label: str
    font_size: float = 18.0
    text_color: Color = field(default=WHITE)
    interaction: Interaction = Interaction.NONE
    background: Color = field(default=BUTTON_COLOR)


@dataclass
class TopBar:
    """The bar across the top of the window with a title and control buttons."""

    title: str = "Isometric World"
    title_font_size: float = 28.0
    title_color: Color = field(default=WHITE)
    height: float = TOP_BAR_HEIGHT
    background: Color = field(default=TOP_BAR_BACKGROUND)
    buttons: list[ControlButton] = field(default_factory=list)

    def button(self, action: ControlAction) -> ControlButton:
        """Return the first button with the given action."""
        for candidate in self.buttons:
            if candidate.action is action:
                return candidate
        raise KeyError(action)


def build_top_bar() -> TopBar:
    """Build the top bar with its Pause, Menu and Quit buttons."""
    return TopBar(
        buttons=[
            ControlButton(ControlAction.PAUSE, "Pause"),
            ControlButton(ControlAction.MAIN_MENU, "Menu"),
            ControlButton(ControlAction.QUIT, "Quit"),
        ]
    )


def handle_control_buttons(buttons: Iterable[ControlButton], flow: GameFlow) -> bool:
    """Recolour control buttons and carry out the actions of pressed ones.

    State changes are requested on ``flow``. Returns whether quitting was requested.
    """
    quit_requested = False
    for button in buttons:
        if button.interaction is Interaction.PRESSED:
            button.background = BUTTON_PRESSED_COLOR
            action = button.action
            if action is ControlAction.PAUSE:
                logger.info("Pause button pressed")
                if flow.state is GameState.PLAYING:
                    flow.set_next(GameState.PAUSED)
            elif action is ControlAction.RESUME:
                logger.info("Resume button pressed")
                if flow.state is GameState.PAUSED:
                    flow.set_next(GameState.PLAYING)
            elif action is ControlAction.MAIN_MENU:
                logger.info("Menu button pressed")
                flow.set_next(GameState.MAIN_MENU)
            else:
                logger.info("Quit button pressed")
                quit_requested = True
        elif button.interaction is Interaction.HOVERED:
            button.background = BUTTON_HOVER_COLOR
        else:
            button.background = BUTTON_COLOR
    return quit_requested