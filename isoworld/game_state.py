"""Game flow: the game states, their menu screens and the transitions between them."""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from .constants import WHITE, Color
from .ui_components import Interaction

logger = logging.getLogger(__name__)

START_BUTTON_NORMAL = Color.srgb(0.3, 0.5, 0.3)
START_BUTTON_HOVERED = Color.srgb(0.35, 0.55, 0.35)
START_BUTTON_PRESSED = Color.srgb(0.4, 0.6, 0.4)


class GameState(enum.Enum):
    """The current state of the game."""

    MAIN_MENU = "MainMenu"
    PLAYING = "Playing"
    PAUSED = "Paused"
    GAME_OVER = "GameOver"

    @classmethod
    def default(cls) -> GameState:
        return cls.MAIN_MENU


@dataclass
class StartGameButton:
    """The main menu's button that starts the game."""

    label: str = "Start Game"
    font_size: float = 24.0
    interaction: Interaction = Interaction.NONE
    background: Color = field(default=START_BUTTON_NORMAL)


@dataclass
class Screen:
    """A full-window overlay with a title, an optional subtitle and an optional button."""

    name: str
    title: str
    title_font_size: float
    background: Color
    title_color: Color = field(default=WHITE)
    subtitle: str | None = None
    subtitle_font_size: float | None = None
    subtitle_color: Color | None = None
    start_button: StartGameButton | None = None


def build_main_menu() -> Screen:
    """Build the main menu overlay with its start button."""
    return Screen(
        name="main_menu",
        title="Isometric World",
        title_font_size=48.0,
        background=Color.srgba(0.0, 0.0, 0.0, 0.8),
        start_button=StartGameButton(),
    )


def build_pause_menu() -> Screen:
    """Build the pause overlay."""
    return Screen(
        name="pause_menu",
        title="PAUSED",
        title_font_size=48.0,
        background=Color.srgba(0.0, 0.0, 0.0, 0.5),
        subtitle="Press ESC to resume",
        subtitle_font_size=18.0,
        subtitle_color=Color.srgba(0.8, 0.8, 0.8, 1.0),
    )


class GameFlow:
    """Holds the current game state, a pending transition and the screen on show."""

    def __init__(self, initial: GameState = GameState.MAIN_MENU) -> None:
        self.state = initial
        self.pending: GameState | None = None
        self.screen: Screen | None = None
        self._enter(initial)

    def set_next(self, state: GameState) -> None:
        """Request a transition, applied on the next call to apply_pending."""
        self.pending = state

    def apply_pending(self) -> bool:
        """Carry out the pending transition, if any; returns whether one happened.

        A transition to the current state still runs its exit and enter steps.
        """
        if self.pending is None:
            return False
        target = self.pending
        self.pending = None
        self._exit(self.state)
        self.state = target
        self._enter(target)
        return True

    def _enter(self, state: GameState) -> None:
        if state is GameState.MAIN_MENU:
            logger.info("Entering main menu")
            self.screen = build_main_menu()
        elif state is GameState.PLAYING:
            logger.info("Game started - entering playing state")
        elif state is GameState.PAUSED:
            logger.info("Game paused")
            self.screen = build_pause_menu()

    def _exit(self, state: GameState) -> None:
        if state is GameState.MAIN_MENU:
            logger.info("Exiting main menu")
            if self.screen is not None and self.screen.name == "main_menu":
                self.screen = None
        elif state is GameState.PAUSED:
            logger.info("Resuming game")
            if self.screen is not None and self.screen.name == "pause_menu":
                self.screen = None

    def handle_pause_input(self, escape_just_pressed: bool) -> bool:
        """Request a pause when Escape was just pressed."""
        if escape_just_pressed:
            self.set_next(GameState.PAUSED)
        return escape_just_pressed

    def handle_resume_input(self, escape_just_pressed: bool) -> bool:
        """Request a return to play when Escape was just pressed."""
        if escape_just_pressed:
            self.set_next(GameState.PLAYING)
        return escape_just_pressed

    def handle_menu_buttons(self, buttons: Iterable[StartGameButton]) -> bool:
        """Recolour start buttons; a pressed one requests play. Returns whether one was pressed."""
        started = False
        for button in buttons:
            if button.interaction is Interaction.PRESSED:
                button.background = START_BUTTON_PRESSED
                self.set_next(GameState.PLAYING)
                started = True
            elif button.interaction is Interaction.HOVERED:
                button.background = START_BUTTON_HOVERED
            else:
                button.background = START_BUTTON_NORMAL
        return started

    def update(
        self,
        escape_just_pressed: bool = False,
        menu_buttons: Iterable[StartGameButton] | None = None,
    ) -> GameState:
        """Run one frame: apply a pending transition, then the current state's input handling.

        Without explicit menu buttons the main menu's own start button is used.
        Returns the state the frame ran in.
        """
        self.apply_pending()
        if self.state is GameState.PLAYING:
            self.handle_pause_input(escape_just_pressed)
        elif self.state is GameState.PAUSED:
            self.handle_resume_input(escape_just_pressed)
        elif self.state is GameState.MAIN_MENU:
            if menu_buttons is None:
                button = self.screen.start_button if self.screen is not None else None
                menu_buttons = [button] if button is not None else []
            self.handle_menu_buttons(menu_buttons)
        return self.state