"""Generic UI button components and the actions they carry."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .constants import BUTTON_NORMAL, Color

_U32_LIMIT = 2**32


class Interaction(enum.Enum):
    """Pointer interaction state of a button."""

    PRESSED = "pressed"
    HOVERED = "hovered"
    NONE = "none"


class ButtonActionKind(enum.Enum):
    """The kinds of action a button may trigger."""

    NAVIGATE = "Navigate"
    OPEN_DIALOG = "OpenDialog"
    CLOSE_DIALOG = "CloseDialog"
    CUSTOM = "Custom"


@dataclass(frozen=True)
class ButtonAction:
    """An action triggered by a button, with its payload where the kind has one."""

    kind: ButtonActionKind
    value: int | None = None

    def __post_init__(self) -> None:
        if self.kind is ButtonActionKind.NAVIGATE:
            self._check_int(0, None)
        elif self.kind is ButtonActionKind.CUSTOM:
            self._check_int(0, _U32_LIMIT)
        elif self.value is not None:
            raise ValueError(f"{self.kind.value} takes no value")

    def _check_int(self, low: int, high: int | None) -> None:
        value = self.value
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{self.kind.value} needs an integer value")
        if value < low or (high is not None and value >= high):
            raise ValueError(f"{self.kind.value} value out of range: {value}")

    @classmethod
    def navigate(cls, index: int) -> ButtonAction:
        return cls(ButtonActionKind.NAVIGATE, index)

    @classmethod
    def open_dialog(cls) -> ButtonAction:
        return cls(ButtonActionKind.OPEN_DIALOG)

    @classmethod
    def close_dialog(cls) -> ButtonAction:
        return cls(ButtonActionKind.CLOSE_DIALOG)

    @classmethod
    def custom(cls, action_id: int) -> ButtonAction:
        return cls(ButtonActionKind.CUSTOM, action_id)

    def __str__(self) -> str:
        if self.value is None:
            return self.kind.value
        return f"{self.kind.value}({self.value})"


@dataclass
class InteractiveButton:
    """A button with an action, its current interaction and background colour."""

    action: ButtonAction
    interaction: Interaction = Interaction.NONE
    background: Color = field(default=BUTTON_NORMAL)