"""Command-based input state built from keyboard keys and pad buttons."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping


class InputType(enum.Enum):
    """Kinds of input device a command can be bound to."""

    KEYBOARD = 0
    PAD = 1
    MOUSE = 2


class PadButton(enum.IntFlag):
    """Bits of the joypad state word."""

    DOWN = 0x1
    LEFT = 0x2
    RIGHT = 0x4
    UP = 0x8
    A = 0x10
    B = 0x20
    C = 0x40
    X = 0x80
    Y = 0x100
    Z = 0x200


DEFAULT_COMMANDS: dict[str, dict[InputType, object]] = {
    "A": {InputType.KEYBOARD: "return", InputType.PAD: PadButton.A},
    "B": {InputType.KEYBOARD: "b", InputType.PAD: PadButton.B},
    "X": {InputType.KEYBOARD: "x", InputType.PAD: PadButton.C},
    "Y": {InputType.KEYBOARD: "y", InputType.PAD: PadButton.X},
    "RB": {InputType.KEYBOARD: "p", InputType.PAD: PadButton.Z},
    "LB": {InputType.KEYBOARD: "q", InputType.PAD: PadButton.Y},
    "up": {InputType.KEYBOARD: "up", InputType.PAD: PadButton.UP},
    "down": {InputType.KEYBOARD: "down", InputType.PAD: PadButton.DOWN},
    "left": {InputType.KEYBOARD: "left", InputType.PAD: PadButton.LEFT},
    "right": {InputType.KEYBOARD: "right", InputType.PAD: PadButton.RIGHT},
}


class Pad:
    """Tracks named commands across frames: held, just pressed, just released."""

    def __init__(self, commands: Mapping[str, Mapping[InputType, object]] | None = None):
        source = DEFAULT_COMMANDS if commands is None else commands
        self._commands = {name: dict(bindings) for name, bindings in source.items()}
        self._current: dict[str, bool] = {}
        self._previous: dict[str, bool] = {}

    def update(self, keys: Iterable[str] = (), buttons: int = 0) -> None:
        """Advance one frame given the pressed keys and the pad button bits."""
        pressed_keys = set(keys)
        self._previous = self._current
        self._current = {
            name: self._is_bound_input_active(bindings, pressed_keys, int(buttons))
            for name, bindings in self._commands.items()
        }

    @staticmethod
    def _is_bound_input_active(
        bindings: Mapping[InputType, object], keys: set[str], buttons: int
    ) -> bool:
        for kind, code in bindings.items():
            if kind is InputType.KEYBOARD and code in keys:
                return True
            if kind is InputType.PAD and buttons & int(code):
                return True
        return False

    def is_press(self, command: str) -> bool:
        """Return True while the command is held."""
        return self._current.get(command, False)

    def is_trigger(self, command: str) -> bool:
        """Return True on the frame the command becomes held."""
        if command not in self._current:
            return False
        return self._current[command] and not self._previous.get(command, False)

    def is_release(self, command: str) -> bool:
        """Return True on the frame the command stops being held."""
        if command not in self._current:
            return False
        return not self._current[command] and self._previous.get(command, False)