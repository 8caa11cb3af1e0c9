"""Edge-detected keyboard state for the game loop."""

from __future__ import annotations

import enum
from collections.abc import Iterable


class KeyType(enum.Enum):
    """Keys the game listens to."""

    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    SPACE = enum.auto()
    ESC = enum.auto()
    Z = enum.auto()
    X = enum.auto()
    C = enum.auto()
    V = enum.auto()
    NUM_0 = enum.auto()
    NUM_1 = enum.auto()
    NUM_2 = enum.auto()
    NUM_3 = enum.auto()
    NUM_4 = enum.auto()
    NUM_5 = enum.auto()
    NUM_6 = enum.auto()
    NUM_7 = enum.auto()
    NUM_8 = enum.auto()
    NUM_9 = enum.auto()


class KeyState(enum.Enum):
    """State of a key in the current frame."""

    TAP = enum.auto()
    PRESSED = enum.auto()
    RELEASE = enum.auto()
    NONE = enum.auto()


class KeyManager:
    """Turns the set of held keys per frame into tap/press/release states."""

    def __init__(self) -> None:
        self._states = {key: KeyState.NONE for key in KeyType}
        self._held: set[KeyType] = set()

    def tick(self, pressed: Iterable[KeyType]) -> None:
        """Advance one frame given the keys currently held down."""
        now = set(pressed)
        for key in KeyType:
            was_held = key in self._held
            if key in now:
                self._states[key] = KeyState.PRESSED if was_held else KeyState.TAP
            else:
                self._states[key] = KeyState.RELEASE if was_held else KeyState.NONE
        self._held = now

    def state(self, key: KeyType) -> KeyState:
        return self._states[key]