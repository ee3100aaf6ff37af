"""
Held-key input state read by the simulation
"""

from enum import Enum
from typing import Set


class Key(Enum):
    """Logical keys the game reacts to"""
    UP = "up"
    DOWN = "down"
    FIRE_TOP = "fire_top"
    FIRE_BOTTOM = "fire_bottom"


class InputState:
    """Set of currently held keys.

    Drivers call ``press``/``release`` from their key events; the simulation
    only asks ``key in input_state``. Anything that is not a ``Key`` is ignored.
    """

    def __init__(self):
        self._held: Set[Key] = set()

    def press(self, key) -> None:
        if isinstance(key, Key):
            self._held.add(key)

    def release(self, key) -> None:
        self._held.discard(key)

    def clear(self) -> None:
        self._held.clear()

    def set_held(self, keys) -> None:
        """Replace the held set in one go (used by programmatic drivers)"""
        self._held = {k for k in keys if isinstance(k, Key)}

    def __contains__(self, key) -> bool:
        return key in self._held

    def __len__(self) -> int:
        return len(self._held)
