# termsnake/viz/keyboard.py
from __future__ import annotations
from typing import Dict, Optional
from termsnake.interfaces import Direction, InputEvent, QUIT

ESC = 27

# character keys shared by every backend (either case)
CHAR_KEYS: Dict[str, Direction] = {
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}

def char_direction(ch: str) -> Optional[Direction]:
    return CHAR_KEYS.get(ch.lower()) if len(ch) == 1 else None

class Keyboard:
    """Holds the last direction seen between two polls.

    Backends feed it as events arrive; the tick loop drains it once per
    tick. Several presses within one tick collapse to the last one;
    keys that map to nothing leave the buffered direction alone.
    """
    def __init__(self):
        self._pending: Optional[Direction] = None
        self._quit = False

    def feed(self, direction: Optional[Direction]) -> None:
        if direction is not None:
            self._pending = direction

    def request_quit(self) -> None:
        self._quit = True

    def poll(self) -> Optional[InputEvent]:
        if self._quit:
            return QUIT
        d, self._pending = self._pending, None
        return d
