# termsnake/interfaces/__init__.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Tuple, Protocol, Optional, Union

Pos = Tuple[int, int]   # (column, row)

class CellType(IntEnum):
    """Integer codes stored in the grid array."""
    EMPTY = 0
    WALL = 1
    FOOD = 2
    SNAKE_HEAD = 3
    SNAKE_BODY = 4

class Direction(Enum):
    """Headings with (dx, dy) steps; y grows downwards."""
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))

class _Quit:
    def __repr__(self) -> str:
        return "QUIT"

QUIT = _Quit()
InputEvent = Union[Direction, _Quit]

@dataclass(frozen=True, slots=True)
class Cell:
    x: int
    y: int
    type: CellType
    dirty: bool

    @property
    def pos(self) -> Pos:
        return (self.x, self.y)

@dataclass(frozen=True)
class Snapshot:
    head: Pos
    body: Tuple[Pos, ...]   # neck first
    heading: Direction
    score: int
    tick: int
    terminated: bool
    reason: str | None
    grid_w: int
    grid_h: int

    @property
    def length(self) -> int:
        return 1 + len(self.body)

class Backend(Protocol):
    """Output sink + input source the core talks to."""
    def size(self) -> Tuple[int, int]: ...
    def enter_game_mode(self) -> None: ...
    def leave_game_mode(self) -> None: ...
    def draw_cell(self, x: int, y: int, glyph: str, style: str) -> None: ...
    def draw_text(self, x: int, y: int, text: str, style: str) -> None: ...
    def flush(self) -> None: ...
    def poll_input(self) -> Optional[InputEvent]: ...
