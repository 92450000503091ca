# termsnake/core/snake.py
from __future__ import annotations
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Tuple
from termsnake.interfaces import Direction, Pos

# fixed opening shape: head plus a folded body, neck -> tail
START_HEAD: Pos = (9, 7)
START_BODY: Tuple[Pos, ...] = ((8, 7), (8, 8), (7, 8), (7, 9), (7, 10), (8, 10), (8, 11))
START_HEADING = Direction.RIGHT

@dataclass
class Snake:
    heading: Direction
    head: Pos
    body: Deque[Pos] = field(default_factory=deque)   # neck first, tail last

    @classmethod
    def default(cls) -> "Snake":
        return cls(START_HEADING, START_HEAD, deque(START_BODY))

    def __len__(self) -> int:
        return 1 + len(self.body)

    def coords(self) -> Tuple[Pos, ...]:
        return (self.head, *self.body)
