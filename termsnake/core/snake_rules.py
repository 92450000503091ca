# termsnake/core/snake_rules.py  (pure rules, no terminal)
from __future__ import annotations
from typing import Tuple, Optional
import numpy as np
from termsnake.interfaces import CellType, Direction, Pos, Snapshot
from termsnake.config import GameConfig
from .grid import Grid
from .snake import Snake
from .food import FoodSpawner
from .errors import WindowTooSmall, WallCollision, SelfCollision, SessionOver

# where an off-grid step is reported
WALL_SENTINEL: Pos = (0, 0)

class Game:
    """Owns the grid, the snake and the score; advances one tick per step()."""

    def __init__(self, width: int, height: int, cfg: Optional[GameConfig] = None,
                 spawner: Optional[FoodSpawner] = None):
        self.cfg = cfg if cfg is not None else GameConfig()
        if isinstance(self.cfg, type):
            raise TypeError("Pass a GameConfig instance (use GameConfig()), not the class.")
        if width < self.cfg.min_width or height < self.cfg.min_height:
            raise WindowTooSmall(
                f"{width}x{height}, need at least {self.cfg.min_width}x{self.cfg.min_height}"
            )
        self.grid = Grid(width, height)
        self.snake = Snake.default()
        self.spawner = spawner if spawner is not None else FoodSpawner(np.random.default_rng(self.cfg.seed))
        self.score = 0
        self.ticks = 0
        self.terminated = False
        self.reason: Optional[str] = None
        self._build_default()

    def _build_default(self) -> None:
        self.grid.build_walls()
        self.grid.types[self.snake.head] = CellType.SNAKE_HEAD
        for pos in self.snake.body:
            self.grid.types[pos] = CellType.SNAKE_BODY
        self.spawner.spawn(self.grid)

    @property
    def speed(self) -> int:
        return self.cfg.tick_ms

    # ---- heading ----
    def turn(self, requested: Direction) -> bool:
        """Accept only genuine 90 degree turns."""
        cur = self.snake.heading
        if requested is cur or requested is cur.opposite:
            return False
        self.snake.heading = requested
        return True

    def collision_detection(self) -> Tuple[CellType, Pos]:
        hx, hy = self.snake.head
        dx, dy = self.snake.heading.value
        nx, ny = hx + dx, hy + dy
        if nx < 0 or ny < 0:
            return CellType.WALL, WALL_SENTINEL
        return self.grid.type_at((nx, ny)), (nx, ny)

    # ---- tick ----
    def step(self) -> str:
        """Advance one tick. Returns "move", "grow" or "noop"; raises SessionOver on death."""
        if self.terminated:
            raise SessionOver(f"already ended ({self.reason})")
        kind, nxt = self.collision_detection()
        self.ticks += 1

        if kind == CellType.WALL:
            self._end(WallCollision())
        if kind == CellType.SNAKE_BODY:
            self._end(SelfCollision())
        if kind == CellType.SNAKE_HEAD:
            return "noop"
        if kind == CellType.FOOD:
            self._eat(nxt)
            return "grow"
        self._go(nxt)
        return "move"

    def _end(self, err: SessionOver) -> None:
        self.terminated, self.reason = True, err.reason
        raise err

    def _advance_head(self, nxt: Pos) -> None:
        old = self.snake.head
        self.snake.body.appendleft(old)
        self.grid.set_cell_type(old, CellType.SNAKE_BODY)
        self.snake.head = nxt
        self.grid.set_cell_type(nxt, CellType.SNAKE_HEAD)

    def _go(self, nxt: Pos) -> None:
        self._advance_head(nxt)
        # never empty here: a bodiless snake drops the neck it just pushed
        self.grid.set_cell_type(self.snake.body.pop(), CellType.EMPTY)

    def _eat(self, nxt: Pos) -> None:
        # spawn first: the target still holds Food so it cannot be picked
        try:
            self.spawner.spawn(self.grid)
        except SessionOver as err:
            self._end(err)
        self._advance_head(nxt)
        self.score += 1

    def snapshot(self) -> Snapshot:
        return Snapshot(
            head=self.snake.head,
            body=tuple(self.snake.body),
            heading=self.snake.heading,
            score=self.score,
            tick=self.ticks,
            terminated=self.terminated,
            reason=self.reason,
            grid_w=self.grid.width,
            grid_h=self.grid.height,
        )
