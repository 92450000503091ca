# tests/conftest.py
import os
import sys
from collections import deque

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so termsnake.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pytest

from termsnake.config import GameConfig
from termsnake.core.food import FoodSpawner
from termsnake.core.snake_rules import Game
from termsnake.interfaces import CellType
from termsnake.viz.renderer_headless import RecordingBackend

# well away from the opening snake and its first few moves
FAR_FOOD = (30, 15)


class ScriptedSpawner(FoodSpawner):
    """Places food on the given spots first, then falls back to random."""
    def __init__(self, spots=(), seed=0):
        super().__init__(seed=seed)
        self.spots = deque(spots)

    def spawn(self, grid):
        if self.spots:
            pos = self.spots.popleft()
            grid.set_cell_type(pos, CellType.FOOD)
            return pos
        return super().spawn(grid)


def assert_invariants(game):
    g = game.grid
    for x in range(g.width):
        assert g.type_at((x, 0)) == CellType.WALL
        assert g.type_at((x, g.height - 1)) == CellType.WALL
    for y in range(g.height):
        assert g.type_at((0, y)) == CellType.WALL
        assert g.type_at((g.width - 1, y)) == CellType.WALL
    assert g.positions_of(CellType.SNAKE_HEAD) == [game.snake.head]
    assert set(g.positions_of(CellType.SNAKE_BODY)) == set(game.snake.body)
    coords = game.snake.coords()
    assert len(set(coords)) == len(coords)


@pytest.fixture
def cfg():
    return GameConfig(seed=7, start_delay_s=0.0, end_delay_s=0.0)


@pytest.fixture
def game_factory(cfg):
    def make(width=60, height=20, food=(FAR_FOOD,), **overrides):
        c = cfg.with_(**overrides) if overrides else cfg
        return Game(width, height, c, spawner=ScriptedSpawner(food, seed=c.seed))
    return make


@pytest.fixture
def backend_factory():
    def make(width=60, height=20, script=(), **kwargs):
        return RecordingBackend(width, height, script=script, **kwargs)
    return make


@pytest.fixture
def sleeps():
    return []
