# tests/test_snake_rules.py
import numpy as np
import pytest

from conftest import FAR_FOOD, assert_invariants
from termsnake.config import GameConfig
from termsnake.core.errors import (
    NoSpaceForFood, SelfCollision, SessionOver, WallCollision, WindowTooSmall,
)
from termsnake.core.snake import START_BODY, START_HEAD
from termsnake.core.snake_rules import Game
from termsnake.interfaces import CellType, Direction


def test_initial_scene(game_factory):
    game = game_factory()
    assert game.snake.head == START_HEAD == (9, 7)
    assert tuple(game.snake.body) == START_BODY
    assert game.snake.heading is Direction.RIGHT
    assert game.score == 0
    assert game.grid.count(CellType.FOOD) == 1
    assert game.grid.type_at(FAR_FOOD) == CellType.FOOD
    assert_invariants(game)


@pytest.mark.parametrize("w,h", [(59, 20), (60, 19), (10, 10)])
def test_window_too_small(w, h):
    with pytest.raises(WindowTooSmall) as exc:
        Game(w, h, GameConfig())
    assert exc.value.reason == "window too small"


def test_config_class_instead_of_instance():
    with pytest.raises(TypeError):
        Game(60, 20, GameConfig)


def test_random_food_lands_inside_on_empty():
    game = Game(60, 20, GameConfig(seed=123))
    (fx, fy), = game.grid.positions_of(CellType.FOOD)
    assert 0 < fx < 59 and 0 < fy < 19
    assert (fx, fy) not in game.snake.coords()


# ---- turn ----
@pytest.mark.parametrize("heading", list(Direction))
def test_turn_rejects_same_and_reverse(game_factory, heading):
    game = game_factory()
    game.snake.heading = heading
    for requested in (heading, heading.opposite):
        assert game.turn(requested) is False
        assert game.snake.heading is heading


@pytest.mark.parametrize("heading", list(Direction))
def test_turn_accepts_quarter_turns(game_factory, heading):
    for requested in Direction:
        if requested in (heading, heading.opposite):
            continue
        game = game_factory()
        game.snake.heading = heading
        assert game.turn(requested) is True
        assert game.snake.heading is requested


def test_turn_left_while_heading_right_rejected(game_factory):
    game = game_factory()
    game.turn(Direction.LEFT)
    assert game.snake.heading is Direction.RIGHT


# ---- collision detection ----
def test_collision_detection_looks_ahead_without_mutating(game_factory):
    game = game_factory()
    before = game.grid.types.copy()
    assert game.collision_detection() == (CellType.EMPTY, (10, 7))
    assert (game.grid.types == before).all()
    assert game.snake.head == (9, 7)


@pytest.mark.parametrize("head,heading", [((0, 5), Direction.LEFT), ((5, 0), Direction.UP)])
def test_negative_step_reports_wall_at_origin(game_factory, head, heading):
    game = game_factory()
    game.snake.head = head
    game.snake.heading = heading
    assert game.collision_detection() == (CellType.WALL, (0, 0))


# ---- ticks ----
def test_normal_move(game_factory):
    game = game_factory()
    game.grid.dirty[:] = False
    length = len(game.snake)
    assert game.step() == "move"
    assert game.snake.head == (10, 7)
    assert game.snake.body[0] == (9, 7)
    assert game.grid.type_at((9, 7)) == CellType.SNAKE_BODY
    assert game.grid.type_at((10, 7)) == CellType.SNAKE_HEAD
    assert game.grid.type_at((8, 11)) == CellType.EMPTY
    assert len(game.snake) == length
    assert game.score == 0
    assert set(game.grid.dirty_cells()) == {(9, 7), (10, 7), (8, 11)}
    assert_invariants(game)


def test_growth_move(game_factory):
    game = game_factory(food=[(10, 7)])
    game.grid.dirty[:] = False
    length = len(game.snake)
    assert game.step() == "grow"
    assert game.score == 1
    assert len(game.snake) == length + 1
    assert game.snake.head == (10, 7)
    assert game.snake.body[-1] == (8, 11)
    assert game.grid.type_at((8, 11)) == CellType.SNAKE_BODY
    foods = game.grid.positions_of(CellType.FOOD)
    assert len(foods) == 1 and foods[0] != (10, 7)
    # nothing reverted to Empty this tick
    assert all(game.grid.type_at(p) != CellType.EMPTY for p in game.grid.dirty_cells())
    assert_invariants(game)


def test_speed_does_not_change_with_score(game_factory):
    game = game_factory(food=[(10, 7)], tick_ms=120)
    game.step()
    assert game.score == 1
    assert game.speed == 120


def test_wall_collision_is_fatal(game_factory):
    game = game_factory()
    game.turn(Direction.UP)
    for _ in range(6):
        assert game.step() == "move"
    assert game.snake.head == (9, 1)
    before = game.grid.types.copy()
    with pytest.raises(WallCollision) as exc:
        game.step()
    assert exc.value.reason == "hit wall"
    assert game.terminated and game.snapshot().reason == "hit wall"
    assert (game.grid.types == before).all()


def test_self_collision_is_fatal(game_factory):
    game = game_factory()
    game.turn(Direction.DOWN)
    game.step()
    game.turn(Direction.LEFT)
    with pytest.raises(SelfCollision) as exc:
        game.step()
    assert exc.value.reason == "self-collision"
    assert game.snapshot().terminated


def test_no_step_after_game_over(game_factory):
    game = game_factory()
    game.turn(Direction.DOWN)
    game.step()
    game.turn(Direction.LEFT)
    with pytest.raises(SelfCollision):
        game.step()
    with pytest.raises(SessionOver):
        game.step()


def test_head_ahead_is_a_noop(game_factory):
    game = game_factory()
    game.grid.set_cell_type((10, 7), CellType.SNAKE_HEAD)
    assert game.step() == "noop"
    assert game.snake.head == (9, 7)
    assert not game.terminated


def test_no_space_for_food(game_factory):
    game = game_factory(food=[(10, 7)])
    g = game.grid
    g.types[g.types == CellType.EMPTY] = CellType.WALL
    with pytest.raises(NoSpaceForFood) as exc:
        game.step()
    assert exc.value.reason == "no space for food"
    assert game.terminated
    assert game.snake.head == (9, 7)
    assert game.score == 0


def test_bodiless_snake_moves_without_shrinking(game_factory):
    game = game_factory()
    for pos in game.snake.body:
        game.grid.set_cell_type(pos, CellType.EMPTY)
    game.snake.body.clear()
    assert game.step() == "move"
    assert game.snake.head == (10, 7)
    assert len(game.snake) == 1
    assert game.grid.type_at((9, 7)) == CellType.EMPTY
    assert_invariants(game)


def test_bodiless_snake_grows(game_factory):
    game = game_factory(food=[(10, 7)])
    for pos in game.snake.body:
        game.grid.set_cell_type(pos, CellType.EMPTY)
    game.snake.body.clear()
    assert game.step() == "grow"
    assert list(game.snake.body) == [(9, 7)]


def test_invariants_hold_over_random_play():
    rng = np.random.default_rng(5)
    dirs = list(Direction)
    for episode in range(10):
        game = Game(60, 20, GameConfig(seed=episode))
        score = 0
        try:
            for _ in range(300):
                if rng.random() < 0.3:
                    game.turn(dirs[int(rng.integers(4))])
                length = len(game.snake)
                outcome = game.step()
                if outcome == "grow":
                    assert game.score == score + 1
                    assert len(game.snake) == length + 1
                else:
                    assert game.score == score
                    assert len(game.snake) == length
                score = game.score
                assert_invariants(game)
                assert game.grid.count(CellType.FOOD) == 1
        except SessionOver:
            assert game.terminated
            assert_invariants(game)


def test_snapshot(game_factory):
    game = game_factory()
    game.step()
    s = game.snapshot()
    assert s.head == (10, 7)
    assert s.body[0] == (9, 7)
    assert s.length == 8
    assert s.tick == 1
    assert (s.grid_w, s.grid_h) == (60, 20)
    assert not s.terminated and s.reason is None
