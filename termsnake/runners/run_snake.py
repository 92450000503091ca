# termsnake/runners/run_snake.py
from __future__ import annotations
import time
from contextlib import contextmanager
from typing import Callable, Iterator, Optional
from termsnake.config import GameConfig
from termsnake.core.snake_rules import Game
from termsnake.core.errors import SessionOver
from termsnake.interfaces import Backend, QUIT, Snapshot
from termsnake.viz.renderer import DirtyRenderer

@contextmanager
def game_mode(backend: Backend) -> Iterator[Backend]:
    """enter/leave are always paired, whatever ends the session."""
    backend.enter_game_mode()
    try:
        yield backend
    finally:
        backend.leave_game_mode()

def new_game(backend: Backend, cfg: Optional[GameConfig] = None) -> Game:
    """Size the board from the backend. Raises ConstructionError before anything is entered."""
    w, h = backend.size()
    return Game(w, h, cfg)

def run_session(
    game: Game,
    backend: Backend,
    *,
    sleep: Optional[Callable[[float], None]] = None,
    on_tick: Optional[Callable[[Snapshot], None]] = None,
    on_end: Optional[Callable[[Snapshot], None]] = None,
) -> Snapshot:
    """Play until quit (returns the final snapshot) or death (raises SessionOver)."""
    sleep = sleep or time.sleep
    cfg = game.cfg
    rend = DirtyRenderer(game.grid, backend)

    with game_mode(backend):
        rend.render_all()
        rend.draw_title(cfg.title)
        if cfg.show_hud:
            rend.draw_hud(game.score, game.speed)
        sleep(cfg.start_delay_s)
        try:
            while True:
                ev = backend.poll_input()
                if ev is QUIT:
                    break
                if ev is not None:
                    game.turn(ev)

                score = game.score
                try:
                    game.step()
                except SessionOver:
                    # leave the crash on screen for a moment
                    sleep(cfg.end_delay_s)
                    raise

                rend.render_dirty()
                if cfg.show_hud and game.score != score:
                    rend.draw_hud(game.score, game.speed)
                if on_tick is not None:
                    on_tick(game.snapshot())
                sleep(cfg.tick_ms / 1000.0)
        finally:
            if on_end is not None:
                on_end(game.snapshot())
    return game.snapshot()
