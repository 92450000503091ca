# termsnake/main.py
import argparse
import sys

from termsnake.config import GameConfig
from termsnake.core.errors import ConstructionError, SessionOver
from termsnake.interfaces import Backend
from termsnake.logging import ALL_KEYS, CSVLogger, make_session_logger, make_tick_logger
from termsnake.runners.run_snake import new_game, run_session


def build_backend(mode: str, cfg: GameConfig) -> Backend:
    if mode == "window":
        from termsnake.viz.renderer_pygame import PygameBackend
        return PygameBackend(cfg)
    from termsnake.viz.renderer_curses import CursesBackend
    return CursesBackend(title=cfg.title)


def build_parser():
    p = argparse.ArgumentParser(prog="termsnake")
    p.add_argument("mode", nargs="?", default="terminal", choices=["terminal", "window"])
    p.add_argument("--tick-ms", type=int, default=80)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--width", type=int, default=60, help="grid columns (window mode)")
    p.add_argument("--height", type=int, default=24, help="grid rows (window mode)")
    p.add_argument("--log", default=None, help="append per-tick metrics to this CSV")
    return p


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        cfg = GameConfig(
            tick_ms=args.tick_ms,
            seed=args.seed,
            window_w=args.width,
            window_h=args.height,
            log_path=args.log,
        ).validate()
    except ValueError as e:
        parser.error(str(e))

    backend = build_backend(args.mode, cfg)
    try:
        game = new_game(backend, cfg)
    except ConstructionError as e:
        print(f"init failed: {e}")
        return 2

    logger = CSVLogger(cfg.log_path, fieldnames=ALL_KEYS) if cfg.log_path else None
    on_tick = make_tick_logger(logger, every=cfg.log_every) if logger else None
    on_end = make_session_logger(logger) if logger else None
    try:
        snap = run_session(game, backend, on_tick=on_tick, on_end=on_end)
    except SessionOver as e:
        print(f"fail: {e.reason}")
        print(f"Score: {game.score}")
        return 1
    finally:
        if logger is not None:
            logger.close()

    print(f"Score: {snap.score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
