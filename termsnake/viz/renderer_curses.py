# termsnake/viz/renderer_curses.py
from __future__ import annotations
import curses
import os
import sys
from typing import Dict, Optional, Tuple
from termsnake.interfaces import Backend, Direction, InputEvent
from termsnake.core.errors import TerminalSizeUnavailable
from termsnake.viz.keyboard import Keyboard, char_direction, ESC

ARROWS: Dict[int, Direction] = {
    curses.KEY_UP: Direction.UP,
    curses.KEY_DOWN: Direction.DOWN,
    curses.KEY_LEFT: Direction.LEFT,
    curses.KEY_RIGHT: Direction.RIGHT,
}

# style -> (fg, bg, extra attrs)
CURSES_STYLES: Dict[str, Tuple[int, int, int]] = {
    "wall":      (curses.COLOR_BLUE, curses.COLOR_BLACK, 0),
    "head":      (curses.COLOR_GREEN, curses.COLOR_BLACK, curses.A_BOLD),
    "body":      (curses.COLOR_YELLOW, curses.COLOR_BLACK, 0),
    "food":      (curses.COLOR_RED, curses.COLOR_BLACK, curses.A_BLINK),
    "empty":     (curses.COLOR_BLACK, curses.COLOR_BLACK, 0),
    "title":     (curses.COLOR_GREEN, curses.COLOR_BLACK, curses.A_BOLD),
    "hud_label": (curses.COLOR_WHITE, curses.COLOR_BLUE, 0),
    "hud_value": (curses.COLOR_GREEN, curses.COLOR_WHITE, curses.A_BOLD),
    "hud_hint":  (curses.COLOR_WHITE, curses.COLOR_BLUE, curses.A_DIM),
}

class CursesBackend(Backend):
    """Full-screen terminal backend on top of curses.

    curses only reports key presses, so the buffered direction is the
    last key *pressed* since the previous poll.
    """
    def __init__(self, title: str = "Snake"):
        self.title = title
        self.scr = None
        self.kbd = Keyboard()
        self._attrs: Dict[str, int] = {}

    def size(self) -> Tuple[int, int]:
        try:
            cols, rows = os.get_terminal_size(sys.stdout.fileno())
        except (OSError, ValueError) as e:
            raise TerminalSizeUnavailable(str(e)) from e
        return cols, rows

    def enter_game_mode(self) -> None:
        os.environ.setdefault("ESCDELAY", "25")
        self.scr = curses.initscr()       # alternate screen
        try:
            curses.noecho()
            curses.raw()
            curses.curs_set(0)
            self.scr.keypad(True)
            self.scr.nodelay(True)
            self._init_styles()
            sys.stdout.write(f"\x1b]0;{self.title}\x07")
            sys.stdout.flush()
        except BaseException:
            self.leave_game_mode()
            raise

    def leave_game_mode(self) -> None:
        if self.scr is None:
            return
        try:
            self.scr.keypad(False)
            curses.noraw()
            curses.echo()
            try:
                curses.curs_set(1)
            except curses.error:
                pass
        finally:
            curses.endwin()
            self.scr = None

    def _init_styles(self) -> None:
        colors = curses.has_colors()
        if colors:
            curses.start_color()
        for i, (name, (fg, bg, extra)) in enumerate(CURSES_STYLES.items(), start=1):
            attr = extra
            if colors:
                curses.init_pair(i, fg, bg)
                attr |= curses.color_pair(i)
            self._attrs[name] = attr

    def draw_cell(self, x: int, y: int, glyph: str, style: str) -> None:
        self._put(x, y, glyph, style)

    def draw_text(self, x: int, y: int, text: str, style: str) -> None:
        self._put(x, y, text, style)

    def _put(self, x: int, y: int, text: str, style: str) -> None:
        assert self.scr is not None, "enter_game_mode() first"
        attr = self._attrs.get(style, 0)
        rows, cols = self.scr.getmaxyx()
        if y == rows - 1 and x + len(text) >= cols:
            # writing the bottom-right cell would push the cursor off screen
            self.scr.insstr(y, x, text, attr)
        else:
            self.scr.addstr(y, x, text, attr)

    def flush(self) -> None:
        assert self.scr is not None, "enter_game_mode() first"
        self.scr.refresh()

    def poll_input(self) -> Optional[InputEvent]:
        assert self.scr is not None, "enter_game_mode() first"
        while True:
            key = self.scr.getch()
            if key == -1:
                break
            if key == ESC:
                self.kbd.request_quit()
            elif key in ARROWS:
                self.kbd.feed(ARROWS[key])
            elif 0 <= key < 256:
                self.kbd.feed(char_direction(chr(key)))
        return self.kbd.poll()
