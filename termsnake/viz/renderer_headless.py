# termsnake/viz/renderer_headless.py
from __future__ import annotations
from collections import deque
from typing import Iterable, List, Optional, Tuple
from termsnake.interfaces import Backend, InputEvent, QUIT
from termsnake.viz.keyboard import Keyboard

class RecordingBackend(Backend):
    """No screen at all: records every call so tests can inspect a frame.

    ``script`` is a sequence of per-tick inputs (``None``, a Direction or
    ``QUIT``); each poll consumes one entry.
    """
    def __init__(self, width: int = 60, height: int = 20,
                 script: Iterable[Optional[InputEvent]] = (),
                 fail_on_draw: Optional[int] = None):
        self.w = width
        self.h = height
        self.script = deque(script)
        self.fail_on_draw = fail_on_draw
        self.kbd = Keyboard()
        self.draws: List[Tuple[int, int, str, str]] = []
        self.texts: List[Tuple[int, int, str, str]] = []
        self.flushes = 0
        self.enter_calls = 0
        self.leave_calls = 0
        self.polls = 0

    def size(self) -> Tuple[int, int]:
        return self.w, self.h

    def enter_game_mode(self) -> None:
        self.enter_calls += 1

    def leave_game_mode(self) -> None:
        self.leave_calls += 1

    def draw_cell(self, x: int, y: int, glyph: str, style: str) -> None:
        if self.fail_on_draw is not None and len(self.draws) >= self.fail_on_draw:
            raise OSError("simulated draw failure")
        self.draws.append((x, y, glyph, style))

    def draw_text(self, x: int, y: int, text: str, style: str) -> None:
        self.texts.append((x, y, text, style))

    def flush(self) -> None:
        self.flushes += 1

    def poll_input(self) -> Optional[InputEvent]:
        self.polls += 1
        if self.script:
            ev = self.script.popleft()
            if ev is QUIT:
                self.kbd.request_quit()
            else:
                self.kbd.feed(ev)
        return self.kbd.poll()

    def reset_log(self) -> None:
        self.draws.clear()
        self.texts.clear()
        self.flushes = 0
