# termsnake/viz/renderer_pygame.py
from __future__ import annotations
from typing import Dict, Optional, Tuple
import pygame as pg
from termsnake.config import GameConfig
from termsnake.interfaces import Backend, Direction, InputEvent
from termsnake.viz.keyboard import Keyboard, char_direction
import termsnake.viz.renderer_colors as theme

ARROWS: Dict[int, Direction] = {
    pg.K_UP: Direction.UP,
    pg.K_DOWN: Direction.DOWN,
    pg.K_LEFT: Direction.LEFT,
    pg.K_RIGHT: Direction.RIGHT,
}

class PygameBackend(Backend):
    """Same cell grid, drawn in a window: one grid cell = cfg.cell_px pixels.

    Directions are buffered on key release, Esc or closing the window quits.
    """
    def __init__(self, cfg: GameConfig):
        if isinstance(cfg, type):
            raise TypeError("Pass a GameConfig instance (use GameConfig()), not the class.")
        self.cfg = cfg
        self.cell = cfg.cell_px
        self.kbd = Keyboard()
        self.surf: Optional[pg.Surface] = None
        self.font: Optional[pg.font.Font] = None
        self._auto_flip = True

    def size(self) -> Tuple[int, int]:
        return self.cfg.window_w, self.cfg.window_h

    def enter_game_mode(self) -> None:
        pg.init()
        pg.display.set_caption(self.cfg.title)
        self.surf = pg.display.set_mode((self.cfg.window_w * self.cell, self.cfg.window_h * self.cell))
        self.font = pg.font.SysFont(None, self.cell + 4)
        pg.mouse.set_visible(False)
        self._auto_flip = True

    def leave_game_mode(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self.font = None

    def attach_surface(self, surface: pg.Surface) -> None:
        """Draw onto a caller-owned surface instead of a window."""
        if not pg.get_init():
            pg.init()
        self.surf = surface
        self._auto_flip = False
        self.font = pg.font.SysFont(None, self.cell + 4)

    def _blit_text(self, x: int, y: int, text: str, style: str) -> None:
        assert self.surf is not None and self.font is not None, "Backend not opened"
        fg, bg = theme.STYLE_RGB.get(style, (theme.TEXT, theme.BG))
        c = self.cell
        rect = pg.Rect(x * c, y * c, len(text) * c, c)
        pg.draw.rect(self.surf, bg, rect)
        for i, ch in enumerate(text):
            if ch == " ":
                continue
            if ch == "█":
                pg.draw.rect(self.surf, fg, pg.Rect((x + i) * c, y * c, c, c))
                continue
            img = self.font.render(ch, True, fg)
            self.surf.blit(img, img.get_rect(center=((x + i) * c + c // 2, y * c + c // 2)))

    def draw_cell(self, x: int, y: int, glyph: str, style: str) -> None:
        self._blit_text(x, y, glyph, style)

    def draw_text(self, x: int, y: int, text: str, style: str) -> None:
        self._blit_text(x, y, text, style)

    def flush(self) -> None:
        if self._auto_flip:
            pg.display.flip()

    def poll_input(self) -> Optional[InputEvent]:
        for e in pg.event.get():
            if e.type == pg.QUIT:
                self.kbd.request_quit()
            elif e.type in (pg.KEYDOWN, pg.KEYUP) and e.key == pg.K_ESCAPE:
                self.kbd.request_quit()
            elif e.type == pg.KEYUP:
                self.kbd.feed(ARROWS.get(e.key) or char_direction(pg.key.name(e.key)))
        return self.kbd.poll()
