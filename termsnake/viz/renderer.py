# termsnake/viz/renderer.py
from __future__ import annotations
from termsnake.interfaces import Backend
from termsnake.core.grid import Grid
import termsnake.viz.renderer_colors as theme

class DirtyRenderer:
    """Draws the grid through a backend, redrawing only cells flagged dirty.

    ``render_all`` paints the whole board (first frame); ``render_dirty``
    paints what changed since the last pass. Both clear the flags they
    consume and flush once. Backend errors propagate.
    """

    def __init__(self, grid: Grid, backend: Backend):
        self.grid = grid
        self.backend = backend

    def _draw(self, x: int, y: int) -> None:
        glyph, style = theme.look(self.grid.type_at((x, y)))
        self.backend.draw_cell(x, y, glyph, style)
        self.grid.clear_dirty((x, y))

    def render_all(self) -> int:
        n = 0
        for x in range(self.grid.width):
            for y in range(self.grid.height):
                self._draw(x, y)
                n += 1
        self.backend.flush()
        return n

    def render_dirty(self) -> int:
        todo = self.grid.dirty_cells()
        for x, y in todo:
            self._draw(x, y)
        self.backend.flush()
        return len(todo)

    # --- title / HUD, written over the wall rows ---
    def draw_title(self, title: str) -> None:
        x = max(0, (self.grid.width - len(title)) // 2)
        self.backend.draw_text(x, 0, title, theme.TITLE)
        self.backend.flush()

    def draw_hud(self, score: int, speed: int) -> None:
        y = self.grid.height - 1
        parts = [
            ("Score: ", theme.HUD_LABEL),
            (f"{score:^7}", theme.HUD_VALUE),
            ("    ", None),
            ("Speed: ", theme.HUD_LABEL),
            (str(speed), theme.HUD_VALUE),
            ("    ", None),
            ("Esc to quit", theme.HUD_HINT),
        ]
        x = 4
        for text, style in parts:
            if style is not None:
                self.backend.draw_text(x, y, text, style)
            x += len(text)
        self.backend.flush()
