# termsnake/viz/renderer_colors.py
from typing import Dict, Tuple
from termsnake.interfaces import CellType

# one (glyph, style) pair per cell type; backends must honour all five
CELL_LOOK: Dict[CellType, Tuple[str, str]] = {
    CellType.WALL:       ("█", "wall"),
    CellType.SNAKE_HEAD: ("#", "head"),
    CellType.SNAKE_BODY: ("#", "body"),
    CellType.FOOD:       ("$", "food"),
    CellType.EMPTY:      (" ", "empty"),
}

# text styles for the title / HUD rows
TITLE = "title"
HUD_LABEL = "hud_label"
HUD_VALUE = "hud_value"
HUD_HINT = "hud_hint"

# style -> (fg, bg) RGB, used by the pygame window
BG    = (0, 0, 0)
WALL  = (40, 90, 220)
HEAD  = (60, 200, 90)
BODY  = (230, 200, 40)
FOOD  = (220, 70, 70)
TEXT  = (230, 230, 230)
PANEL = (30, 60, 160)

STYLE_RGB: Dict[str, Tuple[Tuple[int, int, int], Tuple[int, int, int]]] = {
    "wall":    (WALL, BG),
    "head":    (HEAD, BG),
    "body":    (BODY, BG),
    "food":    (FOOD, BG),
    "empty":   (BG, BG),
    TITLE:     (HEAD, BG),
    HUD_LABEL: (TEXT, PANEL),
    HUD_VALUE: (HEAD, TEXT),
    HUD_HINT:  ((160, 160, 160), PANEL),
}

def look(cell_type: CellType) -> Tuple[str, str]:
    return CELL_LOOK[cell_type]
