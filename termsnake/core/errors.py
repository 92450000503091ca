# termsnake/core/errors.py
from __future__ import annotations


class GameError(Exception):
    """Base for everything that ends (or prevents) a session."""
    reason = "game error"

    def __init__(self, detail: str | None = None):
        self.detail = detail
        super().__init__(self.reason if detail is None else f"{self.reason}: {detail}")


# ---- fatal-session ----
class SessionOver(GameError):
    reason = "session over"

class WallCollision(SessionOver):
    reason = "hit wall"

class SelfCollision(SessionOver):
    reason = "self-collision"

class NoSpaceForFood(SessionOver):
    reason = "no space for food"


# ---- fatal-construction ----
class ConstructionError(GameError):
    reason = "construction failed"

class WindowTooSmall(ConstructionError):
    reason = "window too small"

class TerminalSizeUnavailable(ConstructionError):
    reason = "cannot query terminal size"
