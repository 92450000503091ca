from __future__ import annotations
import csv, os
from typing import Dict, Any, Protocol, Callable
from termsnake.interfaces import Snapshot

ALL_KEYS = [
    "tick", "score", "length", "head_x", "head_y", "heading", "terminated", "reason",
]

class Logger(Protocol):
    def log(self, tick: int, scalars: Dict[str, Any]) -> None: ...
    def flush(self) -> None: ...
    def close(self) -> None: ...


class CSVLogger:
    """Append-only CSV logger with header auto-discovery or predefined schema."""
    def __init__(self, path: str, fieldnames: list[str] | None = None):
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        self.path = path
        self._fieldnames = fieldnames
        self._file = open(path, "a", newline="")
        self._writer = None

    def log(self, tick: int, scalars: Dict[str, Any]) -> None:
        scalars = {"tick": tick, **scalars}
        if self._writer is None:
            if self._fieldnames is None:
                self._fieldnames = list(scalars.keys())
            self._writer = csv.DictWriter(
                self._file,
                fieldnames=self._fieldnames,
                extrasaction="ignore",
            )
            if self._file.tell() == 0:
                self._writer.writeheader()
        self._writer.writerow(scalars)

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        self._file.close()


def _row(s: Snapshot) -> Dict[str, Any]:
    return {
        "score": s.score,
        "length": s.length,
        "head_x": s.head[0],
        "head_y": s.head[1],
        "heading": s.heading.name,
        "terminated": int(s.terminated),
        "reason": s.reason or "",
    }

def make_tick_logger(logger: Logger, every: int = 25) -> Callable[[Snapshot], None]:
    """
    Returns a function(snap) -> None that logs a row every `every` ticks
    and on every score change.
    """
    last_score = [0]

    def _on_tick(s: Snapshot) -> None:
        if s.tick % every != 0 and s.score == last_score[0]:
            return
        last_score[0] = s.score
        logger.log(s.tick, _row(s))
    return _on_tick

def make_session_logger(logger: Logger) -> Callable[[Snapshot], None]:
    """Returns a function(snap) -> None that writes the final row and flushes."""
    def _on_end(s: Snapshot) -> None:
        logger.log(s.tick, _row(s))
        logger.flush()
    return _on_end
