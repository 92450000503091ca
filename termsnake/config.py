# termsnake/config.py
from dataclasses import dataclass, replace
from typing import Optional

@dataclass(frozen=True, slots=True)
class GameConfig:
    # gameplay
    tick_ms: int = 80
    min_width: int = 60
    min_height: int = 20
    seed: Optional[int] = None
    start_delay_s: float = 2.0
    end_delay_s: float = 2.0

    # render
    title: str = "Snake"
    show_hud: bool = True
    window_w: int = 60       # grid columns for the pygame window
    window_h: int = 24       # grid rows for the pygame window
    cell_px: int = 16

    # metrics
    log_path: Optional[str] = None
    log_every: int = 25      # ticks between CSV rows

    def with_(self, **kwargs) -> "GameConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)

    def validate(self) -> "GameConfig":
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        if self.start_delay_s < 0 or self.end_delay_s < 0:
            raise ValueError("delays must be non-negative")
        if self.log_every < 1:
            raise ValueError("log_every must be >= 1")
        return self
