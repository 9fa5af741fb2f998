from dataclasses import dataclass, asdict
from typing import Optional

from kruskal_maze.core.errors import MazeConfigError

DEFAULT_ROWS = 18
DEFAULT_COLS = 32
DEFAULT_WINDOW = (640, 360)
DEFAULT_FPS = 60

# Reveal speed is normalised so a 16x9 maze advances one cell per frame
REVEAL_NORMALISER = 144.0


@dataclass
class MazeConfig:
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    seed: Optional[int] = None
    animate: bool = True
    window_width: int = DEFAULT_WINDOW[0]
    window_height: int = DEFAULT_WINDOW[1]
    fps: int = DEFAULT_FPS
    record: bool = False
    output: Optional[str] = None

    def validate(self) -> "MazeConfig":
        if self.rows < 1 or self.cols < 1:
            raise MazeConfigError(f"Maze must be at least 1x1, got {self.rows} rows x {self.cols} cols")
        if self.window_width < 1 or self.window_height < 1:
            raise MazeConfigError(f"Invalid window size {self.window_width}x{self.window_height}")
        if self.fps < 1:
            raise MazeConfigError(f"fps must be positive, got {self.fps}")
        return self

    @classmethod
    def from_args(cls, args) -> "MazeConfig":
        """Picks the fields present on an argparse namespace; the rest keep defaults."""
        values = {}
        for name in asdict(cls()):
            if getattr(args, name, None) is not None:
                values[name] = getattr(args, name)
        return cls(**values).validate()
