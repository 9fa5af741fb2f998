from typing import Iterator, Tuple

from kruskal_maze.algo.animation import SolveResult
from kruskal_maze.config import REVEAL_NORMALISER
from kruskal_maze.core.grid import Cell


class RevealState:
    """
    Staggered reveal of a solve. A cell appears once the tick passes its
    delay (rank % cell_count); its colour band is rank // cell_count.

    The tick grows by cell_count / 144 per frame, so bigger mazes finish
    revealing in about the same wall-clock time as a 16x9 one.
    """

    def __init__(self, result: SolveResult, normaliser: float = REVEAL_NORMALISER):
        self.result = result
        self.tick = 0.0
        self.tick_step = result.cell_count / normaliser
        self.active = True

    def advance(self):
        if self.active:
            self.tick += self.tick_step

    def clear(self):
        self.active = False
        self.tick = 0.0

    def is_shown(self, cell: Cell) -> bool:
        return self.active and self.result.delay(cell) < self.tick

    def visible_cells(self) -> Iterator[Tuple[Cell, int]]:
        """(cell, tier) for every cell revealed so far."""
        if not self.active:
            return
        for cell in self.result:
            if self.result.delay(cell) < self.tick:
                yield cell, self.result.tier(cell)

    @property
    def finished(self) -> bool:
        # Delays never reach cell_count
        return self.tick >= self.result.cell_count
