from collections.abc import Mapping
from types import MappingProxyType
from typing import Dict, Iterable, List, Sequence, Tuple

from kruskal_maze.core.grid import Cell

# Rank bands, as multiples of the cell count
TIER_UNVISITED = 0
TIER_VISITED = 1
TIER_PATH = 2


def encode_ranks(cells: Iterable[Cell], order: Sequence[Cell], path: Sequence[Cell],
                 cell_count: int) -> Dict[Cell, int]:
    """
    Per-cell reveal rank:

        0                          never visited
        cell_count + i             visited at position i, not on the path
        2 * cell_count + i         visited at position i, on the path

    The path band starts after the start cell; the start stays in the
    visited band at rank cell_count + 0.
    """
    on_path = set(path[1:])
    visit_index = {cell: i for i, cell in enumerate(order)}

    ranks = {}
    for cell in cells:
        i = visit_index.get(cell)
        if i is None:
            ranks[cell] = 0
        elif cell in on_path:
            ranks[cell] = TIER_PATH * cell_count + i
        else:
            ranks[cell] = TIER_VISITED * cell_count + i
    return ranks


class SolveResult(Mapping):
    """Read-only snapshot of one solve: ranks plus the path and order behind them."""

    def __init__(self, algorithm: str, ranks: Dict[Cell, int], path: Sequence[Cell],
                 order: Sequence[Cell], cell_count: int):
        self.algorithm = algorithm
        self.ranks = MappingProxyType(dict(ranks))
        self.path: Tuple[Cell, ...] = tuple(path)
        self.order: Tuple[Cell, ...] = tuple(order)
        self.cell_count = cell_count

    def __getitem__(self, cell: Cell) -> int:
        return self.ranks[cell]

    def __iter__(self):
        return iter(self.ranks)

    def __len__(self) -> int:
        return len(self.ranks)

    def tier(self, cell: Cell) -> int:
        return self.ranks[cell] // self.cell_count

    def delay(self, cell: Cell) -> int:
        return self.ranks[cell] % self.cell_count

    def cells_in_tier(self, tier: int) -> List[Cell]:
        return [cell for cell in self.ranks if self.tier(cell) == tier]

    def __repr__(self):
        return (f"SolveResult({self.algorithm}, path={len(self.path)}, "
                f"visited={len(self.order)}, cells={self.cell_count})")
