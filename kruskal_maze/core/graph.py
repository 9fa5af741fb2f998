from typing import Iterator, List, Tuple

from kruskal_maze.core.errors import GraphFrozenError
from kruskal_maze.core.grid import Cell, GridTopology


class AdjacencyGraph:
    """
    Cell -> neighbours, in the order the links were made.

    Stored as one small list per row-major cell index. The builder freezes
    the graph once the spanning tree is complete; after that it is read-only.
    """

    __slots__ = ('grid', 'adjacency', 'link_count', 'frozen')

    def __init__(self, grid: GridTopology):
        self.grid = grid
        self.adjacency: List[List[Cell]] = [[] for _ in range(grid.cell_count)]
        self.link_count = 0
        self.frozen = False

    def link(self, a: Cell, b: Cell):
        if self.frozen:
            raise GraphFrozenError(f"Cannot link {a} and {b}: graph is frozen")
        self.adjacency[self.grid.get_index(*a)].append(b)
        self.adjacency[self.grid.get_index(*b)].append(a)
        self.link_count += 1

    def freeze(self):
        self.frozen = True

    def neighbors(self, cell: Cell) -> Tuple[Cell, ...]:
        return tuple(self.adjacency[self.grid.get_index(*cell)])

    def degree(self, cell: Cell) -> int:
        return len(self.adjacency[self.grid.get_index(*cell)])

    def cells(self) -> Iterator[Cell]:
        return self.grid.cells()

    def __contains__(self, cell) -> bool:
        return self.grid.contains(cell)

    def __len__(self) -> int:
        return self.grid.cell_count
