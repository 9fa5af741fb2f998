from array import array

from kruskal_maze.core.grid import Cell, GridTopology


class DisjointSetForest:
    """
    Union-find over the cells of a grid.

    Parents live in a dense row-major array ('i', 4 bytes per cell) rather
    than a dict keyed by cell. Every cell starts as its own representative.

    There is no union by rank or size: `union` always hangs the first root
    under the second, so a given edge order always yields the same tree.
    `find` compresses every path it walks.
    """

    __slots__ = ('grid', 'parents')

    def __init__(self, grid: GridTopology):
        self.grid = grid
        self.parents = array('i', range(grid.cell_count))

    def find_index(self, idx: int) -> int:
        parents = self.parents
        root = idx
        while parents[root] != root:
            root = parents[root]

        # Second pass: point everything we walked through straight at the root
        while parents[idx] != root:
            nxt = parents[idx]
            parents[idx] = root
            idx = nxt
        return root

    def find(self, cell: Cell) -> Cell:
        """Representative of `cell`. Raises UnregisteredCellError off-grid."""
        idx = self.grid.get_index(*cell)
        return self.grid.get_cell(self.find_index(idx))

    def union(self, a: Cell, b: Cell):
        rep_a = self.find_index(self.grid.get_index(*a))
        rep_b = self.find_index(self.grid.get_index(*b))
        self.parents[rep_a] = rep_b

    def connected(self, a: Cell, b: Cell) -> bool:
        return self.find(a) == self.find(b)

    def component_count(self) -> int:
        return sum(1 for i in range(len(self.parents)) if self.find_index(i) == i)
