from typing import Iterator, List, Tuple

from kruskal_maze.core.errors import MazeConfigError, UnregisteredCellError

# (col, row), 0-indexed
Cell = Tuple[int, int]


class Edge:
    """
    The wall between a cell and its EAST (vertical wall) or SOUTH
    (horizontal wall) neighbour. Only `connected` ever changes.
    """
    __slots__ = ('x', 'y', 'direction', 'connected')

    def __init__(self, x: int, y: int, direction: int):
        self.x = x
        self.y = y
        self.direction = direction
        self.connected = False

    @property
    def vertical(self) -> bool:
        return self.direction == GridTopology.EAST

    @property
    def primary(self) -> Cell:
        return (self.x, self.y)

    @property
    def other(self) -> Cell:
        if self.direction == GridTopology.EAST:
            return (self.x + 1, self.y)
        return (self.x, self.y + 1)

    def connect(self):
        self.connected = True

    def __repr__(self):
        kind = "V" if self.vertical else "H"
        state = "open" if self.connected else "wall"
        return f"Edge({self.x}, {self.y}, {kind}, {state})"


class GridTopology:
    # Wall orientation, reusing the compass bits of a cell's wall mask
    EAST  = 0b0010
    SOUTH = 0b0100

    __slots__ = ('width', 'height')

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise MazeConfigError(f"Grid must be at least 1x1, got {width}x{height}")
        self.width = width
        self.height = height

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    @property
    def edge_count(self) -> int:
        return self.width * (self.height - 1) + self.height * (self.width - 1)

    def contains(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def get_index(self, x: int, y: int) -> int:
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        raise UnregisteredCellError((x, y))

    def get_cell(self, idx: int) -> Cell:
        return (idx % self.width, idx // self.width)

    def cells(self) -> Iterator[Cell]:
        """Row-major walk over every cell."""
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def candidate_edges(self) -> List[Edge]:
        """
        Every interior wall, unshuffled: horizontal walls row by row first,
        then vertical walls row by row.
        """
        edges = []
        for y in range(self.height - 1):
            for x in range(self.width):
                edges.append(Edge(x, y, self.SOUTH))
        for y in range(self.height):
            for x in range(self.width - 1):
                edges.append(Edge(x, y, self.EAST))
        return edges
