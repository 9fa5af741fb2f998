class MazeError(Exception):
    """Base class for every error raised by kruskal_maze."""


class MazeConfigError(MazeError, ValueError):
    """Bad construction parameters (grid size, solver name, window settings)."""


class UnregisteredCellError(MazeError, IndexError):
    """A cell outside the grid was handed to the forest or the graph."""

    def __init__(self, cell):
        self.cell = cell
        super().__init__(f"Cell {cell} is not part of the grid")


class NoPathError(MazeError, RuntimeError):
    """
    The search frontier emptied before the goal was reached.
    Cannot happen on a finished spanning tree, so seeing this means the
    graph was not a tree.
    """


class MazeNotSolvedError(MazeError, RuntimeError):
    """A solve result was requested before any solve ran."""


class GraphFrozenError(MazeError, RuntimeError):
    """Tried to link cells in a graph whose spanning tree is complete."""
