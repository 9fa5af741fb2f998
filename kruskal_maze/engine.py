import logging
from typing import List, Optional, Sequence, Tuple

from kruskal_maze.algo.animation import SolveResult, encode_ranks
from kruskal_maze.algo.kruskal import SpanningTreeBuilder
from kruskal_maze.algo.solvers import get_solver
from kruskal_maze.core.errors import MazeNotSolvedError
from kruskal_maze.core.grid import Cell, Edge, GridTopology

logger = logging.getLogger(__name__)


class MazeEngine:
    """
    One maze session: grid, union-find, spanning tree and the latest solve.

    A new maze means a new engine; nothing here is ever reset in place.
    Start is always (0, 0) and the goal the opposite corner.
    """

    def __init__(self, rows: int, cols: int, auto_solve: bool = True, seed: int = None,
                 edges: Optional[Sequence[Edge]] = None):
        # GridTopology rejects rows/cols < 1
        self.grid = GridTopology(cols, rows)
        self.builder = SpanningTreeBuilder(self.grid, seed=seed, edges=edges)
        self._last_result: Optional[SolveResult] = None

        logger.debug(f"New {rows}x{cols} maze (seed={seed}, auto_solve={auto_solve})")
        if auto_solve:
            self.builder.run_to_completion()

    @classmethod
    def create(cls, rows: int, cols: int, auto_solve: bool = True, seed: int = None) -> "MazeEngine":
        return cls(rows, cols, auto_solve=auto_solve, seed=seed)

    @property
    def rows(self) -> int:
        return self.grid.height

    @property
    def cols(self) -> int:
        return self.grid.width

    @property
    def cell_count(self) -> int:
        return self.grid.cell_count

    @property
    def accepted_count(self) -> int:
        return self.builder.accepted_count

    @property
    def graph(self):
        return self.builder.graph

    @property
    def start(self) -> Cell:
        return (0, 0)

    @property
    def goal(self) -> Cell:
        return (self.cols - 1, self.rows - 1)

    def step(self) -> bool:
        return self.builder.step()

    def is_complete(self) -> bool:
        return self.builder.is_complete()

    def run_to_completion(self):
        self.builder.run_to_completion()

    def neighbors_of(self, cell: Cell) -> Tuple[Cell, ...]:
        return self.builder.graph.neighbors(cell)

    def walls(self) -> List[Edge]:
        return self.builder.walls()

    def solve(self, algorithm: str = "bfs") -> SolveResult:
        """
        Runs BFS or DFS from start to goal and encodes the reveal ranks.
        Finishes generation first if it is still in progress.
        """
        solver = get_solver(algorithm, self.graph)
        if not self.is_complete():
            self.run_to_completion()

        path = solver.solve(self.start, self.goal)
        ranks = encode_ranks(self.grid.cells(), solver.order, path, self.cell_count)
        self._last_result = SolveResult(solver.name, ranks, path, solver.order, self.cell_count)

        logger.debug(f"Solved with {solver.name.upper()}: path {len(path)}, visited {solver.visited_count}")
        return self._last_result

    @property
    def last_result(self) -> SolveResult:
        if self._last_result is None:
            raise MazeNotSolvedError("No solve has run on this maze yet")
        return self._last_result
