import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import Dict, Iterator, List, Set

from kruskal_maze.core.errors import MazeConfigError, NoPathError
from kruskal_maze.core.graph import AdjacencyGraph
from kruskal_maze.core.grid import Cell

logger = logging.getLogger(__name__)


def reconstruct_path(parents: Dict[Cell, Cell], start: Cell, end: Cell) -> List[Cell]:
    """
    Walks `parents` back from `end`, returning start..end inclusive.
    """
    path = [end]
    curr = end
    while curr != start:
        curr = parents[curr]
        path.append(curr)
    path.reverse()
    return path


class Solver(ABC):
    """
    Frontier search over the maze graph. Subclasses only choose which end of
    the frontier the next cell comes from; the rest is shared.

    After a run:
      order   - cells in the order they were first taken off the frontier
      parents - cell -> the cell that first put it on the frontier
      path    - start..end inclusive
    """
    name = "solver"

    def __init__(self, graph: AdjacencyGraph):
        self.graph = graph
        self.path: List[Cell] = []
        self.order: List[Cell] = []
        self.parents: Dict[Cell, Cell] = {}
        self.visited_count = 0

    @abstractmethod
    def take(self, frontier: deque) -> Cell:
        pass

    def run(self, start: Cell, end: Cell) -> Iterator[str]:
        frontier = deque([start])
        visited: Set[Cell] = set()

        while frontier:
            current = self.take(frontier)
            if current in visited:
                continue
            visited.add(current)
            self.order.append(current)
            self.visited_count += 1

            if current == end:
                self.path = reconstruct_path(self.parents, start, end)
                logger.debug(f"{self.name.upper()} reached {end} after {self.visited_count} cells, path {len(self.path)}")
                yield "Solved"
                return

            for neighbor in self.graph.neighbors(current):
                if neighbor not in visited:
                    frontier.append(neighbor)
                    # First writer wins
                    self.parents.setdefault(neighbor, current)

            if self.visited_count % 100 == 0:
                yield f"Visited: {self.visited_count}"

        raise NoPathError(f"{self.name.upper()} exhausted the frontier without reaching {end} from {start}")

    def solve(self, start: Cell, end: Cell) -> List[Cell]:
        for _ in self.run(start, end):
            pass
        return self.path


class BFS(Solver):
    name = "bfs"

    def take(self, frontier: deque) -> Cell:
        return frontier.popleft()


class DFS(Solver):
    name = "dfs"

    def take(self, frontier: deque) -> Cell:
        return frontier.pop()


SOLVERS = {
    BFS.name: BFS,
    DFS.name: DFS,
}


def get_solver(name: str, graph: AdjacencyGraph) -> Solver:
    try:
        cls = SOLVERS[name.lower()]
    except KeyError:
        raise MazeConfigError(f"Unknown solver '{name}', expected one of {sorted(SOLVERS)}") from None
    return cls(graph)
