import logging
import random
from typing import Iterator, List, Optional, Sequence

from kruskal_maze.core.errors import MazeConfigError
from kruskal_maze.core.forest import DisjointSetForest
from kruskal_maze.core.graph import AdjacencyGraph
from kruskal_maze.core.grid import Edge, GridTopology

logger = logging.getLogger(__name__)


class SpanningTreeBuilder:
    """
    Randomized Kruskal. The candidate walls are shuffled once and then
    treated as a ring: each step looks at the wall under the cursor and
    moves the cursor on, wrapping at the end. A wall whose two cells are
    already joined is skipped. Walls that were opened stay in the ring,
    already marked connected, so revisiting them is a no-op.

    Pass `edges` to fix the order (no shuffle happens); otherwise `seed`
    drives a private random.Random.
    """

    def __init__(self, grid: GridTopology, seed: int = None, edges: Optional[Sequence[Edge]] = None):
        self.grid = grid
        self.seed = seed
        self.forest = DisjointSetForest(grid)
        self.graph = AdjacencyGraph(grid)

        if edges is None:
            self.edges: List[Edge] = grid.candidate_edges()
            random.Random(seed).shuffle(self.edges)
        else:
            self.edges = list(edges)

        self.cursor = 0
        self.accepted_count = 0
        self.step_count = 0
        self.rejected_streak = 0

        if self.is_complete():
            self.graph.freeze()

    @property
    def target(self) -> int:
        return self.grid.cell_count - 1

    def is_complete(self) -> bool:
        return self.accepted_count >= self.target

    def step(self) -> bool:
        """Consider one wall. Returns whether the tree is now complete."""
        if self.is_complete():
            return True
        if self.rejected_streak >= len(self.edges):
            raise MazeConfigError(
                f"Edge sequence cannot span the grid: {self.accepted_count}/{self.target} edges accepted"
            )

        edge = self.edges[self.cursor]
        self.cursor = (self.cursor + 1) % len(self.edges)
        self.step_count += 1

        p1 = edge.primary
        p2 = edge.other
        if self.forest.find(p1) != self.forest.find(p2):
            self.forest.union(p1, p2)
            self.graph.link(p1, p2)
            edge.connect()
            self.accepted_count += 1
            self.rejected_streak = 0

            if self.is_complete():
                self.graph.freeze()
                logger.debug(f"Spanning tree complete: {self.accepted_count} edges in {self.step_count} steps")
        else:
            self.rejected_streak += 1

        return self.is_complete()

    def run_to_completion(self):
        while not self.is_complete():
            self.step()

    def run(self) -> Iterator[str]:
        """Steps to completion, yielding progress every 100 accepted edges."""
        while not self.is_complete():
            before = self.accepted_count
            self.step()
            if self.accepted_count != before and self.accepted_count % 100 == 0:
                yield f"Edges: {self.accepted_count}/{self.target}"
        yield "Done"

    def walls(self) -> List[Edge]:
        """Walls still standing, in ring order."""
        return [e for e in self.edges if not e.connected]
