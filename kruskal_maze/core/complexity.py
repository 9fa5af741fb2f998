from kruskal_maze.core.graph import AdjacencyGraph


class MazeStats:
    @staticmethod
    def calculate_stats(graph: AdjacencyGraph):
        """
        Classifies cells by how many passages leave them.
        1 = dead end, 2 = corridor, 3+ = junction. A lone cell (1x1 maze)
        has no passages and lands in none of the bands.
        """
        dead_ends = 0
        corridors = 0
        junctions = 0

        for cell in graph.cells():
            exits = graph.degree(cell)
            if exits == 1: dead_ends += 1
            elif exits == 2: corridors += 1
            elif exits >= 3: junctions += 1

        total = len(graph)
        return {
            "dead_ends": dead_ends,
            "corridors": corridors,
            "junctions": junctions,
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
        }
