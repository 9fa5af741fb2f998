from typing import Tuple

from kruskal_maze.core.grid import Edge


class Layout:
    """
    Pixel geometry for a rows x cols maze centred in a window. The maze gets
    at most 80% of the window on either axis; cells are square.
    """
    FILL = 0.8

    def __init__(self, width: int, height: int, rows: int, cols: int):
        self.width = width
        self.height = height
        self.rows = rows
        self.cols = cols
        # At least 1px per cell
        self.px_per_cell = max(1, min(int(self.FILL * width / cols), int(self.FILL * height / rows)))
        self.margin_side = (width - cols * self.px_per_cell) // 2
        self.margin_top = (height - rows * self.px_per_cell) // 2

    def cell_rect(self, col: int, row: int) -> Tuple[int, int, int, int]:
        return (self.margin_side + col * self.px_per_cell,
                self.margin_top + row * self.px_per_cell,
                self.px_per_cell, self.px_per_cell)

    def wall_line(self, edge: Edge) -> Tuple[Tuple[int, int], Tuple[int, int]]:
        """Endpoints of the wall segment on the far side of the edge's primary cell."""
        ox, oy = edge.other
        x = self.margin_side + ox * self.px_per_cell
        y = self.margin_top + oy * self.px_per_cell
        if edge.vertical:
            return (x, y), (x, y + self.px_per_cell)
        return (x, y), (x + self.px_per_cell, y)

    def maze_rect(self) -> Tuple[int, int, int, int]:
        return (self.margin_side, self.margin_top,
                self.cols * self.px_per_cell, self.rows * self.px_per_cell)
