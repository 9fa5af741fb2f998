from typing import Optional, Sequence

from kruskal_maze.core.grid import Cell


def render_ascii(engine, path: Optional[Sequence[Cell]] = None) -> str:
    """
    Text picture of the maze:

        +---+---+
        | *   * |
        +---+   +
        |     * |
        +---+---+
    """
    marked = set(path or ())
    closed = {(e.primary, e.direction) for e in engine.walls()}
    east = engine.grid.EAST
    south = engine.grid.SOUTH

    lines = ["+" + "---+" * engine.cols]
    for y in range(engine.rows):
        row = "|"
        floor = "+"
        for x in range(engine.cols):
            row += " * " if (x, y) in marked else "   "
            if x == engine.cols - 1 or ((x, y), east) in closed:
                row += "|"
            else:
                row += " "
            if y == engine.rows - 1 or ((x, y), south) in closed:
                floor += "---+"
            else:
                floor += "   +"
        lines.append(row)
        lines.append(floor)
    return "\n".join(lines)
