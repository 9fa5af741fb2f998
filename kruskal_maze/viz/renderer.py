import logging

import pygame

from kruskal_maze.config import MazeConfig
from kruskal_maze.engine import MazeEngine
from kruskal_maze.viz.layout import Layout
from kruskal_maze.viz.reveal import RevealState

logger = logging.getLogger(__name__)


class Renderer:
    COLOR_BG = (255, 255, 255)
    COLOR_WALL = (0, 0, 0)
    COLOR_TEXT = (0, 0, 0)
    COLOR_START = (0, 255, 0)
    COLOR_TARGET = (0, 0, 255)

    # Indexed by rank tier: unvisited, visited, on the solution path
    TIER_COLORS = (
        (100, 100, 100),
        (100, 100, 255),
        (100, 255, 100),
    )

    INSTRUCTIONS = ("a to get a new animated maze; b to bfs search; c to hide solution; "
                    "d to dfs search; n to get a new maze")

    def __init__(self, config: MazeConfig, engine: MazeEngine = None):
        self.config = config
        self.engine = engine or MazeEngine(config.rows, config.cols,
                                           auto_solve=not config.animate, seed=config.seed)
        self.animating = config.animate
        self.reveal = None
        self.layout = Layout(config.window_width, config.window_height,
                             self.engine.rows, self.engine.cols)

        from kruskal_maze.viz.recorder import VideoRecorder, default_output_name
        output = config.output
        if config.record and not output:
            output = default_output_name(self.engine.rows, self.engine.cols)
        self.recorder = VideoRecorder(active=config.record, output_file=output, fps=config.fps)

        self.running = True
        self.surface = None
        self.clock = None
        self.font = None

    # --- state changes (no display needed) ---

    def new_maze(self, animated: bool):
        # Fresh engine, old one is dropped along with any displayed solution
        self.engine = MazeEngine(self.engine.rows, self.engine.cols, auto_solve=not animated)
        self.animating = animated
        self.reveal = None
        logger.info(f"New {'animated ' if animated else ''}maze {self.engine.cols}x{self.engine.rows}")

    def show_solution(self, algorithm: str):
        result = self.engine.solve(algorithm)
        self.reveal = RevealState(result)
        logger.info(f"{algorithm.upper()}: path {len(result.path)}, visited {len(result.order)}")

    def clear_solution(self):
        if self.reveal:
            self.reveal.clear()

    def handle_key(self, key: str):
        key = key.lower()
        if key == "a":
            self.new_maze(animated=True)
        elif key == "b":
            self.show_solution("bfs")
        elif key == "c":
            self.clear_solution()
        elif key == "d":
            self.show_solution("dfs")
        elif key == "n":
            self.new_maze(animated=False)

    def tick(self):
        if self.animating and not self.engine.is_complete():
            self.engine.step()
        if self.reveal:
            self.reveal.advance()

    # --- pygame ---

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Kruskal Maze - {self.engine.cols}x{self.engine.rows}")
        self.surface = pygame.display.set_mode((self.config.window_width, self.config.window_height))
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 12)

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                self.handle_key(pygame.key.name(event.key))

    def draw_cell(self, cell, color):
        pygame.draw.rect(self.surface, color, self.layout.cell_rect(*cell))

    def draw(self):
        self.surface.fill(self.COLOR_BG)
        layout = self.layout

        self.draw_cell(self.engine.start, self.COLOR_START)
        self.draw_cell(self.engine.goal, self.COLOR_TARGET)

        if self.reveal:
            for cell, tier in self.reveal.visible_cells():
                self.draw_cell(cell, self.TIER_COLORS[tier])

        for edge in self.engine.walls():
            a, b = layout.wall_line(edge)
            pygame.draw.line(self.surface, self.COLOR_WALL, a, b, 1)

        pygame.draw.rect(self.surface, self.COLOR_WALL, layout.maze_rect(), 2)

        label = self.font.render(self.INSTRUCTIONS, True, self.COLOR_TEXT)
        rect = label.get_rect(center=(layout.width // 2, layout.height - layout.margin_top // 2))
        self.surface.blit(label, rect)

    def run_loop(self):
        while self.running:
            self.handle_input()
            self.tick()
            self.draw()
            pygame.display.flip()

            if self.recorder.active:
                self.recorder.capture_frame(self.surface)

            self.clock.tick(self.config.fps)

        self.recorder.stop()
        pygame.quit()
