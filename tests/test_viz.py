import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from kruskal_maze.config import MazeConfig
from kruskal_maze.core.grid import Edge, GridTopology
from kruskal_maze.engine import MazeEngine
from kruskal_maze.viz.layout import Layout
from kruskal_maze.viz.reveal import RevealState
from kruskal_maze.viz.text import render_ascii

def fixed_2x2():
    order = [Edge(0, 0, GridTopology.EAST), Edge(0, 0, GridTopology.SOUTH),
             Edge(1, 0, GridTopology.SOUTH), Edge(0, 1, GridTopology.EAST)]
    return MazeEngine(2, 2, edges=order)

class TestLayout(unittest.TestCase):
    def test_geometry(self):
        layout = Layout(640, 360, 9, 16)
        self.assertEqual(layout.px_per_cell, 32)
        self.assertEqual(layout.margin_side, 64)
        self.assertEqual(layout.margin_top, 36)
        self.assertEqual(layout.cell_rect(1, 2), (96, 100, 32, 32))
        self.assertEqual(layout.maze_rect(), (64, 36, 512, 288))

    def test_wall_lines(self):
        layout = Layout(640, 360, 9, 16)
        self.assertEqual(layout.wall_line(Edge(0, 0, GridTopology.EAST)), ((96, 36), (96, 68)))
        self.assertEqual(layout.wall_line(Edge(0, 0, GridTopology.SOUTH)), ((64, 68), (96, 68)))

    def test_tiny_cells_clamped(self):
        layout = Layout(100, 100, 1000, 1000)
        self.assertEqual(layout.px_per_cell, 1)

class TestReveal(unittest.TestCase):
    def test_staggered_reveal(self):
        engine = fixed_2x2()
        reveal = RevealState(engine.solve("dfs"))
        self.assertEqual(list(reveal.visible_cells()), [])

        reveal.advance()
        self.assertAlmostEqual(reveal.tick, 4 / 144.0)
        self.assertEqual(list(reveal.visible_cells()), [((0, 0), 1)])

        frames = 1
        while not reveal.finished:
            reveal.advance()
            frames += 1
            self.assertLess(frames, 1000)

        shown = dict(reveal.visible_cells())
        self.assertEqual(shown, {(0, 0): 1, (0, 1): 1, (1, 0): 2, (1, 1): 2})

    def test_clear(self):
        reveal = RevealState(fixed_2x2().solve("bfs"))
        for _ in range(200):
            reveal.advance()
        reveal.clear()
        self.assertEqual(reveal.tick, 0.0)
        self.assertFalse(reveal.is_shown((0, 0)))
        reveal.advance()
        self.assertEqual(reveal.tick, 0.0)
        self.assertEqual(list(reveal.visible_cells()), [])

class TestText(unittest.TestCase):
    def test_single_cell(self):
        engine = MazeEngine(1, 1)
        self.assertEqual(render_ascii(engine), "+---+\n|   |\n+---+")
        self.assertEqual(render_ascii(engine, [(0, 0)]), "+---+\n| * |\n+---+")

    def test_2x2(self):
        engine = fixed_2x2()
        expected = "\n".join([
            "+---+---+",
            "|       |",
            "+   +   +",
            "|   |   |",
            "+---+---+",
        ])
        self.assertEqual(render_ascii(engine), expected)

        path = engine.solve("bfs").path
        self.assertIn("| *   * |", render_ascii(engine, path))

class TestRenderer(unittest.TestCase):
    def setUp(self):
        from kruskal_maze.viz.renderer import Renderer
        self.renderer = Renderer(MazeConfig(rows=3, cols=4, seed=1, animate=True))

    def test_starts_animating(self):
        r = self.renderer
        self.assertFalse(r.engine.is_complete())
        r.tick()
        self.assertEqual(r.engine.accepted_count, 1)

    def test_solution_keys(self):
        r = self.renderer
        r.handle_key("B")
        self.assertTrue(r.engine.is_complete())
        self.assertEqual(r.reveal.result.algorithm, "bfs")
        r.tick()
        self.assertGreater(r.reveal.tick, 0)

        r.handle_key("c")
        self.assertFalse(r.reveal.active)

        r.handle_key("d")
        self.assertEqual(r.reveal.result.algorithm, "dfs")
        self.assertTrue(r.reveal.active)

    def test_new_maze_keys(self):
        r = self.renderer
        r.handle_key("b")
        old = r.engine

        r.handle_key("n")
        self.assertIsNot(r.engine, old)
        self.assertTrue(r.engine.is_complete())
        self.assertIsNone(r.reveal)
        self.assertEqual((r.engine.rows, r.engine.cols), (3, 4))

        r.handle_key("a")
        self.assertTrue(r.animating)
        self.assertEqual(r.engine.accepted_count, 0)

    def test_unknown_key_ignored(self):
        r = self.renderer
        engine = r.engine
        r.handle_key("x")
        self.assertIs(r.engine, engine)
        self.assertIsNone(r.reveal)

    def test_recorder_inactive_by_default(self):
        self.assertFalse(self.renderer.recorder.active)
        # No writer is created for an inactive recorder
        self.renderer.recorder.capture_frame(None)
        self.assertIsNone(self.renderer.recorder.writer)

if __name__ == '__main__':
    unittest.main()
