import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import argparse
import io
from contextlib import redirect_stdout

from kruskal_maze.config import DEFAULT_COLS, DEFAULT_ROWS, MazeConfig
from kruskal_maze.core.errors import MazeConfigError
from kruskal_maze.main import build_parser, main

def run(argv):
    out = io.StringIO()
    with redirect_stdout(out):
        status = main(argv)
    return status, out.getvalue()

class TestConfig(unittest.TestCase):
    def test_defaults(self):
        config = MazeConfig()
        self.assertEqual((config.rows, config.cols), (DEFAULT_ROWS, DEFAULT_COLS))
        self.assertIs(config.validate(), config)

    def test_from_args(self):
        ns = argparse.Namespace(rows=4, cols=6, seed=None, animate=None, ascii=True)
        config = MazeConfig.from_args(ns)
        self.assertEqual((config.rows, config.cols), (4, 6))
        self.assertTrue(config.animate)

    def test_validation(self):
        with self.assertRaises(MazeConfigError):
            MazeConfig(rows=0).validate()
        with self.assertRaises(MazeConfigError):
            MazeConfig(fps=0).validate()
        with self.assertRaises(ValueError):
            MazeConfig(window_width=-5).validate()

    def test_play_static_flag(self):
        args = build_parser().parse_args(["play", "--static"])
        self.assertFalse(MazeConfig.from_args(args).animate)
        args = build_parser().parse_args(["play"])
        self.assertTrue(MazeConfig.from_args(args).animate)
        self.assertEqual((args.rows, args.cols), (9, 16))

class TestMain(unittest.TestCase):
    def test_no_command(self):
        status, out = run([])
        self.assertEqual(status, 0)
        self.assertIn("usage", out)

    def test_generate(self):
        status, out = run(["generate", "--rows", "4", "--cols", "5", "--seed", "1", "--ascii"])
        self.assertEqual(status, 0)
        self.assertIn("Done. Edges: 19", out)
        self.assertTrue(out.startswith("+---+---+---+---+---+"))

    def test_solve(self):
        status, out = run(["solve", "--rows", "6", "--cols", "6", "--seed", "7", "--algo", "dfs"])
        self.assertEqual(status, 0)
        self.assertIn("Path Length:", out)

    def test_bad_size(self):
        status, out = run(["solve", "--rows", "0"])
        self.assertEqual(status, 2)
        self.assertNotIn("Path Length", out)

    def test_benchmark(self):
        status, out = run(["benchmark", "--sizes", "4", "8"])
        self.assertEqual(status, 0)
        self.assertIn("BFS", out)
        self.assertIn("8x8", out)

if __name__ == '__main__':
    unittest.main()
