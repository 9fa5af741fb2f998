import argparse
import logging
import os
import sys
import time

# Ensure project root is in path so we can import 'kruskal_maze' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from kruskal_maze.config import DEFAULT_COLS, DEFAULT_FPS, DEFAULT_ROWS, DEFAULT_WINDOW, MazeConfig
from kruskal_maze.core.errors import MazeError


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def add_size_args(parser, rows=DEFAULT_ROWS, cols=DEFAULT_COLS):
    parser.add_argument("--rows", type=int, default=rows, help="Maze rows")
    parser.add_argument("--cols", type=int, default=cols, help="Maze columns")
    parser.add_argument("--seed", type=int, default=None, help="Random Seed")


def build_parser():
    parser = argparse.ArgumentParser(description="Kruskal Maze: randomized spanning-tree mazes with BFS/DFS solving")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Play Command
    play_parser = subparsers.add_parser("play", help="Open the interactive window")
    add_size_args(play_parser, rows=9, cols=16)
    play_parser.add_argument("--static", dest="animate", action="store_false", default=None,
                             help="Start fully generated instead of animating generation")
    play_parser.add_argument("--width", dest="window_width", type=int, default=DEFAULT_WINDOW[0], help="Window width")
    play_parser.add_argument("--height", dest="window_height", type=int, default=DEFAULT_WINDOW[1], help="Window height")
    play_parser.add_argument("--fps", type=int, default=DEFAULT_FPS, help="Frames per second")
    play_parser.add_argument("--record", action="store_true", help="Record the window to mp4")
    play_parser.add_argument("--out", dest="output", type=str, help="Recording file path (optional)")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a maze headless")
    add_size_args(gen_parser)
    gen_parser.add_argument("--ascii", action="store_true", help="Print the maze as text")

    # Solve Command
    solve_parser = subparsers.add_parser("solve", help="Generate and solve a maze headless")
    add_size_args(solve_parser)
    solve_parser.add_argument("--algo", type=str, default="bfs", choices=["bfs", "dfs"], help="Solver algorithm")
    solve_parser.add_argument("--ascii", action="store_true", help="Print the maze and path as text")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Compare BFS and DFS on generated mazes")
    bench_parser.add_argument("--sizes", type=int, nargs="+", default=[16, 64, 256], help="Square maze sizes")
    bench_parser.add_argument("--seed", type=int, default=123, help="Random Seed")

    return parser


def cmd_play(args, logger):
    config = MazeConfig.from_args(args)
    from kruskal_maze.viz.renderer import Renderer
    logger.info(f"Opening {config.cols}x{config.rows} maze window...")
    renderer = Renderer(config)
    if renderer.recorder.active:
        logger.info(f"Recording video to {renderer.recorder.output_file}")
    renderer.init_window()
    renderer.run_loop()


def cmd_generate(args, logger):
    config = MazeConfig.from_args(args)
    from kruskal_maze.engine import MazeEngine
    from kruskal_maze.core.complexity import MazeStats

    logger.info(f"Generating {config.cols}x{config.rows} maze (seed={config.seed})...")
    engine = MazeEngine(config.rows, config.cols, auto_solve=False, seed=config.seed)
    for status in engine.builder.run():
        logger.debug(status)

    stats = MazeStats.calculate_stats(engine.graph)
    logger.info(f"Accepted {engine.accepted_count} edges in {engine.builder.step_count} steps")
    logger.info(f"Stats: {stats}")

    if args.ascii:
        from kruskal_maze.viz.text import render_ascii
        print(render_ascii(engine))
    print(f"Done. Edges: {engine.accepted_count}, Dead ends: {stats['dead_ends']}")
    return engine


def cmd_solve(args, logger):
    config = MazeConfig.from_args(args)
    from kruskal_maze.engine import MazeEngine

    engine = MazeEngine(config.rows, config.cols, seed=config.seed)
    logger.info(f"Solving with {args.algo.upper()} from {engine.start} to {engine.goal}...")
    result = engine.solve(args.algo)

    if args.ascii:
        from kruskal_maze.viz.text import render_ascii
        print(render_ascii(engine, result.path))
    print(f"Done. Path Length: {len(result.path)}, Visited: {len(result.order)}")
    return result


def cmd_benchmark(args, logger):
    from kruskal_maze.engine import MazeEngine
    from kruskal_maze.algo.solvers import BFS, DFS

    print(f"\n{'SIZE':<10} | {'ALGORITHM':<10} | {'TIME (s)':<10} | {'PATH LEN':<10} | {'VISITED':<10}")
    print("-" * 62)

    for size in args.sizes:
        t0 = time.time()
        engine = MazeEngine(size, size, seed=args.seed)
        logger.info(f"Generated {size}x{size} in {time.time() - t0:.4f}s")

        for cls in (BFS, DFS):
            solver = cls(engine.graph)
            t_start = time.time()
            solver.solve(engine.start, engine.goal)
            duration = time.time() - t_start
            label = f"{size}x{size}"
            print(f"{label:<10} | {cls.name.upper():<10} | {duration:<10.4f} | {len(solver.path):<10} | {solver.visited_count:<10}")


COMMANDS = {
    "play": cmd_play,
    "generate": cmd_generate,
    "solve": cmd_solve,
    "benchmark": cmd_benchmark,
}


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("kruskal_maze")

    if args.command is None:
        parser.print_help()
        return 0

    logger.info(f"Running command: {args.command}")
    try:
        COMMANDS[args.command](args, logger)
    except MazeError as e:
        logger.error(str(e))
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
