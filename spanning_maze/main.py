import argparse
import sys
import os
import logging
import time

# Ensure project root is in path so we can import 'spanning_maze' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from spanning_maze.core.config import MazeConfig, SOLVERS

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Spanning Maze: perfect maze generator and solver")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate (and optionally solve) a maze")
    gen_parser.add_argument("--rows", type=int, default=20, help="Maze Rows")
    gen_parser.add_argument("--cols", type=int, default=20, help="Maze Columns")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--solve", type=str, default=None, choices=SOLVERS, help="Solve the maze after generating it")
    gen_parser.add_argument("--max-iterations", type=int, default=None, help="Abort generation after this many union attempts")
    gen_parser.add_argument("--stats", action="store_true", help="Log dead end / corridor statistics")
    gen_parser.add_argument("--visual", action="store_true", help="Show visualization")
    gen_parser.add_argument("--record", action="store_true", help="Record generation video")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time generation and solving")
    bench_parser.add_argument("--size", type=int, default=100, help="Benchmark size (size x size)")
    bench_parser.add_argument("--seed", type=int, default=123, help="Random Seed")

    return parser

def run_generate(config: MazeConfig, args, logger) -> int:
    from spanning_maze.core.grid import Grid
    from spanning_maze.algo.kruskal import MazeBuilder, GenerationLimitExceeded
    from spanning_maze.algo.solvers import SOLVERS as SOLVER_CLASSES

    logger.debug(f"Config: {config.as_dict()}")
    logger.info(f"Generating {config.rows}x{config.cols} maze ({config.cell_count:,} cells, seed={config.seed})...")
    grid = Grid(config.rows, config.cols)
    builder = MazeBuilder(grid, seed=config.seed, max_iterations=config.max_iterations)
    solver_cls = SOLVER_CLASSES[config.solver] if config.solver else None

    if args.visual or args.record:
        logger.info("Visual mode enabled - Opening window...")
        from spanning_maze.viz.renderer import Renderer
        renderer = Renderer(grid, generator=builder, solver_cls=solver_cls, record=args.record)

        if args.record:
            import datetime
            os.makedirs("recordings", exist_ok=True)
            ts = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
            fname = f"gen_{config.rows}x{config.cols}_{ts}.mp4"
            renderer.recorder.output_file = os.path.join("recordings", fname)
            logger.info(f"Recording video to {renderer.recorder.output_file}")

        renderer.init_window()
        try:
            renderer.run_loop()
        except GenerationLimitExceeded as e:
            logger.error(str(e))
            return 1
        solver = renderer.solver
    else:
        try:
            graph = builder.generate()
        except GenerationLimitExceeded as e:
            logger.error(str(e))
            return 1
        logger.info(f"Generated {graph.edge_count()} passages in {builder.iterations} iterations.")

        solver = None
        if solver_cls:
            solver = solver_cls(graph, grid)
            solver.run_all()

    if solver is not None:
        if solver.path:
            logger.info(f"{config.solver.upper()} path ({len(solver.path)} cells): {solver.path}")
        else:
            logger.info("No solution found (or visualization closed early).")

    if args.stats:
        from spanning_maze.core.complexity import MazeStats
        logger.info(f"Stats: {MazeStats.calculate_stats(grid)}")

    return 0

def run_benchmark(args, logger) -> int:
    from spanning_maze.core.grid import Grid
    from spanning_maze.algo.kruskal import MazeBuilder
    from spanning_maze.algo.solvers import BFS, DFS

    logger.info(f"Running Benchmark (Size: {args.size}x{args.size})...")

    t0 = time.time()
    builder = MazeBuilder(Grid(args.size, args.size), seed=args.seed)
    graph = builder.generate()
    gen_time = time.time() - t0
    logger.info(f"Generation complete in {gen_time:.4f}s ({builder.iterations} iterations)")

    print(f"\n{'ALGORITHM':<10} | {'TIME (s)':<10} | {'PATH LEN':<10}")
    print("-" * 36)

    for name, cls in [("BFS", BFS), ("DFS", DFS)]:
        s = cls(graph)
        t_start = time.time()
        s.run_all()
        duration = time.time() - t_start
        print(f"{name:<10} | {duration:<10.4f} | {len(s.path):<10}")

    return 0

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("spanning_maze")

    if args.command is None:
        parser.print_help()
        return 0

    logger.info(f"Running command: {args.command}")

    if args.command == "generate":
        try:
            config = MazeConfig.from_args(args)
        except ValueError as e:
            parser.error(str(e))
        return run_generate(config, args, logger)

    elif args.command == "benchmark":
        if args.size <= 0:
            parser.error(f"--size must be positive, got {args.size}")
        return run_benchmark(args, logger)

    return 0

if __name__ == "__main__":
    sys.exit(main())
