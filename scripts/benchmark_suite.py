import sys
import os
import time

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from spanning_maze.core.grid import Grid
from spanning_maze.algo.kruskal import MazeBuilder
from spanning_maze.algo.solvers import BFS, DFS
from spanning_maze.core.complexity import MazeStats

def benchmark_size(rows: int, cols: int):
    cells = rows * cols
    print(f"\n--- Benchmarking {rows}x{cols} ({cells:,} cells) ---")

    # 1. Generation
    print("Generating...")
    builder = MazeBuilder(Grid(rows, cols), seed=42)

    gen_start = time.time()
    graph = builder.generate()
    gen_time = time.time() - gen_start

    print(f"Generation Time: {gen_time:.4f}s")
    print(f"Speed: {cells / gen_time:,.0f} cells/sec")
    # Rejected unions are what make this superlinear
    print(f"Union attempts: {builder.iterations:,} ({builder.iterations / cells:.2f} per cell)")

    # 2. Solving
    for name, cls in (("BFS", BFS), ("DFS", DFS)):
        solver = cls(graph)
        start = time.time()
        path = solver.run_all()
        print(f"{name} Time: {time.time() - start:.4f}s (path {len(path)} cells)")

    # 3. Shape
    stats = MazeStats.calculate_stats(builder.grid)
    print(f"Dead ends: {stats['dead_ends']} ({stats['dead_end_percent']:.1f}%)")

def run_suite():
    sizes = [
        (10, 10),
        (100, 100),
        (300, 300),
        (1000, 1000),  # 1M - slow in pure Python
    ]

    for rows, cols in sizes:
        benchmark_size(rows, cols)

if __name__ == "__main__":
    run_suite()
