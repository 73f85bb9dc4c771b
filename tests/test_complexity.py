import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from spanning_maze.core.grid import Grid
from spanning_maze.algo.kruskal import MazeBuilder
from spanning_maze.core.complexity import MazeStats

class TestComplexity(unittest.TestCase):
    def test_untouched_grid(self):
        stats = MazeStats.calculate_stats(Grid(4, 4))
        self.assertEqual(stats["passages"], 0)
        self.assertEqual(stats["dead_ends"], 0)
        self.assertEqual(stats["junctions"], 0)

    def test_perfect_maze_passages(self):
        rows, cols = 20, 20
        builder = MazeBuilder(Grid(rows, cols), seed=42)
        builder.generate()

        stats = MazeStats.calculate_stats(builder.grid)
        # Each tree edge opens one side on both of its cells
        self.assertEqual(stats["passages"], 2 * (rows * cols - 1))
        self.assertGreater(stats["dead_ends"], 0)
        self.assertEqual(stats["dead_ends"] + stats["corridors"] + stats["junctions"], rows * cols)

    def test_corridor(self):
        grid = Grid(1, 3)
        grid.carve_path(0, Grid.EAST)
        grid.carve_path(1, Grid.EAST)
        stats = MazeStats.calculate_stats(grid)
        self.assertEqual(stats["dead_ends"], 2)
        self.assertEqual(stats["corridors"], 1)
        self.assertAlmostEqual(stats["dead_end_percent"], 200 / 3)

if __name__ == '__main__':
    unittest.main()
