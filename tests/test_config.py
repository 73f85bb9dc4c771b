import unittest
import argparse
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from spanning_maze.core.config import MazeConfig

class TestConfig(unittest.TestCase):
    def test_from_args(self):
        args = argparse.Namespace(rows=4, cols=6, seed=3, solve="dfs", max_iterations=None)
        config = MazeConfig.from_args(args)
        self.assertEqual(config.cell_count, 24)
        self.assertEqual(config.as_dict(), {
            "rows": 4, "cols": 6, "seed": 3, "solver": "dfs", "max_iterations": None,
        })

    def test_rejects_bad_values(self):
        for kwargs in [
            {"rows": 0},
            {"cols": -3},
            {"solver": "astar"},
            {"max_iterations": 0},
        ]:
            with self.assertRaises(ValueError, msg=str(kwargs)):
                MazeConfig(**kwargs).validate()

    def test_defaults_are_valid(self):
        MazeConfig().validate()

if __name__ == '__main__':
    unittest.main()
