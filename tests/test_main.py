import unittest
import contextlib
import io
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from spanning_maze.main import main

class TestMain(unittest.TestCase):
    def test_generate_and_solve(self):
        with self.assertLogs("spanning_maze", level="INFO") as logs:
            code = main(["generate", "--rows", "4", "--cols", "5", "--seed", "7", "--solve", "bfs", "--stats"])
        self.assertEqual(code, 0)
        output = "\n".join(logs.output)
        self.assertIn("Generated 19 passages", output)
        self.assertIn("20 cells", output)
        self.assertIn("BFS path", output)
        self.assertIn("dead_ends", output)

    def test_iteration_cap_fails(self):
        with self.assertLogs("spanning_maze", level="ERROR"):
            code = main(["generate", "--rows", "30", "--cols", "30", "--max-iterations", "5"])
        self.assertEqual(code, 1)

    def test_invalid_dimensions(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main(["generate", "--rows", "0"])
        self.assertEqual(ctx.exception.code, 2)

    def test_benchmark(self):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            code = main(["benchmark", "--size", "5"])
        self.assertEqual(code, 0)
        self.assertIn("BFS", out.getvalue())
        self.assertIn("DFS", out.getvalue())

if __name__ == '__main__':
    unittest.main()
