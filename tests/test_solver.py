import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from spanning_maze.core.grid import Grid
from spanning_maze.core.graph import Graph
from spanning_maze.algo.kruskal import MazeBuilder
from spanning_maze.algo.solvers import BFS, DFS, SOLVERS

class TestSolvers(unittest.TestCase):
    def create_simple_maze(self):
        # 3x3, single corridor from 8 back to 0:
        # 8 -> 7 -> 6 -> 3 -> 4 -> 5 -> 2 -> 1 -> 0
        grid = Grid(3, 3)
        graph = Graph(3, 3)
        for v in range(9):
            graph.add_vertex(v)
        route = [8, 7, 6, 3, 4, 5, 2, 1, 0]
        for a, b in zip(route, route[1:]):
            graph.add_edge(a, b)
            grid.carve_path(a, grid.direction_to(a, b))
        return grid, graph, route

    def test_bfs_path(self):
        grid, graph, route = self.create_simple_maze()
        bfs = BFS(graph, grid)
        for _ in bfs.run(): pass

        self.assertEqual(bfs.path, route)
        self.assertEqual(bfs.result.source, 8)
        self.assertEqual(bfs.result.destination, 0)
        for cell in route:
            self.assertTrue(grid.cells[cell] & Grid.PATH)

    def test_dfs_path(self):
        grid, graph, route = self.create_simple_maze()
        dfs = DFS(graph, grid)
        self.assertEqual(dfs.run_all(), route)

    def test_bfs_dfs_agree_on_generated_maze(self):
        builder = MazeBuilder(Grid(12, 9), seed=21)
        graph = builder.generate()

        bfs_path = BFS(graph).run_all()
        dfs_path = DFS(graph).run_all()

        self.assertEqual(bfs_path[0], dfs_path[0])
        self.assertEqual(bfs_path[-1], dfs_path[-1])
        self.assertEqual(len(bfs_path), len(dfs_path))
        self.assertEqual(bfs_path[0], 12 * 9 - 1)
        self.assertEqual(bfs_path[-1], 0)

        # Consecutive cells are joined by a passage
        for a, b in zip(bfs_path, bfs_path[1:]):
            self.assertTrue(graph.has_edge(a, b))

    def test_no_path(self):
        grid = Grid(2, 2)
        graph = Graph(2, 2)
        for v in range(4):
            graph.add_vertex(v)
        graph.add_edge(3, 1)

        bfs = BFS(graph, grid)
        updates = list(bfs.run())

        self.assertEqual(updates, ["No path"])
        self.assertEqual(len(bfs.path), 0)
        self.assertIsNone(bfs.result)

    def test_rerun_clears_previous_path(self):
        grid, graph, route = self.create_simple_maze()
        solver = BFS(graph, grid)
        solver.run_all()
        solver.run_all()
        self.assertEqual(solver.path, route)

    def test_registry(self):
        self.assertIs(SOLVERS["bfs"], BFS)
        self.assertIs(SOLVERS["dfs"], DFS)

if __name__ == '__main__':
    unittest.main()
