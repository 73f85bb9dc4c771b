from abc import ABC, abstractmethod
from typing import Iterator, List, Optional
from spanning_maze.core.graph import Graph, MazePath
from spanning_maze.core.grid import Grid

class Solver(ABC):
    def __init__(self, graph: Graph, grid: Optional[Grid] = None):
        self.graph = graph
        self.grid = grid
        self.path: List[int] = []
        self.result: Optional[MazePath] = None

    @abstractmethod
    def search(self) -> Optional[MazePath]:
        pass

    def run(self) -> Iterator[str]:
        """
        Runs the traversal, then reveals the path one cell at a time so a
        renderer can animate it. Cells are marked with Grid.PATH as they go.
        """
        self.path = []
        if self.grid is not None:
            self.grid.clear_path()

        self.result = self.search()
        if self.result is None:
            yield "No path"
            return

        for cell in self.result:
            self.path.append(cell)
            if self.grid is not None:
                self.grid.set_path(cell)
            if len(self.path) % 10 == 0:
                yield f"Path: {len(self.path)}"

        yield "Solved"

    def run_all(self) -> List[int]:
        for _ in self.run():
            pass
        return self.path

class BFS(Solver):
    def search(self) -> Optional[MazePath]:
        return self.graph.run_bfs()

class DFS(Solver):
    def search(self) -> Optional[MazePath]:
        return self.graph.run_dfs()

SOLVERS = {
    "bfs": BFS,
    "dfs": DFS,
}
