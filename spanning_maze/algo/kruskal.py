import logging
import random
from typing import Iterator, Optional
from spanning_maze.core.disjoint_set import DisjointSet
from spanning_maze.core.graph import Graph
from spanning_maze.core.grid import Grid, Walls
from spanning_maze.algo.base import Generator

logger = logging.getLogger(__name__)


class GenerationLimitExceeded(RuntimeError):
    """Raised when generation runs past its configured iteration cap."""


class MazeBuilder(Generator):
    """
    Randomized Kruskal-style generator.

    Repeatedly joins a random cell with a random grid neighbor. A union that
    merges two components becomes a graph edge (and a carved wall); a union
    inside one component is rejected. The loop stops once a single
    component is left, so the graph is a spanning tree of the grid.
    """

    def __init__(self, grid: Grid, seed: Optional[int] = None, max_iterations: Optional[int] = None):
        super().__init__(grid, seed)
        self.max_iterations = max_iterations
        self.graph: Optional[Graph] = None
        self.disjoint_set: Optional[DisjointSet] = None
        self.iterations = 0

    def run(self) -> Iterator[str]:
        rng = random.Random(self.seed)
        rows, cols = self.grid.rows, self.grid.cols
        total = rows * cols

        # New session: nothing carries over from a previous run
        self.grid.reset()
        self.graph = Graph(rows, cols)
        self.disjoint_set = DisjointSet(total)
        self.iterations = 0
        self.step_count = 0

        for i in range(total):
            self.graph.add_vertex(i)

        logger.debug(f"Building {rows}x{cols} maze (seed={self.seed})")

        while self.disjoint_set.count() != 1:
            if self.max_iterations is not None and self.iterations >= self.max_iterations:
                raise GenerationLimitExceeded(
                    f"Gave up after {self.iterations} iterations with "
                    f"{self.disjoint_set.count()} components left"
                )
            self.iterations += 1

            cell = rng.randrange(total)
            neighbor, dir_bit = rng.choice(list(self.grid.get_neighbors(cell)))

            if self.disjoint_set.union(cell, neighbor):
                self.graph.add_edge(cell, neighbor)
                self.grid.carve_path(cell, dir_bit)
                self.step_count += 1

                if self.step_count % 100 == 0:
                    yield f"Joining... Components: {self.disjoint_set.count()}"

        logger.debug(f"Spanning tree complete: {self.step_count} edges, {self.iterations} iterations")
        yield "Done"

    def generate(self) -> Graph:
        self.run_all()
        return self.graph

    def walls_of(self, cell: int) -> Walls:
        """
        Wall flags (north, east, south, west) for 'cell'. A side is walled
        when it faces the grid edge or no graph edge joins the neighbor.
        """
        if self.graph is None:
            raise RuntimeError("Maze has not been generated yet")

        walls = []
        for dir_bit in Grid.DIRECTIONS:
            # Bounds first, so has_edge never sees an index outside the grid
            neighbor = self.grid.neighbor(cell, dir_bit)
            walls.append(neighbor is None or not self.graph.has_edge(cell, neighbor))
        return Walls(*walls)


def generate(rows: int, cols: int, seed: Optional[int] = None) -> Graph:
    return MazeBuilder(Grid(rows, cols), seed=seed).generate()
