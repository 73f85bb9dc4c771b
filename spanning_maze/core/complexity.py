from typing import Any, Dict
from spanning_maze.core.grid import Grid

class MazeStats:
    @staticmethod
    def count_walls(val: int) -> int:
        c = 0
        if val & Grid.NORTH: c += 1
        if val & Grid.EAST: c += 1
        if val & Grid.SOUTH: c += 1
        if val & Grid.WEST: c += 1
        return c

    @staticmethod
    def calculate_stats(grid: Grid) -> Dict[str, Any]:
        """
        Classifies every cell by how many walls it keeps:
        3 = dead end, 2 = corridor (or corner), 0-1 = junction.
        'passages' counts open cell sides, i.e. twice the carved edges.
        """
        dead_ends = 0
        corridors = 0
        junctions = 0
        passages = 0

        for i in range(len(grid)):
            walls = MazeStats.count_walls(grid.cells[i])
            passages += 4 - walls
            if walls == 3: dead_ends += 1
            elif walls == 2: corridors += 1
            elif walls <= 1: junctions += 1

        total = len(grid)
        return {
            "dead_ends": dead_ends,
            "corridors": corridors,
            "junctions": junctions,
            "passages": passages,
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0,
        }
