from array import array
from typing import Iterator, NamedTuple, Optional, Tuple


class Walls(NamedTuple):
    north: bool
    east: bool
    south: bool
    west: bool


class Grid:
    # Bitmask Constants
    NORTH = 0b00000001
    EAST  = 0b00000010
    SOUTH = 0b00000100
    WEST  = 0b00001000

    # Flags
    PATH = 0b00100000

    # All walls present by default (N|E|S|W) = 15
    ALL_WALLS = NORTH | EAST | SOUTH | WEST

    # Direction Helpers (row, col offsets)
    DROW = {NORTH: -1, SOUTH: 1, EAST: 0, WEST: 0}
    DCOL = {NORTH: 0, SOUTH: 0, EAST: 1, WEST: -1}
    OPPOSITE = {NORTH: SOUTH, SOUTH: NORTH, EAST: WEST, WEST: EAST}

    # N, E, S, W - same order as Walls
    DIRECTIONS = (NORTH, EAST, SOUTH, WEST)

    __slots__ = ('rows', 'cols', 'cells')

    def __init__(self, rows: int, cols: int):
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        # 1 byte per cell, every wall up until carved
        self.cells = array('B', [self.ALL_WALLS] * (rows * cols))

    def __len__(self) -> int:
        return self.rows * self.cols

    def get_index(self, row: int, col: int) -> int:
        if 0 <= row < self.rows and 0 <= col < self.cols:
            return row * self.cols + col
        raise IndexError(f"Cell ({row}, {col}) out of bounds")

    def get_coords(self, index: int) -> Tuple[int, int]:
        self.check_index(index)
        return divmod(index, self.cols)

    def contains(self, index: int) -> bool:
        return 0 <= index < self.rows * self.cols

    def check_index(self, index: int):
        if not self.contains(index):
            raise IndexError(f"Cell index {index} out of range [0, {self.rows * self.cols})")

    def neighbor(self, index: int, dir_bit: int) -> Optional[int]:
        """
        Returns the index of the neighbor in 'dir_bit', or None when that
        neighbor would fall outside the grid.
        """
        row, col = self.get_coords(index)
        nrow = row + self.DROW[dir_bit]
        ncol = col + self.DCOL[dir_bit]
        if 0 <= nrow < self.rows and 0 <= ncol < self.cols:
            return nrow * self.cols + ncol
        return None

    def get_neighbors(self, index: int) -> Iterator[Tuple[int, int]]:
        """
        Yields (neighbor_index, direction_to_neighbor) for all in-bounds
        grid neighbors, in N, E, S, W order.
        Does NOT check walls.
        """
        row, col = self.get_coords(index)
        if row > 0:
            yield (index - self.cols, self.NORTH)
        if col < self.cols - 1:
            yield (index + 1, self.EAST)
        if row < self.rows - 1:
            yield (index + self.cols, self.SOUTH)
        if col > 0:
            yield (index - 1, self.WEST)

    def carve_path(self, index: int, dir_bit: int):
        """
        Removes the wall between cell 'index' and its neighbor in 'dir_bit',
        and the OPPOSITE wall from the neighbor.
        """
        other = self.neighbor(index, dir_bit)
        if other is None:
            return  # Cannot carve into void

        self.cells[index] &= ~dir_bit
        self.cells[other] &= ~self.OPPOSITE[dir_bit]

    def direction_to(self, index: int, other: int) -> Optional[int]:
        for nidx, dir_bit in self.get_neighbors(index):
            if nidx == other:
                return dir_bit
        return None

    def has_wall(self, index: int, dir_bit: int) -> bool:
        return (self.cells[index] & dir_bit) != 0

    def walls_at(self, index: int) -> Walls:
        val = self.cells[index]
        return Walls(*((val & d) != 0 for d in self.DIRECTIONS))

    def set_path(self, index: int, on: bool = True):
        if on:
            self.cells[index] |= self.PATH
        else:
            self.cells[index] &= ~self.PATH

    def clear_path(self):
        for i in range(len(self.cells)):
            self.cells[i] &= ~self.PATH

    def reset(self):
        for i in range(len(self.cells)):
            self.cells[i] = self.ALL_WALLS
