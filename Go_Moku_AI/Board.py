"""Sides and the board grid (cell occupancy only, no evaluation)."""

from enum import Enum

from Go_Moku_AI.engine.errors import IllegalMove, OutOfRange


BOARD_SIZE = 19


class Side(Enum):
    CROSS = 0
    NOUGHT = 1

    @property
    def opponent(self):
        return Side.NOUGHT if self is Side.CROSS else Side.CROSS

    @property
    def index(self):
        """Offset of this side in per-side arrays."""
        return self.value

    @property
    def label(self):
        return self.name.capitalize()


def side_index(side):
    """Array offset for `side`; rejects anything that is not a Side."""
    if not isinstance(side, Side):
        raise ValueError(f"expected a Side, got {side!r}")
    return side.index


class Board:
    def __init__(self, size=BOARD_SIZE):
        if size < 5:
            raise ValueError("board size must be at least 5")
        # None marks an empty cell, otherwise the Side holding it
        self.size = size
        self.cells = [[None] * size for _ in range(size)]
        self.move_count = 0

    def in_bounds(self, x, y):
        return 0 <= x < self.size and 0 <= y < self.size

    def check_bounds(self, x, y):
        if not self.in_bounds(x, y):
            raise OutOfRange(x, y, self.size)

    def cell_at(self, x, y):
        self.check_bounds(x, y)
        return self.cells[y][x]

    def is_empty(self, x, y):
        return self.in_bounds(x, y) and self.cells[y][x] is None

    def place(self, x, y, side):
        """Place a stone; raise if out of bounds or occupied."""
        side_index(side)
        self.check_bounds(x, y)
        if self.cells[y][x] is not None:
            raise IllegalMove(f"cell ({x}, {y}) already occupied")
        self.cells[y][x] = side
        self.move_count += 1

    def is_full(self):
        return self.move_count >= self.size * self.size

    @property
    def center(self):
        return self.size // 2, self.size // 2
