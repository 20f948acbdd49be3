"""Five-cell windows: the fixed set of lines a side can complete to win."""

from enum import Enum
from functools import lru_cache
from typing import NamedTuple

from .errors import OutOfRange


WIN_LENGTH = 5


class Direction(Enum):
    # Declaration order is the scan order used when a placement fans out.
    HORIZONTAL = (1, 0)
    DOWN_LEFT = (1, 1)
    DOWN_RIGHT = (-1, 1)
    VERTICAL = (0, 1)

    @property
    def dx(self):
        return self.value[0]

    @property
    def dy(self):
        return self.value[1]

    @property
    def index(self):
        return _DIRECTION_INDEX[self]


_DIRECTION_INDEX = {d: i for i, d in enumerate(Direction)}


class Window(NamedTuple):
    """A run of WIN_LENGTH cells, identified by direction and anchor (first cell)."""

    direction: Direction
    x: int
    y: int

    def cells(self):
        dx, dy = self.direction.value
        return tuple((self.x + k * dx, self.y + k * dy) for k in range(WIN_LENGTH))


def _fits(x, y, direction, size):
    end_x = x + (WIN_LENGTH - 1) * direction.dx
    end_y = y + (WIN_LENGTH - 1) * direction.dy
    return 0 <= x < size and 0 <= y < size and 0 <= end_x < size and 0 <= end_y < size


@lru_cache(maxsize=None)
def windows_through(x: int, y: int, size: int) -> tuple[tuple[Window, int], ...]:
    """
    Every window containing (x, y) with the cell's offset inside it.
    Ordered by direction, then by offset 0..4; windows that would leave the
    board are never produced.
    """
    if not (0 <= x < size and 0 <= y < size):
        raise OutOfRange(x, y, size)
    found = []
    for direction in Direction:
        for offset in range(WIN_LENGTH):
            ax = x - offset * direction.dx
            ay = y - offset * direction.dy
            if _fits(ax, ay, direction, size):
                found.append((Window(direction, ax, ay), offset))
    return tuple(found)


@lru_cache(maxsize=None)
def all_windows(size: int) -> tuple[Window, ...]:
    return tuple(
        Window(direction, x, y)
        for direction in Direction
        for y in range(size)
        for x in range(size)
        if _fits(x, y, direction, size)
    )


def window_count(size: int) -> int:
    span = size - (WIN_LENGTH - 1)
    return 2 * size * span + 2 * span * span


def winning_line(board, x, y, direction, side):
    """
    Walk back from (x, y) along `direction` over `side` stones, then report
    WIN_LENGTH cells forward from that endpoint.
    """
    dx, dy = direction.value
    sx, sy = x, y
    while board.in_bounds(sx - dx, sy - dy) and board.cells[sy - dy][sx - dx] is side:
        sx -= dx
        sy -= dy
    return tuple((sx + k * dx, sy + k * dy) for k in range(WIN_LENGTH))
