"""Per-window, per-side stone counts, updated once per placement."""

from Go_Moku_AI.Board import side_index
from Go_Moku_AI.engine.windows import WIN_LENGTH, Direction


class LineCountTracker:
    def __init__(self, size):
        self.size = size
        # counts[direction][y][x][side] for the window anchored at (x, y)
        self.counts = [
            [[[0, 0] for _ in range(size)] for _ in range(size)]
            for _ in Direction
        ]

    def _slot(self, window):
        return self.counts[window.direction.index][window.y][window.x]

    def count(self, window, side):
        return self._slot(window)[side_index(side)]

    def record_stone(self, window, side):
        """Add one `side` stone to `window`; return (previous, new) counts."""
        slot = self._slot(window)
        idx = side_index(side)
        previous = slot[idx]
        if previous >= WIN_LENGTH:
            raise ValueError(f"{window} already holds {WIN_LENGTH} stones for {side.label}")
        slot[idx] = previous + 1
        return previous, previous + 1

