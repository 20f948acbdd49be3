"""Typed failures raised by the board and the move engine."""


class IllegalMove(ValueError):
    """Placement rejected: occupied cell, or the game is already won."""


class OutOfRange(IllegalMove):
    """Coordinate outside the grid."""

    def __init__(self, x, y, size):
        super().__init__(f"({x}, {y}) is outside the {size}x{size} grid")
        self.x = x
        self.y = y
        self.size = size


class NoLegalMove(ValueError):
    """No empty cell left to play."""
