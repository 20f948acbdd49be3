"""Placement validation; runs before the engine touches any state."""

from .errors import IllegalMove


def check_move(move, board, game_won=False):
    """
    Validate a placement against game state, bounds and occupancy.
    Raises IllegalMove (OutOfRange for off-board cells) on invalid moves.
    """
    if game_won:
        raise IllegalMove("Game already won")

    x, y = move
    board.check_bounds(x, y)
    if not board.is_empty(x, y):
        raise IllegalMove(f"Cell ({x}, {y}) already occupied")

    return True
