"""Move choice for the computer side: attack/defense value plus a small random jitter."""

import random

from Go_Moku_AI.Board import side_index
from Go_Moku_AI.engine.errors import NoLegalMove


ATTACK_FACTOR = 4  # importance of attack, 1 - 16


def validate_attack_factor(attack_factor):
    attack_factor = int(attack_factor)
    if not 1 <= attack_factor <= 16:
        raise ValueError("attack_factor must be between 1 and 16")
    return attack_factor


def score_cell(values, x, y, side, attack_factor=ATTACK_FACTOR):
    """Own value (attack) weighted above the opponent's value (defense) at (x, y)."""
    cell = values[y][x]
    attack = cell[side_index(side)]
    defense = cell[side_index(side.opponent)]
    # Truncate toward zero; attack can be negative once windows are closed.
    return int(attack * (16 + attack_factor) / 16) + defense


def find_best_move(board, values, side, rng=None, attack_factor=ATTACK_FACTOR):
    """
    Return the empty cell with the highest score for `side`.
    - Score = score_cell + rng.randint(0, attack_factor).
    - An empty centre starts as the pick with score attack_factor, so a quiet
      board opens in the middle.
    - Cells are scanned column by column; only a strictly higher score
      replaces the current pick.
    Raises NoLegalMove when the board is full.
    """
    if board.is_full():
        raise NoLegalMove("board is full")
    rng = rng or random
    best = None
    best_score = None
    cx, cy = board.center
    if board.is_empty(cx, cy):
        best, best_score = (cx, cy), attack_factor

    size = board.size
    cells = board.cells
    for x in range(size):
        for y in range(size):
            if cells[y][x] is not None:
                continue
            score = score_cell(values, x, y, side, attack_factor) + rng.randint(0, attack_factor)
            if best_score is None or score > best_score:
                best, best_score = (x, y), score

    return best
