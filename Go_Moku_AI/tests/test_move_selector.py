"""Tests for move choice: legality, determinism and attack/defense weighting."""

import random

import pytest

from Go_Moku_AI.Board import Side
from Go_Moku_AI.ai import move_selector
from Go_Moku_AI.engine.errors import NoLegalMove
from Go_Moku_AI.engine.move_engine import MoveEngine

A = Side.CROSS
B = Side.NOUGHT


class ZeroRandom:
    """Random source that never perturbs scores."""

    def randint(self, a, b):
        return a


def _true_best(engine, side):
    board = engine.board
    values = engine.state.values.values
    scores = {
        (x, y): move_selector.score_cell(values, x, y, side, engine.attack_factor)
        for y in range(board.size)
        for x in range(board.size)
        if board.is_empty(x, y)
    }
    top = max(scores.values())
    return {cell for cell, score in scores.items() if score == top}


def test_empty_board_opens_in_the_centre():
    engine = MoveEngine(rng=ZeroRandom())
    assert engine.find_best_move(A) == (9, 9)
    # Jitter never beats the centre's seeded score on an empty board.
    engine = MoveEngine(rng=random.Random(0))
    assert engine.find_best_move(A) == (9, 9)


def test_returns_empty_cell_while_any_remains():
    engine = MoveEngine(size=5, rng=random.Random(3))
    side = A
    while not engine.board.is_full() and engine.winner is None:
        x, y = engine.find_best_move(side)
        assert engine.board.is_empty(x, y)
        engine.place_stone(x, y, side)
        side = side.opponent


def test_raises_on_full_board():
    engine = MoveEngine(size=5)
    for y in range(5):
        for x in range(5):
            side = A if (x // 2 + y) % 2 == 0 else B
            engine.place_stone(x, y, side)
    with pytest.raises(NoLegalMove):
        engine.find_best_move(A)


def test_seeded_choice_is_deterministic():
    picks = []
    for _ in range(2):
        engine = MoveEngine(rng=random.Random(42))
        side = A
        moves = []
        for _ in range(20):
            mv = engine.find_best_move(side)
            moves.append(mv)
            if engine.place_stone(*mv, side).won:
                break
            side = side.opponent
        picks.append(moves)
    assert picks[0] == picks[1]


def test_without_jitter_choice_attains_true_maximum():
    rng = random.Random(5)
    engine = MoveEngine(rng=ZeroRandom())
    # Occupy the centre so its seeded score plays no part.
    engine.place_stone(9, 9, A)
    side = B
    for _ in range(30):
        x, y = rng.randrange(19), rng.randrange(19)
        if engine.board.is_empty(x, y):
            engine.place_stone(x, y, side)
            if engine.winner is not None:
                break
            side = side.opponent
    if engine.winner is None:
        assert engine.find_best_move(side) in _true_best(engine, side)


def test_takes_win_over_block():
    engine = MoveEngine(rng=ZeroRandom())
    for x in range(4):
        engine.place_stone(x + 5, 3, A)
        engine.place_stone(x + 5, 12, B)
    # Both sides have an open four; the side to move completes its own.
    assert engine.find_best_move(A) in {(4, 3), (9, 3)}
    assert engine.find_best_move(B) in {(4, 12), (9, 12)}


def test_blocks_opponent_four():
    engine = MoveEngine(rng=ZeroRandom())
    for x in range(4):
        engine.place_stone(x + 5, 3, B)
    engine.place_stone(4, 3, A)
    assert engine.find_best_move(A) == (9, 3)


def test_rng_argument_overrides_engine_source():
    engine = MoveEngine(rng=random.Random(1))
    engine.place_stone(9, 9, A)
    engine.place_stone(10, 9, A)
    assert engine.find_best_move(B, rng=ZeroRandom()) in _true_best(engine, B)


def test_score_cell_weights_attack_above_defense():
    values = [[[16, 0], [0, 16]]]
    assert move_selector.score_cell(values, 0, 0, A) == 20
    assert move_selector.score_cell(values, 1, 0, A) == 16


def test_score_cell_truncates_negative_attack_toward_zero():
    values = [[[-3, 0], [-16, 2]]]
    # -3 * 20 / 16 is -3.75: truncated to -3, not floored to -4.
    assert move_selector.score_cell(values, 0, 0, A) == -3
    assert move_selector.score_cell(values, 1, 0, A) == -20 + 2
    assert move_selector.score_cell(values, 0, 0, B) == -3
