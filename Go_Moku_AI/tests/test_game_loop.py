"""Tests for Gomokugame turn handling, side switching and end-of-game state."""

import random

from Go_Moku_AI.Board import Side
from Go_Moku_AI.Gomokugame import Gomokugame
from Go_Moku_AI.Player import SWITCH_SIDES, ComputerPlayer, Player
from Go_Moku_AI.engine.move_engine import GameStatus, MoveEngine
from Go_Moku_AI.engine.move_log import Annotation
from Go_Moku_AI.gui.text_view import TextView


class SeqPlayer(Player):
    """Deterministic player that plays a fixed move sequence."""

    def __init__(self, side, moves):
        super().__init__(side)
        self._moves = list(moves)
        self._idx = 0

    def next_move(self, engine):
        if self._idx >= len(self._moves):
            raise ValueError("No more scripted moves")
        mv = self._moves[self._idx]
        self._idx += 1
        return mv


def test_final_render_reports_winner():
    cross = SeqPlayer(Side.CROSS, [(0, 0), (1, 0), (2, 0), (3, 0), (4, 0)])
    nought = SeqPlayer(Side.NOUGHT, [(0, 1), (1, 1), (2, 1), (3, 1)])

    final = []

    def renderer(engine, last_move, side, result):
        if result is not None:
            final.append((last_move, result))

    messages = []
    game = Gomokugame(MoveEngine(), cross, nought, logger=messages.append, renderer=renderer)
    winner = game.play()

    assert winner is Side.CROSS
    assert final == [((4, 0), GameStatus.WON)]
    assert messages[-1] == "Winner: Cross"
    assert messages[0] == "Move 1: Cross A19"


def test_illegal_move_is_reported_and_retried():
    cross = SeqPlayer(Side.CROSS, [(0, 0), (1, 0), (2, 0), (3, 0), (4, 0)])
    # Second nought move repeats an occupied cell before a legal one.
    nought = SeqPlayer(Side.NOUGHT, [(0, 1), (0, 0), (1, 1), (2, 1), (3, 1)])
    messages = []
    game = Gomokugame(MoveEngine(), cross, nought, logger=messages.append)
    assert game.play() is Side.CROSS
    assert any(m.startswith("Illegal move by Nought") for m in messages)


def test_switch_hands_the_side_to_the_other_player():
    engine = MoveEngine(rng=random.Random(0))

    class SwitchOnce(Player):
        def __init__(self, side):
            super().__init__(side)
            self.calls = 0

        def next_move(self, engine):
            self.calls += 1
            if self.calls == 1:
                return SWITCH_SIDES
            return engine.find_best_move(self.side)

    human = SwitchOnce(Side.CROSS)
    computer = ComputerPlayer(Side.NOUGHT)
    game = Gomokugame(engine, human, computer, logger=lambda msg: None)
    game.play()

    log = engine.move_log()
    assert log[0].annotation is Annotation.SWITCHED
    # The computer took over Cross and made the first move.
    assert log[1].side is Side.CROSS and log[1].cell == (9, 9)
    assert computer.side is Side.CROSS
    assert human.side is Side.NOUGHT


def test_computer_self_play_terminates():
    engine = MoveEngine(size=9, rng=random.Random(1))
    rng = random.Random(2)
    game = Gomokugame(
        engine,
        ComputerPlayer(Side.CROSS, rng),
        ComputerPlayer(Side.NOUGHT, rng),
        logger=lambda msg: None,
    )
    winner = game.play()
    assert engine.is_game_over()
    assert winner is engine.winner
    if winner is None:
        assert engine.status is GameStatus.DRAWN


def test_text_view_marks_winning_line():
    engine = MoveEngine(size=7)
    for y in range(5):
        engine.place_stone(2, y, Side.NOUGHT)
    out = []
    TextView(output_fn=out.append).render(engine, (2, 4), Side.CROSS, engine.status)
    assert out[0] == "    A B C D E F G"
    assert out[1] == "  7 . . o . . . ."
    assert out[-1] == "Last move C3. Nought wins!"
