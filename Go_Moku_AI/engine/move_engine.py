"""Game state ownership, stone placement, win/draw detection and move choice."""

import logging
import random
from dataclasses import dataclass, field
from enum import Enum

from Go_Moku_AI.Board import BOARD_SIZE, Board, Side
from Go_Moku_AI.ai import heuristic, move_selector
from Go_Moku_AI.ai.line_counts import LineCountTracker
from . import referee
from .move_log import Annotation, MoveLog
from .windows import WIN_LENGTH, Direction, Window, window_count, windows_through, winning_line


LOGGER = logging.getLogger(__name__)


class GameStatus(Enum):
    IN_PROGRESS = "in progress"
    WON = "won"
    DRAWN = "drawn"


@dataclass(frozen=True)
class WindowUpdate:
    window: Window
    previous: int
    new: int


@dataclass(frozen=True)
class PlacementResult:
    won: bool
    direction: Direction | None = None
    winning_line: tuple | None = None
    drawn: bool = False


@dataclass
class GameState:
    """Everything one game mutates; created and discarded together."""

    board: Board
    line_counts: LineCountTracker
    values: heuristic.ValueGrid
    open_lines: int
    move_log: MoveLog = field(default_factory=MoveLog)
    winner: Side | None = None
    winning_direction: Direction | None = None
    winning_line: tuple | None = None
    tie_logged: bool = False

    @classmethod
    def fresh(cls, size, weights):
        return cls(
            board=Board(size),
            line_counts=LineCountTracker(size),
            values=heuristic.ValueGrid(size, weights),
            open_lines=window_count(size),
        )


class MoveEngine:
    def __init__(self, size=BOARD_SIZE, weights=None, attack_factor=move_selector.ATTACK_FACTOR, rng=None):
        self.size = size
        self.weights = heuristic.validate_weights(weights or heuristic.DEFAULT_WEIGHTS)
        self.attack_factor = move_selector.validate_attack_factor(attack_factor)
        self.rng = rng if rng is not None else random.Random()
        self.state = GameState.fresh(size, self.weights)

    def reset(self):
        self.state = GameState.fresh(self.size, self.weights)
        LOGGER.debug("engine reset (%dx%d)", self.size, self.size)

    # --- read-only views -------------------------------------------------

    @property
    def board(self):
        return self.state.board

    @property
    def open_lines(self):
        return self.state.open_lines

    @property
    def winner(self):
        return self.state.winner

    @property
    def winning_line(self):
        return self.state.winning_line

    @property
    def winning_direction(self):
        return self.state.winning_direction

    @property
    def status(self):
        if self.state.winner is not None:
            return GameStatus.WON
        if self.state.open_lines <= 0:
            return GameStatus.DRAWN
        return GameStatus.IN_PROGRESS

    def is_game_over(self):
        return self.status is not GameStatus.IN_PROGRESS

    def cell_at(self, x, y):
        return self.state.board.cell_at(x, y)

    def value_of(self, x, y, side):
        return self.state.values.value_of(x, y, side)

    def move_log(self):
        return list(self.state.move_log)

    # --- mutation --------------------------------------------------------

    def place_stone(self, x, y, side):
        """
        Place `side` at (x, y) and fold it into counts and values.
        Raises IllegalMove/OutOfRange with state untouched.
        """
        state = self.state
        if not isinstance(side, Side):
            raise ValueError(f"expected a Side, got {side!r}")
        referee.check_move((x, y), state.board, game_won=state.winner is not None)

        updates = self._record_windows(x, y, side)
        state.board.place(x, y, side)
        state.move_log.record_move(side, (x, y))
        LOGGER.debug("%s at (%d, %d); open lines %d", side.label, x, y, state.open_lines)

        direction = next((u.window.direction for u in updates if u.new == WIN_LENGTH), None)
        if direction is not None:
            line = winning_line(state.board, x, y, direction, side)
            state.winner = side
            state.winning_direction = direction
            state.winning_line = line
            state.move_log.annotate(Annotation.WON, side)
            LOGGER.debug("%s wins along %s: %s", side.label, direction.name, line)
            return PlacementResult(won=True, direction=direction, winning_line=line)

        drawn = state.open_lines <= 0
        if drawn and not state.tie_logged:
            state.tie_logged = True
            state.move_log.annotate(Annotation.TIED)
            LOGGER.debug("no fresh lines left; game tied")
        return PlacementResult(won=False, drawn=drawn)

    def _record_windows(self, x, y, side):
        state = self.state
        opponent = side.opponent
        updates = []
        for window, _offset in windows_through(x, y, self.size):
            previous, new = state.line_counts.record_stone(window, side)
            opponent_count = state.line_counts.count(window, opponent)
            state.values.apply_delta(window, side, previous, new, opponent_count)
            if previous == 0 and opponent_count == 0:
                state.open_lines -= 1
            updates.append(WindowUpdate(window, previous, new))
        return updates

    def switch_sides(self):
        """Note in the log that the players exchanged sides."""
        self.state.move_log.annotate(Annotation.SWITCHED)

    # --- move choice -----------------------------------------------------

    def find_best_move(self, side, rng=None):
        state = self.state
        return move_selector.find_best_move(
            state.board,
            state.values.values,
            side,
            rng=rng if rng is not None else self.rng,
            attack_factor=self.attack_factor,
        )
