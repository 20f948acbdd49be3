"""Game loop and turn management around a MoveEngine."""

from Go_Moku_AI.Board import Side
from Go_Moku_AI.Player import SWITCH_SIDES
from Go_Moku_AI.engine.errors import IllegalMove
from Go_Moku_AI.utils.notation import to_notation


class Gomokugame:
    def __init__(self, engine, cross_player, nought_player, logger=print, renderer=None, first=Side.CROSS):
        self.engine = engine
        self.players = {Side.CROSS: cross_player, Side.NOUGHT: nought_player}
        self.logger = logger
        self.renderer = renderer
        self.first = first

    def _swap_players(self):
        cross, nought = self.players[Side.NOUGHT], self.players[Side.CROSS]
        cross.side, nought.side = Side.CROSS, Side.NOUGHT
        self.players = {Side.CROSS: cross, Side.NOUGHT: nought}
        self.engine.switch_sides()

    def play(self):
        """Run a single game. Returns the winning Side, or None for a tie."""
        engine = self.engine
        side = self.first
        last_move = None
        while not engine.is_game_over():
            if self.renderer:
                self.renderer(engine, last_move, side, None)

            move = self.players[side].next_move(engine)
            if move == SWITCH_SIDES:
                self.logger(f"Switched sides; computer now plays {side.label}")
                self._swap_players()
                continue

            try:
                result = engine.place_stone(*move, side)
            except IllegalMove as exc:
                self.logger(f"Illegal move by {side.label}: {exc}")
                continue

            last_move = move
            self.logger(f"Move {engine.board.move_count}: {side.label} {to_notation(move, engine.size)}")
            if result.won:
                self.logger(f"Winner: {side.label}")
            elif result.drawn:
                self.logger("Result: Tie game, no winning moves left")
            side = side.opponent

        if self.renderer:
            self.renderer(engine, last_move, side, engine.status)
        return engine.winner
