"""Terminal board renderer (letters across, rows numbered from the bottom)."""

from Go_Moku_AI.Board import Side
from Go_Moku_AI.engine.move_engine import GameStatus
from Go_Moku_AI.utils.notation import COLUMNS, to_notation


class TextView:
    STONES = {None: ".", Side.CROSS: "X", Side.NOUGHT: "O"}

    def __init__(self, output_fn=print):
        self.output_fn = output_fn

    def board_lines(self, engine):
        board = engine.board
        size = board.size
        # Winning stones are drawn in lower case.
        winning = set(engine.winning_line or ())
        lines = ["    " + " ".join(COLUMNS[:size])]
        for y in range(size):
            row = []
            for x in range(size):
                mark = self.STONES[board.cells[y][x]]
                row.append(mark.lower() if (x, y) in winning else mark)
            lines.append(f"{size - y:>3} " + " ".join(row))
        return lines

    def status_line(self, engine, current_side, result, last_move=None):
        if result is GameStatus.WON:
            msg = f"{engine.winner.label} wins!"
        elif result is GameStatus.DRAWN:
            msg = "Tie game, no winning moves left."
        else:
            msg = f"{current_side.label} to move"
        if last_move is not None:
            msg = f"Last move {to_notation(last_move, engine.size)}. {msg}"
        return msg

    def render(self, engine, last_move=None, current_side=None, result=None):
        for line in self.board_lines(engine):
            self.output_fn(line)
        self.output_fn(self.status_line(engine, current_side, result, last_move))
