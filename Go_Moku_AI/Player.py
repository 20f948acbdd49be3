"""Player interface for human or computer controllers."""

from Go_Moku_AI.utils.notation import parse_cell, to_notation

# Returned by next_move when the human hands their side to the computer.
SWITCH_SIDES = "switch"


class Player:
    def __init__(self, side):
        self.side = side

    def next_move(self, engine):
        """Return (x, y) for the next move, or SWITCH_SIDES."""
        raise NotImplementedError


class ComputerPlayer(Player):
    def __init__(self, side, rng=None):
        super().__init__(side)
        self.rng = rng

    def next_move(self, engine):
        return engine.find_best_move(self.side, rng=self.rng)


class HumanPlayer(Player):
    """Text-input player: `K10` or `x y`, plus the hint, moves and switch commands."""

    def __init__(self, side, input_fn=input, output_fn=print):
        super().__init__(side)
        self.input_fn = input_fn
        self.output_fn = output_fn

    def next_move(self, engine):
        size = engine.size
        prompt = f"{self.side.label} to move (e.g. K10, 'hint', 'moves', 'switch'): "
        while True:
            raw = self.input_fn(prompt).strip()
            command = raw.lower()
            if command == "hint":
                hint = engine.find_best_move(self.side)
                self.output_fn(f"Hint: {to_notation(hint, size)}")
                continue
            if command == "moves":
                for line in engine.state.move_log.format_lines(size):
                    self.output_fn(line)
                continue
            if command == "switch":
                return SWITCH_SIDES
            try:
                return parse_cell(raw, size)
            except ValueError as exc:
                self.output_fn(str(exc))
