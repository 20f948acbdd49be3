"""Window weights and the per-cell value grid kept in step with line counts."""

from pathlib import Path
import yaml

from Go_Moku_AI.Board import Side, side_index
from Go_Moku_AI.engine.errors import OutOfRange
from Go_Moku_AI.engine.windows import WIN_LENGTH, all_windows

# Credit for a window holding N stones of one side and none of the other.
# The trailing 0 keeps index 6 addressable without a bounds check.
DEFAULT_WEIGHTS = (0, 0, 4, 20, 100, 500, 0)


def load_weights(path="config/settings.yaml"):
    """Load the weight table from YAML; fallback to defaults when missing."""
    path = Path(path)
    if not path.is_absolute() and not path.exists():
        # Allow running from repo root (e.g., `python -m Go_Moku_AI.main`).
        candidate = Path(__file__).resolve().parents[1] / path
        if candidate.exists():
            path = candidate

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return DEFAULT_WEIGHTS

    weights = data.get("weights")
    if not weights:
        return DEFAULT_WEIGHTS
    return validate_weights(weights)


def validate_weights(weights):
    weights = tuple(int(w) for w in weights)
    if len(weights) != WIN_LENGTH + 2:
        raise ValueError(f"weight table needs {WIN_LENGTH + 2} entries, got {len(weights)}")
    return weights


class ValueGrid:
    """
    values[y][x][side]: summed credit of the windows through (x, y) for `side`,
    updated by apply_delta after each count change. A window closed by the
    opponent takes away W[count + 1], so values can go negative.
    """

    def __init__(self, size, weights=DEFAULT_WEIGHTS):
        self.size = size
        self.weights = validate_weights(weights)
        self.values = [[[0, 0] for _ in range(size)] for _ in range(size)]

    def value_of(self, x, y, side):
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise OutOfRange(x, y, self.size)
        return self.values[y][x][side_index(side)]

    def apply_delta(self, window, side, previous, new, opponent_count):
        """Fold one record_stone result for `window` into the cell values."""
        w = self.weights
        if opponent_count == 0:
            idx = side_index(side)
            delta = w[new] - w[previous]
        elif new == 1:
            # This stone closes the window for the opponent.
            idx = side_index(side.opponent)
            delta = -w[opponent_count + 1]
        else:
            return
        if delta == 0:
            return
        for cx, cy in window.cells():
            self.values[cy][cx][idx] += delta

    def window_credit(self, own_count, opponent_count):
        """Credit one window contributes to a side holding `own_count` stones in it."""
        return self.weights[own_count] if opponent_count == 0 else 0


def full_values(board, weights=DEFAULT_WEIGHTS):
    """
    Recompute every cell value from the board alone (slow; used for checking).
    Matches the incremental grid only while no window holds both sides.
    """
    grid = ValueGrid(board.size, weights)
    for window in all_windows(board.size):
        stones = [board.cells[cy][cx] for cx, cy in window.cells()]
        for side in Side:
            own = stones.count(side)
            credit = grid.window_credit(own, stones.count(side.opponent))
            if not credit:
                continue
            for cx, cy in window.cells():
                grid.values[cy][cx][side.index] += credit
    return grid.values
