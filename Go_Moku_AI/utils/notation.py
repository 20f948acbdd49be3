"""Display coordinates: column letters from the left, row numbers from the bottom."""

import string

COLUMNS = string.ascii_uppercase


def to_notation(cell, size):
    x, y = cell
    if not (0 <= x < size and 0 <= y < size):
        raise ValueError(f"cell {cell} is outside a {size}x{size} board")
    return f"{COLUMNS[x]}{size - y}"


def parse_cell(text, size):
    """Parse `K10` (display notation) or `x y` (0-indexed) into (x, y)."""
    raw = text.strip()
    parts = raw.split()
    if len(parts) == 2:
        try:
            x, y = int(parts[0]), int(parts[1])
        except ValueError as exc:
            raise ValueError("Invalid input format; expected two integers") from exc
    else:
        raw = raw.upper()
        if len(raw) < 2 or raw[0] not in COLUMNS or not raw[1:].isdigit():
            raise ValueError(f"Invalid move {text!r}; expected e.g. K10 or 'x y'")
        x = COLUMNS.index(raw[0])
        y = size - int(raw[1:])
    if not (0 <= x < size and 0 <= y < size):
        raise ValueError(f"{text!r} is off the board")
    return x, y
