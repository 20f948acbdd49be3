"""Append-only record of moves and game notes, for review by the player."""

from dataclasses import dataclass
from enum import Enum

from Go_Moku_AI.utils.notation import to_notation


class Annotation(Enum):
    WON = "won"
    TIED = "tied"
    SWITCHED = "switched sides"


@dataclass(frozen=True)
class MoveLogEntry:
    index: int
    side: object = None
    cell: tuple | None = None
    annotation: Annotation | None = None

    @property
    def is_move(self):
        return self.cell is not None

    def describe(self, size):
        if self.is_move:
            return f"{self.side.label} : {to_notation(self.cell, size)}"
        if self.annotation is Annotation.WON:
            return f"{self.side.label} won!"
        if self.annotation is Annotation.TIED:
            return "Tie game!"
        return "Switched Sides"


class MoveLog:
    def __init__(self):
        self._entries = []

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def __getitem__(self, idx):
        return self._entries[idx]

    def record_move(self, side, cell):
        entry = MoveLogEntry(index=len(self._entries) + 1, side=side, cell=tuple(cell))
        self._entries.append(entry)
        return entry

    def annotate(self, annotation, side=None):
        entry = MoveLogEntry(index=len(self._entries) + 1, side=side, annotation=annotation)
        self._entries.append(entry)
        return entry

    def moves(self):
        return [e for e in self._entries if e.is_move]

    def format_lines(self, size):
        """Listing as shown in the moves review: a count header, then `NNN => text`."""
        lines = [f"Move Count: {len(self._entries)}"]
        for entry in self._entries:
            lines.append(f"{entry.index:03d} => {entry.describe(size)}")
        return lines
