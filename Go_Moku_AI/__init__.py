"""Go_Moku_AI package exports."""

from .Board import Board, Side
from .Gomokugame import Gomokugame
from .Player import Player, HumanPlayer, ComputerPlayer, SWITCH_SIDES
from .engine.errors import IllegalMove, NoLegalMove, OutOfRange
from .engine.move_engine import GameStatus, MoveEngine, PlacementResult

# Subpackages for the engine, evaluation, terminal view, and helpers
from . import ai, engine, gui, utils

__all__ = [
    "Board",
    "Side",
    "Gomokugame",
    "Player",
    "HumanPlayer",
    "ComputerPlayer",
    "SWITCH_SIDES",
    "IllegalMove",
    "NoLegalMove",
    "OutOfRange",
    "GameStatus",
    "MoveEngine",
    "PlacementResult",
    "ai",
    "engine",
    "gui",
    "utils",
]
