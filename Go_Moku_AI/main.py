"""Entry point for Go-Moku games. Load config, wire players, start Gomokugame."""

import random
from pathlib import Path

import yaml

from Go_Moku_AI.Board import Side
from Go_Moku_AI.Gomokugame import Gomokugame
from Go_Moku_AI.Player import ComputerPlayer, HumanPlayer
from Go_Moku_AI.ai import heuristic
from Go_Moku_AI.engine.move_engine import MoveEngine
from Go_Moku_AI.gui.text_view import TextView
from Go_Moku_AI.utils.cli import parse_args
from Go_Moku_AI.utils.logger import enable_debug_logging, log_event
from Go_Moku_AI.utils.notation import COLUMNS


PROJECT_DIR = Path(__file__).resolve().parent


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a package-relative path when invoked from outside `Go_Moku_AI/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        return {}


def build_players(mode, rng):
    """Return (cross, nought) players for a play mode."""
    if mode == "ai-vs-ai":
        return ComputerPlayer(Side.CROSS, rng), ComputerPlayer(Side.NOUGHT, rng)
    if mode == "human-vs-ai":
        return HumanPlayer(Side.CROSS), ComputerPlayer(Side.NOUGHT, rng)
    if mode == "ai-vs-human":
        return ComputerPlayer(Side.CROSS, rng), HumanPlayer(Side.NOUGHT)
    if mode == "human-vs-human":
        return HumanPlayer(Side.CROSS), HumanPlayer(Side.NOUGHT)
    raise ValueError(f"Unsupported mode: {mode}")


def main(argv=None):
    args = parse_args(argv)
    if args.verbose:
        enable_debug_logging()
    settings = load_settings(args.settings)

    board_size = args.board_size or settings.get("board_size", 19)
    attack_factor = args.attack_factor or settings.get("attack_factor", 4)
    seed = args.seed if args.seed is not None else settings.get("seed")
    mode = args.mode or settings.get("mode", "human-vs-ai")
    if board_size > len(COLUMNS):
        raise ValueError(f"board size {board_size} exceeds the {len(COLUMNS)} column letters")

    weights = heuristic.load_weights(resolve_project_path(args.settings))
    rng = random.Random(seed)
    engine = MoveEngine(size=board_size, weights=weights, attack_factor=attack_factor, rng=rng)
    cross, nought = build_players(mode, rng)

    view = TextView()
    game = Gomokugame(engine, cross, nought, logger=log_event, renderer=view.render)
    winner = game.play()

    for line in engine.state.move_log.format_lines(engine.size):
        print(line)
    print(f"{winner.label} wins" if winner else "Tie game")
    return winner


if __name__ == "__main__":
    main()
