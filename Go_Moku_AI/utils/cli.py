"""CLI options for selecting players, engine tuning, and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Go-Moku (five in a row on a 19x19 board)")
    parser.add_argument("--board-size", type=int, help="Board size (default from settings, 19)")
    parser.add_argument("--attack-factor", type=int, help="Weight of attack over defense, 1 - 16")
    parser.add_argument("--seed", type=int, help="Seed for the move-choice random source")
    parser.add_argument(
        "--mode",
        choices=["ai-vs-ai", "human-vs-ai", "ai-vs-human", "human-vs-human"],
        default=None,
        help="Play mode (who plays Cross/Nought); Cross moves first",
    )
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--verbose", action="store_true", help="Log engine internals at DEBUG level")
    return parser.parse_args(argv)
