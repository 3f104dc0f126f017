"""
Command-line interface for terminal play.
"""

import argparse
import logging

from classic_games.api import play
from classic_games.core.types import GameMode, Player
from classic_games.utils.config import Config, GAMES
from classic_games.utils.factory import create_game_from_config


def _non_negative_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{raw}'") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play 2048 or Tic-Tac-Toe in the terminal"
    )
    parser.add_argument(
        "--game", "-g",
        choices=list(GAMES.keys()),
        default="2048",
        help="Game to play (default: 2048)",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Random seed for tile spawns / first player (default: random)",
    )
    parser.add_argument(
        "--two-player",
        action="store_true",
        help="Tic-Tac-Toe: two humans share the keyboard instead of playing the AI",
    )
    parser.add_argument(
        "--side",
        choices=[p.name for p in Player],
        default="X",
        help="Tic-Tac-Toe: the side the human plays against the AI (default: X)",
    )
    parser.add_argument(
        "--max-history",
        type=_non_negative_int,
        default=None,
        help="2048: number of moves kept for undo (default: unlimited)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every move",
    )
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = Config(
        game_name=args.game,
        seed=args.seed,
        mode=GameMode.HUMAN_VS_HUMAN if args.two_player else GameMode.HUMAN_VS_AI,
        human_player=Player[args.side],
        max_history=args.max_history,
    )

    game = create_game_from_config(config)
    play(game)


if __name__ == "__main__":
    main()
