import argparse
import random
import sys

import chess

from casualmate.config import CONFIG, Difficulty
from casualmate.core.search import SearchEngine
from casualmate.core.utils import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="casualmate", description="Pick a move for a position.")
    parser.add_argument("--fen", default=chess.STARTING_FEN, help="position to move from")
    parser.add_argument("--difficulty", default=CONFIG.search.default_difficulty.value,
                        help="easy, medium or hard")
    parser.add_argument("--seed", type=int, default=None, help="seed for the easy tier")
    parser.add_argument("--log-level", default=CONFIG.log_level)
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        difficulty = Difficulty.parse(args.difficulty)
    except ValueError as e:
        parser.error(str(e))

    try:
        board = chess.Board(args.fen)
    except ValueError as e:
        print(f"Invalid FEN: {e}", file=sys.stderr)
        return 2

    engine = SearchEngine(rng=random.Random(args.seed))
    move = engine.select_move(board, difficulty)
    if move is None:
        print("(none)")
    else:
        print(f"{move.uci()} {board.san(move)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
