import logging
from typing import Optional

import chess


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )


def format_search_info(depth: int, score: int, nodes: int, elapsed: float,
                       move: Optional[chess.Move]) -> str:
    nps = int(nodes / elapsed) if elapsed > 0 else 0
    move_str = move.uci() if move else "-"
    return (f"depth {depth} score cp {score} nodes {nodes} nps {nps} "
            f"time {int(elapsed * 1000)} move {move_str}")
