"""Move ordering for alpha-beta: MVV-LVA captures, promotions, checks, castling."""

from typing import Dict, Iterable, List, Optional

import chess

from casualmate.config import PIECE_VALUES

CAPTURE_BASE = 10000
QUEEN_PROMOTION_BONUS = 9000
UNDERPROMOTION_BONUS = 4000
CHECK_BONUS = 2000
CASTLING_BONUS = 500


def _value(pt: chess.PieceType, piece_values: Dict[str, int]) -> int:
    return piece_values[chess.piece_name(pt).upper()]


def score_move(board: chess.Board, move: chess.Move,
               piece_values: Optional[Dict[str, int]] = None) -> int:
    """Heuristic priority of `move` in the position before it is played. Higher is searched first."""
    values = piece_values or PIECE_VALUES
    score = 0

    if board.is_capture(move):
        if board.is_en_passant(move):
            victim = chess.PAWN
        else:
            victim = board.piece_type_at(move.to_square)
        attacker = board.piece_type_at(move.from_square)
        # PxQ: 10000 + 9000 - 100, QxP: 10000 + 1000 - 900
        score += CAPTURE_BASE + 10 * _value(victim, values) - _value(attacker, values)

    if move.promotion:
        score += QUEEN_PROMOTION_BONUS if move.promotion == chess.QUEEN else UNDERPROMOTION_BONUS

    if board.gives_check(move):
        score += CHECK_BONUS

    if board.is_castling(move):
        score += CASTLING_BONUS

    return score


def order_moves(board: chess.Board, moves: Iterable[chess.Move],
                piece_values: Optional[Dict[str, int]] = None) -> List[chess.Move]:
    """Best-first copy of `moves`; ties keep generation order."""
    return sorted(moves, key=lambda m: score_move(board, m, piece_values), reverse=True)
