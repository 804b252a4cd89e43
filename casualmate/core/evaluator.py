"""Loop-based static evaluator: material, PST, mobility, rook files, bishop pair, king shield."""

from typing import Dict, List, Optional, Tuple

import chess

from casualmate.config import CONFIG, EvalConfig
from casualmate.core.pst import PST, table_index

# (file delta, rank delta)
KNIGHT_DIRS: List[Tuple[int, int]] = [
    (1, 2), (-1, 2), (1, -2), (-1, -2), (2, 1), (2, -1), (-2, 1), (-2, -1)
]
ROOK_DIRS: List[Tuple[int, int]] = [(1, 0), (-1, 0), (0, 1), (0, -1)]
BISHOP_DIRS: List[Tuple[int, int]] = [(1, 1), (1, -1), (-1, 1), (-1, -1)]

MOBILITY_DIRS: Dict[chess.PieceType, List[Tuple[int, int]]] = {
    chess.KNIGHT: KNIGHT_DIRS,
    chess.BISHOP: BISHOP_DIRS,
    chess.ROOK: ROOK_DIRS,
    chess.QUEEN: ROOK_DIRS + BISHOP_DIRS,
}


def _on_board(file: int, rank: int) -> bool:
    return 0 <= file < 8 and 0 <= rank < 8


class Evaluator:
    def __init__(self, cfg: Optional[EvalConfig] = None):
        self.cfg = cfg or CONFIG.eval

    def evaluate(self, board: chess.Board) -> int:
        """Return static eval in centipawns, positive favors White."""
        cfg = self.cfg
        piece_map = board.piece_map()
        score = 0

        kings: Dict[chess.Color, chess.Square] = {}
        bishop_count = {chess.WHITE: 0, chess.BLACK: 0}
        pawns_per_file = {chess.WHITE: [0] * 8, chess.BLACK: [0] * 8}

        for sq, piece in piece_map.items():
            pt = piece.piece_type
            color = piece.color
            sign = 1 if color == chess.WHITE else -1

            # Material.
            score += sign * cfg.piece_values[chess.piece_name(pt).upper()]

            # PST lookup.
            score += sign * PST[pt][table_index(sq, color)]

            # Mobility (pawns and kings excluded).
            if pt in MOBILITY_DIRS:
                score += sign * self._mobility(piece_map, sq, pt, color) * cfg.mobility_weight

            if pt == chess.KING:
                kings[color] = sq
            elif pt == chess.BISHOP:
                bishop_count[color] += 1
            elif pt == chess.PAWN:
                pawns_per_file[color][chess.square_file(sq)] += 1

        # Rooks on open and semi-open files, once pawn counts are known.
        for sq, piece in piece_map.items():
            if piece.piece_type != chess.ROOK:
                continue
            file = chess.square_file(sq)
            if pawns_per_file[piece.color][file] == 0:
                if pawns_per_file[not piece.color][file] == 0:
                    bonus = cfg.rook_open_file_bonus
                else:
                    bonus = cfg.rook_semi_open_file_bonus
                score += bonus if piece.color == chess.WHITE else -bonus

        # Bishop pair.
        if bishop_count[chess.WHITE] >= 2:
            score += cfg.bishop_pair_bonus
        if bishop_count[chess.BLACK] >= 2:
            score -= cfg.bishop_pair_bonus

        # King safety.
        if chess.WHITE in kings:
            score += self._king_safety(piece_map, kings[chess.WHITE], chess.WHITE)
        if chess.BLACK in kings:
            score -= self._king_safety(piece_map, kings[chess.BLACK], chess.BLACK)

        return score

    def _mobility(self, piece_map, sq, pt, color) -> int:
        """Count pseudo-legal destinations: empty squares plus enemy-occupied blockers."""
        f0, r0 = chess.square_file(sq), chess.square_rank(sq)
        sliding = pt != chess.KNIGHT
        count = 0

        for df, dr in MOBILITY_DIRS[pt]:
            f, r = f0 + df, r0 + dr
            if not sliding:
                if _on_board(f, r):
                    target = piece_map.get(chess.square(f, r))
                    if target is None or target.color != color:
                        count += 1
                continue

            while _on_board(f, r):
                target = piece_map.get(chess.square(f, r))
                if target is None:
                    count += 1
                else:
                    if target.color != color:
                        count += 1  # capture
                    break
                f += df
                r += dr

        return count

    def _king_safety(self, piece_map, king_sq, color) -> int:
        """Pawn shield on the rank in front of a king that is still on its home rank."""
        home_rank = 0 if color == chess.WHITE else 7
        if chess.square_rank(king_sq) != home_rank:
            return 0

        shield_rank = 1 if color == chess.WHITE else 6
        king_file = chess.square_file(king_sq)
        score = 0
        for f in range(king_file - 1, king_file + 2):
            if not _on_board(f, shield_rank):
                continue
            piece = piece_map.get(chess.square(f, shield_rank))
            if piece is None:
                score -= self.cfg.king_open_file_penalty
            elif piece.piece_type == chess.PAWN and piece.color == color:
                score += self.cfg.king_shield_bonus
        return score
