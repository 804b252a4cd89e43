import logging
import random
import time
from typing import NamedTuple, Optional

import chess

from casualmate.config import CONFIG, Difficulty, SearchConfig
from casualmate.core.board import is_game_over
from casualmate.core.evaluator import Evaluator
from casualmate.core.ordering import order_moves
from casualmate.core.utils import format_search_info

log = logging.getLogger(__name__)

INF = 1000000


class SearchResult(NamedTuple):
    move: Optional[chess.Move]
    score: int


class SearchEngine:
    """Fixed-depth minimax with alpha-beta pruning, scores from White's point of view."""

    def __init__(self, evaluator: Optional[Evaluator] = None,
                 config: Optional[SearchConfig] = None,
                 rng: Optional[random.Random] = None):
        self.evaluator = evaluator or Evaluator()
        self.cfg = config or CONFIG.search
        self.rng = rng or random.Random()
        self.nodes = 0

    def select_move(self, board: chess.Board, difficulty=None) -> Optional[chess.Move]:
        """Pick a move for the side to move, or None when there is no legal move.

        The caller's board is never modified: the search works on a copy.
        """
        difficulty = Difficulty.parse(difficulty or self.cfg.default_difficulty)
        moves = list(board.legal_moves)
        if not moves:
            return None

        depth = self.cfg.depth_for(difficulty)
        if depth is None:
            return self.rng.choice(moves)

        result = self.search(board, depth)
        # Only reachable if cut-offs degenerate at the root.
        return result.move or moves[0]

    def search(self, board: chess.Board, depth: int) -> SearchResult:
        """Run alpha-beta to `depth` plies on a copy of `board`."""
        search_board = board.copy()
        self.nodes = 0
        start_time = time.time()

        result = self._minimax(search_board, depth, -INF, INF,
                               search_board.turn == chess.WHITE)

        elapsed = time.time() - start_time
        log.debug(format_search_info(depth, result.score, self.nodes, elapsed, result.move))
        return result

    def _leaf_score(self, board: chess.Board) -> int:
        score = self.evaluator.evaluate(board)
        if board.is_checkmate():
            # the mated side loses its king
            king = self.evaluator.cfg.piece_values["KING"]
            score += -king if board.turn == chess.WHITE else king
        return score

    def _minimax(self, board: chess.Board, depth: int, alpha: int, beta: int,
                 maximizing: bool) -> SearchResult:
        self.nodes += 1
        if depth == 0 or is_game_over(board):
            return SearchResult(None, self._leaf_score(board))

        moves = order_moves(board, board.legal_moves, self.evaluator.cfg.piece_values)
        best_move = None

        if maximizing:
            best_score = -INF
            for move in moves:
                board.push(move)
                try:
                    score = self._minimax(board, depth - 1, alpha, beta, False).score
                finally:
                    board.pop()

                if score > best_score:
                    best_score = score
                    best_move = move
                alpha = max(alpha, score)
                if beta <= alpha:
                    break  # beta cut-off
        else:
            best_score = INF
            for move in moves:
                board.push(move)
                try:
                    score = self._minimax(board, depth - 1, alpha, beta, True).score
                finally:
                    board.pop()

                if score < best_score:
                    best_score = score
                    best_move = move
                beta = min(beta, score)
                if beta <= alpha:
                    break  # alpha cut-off

        return SearchResult(best_move, best_score)
