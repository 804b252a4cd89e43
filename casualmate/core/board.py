"""Board wrapper over python-chess providing move history tracking and game status."""

from enum import Enum
from typing import List, Optional

import chess


class GameStatus(str, Enum):
    ACTIVE = "active"
    CHECKMATE = "checkmate"
    STALEMATE = "stalemate"
    DRAW = "draw"


def is_game_over(board: chess.Board) -> bool:
    """Game over, including draws a player could claim (threefold, fifty moves)."""
    return (
        board.is_game_over()
        or board.is_repetition(3)
        or board.halfmove_clock >= 100
    )


def game_status(board: chess.Board) -> GameStatus:
    if board.is_checkmate():
        return GameStatus.CHECKMATE
    if board.is_stalemate():
        return GameStatus.STALEMATE
    if is_game_over(board):
        return GameStatus.DRAW
    return GameStatus.ACTIVE


class ChessBoard:
    def __init__(self, fen: Optional[str] = None):
        """Initialize from FEN or the standard starting position."""
        self.board = chess.Board(fen) if fen else chess.Board()
        self.move_history: List[str] = []

    def reset(self):
        """Reset to the initial position."""
        self.board.reset()
        self.move_history.clear()

    def set_fen(self, fen: str):
        """Set board state from a FEN string. Raises ValueError on bad FEN."""
        self.board.set_fen(fen)
        self.move_history.clear()

    def get_fen(self) -> str:
        """Return the current FEN."""
        return self.board.fen()

    def make_move(self, move_str: str) -> bool:
        """Push a UCI move (e.g. 'e2e4'). Returns True if legal."""
        try:
            move = chess.Move.from_uci(move_str)
        except ValueError:
            return False
        if move not in self.board.legal_moves:
            return False
        self.board.push(move)
        self.move_history.append(move_str)
        return True

    def undo_move(self) -> bool:
        """Pop the last move. Returns False when there is nothing to undo."""
        if not self.move_history:
            return False
        self.board.pop()
        self.move_history.pop()
        return True

    def get_legal_moves(self) -> List[str]:
        """Return legal moves as UCI strings."""
        return [m.uci() for m in self.board.legal_moves]

    def is_game_over(self) -> bool:
        """Check if the game has ended."""
        return is_game_over(self.board)

    def status(self) -> GameStatus:
        return game_status(self.board)
