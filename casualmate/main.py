import logging
import random
import time
from typing import Optional

import chess

from casualmate.config import CONFIG, Difficulty, OpponentConfig
from casualmate.core.board import ChessBoard
from casualmate.core.search import SearchEngine

log = logging.getLogger(__name__)


class Opponent:
    """A game against the engine: holds the board, replies to moves, answers takeback requests.

    The human plays `player_color`; the engine plays the other side and only
    moves when it is its turn.
    """

    def __init__(self, difficulty=None, fen: Optional[str] = None,
                 search: Optional[SearchEngine] = None,
                 rng: Optional[random.Random] = None,
                 config: Optional[OpponentConfig] = None,
                 player_color: chess.Color = chess.WHITE):
        self.rng = rng or random.Random()
        self.cfg = config or CONFIG.opponent
        self.board = ChessBoard(fen)
        self.search = search or SearchEngine(rng=self.rng)
        self.difficulty = Difficulty.parse(difficulty or CONFIG.search.default_difficulty)
        self.player_color = player_color
        self.think_delay_ms = self.cfg.think_delay_ms

    def new_game(self, player_color: chess.Color = chess.WHITE, fen: Optional[str] = None):
        """Start over from `fen` (or the initial position) with the player on `player_color`."""
        if fen:
            self.board.set_fen(fen)
        else:
            self.board.reset()
        self.player_color = player_color

    def is_player_turn(self) -> bool:
        return not self.board.is_game_over() and self.board.board.turn == self.player_color

    def is_engine_turn(self) -> bool:
        return not self.board.is_game_over() and self.board.board.turn != self.player_color

    def get_best_move(self) -> Optional[str]:
        """Engine choice for the current position as UCI, without playing it."""
        move = self.search.select_move(self.board.board, self.difficulty)
        return move.uci() if move else None

    def make_move(self, move_uci: str) -> bool:
        """Play the player's move. False when illegal, not the player's turn, or the game is over."""
        if not self.is_player_turn():
            return False
        return self.board.make_move(move_uci)

    def play_reply(self) -> Optional[str]:
        """Think, then play the engine's move. Returns None unless it is the engine's turn."""
        if not self.is_engine_turn():
            return None
        if self.think_delay_ms > 0:
            time.sleep(self.think_delay_ms / 1000)

        move = self.get_best_move()
        if move is None:
            return None
        self.board.make_move(move)
        log.info("Opponent (%s) plays %s", self.difficulty.value, move)
        return move

    def request_takeback(self) -> bool:
        """Undo the player's last move, and the engine's reply to it, if the opponent agrees."""
        # engine already replied: undo its move and the player's
        plies = 2 if self.board.board.turn == self.player_color else 1
        if len(self.board.move_history) < plies:
            return False
        if (self.difficulty == Difficulty.HARD
                and self.rng.random() < self.cfg.takeback_decline_chance):
            log.info("Takeback declined")
            return False

        for _ in range(plies):
            self.board.undo_move()
        log.info("Takeback accepted")
        return True
