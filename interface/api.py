"""FastAPI REST interface for the opponent."""

import threading

import chess
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from typing import Optional

from casualmate.config import CONFIG, Difficulty
from casualmate.core.board import game_status
from casualmate.core.search import SearchEngine
from casualmate.core.utils import setup_logging
from casualmate.main import Opponent

setup_logging(CONFIG.log_level)

app = FastAPI(title=CONFIG.ui.engine_name, version="1.0.0")

# Shared game.
opponent = Opponent()
_board_lock = threading.Lock()


class FenRequest(BaseModel):
    fen: str


class MoveRequest(BaseModel):
    move: str  # UCI format e.g. "e2e4"


class SearchRequest(BaseModel):
    difficulty: Optional[str] = None
    fen: Optional[str] = None


class ReplyRequest(BaseModel):
    difficulty: Optional[str] = None


class ResetRequest(BaseModel):
    player_color: Optional[str] = None  # "white" or "black"


def _parse_difficulty(value: Optional[str]) -> Difficulty:
    try:
        return Difficulty.parse(value or opponent.difficulty)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


def _parse_color(value: Optional[str]) -> chess.Color:
    name = (value or "white").strip().lower()
    if name not in chess.COLOR_NAMES:
        raise HTTPException(status_code=400, detail=f"Unknown player color: {value}")
    return chess.WHITE if name == "white" else chess.BLACK


def _color_name(color: chess.Color) -> str:
    return chess.COLOR_NAMES[color]


@app.get("/board")
def get_board():
    with _board_lock:
        board = opponent.board.board
        over = opponent.board.is_game_over()
        return {
            "fen": board.fen(),
            "turn": "white" if board.turn == chess.WHITE else "black",
            "legal_moves": [m.uci() for m in board.legal_moves],
            "is_game_over": over,
            "status": game_status(board).value,
            "result": board.result(claim_draw=True) if over else None,
            "history": list(opponent.board.move_history),
            "player_color": _color_name(opponent.player_color),
        }


@app.post("/position")
def set_position(req: FenRequest):
    with _board_lock:
        try:
            opponent.board.set_fen(req.fen)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=f"Invalid FEN: {e}")
        return {"fen": opponent.board.get_fen()}


@app.post("/move")
def make_move(req: MoveRequest):
    with _board_lock:
        try:
            chess.Move.from_uci(req.move)
        except ValueError:
            raise HTTPException(status_code=400, detail=f"Invalid UCI move: {req.move}")
        if opponent.board.is_game_over():
            raise HTTPException(status_code=400, detail="Game is already over")
        if not opponent.is_player_turn():
            raise HTTPException(status_code=400, detail="It's not your turn!")
        if not opponent.make_move(req.move):
            raise HTTPException(status_code=400, detail=f"Illegal move: {req.move}")
        return {"fen": opponent.board.get_fen(), "move": req.move}


@app.post("/search")
def search_move(req: SearchRequest = SearchRequest()):
    difficulty = _parse_difficulty(req.difficulty)
    if req.fen is not None:
        try:
            search_board = chess.Board(req.fen)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=f"Invalid FEN: {e}")
    else:
        with _board_lock:
            search_board = opponent.board.board.copy()

    # own engine per request; the shared one belongs to /reply
    engine = SearchEngine(evaluator=opponent.search.evaluator, rng=opponent.rng)
    best = engine.select_move(search_board, difficulty)
    return {
        "best_move": best.uci() if best else None,
        "san": search_board.san(best) if best else None,
        "difficulty": difficulty.value,
        "fen": search_board.fen(),
    }


@app.post("/reply")
def reply(req: ReplyRequest = ReplyRequest()):
    difficulty = _parse_difficulty(req.difficulty)
    with _board_lock:
        if opponent.board.is_game_over():
            raise HTTPException(status_code=400, detail="Game is already over")
        if not opponent.is_engine_turn():
            raise HTTPException(status_code=400, detail="It's the player's turn")
        opponent.difficulty = difficulty
        move = opponent.play_reply()
        return {"move": move, "fen": opponent.board.get_fen()}


@app.post("/takeback")
def takeback():
    with _board_lock:
        accepted = opponent.request_takeback()
        return {"accepted": accepted, "fen": opponent.board.get_fen()}


@app.post("/reset")
def reset_board(req: ResetRequest = ResetRequest()):
    """New game; when the player takes Black the engine opens."""
    player_color = _parse_color(req.player_color)
    with _board_lock:
        opponent.new_game(player_color)
        move = opponent.play_reply()
        return {
            "fen": opponent.board.get_fen(),
            "player_color": _color_name(player_color),
            "engine_move": move,
        }
