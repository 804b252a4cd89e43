"""Core engine components: board adapter, evaluator, move ordering, and search."""

from .board import ChessBoard, GameStatus
from .evaluator import Evaluator
from .search import SearchEngine, SearchResult
