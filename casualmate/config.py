# casualmate/config.py
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional
import logging
import os
import tomllib  # python >=3.11

log = logging.getLogger(__name__)

# Defaults (centipawns)
PIECE_VALUES = {
    "PAWN": 100,
    "KNIGHT": 320,
    "BISHOP": 330,
    "ROOK": 500,
    "QUEEN": 900,
    "KING": 20000,
}


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value) -> "Difficulty":
        """Accept a Difficulty or its name in any case ("Hard", "hard", "HARD")."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            names = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown difficulty {value!r} (expected one of: {names})") from None


@dataclass
class SearchConfig:
    medium_depth: int = 2
    hard_depth: int = 3
    default_difficulty: Difficulty = Difficulty.MEDIUM

    def depth_for(self, difficulty: Difficulty) -> Optional[int]:
        """Search depth for a tier; None means random selection."""
        return {
            Difficulty.EASY: None,
            Difficulty.MEDIUM: self.medium_depth,
            Difficulty.HARD: self.hard_depth,
        }[Difficulty.parse(difficulty)]


@dataclass
class EvalConfig:
    piece_values: Dict[str, int] = field(default_factory=lambda: PIECE_VALUES.copy())
    mobility_weight: int = 5
    bishop_pair_bonus: int = 50
    rook_open_file_bonus: int = 25
    rook_semi_open_file_bonus: int = 10
    king_shield_bonus: int = 20
    king_open_file_penalty: int = 25


@dataclass
class OpponentConfig:
    think_delay_ms: int = 300  # lets a UI show "thinking" before the blocking search
    takeback_decline_chance: float = 0.3  # Hard only


@dataclass
class UIConfig:
    engine_name: str = "CasualMate"


@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    eval: EvalConfig = field(default_factory=EvalConfig)
    opponent: OpponentConfig = field(default_factory=OpponentConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        # naive merge: only known attributes are taken over
        for section in ("search", "eval", "opponent", "ui"):
            if section in raw:
                target = getattr(cfg, section)
                for k, v in raw[section].items():
                    if hasattr(target, k):
                        setattr(target, k, v)
        if "log_level" in raw:
            cfg.log_level = raw["log_level"]
        cfg.search.default_difficulty = Difficulty.parse(cfg.search.default_difficulty)
        return cfg


# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("CASUALMATE_CONFIG_TOML", "config.toml"))
# allow env override of the default tier for quick debugging
override_difficulty = os.environ.get("CASUALMATE_DIFFICULTY")
if override_difficulty:
    try:
        CONFIG.search.default_difficulty = Difficulty.parse(override_difficulty)
    except ValueError as e:
        log.warning("Ignoring CASUALMATE_DIFFICULTY: %s", e)
