"""Game layer for word scramble: round state, word source and session."""

from .models import (
    DictionaryBackend,
    DictionaryConfig,
    GameConfig,
    SubmissionResult,
    SessionResult,
)
from .words import load_word_list, WordSourceError, BUNDLED_WORD_LIST
from .round import RoundState, DEFAULT_ROOT_WORD, BASE_SCORE, ROOT_WORD_BONUS
from .session import GameSession, build_dictionary

__all__ = [
    "DictionaryBackend",
    "DictionaryConfig",
    "GameConfig",
    "SubmissionResult",
    "SessionResult",
    "load_word_list",
    "WordSourceError",
    "BUNDLED_WORD_LIST",
    "RoundState",
    "DEFAULT_ROOT_WORD",
    "BASE_SCORE",
    "ROOT_WORD_BONUS",
    "GameSession",
    "build_dictionary",
]
