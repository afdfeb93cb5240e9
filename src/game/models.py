"""
Pydantic models for the game layer.

This module contains the configuration and result models used by the
session. The main logic classes (RoundState, GameSession) remain in their
respective files.
"""

from typing import List, Dict, Optional, Literal
from pydantic import BaseModel, Field, ConfigDict

from ..verifiers.models import ValidationError


DictionaryBackend = Literal["wordfreq", "wordlist", "twl", "llm"]


class DictionaryConfig(BaseModel):
    """Configuration for the dictionary used by the realness check."""
    model_config = ConfigDict(extra='allow')

    backend: DictionaryBackend = "wordfreq"
    path: Optional[str] = None  # Required for the wordlist and twl backends
    min_zipf: float = Field(default=2.0, ge=0)  # wordfreq only
    model: Optional[str] = None  # Required for the llm backend
    temperature: float = 0.0
    timeout: Optional[float] = Field(default=10.0, gt=0)
    # Additional kwargs are allowed and passed to LiteLLM

    def without_extras(self) -> "DictionaryConfig":
        """Copy without the LiteLLM pass-through keys, which may hold credentials."""
        return DictionaryConfig(**self.model_dump(include=set(type(self).model_fields)))


class GameConfig(BaseModel):
    """Configuration for a game session."""
    word_list: Optional[str] = None  # None means the bundled start.txt
    default_word: str = Field(default="silkworm", min_length=1)
    language: str = "en"
    min_length: int = Field(default=3, ge=1)
    base_score: int = Field(default=100, ge=0)
    root_word_bonus: int = Field(default=2000, ge=0)
    seed: Optional[int] = None
    dictionary: DictionaryConfig = Field(default_factory=DictionaryConfig)


class SubmissionResult(BaseModel):
    """Result of a single submission."""
    round_number: int
    raw_input: str
    word: str
    accepted: bool
    score_delta: int = 0
    score: int = 0
    found_root_word: bool = False
    error: Optional[ValidationError] = None
    title: Optional[str] = None  # Alert shown to the player, if any
    message: Optional[str] = None


class SessionResult(BaseModel):
    """Transcript of a complete session."""
    config: GameConfig
    rounds_played: int = 0
    root_words: List[str] = Field(default_factory=list)
    final_state: Dict = Field(default_factory=dict)
    history: List[SubmissionResult] = Field(default_factory=list)
    total_accepted: int = 0
    total_rejected: int = 0
    started_at: str = ""
    ended_at: str = ""
    duration_seconds: float = 0.0
