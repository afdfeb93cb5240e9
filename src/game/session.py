import json
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Dict, Optional, Any
from pydantic import BaseModel, Field, ConfigDict

from .round import RoundState
from .words import load_word_list
from .models import GameConfig, DictionaryConfig, SubmissionResult, SessionResult
from ..verifiers.verify import validate_submission
from ..verifiers.dictionary import (
    Dictionary,
    DictionaryError,
    WordListDictionary,
    TWLDictionary,
    WordfreqDictionary,
    LLMDictionary,
)

logger = logging.getLogger(__name__)

FOUND_ROOT_TITLE = "CONGRATULATION!"
FOUND_ROOT_MESSAGE = "You found the key word!"


def build_dictionary(config: DictionaryConfig, language: str = "en") -> Dictionary:
    """
    Create the dictionary backend named in the configuration.

    Raises:
        DictionaryError: If the backend cannot be created
    """
    if config.backend == "wordfreq":
        return WordfreqDictionary(min_zipf=config.min_zipf)

    if config.backend == "wordlist":
        if not config.path:
            raise DictionaryError("The wordlist dictionary needs a path")
        return WordListDictionary.from_file(config.path, language=language)

    if config.backend == "twl":
        if not config.path:
            raise DictionaryError("The twl dictionary needs a path")
        return TWLDictionary.from_file(config.path)

    if not config.model:
        raise DictionaryError("The llm dictionary needs a model")

    llm_kwargs = {}
    # Extra config keys (api_base, api_key, ...) go straight to LiteLLM
    if hasattr(config, '__pydantic_extra__') and config.__pydantic_extra__:
        llm_kwargs.update(config.__pydantic_extra__)

    return LLMDictionary.create(
        model=config.model,
        temperature=config.temperature,
        timeout=config.timeout,
        **llm_kwargs
    )


class GameSession(BaseModel):
    """
    Top-level orchestrator for a word scramble session.

    Owns the round state and the dictionary, runs each submission through
    the validator, and records every attempt.

    Attributes:
        config: Session configuration
        word_list: Candidate root words
        dictionary: Dictionary used by the realness check
        current_round: State of the current round
        history: Every submission made this session
        rounds_played: Number of rounds started
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: GameConfig = Field(default_factory=GameConfig)
    word_list: List[str] = Field(default_factory=list)
    dictionary: Any = None
    current_round: Optional[RoundState] = None
    history: List[SubmissionResult] = Field(default_factory=list)
    rounds_played: int = 0
    root_words: List[str] = Field(default_factory=list)
    started_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        config: Optional[GameConfig] = None,
        dictionary: Optional[Dictionary] = None,
        **config_kwargs: Any
    ) -> "GameSession":
        """
        Factory method to create a session with its first round started.

        Args:
            config: Optional GameConfig instance
            dictionary: Dictionary to use instead of the configured backend
            **config_kwargs: Config parameters if config not provided

        Returns:
            Configured GameSession instance

        Raises:
            WordSourceError: If the word list cannot be loaded
            DictionaryError: If the dictionary backend cannot be created
        """
        if config is None:
            config = GameConfig(**config_kwargs)

        word_list = load_word_list(config.word_list)

        if dictionary is None:
            dictionary = build_dictionary(config.dictionary, language=config.language)

        session = cls(
            config=config,
            word_list=word_list,
            dictionary=dictionary,
            current_round=RoundState(
                seed=config.seed,
                default_word=config.default_word,
                base_score=config.base_score,
                root_word_bonus=config.root_word_bonus,
            ),
            started_at=datetime.now(),
        )
        session.new_game()
        return session

    def new_game(self) -> str:
        """
        Start a new round.

        Returns:
            The new root word
        """
        root_word = self.current_round.start_new_round(self.word_list)
        self.rounds_played += 1
        self.root_words.append(root_word)
        return root_word

    def submit(self, text: str) -> SubmissionResult:
        """
        Validate a raw submission and record it if accepted.

        Args:
            text: The text exactly as the player typed it

        Returns:
            SubmissionResult describing the outcome

        Raises:
            DictionaryError: If the dictionary lookup fails; the round is unchanged
        """
        validation = validate_submission(
            text,
            root_letters=self.current_round.root_letters,
            display_letters=self.current_round.shuffled_letters,
            used_words=self.current_round.used_words,
            dictionary=self.dictionary,
            language=self.config.language,
            min_length=self.config.min_length,
        )

        result = SubmissionResult(
            round_number=self.rounds_played,
            raw_input=text,
            word=validation.word,
            accepted=validation.valid,
            score=self.current_round.score,
        )

        if validation.valid:
            result.score_delta = self.current_round.record_accepted_word(validation.word)
            result.score = self.current_round.score
            if validation.word == self.current_round.root_word:
                result.found_root_word = True
                result.title = FOUND_ROOT_TITLE
                result.message = FOUND_ROOT_MESSAGE
        else:
            result.error = validation.error
            result.title = validation.error.title
            result.message = validation.error.message
            logger.debug("Rejected %r: %s", validation.word, validation.error.code)

        self.history.append(result)
        return result

    def get_state(self) -> Dict:
        """Get the current session state as a dictionary."""
        return {
            "round_number": self.rounds_played,
            **self.current_round.get_state(),
        }

    def get_result(self) -> SessionResult:
        """Build a transcript of the session so far."""
        ended_at = datetime.now()
        started_at = self.started_at or ended_at
        accepted = sum(1 for r in self.history if r.accepted)

        return SessionResult(
            # Pass-through LiteLLM keys can hold credentials
            config=self.config.model_copy(
                update={"dictionary": self.config.dictionary.without_extras()}
            ),
            rounds_played=self.rounds_played,
            root_words=self.root_words.copy(),
            final_state=self.get_state(),
            history=self.history.copy(),
            total_accepted=accepted,
            total_rejected=len(self.history) - accepted,
            started_at=started_at.isoformat(),
            ended_at=ended_at.isoformat(),
            duration_seconds=(ended_at - started_at).total_seconds(),
        )

    def save_result(self, output_path: str | Path) -> Path:
        """
        Save the session transcript to a JSON file.

        Args:
            output_path: Where to write the JSON

        Returns:
            The path written
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w") as f:
            json.dump(self.get_result().model_dump(), f, indent=2)

        return output_path
