import logging
import random
from typing import List, Dict, Optional
from pydantic import BaseModel, Field, ConfigDict

logger = logging.getLogger(__name__)


DEFAULT_ROOT_WORD = "silkworm"
BASE_SCORE = 100  # Points per letter of an ordinary accepted word
ROOT_WORD_BONUS = 2000  # Flat award for finding the root word itself


class RoundState(BaseModel):
    """
    Holds the state of a single round.

    The root word and its letters are fixed from `start_new_round` until the
    next call; the used words and the score only change through
    `record_accepted_word`.

    Attributes:
        root_word: The word whose letters bound every submission
        root_letters: Letters of the root word in original order
        shuffled_letters: The same letters in display order
        used_words: Accepted words, most recent first
        score: Running score for the round
        found_root_word: Whether the root word itself has been accepted
        seed: Optional random seed for reproducibility
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    root_word: str = ""
    root_letters: List[str] = Field(default_factory=list)
    shuffled_letters: List[str] = Field(default_factory=list)
    used_words: List[str] = Field(default_factory=list)
    score: int = Field(default=0, ge=0)
    found_root_word: bool = False
    default_word: str = DEFAULT_ROOT_WORD
    base_score: int = BASE_SCORE
    root_word_bonus: int = ROOT_WORD_BONUS
    seed: Optional[int] = None
    _rng: random.Random = None

    def model_post_init(self, __context) -> None:
        """Initialize the random generator after model creation."""
        self._rng = random.Random(self.seed)

    @classmethod
    def create(
        cls,
        word_list: List[str],
        seed: Optional[int] = None,
        **kwargs
    ) -> "RoundState":
        """
        Factory method to create a state with its first round already started.

        Args:
            word_list: Candidate root words
            seed: Optional random seed for reproducibility
            **kwargs: Scoring overrides (default_word, base_score, root_word_bonus)

        Returns:
            A new RoundState ready for submissions
        """
        state = cls(seed=seed, **kwargs)
        state.start_new_round(word_list)
        return state

    def start_new_round(self, word_list: List[str]) -> str:
        """
        Pick a new root word and reset progress.

        Args:
            word_list: Candidate root words; the default word is used when empty

        Returns:
            The new root word
        """
        candidates = [w.strip().lower() for w in word_list if w.strip()]
        if candidates:
            self.root_word = self._rng.choice(candidates)
        else:
            logger.warning("Word list is empty, falling back to %r", self.default_word)
            self.root_word = self.default_word.lower()

        self.root_letters = list(self.root_word)
        self.shuffled_letters = self._shuffle(self.root_letters)
        self.used_words = []
        self.score = 0
        self.found_root_word = False

        logger.info("New round with root word %r", self.root_word)
        return self.root_word

    def _shuffle(self, letters: List[str]) -> List[str]:
        shuffled = letters.copy()
        self._rng.shuffle(shuffled)
        # A word of one repeated letter cannot be scrambled
        while shuffled == letters and len(set(letters)) > 1:
            self._rng.shuffle(shuffled)
        return shuffled

    def record_accepted_word(self, word: str) -> int:
        """
        Record a word that passed validation.

        Args:
            word: The normalized, accepted word

        Returns:
            Points awarded for the word
        """
        self.used_words.insert(0, word)

        if word != self.root_word:
            points = len(word) * self.base_score
        else:
            points = self.root_word_bonus
            self.found_root_word = True

        self.score += points
        return points

    def get_state(self) -> Dict:
        """
        Get the current round state as a dictionary.

        Useful for serialization and display.

        Returns:
            Dictionary containing round state
        """
        return {
            "root_word": self.root_word,
            "letters": self.shuffled_letters.copy(),
            "used_words": self.used_words.copy(),
            "score": self.score,
            "found_root_word": self.found_root_word,
        }
