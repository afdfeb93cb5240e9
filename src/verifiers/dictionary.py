"""
Dictionary lookup backends.

The validator only needs a yes/no answer to "is this a real word in
language L", so every backend implements the `Dictionary` protocol's
single `check` method. Backends:

- WordListDictionary: an in-memory word set (plain-text file or iterable)
- TWLDictionary: the Scrabble Tournament Word List 2006 DAWG (see data/twl.py)
- WordfreqDictionary: wordfreq Zipf frequencies (the default)
- LLMDictionary: asks a model through LiteLLM, with a timeout and a bounded cache
"""

import logging
from pathlib import Path
from collections import OrderedDict
from typing import Iterable, Optional, Protocol, Set, Tuple, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field
from wordfreq import zipf_frequency

from .llm_client import LLMClient
from .models import Message
from .prompts import JUDGE_SYSTEM_PROMPT, build_judge_prompt, parse_judge_response

logger = logging.getLogger(__name__)


class DictionaryError(Exception):
    """A dictionary could not be loaded or could not answer a lookup."""


@runtime_checkable
class Dictionary(Protocol):
    def check(self, word: str, language: str = "en") -> bool:
        ...


def primary_language(tag: str) -> str:
    """Reduce a locale tag to its primary subtag ("en_US" -> "en")."""
    return tag.replace("-", "_").split("_", 1)[0].lower()


class WordListDictionary(BaseModel):
    """
    Offline dictionary backed by a set of lowercase words.

    Attributes:
        words: Known words, lowercase
        language: Language tag the words belong to
    """

    words: Set[str] = Field(default_factory=set)
    language: str = "en"

    @classmethod
    def from_words(cls, words: Iterable[str], language: str = "en") -> "WordListDictionary":
        cleaned = {w.strip().lower() for w in words if w.strip()}
        return cls(words=cleaned, language=language)

    @classmethod
    def from_file(cls, path: str | Path, language: str = "en") -> "WordListDictionary":
        """
        Load a one-word-per-line file.

        Raises:
            DictionaryError: If the file does not exist or cannot be read
        """
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8", errors="ignore")
        except OSError as e:
            raise DictionaryError(f"Could not read dictionary {path}: {e}") from e

        dictionary = cls.from_words(text.splitlines(), language=language)
        logger.info("Loaded %s dictionary words from %s", len(dictionary.words), path)
        return dictionary

    def check(self, word: str, language: str = "en") -> bool:
        if primary_language(language) != primary_language(self.language):
            return False
        return word.lower() in self.words


class TWLDictionary(BaseModel):
    """English-only dictionary backed by a TWL06 DAWG file."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    path: str
    _dawg: object = None

    @classmethod
    def from_file(cls, path: str | Path) -> "TWLDictionary":
        """
        Raises:
            DictionaryError: If the file is missing or is not DAWG data
        """
        from .data.twl import load_dawg

        try:
            dawg = load_dawg(path)
        except (OSError, ValueError) as e:
            raise DictionaryError(f"Could not load TWL data from {path}: {e}") from e

        dictionary = cls(path=str(path))
        dictionary._dawg = dawg
        logger.info("Loaded TWL06 data from %s", path)
        return dictionary

    def check(self, word: str, language: str = "en") -> bool:
        if self._dawg is None or primary_language(language) != "en":
            return False
        return word.lower() in self._dawg


class WordfreqDictionary(BaseModel):
    """
    Dictionary backed by wordfreq's bundled frequency lists.

    A word counts as real when its Zipf frequency in the language reaches
    `min_zipf`. Needs no files or network, so it is the default backend.

    Attributes:
        min_zipf: Lowest Zipf frequency accepted as a real word
    """

    min_zipf: float = Field(default=2.0, ge=0)

    def check(self, word: str, language: str = "en") -> bool:
        word = word.lower()
        if not word.isalpha():
            return False
        try:
            return zipf_frequency(word, primary_language(language)) >= self.min_zipf
        except LookupError as e:
            raise DictionaryError(f"No word frequencies for language {language!r}") from e


class LLMDictionary(BaseModel):
    """
    Dictionary that asks a language model whether a word is real.

    Answers are cached per (word, language) so repeated submissions of the
    same word never trigger a second request. The cache keeps at most
    `max_cache_size` answers, dropping the least recently used.

    Attributes:
        llm_client: Client used for lookups
        cache: Previous answers keyed by (word, primary language)
        max_cache_size: Number of answers kept
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    llm_client: LLMClient
    cache: OrderedDict[Tuple[str, str], bool] = Field(default_factory=OrderedDict)
    max_cache_size: int = Field(default=1024, ge=1)

    @classmethod
    def create(
        cls,
        model: str,
        temperature: float = 0.0,
        timeout: Optional[float] = 10.0,
        max_cache_size: int = 1024,
        **llm_kwargs,
    ) -> "LLMDictionary":
        client = LLMClient(model=model, temperature=temperature, timeout=timeout, **llm_kwargs)
        return cls(llm_client=client, max_cache_size=max_cache_size)

    def check(self, word: str, language: str = "en") -> bool:
        """
        Raises:
            DictionaryError: If the request fails, times out, or the reply
                cannot be understood
        """
        key = (word.lower(), primary_language(language))
        if key in self.cache:
            self.cache.move_to_end(key)
            return self.cache[key]

        messages = [
            Message(role="system", content=JUDGE_SYSTEM_PROMPT),
            Message(role="user", content=build_judge_prompt(key[0], language)),
        ]

        try:
            response = self.llm_client.completion(messages)
            content = response.choices[0].message.content or ""
        except Exception as e:
            logger.warning("Dictionary lookup for %r failed: %s", word, e)
            raise DictionaryError(f"Dictionary lookup failed: {e}") from e

        verdict = parse_judge_response(content)
        if verdict is None:
            raise DictionaryError(f"Unreadable dictionary response: {content!r}")

        self.cache[key] = verdict
        if len(self.cache) > self.max_cache_size:
            self.cache.popitem(last=False)
        return verdict
