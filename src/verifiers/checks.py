"""
Read-only predicates used by the submission validator.

None of these functions mutate their arguments; `is_possible` works on a
copy of the root letters.
"""

from typing import List, Sequence

from .dictionary import Dictionary


MIN_WORD_LENGTH = 3


def normalize(text: str) -> str:
    """Lowercase a raw submission and trim surrounding whitespace."""
    return text.lower().strip()


def is_long_enough(word: str, min_length: int = MIN_WORD_LENGTH) -> bool:
    return len(word) >= min_length


def is_original(word: str, used_words: Sequence[str]) -> bool:
    return word not in used_words


def is_possible(word: str, root_letters: Sequence[str]) -> bool:
    """
    Check that `word` can be spelled from `root_letters`.

    Each letter of the root can be used at most once, so a letter that
    appears twice in the word must appear at least twice in the root.
    """
    remaining: List[str] = list(root_letters)

    for letter in word:
        if letter in remaining:
            remaining.remove(letter)
        else:
            return False

    return True


def is_real(word: str, dictionary: Dictionary, language: str = "en") -> bool:
    return dictionary.check(word, language)
