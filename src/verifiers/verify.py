"""
Submission verification for word scramble.

Validates, in order, stopping at the first failure:
1. Length (at least three letters)
2. Originality (not already accepted this round)
3. Spellability (only letters of the root word, respecting repeats)
4. Realness (the injected dictionary recognizes the word)
"""

from typing import Optional, Sequence

from .models import ValidationError, ValidationResult
from .checks import MIN_WORD_LENGTH, normalize, is_long_enough, is_original, is_possible, is_real
from .dictionary import Dictionary


def too_short(word: str, min_length: int = MIN_WORD_LENGTH) -> ValidationError:
    return ValidationError(
        code="TOO_SHORT",
        title="Too short",
        message=f"Enter a word that's at least {min_length} letters long",
        word=word,
    )


def already_used(word: str) -> ValidationError:
    return ValidationError(
        code="ALREADY_USED",
        title="Word used already",
        message="Be more original",
        word=word,
    )


def not_possible(word: str, letters: Sequence[str]) -> ValidationError:
    shown = " ".join(letter.upper() for letter in letters)
    return ValidationError(
        code="NOT_POSSIBLE",
        title="Word not possible",
        message=f"You can't spell that word from '{shown}'",
        word=word,
    )


def not_real(word: str) -> ValidationError:
    return ValidationError(
        code="NOT_REAL",
        title="Word not recognized",
        message="You can't just make them up, you know!",
        word=word,
    )


def check_submission(
    word: str,
    root_letters: Sequence[str],
    used_words: Sequence[str],
    dictionary: Dictionary,
    language: str = "en",
    min_length: int = MIN_WORD_LENGTH,
    display_letters: Optional[Sequence[str]] = None,
) -> Optional[ValidationError]:
    """
    Return the first failed check for an already-normalized word, or None.

    `display_letters` only changes how the letters are listed in the
    NOT_POSSIBLE message; spellability is always checked against `root_letters`.
    """
    if not is_long_enough(word, min_length):
        return too_short(word, min_length)

    if not is_original(word, used_words):
        return already_used(word)

    if not is_possible(word, root_letters):
        return not_possible(word, display_letters or root_letters)

    # Only reached once the cheap checks pass; this may hit the network
    if not is_real(word, dictionary, language):
        return not_real(word)

    return None


def validate_submission(
    candidate: str,
    root_letters: Sequence[str],
    used_words: Sequence[str],
    dictionary: Dictionary,
    language: str = "en",
    min_length: int = MIN_WORD_LENGTH,
    display_letters: Optional[Sequence[str]] = None,
) -> ValidationResult:
    """
    Main verification function: classifies one raw submission.

    Returns a ValidationResult with:
    - valid: True if the word passes all four checks
    - word: the normalized candidate
    - error: the single rejection reason when invalid

    Raises DictionaryError if the dictionary lookup itself fails.
    """
    word = normalize(candidate)
    error = check_submission(
        word,
        root_letters,
        used_words,
        dictionary,
        language=language,
        min_length=min_length,
        display_letters=display_letters,
    )

    return ValidationResult(valid=error is None, word=word, error=error)
