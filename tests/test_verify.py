"""
Test suite for submission verification.

Tests all rejection cases and their order:
- TOO_SHORT (fewer than three letters)
- ALREADY_USED (word accepted earlier in the round)
- NOT_POSSIBLE (letters missing from the root word)
- NOT_REAL (dictionary does not know the word)
"""

import pytest
from src.verifiers import (
    validate_submission,
    check_submission,
    normalize,
    is_long_enough,
    is_original,
    is_possible,
    WordListDictionary,
    ValidationResult,
)


ROOT_LETTERS = list("silkworm")
DICTIONARY = WordListDictionary.from_words(
    ["silk", "worm", "milk", "silo", "roil", "slow", "silkworm", "ab", "xyz", "mill", "owl"]
)


class RecordingDictionary:
    """Dictionary double that records every lookup."""

    def __init__(self, answer: bool = True):
        self.answer = answer
        self.calls = []

    def check(self, word, language="en"):
        self.calls.append((word, language))
        return self.answer


class TestNormalize:
    """Test input normalization."""

    def test_lowercases(self):
        """Uppercase input is lowercased."""
        assert normalize("SILK") == "silk"

    def test_trims_whitespace(self):
        """Surrounding spaces and newlines are removed."""
        assert normalize("  Silk \n") == "silk"

    def test_keeps_inner_characters(self):
        """Only surrounding whitespace is trimmed."""
        assert normalize(" silk worm ") == "silk worm"


class TestChecks:
    """Test the individual predicates."""

    @pytest.mark.parametrize("word,expected", [
        ("", False),
        ("a", False),
        ("ab", False),
        ("abc", True),
        ("silkworm", True),
    ])
    def test_is_long_enough(self, word, expected):
        """Minimum accepted length is three."""
        assert is_long_enough(word) is expected

    def test_is_long_enough_custom_minimum(self):
        """The minimum length can be raised."""
        assert is_long_enough("silk", min_length=5) is False

    def test_is_original(self):
        """Words already used are not original."""
        assert is_original("silk", ["worm"]) is True
        assert is_original("silk", ["worm", "silk"]) is False

    @pytest.mark.parametrize("word,expected", [
        ("silk", True),
        ("worm", True),
        ("silkworm", True),
        ("mowlsrik", True),
        ("xyz", False),
        ("mill", False),  # only one 'l' in silkworm
        ("silks", False),  # only one 's'
        ("", True),
    ])
    def test_is_possible(self, word, expected):
        """Letters must come from the root, respecting how often they appear."""
        assert is_possible(word, ROOT_LETTERS) is expected

    def test_is_possible_does_not_consume_root(self):
        """The root letters are left untouched."""
        letters = list("silkworm")
        is_possible("silk", letters)
        assert letters == list("silkworm")

    def test_is_possible_with_repeated_root_letters(self):
        """A letter repeated in the root may be used that many times."""
        letters = list("balloon")
        assert is_possible("ball", letters) is True
        assert is_possible("loon", letters) is True
        assert is_possible("balll", letters) is False


class TestValidSubmissions:
    """Test cases for accepted submissions."""

    def test_accepts_spellable_real_word(self):
        """Scenario A: 'silk' from 'silkworm' is accepted."""
        result = validate_submission("silk", ROOT_LETTERS, [], DICTIONARY)
        assert isinstance(result, ValidationResult)
        assert result.valid is True
        assert result.word == "silk"
        assert result.error is None

    def test_accepts_root_word_itself(self):
        """The root word passes every check like any other word."""
        result = validate_submission("silkworm", ROOT_LETTERS, [], DICTIONARY)
        assert result.valid is True

    def test_normalizes_before_checking(self):
        """Case and surrounding whitespace do not matter."""
        result = validate_submission("  SiLk ", ROOT_LETTERS, [], DICTIONARY)
        assert result.valid is True
        assert result.word == "silk"

    def test_shuffled_letters_work_the_same(self):
        """Only the letter counts matter, not their order."""
        result = validate_submission("worm", list("mowlsrik"), [], DICTIONARY)
        assert result.valid is True


class TestRejections:
    """Test each rejection reason."""

    def test_too_short(self):
        """Scenario C: 'ab' is too short even though it is real."""
        result = validate_submission("ab", ROOT_LETTERS, [], DICTIONARY)
        assert result.valid is False
        assert result.error.code == "TOO_SHORT"
        assert result.error.title == "Too short"
        assert "at least 3 letters" in result.error.message

    def test_too_short_after_trimming(self):
        """Whitespace does not count towards the length."""
        result = validate_submission("  ow  ", ROOT_LETTERS, [], DICTIONARY)
        assert result.error.code == "TOO_SHORT"

    def test_already_used(self):
        """Scenario D: a word accepted earlier is rejected."""
        result = validate_submission("silk", ROOT_LETTERS, ["silk"], DICTIONARY)
        assert result.valid is False
        assert result.error.code == "ALREADY_USED"
        assert result.error.title == "Word used already"

    def test_already_used_is_case_insensitive(self):
        """Uppercase resubmissions are still duplicates."""
        result = validate_submission("SILK", ROOT_LETTERS, ["silk"], DICTIONARY)
        assert result.error.code == "ALREADY_USED"

    def test_not_possible(self):
        """Scenario B: 'xyz' cannot be spelled from 'silkworm'."""
        result = validate_submission("xyz", ROOT_LETTERS, [], DICTIONARY)
        assert result.valid is False
        assert result.error.code == "NOT_POSSIBLE"
        assert result.error.title == "Word not possible"
        assert "S I L K W O R M" in result.error.message

    def test_not_possible_lists_display_letters(self):
        """The message shows the display order while checking the root letters."""
        result = validate_submission(
            "xyz", ROOT_LETTERS, [], DICTIONARY, display_letters=list("mowlsrik")
        )
        assert result.error.code == "NOT_POSSIBLE"
        assert "M O W L S R I K" in result.error.message

    def test_display_letters_do_not_affect_spellability(self):
        """Only the root letters decide whether a word can be spelled."""
        result = validate_submission(
            "silk", ROOT_LETTERS, [], DICTIONARY, display_letters=list("xxxxxxxx")
        )
        assert result.valid is True

    def test_not_possible_repeated_letter(self):
        """Using a letter more often than the root allows is rejected."""
        result = validate_submission("mill", ROOT_LETTERS, [], DICTIONARY)
        assert result.error.code == "NOT_POSSIBLE"

    def test_not_real(self):
        """Spellable nonsense is rejected by the dictionary."""
        result = validate_submission("klow", ROOT_LETTERS, [], DICTIONARY)
        assert result.valid is False
        assert result.error.code == "NOT_REAL"
        assert result.error.title == "Word not recognized"
        assert result.error.word == "klow"


class TestCheckOrder:
    """Test that checks run in order and stop at the first failure."""

    def test_short_and_used_reports_too_short(self):
        """Length is checked before originality."""
        result = validate_submission("ow", ROOT_LETTERS, ["ow"], DICTIONARY)
        assert result.error.code == "TOO_SHORT"

    def test_used_and_impossible_reports_already_used(self):
        """Originality is checked before spellability."""
        result = validate_submission("xyz", ROOT_LETTERS, ["xyz"], DICTIONARY)
        assert result.error.code == "ALREADY_USED"

    def test_dictionary_not_consulted_after_failure(self):
        """The dictionary is only asked once the other checks pass."""
        dictionary = RecordingDictionary()
        validate_submission("ab", ROOT_LETTERS, [], dictionary)
        validate_submission("silk", ROOT_LETTERS, ["silk"], dictionary)
        validate_submission("xyz", ROOT_LETTERS, [], dictionary)
        assert dictionary.calls == []

    def test_dictionary_receives_language(self):
        """The configured language is passed to the dictionary."""
        dictionary = RecordingDictionary()
        validate_submission("Silk", ROOT_LETTERS, [], dictionary, language="en_GB")
        assert dictionary.calls == [("silk", "en_GB")]

    def test_check_submission_returns_none_when_valid(self):
        """check_submission returns only the first error, or None."""
        assert check_submission("silk", ROOT_LETTERS, [], DICTIONARY) is None
        error = check_submission("xyz", ROOT_LETTERS, [], RecordingDictionary(answer=False))
        assert error.code == "NOT_POSSIBLE"

    def test_custom_minimum_length(self):
        """A higher minimum length is reflected in the message."""
        result = validate_submission("silk", ROOT_LETTERS, [], DICTIONARY, min_length=5)
        assert result.error.code == "TOO_SHORT"
        assert "at least 5 letters" in result.error.message


class TestNoMutation:
    """Rejections and checks never change their inputs."""

    def test_inputs_unchanged(self):
        """Root letters and used words are untouched after validation."""
        letters = list("silkworm")
        used = ["worm"]
        for word in ["ab", "worm", "xyz", "klow", "silk"]:
            validate_submission(word, letters, used, DICTIONARY)
        assert letters == list("silkworm")
        assert used == ["worm"]
