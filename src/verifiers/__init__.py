"""Submission verification for word scramble."""

from .verify import validate_submission, check_submission
from .models import ValidationError, ValidationResult, RejectionCode, Message, Role
from .checks import normalize, is_long_enough, is_original, is_possible, is_real, MIN_WORD_LENGTH
from .dictionary import (
    Dictionary,
    DictionaryError,
    WordListDictionary,
    TWLDictionary,
    WordfreqDictionary,
    LLMDictionary,
)
from .llm_client import LLMClient

__all__ = [
    # Main verification
    "validate_submission",
    "check_submission",
    # Models
    "ValidationError",
    "ValidationResult",
    "RejectionCode",
    "Message",
    "Role",
    # Checks
    "normalize",
    "is_long_enough",
    "is_original",
    "is_possible",
    "is_real",
    "MIN_WORD_LENGTH",
    # Dictionary
    "Dictionary",
    "DictionaryError",
    "WordListDictionary",
    "TWLDictionary",
    "WordfreqDictionary",
    "LLMDictionary",
    "LLMClient",
]
