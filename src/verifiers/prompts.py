"""Prompt templates for the LLM dictionary judge."""

import re
from typing import Optional


JUDGE_SYSTEM_PROMPT = """You are a strict dictionary for a word game.

Decide whether the word you are given is a correctly spelled word in the requested language.

## Rules
1. Accept common nouns, verbs, adjectives and adverbs, including inflected forms (plurals, past tenses)
2. Reject proper nouns, abbreviations, acronyms and misspellings
3. Reject words that only exist as part of a longer phrase

## Response Format
Respond with exactly one tag and nothing else:

<valid>YES</valid>
or
<valid>NO</valid>
"""


def build_judge_prompt(word: str, language: str = "en") -> str:
    """Build the user message for a single lookup."""
    return f"Language: {language}\nWord: {word}"


def parse_judge_response(response: str) -> Optional[bool]:
    """
    Extract the verdict from a judge reply.

    Returns:
        True for YES, False for NO, None if no verdict could be found
    """
    match = re.search(r'<valid>\s*(YES|NO)\s*</valid>', response, re.IGNORECASE)
    if match:
        return match.group(1).upper() == "YES"

    # Some models drop the tags and answer with a bare word
    bare = response.strip().strip(".").upper()
    if bare in ("YES", "NO"):
        return bare == "YES"
    return None
