"""Root word source: loads the newline-delimited list of candidate root words."""

import logging
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

BUNDLED_WORD_LIST = Path(__file__).parent / "data" / "start.txt"


class WordSourceError(Exception):
    """No root word list could be read."""


def load_word_list(path: Optional[str | Path] = None) -> List[str]:
    """
    Load candidate root words, one per line.

    Lines are trimmed and lowercased; empty lines are dropped so they can
    never be picked as a root word.

    Args:
        path: Word list file, or None for the bundled list

    Returns:
        List of words in file order (may be empty)

    Raises:
        WordSourceError: If the file does not exist or cannot be read
    """
    path = Path(path) if path is not None else BUNDLED_WORD_LIST

    if not path.exists():
        raise WordSourceError(f"Could not load word list: {path} not found")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise WordSourceError(f"Could not load word list {path}: {e}") from e

    words = [line.strip().lower() for line in text.splitlines() if line.strip()]
    logger.info("Loaded %s root words from %s", len(words), path)
    return words
