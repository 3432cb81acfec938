"""
Lightweight entry validation.

This module answers the question: "Would this word count in this puzzle?"
A word is valid iff:
  - it is a string
  - it is alphabetic a–z only (after lower-casing)
  - it passes the puzzle's match rules (length, alphabet, must-use letters)
  - it exists in the provided `allowed` word list, when one is given
"""

from typing import Iterable, Optional, Set

from .alphabet import Puzzle
from .constraints import is_match, normalize_word


def validate_word(word: str, puzzle: Puzzle, allowed: Optional[Iterable[str]] = None) -> bool:
    """
    Return True if `word` is a valid entry for `puzzle`.

    Notes:
      - `allowed` can be a large list or an open file; a local set is built
        here for membership. Precompute the set once when checking many words.
    """
    if not isinstance(word, str):
        return False

    w = normalize_word(word)
    if not w.isascii() or not w.isalpha():
        return False

    if not is_match(w, puzzle.alphabet, puzzle.must_use, puzzle.min_word_length):
        return False

    if allowed is None:
        return True
    allowed_set: Set[str] = {normalize_word(a) for a in allowed}
    return w in allowed_set
