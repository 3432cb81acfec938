"""
Candidate filtering for a puzzle.

Given:
  - a word source (any iterable of lines, e.g. an open dictionary file)
  - the puzzle alphabet (may-use + must-use letters)
  - the must-use letters
  - the minimum word length

Return:
  - every word built only from alphabet letters that contains each must-use
    letter at least once (a "match"), in source order
  - the subset of matches that use every alphabet letter (the "specials")

Letters may repeat freely inside a word; only presence is tested.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass
class FilterResult:
    matches: List[str] = field(default_factory=list)
    specials: List[str] = field(default_factory=list)
    no_matches: bool = False
    # must-use letter whose intersection emptied the candidate set
    exhausted_at: Optional[str] = None


def normalize_word(raw: str) -> str:
    return raw.strip().lower()


def uses_only(word: str, alphabet: str) -> bool:
    """True if every character of `word` is in `alphabet`."""
    return set(word) <= set(alphabet)


def contains_all(word: str, letters: str) -> bool:
    """True if `word` contains each of `letters` at least once."""
    return set(letters) <= set(word)


def is_match(word: str, alphabet: str, must_use: str, min_word_length: int) -> bool:
    """Single combined predicate: length, alphabet membership, must-use presence."""
    if len(word) < min_word_length:
        return False
    chars = set(word)
    return chars <= set(alphabet) and set(must_use) <= chars


def is_special(word: str, alphabet: str) -> bool:
    """A word is special when it uses every alphabet letter at least once."""
    return contains_all(word, alphabet)


def narrow_by_must_use(candidates: List[str], must_use: str) -> Iterator[Tuple[str, List[str]]]:
    """
    Intersect `candidates` with one must-use letter at a time.

    Yields (letter, remaining) after each step. Stops right after the first
    step that leaves nothing, so callers never pay for the remaining letters.
    """
    remaining = candidates
    for letter in must_use:
        remaining = [w for w in remaining if letter in w]
        yield letter, remaining
        if not remaining:
            return


def filter_words(words: Iterable[str], alphabet: str, must_use: str,
                 min_word_length: int) -> FilterResult:
    """
    Stream `words` once and select the puzzle's matches and specials.

    Order and duplicates of the source are preserved. An empty outcome is a
    normal result with `no_matches=True`, not an exception.
    """
    allowed = set(alphabet)
    candidates: List[str] = []
    scanned = 0

    # Pass over the source: length + alphabet membership only
    for raw in words:
        scanned += 1
        w = normalize_word(raw)
        if len(w) >= min_word_length and set(w) <= allowed:
            candidates.append(w)

    logger.info("scanned %d words, %d use only '%s'", scanned, len(candidates), alphabet)
    if not candidates:
        return FilterResult(no_matches=True)

    # Must-use letters, one intersection at a time with early exit
    for letter, remaining in narrow_by_must_use(candidates, must_use):
        if not remaining:
            logger.info("no candidates left after must-use letter '%s'", letter)
            return FilterResult(no_matches=True, exhausted_at=letter)
        candidates = remaining

    specials = [w for w in candidates if is_special(w, alphabet)]
    return FilterResult(matches=candidates, specials=specials)
