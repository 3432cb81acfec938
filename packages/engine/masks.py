"""
Vectorized candidate filtering with letter bitmasks.

Each word is reduced to a 26-bit mask of the letters it contains (bit 0 = 'a').
With the masks of a whole dictionary held in one numpy array, a puzzle is a
handful of array operations:

  uses only alphabet  : (mask & ~alphabet_mask) == 0
  has must-use letter : (mask & letter_bit) != 0
  special             : mask == alphabet_mask      (given "uses only alphabet")

Words with any character outside a-z get an extra bit that is never part of
an alphabet, so they can never match.

Results are identical to constraints.filter_words over the same word list;
this is only worth it when one dictionary serves many puzzles (batch runs).
"""

from __future__ import annotations

import logging
from typing import Iterable, List

import numpy as np

from .constraints import FilterResult, normalize_word

logger = logging.getLogger(__name__)

_INVALID_BIT = 1 << 26
_ALL_BITS = 0xFFFFFFFF


def letter_mask(letters: str) -> int:
    """Bitmask of the a-z letters in `letters`; other characters set the invalid bit."""
    m = 0
    for ch in letters:
        if "a" <= ch <= "z":
            m |= 1 << (ord(ch) - 97)
        else:
            m |= _INVALID_BIT
    return m


class WordMasks:
    """Precomputed masks and lengths for a fixed word list (source order kept)."""

    def __init__(self, words: Iterable[str]):
        self.words: List[str] = [normalize_word(w) for w in words]
        self.masks = np.fromiter((letter_mask(w) for w in self.words),
                                 dtype=np.uint32, count=len(self.words))
        self.lengths = np.fromiter((len(w) for w in self.words),
                                   dtype=np.int32, count=len(self.words))
        logger.info("built masks for %d words", len(self.words))

    def __len__(self) -> int:
        return len(self.words)

    def filter(self, alphabet: str, must_use: str, min_word_length: int) -> FilterResult:
        alpha = np.uint32(letter_mask(alphabet))
        outside = np.uint32(~int(alpha) & _ALL_BITS)

        ok = (self.lengths >= min_word_length) & ((self.masks & outside) == 0)
        if not ok.any():
            return FilterResult(no_matches=True)

        # Same early exit as the streaming filter, one must-use letter at a time
        for letter in must_use:
            bit = np.uint32(letter_mask(letter))
            ok &= (self.masks & bit) != 0
            if not ok.any():
                return FilterResult(no_matches=True, exhausted_at=letter)

        idx = np.flatnonzero(ok)
        special = self.masks[idx] == alpha
        matches = [self.words[i] for i in idx]
        specials = [self.words[i] for i in idx[special]]
        return FilterResult(matches=matches, specials=specials)
