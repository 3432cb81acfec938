"""
Spelling Bee scoring for a single word and for a whole puzzle.

Rules (relative to the active minimum word length `m`):
  - len(word) <  m  -> 0
  - len(word) == m  -> 1
  - len(word) >  m  -> len(word)
  - special words (use every alphabet letter) earn a flat +7 on top

A special word is also an ordinary match: it is scored by length AND
receives the bonus, so it is never excluded from the regular list.

Examples (m = 4):
  score_word("vote", 4)                 -> 1
  score_word("voltage", 4, special=True) -> 14
"""

from typing import Iterable, List, Tuple

SPECIAL_BONUS = 7


def score_word(word: str, min_word_length: int, special: bool = False) -> int:
    """Score one word; `special` adds the flat bonus regardless of length."""
    n = len(word)
    if n < min_word_length:
        base = 0
    elif n == min_word_length:
        base = 1
    else:
        base = n
    return base + (SPECIAL_BONUS if special else 0)


def score_matches(matches: Iterable[str], specials: Iterable[str],
                  min_word_length: int) -> Tuple[List[Tuple[str, int]], int, int]:
    """
    Score a full match list.

    Returns:
      (word_scores, special_bonus, max_score)
        word_scores   : [(word, length-based score)] in match order
        special_bonus : 7 * number of special words
        max_score     : sum of length-based scores + special_bonus
    """
    word_scores = [(w, score_word(w, min_word_length)) for w in matches]
    special_bonus = SPECIAL_BONUS * sum(1 for _ in specials)
    max_score = sum(s for _, s in word_scores) + special_bonus
    return word_scores, special_bonus, max_score
