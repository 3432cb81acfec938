"""
Turn raw letter expressions into the letter sets of a puzzle.

Input grammar (one left-to-right scan):
  - any single character is a literal
  - "[X-Y]" expands to every character from X to Y inclusive; the
    direction does not matter, so "[d-a]" == "[a-d]"

After expansion everything outside a-z is dropped and letters are
de-duplicated, keeping the order in which they were first seen:

  normalize_letters("[a-i]k[l-n]")  -> "abcdefghiklmn"
  normalize_letters("OY[r-v]")      -> "oyrstuv"
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Tuple

from .errors import EmptyLetterSetError, InvalidMinLengthError

logger = logging.getLogger(__name__)

# Absolute floor for word length; user input below this is clamped up.
GAME_MIN_WORD_LENGTH = 2
# Spelling Bee's own minimum, used when nothing is supplied.
DEFAULT_MIN_WORD_LENGTH = 4

_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyz")


@dataclass(frozen=True)
class Puzzle:
    may_use: str
    must_use: str
    alphabet: str
    min_word_length: int


def expand_ranges(expr: str) -> str:
    """
    Expand every "[X-Y]" token in `expr`; everything else passes through.

    A bracket that does not open a complete five-character range token is
    kept as a literal character (and later stripped by normalization).
    """
    out = []
    i = 0
    n = len(expr)
    while i < n:
        ch = expr[i]
        if ch == "[" and i + 4 < n and expr[i + 2] == "-" and expr[i + 4] == "]":
            lo, hi = sorted((ord(expr[i + 1]), ord(expr[i + 3])))
            out.extend(chr(c) for c in range(lo, hi + 1))
            i += 5
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def dedupe(letters: Iterable[str]) -> str:
    """Drop repeated characters, keeping first-seen order."""
    return "".join(dict.fromkeys(letters))


def normalize_letters(raw: str) -> str:
    """Lower-case, expand ranges, keep only a-z, de-duplicate."""
    expanded = expand_ranges((raw or "").lower())
    return dedupe(ch for ch in expanded if ch in _LETTERS)


def parse_min_length(raw) -> int:
    """
    Parse the minimum word length argument.

    None means "use the default". Anything that is not a positive integer
    raises InvalidMinLengthError; values under the game minimum are clamped
    with a warning rather than rejected.
    """
    if raw is None:
        return DEFAULT_MIN_WORD_LENGTH
    if isinstance(raw, bool):
        raise InvalidMinLengthError(raw)
    if isinstance(raw, int):
        value = raw
    else:
        text = str(raw).strip()
        if not (text.isascii() and text.isdigit()):
            raise InvalidMinLengthError(raw)
        value = int(text)

    if value < 1:
        raise InvalidMinLengthError(raw)
    if value < GAME_MIN_WORD_LENGTH:
        logger.warning(
            "minimum word length %d is below the game minimum; using %d",
            value, GAME_MIN_WORD_LENGTH,
        )
        value = GAME_MIN_WORD_LENGTH
    return value


def build_alphabet(raw_may_use: str, raw_must_use: str,
                   min_word_length=None) -> Tuple[str, str, str, int]:
    """
    Normalize both letter expressions and the minimum length.

    Returns:
      (may_use, must_use, alphabet, effective_min_word_length)

    Raises:
      InvalidMinLengthError, EmptyLetterSetError
    """
    min_len = parse_min_length(min_word_length)

    may_use = normalize_letters(raw_may_use)
    if not may_use:
        raise EmptyLetterSetError("may-use", raw_may_use)
    must_use = normalize_letters(raw_must_use)
    if not must_use:
        raise EmptyLetterSetError("must-use", raw_must_use)

    # may-use letters first, then any must-use letters not yet seen
    alphabet = dedupe(may_use + must_use)
    logger.debug("alphabet=%s may_use=%s must_use=%s min=%d",
                 alphabet, may_use, must_use, min_len)
    return may_use, must_use, alphabet, min_len


def build_puzzle(raw_may_use: str, raw_must_use: str, min_word_length=None) -> Puzzle:
    may_use, must_use, alphabet, min_len = build_alphabet(
        raw_may_use, raw_must_use, min_word_length)
    return Puzzle(may_use=may_use, must_use=must_use, alphabet=alphabet,
                  min_word_length=min_len)
