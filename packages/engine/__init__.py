from .alphabet import (Puzzle, build_alphabet, build_puzzle, normalize_letters,
                       parse_min_length, GAME_MIN_WORD_LENGTH, DEFAULT_MIN_WORD_LENGTH)
from .constraints import FilterResult, filter_words, is_match, is_special
from .errors import BeeError, EmptyLetterSetError, InvalidMinLengthError
from .scoring import score_word, score_matches, SPECIAL_BONUS
from .validation import validate_word

__all__ = [
    "Puzzle", "build_alphabet", "build_puzzle", "normalize_letters", "parse_min_length",
    "GAME_MIN_WORD_LENGTH", "DEFAULT_MIN_WORD_LENGTH",
    "FilterResult", "filter_words", "is_match", "is_special",
    "BeeError", "EmptyLetterSetError", "InvalidMinLengthError",
    "score_word", "score_matches", "SPECIAL_BONUS",
    "validate_word",
]
