"""
Exceptions raised while turning raw user input into a puzzle.

Both are fatal: they are raised before any dictionary scan starts.
An empty match set is NOT an error; see FilterResult.no_matches.
"""


class BeeError(ValueError):
    """Base class for puzzle input errors."""


class InvalidMinLengthError(BeeError):
    """Minimum word length is not a positive integer."""

    def __init__(self, raw):
        self.raw = raw
        super().__init__(f"minimum word length must be a positive integer; got {raw!r}")


class EmptyLetterSetError(BeeError):
    """A letter expression normalized to nothing."""

    def __init__(self, side: str, raw: str):
        self.side = side  # "may-use" or "must-use"
        self.raw = raw
        super().__init__(f"{side} letter set is empty after normalization (input: {raw!r})")
