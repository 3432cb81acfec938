"""Text rendering of a solved puzzle."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import List, Optional, TextIO

from packages.engine import SPECIAL_BONUS

from .core import SolveResult


@dataclass(frozen=True)
class Palette:
    """Escape sequences wrapped around each part of the report."""
    heading: str = ""
    letters: str = ""
    special: str = ""
    score: str = ""
    reset: str = ""


PLAIN = Palette()
ANSI = Palette(
    heading="\033[1m",
    letters="\033[36m",
    special="\033[33m",
    score="\033[32m",
    reset="\033[0m",
)


def _paint(text: str, color: str, palette: Palette) -> str:
    return f"{color}{text}{palette.reset}" if color else text


def format_report(result: SolveResult, palette: Palette = PLAIN,
                  show_alphabet: bool = True) -> str:
    """Render alphabet summary, special words, all words and the maximum score."""
    p = palette
    lines: List[str] = []

    if show_alphabet:
        lines.append(f"{_paint('Alphabet:', p.heading, p)} {_paint(result.alphabet, p.letters, p)}")
        lines.append(f"{_paint('May use:', p.heading, p)}  {_paint(result.may_use, p.letters, p)}")
        lines.append(f"{_paint('Must use:', p.heading, p)} {_paint(result.must_use, p.letters, p)}")
        lines.append(f"{_paint('Minimum length:', p.heading, p)} {result.min_word_length}")
        lines.append("")

    if result.no_matches:
        lines.append("No matches found.")
        return "\n".join(lines)

    lines.append(_paint(f"Special words ({len(result.special_words)}):", p.heading, p))
    for w in result.special_words:
        lines.append(f"  {_paint(w, p.special, p)}")
    lines.append(f"{_paint('Special bonus:', p.heading, p)} {_paint(str(result.special_bonus), p.score, p)}")
    lines.append("")

    lines.append(_paint(f"All words ({len(result.all_words)}):", p.heading, p))
    specials = set(result.special_words)
    for w, s in result.word_scores:
        shown = _paint(w, p.special, p) if w in specials else w
        bonus = f" +{SPECIAL_BONUS}" if w in specials else ""
        # pad on the raw word so escape codes don't skew the column
        lines.append(f"  {shown}{' ' * max(1, 20 - len(w))}{s:>3d}{bonus}")
    lines.append("")
    lines.append(f"{_paint('Maximum score:', p.heading, p)} {_paint(str(result.max_score), p.score, p)}")
    return "\n".join(lines)


def print_report(result: SolveResult, out: Optional[TextIO] = None, **kwargs) -> None:
    """Write the report to `out` (stdout by default)."""
    if out is None:
        out = sys.stdout
    out.write(format_report(result, **kwargs) + "\n")
