"""
Puzzle pipeline primitives.

- solve:        Build -> Filter -> Score for one puzzle.
- run_batch:    many puzzles against one in-memory dictionary.
- read_puzzles: load batch rows from a CSV file.

Input errors (bad minimum length, empty letter set) are raised by the
builder before the word source is touched. "No matches" is a normal
result (`no_matches=True`), never an exception.

These functions are UI-agnostic so they can be reused by the CLI apps,
a notebook, or tests without changes.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from packages.engine import build_puzzle, filter_words, score_matches, BeeError
from packages.engine.masks import WordMasks

logger = logging.getLogger(__name__)


@dataclass
class SolveResult:
    alphabet: str
    may_use: str
    must_use: str
    min_word_length: int
    special_words: List[str] = field(default_factory=list)
    special_bonus: int = 0
    all_words: List[str] = field(default_factory=list)
    word_scores: List[Tuple[str, int]] = field(default_factory=list)
    max_score: int = 0
    no_matches: bool = False

    def to_dict(self) -> Dict:
        d = asdict(self)
        d["word_scores"] = [list(ws) for ws in self.word_scores]
        return d


def solve(
        raw_may_use: str,
        raw_must_use: str,
        words: Iterable[str],
        min_word_length=None,
        *,
        masks: Optional[WordMasks] = None,
) -> SolveResult:
    """
    Run one puzzle end to end.

    Args:
      raw_may_use, raw_must_use : letter expressions, e.g. "oavtle", "[a-i]"
      words                     : word source (list, generator or open file);
                                  ignored when `masks` is given
      min_word_length           : str/int override, None for the default
      masks                     : precomputed WordMasks for the same dictionary
    """
    puzzle = build_puzzle(raw_may_use, raw_must_use, min_word_length)

    if masks is not None:
        fr = masks.filter(puzzle.alphabet, puzzle.must_use, puzzle.min_word_length)
    else:
        fr = filter_words(words, puzzle.alphabet, puzzle.must_use, puzzle.min_word_length)

    result = SolveResult(
        alphabet=puzzle.alphabet,
        may_use=puzzle.may_use,
        must_use=puzzle.must_use,
        min_word_length=puzzle.min_word_length,
    )
    if fr.no_matches:
        result.no_matches = True
        return result

    word_scores, bonus, total = score_matches(fr.matches, fr.specials, puzzle.min_word_length)
    result.special_words = fr.specials
    result.special_bonus = bonus
    result.all_words = fr.matches
    result.word_scores = word_scores
    result.max_score = total
    return result


def read_puzzles(path: Path | str) -> List[Dict]:
    """
    Read batch rows from a CSV with header `may_use,must_use[,min_length]`.
    A blank min_length means "use the default".
    """
    p = Path(path)
    rows: List[Dict] = []
    with p.open("r", newline="", encoding="utf-8") as f:
        for r in csv.DictReader(f):
            rows.append({
                "may_use": r.get("may_use") or "",
                "must_use": r.get("must_use") or "",
                "min_length": (r.get("min_length") or "").strip() or None,
            })
    return rows


def run_batch(
        puzzles: Iterable[Dict],
        words: Iterable[str],
        *,
        progress: Optional[Callable[[Iterable], Iterable]] = None,
) -> List[Dict]:
    """
    Solve many puzzles against one dictionary.

    The dictionary is reduced to bitmasks once and shared by every puzzle.
    A row whose letters or length fail to build is recorded with an `error`
    string and the batch carries on.

    `progress` optionally wraps the puzzle iterable (e.g. tqdm).
    """
    masks = words if isinstance(words, WordMasks) else WordMasks(words)
    rows = list(puzzles)
    iterator = progress(rows) if progress else rows

    out: List[Dict] = []
    for idx, row in enumerate(iterator, start=1):
        rec = {
            "index": idx,
            "may_use": row["may_use"],
            "must_use": row["must_use"],
            "min_length": row.get("min_length"),
        }
        try:
            res = solve(row["may_use"], row["must_use"], (), row.get("min_length"), masks=masks)
        except BeeError as e:
            logger.warning("puzzle %d skipped: %s", idx, e)
            rec["error"] = str(e)
            out.append(rec)
            continue
        rec["error"] = ""
        rec["result"] = res.to_dict()
        out.append(rec)
    return out
