"""
Word-list validator for beesolver.

What this module does:
- Validate a dictionary file (one word per line) before it is used as a word source.
- Count entries the engine can never match (anything outside a–z after lowercasing,
  e.g. "cat's" or "café") and capitalized entries (likely proper nouns).
- Detect duplicates; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("/usr/share/dict/words")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib
import re

_WORD_RE = re.compile(r"^[a-z]+$")


# -----------------------------
# Dataclass for structured reports
# -----------------------------

@dataclass
class WordlistReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of usable words (a–z after lowercasing)
    unique_count: int    # unique usable words
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    invalid_lines: int   # blank lines or entries with non a–z characters
    proper_nouns: int    # usable entries that start with an uppercase letter
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int, int]:
    """
    Load words from a text file and classify each line.

    Returns:
      (usable_words, invalid_count, proper_noun_count)
    """
    usable: List[str] = []
    invalid = 0
    proper = 0

    with path.open("r", encoding="utf-8", errors="replace") as f:
        for raw in f:
            w = raw.strip()
            wl = w.lower()
            if not _WORD_RE.match(wl):
                invalid += 1
                continue
            if w[0].isupper():
                proper += 1
            usable.append(wl)

    return usable, invalid, proper


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(path: str) -> Dict:
    """
    Validate a word list for use as a puzzle word source.

    `passed` is strict only about what breaks solving: the file must exist and
    contain at least one usable word. Invalid lines, proper nouns and
    duplicates are reported as issues but do not fail the check, since the
    engine ignores or tolerates them.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"word list not found: {path}")
        return asdict(WordlistReport(path, False, 0, 0, "", 0, 0, False, issues))

    words, invalid, proper = _load_and_check(p)
    unique = len(set(words))

    if not words:
        issues.append("word list contains 0 usable words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if proper:
        issues.append(f"word list has {proper} capitalized entr{'y' if proper == 1 else 'ies'}")
    if unique != len(words):
        issues.append("word list contains duplicate words")

    rep = WordlistReport(
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=unique,
        sha256=_sha256_file(p),
        invalid_lines=invalid,
        proper_nouns=proper,
        passed=bool(words),
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        words=/usr/share/dict/words | count=102401 (uniq=98230, sha=abc123...) | invalid=2 | proper=21 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"words={report['path']} | count={report['count']} "
        f"(uniq={report['unique_count']}, sha={sha}) "
        f"| invalid={report['invalid_lines']} | proper={report['proper_nouns']} | {status}"
    )
