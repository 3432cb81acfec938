"""
I/O utilities for puzzle runs.

Responsibilities:
- write_json:     dump one solved puzzle (SolveResult.to_dict) as JSON.
- write_csv:      flatten batch rows into a tidy CSV (one row per puzzle).
- write_manifest: dump a JSON manifest with config, word-list report, and metadata.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Word lists in CSV cells are space-separated; letter sets are prefixed with an
  apostrophe when they start with a character spreadsheets treat as a formula.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

CSV_FIELDS = [
    "index", "may_use", "must_use", "min_length", "error",
    "alphabet", "num_words", "num_special", "special_bonus", "max_score",
    "special_words", "all_words",
]


def _excel_safe(text: str) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "=abc" -> "'=abc"
    """
    return "'" + text if text and text[0] in "=+-@" else text


def write_json(result: Dict, path: str) -> str:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(result, f, indent=2)
    return str(p)


def write_csv(rows: List[Dict], path: str) -> str:
    """
    Serialize batch rows (as returned by harness.run_batch) to CSV.

    Rows that failed to build keep their `error` text and leave the
    result columns empty.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        w.writeheader()

        for r in rows:
            row = {
                "index": r["index"],
                "may_use": _excel_safe(r["may_use"]),
                "must_use": _excel_safe(r["must_use"]),
                "min_length": r.get("min_length") or "",
                "error": r.get("error", ""),
            }
            res = r.get("result")
            if res:
                row.update({
                    "alphabet": res["alphabet"],
                    "num_words": len(res["all_words"]),
                    "num_special": len(res["special_words"]),
                    "special_bonus": res["special_bonus"],
                    "max_score": res["max_score"],
                    "special_words": " ".join(res["special_words"]),
                    "all_words": " ".join(res["all_words"]),
                })
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and word-list validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (puzzles, dictionary, dialect, outdir)
      - wordlist: output of datasets.validate_wordlist(...)
      - num_puzzles, num_errors
    """
    return write_json(manifest, path)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
