# apps/cli/run_multi.py
"""
Solve many puzzles in one shot against a shared dictionary, with progress.

Puzzles come from a CSV with header `may_use,must_use[,min_length]`.
Writes: <outdir>/run_<timestamp>.csv + run_<timestamp>_manifest.json
"""

from __future__ import annotations
import argparse, logging, sys, time
from pathlib import Path
from typing import Iterable

from tqdm import tqdm

from packages.datasets import validate_wordlist, pretty_summary, iter_words, resolve_dictionary
from packages.engine.masks import WordMasks
from packages.harness import run_batch, read_puzzles
from packages.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown


def _progress_mode(mode: str) -> str:
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def _plain_progress(rows: list) -> Iterable:
    """Yield rows while writing a once-per-second status line to stderr."""
    total = len(rows)
    start = time.time()
    last_print = 0.0
    for idx, row in enumerate(rows, 1):
        yield row
        now = time.time()
        if (now - last_print >= 1.0) or (idx == total):
            elapsed = now - start
            rate = (idx / elapsed) if elapsed > 0 else 0.0
            remaining = (total - idx) / rate if rate > 0 else 0.0
            pct = 100.0 * idx / max(1, total)
            sys.stderr.write(
                f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s")
            sys.stderr.flush()
            last_print = now
    sys.stderr.write("\n")
    sys.stderr.flush()


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="beesolver: solve a batch of puzzles")
    ap.add_argument("--puzzles", required=True, help="CSV with may_use,must_use[,min_length]")
    ap.add_argument("--dialect", choices=["default", "alternate"], default="default")
    ap.add_argument("--dict", dest="dict_path", help="explicit word list path")
    ap.add_argument("--outdir", default="reports/batch")
    ap.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    # 1) locate + validate the word list once
    try:
        dict_path = resolve_dictionary(args.dialect, args.dict_path)
    except FileNotFoundError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    rep = validate_wordlist(str(dict_path))
    print(pretty_summary(rep))

    # 2) load puzzles and build masks once
    puzzles = read_puzzles(args.puzzles)
    masks = WordMasks(iter_words(dict_path))

    # 3) solve with progress
    mode = _progress_mode(args.progress)
    if mode == "bar":
        progress = lambda rows: tqdm(rows, ncols=80, desc="Solving", unit="puzzle")
    elif mode == "plain":
        progress = _plain_progress
    else:
        progress = None
    rows = run_batch(puzzles, masks, progress=progress)

    # 4) write outputs
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(rows, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "num_puzzles": len(rows),
        "num_errors": sum(1 for r in rows if r["error"]),
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
