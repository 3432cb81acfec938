# apps/cli/run.py
"""
CLI entry point for solving one Spelling Bee style puzzle.

This script:
  1) Builds the puzzle letters (fails fast on bad input, before any scan).
  2) Locates the dictionary for the chosen dialect (or --dict).
  3) Streams the dictionary through the filter, scores the matches and
     prints the report; optionally writes the result as JSON.

Examples:
    python -m apps.cli.run -m oavtle -M g
    python -m apps.cli.run -m "[a-i]" -M "oy[r-v]" -l 5 --dialect alternate
    python -m apps.cli.run -m oavtle -M g --check voltage
"""

from __future__ import annotations

import argparse
import logging
import sys

from packages.datasets import iter_words, resolve_dictionary
from packages.engine import BeeError, build_puzzle, validate_word, score_word, is_special
from packages.harness import ANSI, PLAIN, print_report, solve, write_json

EXIT_OK = 0
EXIT_NO_DICTIONARY = 1
EXIT_BAD_INPUT = 2


def parse_args(argv=None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="beesolver: find every word in a letter puzzle")
    ap.add_argument("-m", "--may-use", required=True,
                    help='letters a word may use, ranges allowed, e.g. "oavtle" or "[a-i]"')
    ap.add_argument("-M", "--must-use", required=True,
                    help='letters every word must contain, e.g. "g" or "oy[r-v]"')
    ap.add_argument("-l", "--min-length", default=None,
                    help="minimum word length (default: 4, never below 2)")
    ap.add_argument("--dialect", choices=["default", "alternate"], default="default",
                    help="which system word list to use")
    ap.add_argument("--dict", dest="dict_path", help="explicit word list path (one word per line)")
    ap.add_argument("--color", choices=["auto", "always", "never"], default="auto")
    ap.add_argument("-q", "--quiet", action="store_true", help="omit the alphabet summary")
    ap.add_argument("--json", dest="json_path", help="also write the result as JSON here")
    ap.add_argument("--check", metavar="WORD",
                    help="only check whether WORD counts in this puzzle and print its score")
    ap.add_argument("-v", "--verbose", action="store_true", help="log progress to stderr")
    return ap.parse_args(argv)


def _palette(mode: str):
    if mode == "always" or (mode == "auto" and sys.stdout.isatty()):
        return ANSI
    return PLAIN


def _check(word: str, puzzle, dict_path) -> int:
    w = word.strip().lower()
    if validate_word(w, puzzle, iter_words(dict_path)):
        pts = score_word(w, puzzle.min_word_length, special=is_special(w, puzzle.alphabet))
        print(f"{w}: valid, {pts} point{'s' if pts != 1 else ''}")
    else:
        print(f"{w}: not valid")
    return EXIT_OK


def main(argv=None) -> int:
    """
    Parse CLI args, solve the puzzle, print the report. Returns the exit code.
    """
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Validate letters before looking for (or reading) any dictionary
    try:
        puzzle = build_puzzle(args.may_use, args.must_use, args.min_length)
    except BeeError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    try:
        dict_path = resolve_dictionary(args.dialect, args.dict_path)
    except FileNotFoundError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_NO_DICTIONARY

    if args.check:
        return _check(args.check, puzzle, dict_path)

    # letters are already normalized; rebuilding them inside solve() is a no-op
    result = solve(puzzle.may_use, puzzle.must_use, iter_words(dict_path),
                   puzzle.min_word_length)
    print_report(result, palette=_palette(args.color), show_alphabet=not args.quiet)

    if args.json_path:
        print(f"Wrote: {write_json(result.to_dict(), args.json_path)}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
