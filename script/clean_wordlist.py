"""
Turn a raw dictionary file into a clean puzzle word list.

Features:
- Lower-cases every entry.
- Drops capitalized entries (proper nouns) unless --keep-proper is given.
- Drops anything that is not purely a–z (possessives, accents, digits, blanks).
- Removes duplicates, preserving original order by default (stable dedupe).
- Optional sorting AFTER dedupe (alphabetical); otherwise keep input order.
- Overwrite in place by default, or write to a separate --out path.

Usage:
    python -m script.clean_wordlist --in /usr/share/dict/words --out data/words.txt
"""

import argparse
import re
from pathlib import Path

from packages.datasets.io import read_lines, write_lines

_WORD_RE = re.compile(r"^[a-z]+$")


def unique_preserve_order(lines: list[str]) -> list[str]:
    seen, out = set(), []
    for s in lines:
        if s not in seen:
            seen.add(s)
            out.append(s)
    return out


def clean(lines: list[str], keep_proper: bool = False) -> list[str]:
    out = []
    for raw in lines:
        s = raw.strip()
        if not s:
            continue
        if not keep_proper and s[0].isupper():
            continue
        s = s.lower()
        if _WORD_RE.match(s):
            out.append(s)
    return unique_preserve_order(out)


def main():
    ap = argparse.ArgumentParser(description="Clean a dictionary file into a puzzle word list.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--keep-proper", action="store_true", help="keep capitalized entries (lower-cased)")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe (otherwise keep original order)")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    lines = read_lines(inp)
    out = clean(lines, keep_proper=args.keep_proper)
    if args.sort:
        out = sorted(out)

    write_lines(out, outp)
    print(f"Input: {inp} ({len(lines)} lines) -> Output: {outp} ({len(out)} words)")


if __name__ == "__main__":
    main()
