"""
Download a word list and write a clean one-word-per-line file.

What it does:
- Downloads the given URL.
- Plain-text responses are used as-is; HTML pages are reduced to their
  visible text first.
- Keeps lowercase-able a–z tokens, drops capitalized ones (proper nouns),
  de-duplicates while preserving source order, and writes to file.

Usage:
    python -m script.fetch_wordlist --url https://example.org/words.txt --out data/words.txt
    # or alphabetically sorted:
    python -m script.fetch_wordlist --url ... --sort --out data/words.txt
"""

import argparse
import re

import requests
from bs4 import BeautifulSoup

from packages.datasets.io import write_lines
from script.clean_wordlist import unique_preserve_order

TOKEN_RE = re.compile(r"[A-Za-z]+(?:'[A-Za-z]+)?")


def extract_words(text: str, min_length: int = 2) -> list[str]:
    words = []
    for m in TOKEN_RE.finditer(text):
        tok = m.group(0)
        if "'" in tok or tok[0].isupper() or len(tok) < min_length:
            continue
        words.append(tok)
    return unique_preserve_order(words)


def fetch_words(url: str, min_length: int = 2) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    text = r.text
    if "html" in r.headers.get("Content-Type", ""):
        soup = BeautifulSoup(text, "html.parser")
        text = soup.get_text("\n", strip=True)
    return extract_words(text, min_length=min_length)


def main():
    ap = argparse.ArgumentParser(description="Fetch a word list over HTTP")
    ap.add_argument("--url", required=True)
    ap.add_argument("--out", default="data/words.txt")
    ap.add_argument("--min-length", type=int, default=2)
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "source order")
    args = ap.parse_args()

    words = fetch_words(args.url, min_length=args.min_length)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} words -> {args.out}")


if __name__ == "__main__":
    main()
