from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional

logger = logging.getLogger(__name__)

# Candidate system word lists per dialect, first existing path wins.
DICTIONARY_PATHS: Dict[str, List[str]] = {
    "default": ["/usr/share/dict/american-english", "/usr/share/dict/words"],
    "alternate": ["/usr/share/dict/british-english"],
}
DICT_ENV_VAR = "BEESOLVER_DICT"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def iter_words(p: Path | str) -> Iterator[str]:
    """
    Stream a word file one line at a time: stripped, lower-cased, blanks
    skipped. Undecodable bytes are ignored rather than failing the scan.
    """
    p = Path(p)
    with p.open("r", encoding="utf-8", errors="ignore") as f:
        for line in f:
            w = line.strip().lower()
            if w:
                yield w


def resolve_dictionary(dialect: str = "default", override: Optional[str] = None) -> Path:
    """
    Pick the word list to use.

    Precedence: explicit `override` path, then $BEESOLVER_DICT, then the
    first existing system path for `dialect`.
    """
    if dialect not in DICTIONARY_PATHS:
        raise ValueError(f"Unknown dialect: {dialect}. Available: {sorted(DICTIONARY_PATHS)}")

    explicit = override or os.environ.get(DICT_ENV_VAR)
    if explicit:
        p = Path(explicit)
        if not p.exists():
            raise FileNotFoundError(p)
        return p

    for cand in DICTIONARY_PATHS[dialect]:
        p = Path(cand)
        if p.exists():
            logger.info("using %s dictionary %s", dialect, p)
            return p
    raise FileNotFoundError(
        f"No {dialect} dictionary found (tried {', '.join(DICTIONARY_PATHS[dialect])}); "
        f"pass --dict or set {DICT_ENV_VAR}"
    )
