from pathlib import Path

import pytest
from packages.datasets import validate_wordlist, pretty_summary, iter_words, resolve_dictionary
from packages.datasets.io import DICT_ENV_VAR


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlist_happy_path(tmp_path: Path):
    words = tmp_path / "words.txt"
    _write(words, ["gloat", "legato", "voltage"])

    rep = validate_wordlist(str(words))
    assert rep["passed"] is True
    assert rep["count"] == 3 and rep["unique_count"] == 3
    assert rep["issues"] == []
    s = pretty_summary(rep)
    assert "count=3" in s and s.endswith("OK")


def test_validate_wordlist_flags_issues(tmp_path: Path):
    words = tmp_path / "words.txt"
    words.write_text("apple\nApple\ncat's\n\nbanana\napple\n", encoding="utf-8")

    rep = validate_wordlist(str(words))
    assert rep["count"] == 4
    assert rep["unique_count"] == 2
    assert rep["invalid_lines"] == 2
    assert rep["proper_nouns"] == 1
    assert rep["passed"] is True
    assert any("duplicate" in msg for msg in rep["issues"])
    assert any("invalid" in msg for msg in rep["issues"])


def test_validate_wordlist_missing_file(tmp_path: Path):
    rep = validate_wordlist(str(tmp_path / "nope.txt"))
    assert rep["exists"] is False and rep["passed"] is False
    assert "FAIL" in pretty_summary(rep)


def test_iter_words_streams_normalized(tmp_path: Path):
    words = tmp_path / "words.txt"
    words.write_text("Voltage\r\n\n  vote \n", encoding="utf-8")
    assert list(iter_words(words)) == ["voltage", "vote"]


def test_resolve_dictionary(tmp_path: Path, monkeypatch):
    words = tmp_path / "words.txt"
    _write(words, ["vote"])
    monkeypatch.delenv(DICT_ENV_VAR, raising=False)
    assert resolve_dictionary("default", str(words)) == words

    monkeypatch.setenv(DICT_ENV_VAR, str(words))
    assert resolve_dictionary("alternate") == words

    with pytest.raises(ValueError):
        resolve_dictionary("klingon")
    with pytest.raises(FileNotFoundError):
        resolve_dictionary("default", str(tmp_path / "missing.txt"))


def test_line_helpers_are_exported(tmp_path: Path):
    import packages.datasets as datasets
    assert {"read_lines", "write_lines"} <= set(datasets.__all__)
    p = datasets.write_lines(["vote", "gloat"], tmp_path / "sub" / "w.txt")
    assert datasets.read_lines(p) == ["vote", "gloat"]
