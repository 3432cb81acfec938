import logging

import pytest
from packages.engine import (build_alphabet, build_puzzle, normalize_letters, parse_min_length,
                             filter_words, is_match, is_special, score_word, score_matches,
                             validate_word, EmptyLetterSetError, InvalidMinLengthError,
                             GAME_MIN_WORD_LENGTH, DEFAULT_MIN_WORD_LENGTH)
from packages.engine.alphabet import expand_ranges
from packages.engine.constraints import narrow_by_must_use

# --- letter expressions ---
@pytest.mark.parametrize("raw,expected", [
    ("oavtle", "oavtle"),
    ("OAVTLE", "oavtle"),
    ("[a-d]", "abcd"),
    ("[d-a]", "abcd"),
    ("[a-i]k[l-n]", "abcdefghiklmn"),
    ("oy[r-v]", "oyrstuv"),
    ("g g 1 g", "g"),
    ("[A-C]x", "abcx"),
    ("[a-", "a"),
])
def test_normalize_letters(raw, expected):
    assert normalize_letters(raw) == expected

@pytest.mark.parametrize("x,y", [("a", "d"), ("m", "m"), ("z", "a"), ("c", "x")])
def test_range_direction_is_irrelevant(x, y):
    assert set(expand_ranges(f"[{x}-{y}]")) == set(expand_ranges(f"[{y}-{x}]"))

@pytest.mark.parametrize("raw", ["[a-i]k[l-n]", "OY[r-v]", "zzyx", "[0-9]ab"])
def test_normalize_is_idempotent(raw):
    once = normalize_letters(raw)
    assert normalize_letters(once) == once

def test_build_alphabet_orders_may_use_first():
    may, must, alpha, m = build_alphabet("oavtle", "g", "4")
    assert (may, must, alpha, m) == ("oavtle", "g", "oavtleg", 4)
    _, _, alpha, _ = build_alphabet("abc", "cad", None)
    assert alpha == "abcd"

def test_build_alphabet_ranges():
    may, must, alpha, _ = build_alphabet("[a-i]", "oy[r-v]")
    assert may == "abcdefghi"
    assert set(must) == set("orstuvy")
    assert alpha == may + must

@pytest.mark.parametrize("may,must,side", [
    ("", "g", "may-use"),
    ("123 []", "g", "may-use"),
    ("abc", "!!", "must-use"),
])
def test_empty_letter_set_rejected(may, must, side):
    with pytest.raises(EmptyLetterSetError) as ei:
        build_alphabet(may, must)
    assert ei.value.side == side

@pytest.mark.parametrize("raw", ["abc", "0", "-3", "", "4.5", "²", "①", True])
def test_invalid_min_length(raw):
    with pytest.raises(InvalidMinLengthError):
        parse_min_length(raw)

def test_min_length_default_and_clamp(caplog):
    assert parse_min_length(None) == DEFAULT_MIN_WORD_LENGTH
    assert parse_min_length(" 6 ") == 6
    with caplog.at_level(logging.WARNING):
        assert parse_min_length("1") == GAME_MIN_WORD_LENGTH
    assert any("game minimum" in r.getMessage() for r in caplog.records)

# --- filtering ---
def test_filter_voltage_scenario():
    fr = filter_words(["voltage", "vote"], "oavtleg", "g", 4)
    assert fr.matches == ["voltage"]
    assert fr.specials == ["voltage"]
    assert fr.no_matches is False

def test_filter_keeps_order_and_duplicates():
    fr = filter_words(["vote\n", "Vote", "toe", "eve"], "otev", "t", 3)
    assert fr.matches == ["vote", "vote", "toe"]
    assert fr.specials == ["vote", "vote"]

def test_filter_range_scenario():
    _, must, alpha, m = build_alphabet("[a-i]", "oy[r-v]")
    fr = filter_words(["virtuosity", "voyeuristic", "story", "zesty"], alpha, must, m)
    assert fr.matches == ["virtuosity", "voyeuristic"]
    assert fr.specials == []

def test_filter_no_matches_is_a_result():
    fr = filter_words(["voltage", "vote"], "oavtleq", "q", 4)
    assert fr.no_matches is True
    assert fr.exhausted_at == "q"
    assert fr.matches == [] and fr.specials == []

def test_filter_no_candidates_at_all():
    fr = filter_words(["xyz", ""], "abc", "a", 2)
    assert fr.no_matches is True and fr.exhausted_at is None

def test_must_use_narrowing_is_monotonic():
    words = ["gloat", "legato", "voltage", "gavel", "vote", "total"]
    steps = list(narrow_by_must_use(words, "gatv"))
    prev = set(words)
    for _, remaining in steps:
        assert set(remaining) <= prev
        prev = set(remaining)
    assert steps[-1][1] == ["voltage"]

def test_must_use_narrowing_stops_when_empty():
    steps = list(narrow_by_must_use(["abc", "abd"], "axyz"))
    assert [letter for letter, _ in steps] == ["a", "x"]

def test_is_match_and_is_special():
    assert is_match("voltage", "oavtleg", "g", 4)
    assert not is_match("vote", "oavtleg", "g", 4)
    assert not is_match("gat", "oavtleg", "g", 4)
    assert is_special("voltage", "oavtleg")
    assert not is_special("gloat", "oavtleg")

# --- scoring ---
@pytest.mark.parametrize("word,expected", [("cat", 0), ("cats", 1), ("tacos", 5)])
def test_score_boundary(word, expected):
    assert score_word(word, 4) == expected

def test_special_bonus_adds_to_length_score():
    assert score_word("voltage", 4, special=True) == 14
    assert score_word("abcd", 4, special=True) == 8

def test_score_matches_totals():
    matches = ["voltage", "gloat", "gave"]
    word_scores, bonus, total = score_matches(matches, ["voltage"], 4)
    assert word_scores == [("voltage", 7), ("gloat", 5), ("gave", 1)]
    assert bonus == 7
    assert total == 7 + 5 + 1 + 7

# --- entry validation ---
def test_validate_word():
    puzzle = build_puzzle("oavtle", "g")
    assert validate_word("Voltage", puzzle) is True
    assert validate_word("vote", puzzle) is False
    assert validate_word("gavel", puzzle, allowed=["voltage"]) is False
    assert validate_word("gavel", puzzle, allowed=["Gavel\n"]) is True
    assert validate_word(123, puzzle) is False
