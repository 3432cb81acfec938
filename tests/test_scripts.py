from script.clean_wordlist import clean, unique_preserve_order
from script.fetch_wordlist import extract_words


def test_clean_drops_proper_nouns_and_junk():
    lines = ["Apple", "apple", "cat's", "Zebra", "zebra", " ", "café", "apple"]
    assert clean(lines) == ["apple", "zebra"]
    assert clean(lines, keep_proper=True) == ["apple", "zebra"]
    assert clean(["Zebra"], keep_proper=True) == ["zebra"]


def test_unique_preserve_order():
    assert unique_preserve_order(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]


def test_extract_words_from_text():
    text = "The cat's hat and the hat, a dog."
    assert extract_words(text) == ["hat", "and", "the", "dog"]
