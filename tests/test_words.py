import random

import pytest

from typedrill import words
from typedrill.errors import ValidationError
from typedrill.stats import TrigramScore
from typedrill.words import from_file, load_words, random_words, trigram_words, weak_words

WORDS = ["then", "other", "cat", "dog", "weather", "bird"]


def write(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return str(path)


def test_load_words_from_wordfreq(monkeypatch):
    monkeypatch.setattr(words, "top_n_list", lambda lang, n: ["the", "a", "hello", "it's", "42nd"])
    assert load_words() == ["the", "hello"]


def test_load_words_from_file(tmp_path):
    filename = write(tmp_path, "words.txt", "alpha\n\n  beta \ngamma\n")
    assert load_words(filename) == ["alpha", "beta", "gamma"]


def test_load_words_empty_file(tmp_path):
    with pytest.raises(ValidationError):
        load_words(write(tmp_path, "empty.txt", "\n\n"))


def test_load_words_missing_file(tmp_path):
    with pytest.raises(ValidationError):
        load_words(str(tmp_path / "nope.txt"))


def test_random_words():
    text = random_words(WORDS, 25, random.Random(5))
    picked = text.split(" ")
    assert len(picked) == 25
    assert set(picked) <= set(WORDS)


def test_random_words_needs_one():
    with pytest.raises(ValidationError):
        random_words(WORDS, 0)


def test_trigram_words():
    patterns = trigram_words(["eerie", "teeth"])
    assert patterns["eer"] == ["eerie"]
    assert patterns["tee"] == ["teeth"]


def test_weak_words_prefer_weak_trigrams():
    trigrams = [TrigramScore("the", 5.0), TrigramScore("zzz", 1.0)]
    picked = weak_words(trigrams, WORDS, 2, random.Random(1)).split(" ")
    assert len(picked) == 2
    assert set(picked) <= {"then", "other", "weather"}


def test_weak_words_fall_back_to_all_words():
    picked = weak_words([TrigramScore("qqq", 1.0)], WORDS, 10, random.Random(1)).split(" ")
    assert sorted(picked) == sorted(WORDS)


def test_from_file(tmp_path):
    filename = write(tmp_path, "book.txt", "one\ntwo\n three \nfour\n")
    assert from_file(filename) == ("one\ntwo\nthree\nfour", 0)
    assert from_file(filename, offset = 1, min_length = 6) == ("two\nthree", 4)


def test_from_file_past_end(tmp_path):
    filename = write(tmp_path, "book.txt", "one\ntwo\n")
    with pytest.raises(ValidationError):
        from_file(filename, offset = 5)
