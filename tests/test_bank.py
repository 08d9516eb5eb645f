import logging
from collections import Counter
from pathlib import Path
from wordcraze.game.models import Vocabulary
from wordcraze.words.bank import Dictionary, validate_vocabulary

DATA_FILE = str(Path(__file__).parent.parent / "data" / "words_en.json")

def test_insert_indexes_every_prefix():
    dictionary = Dictionary()
    dictionary.insert("camel")

    for prefix in ["", "c", "ca", "cam", "came", "camel"]:
        assert dictionary.lookup_prefix(prefix) == ["camel"]
    assert dictionary.lookup_prefix("cb") == []
    assert dictionary.contains_exact("camel", 5)
    assert not dictionary.contains_exact("camel", 4)

def test_prefix_bucket_holds_words_of_different_lengths():
    dictionary = Dictionary(["cam", "came", "camel", "cat"])

    assert sorted(dictionary.lookup_prefix("ca")) == ["cam", "came", "camel", "cat"]
    assert sorted(dictionary.lookup_prefix("cam")) == ["cam", "came", "camel"]
    for prefix in ["", "ca", "cam"]:
        assert all(w.startswith(prefix) for w in dictionary.lookup_prefix(prefix))

def test_insert_ignores_empty_and_non_string_values():
    dictionary = Dictionary()
    for junk in [None, "", 42, ["abc"]]:
        dictionary.insert(junk)

    assert len(dictionary) == 0
    assert dictionary.lookup_prefix("") == []

def test_insert_is_idempotent_and_case_insensitive():
    dictionary = Dictionary(["Apple", "apple", "APPLE"])

    assert len(dictionary) == 1
    assert dictionary.lookup_prefix("app") == ["apple"]
    assert dictionary.contains_exact("apple", 5)

def test_lookup_prefix_returns_a_copy():
    dictionary = Dictionary(["cat"])
    dictionary.lookup_prefix("c").append("cow")

    assert dictionary.lookup_prefix("c") == ["cat"]

def test_from_vocabulary_skips_malformed_entries():
    vocabulary = Vocabulary(threes=["cat", "cats", 7, None], fours=["cake", "ca"], fives=["crane"])
    dictionary = Dictionary.from_vocabulary(vocabulary)

    assert dictionary.words_of_length(3) == ("cat",)
    assert dictionary.words_of_length(4) == ("cake",)
    assert dictionary.words_of_length(5) == ("crane",)
    assert not dictionary.contains_exact("cats", 4)
    assert not dictionary.contains_exact("ca", 2)

def test_validate_vocabulary_reports_every_problem():
    vocabulary = Vocabulary(threes=["cat", "cat", "cats"], fours=["cake", 3], fives=["crane"])
    report = validate_vocabulary(vocabulary)

    assert not report.ok
    assert report.duplicates == {3: ["cat"]}
    assert report.wrong_length == {3: ["cats"]}
    assert report.non_strings == {4: [3]}
    assert report.problem_count() == 3

def test_validate_vocabulary_counts_duplicates_case_insensitively():
    vocabulary = Vocabulary(threes=["Cat", "cat"], fives=["apple"])
    report = validate_vocabulary(vocabulary)

    assert not report.ok
    assert report.duplicates == {3: ["cat"]}
    assert Dictionary.from_vocabulary(vocabulary).words_of_length(3) == ("cat",)

def test_validate_vocabulary_logs_one_warning(caplog):
    vocabulary = Vocabulary(threes=["cat", "cat", "cats"], fours=[None], fives=["apple"])
    with caplog.at_level(logging.WARNING, logger="wordcraze.words.bank"):
        validate_vocabulary(vocabulary)

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "3 problem(s)" in warnings[0].getMessage()

def test_clean_vocabulary_logs_no_warning(caplog, small_vocabulary):
    with caplog.at_level(logging.WARNING, logger="wordcraze.words.bank"):
        validate_vocabulary(small_vocabulary)

    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]

def test_validate_vocabulary_accepts_clean_lists(small_vocabulary):
    assert validate_vocabulary(small_vocabulary).ok

def test_shipped_vocabulary_lengths_and_uniqueness(vocabulary):
    for length, entries in vocabulary.categories().items():
        assert entries
        assert all(isinstance(w, str) and len(w) == length for w in entries)
        assert not [w for w, n in Counter(entries).items() if n > 1]

    assert validate_vocabulary(vocabulary).ok

def test_shipped_vocabulary_index(dictionary, vocabulary):
    total = len(vocabulary.threes) + len(vocabulary.fours) + len(vocabulary.fives)

    assert len(dictionary) == total
    assert len(dictionary.lookup_prefix("")) == total
    assert dictionary.contains_exact("apple", 5)
    assert dictionary.contains_exact("leap", 4)
    assert dictionary.contains_exact("pea", 3)

def test_from_file_builds_the_shipped_dictionary(dictionary):
    loaded = Dictionary.from_file(DATA_FILE)

    assert len(loaded) == len(dictionary)
    assert loaded.words_of_length(5) == dictionary.words_of_length(5)
    assert loaded.lookup_prefix("appl") == dictionary.lookup_prefix("appl")
