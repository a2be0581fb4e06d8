import pytest

from nearfacsimile.metrics import jaro, normalized_levenshtein, trigram_similarity

SAMPLES = [
    ("kitten", "sitting"),
    ("martha", "marhta"),
    ("hello world", "hello there world"),
    ("abc", ""),
    ("Some documentation text.", "Some other documentation text."),
]


@pytest.mark.parametrize("text", ["a", "hello world", "Line one.\nLine two.\n"])
def test_identical_strings_are_fully_similar(text):
    assert normalized_levenshtein(text, text) == 1.0
    assert jaro(text, text) == 1.0
    assert trigram_similarity(text, text) == 1.0


@pytest.mark.parametrize(("a", "b"), SAMPLES)
def test_levenshtein_is_symmetric_and_bounded(a, b):
    forward = normalized_levenshtein(a, b)
    assert forward == pytest.approx(normalized_levenshtein(b, a))
    assert 0.0 <= forward <= 1.0


@pytest.mark.parametrize(("a", "b"), SAMPLES)
def test_jaro_is_symmetric_and_bounded(a, b):
    forward = jaro(a, b)
    assert forward == pytest.approx(jaro(b, a))
    assert 0.0 <= forward <= 1.0


@pytest.mark.parametrize(("a", "b"), SAMPLES)
def test_trigram_is_symmetric_and_bounded(a, b):
    forward = trigram_similarity(a, b)
    assert forward == pytest.approx(trigram_similarity(b, a))
    assert 0.0 <= forward <= 1.0


def test_empty_strings_levenshtein():
    assert normalized_levenshtein("", "") == 1.0
    assert normalized_levenshtein("abc", "") == 0.0
    assert normalized_levenshtein("", "abc") == 0.0


def test_empty_strings_jaro():
    assert jaro("", "") == 1.0
    assert jaro("abc", "") == 0.0
    assert jaro("", "abc") == 0.0


def test_levenshtein_kitten_sitting():
    assert normalized_levenshtein("kitten", "sitting") == pytest.approx(1 - 3 / 7)


def test_jaro_classic_example():
    assert jaro("martha", "marhta") == pytest.approx(0.944, abs=1e-3)


def test_jaro_no_common_characters():
    assert jaro("abc", "xyz") == 0.0


def test_trigram_disjoint_words():
    assert trigram_similarity("abc", "xyz") == 0.0


def test_trigram_partial_overlap_is_between_bounds():
    value = trigram_similarity("hello world", "hello there")
    assert 0.0 < value < 1.0


def test_trigram_ignores_punctuation_between_words():
    assert trigram_similarity("hello, world!", "hello world") == 1.0


def test_more_edits_lower_levenshtein():
    base = "the quick brown fox"
    close = normalized_levenshtein(base, "the quick brown fax")
    far = normalized_levenshtein(base, "the slow green cat")
    assert close > far