import string

import pytest

from cipherlab.alphabet import EnglishAlphabet, get_english_alphabet
from cipherlab.tools import square_sum


@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("the 100\nof 90\nand 80\nthere 70\nother 60\nbreak 50\n")
    return path


def test_probabilities_cover_alphabet():
    probs = EnglishAlphabet().probabilities()
    assert len(probs) == 26
    assert sum(probs) == pytest.approx(1.0, abs=0.01)


def test_square_sum_matches_tools():
    alphabet = EnglishAlphabet()
    assert alphabet.probabilities_square_sum() == pytest.approx(
        square_sum(alphabet.probabilities())
    )


def test_sorted_labeled_is_descending_and_starts_with_e():
    labeled = EnglishAlphabet().sorted_probabilities_labeled()
    assert labeled[0] == (0.127, "e")
    probs = [p for p, _ in labeled]
    assert probs == sorted(probs, reverse=True)
    assert sorted(letter for _, letter in labeled) == list(string.ascii_lowercase)


def test_letter_prob_dict_matches_probabilities():
    alphabet = EnglishAlphabet()
    mapping = alphabet.letter_prob_dict()
    assert mapping["e"] == 0.127
    assert [mapping[c] for c in string.ascii_lowercase] == list(alphabet.probabilities())


def test_words_count_reads_file(words_file):
    alphabet = EnglishAlphabet(words_file)
    words = alphabet.words_count()
    assert words[0] == ("the", 100)
    assert len(words) == 6


def test_words_count_stops_at_malformed_pair(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("the 100\nof many\nand 80\n")
    assert list(EnglishAlphabet(path).words_count()) == [("the", 100)]


def test_words_count_missing_file(tmp_path):
    alphabet = EnglishAlphabet(tmp_path / "missing.txt")
    with pytest.raises(FileNotFoundError):
        alphabet.words_count()


def test_find_words_pattern_and_limit(words_file):
    alphabet = EnglishAlphabet(words_file)
    assert alphabet.find_words("the") == [
        (0, 100, "the"),
        (3, 70, "there"),
        (4, 60, "other"),
    ]
    assert alphabet.find_words("the", max_matches=1) == [(0, 100, "the")]


def test_find_words_predicate(words_file):
    alphabet = EnglishAlphabet(words_file)
    result = alphabet.find_words("^.*$", lambda w: w.startswith("b"), 0)
    assert result == [(5, 50, "break")]


def test_get_english_alphabet_is_shared():
    first = get_english_alphabet()
    second = get_english_alphabet()
    assert id(first) == id(second)
    assert first.letter_prob_dict()["e"] == 0.127
    assert first.sorted_probabilities_labeled()[0] == (0.127, "e")