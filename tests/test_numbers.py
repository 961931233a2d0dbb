import pytest

from utils.numbers import DIGIT_WORDS, NUMBER_WORDS, digit_to_word, word_in_language, word_to_digit


def test_every_digit_has_a_canonical_word():
    assert set(DIGIT_WORDS) == {str(n) for n in range(1, 21)}


def test_canonical_words_are_spanish_and_not_misrecognitions():
    assert digit_to_word("1") == "uno"
    assert digit_to_word("2") == "dos"
    assert digit_to_word("6") == "seis"
    assert digit_to_word("16") == "dieciséis"
    assert digit_to_word("20") == "veinte"


def test_reverse_mapping_round_trips():
    for digit, word in DIGIT_WORDS.items():
        assert word_to_digit(word) == digit


def test_variants_map_to_digits():
    assert word_to_digit("dose") == "2"
    assert word_to_digit("sais") == "6"
    assert word_to_digit("dies") == "10"
    assert word_to_digit("diez y nueve") == "19"
    assert word_to_digit("un") == "1"
    assert word_to_digit("twenty-one") is None


def test_language_spellings():
    assert word_in_language("3", "en") == "three"
    assert word_in_language("3", "es") == "tres"
    assert word_in_language("21", "en") is None
    assert word_in_language("3", "fr") is None


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        NUMBER_WORDS["veintiuno"] = "21"
    with pytest.raises(TypeError):
        DIGIT_WORDS["2"] = "two"
