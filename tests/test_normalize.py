import pytest

from utils.normalize import NoAlternatives, is_equivalent, normalize_answer, resolve_alternatives


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Hola!", "hola"),
        ("  Buenos   días. ", "buenos días"),
        ("¿Qué tal?", "¿qué tal"),
        ("el amigo (m)", "el amigo"),
        ("(f) la amiga", "la amiga"),
        ("friend male", "friend"),
        ("friend Female", "friend"),
        ("friend male female", "friend"),
        ("friend male .", "friend"),
        ("friend male (m)", "friend"),
        ("male", "male"),
        ("female friend", "female friend"),
    ],
)
def test_cleaning(raw, expected):
    assert normalize_answer(raw, "Family") == expected


def test_number_spellings_share_one_form():
    forms = {normalize_answer(raw, "Numbers") for raw in ("18", "eighteen", "dieciocho", "Dieci Ocho", "diez y ocho")}
    assert forms == {"dieciocho"}


def test_misrecognitions_collapse_onto_the_spoken_word():
    assert normalize_answer("dose", "Numbers") == normalize_answer("dos", "Numbers") == "dos"
    assert normalize_answer("trace", "Numbers") == "tres"
    assert normalize_answer("vente", "Numbers") == "veinte"
    assert normalize_answer("dieciseis", "Numbers") == "dieciséis"


def test_numbers_outside_the_lexicon_fall_through():
    assert normalize_answer("25", "Numbers") == "25"
    assert normalize_answer("veintiuno", "Numbers") == "veintiuno"


def test_other_categories_prefer_digits():
    assert normalize_answer("dos", "Greetings") == "2"
    assert normalize_answer("Two", "Greetings") == "2"
    assert normalize_answer("2", "Greetings") == "2"
    assert normalize_answer("hola", "Greetings") == "hola"
    assert normalize_answer("dos", None) == "2"


@pytest.mark.parametrize("category", ["Numbers", "Greetings", None])
@pytest.mark.parametrize(
    "raw",
    [
        "18", "eighteen", "dose", "dos", "2", "Hola!", " (m) amigo ", "friend male",
        "friend male female", "friend male .", "(m) male", "male male", "dieci seis", "25", "",
    ],
)
def test_normalization_is_idempotent(raw, category):
    once = normalize_answer(raw, category)
    assert normalize_answer(once, category) == once


def test_equivalence_uses_the_card_category():
    assert is_equivalent("18", "dieciocho", "Numbers")
    assert is_equivalent("two", "2", "Colors")
    assert not is_equivalent("rojo", "azul", "Colors")


def test_speech_picks_first_matching_alternative():
    assert resolve_alternatives(["dose", "doce", "trace"], "dos", "Numbers") == "dose"


def test_speech_spells_matched_numbers_in_the_answer_language():
    assert resolve_alternatives(["dose", "doce"], "dos", "Numbers", language="es") == "dos"
    assert resolve_alternatives(["too", "2"], "two", "Numbers", language="en") == "two"


def test_speech_falls_back_to_most_likely_alternative():
    assert resolve_alternatives(["ola", "hora"], "hola", "Greetings") == "ola"


def test_speech_matches_ignore_punctuation_and_case():
    assert resolve_alternatives(["Hola!", "ola"], "hola", "Greetings") == "Hola!"


def test_speech_without_alternatives_asks_to_retry():
    with pytest.raises(NoAlternatives):
        resolve_alternatives([], "hola", "Greetings")
