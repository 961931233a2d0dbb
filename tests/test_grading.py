import pytest

from utils.grading import answer_similarity, check_answer, suggest_grade
from utils.scheduler import Grade

CONFIG = {
    "grading": {
        "easy_threshold_ms": 8000,
        "good_threshold_ms": 30000,
        "near_miss_threshold": 0.85,
    }
}


@pytest.mark.parametrize(
    "is_correct, response_ms, expected",
    [
        (False, 1000, Grade.AGAIN),
        (True, 7999, Grade.EASY),
        (True, 8000, Grade.GOOD),
        (True, 29999, Grade.GOOD),
        (True, 30000, Grade.HARD),
        (True, None, Grade.GOOD),
    ],
)
def test_suggest_grade_thresholds(is_correct, response_ms, expected):
    assert suggest_grade(is_correct, response_ms, CONFIG) is expected


def test_check_answer_marks_equivalent_numbers_correct():
    result = check_answer("18", "dieciocho", "Numbers", 5000, CONFIG)
    assert result["correct"] is True
    assert result["similarity"] == 1.0
    assert result["near_miss"] is False
    assert result["suggested_grade"] is Grade.EASY


def test_check_answer_flags_typos_as_near_misses():
    result = check_answer("helo", "hello", "Greetings", 5000, CONFIG)
    assert result["correct"] is False
    assert result["near_miss"] is True
    assert result["suggested_grade"] is Grade.AGAIN


def test_check_answer_wrong_word_is_not_a_near_miss():
    result = check_answer("azul", "rojo", "Colors", 5000, CONFIG)
    assert result["near_miss"] is False
    assert result["similarity"] < 0.85


def test_similarity_of_blank_answers():
    assert answer_similarity("", "", "Colors") == 1.0
    assert answer_similarity("", "rojo", "Colors") == 0.0
