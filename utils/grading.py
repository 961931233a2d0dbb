from Levenshtein import ratio as lev_ratio
from typing import Dict, Any, Optional
from config import load_config
from .normalize import normalize_answer
from .scheduler import Grade

def suggest_grade(is_correct: bool, response_ms: Optional[int], config: Dict[str, Any] = None) -> Grade:
    """Suggest a grade from correctness and how long the answer took."""
    if not config:
        config = load_config()
    grading_config = config.get('grading', {})
    easy_ms = grading_config.get('easy_threshold_ms', 8000)
    good_ms = grading_config.get('good_threshold_ms', 30000)

    if not is_correct:
        return Grade.AGAIN
    if response_ms is None:
        return Grade.GOOD
    if response_ms < easy_ms:
        return Grade.EASY
    elif response_ms < good_ms:
        return Grade.GOOD
    else:
        return Grade.HARD

def answer_similarity(answer: str, expected: str, category: Optional[str] = None) -> float:
    """Levenshtein ratio between the normalized answer and expected answer."""
    answer_clean = normalize_answer(answer, category)
    expected_clean = normalize_answer(expected, category)
    if not answer_clean and not expected_clean:
        return 1.0
    return round(lev_ratio(answer_clean, expected_clean), 3)

def check_answer(
    answer: str,
    expected: str,
    category: Optional[str] = None,
    response_ms: Optional[int] = None,
    config: Dict[str, Any] = None,
) -> Dict[str, Any]:
    """Compare an answer to the expected one and suggest a grade."""
    if not config:
        config = load_config()
    near_miss_th = config.get('grading', {}).get('near_miss_threshold', 0.85)

    normalized = normalize_answer(answer, category)
    normalized_expected = normalize_answer(expected, category)
    is_correct = normalized == normalized_expected
    similarity = 1.0 if is_correct else answer_similarity(answer, expected, category)
    return {
        "correct": is_correct,
        "normalized_answer": normalized,
        "normalized_expected": normalized_expected,
        "similarity": similarity,
        "near_miss": (not is_correct) and bool(normalized) and similarity >= near_miss_th,
        "suggested_grade": suggest_grade(is_correct, response_ms, config),
    }
