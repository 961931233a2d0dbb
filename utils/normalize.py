"""Answer normalization and equivalence for typed and spoken answers."""

import re
from typing import Optional, Sequence

from .numbers import digit_to_word, word_in_language, word_to_digit

NUMBERS_CATEGORY = "Numbers"

_PUNCTUATION_RE = re.compile(r"[.,!?]")
_ANNOTATION_RE = re.compile(r"\s*\([^)]*\)")
_GENDER_SUFFIX_RE = re.compile(r"(?:\s+(?:male|female))+\s*$")
_WHITESPACE_RE = re.compile(r"\s+")
_DIGITS_RE = re.compile(r"^\d+$")


class NoAlternatives(ValueError):
    """Raised when a speech result carries no transcription to match."""


def _clean(text: str) -> str:
    cleaned = text.lower().strip()
    cleaned = _PUNCTUATION_RE.sub("", cleaned)
    cleaned = _ANNOTATION_RE.sub("", cleaned)
    cleaned = _GENDER_SUFFIX_RE.sub("", cleaned)
    return _WHITESPACE_RE.sub(" ", cleaned).strip()


def normalize_answer(text: str, category: Optional[str] = None) -> str:
    """Reduce an answer to the form used for comparison.

    For the Numbers category every spelling of a number (digits, English,
    Spanish, misrecognitions) collapses onto one canonical Spanish word.
    Elsewhere number words collapse onto digits.
    """
    normalized = _clean(text)
    if category == NUMBERS_CATEGORY:
        if _DIGITS_RE.match(normalized):
            return digit_to_word(normalized) or normalized
        digit = word_to_digit(normalized)
        if digit:
            word = digit_to_word(digit)
            if word:
                return word
        return normalized
    return word_to_digit(normalized) or normalized


def is_equivalent(answer: str, expected: str, category: Optional[str] = None) -> bool:
    return normalize_answer(answer, category) == normalize_answer(expected, category)


def resolve_alternatives(
    alternatives: Sequence[str],
    expected: str,
    category: Optional[str] = None,
    language: Optional[str] = None,
) -> str:
    """Pick the transcription to use as the learner's answer.

    Returns the first alternative equivalent to ``expected``, or the most
    likely alternative when none match. With ``language`` set, a matching
    Numbers answer comes back as that language's spelling of the number.
    """
    if not alternatives:
        raise NoAlternatives("Speech was not recognized, please try again.")
    target = normalize_answer(expected, category)
    for alternative in alternatives:
        if normalize_answer(alternative, category) != target:
            continue
        if language and category == NUMBERS_CATEGORY:
            digit = word_to_digit(target)
            spelled = word_in_language(digit, language) if digit else None
            if spelled:
                return spelled
        return alternative
    return alternatives[0]
