"""Number words for English and Spanish, with common speech misrecognitions."""

from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

# (word, digit, language, is_variant). Order matters: the first non-variant
# spelling listed for a language is that language's canonical word.
_ENTRIES: Tuple[Tuple[str, str, str, bool], ...] = (
    ("one", "1", "en", False),
    ("two", "2", "en", False),
    ("three", "3", "en", False),
    ("four", "4", "en", False),
    ("five", "5", "en", False),
    ("six", "6", "en", False),
    ("seven", "7", "en", False),
    ("eight", "8", "en", False),
    ("nine", "9", "en", False),
    ("ten", "10", "en", False),
    ("eleven", "11", "en", False),
    ("twelve", "12", "en", False),
    ("thirteen", "13", "en", False),
    ("fourteen", "14", "en", False),
    ("fifteen", "15", "en", False),
    ("sixteen", "16", "en", False),
    ("seventeen", "17", "en", False),
    ("eighteen", "18", "en", False),
    ("nineteen", "19", "en", False),
    ("twenty", "20", "en", False),
    ("uno", "1", "es", False),
    ("un", "1", "es", False),
    ("dos", "2", "es", False),
    ("dose", "2", "es", True),
    ("tres", "3", "es", False),
    ("trace", "3", "es", True),
    ("cuatro", "4", "es", False),
    ("cinco", "5", "es", False),
    ("seis", "6", "es", False),
    ("sais", "6", "es", True),
    ("siete", "7", "es", False),
    ("ocho", "8", "es", False),
    ("nueve", "9", "es", False),
    ("diez", "10", "es", False),
    ("dies", "10", "es", True),
    ("once", "11", "es", False),
    ("doce", "12", "es", False),
    ("trece", "13", "es", False),
    ("catorce", "14", "es", False),
    ("quince", "15", "es", False),
    ("dieciséis", "16", "es", False),
    ("dieciseis", "16", "es", True),
    ("dieci seis", "16", "es", True),
    ("diez y seis", "16", "es", True),
    ("diecisiete", "17", "es", False),
    ("dieci siete", "17", "es", True),
    ("diez y siete", "17", "es", True),
    ("dieciocho", "18", "es", False),
    ("dieci ocho", "18", "es", True),
    ("diez y ocho", "18", "es", True),
    ("diecinueve", "19", "es", False),
    ("dieci nueve", "19", "es", True),
    ("diez y nueve", "19", "es", True),
    ("veinte", "20", "es", False),
    ("vente", "20", "es", True),
)

CANONICAL_LANGUAGE = "es"


def _build_tables():
    word_to_digit: Dict[str, str] = {}
    by_language: Dict[str, Dict[str, str]] = {}
    for word, digit, language, is_variant in _ENTRIES:
        if word in word_to_digit and word_to_digit[word] != digit:
            raise ValueError(f"Number word {word!r} maps to two digits")
        word_to_digit[word] = digit
        if not is_variant:
            by_language.setdefault(language, {}).setdefault(digit, word)
    digit_to_word = dict(by_language[CANONICAL_LANGUAGE])
    return (
        MappingProxyType(word_to_digit),
        MappingProxyType(digit_to_word),
        MappingProxyType({lang: MappingProxyType(table) for lang, table in by_language.items()}),
    )


NUMBER_WORDS, DIGIT_WORDS, LANGUAGE_WORDS = _build_tables()


def word_to_digit(word: str) -> Optional[str]:
    return NUMBER_WORDS.get(word)


def digit_to_word(digit: str) -> Optional[str]:
    return DIGIT_WORDS.get(digit)


def word_in_language(digit: str, language: str) -> Optional[str]:
    """Canonical spelling of ``digit`` in ``language`` ('es' or 'en')."""
    table: Mapping[str, str] = LANGUAGE_WORDS.get(language, {})
    return table.get(digit)
