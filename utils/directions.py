import random
from dataclasses import dataclass
from typing import Optional

from models.vocabulary import VocabularyItem

DIRECTIONS = (
    "es-en",
    "en-es",
    "es-en-voice",
    "en-es-voice",
    "es-voice-en",
    "en-voice-es",
)
MIX = "mix"


@dataclass(frozen=True)
class CardFaces:
    direction: str
    prompt: str
    answer: str
    prompt_language: str
    answer_language: str
    spoken_answer: bool
    audio_prompt: bool


def resolve_direction(direction: str, rng: Optional[random.Random] = None) -> str:
    """Validate a direction, picking a concrete one for 'mix'."""
    if direction == MIX:
        return (rng or random).choice(DIRECTIONS)
    if direction not in DIRECTIONS:
        raise ValueError(f"Unknown direction: {direction!r}")
    return direction


def card_faces(card: VocabularyItem, direction: str) -> CardFaces:
    """Work out what is shown and what is expected for a concrete direction.

    ``*-voice`` answers are spoken in the answer language; ``*-voice-*``
    prompts are played as audio instead of shown.
    """
    if direction not in DIRECTIONS:
        raise ValueError(f"Unknown direction: {direction!r}")
    if direction.startswith("es"):
        prompt, answer = card.spanish, card.english
        prompt_language, answer_language = "es", "en"
    else:
        prompt, answer = card.english, card.spanish
        prompt_language, answer_language = "en", "es"
    return CardFaces(
        direction=direction,
        prompt=prompt,
        answer=answer,
        prompt_language=prompt_language,
        answer_language=answer_language,
        spoken_answer=direction.endswith("-voice"),
        audio_prompt="-voice-" in direction,
    )
