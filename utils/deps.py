from typing import Optional, Set

from fastapi import HTTPException, Request

from models.vocabulary import Vocabulary, VocabularyItem
from .queue import ReviewSession


def get_vocabulary(request: Request) -> Vocabulary:
    return request.app.state.vocabulary


def get_session(request: Request) -> ReviewSession:
    return request.app.state.session


def find_card(vocabulary: Vocabulary, card_id: str) -> VocabularyItem:
    card = vocabulary.get(card_id)
    if card is None:
        raise HTTPException(status_code=404, detail="Card not found")
    return card


def parse_categories(value: Optional[str]) -> Optional[Set[str]]:
    """Comma-separated category names; empty means every category."""
    if not value:
        return None
    names = {item.strip() for item in value.split(",") if item.strip()}
    return names or None
