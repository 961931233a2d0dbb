import json
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr


def card_identity(category: str, spanish: str, english: str) -> str:
    """Content-derived key for a vocabulary pair."""
    return f"{category}::{spanish}::{english}"


class VocabularyItem(BaseModel):
    category: str
    spanish: str
    english: str

    model_config = ConfigDict(frozen=True)

    @property
    def id(self) -> str:
        return card_identity(self.category, self.spanish, self.english)


class Vocabulary(BaseModel):
    category_order: List[str] = Field(default_factory=list, alias="categoryOrder")
    vocabulary: List[VocabularyItem] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)

    _index: Dict[str, VocabularyItem] = PrivateAttr(default_factory=dict)

    def model_post_init(self, __context) -> None:
        # The deck is read once at startup; lookups by card id reuse this index.
        self._index = {item.id: item for item in self.vocabulary}

    def categories(self) -> List[str]:
        """Categories present in the deck, in the declared order first."""
        present = list(dict.fromkeys(item.category for item in self.vocabulary))
        ordered = [cat for cat in self.category_order if cat in present]
        return ordered + [cat for cat in present if cat not in ordered]

    def get(self, card_id: str) -> Optional[VocabularyItem]:
        return self._index.get(card_id)


def load_vocabulary(path: Path) -> Vocabulary:
    with open(path, encoding="utf-8") as f:
        return Vocabulary.model_validate(json.load(f))
