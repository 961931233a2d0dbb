"""Session queue building and session-only bookkeeping."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Set

from models.vocabulary import VocabularyItem
from .scheduler import ReviewState, now_ms


@dataclass
class SessionFlags:
    seen_new: bool = False


@dataclass
class ReviewSession:
    """State that lives for one study session and is never persisted."""

    flags: Dict[str, SessionFlags] = field(default_factory=dict)
    seen_count: int = 0
    queue: List[str] = field(default_factory=list)
    current: Optional[str] = None

    def record_grade(self, card_id: str, first_time: bool) -> None:
        if first_time:
            self.flags.setdefault(card_id, SessionFlags()).seen_new = True
        self.seen_count += 1

    def new_seen_count(self) -> int:
        return sum(1 for flags in self.flags.values() if flags.seen_new)

    def pop_next(self) -> Optional[str]:
        self.current = self.queue.pop(0) if self.queue else None
        return self.current

    def reset(self) -> None:
        self.flags.clear()
        self.seen_count = 0
        self.queue.clear()
        self.current = None


def _in_categories(cards: Iterable[VocabularyItem], categories: Optional[Set[str]]) -> List[VocabularyItem]:
    return [card for card in cards if categories is None or card.category in categories]


def classify(
    cards: Iterable[VocabularyItem],
    schedules: Mapping[str, ReviewState],
    now: Optional[int] = None,
) -> tuple[List[VocabularyItem], List[VocabularyItem]]:
    """Split cards into (due, new), keeping deck order."""
    now = now_ms() if now is None else now
    due: List[VocabularyItem] = []
    fresh: List[VocabularyItem] = []
    for card in cards:
        state = schedules.get(card.id)
        if state is None:
            fresh.append(card)
        elif state.due <= now:
            due.append(card)
    return due, fresh


def build_queue(
    cards: Sequence[VocabularyItem],
    schedules: Mapping[str, ReviewState],
    categories: Optional[Set[str]] = None,
    max_new: int = 999,
    now: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> List[str]:
    """Due cards plus the first ``max_new`` new cards, shuffled."""
    due, fresh = classify(_in_categories(cards, categories), schedules, now)
    combined = [card.id for card in due + fresh[: max(0, max_new)]]
    (rng or random).shuffle(combined)
    return combined


def session_stats(
    cards: Sequence[VocabularyItem],
    schedules: Mapping[str, ReviewState],
    session: ReviewSession,
    categories: Optional[Set[str]] = None,
    max_new: int = 999,
    now: Optional[int] = None,
) -> Dict[str, int]:
    selected = _in_categories(cards, categories)
    due, fresh = classify(selected, schedules, now)
    return {
        "due": len(due),
        "new": len(fresh),
        "new_left": max(0, max_new - session.new_seen_count()),
        "seen": session.seen_count,
        "leeches": sum(
            1 for card in selected if card.id in schedules and schedules[card.id].is_leech
        ),
    }
