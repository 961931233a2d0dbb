import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from config import load_config
from db.database import get_store, ScheduleStore
from models.review import CheckRequest, GradeRequest, ReviewStateOut, SpeechRequest
from models.vocabulary import Vocabulary
from utils.deps import find_card, get_session, get_vocabulary, parse_categories
from utils.directions import card_faces, resolve_direction
from utils.grading import check_answer
from utils.normalize import NoAlternatives, resolve_alternatives
from utils.queue import ReviewSession, build_queue, session_stats
from utils.scheduler import describe, grade_card

logger = logging.getLogger(__name__)

router = APIRouter()

def _concrete_direction(direction: str) -> str:
    try:
        return resolve_direction(direction)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

@router.get("/queue")
async def start_queue(
    categories: Optional[str] = Query(None),
    max_new: Optional[int] = Query(None, ge=0),
    vocabulary: Vocabulary = Depends(get_vocabulary),
    session: ReviewSession = Depends(get_session),
    store: ScheduleStore = Depends(get_store),
):
    """Build the session queue from due cards and a limited number of new ones."""
    if max_new is None:
        max_new = load_config()["session"]["max_new"]
    selected = parse_categories(categories)
    schedules = store.load()
    session.queue = build_queue(vocabulary.vocabulary, schedules, selected, max_new)
    return {
        "queue": list(session.queue),
        "stats": session_stats(vocabulary.vocabulary, schedules, session, selected, max_new),
    }

@router.get("/next")
async def next_card(
    direction: Optional[str] = Query(None),
    categories: Optional[str] = Query(None),
    vocabulary: Vocabulary = Depends(get_vocabulary),
    session: ReviewSession = Depends(get_session),
    store: ScheduleStore = Depends(get_store),
):
    """Pop the next card, rebuilding the queue once when it has run dry."""
    config = load_config()
    direction = _concrete_direction(direction or config["session"]["direction"])
    schedules = store.load()
    if not session.queue:
        max_new = max(0, config["session"]["max_new"] - session.new_seen_count())
        session.queue = build_queue(
            vocabulary.vocabulary, schedules, parse_categories(categories), max_new
        )
    card_id = session.pop_next()
    if card_id is None:
        return {"card": None, "message": "No cards due. You are caught up!"}
    card = find_card(vocabulary, card_id)
    faces = card_faces(card, direction)
    return {
        "card": {
            "id": card.id,
            "category": card.category,
            "direction": faces.direction,
            "prompt": None if faces.audio_prompt else faces.prompt,
            "speak": {"text": faces.prompt, "language": faces.prompt_language} if faces.audio_prompt else None,
            "answer": faces.answer,
            "answer_language": faces.answer_language,
            "spoken_answer": faces.spoken_answer,
            "hint": describe(schedules.get(card.id)),
        },
        "remaining": len(session.queue),
    }

@router.post("/check")
async def check(payload: CheckRequest, vocabulary: Vocabulary = Depends(get_vocabulary)):
    """Compare a typed answer with the card's expected answer."""
    card = find_card(vocabulary, payload.card_id)
    faces = card_faces(card, _concrete_direction(payload.direction))
    result = check_answer(payload.answer, faces.answer, card.category, payload.response_ms)
    result["expected"] = faces.answer
    result["suggested_grade"] = result["suggested_grade"].name.capitalize()
    return result

@router.post("/speech")
async def speech(payload: SpeechRequest, vocabulary: Vocabulary = Depends(get_vocabulary)):
    """Choose the transcription to fill in as the learner's answer."""
    card = find_card(vocabulary, payload.card_id)
    faces = card_faces(card, _concrete_direction(payload.direction))
    try:
        answer = resolve_alternatives(
            payload.alternatives, faces.answer, card.category, faces.answer_language
        )
    except NoAlternatives as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return {"answer": answer, "expected": faces.answer}

@router.post("/grade", response_model=ReviewStateOut)
async def grade(
    payload: GradeRequest,
    vocabulary: Vocabulary = Depends(get_vocabulary),
    session: ReviewSession = Depends(get_session),
    store: ScheduleStore = Depends(get_store),
):
    """Apply a grade to a card and persist the new schedule."""
    card = find_card(vocabulary, payload.card_id)
    schedules = store.load()
    previous = schedules.get(card.id)
    state = grade_card(previous, payload.grade)
    schedules[card.id] = state
    store.save(schedules)
    session.record_grade(card.id, first_time=previous is None)
    if state.is_leech and (previous is None or not previous.is_leech):
        logger.info("Card %s flagged as difficult after %d lapses", card.id, state.lapses)
    return ReviewStateOut.from_state(state, describe(state))
