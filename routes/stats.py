from typing import Optional

from fastapi import APIRouter, Depends, Query

from config import load_config
from db.database import get_store, ScheduleStore
from models.vocabulary import Vocabulary
from utils.deps import get_session, get_vocabulary, parse_categories
from utils.queue import ReviewSession, session_stats

router = APIRouter()

@router.get("")
async def stats(
    categories: Optional[str] = Query(None),
    max_new: Optional[int] = Query(None, ge=0),
    vocabulary: Vocabulary = Depends(get_vocabulary),
    session: ReviewSession = Depends(get_session),
    store: ScheduleStore = Depends(get_store),
):
    """Due now, new left, seen this session and difficult card counts."""
    if max_new is None:
        max_new = load_config()["session"]["max_new"]
    return session_stats(
        vocabulary.vocabulary, store.load(), session, parse_categories(categories), max_new
    )

@router.get("/categories")
async def categories(vocabulary: Vocabulary = Depends(get_vocabulary)):
    return {"categories": vocabulary.categories()}
