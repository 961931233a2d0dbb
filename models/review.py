from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

from utils.scheduler import Grade, ReviewState, coerce_grade

class GradeRequest(BaseModel):
    card_id: str
    grade: Grade

    @field_validator('grade', mode='before')
    @classmethod
    def validate_grade(cls, v):
        # accepts 1-4 or again/hard/good/easy
        return coerce_grade(v)

class CheckRequest(BaseModel):
    card_id: str
    answer: str
    direction: str = "es-en"
    response_ms: Optional[int] = None

class SpeechRequest(BaseModel):
    card_id: str
    alternatives: List[str]
    direction: str = "es-en-voice"

class ReviewStateOut(BaseModel):
    ef: float
    reps: int
    interval: int
    due: int
    lapses: int
    # same spelling as the export document
    is_leech: bool = Field(serialization_alias="isLeech")
    hint: str

    @classmethod
    def from_state(cls, state: ReviewState, hint: str) -> "ReviewStateOut":
        return cls(
            ef=state.ef,
            reps=state.reps,
            interval=state.interval,
            due=state.due,
            lapses=state.lapses,
            is_leech=state.is_leech,
            hint=hint,
        )
