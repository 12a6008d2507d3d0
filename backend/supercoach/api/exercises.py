from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from supercoach.core.constants import EXERCISE_LIBRARY
from supercoach.schemas.exercise import Difficulty, ExerciseRead


router = APIRouter(prefix="/exercises", tags=["exercises"])


def _has(values: list[str], wanted: str) -> bool:
    wanted = wanted.strip().lower()
    return any(v.lower() == wanted for v in values)


@router.get("/", response_model=list[ExerciseRead])
def list_exercises(
    difficulty: Optional[Difficulty] = Query(None),
    equipment: Optional[str] = Query(None, description="e.g. Dumbbells"),
    muscle: Optional[str] = Query(None, description="Target muscle, e.g. Glutes"),
    q: Optional[str] = Query(None, description="Case-insensitive name search"),
):
    items = EXERCISE_LIBRARY
    if difficulty is not None:
        items = [e for e in items if e["difficulty"] == difficulty.value]
    if equipment:
        items = [e for e in items if _has(e["equipment"], equipment)]
    if muscle:
        items = [e for e in items if _has(e["target_muscles"], muscle)]
    if q:
        needle = q.strip().lower()
        items = [e for e in items if needle in e["name"].lower()]
    return items


@router.get("/{exercise_id}", response_model=ExerciseRead)
def get_exercise(exercise_id: str):
    for e in EXERCISE_LIBRARY:
        if e["id"] == exercise_id:
            return e
    raise HTTPException(status_code=404, detail="Exercise not found")
