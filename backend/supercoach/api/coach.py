from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from supercoach.api.workouts import get_workout_or_404
from supercoach.db import get_db
from supercoach.schemas.coach import (
    FeedbackRequest,
    FeedbackResponse,
    WorkoutPlanRequest,
    WorkoutPlanResponse,
)
from supercoach.schemas.workout import WorkoutRead
from supercoach.services.coach import CoachClient, CoachError, CoachNotConfigured, get_coach

router = APIRouter(prefix="/coach", tags=["coach"])


def _ask(fn, *args, **kwargs) -> str:
    try:
        return fn(*args, **kwargs)
    except CoachNotConfigured as e:
        raise HTTPException(status_code=503, detail=str(e))
    except CoachError as e:
        raise HTTPException(status_code=502, detail=str(e))


@router.post("/plan", response_model=WorkoutPlanResponse)
def generate_plan(payload: WorkoutPlanRequest, coach: CoachClient = Depends(get_coach)):
    plan = _ask(coach.workout_plan, **payload.model_dump())
    return WorkoutPlanResponse(workout_plan=plan)


@router.post("/feedback", response_model=FeedbackResponse)
def workout_feedback(
    payload: FeedbackRequest,
    db: Session = Depends(get_db),
    coach: CoachClient = Depends(get_coach),
):
    if payload.workout_id is not None:
        row = get_workout_or_404(db, payload.workout_id)
        workout = WorkoutRead.model_validate(row).model_dump()
    else:
        workout = payload.workout.model_dump()

    text = _ask(coach.feedback, workout, payload.fitness_goals, payload.level)
    return FeedbackResponse(feedback=text)
