import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from supercoach.core.config import settings
from supercoach.core.constants import MAX_MONTHS_BACK
from supercoach.core.time_utils import local_today
from supercoach.db import get_db
from supercoach.models.goal import Goal
from supercoach.models.workout import Workout
from supercoach.schemas.progress import (
    GoalStatusRead,
    MonthlyCountPoint,
    ProgressSummaryRead,
    RawRecords,
    RejectionRead,
    StreakRead,
    WeightTrendRead,
)
from supercoach.services import progress
from supercoach.services.records import (
    goals_from_rows,
    parse_goal,
    parse_many,
    parse_workout,
    workouts_from_rows,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/progress", tags=["progress"])


def _reference(reference_date: Optional[date]) -> date:
    # "Today" is decided here, never inside the aggregation functions
    return reference_date or local_today(settings.timezone)


def _months(months_back: Optional[int]) -> int:
    return settings.progress_months_back if months_back is None else months_back


def _load_workouts(db: Session):
    return workouts_from_rows(db.query(Workout).order_by(Workout.date).all())


def _load_goals(db: Session):
    return goals_from_rows(db.query(Goal).order_by(Goal.created_at).all())


def _rejections(workout_rej, goal_rej) -> list[RejectionRead]:
    return [RejectionRead.from_rejection("workout", r) for r in workout_rej] + [
        RejectionRead.from_rejection("goal", r) for r in goal_rej
    ]


@router.get("/summary", response_model=ProgressSummaryRead)
def get_summary(
    reference_date: Optional[date] = Query(None, description="Defaults to today"),
    months_back: Optional[int] = Query(None, ge=0, le=MAX_MONTHS_BACK),
    db: Session = Depends(get_db),
):
    """Every figure on the progress page, computed from stored records."""
    workouts, workout_rej = _load_workouts(db)
    goals, goal_rej = _load_goals(db)
    summary = progress.summarize(
        workouts, goals, _reference(reference_date), _months(months_back)
    )
    return ProgressSummaryRead.from_summary(
        summary, _rejections(workout_rej, goal_rej), settings.weight_unit
    )


@router.post("/summary", response_model=ProgressSummaryRead)
def compute_summary(payload: RawRecords):
    """
    Same computation over documents supplied by the caller, e.g. an export
    from another store. Documents that fail validation are listed under
    `rejected`; they never fail the request.
    """
    workouts, workout_rej = parse_many(payload.workouts, parse_workout)
    goals, goal_rej = parse_many(payload.goals, parse_goal)
    summary = progress.summarize(
        workouts, goals, _reference(payload.reference_date), _months(payload.months_back)
    )
    logger.info(
        "computed summary over %d workouts / %d goals (%d rejected)",
        len(workouts),
        len(goals),
        len(workout_rej) + len(goal_rej),
    )
    return ProgressSummaryRead.from_summary(
        summary, _rejections(workout_rej, goal_rej), settings.weight_unit
    )


@router.get("/monthly_frequency", response_model=list[MonthlyCountPoint])
def get_monthly_frequency(
    reference_date: Optional[date] = Query(None),
    months_back: Optional[int] = Query(None, ge=0, le=MAX_MONTHS_BACK),
    db: Session = Depends(get_db),
):
    """
    Workouts per month for the last `months_back` months (including the
    reference month), oldest first. Empty months appear with 0.
    """
    workouts, _ = _load_workouts(db)
    buckets = progress.monthly_frequency(
        workouts, _reference(reference_date), _months(months_back)
    )
    return [MonthlyCountPoint(month=b.month, count=b.count) for b in buckets]


@router.get("/streak", response_model=StreakRead)
def get_streak(
    reference_date: Optional[date] = Query(None),
    db: Session = Depends(get_db),
):
    workouts, _ = _load_workouts(db)
    return StreakRead(
        longest_streak=progress.longest_streak(workouts),
        current_streak=progress.current_streak(workouts, _reference(reference_date)),
        skipped_workouts=progress.count_undated(workouts),
    )


@router.get("/goals", response_model=GoalStatusRead)
def get_goal_status(db: Session = Depends(get_db)):
    goals, _ = _load_goals(db)
    return GoalStatusRead.from_counts(progress.goal_status_breakdown(goals))


@router.get("/weight_trend", response_model=WeightTrendRead)
def get_weight_trend(db: Session = Depends(get_db)):
    goals, _ = _load_goals(db)
    return WeightTrendRead.from_trend(progress.weight_trend(goals), settings.weight_unit)
