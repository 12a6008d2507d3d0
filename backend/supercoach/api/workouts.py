from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from supercoach.db import get_db
from supercoach.models.workout import Workout
from supercoach.schemas.workout import ExerciseLogEntry, WorkoutCreate, WorkoutRead, WorkoutUpdate
from supercoach.services.coach import exercise_name

router = APIRouter(prefix="/workouts", tags=["workouts"])


def _exercises_to_json(entries: list[ExerciseLogEntry]) -> list[dict]:
    # Fill display names from the library so history reads well later
    out = []
    for entry in entries:
        data = entry.model_dump()
        data["exercise_name"] = exercise_name(entry.exercise_id, entry.exercise_name)
        out.append(data)
    return out


def get_workout_or_404(db: Session, workout_id: str) -> Workout:
    row = db.query(Workout).filter(Workout.id == workout_id).first()
    if not row:
        raise HTTPException(status_code=404, detail="Workout not found")
    return row


@router.post("/", response_model=WorkoutRead)
def create_workout(payload: WorkoutCreate, db: Session = Depends(get_db)):
    workout = Workout(
        date=payload.date,
        exercises=_exercises_to_json(payload.exercises),
        overall_effort=payload.overall_effort,
        duration_minutes=payload.duration_minutes,
        notes=payload.notes,
    )
    db.add(workout)
    db.commit()
    db.refresh(workout)
    return workout


@router.get("/", response_model=list[WorkoutRead])
def list_workouts(
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    db: Session = Depends(get_db),
):
    """
    List workouts, optionally filtered by [start_date, end_date].

      GET /workouts?start_date=2025-01-06&end_date=2025-01-12
    """
    query = db.query(Workout)

    if start_date is not None:
        query = query.filter(Workout.date >= start_date)
    if end_date is not None:
        query = query.filter(Workout.date <= end_date)

    # Most recent first
    return query.order_by(Workout.date.desc(), Workout.created_at.desc()).all()


@router.get("/{workout_id}", response_model=WorkoutRead)
def get_workout(workout_id: str, db: Session = Depends(get_db)):
    return get_workout_or_404(db, workout_id)


@router.put("/{workout_id}", response_model=WorkoutRead)
def update_workout(workout_id: str, payload: WorkoutUpdate, db: Session = Depends(get_db)):
    db_workout = get_workout_or_404(db, workout_id)

    update_data = payload.model_dump(exclude_unset=True)

    if "exercises" in update_data:
        if payload.exercises is None:
            raise HTTPException(status_code=422, detail="exercises cannot be empty")
        update_data["exercises"] = _exercises_to_json(payload.exercises)
    if "date" in update_data and update_data["date"] is None:
        raise HTTPException(status_code=422, detail="date cannot be empty")

    for key, value in update_data.items():
        setattr(db_workout, key, value)

    db.commit()
    db.refresh(db_workout)
    return db_workout


@router.delete("/{workout_id}")
def delete_workout(workout_id: str, db: Session = Depends(get_db)):
    db_workout = get_workout_or_404(db, workout_id)
    db.delete(db_workout)
    db.commit()
    return {"message": "Workout deleted"}
