import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from supercoach.core.constants import RPE_MAX, RPE_MIN


class SetLog(BaseModel):
    reps: int = Field(..., ge=0)
    weight: Optional[float] = None  # omitted for bodyweight exercises
    rpe: Optional[int] = Field(None, ge=RPE_MIN, le=RPE_MAX)


class ExerciseLogEntry(BaseModel):
    exercise_id: str = Field(..., min_length=1)
    exercise_name: Optional[str] = None  # filled from the library when omitted
    sets: list[SetLog] = Field(..., min_length=1)
    notes: Optional[str] = None


class WorkoutBase(BaseModel):
    date: dt.date
    exercises: list[ExerciseLogEntry] = Field(..., min_length=1)
    overall_effort: Optional[int] = Field(None, ge=RPE_MIN, le=RPE_MAX)
    duration_minutes: Optional[int] = Field(None, ge=1)
    notes: Optional[str] = None


class WorkoutCreate(WorkoutBase):
    """Schema for logging a new workout."""
    pass


class WorkoutUpdate(BaseModel):
    """Schema for updating an existing workout (all fields optional)."""

    date: Optional[dt.date] = None
    exercises: Optional[list[ExerciseLogEntry]] = Field(None, min_length=1)
    overall_effort: Optional[int] = Field(None, ge=RPE_MIN, le=RPE_MAX)
    duration_minutes: Optional[int] = Field(None, ge=1)
    notes: Optional[str] = None

    # Be lenient with extra fields from clients
    model_config = ConfigDict(extra="ignore")


class WorkoutRead(WorkoutBase):
    """Schema returned to the frontend when reading a workout."""

    id: str
    created_at: Optional[dt.datetime] = None

    model_config = ConfigDict(from_attributes=True)
