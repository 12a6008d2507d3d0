from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class MetricKind(str, Enum):
    weight = "weight"
    lift_pr = "lift_pr"
    workout_frequency = "workout_frequency"
    custom = "custom"


class GoalBase(BaseModel):
    description: str = Field(..., min_length=3)
    metric_kind: MetricKind = MetricKind.custom
    target_value: float = Field(..., gt=0)
    current_value: float = 0.0
    unit: Optional[str] = None  # e.g. 'kg', 'reps', 'workouts/week'
    deadline: Optional[date] = None


class GoalCreate(GoalBase):
    """Schema for creating a goal. `is_achieved` is only what the client says."""

    is_achieved: bool = False


class GoalUpdate(BaseModel):
    """Partial update; fields left out are not touched."""

    description: Optional[str] = Field(None, min_length=3)
    metric_kind: Optional[MetricKind] = None
    target_value: Optional[float] = Field(None, gt=0)
    current_value: Optional[float] = None
    unit: Optional[str] = None
    deadline: Optional[date] = None
    is_achieved: Optional[bool] = None

    # Tolerate read-only fields echoed back by clients
    model_config = ConfigDict(extra="ignore")


class GoalRead(GoalBase):
    id: str
    is_achieved: bool
    created_at: datetime
    progress_pct: float  # current / target, capped at 100

    model_config = ConfigDict(from_attributes=True)
