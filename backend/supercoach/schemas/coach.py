from typing import Optional

from pydantic import BaseModel, Field, model_validator

from supercoach.schemas.workout import WorkoutCreate


class WorkoutPlanRequest(BaseModel):
    fitness_goal: str = Field(..., min_length=1)  # e.g. 'build muscle'
    fitness_level: str = Field(..., min_length=1)  # beginner / intermediate / advanced
    equipment_available: str = Field(..., min_length=1)  # e.g. 'dumbbells, bench'
    preferred_duration: str = Field(..., min_length=1)  # e.g. '45 minutes'


class WorkoutPlanResponse(BaseModel):
    workout_plan: str


class FeedbackRequest(BaseModel):
    """Feedback on a saved workout (`workout_id`) or an unsaved one (`workout`)."""

    workout_id: Optional[str] = None
    workout: Optional[WorkoutCreate] = None
    fitness_goals: str = Field(..., min_length=3)
    level: str = "intermediate"

    @model_validator(mode="after")
    def _one_workout(self):
        if (self.workout_id is None) == (self.workout is None):
            raise ValueError("provide exactly one of workout_id or workout")
        return self


class FeedbackResponse(BaseModel):
    feedback: str
