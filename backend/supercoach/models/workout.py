import uuid

from sqlalchemy import JSON, Column, Date, DateTime, Integer, String
from sqlalchemy.sql import func
from supercoach.db import Base


def _new_id() -> str:
    return str(uuid.uuid4())


class Workout(Base):
    __tablename__ = "workouts"

    # Opaque string id (uuid4), mirrors document-store ids
    id = Column(String(36), primary_key=True, default=_new_id)

    date = Column(Date, nullable=False, index=True)

    # List of {exercise_id, exercise_name, sets: [{reps, weight, rpe}], notes}
    exercises = Column(JSON, nullable=False, default=list)

    # Rate of perceived exertion for the whole session (1-10)
    overall_effort = Column(Integer, nullable=True)
    duration_minutes = Column(Integer, nullable=True)
    notes = Column(String, nullable=True)

    # Timestamps
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
