import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, Date, DateTime, Float, String, false
from sqlalchemy.sql import func
from supercoach.db import Base


class Goal(Base):
    __tablename__ = "goals"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    description = Column(String, nullable=False)

    # weight, lift_pr, workout_frequency, custom
    metric_kind = Column(String(32), nullable=False, server_default="custom")

    target_value = Column(Float, nullable=False)
    current_value = Column(Float, nullable=False, default=0.0, server_default="0")
    unit = Column(String(32), nullable=True)  # e.g. kg, lbs, reps, workouts/week
    deadline = Column(Date, nullable=True)

    # Set explicitly by the user; never derived from the values above
    is_achieved = Column(Boolean, nullable=False, default=False, server_default=false())

    # Also the x-axis of the weight trend for weight goals
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
        index=True,
    )
