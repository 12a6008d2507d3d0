from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, Field

from supercoach.core.constants import MAX_MONTHS_BACK, NOT_AVAILABLE
from supercoach.services.progress import GoalStatusCounts, ProgressSummary, WeightTrend
from supercoach.services.records import Rejection


class MonthlyCountPoint(BaseModel):
    month: str
    count: int


class StatusSlice(BaseModel):
    name: str
    value: int


class GoalStatusRead(BaseModel):
    completed: int
    in_progress: int
    pending: int
    total: int
    # Only non-empty buckets, for a proportion chart
    slices: list[StatusSlice]

    @classmethod
    def from_counts(cls, counts: GoalStatusCounts) -> "GoalStatusRead":
        return cls(
            completed=counts.completed,
            in_progress=counts.in_progress,
            pending=counts.pending,
            total=counts.total,
            slices=[StatusSlice(name=n, value=v) for n, v in counts.slices()],
        )


class TrendPointRead(BaseModel):
    date: str
    weight: float


class WeightTrendRead(BaseModel):
    points: list[TrendPointRead]
    sufficient: bool  # False -> render "insufficient data", not a line
    current_weight: Optional[float] = None
    current_weight_label: str = NOT_AVAILABLE
    unit: Optional[str] = None

    @classmethod
    def from_trend(cls, trend: WeightTrend, default_unit: Optional[str] = None) -> "WeightTrendRead":
        unit = trend.unit or default_unit
        current = trend.current
        if current is None:
            label = NOT_AVAILABLE
        else:
            label = f"{current:g} {unit}" if unit else f"{current:g}"
        return cls(
            points=[TrendPointRead(date=p.label, weight=p.value) for p in trend.points],
            sufficient=trend.sufficient,
            current_weight=current,
            current_weight_label=label,
            unit=unit,
        )


class RejectionRead(BaseModel):
    kind: str  # 'workout' or 'goal'
    index: int
    id: Optional[str] = None
    reason: str

    @classmethod
    def from_rejection(cls, kind: str, r: Rejection) -> "RejectionRead":
        return cls(kind=kind, index=r.index, id=r.id, reason=r.reason)


class ProgressSummaryRead(BaseModel):
    reference_date: date
    total_workouts: int
    longest_streak: int
    current_streak: int
    monthly_frequency: list[MonthlyCountPoint]
    goal_status: GoalStatusRead
    weight_trend: WeightTrendRead
    skipped_workouts: int
    skipped_weight_goals: int
    rejected: list[RejectionRead] = []

    @classmethod
    def from_summary(
        cls,
        summary: ProgressSummary,
        rejected: Optional[list[RejectionRead]] = None,
        default_unit: Optional[str] = None,
    ) -> "ProgressSummaryRead":
        return cls(
            reference_date=summary.reference_date,
            total_workouts=summary.total_workouts,
            longest_streak=summary.longest_streak,
            current_streak=summary.current_streak,
            monthly_frequency=[
                MonthlyCountPoint(month=m.month, count=m.count) for m in summary.monthly_frequency
            ],
            goal_status=GoalStatusRead.from_counts(summary.goal_status),
            weight_trend=WeightTrendRead.from_trend(summary.weight_trend, default_unit),
            skipped_workouts=summary.skipped_workouts,
            skipped_weight_goals=summary.skipped_weight_goals,
            rejected=rejected or [],
        )


class StreakRead(BaseModel):
    longest_streak: int
    current_streak: int
    skipped_workouts: int


class RawRecords(BaseModel):
    """Documents exported from any store, validated record by record."""

    workouts: list[Any] = Field(default_factory=list)
    goals: list[Any] = Field(default_factory=list)
    reference_date: Optional[date] = None
    months_back: Optional[int] = Field(None, ge=0, le=MAX_MONTHS_BACK)
