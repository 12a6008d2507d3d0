"""
Progress aggregation.

Turns workout and goal records into the figures shown on the progress page:
total workouts, consistency streaks, the monthly workout histogram, the goal
status breakdown and the weight trend.

Everything here is a pure function of its arguments. "Today" is always passed
in as `reference_date`; callers decide what today is.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Iterable, Optional, Sequence

from supercoach.core.constants import (
    DEFAULT_MONTHS_BACK,
    GOAL_STATUS_LABELS,
    MIN_TREND_POINTS,
)
from supercoach.core.time_utils import format_day, month_label, shift_months
from supercoach.schemas.goal import MetricKind
from supercoach.services.records import GoalRecord, WorkoutRecord


@dataclass(frozen=True)
class MonthlyCount:
    month: str  # short month name, e.g. 'Jan'
    count: int


@dataclass(frozen=True)
class GoalStatusCounts:
    completed: int = 0
    in_progress: int = 0
    pending: int = 0

    @property
    def total(self) -> int:
        return self.completed + self.in_progress + self.pending

    def slices(self) -> list[tuple[str, int]]:
        """(label, count) pairs for a proportion chart; empty buckets omitted."""
        return [
            (label, getattr(self, key))
            for key, label in GOAL_STATUS_LABELS.items()
            if getattr(self, key) > 0
        ]


@dataclass(frozen=True)
class TrendPoint:
    label: str
    value: float


@dataclass(frozen=True)
class WeightTrend:
    points: tuple[TrendPoint, ...] = ()
    unit: Optional[str] = None  # unit of the most recent point

    @property
    def sufficient(self) -> bool:
        """Whether there are enough points to draw a line."""
        return len(self.points) >= MIN_TREND_POINTS

    @property
    def current(self) -> Optional[float]:
        return current_weight(self.points)


@dataclass(frozen=True)
class ProgressSummary:
    reference_date: date
    total_workouts: int
    longest_streak: int
    current_streak: int
    monthly_frequency: tuple[MonthlyCount, ...]
    goal_status: GoalStatusCounts
    weight_trend: WeightTrend
    # Records left out of date-based figures because their dates were unusable
    skipped_workouts: int = 0
    skipped_weight_goals: int = 0


def total_workouts(records: Sequence[WorkoutRecord]) -> int:
    return len(records)


def _workout_days(records: Iterable[WorkoutRecord]) -> list[date]:
    """Distinct workout days, oldest first."""
    return sorted({r.date for r in records if r.date is not None})


def count_undated(records: Iterable[WorkoutRecord]) -> int:
    return sum(1 for r in records if r.date is None)


def monthly_frequency(
    records: Iterable[WorkoutRecord],
    reference_date: date,
    months_back: int = DEFAULT_MONTHS_BACK,
) -> list[MonthlyCount]:
    """
    Workouts per month label for the `months_back` months ending with the
    month of `reference_date`, oldest first.

    - Always returns exactly `months_back` entries; empty months count 0.
    - A record counts when it is dated on or after the window start
      (`months_back` months before the reference month, day 1) and its month
      label matches a bucket. Dates past the reference month still count
      under their label.
    - Records dated before the window start, or without a usable date, are
      dropped.
    - Windows longer than a year repeat labels; a record whose own month is
      one of the buckets goes there, otherwise to the newest bucket with its
      label.
    """
    if months_back < 0:
        raise ValueError("months_back must be >= 0")

    # First day of each bucket month, oldest -> newest
    starts = [shift_months(reference_date, -i) for i in range(months_back - 1, -1, -1)]
    window_start = shift_months(reference_date, -months_back)

    by_month = {(s.year, s.month): i for i, s in enumerate(starts)}
    by_label: dict[str, int] = {}
    for i, s in enumerate(starts):
        by_label[month_label(s)] = i  # newest bucket wins on repeated labels

    counts = [0] * len(starts)
    for r in records:
        if r.date is None or r.date < window_start:
            continue
        index = by_month.get((r.date.year, r.date.month))
        if index is None:
            index = by_label.get(month_label(r.date))
        if index is not None:
            counts[index] += 1

    return [MonthlyCount(month=month_label(s), count=c) for s, c in zip(starts, counts)]


def longest_streak(records: Iterable[WorkoutRecord]) -> int:
    """Longest run of consecutive workout days (several workouts a day count once)."""
    days = _workout_days(records)
    if not days:
        return 0

    longest = current = 1
    for prev, day in zip(days, days[1:]):
        if day - prev == timedelta(days=1):
            current += 1
        else:
            current = 1
        longest = max(longest, current)
    return longest


def current_streak(records: Iterable[WorkoutRecord], reference_date: date) -> int:
    """
    Length of the run of workout days that is still alive on `reference_date`:
    it must end today or yesterday, otherwise the streak is 0.
    """
    days = set(_workout_days(records))
    day = reference_date if reference_date in days else reference_date - timedelta(days=1)
    streak = 0
    while day in days:
        streak += 1
        day -= timedelta(days=1)
    return streak


def goal_status(goal: GoalRecord) -> str:
    """Classify a goal as 'completed', 'in_progress' or 'pending'.

    The achievement flag wins over the numbers: a goal whose current value has
    reached the target but is not flagged achieved stays 'pending'.
    """
    if goal.is_achieved:
        return "completed"
    current = goal.current_value or 0.0
    if 0 < current < goal.target_value:
        return "in_progress"
    return "pending"


def goal_status_breakdown(goals: Iterable[GoalRecord]) -> GoalStatusCounts:
    tally = {key: 0 for key in GOAL_STATUS_LABELS}
    for g in goals:
        tally[goal_status(g)] += 1
    return GoalStatusCounts(**tally)


def _is_trend_point(goal: GoalRecord) -> bool:
    return (
        goal.metric_kind == MetricKind.weight
        and goal.current_value is not None
        and goal.created_at is not None
    )


def _instant(ts: datetime) -> datetime:
    # Naive timestamps are taken as UTC so they sort alongside aware ones
    return ts if ts.tzinfo is not None else ts.replace(tzinfo=timezone.utc)


def weight_trend(goals: Iterable[GoalRecord]) -> WeightTrend:
    """Weight goals plotted as (creation date, current value), oldest first.

    Each goal contributes one point: its latest value against the time it was
    created. There are no historical snapshots behind this series.
    """
    usable = sorted(
        (g for g in goals if _is_trend_point(g)),
        key=lambda g: _instant(g.created_at),
    )
    return WeightTrend(
        points=tuple(TrendPoint(label=format_day(g.created_at), value=g.current_value) for g in usable),
        unit=usable[-1].unit if usable else None,
    )


def current_weight(points: Sequence[TrendPoint]) -> Optional[float]:
    """Value of the most recent point, or None when there is none."""
    if not points:
        return None
    return points[-1].value


def count_skipped_weight_goals(goals: Iterable[GoalRecord]) -> int:
    return sum(
        1 for g in goals if g.metric_kind == MetricKind.weight and not _is_trend_point(g)
    )


def summarize(
    workouts: Sequence[WorkoutRecord],
    goals: Sequence[GoalRecord],
    reference_date: date,
    months_back: int = DEFAULT_MONTHS_BACK,
) -> ProgressSummary:
    """Compute every progress figure from scratch."""
    trend = weight_trend(goals)
    return ProgressSummary(
        reference_date=reference_date,
        total_workouts=total_workouts(workouts),
        longest_streak=longest_streak(workouts),
        current_streak=current_streak(workouts, reference_date),
        monthly_frequency=tuple(monthly_frequency(workouts, reference_date, months_back)),
        goal_status=goal_status_breakdown(goals),
        weight_trend=trend,
        skipped_workouts=count_undated(workouts),
        skipped_weight_goals=count_skipped_weight_goals(goals),
    )
