from datetime import date, datetime, timezone

import pytest

from supercoach.schemas.goal import MetricKind
from supercoach.services import progress
from supercoach.services.progress import GoalStatusCounts
from supercoach.services.records import GoalRecord, WorkoutRecord


def workouts(*days):
    return [WorkoutRecord(id=str(i), date=d) for i, d in enumerate(days)]


def goal(
    id="g",
    kind=MetricKind.custom,
    target=10.0,
    current=0.0,
    achieved=False,
    created_at=None,
    unit=None,
):
    return GoalRecord(
        id=id,
        metric_kind=kind,
        target_value=target,
        current_value=current,
        is_achieved=achieved,
        created_at=created_at,
        unit=unit,
    )


def test_total_workouts_counts_every_record():
    assert progress.total_workouts([]) == 0
    records = [
        WorkoutRecord(id="a", date=None),
        WorkoutRecord(id="b", date=date(2024, 1, 1)),
        WorkoutRecord(id="c", date=date(2024, 1, 1)),
    ]
    assert progress.total_workouts(records) == 3


def test_longest_streak_gap_breaks_run():
    records = workouts(date(2024, 1, 1), date(2024, 1, 2), date(2024, 1, 3), date(2024, 1, 5))
    assert progress.longest_streak(records) == 3


def test_longest_streak_empty_and_single_day():
    assert progress.longest_streak([]) == 0
    assert progress.longest_streak(workouts(date(2024, 3, 9))) == 1


def test_longest_streak_counts_each_day_once_in_any_order():
    records = workouts(
        date(2024, 1, 3), date(2024, 1, 1), date(2024, 1, 2), date(2024, 1, 2), date(2024, 1, 2)
    )
    assert progress.longest_streak(records) == 3


def test_longest_streak_later_run_across_month_end():
    records = workouts(
        date(2024, 1, 1),
        date(2024, 1, 2),
        date(2024, 1, 30),
        date(2024, 1, 31),
        date(2024, 2, 1),
        date(2024, 2, 2),
    )
    assert progress.longest_streak(records) == 4


def test_current_streak_alive_until_a_full_day_is_missed():
    records = workouts(date(2024, 5, 1), date(2024, 5, 3), date(2024, 5, 4))
    assert progress.current_streak(records, date(2024, 5, 4)) == 2
    assert progress.current_streak(records, date(2024, 5, 5)) == 2
    assert progress.current_streak(records, date(2024, 5, 6)) == 0
    assert progress.current_streak([], date(2024, 5, 6)) == 0


def test_monthly_frequency_always_has_every_bucket():
    result = progress.monthly_frequency([], date(2024, 6, 15))
    assert [m.month for m in result] == ["Jan", "Feb", "Mar", "Apr", "May", "Jun"]
    assert all(m.count == 0 for m in result)


def test_monthly_frequency_counts_inside_window_only():
    records = workouts(
        date(2023, 12, 31),  # before the first bucket
        date(2024, 1, 1),
        date(2024, 1, 20),
        date(2024, 3, 5),
        date(2024, 6, 30),
        date(2024, 7, 1),  # after the reference month
        date(2023, 3, 5),  # same month name, previous year
    )
    result = progress.monthly_frequency(records, date(2024, 6, 15))
    assert [(m.month, m.count) for m in result] == [
        ("Jan", 2),
        ("Feb", 0),
        ("Mar", 1),
        ("Apr", 0),
        ("May", 0),
        ("Jun", 1),
    ]


def test_monthly_frequency_spans_year_boundary():
    records = workouts(date(2023, 11, 2), date(2024, 2, 29))
    result = progress.monthly_frequency(records, date(2024, 2, 1), months_back=4)
    assert [(m.month, m.count) for m in result] == [("Nov", 1), ("Dec", 0), ("Jan", 0), ("Feb", 1)]


def test_monthly_frequency_keeps_same_named_months_apart():
    records = workouts(date(2023, 6, 1), date(2024, 6, 1), date(2024, 6, 2))
    result = progress.monthly_frequency(records, date(2024, 6, 30), months_back=13)
    assert len(result) == 13
    assert (result[0].month, result[0].count) == ("Jun", 1)
    assert (result[-1].month, result[-1].count) == ("Jun", 2)


def test_monthly_frequency_counts_later_dates_under_their_label():
    # Feb 2025 is after the reference month but its label has a bucket
    records = workouts(date(2025, 2, 10), date(2024, 2, 3), date(2025, 7, 1))
    result = progress.monthly_frequency(records, date(2024, 6, 15))
    assert [(m.month, m.count) for m in result] == [
        ("Jan", 0),
        ("Feb", 2),
        ("Mar", 0),
        ("Apr", 0),
        ("May", 0),
        ("Jun", 0),
    ]


def test_monthly_frequency_window_start_month_matches_its_label():
    # With a full year the window opens on the reference month of last year
    records = workouts(date(2023, 6, 20), date(2023, 5, 31))
    result = progress.monthly_frequency(records, date(2024, 6, 15), months_back=12)
    assert result[0].month == "Jul"
    assert (result[-1].month, result[-1].count) == ("Jun", 1)
    assert sum(m.count for m in result) == 1


def test_monthly_frequency_window_size_validation():
    assert progress.monthly_frequency(workouts(date(2024, 6, 1)), date(2024, 6, 1), 0) == []
    with pytest.raises(ValueError):
        progress.monthly_frequency([], date(2024, 6, 1), -1)


def test_undated_records_are_skipped_without_undercounting():
    records = workouts(date(2024, 6, 1), date(2024, 6, 2)) + [WorkoutRecord(id="bad", date=None)]
    assert progress.longest_streak(records) == 2
    assert [m.count for m in progress.monthly_frequency(records, date(2024, 6, 10), 1)] == [2]
    assert progress.count_undated(records) == 1
    assert progress.total_workouts(records) == 3


def test_goal_status_breakdown_precedence():
    goals = [
        goal("a", achieved=True),
        goal("b", current=5, target=10),
        goal("c", current=0, target=10),
    ]
    assert progress.goal_status_breakdown(goals) == GoalStatusCounts(
        completed=1, in_progress=1, pending=1
    )


def test_goal_status_flag_wins_over_numbers():
    # Reached the target but never marked achieved
    assert progress.goal_status(goal(current=12, target=10)) == "pending"
    assert progress.goal_status(goal(current=0, achieved=True)) == "completed"
    # Non-numeric stored value counts as no progress
    assert progress.goal_status(goal(current=None)) == "pending"


def test_status_slices_omit_empty_buckets():
    counts = GoalStatusCounts(completed=2, in_progress=0, pending=1)
    assert counts.slices() == [("Completed", 2), ("Pending", 1)]
    assert counts.total == 3
    assert progress.goal_status_breakdown([]) == GoalStatusCounts()
    assert GoalStatusCounts().slices() == []


def test_weight_trend_sorted_and_filtered():
    goals = [
        goal("late", MetricKind.weight, current=71.5, created_at=datetime(2024, 3, 1, tzinfo=timezone.utc), unit="kg"),
        goal("early", MetricKind.weight, current=74.0, created_at=datetime(2024, 1, 1)),
        goal("undated", MetricKind.weight, current=73.0, created_at=None),
        goal("lift", MetricKind.lift_pr, current=100, created_at=datetime(2024, 2, 1)),
        goal("garbled", MetricKind.weight, current=None, created_at=datetime(2024, 2, 1)),
    ]
    trend = progress.weight_trend(goals)
    assert [(p.label, p.value) for p in trend.points] == [("2024-01-01", 74.0), ("2024-03-01", 71.5)]
    assert trend.sufficient
    assert trend.current == 71.5
    assert trend.unit == "kg"
    assert progress.count_skipped_weight_goals(goals) == 2


def test_weight_trend_single_point_is_insufficient():
    trend = progress.weight_trend(
        [goal(kind=MetricKind.weight, current=80.0, created_at=datetime(2024, 1, 1))]
    )
    assert len(trend.points) == 1
    assert not trend.sufficient
    assert trend.current == 80.0


def test_weight_trend_empty_has_no_current_weight():
    trend = progress.weight_trend([goal()])
    assert trend.points == ()
    assert trend.current is None
    assert progress.current_weight([]) is None


def test_summarize_is_repeatable():
    ws = workouts(date(2024, 6, 1), date(2024, 6, 2), date(2024, 4, 9))
    gs = [
        goal("w", MetricKind.weight, target=70, current=72, created_at=datetime(2024, 5, 1)),
        goal("x", achieved=True),
    ]
    first = progress.summarize(ws, gs, date(2024, 6, 2))
    second = progress.summarize(ws, gs, date(2024, 6, 2))
    assert first == second
    assert first.total_workouts == 3
    assert first.longest_streak == 2
    assert first.current_streak == 2
    assert [m.count for m in first.monthly_frequency] == [0, 0, 0, 1, 0, 2]
    assert first.goal_status == GoalStatusCounts(completed=1, in_progress=0, pending=1)


def test_summarize_empty_inputs():
    summary = progress.summarize([], [], date(2024, 6, 15))
    assert summary.total_workouts == 0
    assert summary.longest_streak == 0
    assert summary.current_streak == 0
    assert len(summary.monthly_frequency) == 6
    assert all(m.count == 0 for m in summary.monthly_frequency)
    assert summary.goal_status == GoalStatusCounts()
    assert summary.weight_trend.points == ()
    assert summary.weight_trend.current is None
    assert summary.skipped_workouts == 0
    assert summary.skipped_weight_goals == 0
