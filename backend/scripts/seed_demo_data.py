from datetime import date, datetime, timedelta, timezone
import random

from supercoach.db import Base, SessionLocal, engine
from supercoach.models.goal import Goal
from supercoach.models.workout import Workout
from supercoach.services.coach import exercise_name


def clear_recent_workouts(db, days: int = 200) -> None:
    """Delete workouts in the last N days so we can reseed cleanly."""
    cutoff = date.today() - timedelta(days=days)
    db.query(Workout).filter(Workout.date >= cutoff).delete()
    db.commit()


def _exercise(exercise_id: str, reps: int, weight: float | None, rpe: int) -> dict:
    return {
        "exercise_id": exercise_id,
        "exercise_name": exercise_name(exercise_id),
        "sets": [{"reps": reps, "weight": weight, "rpe": rpe} for _ in range(3)],
        "notes": None,
    }


def seed_demo_workouts(db) -> None:
    """Insert 24 weeks of demo sessions: Mon upper, Wed lower, Fri full body."""
    today = date.today()
    start_day = today - timedelta(weeks=23)
    start_day -= timedelta(days=start_day.weekday())

    workouts_to_add = []

    for week in range(24):
        week_start = start_day + timedelta(weeks=week)
        squat = 60 + week * 2.5

        for d, exercises in [
            (week_start, [_exercise("1", 15, None, 7), _exercise("4", 10, 12.5, 8)]),
            (week_start + timedelta(days=2), [_exercise("2", 5, squat, 8), _exercise("5", 10, 10, 7)]),
            (week_start + timedelta(days=4), [_exercise("6", 5, squat + 20, 9), _exercise("3", 1, None, 6)]),
        ]:
            # Skip future days and the odd missed session
            if d > today or random.random() < 0.1:
                continue
            workouts_to_add.append(
                Workout(
                    date=d,
                    exercises=exercises,
                    overall_effort=random.randint(6, 9),
                    duration_minutes=random.choice([40, 45, 50, 60]),
                )
            )

    if workouts_to_add:
        db.add_all(workouts_to_add)
        db.commit()

    print(f"Seeded {len(workouts_to_add)} demo workouts")


def seed_demo_goals(db) -> None:
    """One weight goal per month (for the trend chart) plus a few others."""
    now = datetime.now(timezone.utc)
    goals = [
        Goal(
            description=f"Reach target weight (check-in {i + 1})",
            metric_kind="weight",
            target_value=70.0,
            current_value=round(76.0 - i * 1.1, 1),
            unit="kg",
            created_at=now - timedelta(days=30 * (5 - i)),
        )
        for i in range(6)
    ]
    goals += [
        Goal(description="Squat 100 kg", metric_kind="lift_pr", target_value=100, current_value=87.5, unit="kg"),
        Goal(description="Train 3x a week", metric_kind="workout_frequency", target_value=3, current_value=3, unit="workouts/week", is_achieved=True),
        Goal(description="Run a 10k", metric_kind="custom", target_value=1, current_value=0),
    ]
    db.add_all(goals)
    db.commit()
    print(f"Seeded {len(goals)} demo goals")


def main():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        clear_recent_workouts(db)
        seed_demo_workouts(db)
        seed_demo_goals(db)
    finally:
        db.close()


if __name__ == "__main__":
    main()
