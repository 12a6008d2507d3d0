from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from supercoach.db import get_db
from supercoach.models.goal import Goal
from supercoach.schemas.goal import GoalCreate, GoalRead, GoalUpdate


router = APIRouter(prefix="/goals", tags=["goals"])


def progress_pct(current: float | None, target: float | None) -> float:
    """Share of the target reached, 0-100."""
    if not target or target <= 0:
        return 0.0
    return round(min(100.0, max(0.0, (current or 0.0) / target * 100.0)), 1)


def to_read(row: Goal) -> GoalRead:
    return GoalRead(
        id=row.id,
        description=row.description,
        metric_kind=row.metric_kind,
        target_value=row.target_value,
        current_value=row.current_value or 0.0,
        unit=row.unit,
        deadline=row.deadline,
        is_achieved=row.is_achieved,
        created_at=row.created_at,
        progress_pct=progress_pct(row.current_value, row.target_value),
    )


def get_goal_or_404(db: Session, goal_id: str) -> Goal:
    row = db.query(Goal).filter(Goal.id == goal_id).first()
    if not row:
        raise HTTPException(status_code=404, detail="Goal not found")
    return row


@router.get("/", response_model=list[GoalRead])
def list_goals(db: Session = Depends(get_db)):
    rows = db.query(Goal).order_by(Goal.created_at.desc()).all()
    return [to_read(r) for r in rows]


@router.post("/", response_model=GoalRead)
def create_goal(payload: GoalCreate, db: Session = Depends(get_db)):
    row = Goal(
        description=payload.description,
        metric_kind=payload.metric_kind.value,
        target_value=payload.target_value,
        current_value=payload.current_value,
        unit=payload.unit,
        deadline=payload.deadline,
        is_achieved=payload.is_achieved,
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    return to_read(row)


@router.get("/{goal_id}", response_model=GoalRead)
def get_goal(goal_id: str, db: Session = Depends(get_db)):
    return to_read(get_goal_or_404(db, goal_id))


@router.put("/{goal_id}", response_model=GoalRead)
def update_goal(goal_id: str, payload: GoalUpdate, db: Session = Depends(get_db)):
    row = get_goal_or_404(db, goal_id)

    update_data = payload.model_dump(exclude_unset=True)
    for key in ("description", "metric_kind", "target_value", "is_achieved"):
        if key in update_data and update_data[key] is None:
            raise HTTPException(status_code=422, detail=f"{key} cannot be empty")
    if "metric_kind" in update_data:
        update_data["metric_kind"] = update_data["metric_kind"].value
    if "current_value" in update_data and update_data["current_value"] is None:
        update_data["current_value"] = 0.0

    # The achievement flag only changes when the client sends it
    for key, value in update_data.items():
        setattr(row, key, value)

    db.commit()
    db.refresh(row)
    return to_read(row)


@router.post("/{goal_id}/toggle", response_model=GoalRead)
def toggle_achieved(goal_id: str, db: Session = Depends(get_db)):
    row = get_goal_or_404(db, goal_id)
    row.is_achieved = not row.is_achieved
    db.commit()
    db.refresh(row)
    return to_read(row)


@router.delete("/{goal_id}")
def delete_goal(goal_id: str, db: Session = Depends(get_db)):
    row = get_goal_or_404(db, goal_id)
    db.delete(row)
    db.commit()
    return {"message": "Goal deleted"}
