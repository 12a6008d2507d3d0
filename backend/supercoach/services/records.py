"""Typed records for progress aggregation and the parser that builds them.

Stored rows and raw documents (camelCase exports from a document store or
snake_case rows from our own tables) are validated here, once, before they
reach the aggregator. Shape problems become `Rejection`s; an unreadable date
is not a shape problem, it leaves the record's date empty so the record still
counts toward totals but drops out of date-based statistics.
"""

import logging
import math
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Optional, TypeVar

from supercoach.core.time_utils import parse_day, parse_timestamp
from supercoach.schemas.goal import MetricKind

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RecordParseError(ValueError):
    """A document cannot be turned into a record at all."""


@dataclass(frozen=True)
class WorkoutRecord:
    id: str
    date: Optional[date]  # None when the stored date could not be parsed
    duration_minutes: Optional[float] = None
    overall_effort: Optional[float] = None


@dataclass(frozen=True)
class GoalRecord:
    id: str
    metric_kind: MetricKind
    target_value: float
    current_value: Optional[float] = 0.0  # None when stored value is not numeric
    is_achieved: bool = False
    created_at: Optional[datetime] = None
    unit: Optional[str] = None


@dataclass(frozen=True)
class Rejection:
    index: int
    id: Optional[str]
    reason: str


def _field(doc: Mapping, *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in doc:
            return doc[key]
    return default


def _coerce_number(value) -> Optional[float]:
    """Read ints, floats and numeric strings; anything else is None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        num = float(value)
    elif isinstance(value, str):
        try:
            num = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if math.isnan(num) or math.isinf(num):
        return None
    return num


def _coerce_flag(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")
    return bool(value)


def _require_id(doc) -> str:
    if not isinstance(doc, Mapping):
        raise RecordParseError("document is not a mapping")
    raw = doc.get("id")
    if isinstance(raw, bool) or raw is None or str(raw).strip() == "":
        raise RecordParseError("missing id")
    return str(raw)


def parse_workout(doc: Mapping) -> WorkoutRecord:
    record_id = _require_id(doc)
    raw_date = _field(doc, "date")
    day = parse_day(raw_date)
    if day is None:
        logger.warning("workout %s: unparseable date %r", record_id, raw_date)
    return WorkoutRecord(
        id=record_id,
        date=day,
        duration_minutes=_coerce_number(_field(doc, "durationMinutes", "duration_minutes")),
        overall_effort=_coerce_number(
            _field(doc, "overallEffort", "overall_effort", "overallRPE")
        ),
    )


def parse_goal(doc: Mapping) -> GoalRecord:
    record_id = _require_id(doc)

    raw_kind = _field(doc, "metricKind", "metric_kind", "targetMetric", default="custom")
    try:
        kind = MetricKind(raw_kind)
    except ValueError:
        raise RecordParseError(f"unknown metric kind {raw_kind!r}")

    target = _coerce_number(_field(doc, "targetValue", "target_value"))
    if target is None or target <= 0:
        raise RecordParseError("target value must be a positive number")

    raw_current = _field(doc, "currentValue", "current_value")
    current = 0.0 if raw_current is None else _coerce_number(raw_current)

    raw_created = _field(doc, "createdAt", "created_at")
    created_at = parse_timestamp(raw_created)
    if created_at is None and raw_created is not None:
        logger.warning("goal %s: unparseable createdAt %r", record_id, raw_created)

    unit = _field(doc, "unit")
    if unit is not None and not (isinstance(unit, str) and unit.strip()):
        logger.warning("goal %s: ignoring unit %r", record_id, unit)
        unit = None

    return GoalRecord(
        id=record_id,
        metric_kind=kind,
        target_value=target,
        current_value=current,
        is_achieved=_coerce_flag(_field(doc, "isAchieved", "is_achieved", default=False)),
        created_at=created_at,
        unit=unit,
    )


def parse_many(
    docs: Iterable[Mapping], parser: Callable[[Mapping], T]
) -> tuple[list[T], list[Rejection]]:
    """Parse every document; failures are collected, never raised."""
    records: list[T] = []
    rejections: list[Rejection] = []
    for index, doc in enumerate(docs):
        try:
            records.append(parser(doc))
        except RecordParseError as e:
            doc_id = doc.get("id") if isinstance(doc, Mapping) else None
            rejection = Rejection(
                index=index,
                id=None if doc_id is None else str(doc_id),
                reason=str(e),
            )
            logger.warning("rejected document #%d (id=%s): %s", index, rejection.id, e)
            rejections.append(rejection)
    return records, rejections


def row_to_document(row) -> dict:
    """Column values of an ORM row as a plain dict."""
    return {c.name: getattr(row, c.name) for c in row.__table__.columns}


def workouts_from_rows(rows) -> tuple[list[WorkoutRecord], list[Rejection]]:
    return parse_many((row_to_document(r) for r in rows), parse_workout)


def goals_from_rows(rows) -> tuple[list[GoalRecord], list[Rejection]]:
    return parse_many((row_to_document(r) for r in rows), parse_goal)
