"""Search parameter normalization.

Pure functions used by TaskService.find_by_params to turn a raw
TaskSearchValues bag into repository arguments. Nothing here touches the
database.
"""

from datetime import date, datetime, time, timezone
from typing import Optional

from core.errors import IncorrectDataError
from patterns.paging import Direction, Sort

ID_COLUMN = "id"

# Bounds of an inclusive full-day range
DAY_START = time(0, 0, 1, 1000)        # 00:00:01.001
DAY_END = time(23, 59, 59, 999000)     # 23:59:59.999


def require_email(email: Optional[str]) -> str:
    """Every task query is scoped by a non-blank owner email."""
    if email is None or not email.strip():
        raise IncorrectDataError("missed param: email", field="email")
    return email


def completed_flag(completed: Optional[int]) -> bool:
    """Only an explicit 1 means completed; anything else, None included, is False."""
    return completed is not None and completed == 1


def _at(value: date, at: time) -> datetime:
    if isinstance(value, datetime):
        # task_date is a naive UTC column; aware bounds pick their UTC day.
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value.replace(
            hour=at.hour, minute=at.minute, second=at.second, microsecond=at.microsecond
        )
    return datetime.combine(value, at)


def start_of_day(value: Optional[date]) -> Optional[datetime]:
    """Move a date-from bound to 00:00:01.001 of its calendar day."""
    if value is None:
        return None
    return _at(value, DAY_START)


def end_of_day(value: Optional[date]) -> Optional[datetime]:
    """Move a date-to bound to 23:59:59.999 of its calendar day."""
    if value is None:
        return None
    return _at(value, DAY_END)


def sort_direction(direction: Optional[str]) -> Direction:
    """Ascending for a missing, blank or exactly "asc" value; descending otherwise."""
    if direction is None or not direction.strip() or direction.strip() == "asc":
        return Direction.ASC
    return Direction.DESC


def build_sort(sort_column: Optional[str], direction: Optional[str]) -> Sort:
    """Sort by the requested column, then by id so equal values keep a stable order."""
    column = sort_column.strip() if sort_column else None
    if column == ID_COLUMN:
        column = None
    return Sort.by(sort_direction(direction), column, ID_COLUMN)
