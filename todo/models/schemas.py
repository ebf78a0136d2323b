"""Pydantic schemas for task writes and task searches."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------

class TaskWrite(BaseModel):
    """Payload for TaskService.add / TaskService.update.

    Both operations upsert by ``id``: a missing id creates a task.
    """

    id: Optional[int] = None
    title: str = Field(..., min_length=1, max_length=500)
    completed: bool = False
    task_date: Optional[datetime] = None
    priority_id: Optional[int] = None
    category_id: Optional[int] = None
    user_email: str = Field(..., min_length=1, max_length=255)


class TaskSearchValues(BaseModel):
    """Filter, sort and paging parameters for TaskService.find_by_params.

    ``email`` is optional here on purpose: the service rejects a missing or
    blank email itself.
    """

    model_config = ConfigDict(frozen=True)

    title: Optional[str] = None
    completed: Optional[int] = None  # 1 = completed
    priority_id: Optional[int] = None
    category_id: Optional[int] = None
    email: Optional[str] = None

    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None

    sort_column: Optional[str] = None
    sort_direction: Optional[str] = None

    page_number: Optional[int] = Field(None, ge=0)
    page_size: Optional[int] = Field(None, ge=1)
