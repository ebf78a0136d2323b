"""Task repository: async database access scoped by owner email.

Extends BaseRepository with the task queries the service needs: the
per-user title-ordered listing and the filtered, sorted, paginated search.
"""

from datetime import datetime
from typing import Any

from fastapi import Depends
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from core.database import get_session
from patterns.paging import Page, PageRequest
from patterns.repository import BaseRepository
from todo.models.db_models import Task


# ---------------------------------------------------------------------------
# Task repository
# ---------------------------------------------------------------------------

class TaskRepository(BaseRepository[Task]):
    """Repository for task CRUD and search operations."""

    model = Task

    sort_columns = {
        "id": "id",
        "title": "title",
        "completed": "completed",
        "task_date": "task_date",
        "priority": "priority_id",
        "priority_id": "priority_id",
        "category": "category_id",
        "category_id": "category_id",
    }

    async def find_by_user_email_order_by_title_asc(self, email: str) -> list[dict]:
        """All tasks of one user, alphabetically."""
        stmt = (
            select(Task)
            .where(Task.user_email == email)
            .order_by(Task.title.asc(), Task.id.asc())
        )
        result = await self.session.execute(stmt)
        return [row.to_dict() for row in result.scalars().all()]

    async def find_by_params(
        self,
        title: str | None,
        completed: bool | None,
        priority_id: int | None,
        category_id: int | None,
        email: str,
        date_from: datetime | None,
        date_to: datetime | None,
        page_request: PageRequest,
    ) -> Page:
        """Search one user's tasks. Every None filter is skipped."""
        conditions: list[Any] = [Task.user_email == email]

        if title:
            conditions.append(func.lower(Task.title).like(f"%{title.lower()}%"))

        if completed is not None:
            conditions.append(Task.completed == completed)

        if priority_id is not None:
            conditions.append(Task.priority_id == priority_id)

        if category_id is not None:
            conditions.append(Task.category_id == category_id)

        if date_from is not None:
            conditions.append(Task.task_date >= date_from)

        if date_to is not None:
            conditions.append(Task.task_date <= date_to)

        stmt = (
            select(Task)
            .where(*conditions)
            .order_by(*self.order_by(page_request.sort))
            .offset(page_request.offset)
            .limit(page_request.size)
        )
        count_stmt = select(func.count()).select_from(Task).where(*conditions)

        result = await self.session.execute(stmt)
        tasks = [row.to_dict() for row in result.scalars().all()]

        count_result = await self.session.execute(count_stmt)
        total = count_result.scalar() or 0

        return Page(
            content=tasks,
            number=page_request.number,
            size=page_request.size,
            total_elements=total,
        )


# ---------------------------------------------------------------------------
# FastAPI dependency factory
# ---------------------------------------------------------------------------

def get_task_repository(
    session: AsyncSession = Depends(get_session),
) -> TaskRepository:
    """FastAPI dependency for TaskRepository."""
    return TaskRepository(session)
