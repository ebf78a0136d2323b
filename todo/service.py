"""
Task service - business logic for task operations.

Sits between a controller and TaskRepository. It adds result caching,
owner-email checks, and the normalization of search parameters (full-day
date bounds, sort direction, id tie-break, paging defaults). It has no
HTTP dependencies apart from the FastAPI dependency factory at the bottom.

Transactions belong to the session the repository was built with: an
exception raised here (IncorrectDataError included) rolls back the
request's session in core.database.get_session.
"""
import logging
from typing import Optional

from fastapi import Depends

from core.cache import CacheManager, cache_evict, cacheable
from core.errors import TaskNotFoundError
from core.observability.otel_setup import get_tracer, service_span
from patterns.paging import Page, PageRequest
from todo import search
from todo.config import TodoConfig, config as default_config
from todo.models.schemas import TaskSearchValues, TaskWrite
from todo.repository import TaskRepository, get_task_repository

logger = logging.getLogger(__name__)

TASKS_CACHE = "tasks"

# Shared by every request-scoped TaskService in this process.
task_caches = default_config.cache.create_manager()


class TaskService:
    """Service for task business logic."""

    def __init__(
        self,
        repository: TaskRepository,
        config: Optional[TodoConfig] = None,
        caches: Optional[CacheManager] = None,
    ):
        """
        Args:
            repository: TaskRepository (or any object with the same methods)
            config: Paging limits; the process-wide TodoConfig by default
            caches: Result caches; the process-wide task_caches by default
        """
        self.repository = repository
        self.config = config or default_config
        self.caches = caches or task_caches
        self.tracer = get_tracer()

    @cacheable(TASKS_CACHE, key=lambda email: email)
    async def find_all(self, email: str) -> list[dict]:
        """All tasks of a user, ordered by title."""
        email = search.require_email(email)
        with service_span(self.tracer, "find_all", email=email):
            return await self.repository.find_by_user_email_order_by_title_asc(email)

    @cache_evict(TASKS_CACHE)
    async def add(self, task: TaskWrite) -> dict:
        with service_span(self.tracer, "add", email=task.user_email):
            saved = await self.repository.save(task.model_dump())
        logger.info("Saved task %s for %s", saved.get("id"), task.user_email)
        return saved

    @cache_evict(TASKS_CACHE)
    async def update(self, task: TaskWrite) -> dict:
        # Same upsert as add(); the id in the payload decides insert vs update.
        with service_span(self.tracer, "update", email=task.user_email, task_id=task.id):
            saved = await self.repository.save(task.model_dump())
        logger.info("Saved task %s for %s", saved.get("id"), task.user_email)
        return saved

    @cache_evict(TASKS_CACHE)
    async def delete_by_id(self, task_id: int) -> None:
        """Delete a task. Unknown ids are silently ignored."""
        with service_span(self.tracer, "delete_by_id", task_id=task_id):
            await self.repository.delete_by_id(task_id)
        logger.info("Deleted task %s", task_id)

    @cacheable(TASKS_CACHE, key=lambda search_values: search_values)
    async def find_by_params(self, search_values: TaskSearchValues) -> Page:
        """Filtered, sorted, paginated search over one user's tasks.

        Raises:
            IncorrectDataError: email missing or blank, or unknown sort column
        """
        email = search.require_email(search_values.email)

        completed = search.completed_flag(search_values.completed)
        date_from = search.start_of_day(search_values.date_from)
        date_to = search.end_of_day(search_values.date_to)

        sort = search.build_sort(search_values.sort_column, search_values.sort_direction)
        page_request = PageRequest(
            number=search_values.page_number or 0,
            size=self._page_size(search_values.page_size),
            sort=sort,
        )

        with service_span(
            self.tracer,
            "find_by_params",
            email=email,
            page_number=page_request.number,
            page_size=page_request.size,
        ):
            page = await self.repository.find_by_params(
                search_values.title,
                completed,
                search_values.priority_id,
                search_values.category_id,
                email,
                date_from,
                date_to,
                page_request,
            )
        logger.debug(
            "Task search for %s matched %d (page %d/%d)",
            email, page.total_elements, page.number, page.total_pages,
        )
        return page

    async def find_by_id(self, task_id: int) -> dict:
        """Get a task by ID.

        Raises:
            TaskNotFoundError: no task with that id
        """
        with service_span(self.tracer, "find_by_id", task_id=task_id):
            task = await self.repository.find_by_id(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def _page_size(self, requested: Optional[int]) -> int:
        if requested is None:
            return self.config.search.default_page_size
        return min(requested, self.config.search.max_page_size)


# ---------------------------------------------------------------------------
# FastAPI dependency factory
# ---------------------------------------------------------------------------

def get_task_service(
    repository: TaskRepository = Depends(get_task_repository),
) -> TaskService:
    """FastAPI dependency for TaskService."""
    return TaskService(repository)
