"""Async repository pattern for database access.

Provides a generic base repository with upsert-by-primary-key, lookup,
deletion, and sort translation. Domain repositories subclass this to add
their own queries.

Example: TaskRepository extending BaseRepository.
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from core.errors import IncorrectDataError
from core.models.base import Base
from patterns.paging import Sort

# ---------------------------------------------------------------------------
# Type variable for model classes
# ---------------------------------------------------------------------------

ModelT = TypeVar("ModelT", bound=Base)


# ---------------------------------------------------------------------------
# Base repository
# ---------------------------------------------------------------------------

class BaseRepository(Generic[ModelT]):
    """Generic async repository keyed by an integer ``id`` column.

    Subclass and set `model` to your SQLAlchemy model::

        class TaskRepository(BaseRepository[Task]):
            model = Task
            sort_columns = {"title": "title", "id": "id"}

    Rows leave the repository as dicts (``model.to_dict()``), never as
    attached ORM instances.
    """

    model: type[ModelT]

    # Public sort name -> model attribute name
    sort_columns: dict[str, str] = {"id": "id"}

    def __init__(self, session: AsyncSession):
        self.session = session

    # -- Upsert --

    async def save(self, data: dict[str, Any]) -> dict:
        """Insert or update by primary key.

        A missing ``id`` inserts a new row; an existing ``id`` overwrites the
        columns present in ``data``.
        """
        if data.get("id") is None:
            data = {k: v for k, v in data.items() if k != "id"}
        item = await self.session.merge(self.model(**data))
        await self.session.flush()
        await self.session.refresh(item)
        return item.to_dict()

    # -- Get by ID --

    async def find_by_id(self, item_id: int) -> dict | None:
        """Get a single item by ID."""
        row = await self.session.get(self.model, item_id)
        return row.to_dict() if row else None

    # -- Delete --

    async def delete_by_id(self, item_id: int) -> None:
        """Delete an item. Absent ids are not an error."""
        await self.session.execute(
            delete(self.model).where(self.model.id == item_id)
        )
        await self.session.flush()

    # -- Sorting --

    def order_by(self, sort: Sort) -> Sequence[Any]:
        """Translate a Sort into ORDER BY clauses, rejecting unknown columns."""
        clauses = []
        for order in sort.orders:
            attr_name = self.sort_columns.get(order.column)
            if attr_name is None:
                raise IncorrectDataError(
                    f"unknown sort column: {order.column}", field="sort_column"
                )
            column = getattr(self.model, attr_name)
            clauses.append(column.asc() if order.is_ascending else column.desc())
        return clauses
