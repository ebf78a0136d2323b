"""SQLAlchemy models for the todo domain.

Every row is owned by a user email. Tasks reference an optional category and
priority belonging to the same user. The to_dict() method provides the
standard serialisation interface used by repositories and the service
cache.
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from core.models.base import Base, IdMixin


class Category(IdMixin, Base):
    """A user-defined task category."""

    __tablename__ = "categories"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    user_email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "user_email": self.user_email,
        }


class Priority(IdMixin, Base):
    """A user-defined task priority with a display color."""

    __tablename__ = "priorities"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    color: Mapped[str | None] = mapped_column(String(32), nullable=True)
    user_email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "color": self.color,
            "user_email": self.user_email,
        }


class Task(IdMixin, Base):
    """A user's todo item."""

    __tablename__ = "tasks"

    title: Mapped[str] = mapped_column(String(500), nullable=False)
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    task_date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True, index=True)
    priority_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("priorities.id", ondelete="SET NULL"), nullable=True, index=True
    )
    category_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True, index=True
    )
    user_email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "completed": self.completed,
            "task_date": self.task_date.isoformat() if self.task_date else None,
            "priority_id": self.priority_id,
            "category_id": self.category_id,
            "user_email": self.user_email,
        }
