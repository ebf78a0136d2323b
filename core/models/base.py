"""Base model and mixins for all SQLAlchemy models.

Provides:
- Base: Declarative base class for all models
- IdMixin: Adds an auto-incrementing integer primary key

Every model inherits from Base and includes IdMixin. Rows are owned by a
user email; ownership columns live on each model.
"""

from sqlalchemy import Integer
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Declarative base for all todo models."""
    pass


class IdMixin:
    """Mixin providing the integer primary key used as the stable sort key."""

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
