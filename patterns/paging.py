"""Pagination and sorting value types.

A PageRequest is what a service hands to a repository: a zero-based page
number, a page size, and a Sort made of ordered (column, direction) pairs.
A Page is what comes back: one slice of rows plus the total match count.

Example::

    sort = Sort.by(Direction.DESC, "title", "id")
    page = await repo.find_by_params(..., page_request=PageRequest(0, 10, sort))
    page.total_pages
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


# ---------------------------------------------------------------------------
# Sorting
# ---------------------------------------------------------------------------

class Direction(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class Order:
    """One sort key."""

    column: str
    direction: Direction = Direction.ASC

    @property
    def is_ascending(self) -> bool:
        return self.direction == Direction.ASC


@dataclass(frozen=True)
class Sort:
    """Ordered sort keys; the first key is the primary sort."""

    orders: tuple[Order, ...] = ()

    @classmethod
    def by(cls, direction: Direction, *columns: str | None) -> "Sort":
        """Sort every given column in one direction. Empty column names are skipped."""
        return cls(tuple(Order(c, direction) for c in columns if c))

    @classmethod
    def unsorted(cls) -> "Sort":
        return cls()

    @property
    def columns(self) -> list[str]:
        return [o.column for o in self.orders]


# ---------------------------------------------------------------------------
# Paging
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PageRequest:
    """Zero-based page request."""

    number: int = 0
    size: int = 10
    sort: Sort = field(default_factory=Sort.unsorted)

    def __post_init__(self):
        if self.number < 0:
            raise ValueError("Page number must not be negative")
        if self.size < 1:
            raise ValueError("Page size must be at least 1")

    @property
    def offset(self) -> int:
        return self.number * self.size


@dataclass
class Page:
    """One page of results."""

    content: list[dict]
    number: int
    size: int
    total_elements: int

    @property
    def total_pages(self) -> int:
        return (self.total_elements + self.size - 1) // self.size

    @property
    def has_next(self) -> bool:
        return self.number + 1 < self.total_pages

    def to_dict(self) -> dict[str, Any]:
        return {
            "content": self.content,
            "pagination": {
                "number": self.number,
                "size": self.size,
                "total_elements": self.total_elements,
                "total_pages": self.total_pages,
            },
        }
