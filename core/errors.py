"""Service exception hierarchy.

Every error raised by the todo service layer inherits from ServiceError,
so an outer layer (a controller, a CLI) can catch one type and serialize it
with to_dict(). Subclasses also inherit from the matching builtin
(ValueError, LookupError) so generic handlers keep working.
"""
from typing import Any


class ServiceError(Exception):
    """Base exception for all service errors.

    Attributes:
        message: Human-readable error message
        context: Dictionary of additional context
    """

    def __init__(self, message: str, *, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        result = {
            "error_type": self.__class__.__name__,
            "message": self.message,
        }
        if self.context:
            result["context"] = self.context
        return result


class IncorrectDataError(ServiceError, ValueError):
    """Raised when a request carries missing or malformed parameters.

    Attributes:
        field: Optional name of the offending parameter
    """

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context=context)
        self.field = field
        if field is not None:
            self.context.setdefault("field", field)


class NotFoundError(ServiceError, LookupError):
    """Raised when a requested resource does not exist.

    Attributes:
        resource_type: Type of resource (e.g. "Task")
        resource_id: ID of the resource that was not found
    """

    def __init__(
        self,
        resource_type: str,
        resource_id: str | int,
        *,
        message: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        if message is None:
            message = f"{resource_type} with ID '{resource_id}' not found"

        super().__init__(message, context=context)
        self.resource_type = resource_type
        self.resource_id = str(resource_id)
        self.context.setdefault("resource_type", resource_type)
        self.context.setdefault("resource_id", str(resource_id))


class TaskNotFoundError(NotFoundError):
    """Raised by TaskService.find_by_id for an unknown id."""

    def __init__(self, task_id: int):
        super().__init__("Task", task_id)
        self.task_id = task_id
