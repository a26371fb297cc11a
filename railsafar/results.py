import logging
from dataclasses import dataclass
from enum import Enum
from functools import wraps
from typing import Any, Generic, Optional, TypeVar

from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

T = TypeVar("T")

class ResultStatus(str, Enum):
    """Outcome of a service operation"""
    OK = "ok"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    REJECTED = "rejected"
    STORAGE_ERROR = "storage_error"


@dataclass
class Result(Generic[T]):
    """
    Value returned by every service operation.

    Truthy only when the operation succeeded, so callers that only care
    about success can write ``if service.process_payment(...)``. Callers
    that need to tell an absent row from a broken store inspect ``status``.
    """
    status: ResultStatus
    value: Optional[T] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == ResultStatus.OK

    @property
    def is_storage_error(self) -> bool:
        return self.status == ResultStatus.STORAGE_ERROR

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> T:
        if not self.ok:
            raise ValueError(self.error or f"Operation failed: {self.status.value}")
        return self.value

    @classmethod
    def success(cls, value: Any = None) -> "Result":
        return cls(ResultStatus.OK, value)

    @classmethod
    def not_found(cls, error: str, value: Any = None) -> "Result":
        return cls(ResultStatus.NOT_FOUND, value, error)

    @classmethod
    def conflict(cls, error: str) -> "Result":
        return cls(ResultStatus.CONFLICT, None, error)

    @classmethod
    def rejected(cls, error: str) -> "Result":
        return cls(ResultStatus.REJECTED, None, error)

    @classmethod
    def storage_error(cls, error: str, value: Any = None) -> "Result":
        return cls(ResultStatus.STORAGE_ERROR, value, error)


def storage_guard(action: str, default=None):
    """
    Convert storage failures raised inside a service method into a
    ``STORAGE_ERROR`` result.

    ``default`` (or ``default()`` when callable) becomes the result value,
    so list operations still hand back an empty list.
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except SQLAlchemyError as e:
                logger.exception("Error %s: %s", action, e)
                value = default() if callable(default) else default
                return Result.storage_error(f"Error {action}: {e}", value)
        return wrapper
    return decorator
