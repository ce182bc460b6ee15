"""Result - the return type of every repository and service operation."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from .errors import ServiceError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Either a success value or a ServiceError, never both.

    Usage:
        result = service.get(account_id)
        if not result.ok:
            return handle(result.error)
        account = result.value
    """

    value: T | None = None
    error: ServiceError | None = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ServiceError) -> "Result[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        """Whether the operation succeeded."""
        return self.error is None


__all__ = ["Result"]
