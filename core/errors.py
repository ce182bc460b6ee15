"""
Error taxonomy shared by repositories and services.

Failures travel as values inside a Result rather than as exceptions, so
callers can inspect the kind of failure exhaustively:

    VALIDATION  client input defect, with one reason per offending field
    NOT_FOUND   the requested id (or ownership scope) does not exist
    STORAGE     the persistence layer failed (connectivity, constraints)
"""

from dataclasses import dataclass, field
from enum import Enum


class ErrorKind(str, Enum):
    """Kinds of failure a service operation can report."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    STORAGE = "storage"


@dataclass(frozen=True)
class ServiceError:
    """Structured failure payload within a Result."""

    kind: ErrorKind
    message: str
    fields: dict[str, str] = field(default_factory=dict)
    cause: BaseException | None = field(default=None, compare=False, repr=False)


def validation_error(fields: dict[str, str]) -> ServiceError:
    """Build a VALIDATION error from per-field reasons."""
    summary = "; ".join(f"{name}: {reason}" for name, reason in sorted(fields.items()))
    return ServiceError(ErrorKind.VALIDATION, summary or "invalid input", dict(fields))


def not_found(resource: str, identifier: object) -> ServiceError:
    return ServiceError(ErrorKind.NOT_FOUND, f"{resource} {identifier!r} not found")


def storage_error(cause: BaseException, operation: str = "") -> ServiceError:
    """Wrap a persistence failure, keeping the original exception as the cause."""
    prefix = f"{operation} failed" if operation else "storage failure"
    return ServiceError(ErrorKind.STORAGE, f"{prefix}: {type(cause).__name__}", cause=cause)


__all__ = ["ErrorKind", "ServiceError", "validation_error", "not_found", "storage_error"]
