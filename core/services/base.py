"""Shared plumbing for the resource services."""

from collections.abc import Callable
from datetime import datetime, timezone

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BaseService:
    """
    Base for service-layer classes.

    Services are stateless apart from their collaborators: a repository and
    a clock returning timezone-aware UTC datetimes. Tests inject a fixed
    clock to make timestamps predictable.
    """

    def __init__(self, clock: Clock | None = None):
        self._clock = clock or utc_now

    def _now(self, not_before: datetime | None = None) -> datetime:
        """Current time, never earlier than `not_before` (keeps updated_at >= created_at)."""
        now = self._clock()
        if not_before is not None and now < not_before:
            return not_before
        return now
