"""
Passive records exchanged between services and repositories.

Entities are immutable; services derive modified copies with
dataclasses.replace() and hand them to a repository to persist.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Account:
    """
    An account registered with the service.

    Attributes:
        id: Opaque identifier assigned by the repository on create
        email: Contact email, unique at the storage level
        firebase_id: External identity reference (optional)
    """

    id: str = ""
    email: str = ""
    firebase_id: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class Domain:
    """
    A hostname registered by an account.

    Every domain belongs to exactly one account; the same hostname may be
    registered by several accounts as separate rows.
    """

    id: str = ""
    account_id: str = ""
    domain: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None


def id_sort_key(identifier: str) -> tuple[int, int, str]:
    """
    Ordering key for opaque ids.

    Ids allocated from a sequence render as decimal strings; those sort
    numerically (so "10" follows "9") and before any non-numeric id.
    """
    if identifier.isascii() and identifier.isdigit():
        return (0, int(identifier), "")
    return (1, 0, identifier)


__all__ = ["Account", "Domain", "id_sort_key"]
