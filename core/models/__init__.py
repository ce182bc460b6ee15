"""
SQLAlchemy models for the domain registry.

Single source of truth for the relational schema. Repositories map these
rows to the immutable entities in core.entities.

Usage:
    from core.models import AccountModel, DomainModel
"""

from core.db import Base

from .account import AccountModel
from .domain import DomainModel

__all__ = [
    "Base",
    "AccountModel",
    "DomainModel",
]
