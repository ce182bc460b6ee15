"""
Core services with validation and business logic.

Services sit between the HTTP handlers and the repositories: they validate
requests, apply business rules and return a Result for every operation.
"""

from core.services.account_service import AccountService, CreateAccountRequest, UpdateAccountRequest
from core.services.base import utc_now
from core.services.domain_service import CreateDomainRequest, DomainService, UpdateDomainRequest

__all__ = [
    "AccountService",
    "CreateAccountRequest",
    "UpdateAccountRequest",
    "DomainService",
    "CreateDomainRequest",
    "UpdateDomainRequest",
    "utc_now",
]
