"""
Pydantic schemas for request and response validation.

Request bodies reuse the core request models (CreateAccountRequest, ...);
this module holds what only the HTTP layer needs.
"""

from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Identity(BaseModel):
    """Caller resolved from a verified bearer token."""

    id: str
    name: str | None = None


class AccountResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    firebase_id: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None


class DomainResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    account_id: str
    domain: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Page(BaseModel, Generic[T]):
    """Paginated list envelope."""

    page: int
    per_page: int
    page_count: int = Field(description="Number of pages, or -1 when the total is unknown")
    total_count: int
    items: list[T] = Field(default_factory=list)


class FieldError(BaseModel):
    field: str
    error: str


class ErrorResponse(BaseModel):
    detail: str
    status_code: int
    errors: list[FieldError] = Field(default_factory=list)
