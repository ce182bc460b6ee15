"""
Declarative request validation.

Each request type has a rules model whose pydantic constraints describe the
acceptable input. check_rules() evaluates every field and collects all
violations into a single VALIDATION error, so clients see every problem at
once instead of the first one.
"""

import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from .constants import MAX_NAME_LENGTH
from .errors import ServiceError, validation_error

BLANK_MESSAGE = "cannot be blank"

_INTEGER = re.compile(r"-?[0-9]+")


def _message(error: Mapping[str, Any]) -> str:
    """Translate a pydantic error entry into a short client-facing reason."""
    error_type = error.get("type", "")
    ctx = error.get("ctx") or {}

    if error_type in ("missing", "string_too_short"):
        return BLANK_MESSAGE
    if error_type == "string_too_long":
        return f"the length must be between 0 and {ctx.get('max_length')}"
    if error_type == "greater_than_equal":
        return f"must be no less than {ctx.get('ge')}"
    if error_type == "string_type":
        return "must be a string"
    if error_type == "value_error" and "error" in ctx:
        return str(ctx["error"])
    return str(error.get("msg", "is invalid"))


def check_rules(rules: type[BaseModel], data: BaseModel | Mapping[str, Any]) -> ServiceError | None:
    """
    Validate data against a rules model.

    Returns:
        None when every rule passes, otherwise a VALIDATION ServiceError
        whose fields map each offending field to its first reason.
    """
    payload = data.model_dump() if isinstance(data, BaseModel) else dict(data)
    try:
        rules.model_validate(payload)
    except PydanticValidationError as exc:
        fields: dict[str, str] = {}
        for error in exc.errors():
            name = ".".join(str(part) for part in error.get("loc", ())) or "request"
            fields.setdefault(name, _message(error))
        return validation_error(fields)
    return None


# =============================================================================
# Rules
# =============================================================================


class _Rules(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")


class CreateAccountRules(_Rules):
    email: str = Field(min_length=1, max_length=MAX_NAME_LENGTH)


class UpdateAccountRules(_Rules):
    name: str = Field(min_length=1, max_length=MAX_NAME_LENGTH)


class CreateDomainRules(_Rules):
    name: str = Field(min_length=1, max_length=MAX_NAME_LENGTH)
    account_id: str = Field(min_length=1)

    @field_validator("account_id")
    @classmethod
    def numeric_and_non_negative(cls, v: str) -> str:
        if not _INTEGER.fullmatch(v):
            raise ValueError("must be a valid number")
        if int(v) == 0:
            # 0 is the unset value for an account reference
            raise ValueError(BLANK_MESSAGE)
        if int(v) < 0:
            raise ValueError("must be no less than 0")
        return v


class UpdateDomainRules(_Rules):
    name: str = Field(min_length=1, max_length=MAX_NAME_LENGTH)


class PageRules(_Rules):
    offset: int = Field(ge=0)
    limit: int = Field(ge=0)


def check_page(offset: int, limit: int) -> ServiceError | None:
    """Offsets and limits must be non-negative; a limit of 0 is valid."""
    return check_rules(PageRules, {"offset": offset, "limit": limit})


__all__ = [
    "BLANK_MESSAGE",
    "check_rules",
    "check_page",
    "CreateAccountRules",
    "UpdateAccountRules",
    "CreateDomainRules",
    "UpdateDomainRules",
]
