"""
Account endpoints.

Reads are public; create, update and delete require a bearer token.
"""

from fastapi import APIRouter, Depends, Query, status

from core.config import Settings
from core.services import AccountService, CreateAccountRequest, UpdateAccountRequest

from ..auth.dependencies import get_app_settings, get_current_identity
from ..dependencies import get_account_service
from ..error_handlers import unwrap
from ..pagination import Pagination
from ..schemas import AccountResponse, ErrorResponse, Page

router = APIRouter(
    prefix="/accounts",
    tags=["accounts"],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)


@router.get("", response_model=Page[AccountResponse])
def list_accounts(
    page: int | None = Query(None, description="1-based page number"),
    per_page: int | None = Query(None, description="Items per page"),
    service: AccountService = Depends(get_account_service),
    settings: Settings = Depends(get_app_settings),
):
    """List accounts in ascending id order."""
    total = unwrap(service.count())
    paging = Pagination.create(
        page, per_page, total, settings.default_page_size, settings.max_page_size
    )
    accounts = unwrap(service.query(paging.offset, paging.limit))
    return paging.to_page([AccountResponse.model_validate(a) for a in accounts])


@router.get("/{account_id}", response_model=AccountResponse)
def get_account(
    account_id: str,
    service: AccountService = Depends(get_account_service),
):
    return AccountResponse.model_validate(unwrap(service.get(account_id)))


@router.post(
    "",
    response_model=AccountResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_identity)],
)
def create_account(
    request: CreateAccountRequest,
    service: AccountService = Depends(get_account_service),
):
    """Create an account and return it as stored."""
    return AccountResponse.model_validate(unwrap(service.create(request)))


@router.put(
    "/{account_id}",
    response_model=AccountResponse,
    dependencies=[Depends(get_current_identity)],
)
def update_account(
    account_id: str,
    request: UpdateAccountRequest,
    service: AccountService = Depends(get_account_service),
):
    """Replace the account's email with `name`."""
    return AccountResponse.model_validate(unwrap(service.update(account_id, request)))


@router.delete(
    "/{account_id}",
    response_model=AccountResponse,
    dependencies=[Depends(get_current_identity)],
)
def delete_account(
    account_id: str,
    service: AccountService = Depends(get_account_service),
):
    """Delete an account and return it as it was before removal."""
    return AccountResponse.model_validate(unwrap(service.delete(account_id)))
