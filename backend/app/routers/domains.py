"""
Domain endpoints.

Every route is scoped to an owning account: reads and deletes take
`account_id` as a query parameter, create and update carry it in the body.
"""

from fastapi import APIRouter, Depends, Query, status

from core.config import Settings
from core.services import CreateDomainRequest, DomainService, UpdateDomainRequest

from ..auth.dependencies import get_app_settings, get_current_identity
from ..dependencies import get_domain_service
from ..error_handlers import unwrap
from ..pagination import Pagination
from ..schemas import DomainResponse, ErrorResponse, Page

router = APIRouter(
    prefix="/domains",
    tags=["domains"],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)


@router.get("", response_model=Page[DomainResponse])
def list_domains(
    account_id: str = Query(..., description="Owning account id"),
    page: int | None = Query(None, description="1-based page number"),
    per_page: int | None = Query(None, description="Items per page"),
    service: DomainService = Depends(get_domain_service),
    settings: Settings = Depends(get_app_settings),
):
    """List the account's domains in ascending id order."""
    total = unwrap(service.count(account_id))
    paging = Pagination.create(
        page, per_page, total, settings.default_page_size, settings.max_page_size
    )
    domains = unwrap(service.query(paging.offset, paging.limit, account_id))
    return paging.to_page([DomainResponse.model_validate(d) for d in domains])


@router.get("/{domain_id}", response_model=DomainResponse)
def get_domain(
    domain_id: str,
    account_id: str = Query(..., description="Owning account id"),
    service: DomainService = Depends(get_domain_service),
):
    return DomainResponse.model_validate(unwrap(service.get(domain_id, account_id)))


@router.post(
    "",
    response_model=DomainResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_identity)],
)
def create_domain(
    request: CreateDomainRequest,
    service: DomainService = Depends(get_domain_service),
):
    return DomainResponse.model_validate(unwrap(service.create(request)))


@router.put(
    "/{domain_id}",
    response_model=DomainResponse,
    dependencies=[Depends(get_current_identity)],
)
def update_domain(
    domain_id: str,
    request: UpdateDomainRequest,
    service: DomainService = Depends(get_domain_service),
):
    """Rename a domain; `account_id` in the body scopes the lookup."""
    return DomainResponse.model_validate(unwrap(service.update(domain_id, request)))


@router.delete(
    "/{domain_id}",
    response_model=DomainResponse,
    dependencies=[Depends(get_current_identity)],
)
def delete_domain(
    domain_id: str,
    account_id: str = Query(..., description="Owning account id"),
    service: DomainService = Depends(get_domain_service),
):
    return DomainResponse.model_validate(unwrap(service.delete(domain_id, account_id)))
