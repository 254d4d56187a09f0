"""API router for ledger domains."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.explorer.api.dependencies import (
    get_domain_id,
    get_ledger_adapter,
    get_paging_cursor,
)
from src.explorer.domain.dto import DomainDTO
from src.explorer.domain.identifiers import DomainId
from src.explorer.domain.pagination import (
    PaginatedResponse,
    PagingCursor,
    project_entity,
)
from src.explorer.ledger.errors import LedgerError
from src.explorer.ledger.queries import FindAllDomains, FindDomainById
from src.explorer.services.error_classifier import (
    expect_any_error,
    expect_find_error,
)
from src.explorer.services.ledger_adapter import LedgerQueryAdapter

router = APIRouter(prefix="/domains", tags=["domains"])


@router.get("", response_model=PaginatedResponse[DomainDTO])
async def list_domains(
    cursor: Annotated[PagingCursor, Depends(get_paging_cursor)],
    adapter: Annotated[LedgerQueryAdapter, Depends(get_ledger_adapter)],
) -> PaginatedResponse[DomainDTO]:
    """List domains with their accounts and asset definitions."""
    try:
        raw = await adapter.execute(FindAllDomains(), cursor)
    except LedgerError as e:
        raise expect_any_error(e) from e

    return PaginatedResponse[DomainDTO].build(cursor, raw, DomainDTO.from_entity)


@router.get("/{domain_id}", response_model=DomainDTO)
async def get_domain(
    domain_id: Annotated[DomainId, Depends(get_domain_id)],
    adapter: Annotated[LedgerQueryAdapter, Depends(get_ledger_adapter)],
) -> DomainDTO:
    """Get a single domain by name."""
    try:
        domain = await adapter.find(FindDomainById.for_id(domain_id))
    except LedgerError as e:
        raise expect_find_error(e) from e

    return project_entity(domain, DomainDTO.from_entity)
