"""API router for roles."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.explorer.api.dependencies import get_ledger_adapter, get_paging_cursor
from src.explorer.domain.dto import RoleDTO
from src.explorer.domain.pagination import PaginatedResponse, PagingCursor
from src.explorer.ledger.errors import LedgerError
from src.explorer.ledger.queries import FindAllRoles
from src.explorer.services.error_classifier import expect_any_error
from src.explorer.services.ledger_adapter import LedgerQueryAdapter

router = APIRouter(prefix="/roles", tags=["roles"])


@router.get("", response_model=PaginatedResponse[RoleDTO])
async def list_roles(
    cursor: Annotated[PagingCursor, Depends(get_paging_cursor)],
    adapter: Annotated[LedgerQueryAdapter, Depends(get_ledger_adapter)],
) -> PaginatedResponse[RoleDTO]:
    try:
        raw = await adapter.execute(FindAllRoles(), cursor)
    except LedgerError as e:
        raise expect_any_error(e) from e

    return PaginatedResponse[RoleDTO].build(cursor, raw, RoleDTO.from_entity)
