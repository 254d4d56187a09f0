"""API router for ledger accounts."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from src.explorer.api.dependencies import (
    get_account_id,
    get_ledger_adapter,
    get_paging_cursor,
)
from src.explorer.domain.dto import AccountDTO
from src.explorer.domain.identifiers import AccountId
from src.explorer.domain.pagination import (
    PaginatedResponse,
    PagingCursor,
    project_entity,
)
from src.explorer.ledger.errors import LedgerError
from src.explorer.ledger.queries import FindAccountById, FindAllAccounts
from src.explorer.services.error_classifier import (
    expect_any_error,
    expect_find_error,
)
from src.explorer.services.ledger_adapter import LedgerQueryAdapter

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/accounts", tags=["accounts"])


@router.get("", response_model=PaginatedResponse[AccountDTO])
async def list_accounts(
    cursor: Annotated[PagingCursor, Depends(get_paging_cursor)],
    adapter: Annotated[LedgerQueryAdapter, Depends(get_ledger_adapter)],
) -> PaginatedResponse[AccountDTO]:
    """List accounts across all domains, one page at a time."""
    try:
        raw = await adapter.execute(FindAllAccounts(), cursor)
    except LedgerError as e:
        raise expect_any_error(e) from e

    return PaginatedResponse[AccountDTO].build(cursor, raw, AccountDTO.from_entity)


@router.get("/{account_id}", response_model=AccountDTO)
async def get_account(
    account_id: Annotated[AccountId, Depends(get_account_id)],
    adapter: Annotated[LedgerQueryAdapter, Depends(get_ledger_adapter)],
) -> AccountDTO:
    """Get a single account by id, e.g. ``alice@wonderland``.

    Raises:
        HTTP 400: If the id is malformed.
        HTTP 404: If the ledger has no such account.
    """
    try:
        account = await adapter.find(FindAccountById.for_id(account_id))
    except LedgerError as e:
        raise expect_find_error(e) from e

    logger.debug("Found account %s", account_id)
    return project_entity(account, AccountDTO.from_entity)
