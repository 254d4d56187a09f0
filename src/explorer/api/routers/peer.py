"""API router for the ledger peer: known peers and node status."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.explorer.api.dependencies import get_ledger_adapter, get_paging_cursor
from src.explorer.domain.dto import PeerDTO
from src.explorer.domain.entities import LedgerStatus
from src.explorer.domain.pagination import PaginatedResponse, PagingCursor
from src.explorer.ledger.errors import LedgerError
from src.explorer.ledger.queries import FindAllPeers
from src.explorer.services.error_classifier import expect_any_error
from src.explorer.services.ledger_adapter import LedgerQueryAdapter

router = APIRouter(prefix="/peer", tags=["peer"])


@router.get("/peers", response_model=PaginatedResponse[PeerDTO])
async def list_peers(
    cursor: Annotated[PagingCursor, Depends(get_paging_cursor)],
    adapter: Annotated[LedgerQueryAdapter, Depends(get_ledger_adapter)],
) -> PaginatedResponse[PeerDTO]:
    """List peers known to the ledger node."""
    try:
        raw = await adapter.execute(FindAllPeers(), cursor)
    except LedgerError as e:
        raise expect_any_error(e) from e

    return PaginatedResponse[PeerDTO].build(cursor, raw, PeerDTO.from_entity)


@router.get("/status", response_model=LedgerStatus)
async def get_status(
    adapter: Annotated[LedgerQueryAdapter, Depends(get_ledger_adapter)],
) -> LedgerStatus:
    """Health counters of the ledger node (peers, blocks, transactions, uptime)."""
    try:
        return await adapter.status()
    except LedgerError as e:
        raise expect_any_error(e) from e
