"""API router for assets held by accounts."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.explorer.api.dependencies import (
    get_asset_id,
    get_ledger_adapter,
    get_paging_cursor,
)
from src.explorer.domain.dto import AssetDTO
from src.explorer.domain.identifiers import AssetId
from src.explorer.domain.pagination import (
    PaginatedResponse,
    PagingCursor,
    project_entity,
)
from src.explorer.ledger.errors import LedgerError
from src.explorer.ledger.queries import FindAllAssets, FindAssetById
from src.explorer.services.error_classifier import (
    expect_any_error,
    expect_find_error,
)
from src.explorer.services.ledger_adapter import LedgerQueryAdapter

router = APIRouter(prefix="/assets", tags=["assets"])


@router.get("", response_model=PaginatedResponse[AssetDTO])
async def list_assets(
    cursor: Annotated[PagingCursor, Depends(get_paging_cursor)],
    adapter: Annotated[LedgerQueryAdapter, Depends(get_ledger_adapter)],
) -> PaginatedResponse[AssetDTO]:
    """List assets of all accounts."""
    try:
        raw = await adapter.execute(FindAllAssets(), cursor)
    except LedgerError as e:
        raise expect_any_error(e) from e

    return PaginatedResponse[AssetDTO].build(cursor, raw, AssetDTO.from_entity)


@router.get("/{definition_id}/{account_id}", response_model=AssetDTO)
async def get_asset(
    asset_id: Annotated[AssetId, Depends(get_asset_id)],
    adapter: Annotated[LedgerQueryAdapter, Depends(get_ledger_adapter)],
) -> AssetDTO:
    """Get the asset of one definition held by one account.

    The definition id contains ``#`` and must be percent-encoded in the
    URL, e.g. ``/assets/rose%23wonderland/alice@wonderland``.
    """
    try:
        asset = await adapter.find(FindAssetById.for_id(asset_id))
    except LedgerError as e:
        raise expect_find_error(e) from e

    return project_entity(asset, AssetDTO.from_entity)
