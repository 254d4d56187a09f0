"""API router for asset definitions.

There is no single-definition endpoint: the ledger has no lookup by
definition id.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.explorer.api.dependencies import get_ledger_adapter, get_paging_cursor
from src.explorer.domain.dto import AssetDefinitionDTO
from src.explorer.domain.pagination import PaginatedResponse, PagingCursor
from src.explorer.ledger.errors import LedgerError
from src.explorer.ledger.queries import FindAllAssetsDefinitions
from src.explorer.services.error_classifier import expect_any_error
from src.explorer.services.ledger_adapter import LedgerQueryAdapter

router = APIRouter(prefix="/asset-definitions", tags=["asset-definitions"])


@router.get("", response_model=PaginatedResponse[AssetDefinitionDTO])
async def list_asset_definitions(
    cursor: Annotated[PagingCursor, Depends(get_paging_cursor)],
    adapter: Annotated[LedgerQueryAdapter, Depends(get_ledger_adapter)],
) -> PaginatedResponse[AssetDefinitionDTO]:
    try:
        raw = await adapter.execute(FindAllAssetsDefinitions(), cursor)
    except LedgerError as e:
        raise expect_any_error(e) from e

    return PaginatedResponse[AssetDefinitionDTO].build(
        cursor, raw, AssetDefinitionDTO.from_entity
    )
