"""Centralized FastAPI dependency providers.

Routers never construct the ledger client or adapter themselves and
never parse pagination or identifiers inline. Everything that can reject
a request with a 400 lives here, so it runs before any ledger call.
"""

from typing import Annotated

from fastapi import Depends, Query, Request

from src.explorer.config import Settings, get_settings
from src.explorer.domain.errors import BadRequestError
from src.explorer.domain.identifiers import (
    AccountId,
    AssetDefinitionId,
    AssetId,
    DomainId,
)
from src.explorer.domain.pagination import PagingCursor, parse_paging_cursor
from src.explorer.ledger.client import LedgerClient
from src.explorer.services.ledger_adapter import LedgerQueryAdapter

# ---------------------------------------------------------------------------
# Ledger providers
# ---------------------------------------------------------------------------


def get_ledger_client(request: Request) -> LedgerClient:
    """Dependency provider for the process-wide LedgerClient."""
    return request.app.state.ledger_client


def get_ledger_adapter(
    client: Annotated[LedgerClient, Depends(get_ledger_client)],
) -> LedgerQueryAdapter:
    """Dependency provider for LedgerQueryAdapter."""
    return LedgerQueryAdapter(client)


# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------


def get_paging_cursor(
    settings: Annotated[Settings, Depends(get_settings)],
    page: Annotated[
        str | None,
        Query(description="1-based page number (default 1)"),
    ] = None,
    page_size: Annotated[
        str | None,
        Query(description="Items per page (default and maximum are configurable)"),
    ] = None,
) -> PagingCursor:
    """Dependency provider for the request's PagingCursor.

    Parameters are taken as raw strings so malformed values produce a
    400 with a readable reason rather than a 422.

    Raises:
        BadRequestError: If ``page`` or ``page_size`` is invalid.
    """
    return parse_paging_cursor(
        page,
        page_size,
        default_page_size=settings.default_page_size,
        max_page_size=settings.max_page_size,
    )


# ---------------------------------------------------------------------------
# Path identifiers
# ---------------------------------------------------------------------------


def get_domain_id(domain_id: str) -> DomainId:
    """Parse the ``domain_id`` path parameter."""
    try:
        return DomainId.parse(domain_id)
    except ValueError as e:
        raise BadRequestError(str(e)) from e


def get_account_id(account_id: str) -> AccountId:
    """Parse the ``account_id`` path parameter (``alice@wonderland``)."""
    try:
        return AccountId.parse(account_id)
    except ValueError as e:
        raise BadRequestError(str(e)) from e


def get_asset_id(definition_id: str, account_id: str) -> AssetId:
    """Parse the ``definition_id`` / ``account_id`` path parameter pair."""
    try:
        return AssetId(
            definition_id=AssetDefinitionId.parse(definition_id),
            account_id=AccountId.parse(account_id),
        )
    except ValueError as e:
        raise BadRequestError(str(e)) from e
