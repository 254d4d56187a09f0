# Domain models package (errors, identifiers, ledger entities, DTOs, pagination)

from src.explorer.domain.dto import (
    AccountDTO,
    AssetDefinitionDTO,
    AssetDTO,
    AssetValueDTO,
    DomainDTO,
    PeerDTO,
    RoleDTO,
)
from src.explorer.domain.errors import (
    BadRequestError,
    InternalError,
    NotFoundError,
    WebError,
)
from src.explorer.domain.pagination import (
    PaginatedResponse,
    PagingCursor,
    RawQueryResult,
    parse_paging_cursor,
    project_entity,
)

__all__ = [
    # DTOs
    "AccountDTO",
    "AssetDTO",
    "AssetDefinitionDTO",
    "AssetValueDTO",
    "DomainDTO",
    "PeerDTO",
    "RoleDTO",
    # Errors
    "BadRequestError",
    "InternalError",
    "NotFoundError",
    "WebError",
    # Pagination
    "PaginatedResponse",
    "PagingCursor",
    "RawQueryResult",
    "parse_paging_cursor",
    "project_entity",
]
