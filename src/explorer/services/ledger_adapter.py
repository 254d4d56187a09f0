"""Adapter between the HTTP layer and the shared ledger client.

Translates a :class:`PagingCursor` into the ledger's native window and
validates result items against the query's entity model. Each call makes
exactly one ledger request: nothing is cached and nothing is retried.
"""

import logging
from typing import Any

from pydantic import ValidationError

from src.explorer.domain.entities import LedgerStatus
from src.explorer.domain.pagination import PagingCursor, RawQueryResult
from src.explorer.ledger.client import LedgerClient, QueryWindow
from src.explorer.ledger.errors import LedgerTransportError
from src.explorer.ledger.queries import LedgerQuery

logger = logging.getLogger(__name__)


class LedgerQueryAdapter:
    """Runs typed queries against the ledger on behalf of one request.

    The adapter only references the client; the client's lifecycle is
    owned by the application.
    """

    def __init__(self, client: LedgerClient) -> None:
        self._client = client

    async def execute(
        self,
        query: LedgerQuery,
        cursor: PagingCursor | None = None,
    ) -> RawQueryResult[Any]:
        """Execute a query, windowed by ``cursor`` when given.

        Args:
            query: Query to run.
            cursor: Page to fetch. None runs the query unwindowed, as
                single-entity lookups do.

        Returns:
            Items parsed into ``query.entity`` and the ledger's total count.
            When the ledger omits the total, it is ``start + len(items)``
            for a windowed call and ``len(items)`` otherwise.

        Raises:
            LedgerError: Any failure of the ledger call, unchanged.
        """
        window = None
        if cursor is not None:
            window = QueryWindow(start=cursor.start, limit=cursor.page_size)

        response = await self._client.request(query, window)

        raw_items = response.result
        if not isinstance(raw_items, list):
            raw_items = [raw_items]
        try:
            items = [query.entity.model_validate(item) for item in raw_items]
        except ValidationError as e:
            raise LedgerTransportError(
                f"Malformed {query.entity.__name__} in response to {query.name}: {e}"
            ) from e

        if response.total is not None:
            total = response.total
        elif window is not None:
            # Without a reported total, the items before this window are
            # the only lower bound known
            total = window.start + len(items)
        else:
            total = len(items)
        logger.debug(
            "%s returned %d of %d items (window=%s)",
            query.name,
            len(items),
            total,
            window,
        )
        return RawQueryResult(items=items, total_count=total)

    async def find(self, query: LedgerQuery) -> Any:
        """Execute a single-entity lookup and return the entity.

        Raises:
            LedgerError: Any failure of the ledger call. A response that
                does not hold exactly one entity is a transport error.
        """
        raw = await self.execute(query)
        if len(raw.items) != 1:
            raise LedgerTransportError(
                f"{query.name} returned {len(raw.items)} entities, expected 1"
            )
        return raw.items[0]

    async def status(self) -> LedgerStatus:
        """Fetch the ledger node's health counters."""
        return await self._client.get_status()
