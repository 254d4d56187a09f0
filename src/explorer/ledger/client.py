"""HTTP client for the remote ledger node.

One ``LedgerClient`` is created at startup and shared by every request.
It wraps a single ``httpx.AsyncClient``, which is safe for concurrent use,
so the client holds no locks of its own.

Wire protocol:

- ``POST /query`` with body ``{"query": <name>, "params": {...}}`` and,
  for windowed calls, ``start`` / ``limit`` query parameters. A successful
  response is ``{"result": <entity or list>, "total": <int>}``; a failed
  one carries ``{"error": {"kind": <str>, "message": <str>}}``.
- ``GET /status`` returns the node's health counters.

Requests are never retried: a windowed query repeated after a concurrent
write could return a shifted page.
"""

import logging
from dataclasses import dataclass
from typing import Any

import httpx
from pydantic import ValidationError

from src.explorer.config import Settings
from src.explorer.domain.entities import LedgerStatus
from src.explorer.ledger.errors import (
    LedgerError,
    LedgerFindError,
    LedgerQueryError,
    LedgerTransportError,
)
from src.explorer.ledger.queries import LedgerQuery

logger = logging.getLogger(__name__)

# Error kind the ledger's query engine uses for missing entities
FIND_ERROR_KIND = "Find"


@dataclass(frozen=True)
class QueryWindow:
    """Native window parameters of the ledger's query endpoint."""

    start: int
    limit: int


@dataclass(frozen=True)
class LedgerResponse:
    """Undecoded payload of a successful query."""

    result: Any
    total: int | None


def build_http_client(settings: Settings) -> httpx.AsyncClient:
    """Create the shared ``httpx.AsyncClient`` for the ledger node.

    Args:
        settings: Application settings (ledger URL and timeout).

    Returns:
        A client with the configured base URL, timeout and no retries.
    """
    return httpx.AsyncClient(
        base_url=settings.ledger_url,
        timeout=httpx.Timeout(settings.ledger_timeout_seconds),
        transport=httpx.AsyncHTTPTransport(retries=0),
        headers={"Accept": "application/json"},
    )


class LedgerClient:
    """Typed access to the ledger node's query and status endpoints."""

    def __init__(self, http: httpx.AsyncClient) -> None:
        """Initialize with a shared HTTP client.

        Args:
            http: Client whose ``base_url`` points at the ledger node.
        """
        self._http = http

    @classmethod
    def from_settings(cls, settings: Settings) -> "LedgerClient":
        return cls(build_http_client(settings))

    async def aclose(self) -> None:
        await self._http.aclose()

    async def request(
        self,
        query: LedgerQuery,
        window: QueryWindow | None = None,
    ) -> LedgerResponse:
        """Run one query against the ledger.

        Args:
            query: Query to execute.
            window: Slice of the result set to return, or None for all.

        Returns:
            The undecoded ``result`` and ``total`` fields of the response.

        Raises:
            LedgerFindError: If the ledger reports a missing entity.
            LedgerQueryError: If the ledger reports any other query failure.
            LedgerTransportError: On timeout, connection failure or a
                malformed response.
        """
        params = {"start": window.start, "limit": window.limit} if window else None
        body = {"query": query.name, "params": query.params()}

        response = await self._send("POST", "/query", json=body, params=params)
        payload = self._decode(response)

        if response.is_success:
            if not isinstance(payload, dict) or "result" not in payload:
                raise LedgerTransportError(
                    f"Malformed response to {query.name}: missing 'result'"
                )
            total = payload.get("total")
            if total is not None and (
                isinstance(total, bool) or not isinstance(total, int) or total < 0
            ):
                raise LedgerTransportError(
                    f"Malformed response to {query.name}: invalid total {total!r}"
                )
            return LedgerResponse(result=payload["result"], total=total)

        raise self._query_error(query, response, payload)

    async def get_status(self) -> LedgerStatus:
        """Fetch the node's health counters.

        Raises:
            LedgerTransportError: On any failure; status has no query
                engine errors.
        """
        response = await self._send("GET", "/status")
        if not response.is_success:
            raise LedgerTransportError(
                f"Ledger status request failed with HTTP {response.status_code}"
            )
        try:
            return LedgerStatus.model_validate(self._decode(response))
        except ValidationError as e:
            raise LedgerTransportError(f"Malformed status response: {e}") from e

    async def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            return await self._http.request(method, url, **kwargs)
        except httpx.TimeoutException as e:
            raise LedgerTransportError(f"Ledger request timed out: {method} {url}") from e
        except httpx.HTTPError as e:
            raise LedgerTransportError(
                f"Ledger request failed: {method} {url}: {e}"
            ) from e

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise LedgerTransportError(
                f"Ledger returned a non-JSON body (HTTP {response.status_code})"
            ) from e

    @staticmethod
    def _query_error(
        query: LedgerQuery,
        response: httpx.Response,
        payload: Any,
    ) -> LedgerError:
        error = payload.get("error") if isinstance(payload, dict) else None
        if not isinstance(error, dict) or not isinstance(error.get("kind"), str):
            return LedgerTransportError(
                f"{query.name} failed with HTTP {response.status_code} "
                "and no structured error"
            )

        kind = error["kind"]
        message = str(error.get("message", ""))
        logger.debug("Ledger rejected %s: %s %s", query.name, kind, message)
        if kind == FIND_ERROR_KIND:
            return LedgerFindError(message)
        return LedgerQueryError(kind, message)
