"""Client-facing failure taxonomy.

Every failed request ends in exactly one of these exceptions. The
exception handlers in :mod:`src.explorer.api.exception_handlers` map
them to HTTP responses.
"""


class WebError(Exception):
    """Base class for failures that are reported to the HTTP client."""

    status_code: int = 500

    @property
    def detail(self) -> str:
        """Client-visible response body text."""
        return "Internal Server Error"


class BadRequestError(WebError):
    """Malformed client input, detected before any ledger call."""

    status_code = 400

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason

    @property
    def detail(self) -> str:
        return f"Bad Request: {self.reason}"


class NotFoundError(WebError):
    """A single-entity lookup whose target does not exist."""

    status_code = 404

    @property
    def detail(self) -> str:
        return "Not Found"


class InternalError(WebError):
    """Anything else. The cause is kept for server-side logs only."""

    status_code = 500

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    @property
    def detail(self) -> str:
        return "Internal Server Error"
