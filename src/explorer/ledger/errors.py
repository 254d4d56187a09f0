"""Failures raised by the remote ledger client.

The set is closed: every failed ledger call raises exactly one of the
three concrete classes below.
"""


class LedgerError(Exception):
    """Base class for failed ledger calls."""


class LedgerFindError(LedgerError):
    """The ledger's query engine reported that the requested entity does not exist."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class LedgerQueryError(LedgerError):
    """Any other structured failure reported by the ledger's query engine."""

    def __init__(self, kind: str, message: str) -> None:
        super().__init__(f"{kind}: {message}")
        self.kind = kind
        self.message = message


class LedgerTransportError(LedgerError):
    """Timeout, connection failure or malformed response from the ledger."""
