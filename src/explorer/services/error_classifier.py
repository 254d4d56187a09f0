"""Classification of ledger failures into client-facing errors.

The same ledger failure means different things depending on the call
site. A missing entity is a legitimate 404 for a single-entity lookup,
but a collection scan never expects one, so there it is an internal
error like any other.
"""

from enum import Enum

from src.explorer.domain.errors import InternalError, NotFoundError, WebError
from src.explorer.ledger.errors import LedgerError, LedgerFindError


class ClassifyMode(str, Enum):
    """Intent of the call site that made the ledger call."""

    EXPECT_FIND = "expect_find"
    EXPECT_ANY = "expect_any"


def expect_find_error(error: LedgerError) -> WebError:
    """Classify a failure of a single-entity lookup.

    Returns:
        NotFoundError for a ledger find error, InternalError otherwise.
    """
    if isinstance(error, LedgerFindError):
        return NotFoundError(str(error))
    return InternalError(f"Find error expected, got: {error}", cause=error)


def expect_any_error(error: LedgerError) -> WebError:
    """Classify a failure of a collection scan. Always an InternalError."""
    return InternalError(f"Ledger query error: {error}", cause=error)


def classify(error: LedgerError, mode: ClassifyMode) -> WebError:
    """Map a ledger failure to a client-facing error.

    Never returns BadRequestError; bad input is rejected before the
    ledger is called.

    Args:
        error: The failed ledger call.
        mode: Intent of the call site.

    Returns:
        NotFoundError or InternalError.
    """
    if mode is ClassifyMode.EXPECT_FIND:
        return expect_find_error(error)
    return expect_any_error(error)
