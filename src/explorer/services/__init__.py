# Services package (ledger access and failure classification)

from src.explorer.services.error_classifier import (
    ClassifyMode,
    classify,
    expect_any_error,
    expect_find_error,
)
from src.explorer.services.ledger_adapter import LedgerQueryAdapter

__all__ = [
    "ClassifyMode",
    "LedgerQueryAdapter",
    "classify",
    "expect_any_error",
    "expect_find_error",
]
