"""Tests for classifying ledger failures by call-site intent."""

import httpx
import pytest

from src.explorer.domain.errors import (
    BadRequestError,
    InternalError,
    NotFoundError,
    WebError,
)
from src.explorer.ledger.errors import (
    LedgerError,
    LedgerFindError,
    LedgerQueryError,
    LedgerTransportError,
)
from src.explorer.services.error_classifier import (
    ClassifyMode,
    classify,
    expect_any_error,
    expect_find_error,
)


def _transport_error() -> LedgerTransportError:
    try:
        raise LedgerTransportError("Ledger request timed out") from httpx.ReadTimeout(
            "timed out"
        )
    except LedgerTransportError as e:
        return e


ALL_FAILURES = [
    LedgerFindError("account alice@wonderland not found"),
    LedgerQueryError("Permission", "not allowed"),
    LedgerQueryError("Evaluate", "bad expression"),
    _transport_error(),
]


class TestExpectFind:
    """Single-entity lookups: a find error is a 404, everything else a 500."""

    def test_find_error_is_not_found(self) -> None:
        result = expect_find_error(LedgerFindError("no such domain"))
        assert isinstance(result, NotFoundError)

    def test_other_query_error_is_internal(self) -> None:
        error = LedgerQueryError("Permission", "denied")
        result = expect_find_error(error)
        assert isinstance(result, InternalError)
        assert result.cause is error

    def test_transport_error_is_internal(self) -> None:
        error = _transport_error()
        result = expect_find_error(error)
        assert isinstance(result, InternalError)
        assert result.cause is error


class TestExpectAny:
    """Collection scans: every failure is a 500, never a 404."""

    @pytest.mark.parametrize("error", ALL_FAILURES)
    def test_every_failure_is_internal(self, error: LedgerError) -> None:
        result = expect_any_error(error)
        assert isinstance(result, InternalError)
        assert not isinstance(result, NotFoundError)
        assert result.cause is error


class TestClassify:
    def test_dispatches_on_mode(self) -> None:
        error = LedgerFindError("missing")
        assert isinstance(classify(error, ClassifyMode.EXPECT_FIND), NotFoundError)
        assert isinstance(classify(error, ClassifyMode.EXPECT_ANY), InternalError)

    @pytest.mark.parametrize("mode", list(ClassifyMode))
    @pytest.mark.parametrize("error", ALL_FAILURES)
    def test_never_bad_request(self, error: LedgerError, mode: ClassifyMode) -> None:
        assert not isinstance(classify(error, mode), BadRequestError)

    def test_internal_detail_hides_cause(self) -> None:
        error = LedgerQueryError("Evaluate", "secret internals")
        result = classify(error, ClassifyMode.EXPECT_ANY)
        assert result.detail == "Internal Server Error"
        assert "secret" not in result.detail


class TestWebErrorDefaults:
    def test_base_error_renders_as_internal(self) -> None:
        error = WebError("unexpected")
        assert error.status_code == 500
        assert error.detail == "Internal Server Error"
