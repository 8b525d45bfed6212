"""Error Hierarchy — codes, HTTP statuses and response envelope.

Tests:
    - Each domain error carries its code and status
    - Infrastructure errors keep internal detail out of the user-facing message
    - Envelope shape is stable
"""

import pytest

from pokecatch.core.errors import (
    CatalogLookupError, CreatureNotFoundError, DuplicateCredentialError,
    ErrorCategory, InputValidationError, InvalidCredentialError,
    NotFoundOrForbiddenError, PokecatchError, StoreUnavailableError,
    TokenExpiredError, TokenInvalidError, UnauthorizedError, UserNotFoundError,
)


@pytest.mark.parametrize(
    "error, code, status",
    [
        (DuplicateCredentialError("a@b.c"), "DUPLICATE_CREDENTIAL", 409),
        (UserNotFoundError(), "USER_NOT_FOUND", 404),
        (InvalidCredentialError(), "INVALID_CREDENTIALS", 401),
        (TokenInvalidError(), "TOKEN_INVALID", 401),
        (TokenExpiredError(), "TOKEN_EXPIRED", 401),
        (UnauthorizedError(), "UNAUTHORIZED", 401),
        (InputValidationError("bad", "name"), "VALIDATION_ERROR", 400),
        (NotFoundOrForbiddenError("x"), "NOT_FOUND_OR_FORBIDDEN", 404),
        (CreatureNotFoundError("missingno"), "CREATURE_NOT_FOUND", 404),
        (CatalogLookupError("boom", "timeout"), "CATALOG_LOOKUP_FAILED", 502),
        (StoreUnavailableError("pool exhausted", "execute"), "STORE_UNAVAILABLE", 503),
    ],
)
def test_error_codes_and_statuses(error, code, status):
    assert isinstance(error, PokecatchError)
    assert error.code == code
    assert error.http_status == status


def test_store_unavailable_hides_internal_detail():
    err = StoreUnavailableError("connection refused on 10.0.0.5", "execute")
    assert "10.0.0.5" not in err.message
    assert "10.0.0.5" in err.detail


def test_catalog_lookup_hides_upstream_detail():
    err = CatalogLookupError("Upstream returned 503", "server_error")
    assert "503" not in err.to_response()["error"]["message"]


def test_to_response_envelope_shape():
    body = NotFoundOrForbiddenError("abc").to_response()
    assert set(body["error"]) == {
        "code", "message", "category", "severity", "timestamp",
    }
    assert body["error"]["category"] == ErrorCategory.RESOURCE_NOT_FOUND.value
