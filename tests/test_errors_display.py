from __future__ import annotations

import pytest

from vaultconnect.core.http.errors import (
    ErrorKind,
    InternalError,
    MalformedHeaderError,
    NetworkError,
    NotImplementedKindError,
    ParseError,
    ResourceCondition,
    ResourceError,
    RetryExhaustedError,
    UnsuccessfulStatusError,
    Utf8DecodeError,
    VaultConnectError,
)


@pytest.mark.parametrize(
    ("error", "label", "kind"),
    [
        (NetworkError(), "network error", ErrorKind.NETWORK),
        (ParseError(), "parsing error", ErrorKind.PARSE),
        (Utf8DecodeError(), "parsing bytes experienced a UTF8 error", ErrorKind.UTF8),
        (RetryExhaustedError(), "retry error", ErrorKind.RETRY_EXHAUSTED),
        (MalformedHeaderError(), "invalid header value", ErrorKind.MALFORMED_HEADER),
        (InternalError(), "internal error", ErrorKind.INTERNAL),
        (NotImplementedKindError(), "not implemented error", ErrorKind.NOT_IMPLEMENTED),
    ],
)
def test_error_renders_fixed_label_without_cause(error: VaultConnectError, label: str, kind: ErrorKind) -> None:
    assert str(error) == label
    assert error.kind is kind
    assert error.cause is None


def test_error_appends_cause_message() -> None:
    err = NetworkError().with_cause(OSError("connection reset by peer"))

    assert str(err) == "network error: connection reset by peer"
    assert err.message() == "network error"


def test_unsuccessful_status_renders_code_and_body() -> None:
    err = UnsuccessfulStatusError(401, '{"message":"Invalid bearer token"}')

    assert str(err) == (
        'client returned an unsuccessful HTTP status code: StatusCode: 401, Body: {"message":"Invalid bearer token"}'
    )


def test_nested_cause_chain_is_rendered_and_searchable() -> None:
    status = UnsuccessfulStatusError(401, "{}")
    resource = ResourceError(401, "Invalid bearer token", ResourceCondition.INVALID_CREDENTIALS).with_cause(status)
    outer = InternalError().with_cause(resource)

    assert str(outer) == (
        "internal error: vault error: StatusCode: 401, Message: Invalid bearer token: "
        "client returned an unsuccessful HTTP status code: StatusCode: 401, Body: {}"
    )
    assert outer.find_cause(UnsuccessfulStatusError) is status
    assert outer.find_cause(ResourceError) is resource
    assert outer.find_cause(ParseError) is None


def test_errors_share_common_base() -> None:
    with pytest.raises(VaultConnectError):
        raise RetryExhaustedError(TimeoutError("slow"))
