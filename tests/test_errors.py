import pytest

from superdevs.errors import (
    Base58DecodeError,
    InternalError,
    InvalidInput,
    ServerError,
    TokenError,
)


def test_invalid_input_message():
    err = InvalidInput("Missing required fields")
    assert str(err) == "Invalid input: Missing required fields"
    assert err.detail == "Missing required fields"


def test_token_error_message():
    err = TokenError("Failed to create mint instruction: boom")
    assert str(err) == "Token error: Failed to create mint instruction: boom"


def test_base58_error_message():
    assert str(Base58DecodeError("bad char")) == "Base58 decode error: bad char"


def test_internal_error_has_fixed_message():
    assert str(InternalError()) == "Internal server error"
    assert str(InternalError("ignored")) == "Internal server error"


@pytest.mark.parametrize(
    ("cls", "expected"),
    [
        (InvalidInput, "Invalid input: x"),
        (TokenError, "Token error: x"),
        (Base58DecodeError, "Base58 decode error: x"),
        (InternalError, "Internal server error"),
    ],
)
def test_all_are_server_errors(cls, expected):
    err = cls("x")
    assert str(err) == expected
    assert isinstance(err, ServerError)
    assert isinstance(err, Exception)