"""Errors raised by the request handlers; ``str()`` gives the client-facing message."""

from __future__ import annotations


class ServerError(Exception):
    """Base class for every error reported back to a client."""

    template = "{}"

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(self.template.format(detail))


class InvalidInput(ServerError):
    """The request carried missing or malformed fields."""

    template = "Invalid input: {}"


class TokenError(ServerError):
    """A token program instruction could not be built."""

    template = "Token error: {}"


class Base58DecodeError(ServerError):
    """A base58 string held a character outside the alphabet."""

    template = "Base58 decode error: {}"


class InternalError(ServerError):
    """An unexpected failure inside the server."""

    template = "Internal server error"