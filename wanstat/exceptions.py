"""Exception hierarchy for WAN status parsing and fetching."""

from __future__ import annotations


class WanStatError(Exception):
    """Base exception for all wanstat errors."""


class ParseError(WanStatError):
    """A required part of the status document could not be parsed."""


class MissingRequiredFieldError(ParseError):
    """A required field is absent or has the wrong JSON type."""

    def __init__(self, field: str, message: str | None = None):
        self.field = field
        super().__init__(message or f"missing or invalid required field '{field}'")


class InvalidAddressError(ParseError):
    """A string expected to be an IP address could not be parsed."""

    def __init__(self, key: str, value: object):
        self.key = key
        self.value = value
        super().__init__(f"invalid IP address for '{key}': {value!r}")


class UpstreamFailureError(WanStatError):
    """The router reported failure or returned an unexpected document."""


class AuthenticationError(WanStatError):
    """The router rejected the supplied credentials."""


class APIError(WanStatError):
    """REST API request failed."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
