"""
Error types raised by naivehttp.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""


class NaiveHTTPError(Exception):
    """Base class for all naivehttp errors."""


class ParseError(NaiveHTTPError, ValueError):
    """A command-line argument could not be parsed."""


class InvalidUrlError(ParseError):
    """The string is not an absolute URL."""

    def __init__(self, url: str, reason: str = "not a valid absolute URL"):
        self.url = url
        self.reason = reason
        super().__init__(f"{url!r}: {reason}")


class MissingDelimiterError(ParseError):
    """A key=value item has no '=' delimiter."""

    def __init__(self, item: str):
        self.item = item
        super().__init__(f"{item!r} is not a key=value pair (missing '=')")


class NetworkError(NaiveHTTPError):
    """The request failed at the transport level (DNS, connect, TLS, timeout)."""

    def __init__(self, method: str, url: str, cause: Exception):
        self.method = method
        self.url = url
        self.cause = cause
        detail = str(cause) or type(cause).__name__
        super().__init__(f"{method} {url} failed: {detail}")


class RenderError(NaiveHTTPError):
    """The response could not be rendered."""


class MalformedJsonError(RenderError):
    """Body declared as application/json is not valid JSON."""


class BodyDecodeError(RenderError):
    """Body could not be decoded as text."""
