"""
Command-line input parsing: URL validation and key=value items.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from dataclasses import dataclass
from typing import Iterable

import httpx

from naivehttp.errors import InvalidUrlError, MissingDelimiterError


SEP_DATA = "="


@dataclass(frozen=True)
class KeyValuePair:
    """A single key=value item from the command line."""
    key: str
    value: str


def validate_url(url: str) -> str:
    """Check that ``url`` is an absolute URL and return it unchanged.

    The string is only used as a gate: httpx does the real parsing again
    when the request is sent.
    """
    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, UnicodeError) as e:
        # IDNA failures surface as UnicodeError
        raise InvalidUrlError(url, str(e)) from e

    if not parsed.scheme:
        raise InvalidUrlError(url, "missing scheme")
    if not parsed.host:
        raise InvalidUrlError(url, "missing host")

    return url


def parse_key_value(item: str) -> KeyValuePair:
    """Split ``item`` at the first '='.

    Anything after the first '=' belongs to the value, so ``a=b=c``
    gives key ``a`` and value ``b=c``. Either side may be empty.
    """
    key, sep, value = item.partition(SEP_DATA)
    if not sep:
        raise MissingDelimiterError(item)
    return KeyValuePair(key=key, value=value)


def build_json_body(pairs: Iterable[KeyValuePair]) -> dict[str, str]:
    """Fold pairs into a JSON object; a repeated key keeps its last value."""
    body: dict[str, str] = {}
    for pair in pairs:
        body[pair.key] = pair.value
    return body
