"""
HTTP request and response handling.

Provides the pieces of a single naivehttp invocation:
- URL and key=value input parsing
- Request dispatch through httpx
- Response rendering with JSON pretty-printing

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from naivehttp.http.client import (
    GetRequest,
    HTTPClient,
    PostRequest,
    RequestSpec,
)
from naivehttp.http.input import (
    KeyValuePair,
    build_json_body,
    parse_key_value,
    validate_url,
)
from naivehttp.http.render import (
    MimeType,
    parse_mime_type,
    render_response,
)

__all__ = [
    "GetRequest",
    "HTTPClient",
    "PostRequest",
    "RequestSpec",
    "KeyValuePair",
    "build_json_body",
    "parse_key_value",
    "validate_url",
    "MimeType",
    "parse_mime_type",
    "render_response",
]
