"""
Response rendering for the terminal.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import json
import re
from dataclasses import dataclass, field

import httpx
from rich.console import Console
from rich.syntax import Syntax
from rich.text import Text

from naivehttp.errors import BodyDecodeError, MalformedJsonError


JSON_MIME = "application/json"
DEFAULT_CHARSET = "utf-8"

_TOKEN = r"[!#$%&'*+.^_`|~0-9A-Za-z-]+"
_ESSENCE_RE = re.compile(rf"^\s*({_TOKEN})/({_TOKEN})\s*$")
_PARAM_RE = re.compile(rf'^\s*({_TOKEN})\s*=\s*("(?:[^"\\]|\\.)*"|{_TOKEN})\s*$')


@dataclass(frozen=True)
class MimeType:
    """Parsed Content-Type value."""
    type: str
    subtype: str
    params: dict[str, str] = field(default_factory=dict)

    @property
    def essence(self) -> str:
        return f"{self.type}/{self.subtype}"

    @property
    def charset(self) -> str | None:
        return self.params.get("charset")


def parse_mime_type(value: str | None) -> MimeType | None:
    """Parse a Content-Type header value.

    Returns None when the value is missing or malformed. Malformed
    parameters are skipped rather than rejecting the whole value.
    """
    if not value:
        return None

    essence, *raw_params = value.split(";")
    match = _ESSENCE_RE.match(essence)
    if not match:
        return None

    params = {}
    for raw in raw_params:
        param_match = _PARAM_RE.match(raw)
        if not param_match:
            continue
        name, param_value = param_match.groups()
        if param_value.startswith('"'):
            param_value = re.sub(r"\\(.)", r"\1", param_value[1:-1])
        params[name.lower()] = param_value

    return MimeType(
        type=match.group(1).lower(),
        subtype=match.group(2).lower(),
        params=params,
    )


def decode_body(response: httpx.Response, mime: MimeType | None) -> str:
    """Read the whole body and decode it with the declared charset."""
    content = response.read()
    charset = (mime and mime.charset) or DEFAULT_CHARSET
    try:
        return content.decode(charset)
    except LookupError as e:
        raise BodyDecodeError(f"Unknown charset {charset!r}") from e
    except UnicodeDecodeError as e:
        raise BodyDecodeError(f"Response body is not valid {charset} text: {e}") from e


def format_json(text: str, indent: int = 2) -> str:
    """Re-indent a JSON document."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedJsonError(f"Invalid JSON in application/json body: {e}") from e
    return json.dumps(data, indent=indent, ensure_ascii=False)


def status_line(response: httpx.Response) -> str:
    """Version, status code and reason phrase, e.g. ``HTTP/1.1 200 OK``."""
    line = f"{response.http_version} {response.status_code}"
    if response.reason_phrase:
        line += f" {response.reason_phrase}"
    return line


def render_response(response: httpx.Response, console: Console) -> None:
    """Print status line, headers and body of ``response``.

    JSON bodies (Content-Type application/json, parameters ignored) are
    pretty-printed, and highlighted when writing to a terminal. Every
    other body is written verbatim.
    """
    console.print(Text(status_line(response), style="bold blue"), soft_wrap=True)

    for name, value in response.headers.multi_items():
        console.print(Text.assemble((name, "green"), ": ", value), soft_wrap=True)
    console.out("")

    mime = parse_mime_type(response.headers.get("content-type"))
    body = decode_body(response, mime)

    if mime is not None and mime.essence == JSON_MIME:
        formatted = format_json(body)
        if console.is_terminal:
            # lines are never cropped to the console width
            highlighted = Syntax(formatted, "json", theme="monokai").highlight(formatted)
            highlighted.rstrip()
            console.print(highlighted, soft_wrap=True)
        else:
            console.out(formatted, highlight=False)
    elif body:
        console.out(body, highlight=False, end="" if body.endswith("\n") else "\n")
