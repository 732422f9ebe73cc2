"""
naivehttp CLI commands.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import click
from rich.console import Console
from rich.markup import escape

from naivehttp import __version__
from naivehttp.errors import (
    InvalidUrlError,
    MissingDelimiterError,
    NetworkError,
    RenderError,
)
from naivehttp.http.client import GetRequest, HTTPClient, PostRequest, RequestSpec
from naivehttp.http.input import KeyValuePair, parse_key_value, validate_url
from naivehttp.http.render import render_response
from naivehttp.logging_config import configure_logging

console = Console()
err_console = Console(stderr=True)


class URLParamType(click.ParamType):
    """Absolute URL, checked at parse time."""

    name = "url"

    def convert(self, value, param, ctx) -> str:
        try:
            return validate_url(value)
        except InvalidUrlError as e:
            self.fail(str(e), param, ctx)


class KeyValueParamType(click.ParamType):
    """key=value body item, split at the first '='."""

    name = "key=value"

    def convert(self, value, param, ctx) -> KeyValuePair:
        if isinstance(value, KeyValuePair):
            return value
        try:
            return parse_key_value(value)
        except MissingDelimiterError as e:
            self.fail(str(e), param, ctx)


URL = URLParamType()
KEY_VALUE = KeyValueParamType()


@click.group()
@click.version_option(__version__, prog_name="naivehttp")
@click.option("-v", "--verbose", is_flag=True, help="Log request details to stderr")
@click.option("--log-file", type=click.Path(dir_okay=False), help="Also write a debug log to this file")
def main(verbose: bool, log_file: str | None):
    """A naive httpie: send GET or POST requests and pretty-print the response.

    \b
    Examples:
        naivehttp get https://httpbin.org/get
        naivehttp post https://httpbin.org/post name=alice role=admin
    """
    configure_logging(debug=verbose, log_file=log_file)


def _send(spec: RequestSpec) -> None:
    """Dispatch ``spec`` and render the response; failures exit with status 1."""
    client = HTTPClient()
    try:
        response = client.dispatch(spec)
        render_response(response, console)
    except (NetworkError, RenderError) as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        raise SystemExit(1)
    finally:
        client.close()


@main.command("get")
@click.argument("url", type=URL)
def get_cmd(url: str):
    """Send a GET request to URL."""
    _send(GetRequest(url=url))


@main.command("post")
@click.argument("url", type=URL)
@click.argument("items", nargs=-1, type=KEY_VALUE, metavar="[KEY=VALUE]...")
def post_cmd(url: str, items: tuple[KeyValuePair, ...]):
    """Send a POST request to URL with a JSON body built from KEY=VALUE items.

    Each item is split at its first '=', so name=a=b sends {"name": "a=b"}.
    A repeated key keeps its last value.
    """
    _send(PostRequest(url=url, pairs=tuple(items)))


if __name__ == "__main__":
    main()
