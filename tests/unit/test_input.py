"""
Unit tests for URL validation and key=value parsing.
"""

import pytest

from naivehttp.errors import InvalidUrlError, MissingDelimiterError, ParseError
from naivehttp.http.input import (
    KeyValuePair,
    build_json_body,
    parse_key_value,
    validate_url,
)


class TestValidateUrl:
    """Tests for validate_url."""

    @pytest.mark.parametrize("url", [
        "http://example.com",
        "https://example.com/path?x=1",
        "http://localhost:8080/api",
        "https://user:pw@example.com:443/a#frag",
    ])
    def test_accepts_absolute_urls(self, url):
        """Absolute URLs are returned unchanged."""
        assert validate_url(url) == url

    @pytest.mark.parametrize("url", [
        "not-a-url",
        "",
        "/relative/path",
        "example.com/path",
        "http://",
        "mailto:someone@example.com",
        "http://example.com:notaport/",
        "http://xn--/",
    ])
    def test_rejects_invalid_urls(self, url):
        """Strings without scheme and host, or with a bad authority, fail."""
        with pytest.raises(InvalidUrlError):
            validate_url(url)

    def test_error_is_a_parse_error(self):
        """InvalidUrlError belongs to the parse error family."""
        with pytest.raises(ParseError) as exc_info:
            validate_url("not-a-url")
        assert "not-a-url" in str(exc_info.value)


class TestParseKeyValue:
    """Tests for parse_key_value."""

    def test_simple_pair(self):
        assert parse_key_value("name=alice") == KeyValuePair("name", "alice")

    def test_splits_on_first_delimiter(self):
        """Later '=' characters stay in the value."""
        assert parse_key_value("a=b=c") == KeyValuePair("a", "b=c")
        assert parse_key_value("token==x==") == KeyValuePair("token", "=x==")

    @pytest.mark.parametrize("item", ["", "abc", "a:b", "key value"])
    def test_missing_delimiter(self, item):
        with pytest.raises(MissingDelimiterError):
            parse_key_value(item)

    def test_empty_key_and_value_are_accepted(self):
        """Only the delimiter is required; either side may be empty."""
        assert parse_key_value("=value") == KeyValuePair("", "value")
        assert parse_key_value("key=") == KeyValuePair("key", "")
        assert parse_key_value("=") == KeyValuePair("", "")

    def test_pair_is_immutable(self):
        pair = parse_key_value("a=1")
        with pytest.raises(AttributeError):
            pair.key = "b"


class TestBuildJsonBody:
    """Tests for build_json_body."""

    def test_pairs_become_object(self):
        pairs = [KeyValuePair("a", "1"), KeyValuePair("b", "2")]
        assert build_json_body(pairs) == {"a": "1", "b": "2"}

    def test_last_duplicate_wins(self):
        pairs = [KeyValuePair("a", "1"), KeyValuePair("a", "2")]
        assert build_json_body(pairs) == {"a": "2"}

    def test_no_pairs(self):
        assert build_json_body([]) == {}
