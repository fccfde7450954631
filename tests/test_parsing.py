"""Tests for multiheaders.parsing and Headers.from_response_header_string."""

import logging

import pytest

from multiheaders.config import HeadersConfig
from multiheaders.headers import Headers
from multiheaders.parsing import parse_header_lines


class TestParseHeaderLines:
    def test_pairs(self) -> None:
        pairs = list(parse_header_lines("Content-Type: text/html\nX-Foo: bar"))
        assert pairs == [("Content-Type", "text/html"), ("X-Foo", "bar")]

    def test_value_is_trimmed_name_is_not(self) -> None:
        assert list(parse_header_lines(" X-Foo :  bar \t")) == [(" X-Foo ", "bar")]

    def test_splits_on_first_colon_only(self) -> None:
        assert list(parse_header_lines("Location: http://example.com:8080/")) == [
            ("Location", "http://example.com:8080/"),
        ]

    @pytest.mark.parametrize("line", ["malformed-line", ": no-name", ":", ""])
    def test_skips_malformed(self, line: str) -> None:
        assert list(parse_header_lines(line)) == []

    def test_empty_value_is_kept(self) -> None:
        assert list(parse_header_lines("X-Empty:")) == [("X-Empty", "")]

    def test_crlf_lines(self) -> None:
        pairs = list(parse_header_lines("Content-Type: text/html\r\nVary: Accept\r\n"))
        assert pairs == [("Content-Type", "text/html"), ("Vary", "Accept")]

    def test_custom_line_separator(self) -> None:
        config = HeadersConfig(line_separator="\r\n")
        assert list(parse_header_lines("A: 1\r\nB: 2", config)) == [("A", "1"), ("B", "2")]

    def test_logs_skipped_lines(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="multiheaders.parse"):
            list(parse_header_lines("A: 1\nmalformed-line\n\n"))
        messages = [record.getMessage() for record in caplog.records]
        assert messages == ["Skipping malformed header line: 'malformed-line'"]


class TestFromResponseHeaderString:
    def test_parses_and_skips(self) -> None:
        h = Headers.from_response_header_string(
            "Content-Type: text/html\nX-Foo:  bar \nmalformed-line"
        )
        assert h.get("content-type") == "text/html"
        assert h.get("x-foo") == "bar"
        assert sorted(h.keys()) == ["content-type", "x-foo"]

    def test_later_duplicates_overwrite(self) -> None:
        h = Headers.from_response_header_string("Set-Cookie: a=1\nset-cookie: b=2")
        assert h.get_all("Set-Cookie") == ["b=2"]

    def test_empty_text(self) -> None:
        assert len(Headers.from_response_header_string("")) == 0

    def test_keeps_config(self) -> None:
        config = HeadersConfig(join_separator=";")
        h = Headers.from_response_header_string("Cookie: a=1;b=2", config)
        assert h.config is config
        assert h.to_json() == {"cookie": ["a=1", "b=2"]}

    def test_to_json_resplits_parsed_values(self) -> None:
        h = Headers.from_response_header_string("Vary: Accept,Cookie")
        assert h.to_json() == {"vary": ["Accept", "Cookie"]}
