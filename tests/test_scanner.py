#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tests for the streaming tag scanner

Covers the marker grammar, verbatim record bodies, attribute rules,
malformed markup, chunk-boundary independence, and byte-stream decoding.
"""

from __future__ import annotations

import io
import zlib

import pytest

from conftest import MADGRAPH_DOCUMENT, FailingStream
from pylhef.exceptions import LHEFIOError, MalformedTagError
from pylhef.utils.scanner import (
    CloseTag,
    Comment,
    Declaration,
    OpenTag,
    TagScanner,
    Text,
)


def scan(text: str, **kwargs) -> list:
    return list(TagScanner(io.StringIO(text), **kwargs))


class TestMarkers:
    """Tests for well-formed markup"""

    def test_record_element(self) -> None:
        assert scan("<init>1 2</init>") == [
            OpenTag("init"),
            Text("1 2"),
            CloseTag("init"),
        ]

    def test_top_level_text_preserved(self) -> None:
        assert scan("<a>\n  x\n</a>\n") == [
            OpenTag("a"),
            Text("\n  x\n"),
            CloseTag("a"),
            Text("\n"),
        ]

    def test_empty_input(self) -> None:
        assert scan("") == []

    def test_comment_and_declaration(self) -> None:
        assert scan('<?xml version="1.0"?><!-- hi --><init>1</init>') == [
            Declaration('xml version="1.0"'),
            Comment(" hi "),
            OpenTag("init"),
            Text("1"),
            CloseTag("init"),
        ]

    def test_doctype_is_declaration(self) -> None:
        assert scan("<!DOCTYPE lhef>") == [Declaration("DOCTYPE lhef")]

    def test_document_tag_attributes(self) -> None:
        markers = scan("<LesHouchesEvents version=\"3.0\" note='x y'>")
        assert markers == [OpenTag("LesHouchesEvents", {"version": "3.0", "note": "x y"})]

    def test_close_tag_trailing_whitespace(self) -> None:
        assert scan("</LesHouchesEvents >") == [CloseTag("LesHouchesEvents")]

    def test_scanner_is_forward_only(self) -> None:
        scanner = TagScanner(io.StringIO("<init>1</init>"))
        assert len(list(scanner)) == 3
        assert scanner.next_marker() is None


class TestRecordBodies:
    """Tests for verbatim capture of header, init and event bodies"""

    def test_nested_markup_kept_verbatim(self) -> None:
        body = "1 <rwgt><wgt id='1'>2</wgt></rwgt>\n"
        assert scan(f"<event>{body}</event>")[1] == Text(body)

    def test_header_may_contain_attributes(self) -> None:
        body = '\n<weightgroup name="scale">\n<weight id="1">x</weight>\n</weightgroup>\n'
        assert scan(f"<header>{body}</header>")[1] == Text(body)

    def test_longer_close_name_is_content(self) -> None:
        assert scan("<event>a</events>b</event>")[1] == Text("a</events>b")

    def test_close_tag_with_whitespace(self) -> None:
        assert scan("<event>1</event >") == [
            OpenTag("event"),
            Text("1"),
            CloseTag("event"),
        ]

    def test_empty_body(self) -> None:
        assert scan("<event></event>")[1] == Text("")


class TestMalformed:
    """Tests for grammar violations"""

    def test_attribute_on_event(self) -> None:
        with pytest.raises(MalformedTagError, match="not permitted"):
            scan('<event type="signal">1</event>')

    def test_attribute_on_unknown_tag(self) -> None:
        with pytest.raises(MalformedTagError):
            scan('<foo bar="1">')

    def test_empty_tag_name(self) -> None:
        with pytest.raises(MalformedTagError):
            scan("<>")

    def test_space_before_name(self) -> None:
        with pytest.raises(MalformedTagError):
            scan("< init>")

    def test_empty_close_tag(self) -> None:
        with pytest.raises(MalformedTagError):
            scan("</>")

    def test_unterminated_bracket(self) -> None:
        with pytest.raises(MalformedTagError, match="not closed"):
            scan("<init")

    def test_unclosed_record(self) -> None:
        with pytest.raises(MalformedTagError, match="not closed"):
            scan("<event>1 2 3")

    def test_unclosed_comment(self) -> None:
        with pytest.raises(MalformedTagError):
            scan("<!-- never ends")

    def test_junk_in_close_tag(self) -> None:
        with pytest.raises(MalformedTagError):
            scan("<event>1</event x>")

    def test_bad_document_attribute_syntax(self) -> None:
        with pytest.raises(MalformedTagError):
            scan("<LesHouchesEvents version=3.0>")


class TestStreaming:
    """Tests for chunked reading and stream types"""

    @pytest.mark.parametrize("chunk_size", [1, 2, 3, 7, 64])
    def test_chunk_size_does_not_change_markers(self, chunk_size: int) -> None:
        assert scan(MADGRAPH_DOCUMENT, chunk_size=chunk_size) == scan(MADGRAPH_DOCUMENT)

    def test_bytes_stream(self) -> None:
        markers = list(TagScanner(io.BytesIO(MADGRAPH_DOCUMENT.encode("utf-8"))))
        assert markers == scan(MADGRAPH_DOCUMENT)

    def test_multibyte_split_across_chunks(self) -> None:
        data = "<header>café ∑</header>".encode("utf-8")
        markers = list(TagScanner(io.BytesIO(data), chunk_size=1))
        assert markers[1] == Text("café ∑")

    def test_invalid_utf8_raises_io_error(self) -> None:
        with pytest.raises(LHEFIOError):
            list(TagScanner(io.BytesIO(b"<init>\xff</init>")))

    def test_read_failure_raises_io_error(self) -> None:
        with pytest.raises(LHEFIOError, match="device not ready"):
            TagScanner(FailingStream()).next_marker()

    @pytest.mark.parametrize(
        "error",
        [
            EOFError("Compressed file ended before the end-of-stream marker was reached"),
            zlib.error("Error -3 while decompressing data: invalid block type"),
        ],
    )
    def test_decompression_failure_raises_io_error(self, error: Exception) -> None:
        with pytest.raises(LHEFIOError) as excinfo:
            TagScanner(FailingStream(error)).next_marker()
        assert excinfo.value.__cause__ is error

    def test_invalid_chunk_size(self) -> None:
        with pytest.raises(ValueError):
            TagScanner(io.StringIO(""), chunk_size=0)

    def test_offset_tracks_position(self) -> None:
        scanner = TagScanner(io.StringIO("<init>1</init>  "), chunk_size=2)
        list(scanner)
        assert scanner.offset == 16
