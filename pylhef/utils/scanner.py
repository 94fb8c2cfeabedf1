#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Streaming scanner for the restricted LHEF tag grammar

LHEF documents look like XML but only use a handful of attribute-free
elements whose bodies are free-format text.  A general XML parser would
both accept more than the format allows (attributes, entities, nesting)
and reject content that real files contain (``<`` and ``&`` inside
record bodies), so the document is scanned directly for ``<`` / ``>``
delimiters instead.

Markers
-------
:class:`OpenTag`
    ``<name>``.  Only the document tag ``LesHouchesEvents`` may carry
    ``key="value"`` attributes.
:class:`CloseTag`
    ``</name>``.
:class:`Text`
    Characters outside any tag, preserved exactly.
:class:`Comment`
    ``<!-- ... -->``.
:class:`Declaration`
    ``<?xml ...?>`` and ``<!...>`` declarations.

Record Bodies
-------------
The bodies of ``<header>``, ``<init>`` and ``<event>`` are opaque to the
scanner.  After the open tag is emitted the whole body up to the matching
close tag is returned as one :class:`Text` marker, nested markup included,
followed by the :class:`CloseTag`.  This keeps newer sub-elements such as
``<rwgt>`` blocks in an event intact for the record's info text.

Memory use is bounded by the largest single marker plus one read chunk.
"""

from __future__ import annotations

import codecs
import logging
import re
import zlib
from collections import deque
from dataclasses import dataclass, field
from typing import IO, Iterator, Union

from pylhef.exceptions import LHEFIOError, MalformedTagError
from pylhef.utils.constants import ATTRIBUTE_TAGS, DEFAULT_CHUNK_SIZE, RECORD_TAGS

logger = logging.getLogger(__name__)

_TAG_NAME = re.compile(r"[A-Za-z_][\w.:-]*")
_ATTRIBUTE = re.compile(r"\s*([A-Za-z_][\w.:-]*)\s*=\s*(?:\"([^\"]*)\"|'([^']*)')")


# ---------------------------------------------------------------------------
# Marker types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class OpenTag:
    """An opening tag ``<name>``

    Parameters
    ----------
    name : str
        Tag name.
    attributes : dict[str, str]
        Attribute values; always empty except on the document tag.
    """

    name: str
    attributes: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class CloseTag:
    """A closing tag ``</name>``"""

    name: str


@dataclass(frozen=True)
class Text:
    """Raw character content between tags, whitespace preserved"""

    content: str


@dataclass(frozen=True)
class Comment:
    """The content of a ``<!-- ... -->`` comment, delimiters stripped"""

    content: str


@dataclass(frozen=True)
class Declaration:
    """The content of a ``<?...?>`` or ``<!...>`` declaration"""

    content: str


Marker = Union[OpenTag, CloseTag, Text, Comment, Declaration]
"""Type alias for any marker produced by :class:`TagScanner`."""


# ---------------------------------------------------------------------------
# Scanner
# ---------------------------------------------------------------------------

class TagScanner:
    """Lazy marker sequence over a character or byte stream

    Parameters
    ----------
    stream : IO
        Any object with a ``read(size)`` method returning ``str`` or
        ``bytes``.  Byte streams are decoded incrementally as UTF-8.
        The scanner never opens, seeks or closes the stream.
    chunk_size : int, optional
        Number of characters (or bytes) requested per ``read`` call.

    Notes
    -----
    The scanner only moves forward; to scan a document again, create a
    new scanner over a fresh stream.

    Examples
    --------
    >>> import io
    >>> scanner = TagScanner(io.StringIO("<init>1 2</init>"))
    >>> list(scanner)
    [OpenTag(name='init', attributes={}), Text(content='1 2'), CloseTag(name='init')]
    """

    def __init__(self, stream: IO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self._stream = stream
        self._chunk_size = chunk_size
        self._buffer = ""
        self._pos = 0
        self._offset = 0
        self._eof = False
        self._decoder: codecs.IncrementalDecoder | None = None
        self._pending: deque[Marker] = deque()

    def __iter__(self) -> Iterator[Marker]:
        return self

    def __next__(self) -> Marker:
        marker = self.next_marker()
        if marker is None:
            raise StopIteration
        return marker

    @property
    def offset(self) -> int:
        """Character offset of the scan position from the start of input."""
        return self._offset + self._pos

    def next_marker(self) -> Marker | None:
        """Return the next marker, or ``None`` at end of input

        Raises
        ------
        MalformedTagError
            On an empty or invalid tag name, a ``<`` with no matching
            ``>``, attributes on a tag that may not carry them, or a
            record element that is never closed.
        LHEFIOError
            If reading from the stream fails.
        """
        if self._pending:
            return self._pending.popleft()

        self._compact()
        if not self._ensure(1):
            return None
        if self._buffer[self._pos] == "<":
            return self._scan_markup()
        return self._scan_text()

    # -- buffer management ---------------------------------------------------

    def _fill(self) -> bool:
        """Append one chunk of input; return ``False`` once input is exhausted."""
        if self._eof:
            return False
        try:
            data = self._stream.read(self._chunk_size)
        except (OSError, EOFError, zlib.error) as exc:
            # gzip reports truncated or corrupt data outside OSError.
            raise LHEFIOError(f"Failed to read from input stream: {exc}") from exc

        if isinstance(data, (bytes, bytearray)):
            if self._decoder is None:
                self._decoder = codecs.getincrementaldecoder("utf-8")()
            try:
                text = self._decoder.decode(data, final=not data)
            except UnicodeDecodeError as exc:
                raise LHEFIOError(
                    f"Input is not valid UTF-8 near offset {self._offset + len(self._buffer)}: {exc}"
                ) from exc
        else:
            text = data or ""

        if not data:
            self._eof = True
        self._buffer += text
        return bool(text) or not self._eof

    def _ensure(self, n: int) -> bool:
        """Read until *n* unconsumed characters are buffered or input ends."""
        while len(self._buffer) - self._pos < n:
            if not self._fill():
                return False
        return True

    def _find(self, needle: str, start: int) -> int:
        """Buffer index of *needle* at or after *start*, or ``-1`` at end of input."""
        while True:
            idx = self._buffer.find(needle, start)
            if idx >= 0:
                return idx
            start = max(start, len(self._buffer) - len(needle) + 1)
            if not self._fill():
                return -1

    def _compact(self) -> None:
        # Only called between markers, so buffer indices stay stable while
        # a single marker is being scanned.
        if self._pos >= self._chunk_size:
            self._offset += self._pos
            self._buffer = self._buffer[self._pos:]
            self._pos = 0

    # -- marker scanning -----------------------------------------------------

    def _scan_text(self) -> Text:
        end = self._find("<", self._pos)
        if end < 0:
            end = len(self._buffer)
        content = self._buffer[self._pos:end]
        self._pos = end
        return Text(content)

    def _scan_markup(self) -> Marker:
        start = self._pos
        self._ensure(4)
        if self._buffer.startswith("<!--", start):
            end = self._find("-->", start + 4)
            if end < 0:
                raise MalformedTagError(
                    f"Comment opened at offset {self.offset} is never closed"
                )
            self._pos = end + 3
            return Comment(self._buffer[start + 4:end])

        if self._buffer.startswith("<?", start):
            end = self._find("?>", start + 2)
            if end < 0:
                raise MalformedTagError(
                    f"Declaration opened at offset {self.offset} is never closed"
                )
            self._pos = end + 2
            return Declaration(self._buffer[start + 2:end])

        end = self._find(">", start + 1)
        if end < 0:
            raise MalformedTagError(
                f"'<' at offset {self.offset} is not closed by '>' before end of input"
            )
        inner = self._buffer[start + 1:end]
        tag_offset = self.offset
        self._pos = end + 1

        if inner.startswith("!"):
            return Declaration(inner[1:])
        if inner.startswith("/"):
            return self._close_tag(inner[1:], tag_offset)
        return self._open_tag(inner, tag_offset)

    def _close_tag(self, inner: str, tag_offset: int) -> CloseTag:
        name = inner.rstrip()
        if _TAG_NAME.fullmatch(name) is None:
            raise MalformedTagError(
                f"Invalid close tag '</{inner}>' at offset {tag_offset}"
            )
        return CloseTag(name)

    def _open_tag(self, inner: str, tag_offset: int) -> OpenTag:
        match = _TAG_NAME.match(inner)
        if match is None:
            raise MalformedTagError(
                f"Empty or invalid tag name in '<{inner}>' at offset {tag_offset}"
            )
        name = match.group()
        rest = inner[match.end():]
        if rest and not rest[0].isspace():
            raise MalformedTagError(
                f"Invalid tag name in '<{inner}>' at offset {tag_offset}"
            )

        attributes: dict[str, str] = {}
        if rest.strip():
            if name not in ATTRIBUTE_TAGS:
                raise MalformedTagError(
                    f"Attributes are not permitted on <{name}> "
                    f"(found '<{inner}>' at offset {tag_offset})"
                )
            attributes = _parse_attributes(rest, name, tag_offset)

        if name in RECORD_TAGS:
            body = self._capture_body(name, tag_offset)
            self._pending.append(Text(body))
            self._pending.append(CloseTag(name))
        return OpenTag(name, attributes)

    def _capture_body(self, name: str, tag_offset: int) -> str:
        """Consume and return everything up to the matching ``</name>``."""
        needle = "</" + name
        body_start = self._pos
        search = body_start
        while True:
            idx = self._find(needle, search)
            if idx < 0:
                raise MalformedTagError(
                    f"<{name}> opened at offset {tag_offset} is not closed "
                    f"before end of input"
                )
            after = idx + len(needle)
            gt = self._find(">", after)
            if gt < 0:
                raise MalformedTagError(
                    f"'<' at offset {self._offset + idx} is not closed by '>' "
                    f"before end of input"
                )
            tail = self._buffer[after:gt]
            if not tail.strip():
                break
            if tail[0].isspace():
                raise MalformedTagError(
                    f"Invalid close tag '</{name}{tail}>' at offset {self._offset + idx}"
                )
            # A longer name such as </events>; keep looking.
            search = idx + 1

        body = self._buffer[body_start:idx]
        self._pos = gt + 1
        logger.debug("Captured <%s> body of %d characters", name, len(body))
        return body


def _parse_attributes(text: str, name: str, tag_offset: int) -> dict[str, str]:
    attributes: dict[str, str] = {}
    pos = 0
    while text[pos:].strip():
        match = _ATTRIBUTE.match(text, pos)
        if match is None:
            raise MalformedTagError(
                f"Cannot parse attributes {text.strip()!r} of <{name}> "
                f"at offset {tag_offset}"
            )
        key, double, single = match.groups()
        attributes[key] = double if double is not None else single
        pos = match.end()
    return attributes
