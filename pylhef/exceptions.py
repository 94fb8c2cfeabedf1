#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Custom exception hierarchy for the PyLHEF package

All exceptions raised by PyLHEF inherit from :class:`LHEFError`, making it
possible to catch every library-specific error with a single ``except`` clause
while still allowing fine-grained handling when needed.

Exception Hierarchy
-------------------
::

    LHEFError
    ├── LHEFIOError                 # Underlying stream failure
    ├── ParseError                  # Malformed document content
    │   ├── MalformedTagError       # Tag grammar violation
    │   ├── MissingInitError        # Document never reaches <init>
    │   ├── NumberFormatError       # Non-numeric token in a numeric field
    │   ├── UnexpectedEndError      # Fewer tokens than the declared count
    │   └── UnsupportedVersionError # Unknown LesHouchesEvents version
    └── ReaderStateError            # Reader used after a failed event read
"""

from __future__ import annotations


class LHEFError(Exception):
    """Base exception for all PyLHEF errors

    Every exception raised by PyLHEF is a subclass of this type.
    Catching ``LHEFError`` therefore catches any library-specific failure
    while still allowing standard Python exceptions (``TypeError``, etc.)
    to propagate normally.
    """


class LHEFIOError(LHEFError):
    """Raised when the underlying input stream cannot be read

    Wraps :class:`OSError` from the stream's ``read`` method and
    :class:`UnicodeDecodeError` from decoding a byte stream.  The original
    exception is available as ``__cause__``.

    Parameters
    ----------
    message : str
        Description of the I/O failure.
    """


class ParseError(LHEFError):
    """Raised when the document content cannot be parsed

    This is the common parent of every content-level failure.  Catch it to
    distinguish a bad file from a failing stream.

    Parameters
    ----------
    message : str
        Human-readable description of the parse failure, naming the
        offending tag or record field when available.
    """


class MalformedTagError(ParseError):
    """Raised when the tag grammar is violated

    This includes an empty tag name, a ``<`` with no closing ``>`` before
    end of input, attributes on a record tag (``<event type="signal">``),
    a record element that is never closed, and tags out of the order
    ``header``, ``init``, ``event``.
    """


class MissingInitError(ParseError):
    """Raised when the document ends before an ``<init>`` element opens

    Also raised when ``<event>`` or the closing document tag is met
    before ``<init>``.
    """


class NumberFormatError(ParseError):
    """Raised when a token is not a valid literal for its numeric field

    Also covers negative process or particle counts, which are outside the
    domain of a count field.
    """


class UnexpectedEndError(ParseError):
    """Raised when a record body runs out of tokens

    The record declared (through its process or particle count) more fields
    than the body actually contains.
    """


class UnsupportedVersionError(ParseError):
    """Raised when the ``LesHouchesEvents`` tag names an unknown version

    Only the versions listed in
    :data:`~pylhef.utils.constants.SUPPORTED_VERSIONS` are accepted.
    """


class ReaderStateError(LHEFError):
    """Raised when a reader is used after a failed :meth:`next_event` call

    The stream position left behind by a failed event read is undefined,
    so the reader refuses to continue.  Construct a new reader over a fresh
    stream to read the document again.
    """
