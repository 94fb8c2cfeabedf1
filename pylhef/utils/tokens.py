#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Whitespace token stream over a single record body

A :class:`TokenStream` hands out the tokens of one element body in order
and, once the mandatory fields have been decoded, returns the untouched
rest of the body as the record's info text.  Line breaks carry no meaning:
a record's fields may be split over several lines or packed onto one.
"""

from __future__ import annotations

import re

from pylhef.exceptions import UnexpectedEndError
from pylhef.utils.parsing import parse_count, parse_float, parse_int

_TOKEN = re.compile(r"\S+")
_LEADING_SPACE = re.compile(r"\s*")


class TokenStream:
    """Forward-only cursor over the whitespace-separated tokens of a text

    Parameters
    ----------
    text : str
        Complete body of one element.  The stream keeps a reference to it
        and never copies or modifies it.

    Notes
    -----
    The cursor only moves forward.  Every element body gets its own
    stream; there is no reset.

    Examples
    --------
    >>> ts = TokenStream("2 101\\n 1.0 <rwgt/>")
    >>> ts.next_int("NUP"), ts.next_int("IDPRUP"), ts.next_float("XWGTUP")
    (2, 101, 1.0)
    >>> ts.remainder()
    '<rwgt/>'
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    @property
    def position(self) -> int:
        """Offset into the text just past the last consumed token."""
        return self._pos

    def next_token(self, field: str = "token") -> str:
        """Take the next maximal run of non-whitespace characters

        Raises
        ------
        UnexpectedEndError
            If no token is left.  The message names *field*.
        """
        match = _TOKEN.search(self._text, self._pos)
        if match is None:
            raise UnexpectedEndError(
                f"Record ended before field {field} could be read"
            )
        self._pos = match.end()
        return match.group()

    def next_int(self, field: str = "token") -> int:
        return parse_int(self.next_token(field), field)

    def next_float(self, field: str = "token") -> float:
        return parse_float(self.next_token(field), field)

    def next_count(self, field: str = "token") -> int:
        return parse_count(self.next_token(field), field)

    def remainder(self) -> str:
        """Return every character not yet consumed

        The whitespace run separating the last consumed token from the
        rest is dropped; everything after it, including interior and
        trailing whitespace, is returned exactly as written.
        """
        start = _LEADING_SPACE.match(self._text, self._pos).end()
        return self._text[start:]
