#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Numeric token conversion for LHEF record fields

Record fields are written with free-format Fortran or C I/O, so a token
may be any ordinary decimal literal.  Python's own ``int()`` and
``float()`` are more permissive than that (they accept ``1_000`` and
surrounding whitespace) and reject the Fortran double-precision exponent
marker ``D``.  The helpers here pin the accepted grammar down explicitly.

Accepted Literals
-----------------
* **Integer**: optional sign followed by one or more digits
  (``42``, ``-11``, ``+3``) whose value fits a signed 32-bit integer.
* **Float**: optional sign, a mantissa with at least one digit and an
  optional decimal point, and an optional exponent introduced by
  ``E``/``e``/``D``/``d`` (``7000.``, ``.5``, ``1.25E+03``,
  ``1.25D-03``).  ``nan``, ``inf`` and ``infinity`` in any case, with an
  optional sign, are also accepted since Fortran runtimes emit them.
"""

from __future__ import annotations

import re

from pylhef.exceptions import NumberFormatError
from pylhef.utils.constants import INT_FIELD_MAX, INT_FIELD_MIN

INT_PATTERN: re.Pattern[str] = re.compile(r"[+-]?\d+")
"""Full-match pattern for an integer token."""

FLOAT_PATTERN: re.Pattern[str] = re.compile(
    r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eEdD][+-]?\d+)?"
    r"|[+-]?(?:nan|inf|infinity)",
    re.IGNORECASE,
)
"""Full-match pattern for a floating-point token."""


def parse_int(token: str, field: str = "value") -> int:
    """Convert a token to a Python int

    Parameters
    ----------
    token : str
        A whitespace-free token taken from a record body.
    field : str, optional
        Name of the record field, used in the error message.

    Returns
    -------
    int
        The converted integer value.

    Raises
    ------
    NumberFormatError
        If *token* is not an integer literal, or its value lies outside
        the 32-bit range of a Fortran INTEGER field.

    Examples
    --------
    >>> parse_int("-11")
    -11
    >>> parse_int("2.0", "NUP")  # doctest: +ELLIPSIS
    Traceback (most recent call last):
        ...
    pylhef.exceptions.NumberFormatError: ...
    """
    if INT_PATTERN.fullmatch(token) is None:
        raise NumberFormatError(
            f"Field {field}: cannot convert {token!r} to an integer"
        )
    value = int(token)
    if not INT_FIELD_MIN <= value <= INT_FIELD_MAX:
        raise NumberFormatError(
            f"Field {field}: integer {token!r} is outside the 32-bit range"
        )
    return value


def parse_float(token: str, field: str = "value") -> float:
    """Convert a token to a Python float

    The Fortran exponent marker ``D`` is replaced by ``E`` before
    conversion.

    Parameters
    ----------
    token : str
        A whitespace-free token taken from a record body.
    field : str, optional
        Name of the record field, used in the error message.

    Returns
    -------
    float
        The converted value.

    Raises
    ------
    NumberFormatError
        If *token* is not a floating-point literal.

    Examples
    --------
    >>> parse_float("7000.")
    7000.0
    >>> parse_float("1.5D+02")
    150.0
    """
    if FLOAT_PATTERN.fullmatch(token) is None:
        raise NumberFormatError(
            f"Field {field}: cannot convert {token!r} to a float"
        )
    return float(token.replace("D", "E").replace("d", "e"))


def parse_count(token: str, field: str) -> int:
    """Convert a token to a non-negative count

    Counts fix the arity of the rest of a record, so a negative value is
    rejected rather than treated as zero.

    Raises
    ------
    NumberFormatError
        If *token* is not an integer literal or is negative.
    """
    value = parse_int(token, field)
    if value < 0:
        raise NumberFormatError(
            f"Field {field}: count must be non-negative, got {value}"
        )
    return value
