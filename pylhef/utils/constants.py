#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Format constants for Les Houches Event Files

Tag names, record arities, and reader defaults.  Field names follow the
Fortran common blocks ``HEPRUP`` (run record) and ``HEPEUP`` (event
record) of the Les Houches accord and are used in error messages so that
a failure points at the exact field of the standard.

References
----------
.. [1] E. Boos et al., "Generic user process interface for event
   generators", hep-ph/0109068.
.. [2] J. Alwall et al., "A standard format for Les Houches Event Files",
   Comput. Phys. Commun. 176 (2007) 300, hep-ph/0609017.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Tag names
# ---------------------------------------------------------------------------

DOCUMENT_TAG: str = "LesHouchesEvents"
"""Name of the optional document-level element."""

HEADER_TAG: str = "header"
INIT_TAG: str = "init"
EVENT_TAG: str = "event"

RECORD_TAGS: frozenset[str] = frozenset({HEADER_TAG, INIT_TAG, EVENT_TAG})
"""Elements whose bodies are captured verbatim as a single text span."""

ATTRIBUTE_TAGS: frozenset[str] = frozenset({DOCUMENT_TAG})
"""The only elements allowed to carry ``key="value"`` attributes."""

VERSION_ATTRIBUTE: str = "version"

SUPPORTED_VERSIONS: tuple[str, ...] = ("1.0", "2.0", "3.0")
"""Values of the ``version`` attribute accepted on the document tag."""

# ---------------------------------------------------------------------------
# Record arities
# ---------------------------------------------------------------------------

RUN_FIXED_FIELDS: int = 10
"""IDBMUP(2), EBMUP(2), PDFGUP(2), PDFSUP(2), IDWTUP, NPRUP."""

PROCESS_FIELDS: int = 4
"""XSECUP, XERRUP, XMAXUP, LPRUP per process."""

EVENT_FIXED_FIELDS: int = 6
"""NUP, IDPRUP, XWGTUP, SCALUP, AQEDUP, AQCDUP."""

PARTICLE_FIELDS: int = 13
"""IDUP, ISTUP, MOTHUP(2), ICOLUP(2), PUP(5), VTIMUP, SPINUP per particle."""

# ---------------------------------------------------------------------------
# Integer range
# ---------------------------------------------------------------------------

INT_FIELD_MIN: int = -(2**31)
"""Smallest value accepted in an integer field (Fortran INTEGER*4)."""

INT_FIELD_MAX: int = 2**31 - 1
"""Largest value accepted in an integer field (Fortran INTEGER*4)."""

# ---------------------------------------------------------------------------
# Reader defaults
# ---------------------------------------------------------------------------

DEFAULT_CHUNK_SIZE: int = 64 * 1024
"""Number of characters (or bytes) requested from the stream per read."""

GZIP_MAGIC: bytes = b"\x1f\x8b"
"""Leading bytes that identify a gzip-compressed file."""
